import logging

from statuspanel.logging_setup import setup_logger


def test_setup_logger_is_idempotent():
    first = setup_logger("DEBUG", name="statuspanel.test_idempotent")
    second = setup_logger("WARNING", name="statuspanel.test_idempotent")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.WARNING


def test_setup_logger_invalid_level_falls_back_to_info():
    logger = setup_logger("LOUD", name="statuspanel.test_invalid_level")
    assert logger.level == logging.INFO
