"""
Logging setup for the status panel service.

Loggers are plain stdlib loggers; setup_logger() attaches a single console
handler to the package logger so repeated calls do not duplicate output.
"""
import logging
from typing import Dict

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "statuspanel"

_configured: Dict[str, logging.Logger] = {}


def _get_log_level(level_name: str, default_level: int = logging.INFO) -> int:
    """Convert a level name like 'DEBUG' into its logging constant."""
    level = logging.getLevelName(str(level_name).upper())
    if isinstance(level, int):
        return level
    logging.getLogger(ROOT_LOGGER_NAME).warning(
        "Invalid log level name %r, using %s",
        level_name,
        logging.getLevelName(default_level),
    )
    return default_level


def setup_logger(
    level_name: str = "INFO",
    name: str = ROOT_LOGGER_NAME,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    If the logger was already configured, only its level is updated.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_get_log_level(level_name))

    if name in _configured:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(handler)
    logger.propagate = False

    _configured[name] = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
