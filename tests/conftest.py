import pytest

from statuspanel.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    # get_settings() is memoised; every test sees its own environment
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
