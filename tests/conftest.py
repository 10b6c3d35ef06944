import pytest

from apikey_config.config import reset_settings
from apikey_config.registry import ConfigRegistry

API_KEY_ENV_VARS = (
    "API_KEY_PREFIX",
    "API_KEY_EXPIRY_DAYS",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_TO_FILE",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate every test from the caller's environment and .env file."""
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(name="registry")
def registry_fixture() -> ConfigRegistry:
    return ConfigRegistry()
