import logging

import pytest

from zoho_desk_client import config


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    # Ensure each test starts with a clean settings cache.
    config._reset_settings_cache_for_tests()
    for key in config.OPTIONAL_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    yield
    config._reset_settings_cache_for_tests()


def test_get_settings_defaults():
    settings = config.get_settings()

    assert settings["ZOHO_DESK_TIMEOUT"] == 30.0
    assert settings["ZOHO_DESK_LOG_LEVEL"] == "INFO"


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("ZOHO_DESK_TIMEOUT", "7")
    monkeypatch.setenv("ZOHO_DESK_LOG_LEVEL", "debug")

    settings = config.get_settings()

    assert settings["ZOHO_DESK_TIMEOUT"] == 7.0
    assert settings["ZOHO_DESK_LOG_LEVEL"] == "DEBUG"


def test_get_settings_is_cached(monkeypatch):
    first = config.get_settings()
    monkeypatch.setenv("ZOHO_DESK_TIMEOUT", "99")

    assert config.get_settings() is first


@pytest.mark.parametrize("key,value", [
    ("ZOHO_DESK_TIMEOUT", "soon"),
    ("ZOHO_DESK_TIMEOUT", "-1"),
    ("ZOHO_DESK_LOG_LEVEL", "chatty"),
])
def test_load_settings_rejects_invalid_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(RuntimeError) as excinfo:
        config.load_settings()

    message = str(excinfo.value)
    assert "invalid environment variables" in message.lower()
    assert key in message


def test_configure_logging_idempotent():
    # Remove any pre-existing handlers for a clean slate.
    original_handlers = list(config.logger.handlers)
    for handler in original_handlers:
        config.logger.removeHandler(handler)

    try:
        config.configure_logging()
        first_count = len(config.logger.handlers)
        # Calling configure_logging again should not add extra handlers.
        config.configure_logging()
        second_count = len(config.logger.handlers)

        assert first_count == 1
        assert second_count == first_count
        assert isinstance(config.logger.handlers[0], logging.Handler)
        assert config.logger.level == logging.INFO
    finally:
        # Restore original handlers so other modules aren't affected.
        for handler in list(config.logger.handlers):
            config.logger.removeHandler(handler)
        for handler in original_handlers:
            config.logger.addHandler(handler)
