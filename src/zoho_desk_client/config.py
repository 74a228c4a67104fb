import logging
import os
from typing import Any

from dotenv import load_dotenv

LOGGER_NAME = "zoho-desk-client"
logger = logging.getLogger(LOGGER_NAME)

# name -> (default, description)
OPTIONAL_ENV_VARS: dict[str, tuple[str, str]] = {
    "ZOHO_DESK_TIMEOUT": ("30", "Transport timeout in seconds"),
    "ZOHO_DESK_LOG_LEVEL": ("INFO", "Log level for the zoho-desk-client logger"),
}


def load_settings() -> dict[str, Any]:
    """Read optional environment variables, validate them and return their values."""
    raw = {
        key: os.getenv(key) or default
        for key, (default, _description) in OPTIONAL_ENV_VARS.items()
    }
    invalid: list[str] = []

    try:
        timeout = float(raw["ZOHO_DESK_TIMEOUT"])
        if timeout <= 0:
            raise ValueError(timeout)
    except ValueError:
        timeout = None
        invalid.append(f"ZOHO_DESK_TIMEOUT ({OPTIONAL_ENV_VARS['ZOHO_DESK_TIMEOUT'][1]}, got {raw['ZOHO_DESK_TIMEOUT']!r})")

    level = raw["ZOHO_DESK_LOG_LEVEL"].upper()
    if not isinstance(logging.getLevelName(level), int):
        invalid.append(f"ZOHO_DESK_LOG_LEVEL ({OPTIONAL_ENV_VARS['ZOHO_DESK_LOG_LEVEL'][1]}, got {raw['ZOHO_DESK_LOG_LEVEL']!r})")

    if invalid:
        detail = ", ".join(invalid)
        raise RuntimeError(
            f"Invalid environment variables: {detail}. "
            "Fix .env or the exported values before using the client."
        )

    return {
        "ZOHO_DESK_TIMEOUT": timeout,
        "ZOHO_DESK_LOG_LEVEL": level,
    }


load_dotenv()
_settings_cache: dict[str, Any] | None = None


def get_settings() -> dict[str, Any]:
    """Return cached settings, loading them on first use."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


def _reset_settings_cache_for_tests() -> None:
    """Clear cached settings; intended for use in unit tests."""
    global _settings_cache
    _settings_cache = None


def configure_logging() -> None:
    """Configure package logging without overriding host configuration."""
    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    logger.setLevel(get_settings()["ZOHO_DESK_LOG_LEVEL"])
    logger.propagate = False
