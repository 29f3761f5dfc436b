"""
Settings Management

Loads and validates stylekit's runtime settings from the environment
(and a .env file when present). Only entry points such as the CLI read
settings; the mixins themselves take everything they need as arguments.

Usage:
    from stylekit.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file, settings.json_logs)

Environment:
    STYLEKIT_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: WARNING)
    STYLEKIT_LOG_JSON: "true"/"false" (default: false)
    STYLEKIT_LOG_FILE: optional path for JSON log output

Raises:
    SettingsError: If a setting is invalid
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from stylekit.core.logging_config import get_logger
from stylekit.utils.error_handling import log_and_return_default

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class SettingsError(Exception):
    """Raised when settings are missing or invalid."""

    pass


@dataclass
class StyleKitSettings:
    """
    Validated stylekit settings.
    """

    log_level: str = "WARNING"
    json_logs: bool = False
    log_file: Path | None = None

    def __post_init__(self):
        """Validate settings after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate settings.

        Raises:
            SettingsError: If the log level is unknown
        """
        self.log_level = (self.log_level or "").upper()
        if self.log_level not in LOG_LEVELS:
            raise SettingsError(f"STYLEKIT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: {self.log_level!r}")


def parse_bool(raw: str | None) -> bool:
    """
    Parse an environment flag.

    Raises:
        ValueError: If the value is not a recognised boolean
    """
    value = (raw or "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def load_settings(env_file: str | Path | None = None) -> StyleKitSettings:
    """
    Build settings from the environment.

    Args:
        env_file: Optional .env path (default: search from the working directory)

    Returns:
        StyleKitSettings: Validated settings
    """
    load_dotenv(env_file)

    raw_json = os.getenv("STYLEKIT_LOG_JSON")
    try:
        json_logs = parse_bool(raw_json)
    except ValueError as e:
        json_logs = log_and_return_default(
            logger,
            e,
            context={"variable": "STYLEKIT_LOG_JSON", "value": raw_json},
            default_value=False,
            error_type="Settings parsing",
        )

    log_file = os.getenv("STYLEKIT_LOG_FILE")

    return StyleKitSettings(
        log_level=os.getenv("STYLEKIT_LOG_LEVEL", "WARNING"),
        json_logs=json_logs,
        log_file=Path(log_file) if log_file else None,
    )


# Global settings instance
_settings: StyleKitSettings | None = None


def get_settings() -> StyleKitSettings:
    """
    Get the global settings instance (singleton pattern).

    Returns:
        StyleKitSettings: The settings
    """
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
