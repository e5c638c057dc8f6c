"""Dynaform package."""

from dynaform.exceptions import (
    ConfigurationError,
    MalformedFieldError,
    PackageError,
    RuleNotFoundError,
    SettingsError,
)
from dynaform.logging import configure_logging, get_logger
from dynaform.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("dynaform")

__all__ = [
    "ConfigurationError",
    "MalformedFieldError",
    "PackageError",
    "RuleNotFoundError",
    "Settings",
    "SettingsError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
]
