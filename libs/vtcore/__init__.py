"""Shared runtime plumbing: settings, logging and tracing."""

__version__ = "0.1.0"

from .config import Settings, get_settings
from .logging import (
    ENGINE_LOGGERS,
    JsonFormatter,
    get_logger,
    setup_logging,
    setup_tracing,
    traced,
)

__all__ = [
    "Settings",
    "get_settings",
    "ENGINE_LOGGERS",
    "JsonFormatter",
    "get_logger",
    "setup_logging",
    "setup_tracing",
    "traced",
]
