"""Logging setup shared by the dimensioning modules."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import load_settings_from_env

_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure process-wide logging once. Library callers that configure logging themselves can skip this."""
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    resolved_level = (level or load_settings_from_env().log_level).upper()
    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
    _LOGGER_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the requested module (configuration is left to the application)."""
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
