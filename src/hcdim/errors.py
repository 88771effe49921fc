# src/hcdim/errors.py
from __future__ import annotations


class HCDimError(ValueError):
    """Base class for dimensioning errors. Subclasses ValueError so callers can catch either."""


class InvalidConfigurationError(HCDimError):
    """A business configuration value is out of range (e.g. unproductivity >= 100%)."""


class LengthMismatchError(HCDimError):
    """Curves or schedule rows that must align have different lengths."""


class SearchBoundExceededError(HCDimError):
    """The agent search hit its safety cap without meeting the target service level."""

    def __init__(self, message: str, *, agents: int, achieved_service_level: float) -> None:
        super().__init__(message)
        self.agents = agents
        self.achieved_service_level = achieved_service_level


__all__ = [
    "HCDimError",
    "InvalidConfigurationError",
    "LengthMismatchError",
    "SearchBoundExceededError",
]
