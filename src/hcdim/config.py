# src/hcdim/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidConfigurationError


@dataclass(frozen=True)
class Settings:
    target_answer_time_seconds: float = 20.0
    interval_minutes: int = 15
    # Raise instead of flagging when the agent search hits its cap
    strict_search: bool = False
    log_level: str = "INFO"


_TRUE_VALUES = {"1", "true", "t", "yes", "y"}


def _env(name: str) -> Optional[str]:
    raw = os.getenv(name, "").strip()
    return raw or None


def _float_env(name: str, default: float) -> float:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{name} must be numeric, got {raw!r}") from exc


def _int_env(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings_from_env() -> Settings:
    """
    Reads settings from the process environment:
      HCDIM_TARGET_ANSWER_TIME  seconds, > 0
      HCDIM_INTERVAL_MINUTES    must divide 1440 evenly
      HCDIM_STRICT_SEARCH       1/true/yes to raise on search cap
      HCDIM_LOG_LEVEL           logging level name
    Unset variables fall back to the Settings defaults.
    """
    defaults = Settings()

    answer_time = _float_env("HCDIM_TARGET_ANSWER_TIME", defaults.target_answer_time_seconds)
    if answer_time <= 0:
        raise InvalidConfigurationError("HCDIM_TARGET_ANSWER_TIME must be > 0")

    interval_minutes = _int_env("HCDIM_INTERVAL_MINUTES", defaults.interval_minutes)
    if interval_minutes <= 0 or (1440 % interval_minutes) != 0:
        raise InvalidConfigurationError("HCDIM_INTERVAL_MINUTES must be > 0 and divide 1440 evenly")

    strict_raw = _env("HCDIM_STRICT_SEARCH")
    strict = defaults.strict_search if strict_raw is None else strict_raw.lower() in _TRUE_VALUES

    log_level = (_env("HCDIM_LOG_LEVEL") or defaults.log_level).upper()

    return Settings(
        target_answer_time_seconds=answer_time,
        interval_minutes=interval_minutes,
        strict_search=strict,
        log_level=log_level,
    )


__all__ = ["Settings", "load_settings_from_env"]
