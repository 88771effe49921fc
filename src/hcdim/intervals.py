# src/hcdim/intervals.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, TypeAlias

import pandas as pd


ShiftDuration: TypeAlias = Literal["6:20", "8:12", "4:00"]

DEFAULT_INTERVAL_MINUTES: int = 15

# Paid shift length (minutes) and the share of it that is unproductive
SHIFT_DURATION_MINUTES: Dict[str, int] = {
    "6:20": 6 * 60 + 20,
    "8:12": 8 * 60 + 12,
    "4:00": 4 * 60,
}
SHIFT_UNPRODUCTIVITY_RATES: Dict[str, float] = {
    "6:20": 0.135,
    "8:12": 0.18,
    "4:00": 0.0871,
}


@dataclass(frozen=True)
class ShiftGroup:
    """
    A named block of the day. start_time and end_time are "HH:MM" and both
    inclusive; start > end means the group wraps past midnight.
    """
    name: str
    start_time: str
    end_time: str


SHIFT_GROUPS: Dict[str, ShiftGroup] = {
    "MADRUGADA": ShiftGroup("Madrugada", "00:00", "05:30"),
    "MANHA": ShiftGroup("Manhã", "06:00", "11:30"),
    "TARDE": ShiftGroup("Tarde", "12:00", "17:30"),
    "NOITE": ShiftGroup("Noite", "18:00", "23:30"),
}


# -----------------------------
# Time helpers
# -----------------------------
def time_to_minutes(t: str) -> int:
    hh, mm = t.split(":")
    return int(hh) * 60 + int(mm)


def minutes_to_time(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _check_interval_minutes(interval_minutes: int) -> None:
    if interval_minutes <= 0 or (1440 % interval_minutes) != 0:
        raise ValueError("interval_minutes must be > 0 and divide 1440 evenly (e.g., 5, 10, 15, 30, 60).")


def interval_label(index: int, interval_minutes: int = DEFAULT_INTERVAL_MINUTES) -> str:
    """HH:MM start of the index-th interval. Indices past one day wrap around."""
    _check_interval_minutes(interval_minutes)
    if index < 0:
        raise ValueError("index must be >= 0")
    return minutes_to_time((index * interval_minutes) % 1440)


def intraday_time_grid(interval_minutes: int = DEFAULT_INTERVAL_MINUTES) -> pd.DataFrame:
    """
    Returns a full-day HH:MM grid for the chosen interval length.
    Example: 15-min => 96 rows from 00:00..23:45
    """
    _check_interval_minutes(interval_minutes)

    times = pd.date_range("2000-01-01 00:00:00", periods=int(1440 / interval_minutes), freq=f"{interval_minutes}min")
    return pd.DataFrame({"time": times.strftime("%H:%M")})


def interval_labels(n_intervals: int, interval_minutes: int = DEFAULT_INTERVAL_MINUTES) -> List[str]:
    return [interval_label(i, interval_minutes) for i in range(n_intervals)]


# -----------------------------
# Shifts
# -----------------------------
def shift_duration_minutes(duration: str) -> int:
    try:
        return SHIFT_DURATION_MINUTES[duration]
    except KeyError:
        raise ValueError(f"Invalid shift duration: {duration}") from None


def shift_unproductivity_rate(duration: str) -> float:
    try:
        return SHIFT_UNPRODUCTIVITY_RATES[duration]
    except KeyError:
        raise ValueError(f"Invalid shift duration: {duration}") from None


def productive_hours(total_hours: float, unproductivity_rate: float) -> float:
    return total_hours * (1.0 - unproductivity_rate)


def is_time_in_shift_group(time: str, group: ShiftGroup) -> bool:
    """Both ends inclusive. Handles overnight groups (e.g., 18:00 -> 05:30)."""
    t = time_to_minutes(time)
    start_m = time_to_minutes(group.start_time)
    end_m = time_to_minutes(group.end_time)

    if start_m > end_m:
        return t >= start_m or t <= end_m
    return start_m <= t <= end_m


def shift_group_for_time(time: str) -> Optional[ShiftGroup]:
    for group in SHIFT_GROUPS.values():
        if is_time_in_shift_group(time, group):
            return group
    return None


__all__ = [
    "ShiftDuration",
    "ShiftGroup",
    "DEFAULT_INTERVAL_MINUTES",
    "SHIFT_DURATION_MINUTES",
    "SHIFT_UNPRODUCTIVITY_RATES",
    "SHIFT_GROUPS",
    "time_to_minutes",
    "minutes_to_time",
    "interval_label",
    "interval_labels",
    "intraday_time_grid",
    "shift_duration_minutes",
    "shift_unproductivity_rate",
    "productive_hours",
    "is_time_in_shift_group",
    "shift_group_for_time",
]
