# src/hcdim/staffing.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from .erlangc import offered_load_erlangs, service_level_erlang_c
from .errors import InvalidConfigurationError, LengthMismatchError, SearchBoundExceededError
from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_TARGET_ANSWER_TIME_SECONDS: float = 20.0

# Agent search never looks at or beyond traffic * SEARCH_CAP_MULTIPLIER
SEARCH_CAP_MULTIPLIER: float = 3.0


# -----------------------------
# Data models
# -----------------------------
@dataclass(frozen=True)
class CalculationParameters:
    target_service_level: float
    unproductivity_percent: float = 0.0
    target_answer_time_seconds: float = DEFAULT_TARGET_ANSWER_TIME_SECONDS

    def validate(self) -> None:
        if not (0.0 <= self.target_service_level <= 100.0):
            raise InvalidConfigurationError("target_service_level must be between 0 and 100")
        if self.target_answer_time_seconds < 0:
            raise InvalidConfigurationError("target_answer_time_seconds must be >= 0")
        _validate_unproductivity(self.unproductivity_percent)


@dataclass(frozen=True)
class AgentSearchResult:
    agents: int
    traffic_erlangs: float
    achieved_service_level: float  # percent
    bound_reached: bool


@dataclass(frozen=True)
class IntervalNeed:
    hc: int  # shrinkage-adjusted
    search: AgentSearchResult


@dataclass(frozen=True)
class ShrinkageSplit:
    productive_hc: int
    unproductive_hc: int
    total_required: int


# -----------------------------
# Internal helpers
# -----------------------------
def _validate_unproductivity(percent: float) -> None:
    if not (0.0 <= float(percent) < 100.0):
        raise InvalidConfigurationError(f"unproductivity percentage must be in [0, 100), got {percent}")


def _service_level_percent(agents: int, traffic: float, aht_seconds: float, answer_time: float) -> float:
    return service_level_erlang_c(agents, traffic, aht_seconds, answer_time) * 100.0


def _zero_search_result() -> AgentSearchResult:
    return AgentSearchResult(agents=0, traffic_erlangs=0.0, achieved_service_level=100.0, bound_reached=False)


# -----------------------------
# Public API
# -----------------------------
def solve_required_agents(
    volume: float,
    aht_seconds: float,
    target_service_level: float,
    target_answer_time_seconds: float = DEFAULT_TARGET_ANSWER_TIME_SECONDS,
    *,
    strict: bool = False,
) -> AgentSearchResult:
    """
    Find the minimum N such that service level (percent) >= target_service_level.

    volume is contacts per hour, so traffic = volume * aht / 3600.
    Candidates run from ceil(traffic) while N < traffic * 3. If none meets
    the target, the cap value is returned with bound_reached=True (or
    SearchBoundExceededError when strict=True).

    Service level is monotonic in N, so the range is binary searched.
    """
    if volume <= 0 or aht_seconds <= 0:
        return _zero_search_result()

    a = offered_load_erlangs(volume, aht_seconds)
    T = float(target_answer_time_seconds)
    target = float(target_service_level)

    def meets(n: int) -> bool:
        return _service_level_percent(n, a, aht_seconds, T) >= target

    low = int(math.ceil(a))
    cap = int(math.ceil(a * SEARCH_CAP_MULTIPLIER))  # first N outside the search

    if low < cap and meets(cap - 1):
        lo, hi = low, cap - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if meets(mid):
                hi = mid
            else:
                lo = mid + 1
        n = int(lo)
        logger.debug("required agents: traffic=%.4f target=%.2f -> %d", a, target, n)
        return AgentSearchResult(
            agents=n,
            traffic_erlangs=a,
            achieved_service_level=_service_level_percent(n, a, aht_seconds, T),
            bound_reached=False,
        )

    n = max(low, cap)
    sl = _service_level_percent(n, a, aht_seconds, T)
    if sl >= target:
        # Empty search range, but the fallback value already meets the target
        return AgentSearchResult(agents=n, traffic_erlangs=a, achieved_service_level=sl, bound_reached=False)

    message = (
        f"Agent search cap reached: traffic={a:.4f} Erlangs, target={target:.2f}%, "
        f"returning {n} agents at {sl:.2f}% service level"
    )
    if strict:
        raise SearchBoundExceededError(message, agents=n, achieved_service_level=sl)
    logger.warning(message)
    return AgentSearchResult(agents=n, traffic_erlangs=a, achieved_service_level=sl, bound_reached=True)


def calculate_required_agents(
    volume: float,
    aht_seconds: float,
    target_service_level: float,
    target_answer_time_seconds: float = DEFAULT_TARGET_ANSWER_TIME_SECONDS,
) -> int:
    """Minimum on-phone agents for the target service level (see solve_required_agents)."""
    return solve_required_agents(volume, aht_seconds, target_service_level, target_answer_time_seconds).agents


def solve_hc_need(
    volume: float,
    tmi: float,
    target_sla: float,
    unproductivity: float,
    target_answer_time_seconds: float = DEFAULT_TARGET_ANSWER_TIME_SECONDS,
    *,
    strict: bool = False,
) -> IntervalNeed:
    """Like calculate_hc_need, but keeps the agent search outcome next to the headcount."""
    _validate_unproductivity(unproductivity)
    if volume <= 0 or tmi <= 0:
        return IntervalNeed(hc=0, search=_zero_search_result())

    search = solve_required_agents(volume, tmi, target_sla, target_answer_time_seconds, strict=strict)
    adjusted = search.agents / ((100.0 - float(unproductivity)) / 100.0)
    return IntervalNeed(hc=int(math.ceil(adjusted)), search=search)


def calculate_hc_need(
    volume: float,
    tmi: float,
    target_sla: float,
    unproductivity: float,
    target_answer_time_seconds: float = DEFAULT_TARGET_ANSWER_TIME_SECONDS,
) -> int:
    """
    Shrinkage-adjusted headcount for one interval:
      ceil(required_agents / (1 - unproductivity/100))
    """
    return solve_hc_need(volume, tmi, target_sla, unproductivity, target_answer_time_seconds).hc


def solve_hc_distribution(
    volume_curve: Sequence[float],
    tmi_curve: Sequence[float],
    target_sla: float,
    unproductivity: float,
    target_answer_time_seconds: float = DEFAULT_TARGET_ANSWER_TIME_SECONDS,
    *,
    strict: bool = False,
) -> List[IntervalNeed]:
    """Applies solve_hc_need interval by interval. Curves must be the same length."""
    if len(volume_curve) != len(tmi_curve):
        raise LengthMismatchError(
            f"Volume and TMI curves must have the same length "
            f"(volume={len(volume_curve)}, tmi={len(tmi_curve)})"
        )
    _validate_unproductivity(unproductivity)

    return [
        solve_hc_need(float(v), float(t), target_sla, unproductivity, target_answer_time_seconds, strict=strict)
        for v, t in zip(volume_curve, tmi_curve)
    ]


def calculate_hc_distribution(
    volume_curve: Sequence[float],
    tmi_curve: Sequence[float],
    target_sla: float,
    unproductivity: float,
    target_answer_time_seconds: float = DEFAULT_TARGET_ANSWER_TIME_SECONDS,
) -> List[int]:
    """Per-interval headcount only (see solve_hc_distribution)."""
    needs = solve_hc_distribution(volume_curve, tmi_curve, target_sla, unproductivity, target_answer_time_seconds)
    return [need.hc for need in needs]


def calculate_occupancy(traffic: float, agents: float) -> float:
    """
    Occupancy percent = traffic / agents * 100, capped at 100.
    The cap is an operational ceiling: an under-staffed interval reports 100%.
    """
    if agents <= 0:
        return 0.0
    return min((float(traffic) / float(agents)) * 100.0, 100.0)


def calculate_shrinkage(base_hc: int, shrinkage_percentage: float) -> ShrinkageSplit:
    """
    Splits an existing headcount into productive/unproductive parts and
    reports the gross headcount needed to keep base_hc productive.
    """
    _validate_unproductivity(shrinkage_percentage)
    factor = (100.0 - float(shrinkage_percentage)) / 100.0

    productive = int(math.floor(base_hc * factor))
    return ShrinkageSplit(
        productive_hc=productive,
        unproductive_hc=int(base_hc - productive),
        total_required=int(math.ceil(base_hc / factor)),
    )


def search_result_to_dict(result: AgentSearchResult) -> Dict[str, Any]:
    return {
        "agents": result.agents,
        "erlangs": result.traffic_erlangs,
        "service_level": result.achieved_service_level,
        "bound_reached": result.bound_reached,
    }


def shrinkage_to_dict(split: ShrinkageSplit) -> Dict[str, Any]:
    return {
        "productive_hc": split.productive_hc,
        "unproductive_hc": split.unproductive_hc,
        "total_required": split.total_required,
    }


__all__ = [
    "DEFAULT_TARGET_ANSWER_TIME_SECONDS",
    "SEARCH_CAP_MULTIPLIER",
    "CalculationParameters",
    "AgentSearchResult",
    "IntervalNeed",
    "ShrinkageSplit",
    "solve_required_agents",
    "calculate_required_agents",
    "solve_hc_need",
    "calculate_hc_need",
    "solve_hc_distribution",
    "calculate_hc_distribution",
    "calculate_occupancy",
    "calculate_shrinkage",
    "search_result_to_dict",
    "shrinkage_to_dict",
]
