# src/hcdim/calculator.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .config import Settings, load_settings_from_env
from .erlangc import asa_erlang_c, erlang_c_probability_of_wait, offered_load_erlangs
from .intervals import interval_labels
from .logger import get_logger
from .schedule import (
    DSRComplianceResult,
    DSRConstraints,
    ShiftAllocation,
    ShiftConstraints,
    calculate_dsr_compliance,
    generate_weekly_schedule,
    optimize_shift_distribution,
)
from .staffing import (
    AgentSearchResult,
    CalculationParameters,
    ShrinkageSplit,
    calculate_hc_distribution,
    calculate_hc_need,
    calculate_occupancy,
    calculate_shrinkage,
    solve_hc_distribution,
    solve_required_agents,
)
from .validation import validate_curves

logger = get_logger(__name__)


# -----------------------------
# Result models
# -----------------------------
@dataclass(frozen=True)
class DimensioningMetrics:
    total_hc: int  # peak interval requirement
    avg_hc: float
    peak_intervals: List[int]
    avg_occupancy: float
    max_occupancy: float


@dataclass(frozen=True)
class DimensioningResult:
    hc_distribution: List[int]
    occupancy: List[float]
    traffic_erlangs: List[float]
    metrics: DimensioningMetrics
    params: CalculationParameters
    volume_curve: List[float]
    tmi_curve: List[float]
    tma_curve: Optional[List[float]] = None
    interval_minutes: int = 15
    labels: List[str] = field(default_factory=list)
    # Per interval: search hit its cap below target, and mean wait on the on-phone agents
    bound_reached: List[bool] = field(default_factory=list)
    asa_seconds: List[float] = field(default_factory=list)

    @property
    def capped_intervals(self) -> List[int]:
        return [i for i, capped in enumerate(self.bound_reached) if capped]

    def to_frame(self) -> pd.DataFrame:
        """One row per interval; tma is included only when a TMA curve was supplied."""
        df = pd.DataFrame(
            {
                "interval": self.labels,
                "volume": self.volume_curve,
                "tmi": self.tmi_curve,
            }
        )
        if self.tma_curve is not None:
            df["tma"] = self.tma_curve
        df["traffic"] = self.traffic_erlangs
        df["required_hc"] = self.hc_distribution
        df["occupancy"] = self.occupancy
        df["asa_seconds"] = self.asa_seconds
        df["bound_reached"] = self.bound_reached
        return df

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hc_distribution": list(self.hc_distribution),
            "metrics": {
                "total_hc": self.metrics.total_hc,
                "avg_hc": self.metrics.avg_hc,
                "peak_intervals": list(self.metrics.peak_intervals),
                "avg_occupancy": self.metrics.avg_occupancy,
                "max_occupancy": self.metrics.max_occupancy,
            },
            "occupancy": list(self.occupancy),
            "asa_seconds": [a if np.isfinite(a) else None for a in self.asa_seconds],
            "capped_intervals": self.capped_intervals,
            "calculation_params": {
                "target_sla": self.params.target_service_level,
                "unproductivity": self.params.unproductivity_percent,
                "target_answer_time_seconds": self.params.target_answer_time_seconds,
                "intervals": len(self.hc_distribution),
            },
        }


def summarize_distribution(hc_distribution: Sequence[int], occupancy: Sequence[float]) -> DimensioningMetrics:
    """Peak/average HC and occupancy aggregates. Empty curves give zeros."""
    hc = np.asarray(hc_distribution, dtype=int)
    occ = np.asarray(occupancy, dtype=float)

    if hc.size == 0:
        return DimensioningMetrics(total_hc=0, avg_hc=0.0, peak_intervals=[], avg_occupancy=0.0, max_occupancy=0.0)

    peak = int(hc.max())
    return DimensioningMetrics(
        total_hc=peak,
        avg_hc=round(float(hc.mean()), 2),
        peak_intervals=np.flatnonzero(hc == peak).tolist(),
        avg_occupancy=float(occ.mean()),
        max_occupancy=float(occ.max()),
    )


# -----------------------------
# Service object
# -----------------------------
class StaffingCalculator:
    """
    Stateless facade over the dimensioning functions.

    Settings only supply defaults (answer time, interval length, strict
    search); every call is independent and safe to share across threads.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings if settings is not None else load_settings_from_env()

    def _answer_time(self, target_answer_time_seconds: Optional[float]) -> float:
        if target_answer_time_seconds is None:
            return self.settings.target_answer_time_seconds
        return float(target_answer_time_seconds)

    def erlang_c(self, agents: int, traffic: float) -> float:
        return erlang_c_probability_of_wait(agents, traffic)

    def required_agents(
        self,
        volume: float,
        aht_seconds: float,
        target_service_level: float,
        target_answer_time_seconds: Optional[float] = None,
    ) -> AgentSearchResult:
        return solve_required_agents(
            volume,
            aht_seconds,
            target_service_level,
            self._answer_time(target_answer_time_seconds),
            strict=self.settings.strict_search,
        )

    def hc_need(self, volume: float, tmi: float, params: CalculationParameters) -> int:
        params.validate()
        return calculate_hc_need(
            volume,
            tmi,
            params.target_service_level,
            params.unproductivity_percent,
            params.target_answer_time_seconds,
        )

    def hc_distribution(
        self,
        volume_curve: Sequence[float],
        tmi_curve: Sequence[float],
        params: CalculationParameters,
    ) -> List[int]:
        params.validate()
        return calculate_hc_distribution(
            volume_curve,
            tmi_curve,
            params.target_service_level,
            params.unproductivity_percent,
            params.target_answer_time_seconds,
        )

    def occupancy(self, traffic: float, agents: float) -> float:
        return calculate_occupancy(traffic, agents)

    def shrinkage(self, base_hc: int, shrinkage_percentage: float) -> ShrinkageSplit:
        return calculate_shrinkage(base_hc, shrinkage_percentage)

    def optimize_shifts(
        self,
        hourly_needs: Sequence[int],
        shift_durations: Sequence[float],
        constraints: Optional[ShiftConstraints] = None,
    ) -> ShiftAllocation:
        return optimize_shift_distribution(hourly_needs, shift_durations, constraints or ShiftConstraints())

    def weekly_schedule(
        self,
        hc_distribution: Sequence[int],
        constraints: Optional[DSRConstraints] = None,
    ) -> List[List[bool]]:
        return generate_weekly_schedule(hc_distribution, constraints or DSRConstraints())

    def dsr_compliance(
        self,
        weekly_schedule: Sequence[Sequence[bool]],
        constraints: Optional[DSRConstraints] = None,
    ) -> DSRComplianceResult:
        return calculate_dsr_compliance(weekly_schedule, constraints or DSRConstraints())

    def dimension(
        self,
        volume_curve: Sequence[float],
        tmi_curve: Sequence[float],
        params: CalculationParameters,
        tma_curve: Optional[Sequence[float]] = None,
    ) -> DimensioningResult:
        """
        HC distribution for a day of curves plus per-interval occupancy and
        summary metrics. The TMA curve is length-checked and echoed back but
        does not enter the staffing math.

        Intervals whose agent search hit its cap are listed in
        capped_intervals; with strict_search the first one raises
        SearchBoundExceededError instead.
        """
        validate_curves(volume_curve, tmi_curve, tma_curve)
        params.validate()
        needs = solve_hc_distribution(
            volume_curve,
            tmi_curve,
            params.target_service_level,
            params.unproductivity_percent,
            params.target_answer_time_seconds,
            strict=self.settings.strict_search,
        )
        hc = [need.hc for need in needs]

        traffic = [offered_load_erlangs(float(v), float(t)) for v, t in zip(volume_curve, tmi_curve)]
        asa = [
            asa_erlang_c(need.search.agents, need.search.traffic_erlangs, float(t))
            for need, t in zip(needs, tmi_curve)
        ]
        occupancy = [calculate_occupancy(a, n) for a, n in zip(traffic, hc)]
        metrics = summarize_distribution(hc, occupancy)

        logger.info(
            "dimensioned %d intervals: peak_hc=%d avg_hc=%.2f capped=%d",
            len(hc),
            metrics.total_hc,
            metrics.avg_hc,
            sum(1 for need in needs if need.search.bound_reached),
        )

        return DimensioningResult(
            hc_distribution=hc,
            occupancy=occupancy,
            traffic_erlangs=traffic,
            metrics=metrics,
            params=params,
            volume_curve=[float(v) for v in volume_curve],
            tmi_curve=[float(t) for t in tmi_curve],
            tma_curve=[float(t) for t in tma_curve] if tma_curve is not None else None,
            interval_minutes=self.settings.interval_minutes,
            labels=interval_labels(len(hc), self.settings.interval_minutes),
            bound_reached=[need.search.bound_reached for need in needs],
            asa_seconds=asa,
        )


__all__ = [
    "DimensioningMetrics",
    "DimensioningResult",
    "StaffingCalculator",
    "summarize_distribution",
]
