# src/hcdim/__init__.py
from __future__ import annotations

# -----------------------------
# Erlang-C / staffing core
# -----------------------------
from .erlangc import (
    offered_load_erlangs,
    erlang_b_blocking,
    erlang_c_probability_of_wait,
    service_level_erlang_c,
    asa_erlang_c,
)

from .staffing import (
    CalculationParameters,
    AgentSearchResult,
    IntervalNeed,
    ShrinkageSplit,
    solve_required_agents,
    calculate_required_agents,
    solve_hc_need,
    calculate_hc_need,
    solve_hc_distribution,
    calculate_hc_distribution,
    calculate_occupancy,
    calculate_shrinkage,
)

# -----------------------------
# Shifts / weekly rest
# -----------------------------
from .schedule import (
    ShiftConstraints,
    ShiftAllocation,
    DSRConstraints,
    DSRComplianceResult,
    optimize_shift_distribution,
    shift_recommendations,
    generate_weekly_schedule,
    calculate_dsr_compliance,
)

# -----------------------------
# Service object + support
# -----------------------------
from .calculator import DimensioningResult, StaffingCalculator
from .config import Settings, load_settings_from_env
from .errors import (
    HCDimError,
    InvalidConfigurationError,
    LengthMismatchError,
    SearchBoundExceededError,
)

__all__ = [
    # Erlang-C
    "offered_load_erlangs",
    "erlang_b_blocking",
    "erlang_c_probability_of_wait",
    "service_level_erlang_c",
    "asa_erlang_c",
    # Staffing
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
    # Shifts / DSR
    "ShiftConstraints",
    "ShiftAllocation",
    "DSRConstraints",
    "DSRComplianceResult",
    "optimize_shift_distribution",
    "shift_recommendations",
    "generate_weekly_schedule",
    "calculate_dsr_compliance",
    # Service object
    "DimensioningResult",
    "StaffingCalculator",
    # Config / errors
    "Settings",
    "load_settings_from_env",
    "HCDimError",
    "InvalidConfigurationError",
    "LengthMismatchError",
    "SearchBoundExceededError",
]
