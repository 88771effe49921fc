# src/hcdim/schedule.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .errors import InvalidConfigurationError, LengthMismatchError
from .logger import get_logger

logger = get_logger(__name__)

DAYS_IN_WEEK: int = 7
SUNDAY: int = 0

# Baseline shift length the overtime estimate is measured against
REFERENCE_SHIFT_HOURS: float = 8.0

# Overtime below this share of total HC counts as cost-efficient
COST_EFFICIENT_OVERTIME_RATIO: float = 0.1


# -----------------------------
# Data models
# -----------------------------
@dataclass(frozen=True)
class ShiftConstraints:
    min_sunday_work: float = 0.75
    max_overtime_ratio: float = 0.1


@dataclass(frozen=True)
class ShiftAllocation:
    shift_allocations: List[int]
    total_hc: int
    overtime_hours: float


@dataclass(frozen=True)
class DSRConstraints:
    min_sunday_work: float = 0.75  # fraction of employees working Sunday
    max_weekly_days: int = 6


@dataclass(frozen=True)
class DSRComplianceResult:
    compliant: bool
    sunday_work_rate: float
    avg_weekly_days: float
    violations: List[str] = field(default_factory=list)


# -----------------------------
# Shift allocation (proportional heuristic)
# -----------------------------
def optimize_shift_distribution(
    hourly_needs: Sequence[int],
    shift_durations: Sequence[float],
    constraints: ShiftConstraints,
) -> ShiftAllocation:
    """
    Proportional shift allocation keyed off the single peak need.

      peak = max(hourly_needs)
      avg = mean(shift_durations)
      allocation[i] = ceil(peak * shift_durations[i] / avg)
      overtime = max(0, total * avg - peak * 8)

    This is not an optimizer: the shape of the hourly curve is ignored and
    constraints are carried for the caller only. Coverage of every hour is
    not guaranteed.
    """
    if len(shift_durations) == 0:
        raise InvalidConfigurationError("shift_durations must not be empty")
    if any(float(d) <= 0 for d in shift_durations):
        raise InvalidConfigurationError("shift_durations must all be > 0")

    peak = max((float(n) for n in hourly_needs), default=0.0)
    avg_duration = sum(float(d) for d in shift_durations) / len(shift_durations)

    allocations = [int(math.ceil(peak * float(d) / avg_duration)) for d in shift_durations]
    total_hc = sum(allocations)
    overtime = max(0.0, total_hc * avg_duration - peak * REFERENCE_SHIFT_HOURS)

    logger.debug(
        "shift allocation: peak=%s avg_duration=%.2f allocations=%s overtime=%.2f (constraints=%s)",
        peak,
        avg_duration,
        allocations,
        overtime,
        constraints,
    )
    return ShiftAllocation(shift_allocations=allocations, total_hc=total_hc, overtime_hours=overtime)


def shift_recommendations(allocation: ShiftAllocation) -> Dict[str, Any]:
    return {
        "total_hc": allocation.total_hc,
        "overtime_hours": allocation.overtime_hours,
        "cost_efficient": allocation.overtime_hours < allocation.total_hc * COST_EFFICIENT_OVERTIME_RATIO,
        "shift_balanced": all(a > 0 for a in allocation.shift_allocations),
    }


# -----------------------------
# Weekly schedule + DSR
# -----------------------------
def generate_weekly_schedule(hc_distribution: Sequence[int], constraints: DSRConstraints) -> List[List[bool]]:
    """
    Basic weekly rotation for max(hc_distribution) employees.

    Employee e works Sunday iff e < floor(employees * min_sunday_work), and
    works day d (Mon..Sat) iff (e + d) % 7 < max_weekly_days. The rotation
    does not cap total days, so check it with calculate_dsr_compliance.
    """
    employees = max((int(h) for h in hc_distribution), default=0)
    sunday_quota = int(math.floor(employees * float(constraints.min_sunday_work)))

    schedule: List[List[bool]] = []
    for emp in range(employees):
        week = [emp < sunday_quota]
        week.extend((emp + day) % DAYS_IN_WEEK < constraints.max_weekly_days for day in range(1, DAYS_IN_WEEK))
        schedule.append(week)
    return schedule


def calculate_dsr_compliance(
    weekly_schedule: Sequence[Sequence[bool]],
    constraints: DSRConstraints,
) -> DSRComplianceResult:
    """
    Weekly paid rest (DSR) check over an employee x day grid (day 0 = Sunday).

    Violations:
      - an employee works more than max_weekly_days
      - the share of employees working Sunday is below min_sunday_work
    """
    violations: List[str] = []
    total_employees = len(weekly_schedule)
    sunday_workers = 0
    total_weekly_days = 0

    for emp_index, week in enumerate(weekly_schedule):
        if len(week) != DAYS_IN_WEEK:
            raise LengthMismatchError(
                f"Employee {emp_index} schedule has {len(week)} days (expected {DAYS_IN_WEEK})"
            )

        if week[SUNDAY]:
            sunday_workers += 1

        working_days = sum(1 for d in week if d)
        total_weekly_days += working_days

        if working_days > constraints.max_weekly_days:
            violations.append(
                f"Employee {emp_index} works {working_days} days (max: {constraints.max_weekly_days})"
            )

    sunday_rate = sunday_workers / total_employees if total_employees > 0 else 0.0
    avg_days = total_weekly_days / total_employees if total_employees > 0 else 0.0

    if sunday_rate < constraints.min_sunday_work:
        violations.append(
            f"Sunday work rate {sunday_rate * 100:.1f}% below minimum {constraints.min_sunday_work * 100:g}%"
        )

    return DSRComplianceResult(
        compliant=len(violations) == 0,
        sunday_work_rate=float(sunday_rate),
        avg_weekly_days=float(avg_days),
        violations=violations,
    )


def allocation_to_dict(allocation: ShiftAllocation) -> Dict[str, Any]:
    return {
        "shift_allocations": list(allocation.shift_allocations),
        "total_hc": allocation.total_hc,
        "overtime_hours": allocation.overtime_hours,
    }


def compliance_to_dict(result: DSRComplianceResult) -> Dict[str, Any]:
    return {
        "compliant": result.compliant,
        "sunday_work_rate": result.sunday_work_rate,
        "avg_weekly_days": result.avg_weekly_days,
        "violations": list(result.violations),
    }


__all__ = [
    "DAYS_IN_WEEK",
    "REFERENCE_SHIFT_HOURS",
    "COST_EFFICIENT_OVERTIME_RATIO",
    "ShiftConstraints",
    "ShiftAllocation",
    "DSRConstraints",
    "DSRComplianceResult",
    "optimize_shift_distribution",
    "shift_recommendations",
    "generate_weekly_schedule",
    "calculate_dsr_compliance",
    "allocation_to_dict",
    "compliance_to_dict",
]
