from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .errors import LengthMismatchError


REQUIRED_INTERVAL_COLUMNS = {"volume", "tmi"}


def validate_curve(values: Sequence[float], name: str) -> np.ndarray:
    """Returns the curve as a float array. Values must be finite and >= 0."""
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} curve must be one-dimensional")
    if not np.isfinite(arr).all():
        bad = np.where(~np.isfinite(arr))[0].tolist()[:10]
        raise ValueError(f"{name} curve has non-finite values. Example bad intervals: {bad}")
    if (arr < 0).any():
        bad = np.where(arr < 0)[0].tolist()[:10]
        raise ValueError(f"{name} curve must be nonnegative. Example bad intervals: {bad}")
    return arr


def validate_curves(
    volume_curve: Sequence[float],
    tmi_curve: Sequence[float],
    tma_curve: Optional[Sequence[float]] = None,
) -> None:
    """Checks each curve and that all supplied curves share one length."""
    lengths = {"volume": len(volume_curve), "tmi": len(tmi_curve)}
    if tma_curve is not None:
        lengths["tma"] = len(tma_curve)

    if len(set(lengths.values())) > 1:
        raise LengthMismatchError(f"Curves must have the same length: {lengths}")

    validate_curve(volume_curve, "volume")
    validate_curve(tmi_curve, "tmi")
    if tma_curve is not None:
        validate_curve(tma_curve, "tma")


def validate_intervals(df: pd.DataFrame) -> pd.DataFrame:
    """
    Returns a copy of df with per-row quality flags:
      flag_volume_negative
      flag_tmi_nonpositive
      flag_volume_without_tmi   volume > 0 but TMI <= 0 (interval silently staffs 0)
      flag_tma_negative         only when a tma column is present
    """
    missing = REQUIRED_INTERVAL_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(
            f"Interval dataframe missing required columns: {sorted(missing)}. "
            f"Expected: {sorted(REQUIRED_INTERVAL_COLUMNS)}"
        )

    out = df.copy()
    vol = pd.to_numeric(out["volume"], errors="coerce")
    tmi = pd.to_numeric(out["tmi"], errors="coerce")

    if vol.isna().any():
        raise ValueError("volume must be numeric")
    if tmi.isna().any():
        raise ValueError("tmi must be numeric")

    out["flag_volume_negative"] = vol < 0
    out["flag_tmi_nonpositive"] = tmi <= 0
    out["flag_volume_without_tmi"] = (vol > 0) & (tmi <= 0)

    if "tma" in out.columns:
        tma = pd.to_numeric(out["tma"], errors="coerce")
        out["flag_tma_negative"] = tma.fillna(0.0) < 0

    return out


__all__ = [
    "REQUIRED_INTERVAL_COLUMNS",
    "validate_curve",
    "validate_curves",
    "validate_intervals",
]
