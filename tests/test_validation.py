import pandas as pd
import pytest

from hcdim.errors import LengthMismatchError
from hcdim.validation import validate_curve, validate_curves, validate_intervals


def test_validate_intervals_flags_expected_columns():
    df = pd.DataFrame(
        {
            "volume": [10.0, -1.0, 5.0],
            "tmi": [300.0, 0.0, 0.0],
            "tma": [40.0, 40.0, -2.0],
        }
    )

    out = validate_intervals(df)

    assert len(out) == 3

    # row 0: ok volume, ok tmi
    assert not out.loc[0, "flag_volume_negative"]
    assert not out.loc[0, "flag_tmi_nonpositive"]
    assert not out.loc[0, "flag_volume_without_tmi"]
    assert not out.loc[0, "flag_tma_negative"]

    # row 1: negative volume + nonpositive TMI
    assert out.loc[1, "flag_volume_negative"]
    assert out.loc[1, "flag_tmi_nonpositive"]
    assert not out.loc[1, "flag_volume_without_tmi"]

    # row 2: volume with no handle time, negative TMA
    assert out.loc[2, "flag_volume_without_tmi"]
    assert out.loc[2, "flag_tma_negative"]


def test_validate_intervals_missing_columns():
    with pytest.raises(ValueError):
        validate_intervals(pd.DataFrame({"volume": [1.0]}))


def test_validate_curve_rejects_negative_and_nan():
    with pytest.raises(ValueError):
        validate_curve([1.0, -2.0], "volume")
    with pytest.raises(ValueError):
        validate_curve([1.0, float("nan")], "volume")
    assert validate_curve([0, 1, 2], "volume").tolist() == [0.0, 1.0, 2.0]


def test_validate_curves_lengths():
    validate_curves([1, 2], [180, 180], [30, 30])
    with pytest.raises(LengthMismatchError):
        validate_curves([1, 2], [180])
    with pytest.raises(LengthMismatchError):
        validate_curves([1, 2], [180, 180], [30])
