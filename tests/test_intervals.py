import pytest

from hcdim.intervals import (
    SHIFT_GROUPS,
    ShiftGroup,
    interval_label,
    interval_labels,
    intraday_time_grid,
    is_time_in_shift_group,
    minutes_to_time,
    productive_hours,
    shift_duration_minutes,
    shift_group_for_time,
    shift_unproductivity_rate,
    time_to_minutes,
)


def test_time_round_trip_examples():
    assert time_to_minutes("08:12") == 492
    assert minutes_to_time(492) == "08:12"
    assert minutes_to_time(0) == "00:00"


def test_interval_labels_for_quarter_hours():
    assert interval_label(0) == "00:00"
    assert interval_label(5) == "01:15"
    assert interval_label(95) == "23:45"
    assert interval_labels(3, 30) == ["00:00", "00:30", "01:00"]


def test_interval_label_rejects_bad_grid():
    with pytest.raises(ValueError):
        interval_label(1, 7)


def test_intraday_grid_has_96_quarter_hours():
    grid = intraday_time_grid(15)
    assert len(grid) == 96
    assert grid["time"].iloc[0] == "00:00"
    assert grid["time"].iloc[-1] == "23:45"


def test_shift_tables():
    assert shift_duration_minutes("6:20") == 380
    assert shift_duration_minutes("4:00") == 240
    assert shift_unproductivity_rate("8:12") == 0.18
    with pytest.raises(ValueError):
        shift_duration_minutes("9:00")


def test_productive_hours():
    assert productive_hours(8.0, 0.25) == 6.0


def test_shift_groups():
    assert is_time_in_shift_group("05:30", SHIFT_GROUPS["MADRUGADA"])
    assert not is_time_in_shift_group("05:45", SHIFT_GROUPS["MADRUGADA"])
    assert shift_group_for_time("13:00").name == "Tarde"
    assert shift_group_for_time("05:45") is None


def test_overnight_group_wraps():
    night = ShiftGroup("Overnight", "22:00", "06:00")
    assert is_time_in_shift_group("23:15", night)
    assert is_time_in_shift_group("02:00", night)
    assert not is_time_in_shift_group("12:00", night)
