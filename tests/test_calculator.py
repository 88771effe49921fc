import pytest

from hcdim.calculator import StaffingCalculator, summarize_distribution
from hcdim.config import Settings
from hcdim.errors import LengthMismatchError, SearchBoundExceededError
from hcdim.staffing import CalculationParameters


def _calc(**overrides) -> StaffingCalculator:
    return StaffingCalculator(Settings(**overrides))


def test_dimension_builds_distribution_and_metrics():
    calc = _calc()
    params = CalculationParameters(target_service_level=80, unproductivity_percent=10)
    res = calc.dimension([0, 100, 400, 100], [180, 180, 180, 180], params)

    assert res.hc_distribution[0] == 0
    assert res.hc_distribution[1] == 9
    assert res.metrics.total_hc == res.hc_distribution[2]
    assert res.metrics.peak_intervals == [2]
    assert res.occupancy[0] == 0.0
    assert res.traffic_erlangs[1] == 5.0
    assert res.labels == ["00:00", "00:15", "00:30", "00:45"]
    assert 0.0 <= res.metrics.max_occupancy <= 100.0


def test_dimension_frame_and_dict():
    calc = _calc(interval_minutes=30)
    params = CalculationParameters(target_service_level=80, unproductivity_percent=10)
    res = calc.dimension([100, 100], [180, 180], params, tma_curve=[30, 35])

    df = res.to_frame()
    assert list(df.columns) == [
        "interval",
        "volume",
        "tmi",
        "tma",
        "traffic",
        "required_hc",
        "occupancy",
        "asa_seconds",
        "bound_reached",
    ]
    assert df["traffic"].tolist() == [5.0, 5.0]
    assert df["interval"].tolist() == ["00:00", "00:30"]
    assert df["required_hc"].tolist() == [9, 9]

    payload = res.to_dict()
    assert payload["metrics"]["peak_intervals"] == [0, 1]
    assert payload["metrics"]["avg_hc"] == 9.0
    assert payload["calculation_params"]["intervals"] == 2


def test_dimension_rejects_mismatched_tma():
    params = CalculationParameters(target_service_level=80)
    with pytest.raises(LengthMismatchError):
        _calc().dimension([100, 100], [180, 180], params, tma_curve=[30])


def test_summary_of_empty_distribution():
    metrics = summarize_distribution([], [])
    assert metrics.total_hc == 0
    assert metrics.peak_intervals == []


def test_required_agents_uses_settings_answer_time():
    default = _calc().required_agents(100, 180, 80)
    lenient = _calc(target_answer_time_seconds=120).required_agents(100, 180, 80)
    assert default.agents == 8
    assert lenient.agents <= default.agents


def test_strict_settings_raise_on_cap():
    with pytest.raises(SearchBoundExceededError):
        _calc(strict_search=True).required_agents(100, 180, 100)


def test_calculator_passthroughs():
    calc = _calc()
    assert calc.erlang_c(6, 5.0) == pytest.approx(0.5875, abs=1e-4)
    assert calc.occupancy(5.0, 8) == pytest.approx(62.5)
    assert calc.shrinkage(100, 20).total_required == 125
    assert calc.optimize_shifts([2, 5, 3], [6, 8, 4]).total_hc == 16
    schedule = calc.weekly_schedule([4])
    assert calc.dsr_compliance(schedule).sunday_work_rate == 0.75


def test_dimension_reports_capped_intervals():
    calc = _calc()
    params = CalculationParameters(target_service_level=100)
    res = calc.dimension([0, 100, 100], [180, 180, 180], params)

    # 5 Erlangs never reach 100%: search stops at ceil(5 * 3)
    assert res.hc_distribution == [0, 15, 15]
    assert res.bound_reached == [False, True, True]
    assert res.capped_intervals == [1, 2]
    assert res.to_dict()["capped_intervals"] == [1, 2]
    assert res.to_frame()["bound_reached"].tolist() == [False, True, True]


def test_dimension_converged_intervals_are_not_capped():
    params = CalculationParameters(target_service_level=80, unproductivity_percent=10)
    res = _calc().dimension([100, 400], [180, 180], params)
    assert res.capped_intervals == []
    assert res.to_dict()["capped_intervals"] == []


def test_dimension_strict_search_raises_on_cap():
    params = CalculationParameters(target_service_level=100)
    with pytest.raises(SearchBoundExceededError) as exc:
        _calc(strict_search=True).dimension([100], [180], params)
    assert exc.value.agents == 15


def test_dimension_reports_asa_per_interval():
    params = CalculationParameters(target_service_level=80)
    res = _calc().dimension([0, 100], [180, 180], params)
    assert res.asa_seconds[0] == 0.0
    # 8 on-phone agents for 5 Erlangs
    assert 0.0 < res.asa_seconds[1] < 180.0
    assert res.to_dict()["asa_seconds"] == res.asa_seconds
