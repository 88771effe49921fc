import pytest

from hcdim.config import Settings, load_settings_from_env
from hcdim.errors import InvalidConfigurationError


def test_defaults_when_env_is_empty(monkeypatch):
    for name in ["HCDIM_TARGET_ANSWER_TIME", "HCDIM_INTERVAL_MINUTES", "HCDIM_STRICT_SEARCH", "HCDIM_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    assert load_settings_from_env() == Settings()


def test_reads_env(monkeypatch):
    monkeypatch.setenv("HCDIM_TARGET_ANSWER_TIME", "30")
    monkeypatch.setenv("HCDIM_INTERVAL_MINUTES", "30")
    monkeypatch.setenv("HCDIM_STRICT_SEARCH", "yes")
    monkeypatch.setenv("HCDIM_LOG_LEVEL", "debug")

    settings = load_settings_from_env()
    assert settings.target_answer_time_seconds == 30.0
    assert settings.interval_minutes == 30
    assert settings.strict_search is True
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name,value",
    [
        ("HCDIM_TARGET_ANSWER_TIME", "abc"),
        ("HCDIM_TARGET_ANSWER_TIME", "0"),
        ("HCDIM_INTERVAL_MINUTES", "7"),
        ("HCDIM_INTERVAL_MINUTES", "x"),
    ],
)
def test_bad_env_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(InvalidConfigurationError):
        load_settings_from_env()


def test_get_logger_is_namespaced():
    from hcdim.logger import configure_logging, get_logger

    configure_logging("WARNING")
    assert get_logger("hcdim.staffing").name == "hcdim.staffing"
