import logging
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from fcore.laws import LawCheck, _log_failures, either_laws, failed, law_report, maybe_laws, reader_laws, scenarios
from fcore.reader import Reader
from fcore.settings import LawSettings


def test_maybe_laws_hold():
    checks = maybe_laws(7, lambda v: v + 1)
    assert checks
    assert failed(checks) == ()


def test_either_laws_hold():
    assert failed(either_laws("x", str.upper)) == ()


def test_reader_laws_hold():
    checks = reader_laws(3, str, len, lambda s: Reader.unit(lambda a: s * a))
    assert failed(checks) == ()


def test_scenarios():
    checks = scenarios()
    assert len(checks) == 5
    assert all(c.holds for c in checks)


def test_failed_filters_broken():
    ok = LawCheck("Maybe", "a", True, "")
    broken = LawCheck("Maybe", "b", False, "1 == 2")
    assert failed((ok, broken)) == (broken,)


def test_law_report_reads_settings():
    checks = law_report.apply(LawSettings(sample=5, factor=3, environment=9))
    assert failed(checks) == ()
    subjects = {c.subject for c in checks}
    assert subjects == {"Maybe", "Either", "Reader", "scenario"}


def test_law_report_logs_nothing_when_laws_hold(caplog):
    with caplog.at_level(logging.WARNING, logger="fcore.laws"):
        law_report.apply(LawSettings())
    assert caplog.records == []


def test_settings_defaults():
    settings = LawSettings.from_env({})
    assert settings == LawSettings()


def test_settings_from_env():
    settings = LawSettings.from_env({"FCORE_SAMPLE": "12", "FCORE_LOG_LEVEL": " debug "})
    assert settings.sample == 12
    assert settings.environment == 12
    assert settings.log_level == "DEBUG"


def test_settings_ignore_bad_values(caplog):
    with caplog.at_level(logging.WARNING, logger="fcore.settings"):
        settings = LawSettings.from_env({"FCORE_SAMPLE": "abc", "FCORE_LOG_LEVEL": ""})
    assert settings.sample == 42
    assert settings.log_level == "INFO"
    assert "FCORE_SAMPLE" in caplog.text


def test_broken_law_is_logged(caplog):
    ok = LawCheck("Maybe", "map identity (Some)", True, "")
    broken = LawCheck("Either", "Left.map skips mapper", False, "1 == 0")
    with caplog.at_level(logging.WARNING, logger="fcore.laws"):
        assert _log_failures((ok, broken)) == (ok, broken)
    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.WARNING
    assert "Left.map skips mapper" in caplog.text


def test_settings_unknown_log_level(caplog):
    with caplog.at_level(logging.WARNING, logger="fcore.settings"):
        settings = LawSettings.from_env({"FCORE_LOG_LEVEL": "loud"})
    assert settings.log_level == "INFO"
    assert "FCORE_LOG_LEVEL" in caplog.text


def test_settings_known_log_level_is_usable():
    settings = LawSettings.from_env({"FCORE_LOG_LEVEL": "warning"})
    assert settings.log_level == "WARNING"
    logging.getLogger("fcore.test").setLevel(settings.log_level)
