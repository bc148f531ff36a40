import logging

import pytest

from sqlbridge.utils.logging import (
    CorrelationIdFilter,
    get_correlation_id,
    get_logger,
    resolve_threshold_ms,
    time_call,
)


def test_correlation_id_is_stable_within_context():
    first = get_correlation_id()
    assert first
    assert get_correlation_id() == first


def test_filter_stamps_correlation_id():
    record = logging.LogRecord("sqlbridge.tests", logging.INFO, __file__, 1, "msg", None, None)
    assert CorrelationIdFilter().filter(record)
    assert record.correlation_id == get_correlation_id()


def test_loggers_live_under_package_namespace():
    assert get_logger("dialects.resolver").name == "sqlbridge.dialects.resolver"


def test_time_call_logs_duration(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("unit-test", logger, threshold_ms=10_000):
        pass
    records = [record for record in caplog.records if record.name == logger.name]
    assert any("unit-test took" in record.message for record in records)
    assert all(record.levelno == logging.DEBUG for record in records)


def test_time_call_warns_past_threshold(caplog):
    logger = get_logger("tests.logging.slow")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("slow-op", logger, threshold_ms=0, target="db"):
        pass
    record = next(record for record in caplog.records if record.name == logger.name)
    assert record.levelno == logging.WARNING
    assert record.target == "db"
    assert record.elapsed_ms >= 0


def test_resolve_threshold_prefers_override(monkeypatch):
    monkeypatch.setenv("SQLBRIDGE_TEST_MS", "250")
    assert resolve_threshold_ms("SQLBRIDGE_TEST_MS", default=100, override=5) == 5
    assert resolve_threshold_ms("SQLBRIDGE_TEST_MS", default=100) == 250


def test_resolve_threshold_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("SQLBRIDGE_TEST_MS", raising=False)
    assert resolve_threshold_ms("SQLBRIDGE_TEST_MS", default=100) == 100


@pytest.mark.parametrize("raw", ["fast", "-1"])
def test_resolve_threshold_rejects_invalid_values(monkeypatch, raw):
    monkeypatch.setenv("SQLBRIDGE_TEST_MS", raw)
    with pytest.raises(ValueError):
        resolve_threshold_ms("SQLBRIDGE_TEST_MS", default=100)
