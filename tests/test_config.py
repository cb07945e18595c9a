"""
Unit Tests for Configuration and Logging Setup

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import logging

import pytest

from utils.config import load_config, DEFAULT_DB_PATH, DEFAULT_RATE_TIMEOUT_SECONDS, DEFAULT_ADMIN_PASSWORD
from utils.logging_config import StructuredFormatter, PerformanceLogger, setup_logger, for_principal


@pytest.fixture
def clean_env(monkeypatch):
    for name in ["TRIP_CALC_DB_PATH", "TRIP_CALC_ENCRYPTION_KEY",
                 "TRIP_CALC_ADMIN_PASSWORD", "TRIP_CALC_RATE_TIMEOUT"]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadConfig:

    def test_defaults(self, clean_env):
        config = load_config()

        assert config.db_path == DEFAULT_DB_PATH
        assert config.encryption_key is None
        assert config.admin_password == DEFAULT_ADMIN_PASSWORD
        assert config.rate_timeout_seconds == DEFAULT_RATE_TIMEOUT_SECONDS

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("TRIP_CALC_DB_PATH", "/tmp/trips.db")
        clean_env.setenv("TRIP_CALC_ADMIN_PASSWORD", "hunter2")
        clean_env.setenv("TRIP_CALC_RATE_TIMEOUT", "2.5")

        config = load_config()
        assert config.db_path == "/tmp/trips.db"
        assert config.admin_password == "hunter2"
        assert config.rate_timeout_seconds == 2.5

    def test_invalid_timeout_falls_back(self, clean_env):
        clean_env.setenv("TRIP_CALC_RATE_TIMEOUT", "soon")
        assert load_config().rate_timeout_seconds == DEFAULT_RATE_TIMEOUT_SECONDS


def make_record(msg="Trip saved", **extra):
    record = logging.LogRecord("test", logging.INFO, __file__, 42, msg, None, None, func="save")
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogging:

    def test_structured_line(self):
        line = StructuredFormatter().format(make_record())
        assert "[INFO    ]" in line
        assert ":save:42]" in line
        assert line.endswith("Trip saved")

    def test_user_context_appended(self):
        line = StructuredFormatter().format(make_record(user_context="user=admin"))
        assert line.endswith("Trip saved user=admin")

    def test_principal_adapter(self):
        adapter = for_principal(logging.getLogger("test.adapter"), "driver")
        _, kwargs = adapter.process("hello", {})
        assert kwargs["extra"]["user_context"] == "user=driver"

    def test_setup_logger_is_idempotent(self):
        logger = setup_logger("tests.idempotent", level="DEBUG")
        handlers = len(logger.handlers)
        assert setup_logger("tests.idempotent") is logger
        assert len(logger.handlers) == handlers
        assert logger.level == logging.DEBUG

    def test_performance_logger_measures(self):
        logger = setup_logger("tests.perf")
        with PerformanceLogger(logger, "noop", threshold_ms=10_000) as perf:
            pass
        assert perf.elapsed_ms is not None
        assert perf.elapsed_ms >= 0

    def test_performance_logger_does_not_swallow(self):
        logger = setup_logger("tests.perf")
        with pytest.raises(RuntimeError):
            with PerformanceLogger(logger, "boom"):
                raise RuntimeError("boom")
