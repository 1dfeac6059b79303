"""
Unit tests for environment-driven configuration.
"""

import logging

import pytest

from solid_principles.core import config

pytestmark = [pytest.mark.unit, pytest.mark.config]


class TestLogLevel:
    def test_defaults_to_warning(self, monkeypatch):
        monkeypatch.delenv("SOLID_LOG_LEVEL", raising=False)

        assert config.get_log_level() == logging.WARNING

    @pytest.mark.parametrize(
        "value, expected",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" error ", logging.ERROR)],
    )
    def test_reads_level_name(self, monkeypatch, value, expected):
        monkeypatch.setenv("SOLID_LOG_LEVEL", value)

        assert config.get_log_level() == expected

    def test_invalid_level_falls_back_to_warning(self, monkeypatch, caplog):
        monkeypatch.setenv("SOLID_LOG_LEVEL", "CHATTY")

        with caplog.at_level(logging.WARNING):
            level = config.get_log_level()

        assert level == logging.WARNING
        assert "Invalid log level 'CHATTY'" in caplog.text


class TestJsonLogging:
    def test_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("SOLID_LOG_JSON", raising=False)

        assert config.get_json_logging_enabled() is False

    @pytest.mark.parametrize("value", ["true", "1", "YES"])
    def test_truthy_values_enable_json(self, monkeypatch, value):
        monkeypatch.setenv("SOLID_LOG_JSON", value)

        assert config.get_json_logging_enabled() is True

    @pytest.mark.parametrize("value", ["false", "0", "no", ""])
    def test_other_values_disable_json(self, monkeypatch, value):
        monkeypatch.setenv("SOLID_LOG_JSON", value)

        assert config.get_json_logging_enabled() is False


def test_log_config_reports_resolved_settings(monkeypatch, caplog):
    monkeypatch.setenv("SOLID_LOG_LEVEL", "CHATTY")

    with caplog.at_level(logging.INFO, logger="solid_principles.core.config"):
        config.log_config(logging.DEBUG, True)

    assert "Invalid log level" not in caplog.text

    record = next(r for r in caplog.records if r.message == "Demo configuration initialized")
    assert record.context == {"log_level": "DEBUG", "json_logging": True}
