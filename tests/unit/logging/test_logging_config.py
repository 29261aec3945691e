"""Tests for logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from mission_sim.logging.config import LogFormat, LoggingConfig, LogLevel, get_logging_config


class TestLoggingConfigDefaults:
    def test_default_level(self):
        assert LoggingConfig().log_level == LogLevel.INFO

    def test_default_format_is_human(self):
        assert LoggingConfig().log_format == LogFormat.HUMAN

    def test_default_service_name(self):
        assert LoggingConfig().service_name == "mission-sim"

    def test_location_disabled_by_default(self):
        assert LoggingConfig().include_location is False

    def test_simulation_trace_disabled_by_default(self):
        config = LoggingConfig()
        assert config.trace_simulation is False
        assert config.simulation_level == logging.NOTSET


class TestLoggingConfigFromEnvironment:
    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("MISSION_SIM_LOG_LEVEL", "DEBUG")
        assert LoggingConfig().log_level == LogLevel.DEBUG

    def test_format_from_env(self, monkeypatch):
        monkeypatch.setenv("MISSION_SIM_LOG_FORMAT", "json")
        assert LoggingConfig().log_format == LogFormat.JSON

    def test_trace_simulation_from_env(self, monkeypatch):
        monkeypatch.setenv("MISSION_SIM_TRACE_SIMULATION", "true")
        config = LoggingConfig()
        assert config.trace_simulation is True
        assert config.simulation_level == logging.DEBUG

    def test_invalid_format_rejected(self, monkeypatch):
        monkeypatch.setenv("MISSION_SIM_LOG_FORMAT", "xml")
        with pytest.raises(ValidationError):
            LoggingConfig()


class TestGetLoggingConfig:
    def test_is_cached(self):
        assert get_logging_config() is get_logging_config()


class TestLogLevel:
    def test_number_matches_logging(self):
        assert LogLevel.WARNING.number == logging.WARNING
