"""Logging settings for simulator runs, read from ``MISSION_SIM_`` variables."""

import logging
from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(StrEnum):
    """Levels accepted for the ``mission_sim`` package logger."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def number(self) -> int:
        """Numeric level understood by ``logging``."""
        return logging.getLevelNamesMapping()[self.value]


class LogFormat(StrEnum):
    """Output formats of the simulator's log handler."""

    JSON = "json"
    HUMAN = "human"


class LoggingConfig(BaseSettings):
    """How simulator records are filtered and rendered.

    Attributes:
        log_level: Level of the ``mission_sim`` package logger. The root
            logger is never touched.
        log_format: ``human`` for a terminal, ``json`` for one object per line.
        service_name: Value of the ``service`` field of JSON records.
        trace_simulation: Emit the stepper's per-leg and per-hold DEBUG
            records even when ``log_level`` is higher.
        include_timestamp: Whether JSON records carry the creation time.
        include_location: Whether JSON records carry module, function and line.
    """

    model_config = SettingsConfigDict(
        env_prefix="MISSION_SIM_",
        case_sensitive=False,
        extra="ignore",
        str_strip_whitespace=True,
    )

    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: LogFormat = Field(default=LogFormat.HUMAN)
    service_name: str = Field(default="mission-sim", min_length=1)
    trace_simulation: bool = Field(default=False)
    include_timestamp: bool = Field(default=True)
    include_location: bool = Field(default=False)

    @property
    def simulation_level(self) -> int:
        """Level for the ``mission_sim.simulation`` logger, 0 to inherit."""
        return logging.DEBUG if self.trace_simulation else logging.NOTSET


@lru_cache
def get_logging_config() -> LoggingConfig:
    """Get cached logging configuration instance."""
    return LoggingConfig()
