"""Structured logging for the mission simulator.

Usage:
    import logging

    from mission_sim.logging import setup_logging

    setup_logging()
    logging.getLogger("mission_sim.simulation").info("Leg complete", extra={"target_index": 2})
"""

from mission_sim.logging.config import LogFormat, LoggingConfig, LogLevel
from mission_sim.logging.context import (
    clear_context,
    generate_run_id,
    get_extra_context,
    get_run_id,
    set_extra_context,
    set_run_id,
)
from mission_sim.logging.formatters import HumanFormatter, JSONFormatter
from mission_sim.logging.logger import (
    PACKAGE_LOGGER,
    SIMULATION_LOGGER,
    bind_simulation_run,
    release_simulation_run,
    reset_logging,
    setup_logging,
)

__all__ = [
    "PACKAGE_LOGGER",
    "SIMULATION_LOGGER",
    "HumanFormatter",
    "JSONFormatter",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "bind_simulation_run",
    "clear_context",
    "generate_run_id",
    "get_extra_context",
    "get_run_id",
    "release_simulation_run",
    "reset_logging",
    "set_extra_context",
    "set_run_id",
    "setup_logging",
]
