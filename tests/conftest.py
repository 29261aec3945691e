"""Shared test fixtures."""

import pytest

from mission_sim.config import get_settings
from mission_sim.logging.config import get_logging_config
from mission_sim.logging.context import clear_context


@pytest.fixture(autouse=True)
def _clear_environment(monkeypatch):
    """Clear environment variables that affect settings."""
    env_vars_to_clear = [
        "MISSION_SIM_FALLBACK_SPEED_MPS",
        "MISSION_SIM_LEG_EPSILON_METERS",
        "MISSION_SIM_MAX_CAMERA_TRANSITION_SECONDS",
        "MISSION_SIM_DEFAULT_PATH_EXTENSION_METERS",
        "MISSION_SIM_FRAME_INTERVAL_SECONDS",
        "MISSION_SIM_MAX_FRAMES",
        "MISSION_SIM_LOG_LEVEL",
        "MISSION_SIM_LOG_FORMAT",
        "MISSION_SIM_SERVICE_NAME",
        "MISSION_SIM_INCLUDE_TIMESTAMP",
        "MISSION_SIM_INCLUDE_LOCATION",
        "MISSION_SIM_TRACE_SIMULATION",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    get_logging_config.cache_clear()
    yield
    clear_context()
    get_settings.cache_clear()
    get_logging_config.cache_clear()
