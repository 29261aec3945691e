"""Simulator configuration using Pydantic BaseSettings.

All settings are loaded from environment variables prefixed ``MISSION_SIM_``.

Usage:
    from mission_sim.config import get_settings

    settings = get_settings()
    print(settings.fallback_speed_mps)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SimulatorSettings(BaseSettings):
    """Simulation settings loaded from environment variables.

    Attributes:
        fallback_speed_mps: Speed used when neither waypoint, segment nor mission sets one.
        leg_epsilon_meters: Legs shorter than this complete instantly.
        max_camera_transition_seconds: Upper bound of the pitch/roll transition at a hold.
        default_path_extension_meters: Northward offset of the point added to a takeoff-only path.
        frame_interval_seconds: Default timestep of a simulation loop given no clock.
        max_frames: Frame limit for a single simulation loop run.
    """

    model_config = SettingsConfigDict(
        env_prefix="MISSION_SIM_",
        case_sensitive=False,
        extra="ignore",
        str_strip_whitespace=True,
    )

    # Kinematics
    fallback_speed_mps: float = Field(default=5.0, gt=0.0, le=50.0)
    leg_epsilon_meters: float = Field(default=0.01, gt=0.0, le=1.0)

    # Holds
    max_camera_transition_seconds: float = Field(default=2.0, gt=0.0, le=30.0)

    # Path building
    default_path_extension_meters: float = Field(default=10.0, gt=0.0, le=1000.0)

    # Loop
    frame_interval_seconds: float = Field(default=1.0 / 60.0, gt=0.0, le=1.0)
    max_frames: int = Field(default=100_000, ge=1)


@lru_cache
def get_settings() -> SimulatorSettings:
    """Get cached simulator settings instance.

    Returns:
        Cached SimulatorSettings instance.
    """
    return SimulatorSettings()
