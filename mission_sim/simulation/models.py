"""Simulation data models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from mission_sim.geometry.coordinates import LocalCoord
from mission_sim.mission.models import Waypoint


class StepperState(StrEnum):
    """State of the simulation stepper."""

    IDLE = "idle"
    RUNNING = "running"
    HOLDING_AT_WAYPOINT = "holding_at_waypoint"


class Rotation(BaseModel):
    """Drone attitude in degrees; heading is a compass bearing in [0, 360)."""

    model_config = ConfigDict(frozen=True)

    heading: float = Field(default=0.0, ge=0.0, lt=360.0)
    pitch: float = 0.0
    roll: float = 0.0


class CameraTransition(BaseModel):
    """Linear pitch/roll blend run while holding at a waypoint."""

    model_config = ConfigDict(frozen=True)

    start_pitch: float
    start_roll: float
    target_pitch: float
    target_roll: float
    duration: float = Field(ge=0.0)

    def at(self, elapsed: float) -> tuple[float, float]:
        """Return ``(pitch, roll)`` after ``elapsed`` seconds."""
        if self.duration <= 0:
            return self.target_pitch, self.target_roll
        fraction = min(max(elapsed / self.duration, 0.0), 1.0)
        return (
            self.start_pitch + (self.target_pitch - self.start_pitch) * fraction,
            self.start_roll + (self.target_roll - self.start_roll) * fraction,
        )


class PathPoint(BaseModel):
    """A point of the simulation path.

    ``waypoint`` and ``segment_id`` are None for the takeoff point and the
    synthetic extension point.
    """

    model_config = ConfigDict(frozen=True)

    coord: LocalCoord
    segment_id: str | None = None
    waypoint: Waypoint | None = None


class SimulationSnapshot(BaseModel):
    """Observable stepper state after a tick."""

    model_config = ConfigDict(frozen=True)

    state: StepperState
    position: LocalCoord | None = None
    rotation: Rotation = Field(default_factory=Rotation)
    target_index: int = Field(default=0, ge=0)
    leg_progress: float = Field(default=0.0, ge=0.0, le=1.0)
    hold_elapsed: float = Field(default=0.0, ge=0.0)
    total_points: int = Field(default=0, ge=0)
