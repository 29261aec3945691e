"""Frame-stepped simulation of the drone avatar along the mission path.

The stepper is a small state machine::

    IDLE --start()--> RUNNING --leg done, hold_time > 0--> HOLDING_AT_WAYPOINT
                         ^  |                                   |
                         |  +--leg done, no hold--> next leg     |
                         +------------hold elapsed---------------+

    RUNNING / HOLDING --last point reached, stop(), error or store stop--> IDLE

Each ``step(dt)`` processes at most one leg completion; time left over in a
tick is not carried into the next leg. Progress is published to the store
through ``SET_SIMULATION_PROGRESS`` whenever the target changes. A run
also ends on the next tick once the store stops simulating, either through
``STOP_SIMULATION`` or by switching to live mode.
"""

from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING

from mission_sim.config import SimulatorSettings, get_settings
from mission_sim.exceptions import MissionSimError, SimulationError
from mission_sim.geometry.coordinates import distance, heading_degrees, lerp
from mission_sim.logging.logger import bind_simulation_run, release_simulation_run
from mission_sim.simulation.clock import Clock, MonotonicClock
from mission_sim.simulation.models import (
    CameraTransition,
    PathPoint,
    Rotation,
    SimulationSnapshot,
    StepperState,
)
from mission_sim.simulation.path import build_simulation_path
from mission_sim.store.actions import ActionType
from mission_sim.store.state import SimulationProgress

if TYPE_CHECKING:
    from mission_sim.geometry.coordinates import LocalCoord
    from mission_sim.store.store import MissionStore

logger = logging.getLogger(__name__)


class SimulationStepper:
    """Moves the simulated drone along the mission path one tick at a time.

    The stepper reads the mission and the speed multiplier from the store and
    reports back through it. It never lets an exception escape ``step``: a
    failing tick is logged and the simulation returns to IDLE.
    """

    def __init__(self, store: MissionStore, settings: SimulatorSettings | None = None) -> None:
        """Initialize the stepper.

        Args:
            store: Mission store providing the mission and receiving progress.
            settings: Simulator configuration. Defaults to the cached settings.
        """
        self._store = store
        self._settings = settings or get_settings()
        self._state = StepperState.IDLE
        self._path: list[PathPoint] = []
        self._target_index = 0
        self._leg_progress = 0.0
        self._position: LocalCoord | None = None
        self._rotation = Rotation()
        self._hold_elapsed = 0.0
        self._hold_duration = 0.0
        self._transition: CameraTransition | None = None
        self._elapsed = 0.0
        self._run_id = ""

    @property
    def state(self) -> StepperState:
        """Return the current stepper state."""
        return self._state

    @property
    def settings(self) -> SimulatorSettings:
        """Return the simulator configuration in use."""
        return self._settings

    @property
    def path(self) -> tuple[PathPoint, ...]:
        """Return the path of the current or last run."""
        return tuple(self._path)

    @property
    def target_index(self) -> int:
        """Index in ``path`` of the point being flown to."""
        return self._target_index

    @property
    def leg_progress(self) -> float:
        """Fraction of the current leg flown, in [0, 1]."""
        return self._leg_progress

    @property
    def position(self) -> LocalCoord | None:
        """Current drone position, None before the first run."""
        return self._position

    @property
    def rotation(self) -> Rotation:
        """Current drone attitude."""
        return self._rotation

    def snapshot(self) -> SimulationSnapshot:
        """Return the observable state as an immutable value."""
        return SimulationSnapshot(
            state=self._state,
            position=self._position,
            rotation=self._rotation,
            target_index=self._target_index,
            leg_progress=self._leg_progress,
            hold_elapsed=self._hold_elapsed,
            total_points=len(self._path),
        )

    def start(self) -> SimulationSnapshot:
        """Start flying the current mission from its first path point.

        Returns:
            The snapshot right after starting.

        Raises:
            SimulationError: If a run is already active, the store is in live
                mode, no mission is loaded or the path has fewer than two points.
        """
        if self._state != StepperState.IDLE:
            raise SimulationError("Simulation is already running", context={"state": str(self._state)})

        store_state = self._store.state
        if store_state.is_live:
            raise SimulationError("Cannot simulate while in live mode")

        mission = store_state.current_mission
        if mission is None:
            raise SimulationError("No mission loaded")

        path = build_simulation_path(
            mission,
            store_state.selected_path_segment_ids,
            self._settings.default_path_extension_meters,
        )
        if len(path) < 2:
            raise SimulationError(
                "Simulation path needs at least two points",
                context={"mission_id": mission.id, "points": len(path)},
            )

        self._run_id = bind_simulation_run(mission.id)

        self._path = path
        self._target_index = 1
        self._leg_progress = 0.0
        self._elapsed = 0.0
        self._hold_elapsed = 0.0
        self._transition = None
        self._position = path[0].coord
        self._rotation = Rotation(heading=heading_degrees(path[0].coord, path[1].coord))
        self._state = StepperState.RUNNING

        logger.info("Simulation %s started with %d path points", self._run_id, len(path))

        self._store.dispatch(ActionType.START_SIMULATION)
        self._report_progress()
        return self.snapshot()

    def stop(self) -> None:
        """Stop the run, if any."""
        if self._state == StepperState.IDLE:
            return
        self._finish("stopped", notify_store=self._store.state.is_simulating)

    def step(self, dt: float) -> SimulationSnapshot:
        """Advance the simulation by ``dt`` seconds of wall time.

        Args:
            dt: Seconds since the previous tick, scaled internally by the
                store's simulation speed.

        Returns:
            The snapshot after the tick.
        """
        if self._state == StepperState.IDLE:
            return self.snapshot()

        if not self._store.state.is_simulating:
            # Stopped through the store, by STOP_SIMULATION or by going live.
            self._finish("stopped by the store", notify_store=False)
            return self.snapshot()

        try:
            if not math.isfinite(dt) or dt < 0:
                raise SimulationError("Timestep must be a finite non-negative number", context={"dt": dt})

            scaled = dt * self._store.state.simulation_speed
            self._elapsed += scaled
            self._store.dispatch(ActionType.SET_SIMULATION_TIME, self._elapsed)

            if self._state == StepperState.RUNNING:
                self._fly(scaled)
            else:
                self._hold(scaled)
        except MissionSimError as error:
            logger.error("Simulation step failed: %s", error.message, extra=error.to_log_dict())
            self._finish("failed")
        except Exception:
            logger.exception("Unexpected error during simulation step")
            self._finish("failed")

        return self.snapshot()

    def _fly(self, dt: float) -> None:
        start = self._path[self._target_index - 1]
        target = self._path[self._target_index]
        leg_length = distance(start.coord, target.coord)

        if leg_length < self._settings.leg_epsilon_meters:
            self._leg_progress = 1.0
        else:
            speed = self._resolve_speed(target)
            self._leg_progress = min(1.0, self._leg_progress + speed * dt / leg_length)

        self._position = lerp(start.coord, target.coord, self._leg_progress)
        horizontal = math.hypot(target.coord.x - start.coord.x, target.coord.y - start.coord.y)
        if horizontal >= self._settings.leg_epsilon_meters:
            self._rotation = self._rotation.model_copy(
                update={"heading": heading_degrees(start.coord, target.coord)}
            )

        if self._leg_progress >= 1.0:
            self._arrive(target)

    def _resolve_speed(self, target: PathPoint) -> float:
        """Speed for the leg ending at ``target``: waypoint, segment, mission, then fallback."""
        mission = self._store.state.current_mission
        segment = mission.find_segment(target.segment_id) if mission and target.segment_id else None
        candidates = (
            target.waypoint.speed if target.waypoint else None,
            segment.speed if segment else None,
            mission.default_speed if mission else None,
            self._settings.fallback_speed_mps,
        )
        speed = next(candidate for candidate in candidates if candidate is not None)
        if speed <= 0:
            raise SimulationError("Effective speed must be positive", context={"speed": speed})
        return speed

    def _arrive(self, target: PathPoint) -> None:
        waypoint = target.waypoint
        hold_time = waypoint.hold_time if waypoint is not None else None
        if not hold_time or hold_time <= 0:
            self._next_leg()
            return

        self._hold_duration = hold_time
        self._hold_elapsed = 0.0
        self._transition = CameraTransition(
            start_pitch=self._rotation.pitch,
            start_roll=self._rotation.roll,
            target_pitch=waypoint.camera.pitch,
            target_roll=waypoint.camera.roll,
            duration=min(self._settings.max_camera_transition_seconds, hold_time / 2.0),
        )
        self._state = StepperState.HOLDING_AT_WAYPOINT
        logger.info("Holding at waypoint %s for %.1f s", waypoint.id, hold_time)

    def _hold(self, dt: float) -> None:
        self._hold_elapsed += dt
        if self._transition is not None:
            pitch, roll = self._transition.at(self._hold_elapsed)
            self._rotation = self._rotation.model_copy(update={"pitch": pitch, "roll": roll})

        if self._hold_elapsed >= self._hold_duration:
            self._transition = None
            self._hold_elapsed = 0.0
            self._state = StepperState.RUNNING
            self._next_leg()

    def _next_leg(self) -> None:
        if self._target_index >= len(self._path) - 1:
            self._finish("completed")
            return

        self._target_index += 1
        self._leg_progress = 0.0
        logger.debug("Flying leg %d of %d", self._target_index, len(self._path) - 1)
        self._report_progress()

    def _report_progress(self) -> None:
        target = self._path[self._target_index]
        self._store.dispatch(
            ActionType.SET_SIMULATION_PROGRESS,
            SimulationProgress(
                current_segment_id=target.segment_id,
                current_waypoint_index=self._target_index,
                total_waypoints=len(self._path),
            ),
        )

    def _finish(self, reason: str, *, notify_store: bool = True) -> None:
        self._state = StepperState.IDLE
        self._transition = None
        self._hold_elapsed = 0.0
        logger.info("Simulation %s %s after %.2f s", self._run_id, reason, self._elapsed)
        try:
            if notify_store:
                self._store.dispatch(ActionType.STOP_SIMULATION)
        except Exception:
            logger.exception("Store listener failed while stopping simulation %s", self._run_id)
        finally:
            release_simulation_run()


class SimulationLoop:
    """Drives a stepper until it returns to IDLE or a frame limit is hit.

    Given a ``clock`` and no ``fixed_timestep``, each frame measures the time
    since the previous one. Otherwise every frame advances by the fixed
    timestep, which defaults to the settings' ``frame_interval_seconds``.
    Pass ``MonotonicClock()`` to follow real time.
    """

    def __init__(
        self,
        stepper: SimulationStepper,
        clock: Clock | None = None,
        *,
        fixed_timestep: float | None = None,
        max_frames: int | None = None,
        frame_sleep_seconds: float = 0.0,
    ) -> None:
        """Initialize the loop.

        Args:
            stepper: Stepper to drive.
            clock: Time source for measured timesteps.
            fixed_timestep: Seconds per frame for deterministic runs.
            max_frames: Frame limit. Defaults to the stepper's settings.
            frame_sleep_seconds: Real time to sleep between frames.
        """
        if fixed_timestep is not None and fixed_timestep <= 0:
            raise ValueError(f"fixed_timestep must be positive, got {fixed_timestep}")
        if fixed_timestep is None and clock is None:
            fixed_timestep = stepper.settings.frame_interval_seconds

        self._stepper = stepper
        self._clock = clock or MonotonicClock()
        self._fixed_timestep = fixed_timestep
        self._max_frames = max_frames or stepper.settings.max_frames
        self._frame_sleep_seconds = frame_sleep_seconds

    def run(self) -> int:
        """Start the stepper if needed and tick it to completion.

        Returns:
            Number of frames stepped.

        Raises:
            SimulationError: If the stepper cannot be started.
        """
        if self._stepper.state == StepperState.IDLE:
            self._stepper.start()

        frames = 0
        last = self._clock.now()
        while self._stepper.state != StepperState.IDLE and frames < self._max_frames:
            if self._frame_sleep_seconds > 0:
                time.sleep(self._frame_sleep_seconds)

            if self._fixed_timestep is not None:
                dt = self._fixed_timestep
            else:
                now = self._clock.now()
                dt, last = now - last, now

            self._stepper.step(dt)
            frames += 1

        if self._stepper.state != StepperState.IDLE:
            logger.warning("Simulation stopped after reaching the %d frame limit", self._max_frames)
            self._stepper.stop()

        return frames
