"""Mission store state."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from mission_sim.geometry.coordinates import LocalCoord
from mission_sim.geometry.geodesy import LatLng
from mission_sim.hardware.models import HardwareState
from mission_sim.mission.defaults import create_dev_mission
from mission_sim.mission.models import Mission, SceneObject


class ViewMode(StrEnum):
    """Which viewer is shown."""

    CESIUM = "CESIUM"
    LOCAL_3D = "LOCAL_3D"


class ControlPane(StrEnum):
    """Workflow step shown in the side panel."""

    PRE_CHECKS = "pre-checks"
    BUILD_SCENE = "build-scene"
    MISSION_PLANNING = "mission-planning"
    LIVE_OPERATION = "live-operation"
    HARDWARE = "hardware"


class DrawingMode(StrEnum):
    """Interactive drawing tools."""

    POLYGON = "polygon"


class SimulationProgress(BaseModel):
    """Progress reported by the simulation stepper.

    ``current_waypoint_index`` is the index, within the simulation path, of
    the point the drone is heading towards.
    """

    model_config = ConfigDict(frozen=True)

    current_segment_id: str | None = None
    current_waypoint_index: int = Field(default=0, ge=0)
    total_waypoints: int = Field(default=0, ge=0)


class MissionState(BaseModel):
    """Everything the reducer owns."""

    model_config = ConfigDict(frozen=True)

    missions: tuple[Mission, ...] = ()
    current_mission: Mission | None = None

    selected_path_segment_ids: tuple[str, ...] = ()
    selected_waypoint_id: str | None = None
    selected_path_segment_id: str | None = None
    selected_point: LatLng | None = None
    is_selecting_takeoff_point: bool = False

    is_simulating: bool = False
    simulation_time: float = Field(default=0.0, ge=0)
    simulation_speed: float = Field(default=1.0, gt=0)
    simulation_progress: SimulationProgress = Field(default_factory=SimulationProgress)
    is_live: bool = False

    view_mode: ViewMode = ViewMode.LOCAL_3D
    is_editing: bool = False
    active_control_pane: ControlPane = ControlPane.PRE_CHECKS
    is_drone_visible: bool = True
    is_camera_frustum_visible: bool = False
    hidden_gcp_ids: tuple[str, ...] = ()

    drawing_mode: DrawingMode | None = None
    polygon_points: tuple[LocalCoord, ...] = ()
    polygon_preview_point: LocalCoord | None = None

    hardware: HardwareState | None = None
    scene_objects: tuple[SceneObject, ...] = ()


def create_initial_state() -> MissionState:
    """Return a state holding the development mission as the active one."""
    mission = create_dev_mission()
    return MissionState(missions=(mission,), current_mission=mission)
