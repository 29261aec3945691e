"""Actions understood by the mission reducer.

Payloads by action type:

    SET_MISSION                     Mission
    CREATE_MISSION                  CreateMissionPayload
    SET_MISSIONS                    tuple/list of Mission
    SET_ACTIVE_MISSION              mission id
    START_SELECTING_TAKEOFF_POINT   -
    SET_TAKEOFF_POINT               LocalCoord | None
    SET_SAFETY_PARAMS               mapping of SafetyParams fields
    SET_SELECTED_POINT              LatLng | None
    SELECT_WAYPOINT                 waypoint id | None
    SELECT_PATH_SEGMENT             segment id | None
    TOGGLE_PATH_SEGMENT_SELECTION   segment id
    ADD_WAYPOINT / UPDATE_WAYPOINT  Waypoint
    DELETE_WAYPOINT                 waypoint id
    ADD_PATH_SEGMENT / UPDATE_...   PathSegment
    DELETE_PATH_SEGMENT             segment id
    ADD_GCP / UPDATE_GCP            GCP
    DELETE_GCP                      GCP id
    TOGGLE_GCP_VISIBILITY           GCP id
    ADD_SCENE_OBJECT                SceneObject
    UPDATE_SCENE_OBJECT             mapping with "id" plus fields to merge
    REMOVE_SCENE_OBJECT             scene object id
    MOVE_SCENE_OBJECT               MoveSceneObjectPayload
    START_SIMULATION                -
    STOP_SIMULATION                 -
    SET_SIMULATION_TIME             seconds
    SET_SIMULATION_SPEED            positive multiplier
    SET_SIMULATION_PROGRESS         SimulationProgress
    SET_LIVE_MODE                   bool
    START_POLYGON_DRAWING           -
    ADD_POLYGON_POINT               LocalCoord
    UPDATE_POLYGON_PREVIEW_POINT    LocalCoord | None
    COMPLETE_POLYGON_DRAWING        -
    CANCEL_POLYGON_DRAWING          -
    SET_VIEW_MODE                   ViewMode
    SET_EDITING                     bool
    TOGGLE_DRONE_VISIBILITY         -
    TOGGLE_CAMERA_FRUSTUM_VISIBILITY -
    SET_ACTIVE_CONTROL_PANE         ControlPane value
    SET_HARDWARE                    mapping of HardwareState fields
    UPDATE_HARDWARE_FIELD           HardwareFieldUpdate
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

from mission_sim.geometry.coordinates import LocalCoord
from mission_sim.hardware.models import HardwareField
from mission_sim.mission.models import Region, SceneObjectType


class ActionType(StrEnum):
    """Reducer action identifiers."""

    # Mission
    SET_MISSION = "SET_MISSION"
    CREATE_MISSION = "CREATE_MISSION"
    SET_MISSIONS = "SET_MISSIONS"
    SET_ACTIVE_MISSION = "SET_ACTIVE_MISSION"
    START_SELECTING_TAKEOFF_POINT = "START_SELECTING_TAKEOFF_POINT"
    SET_TAKEOFF_POINT = "SET_TAKEOFF_POINT"
    SET_SAFETY_PARAMS = "SET_SAFETY_PARAMS"
    SET_SELECTED_POINT = "SET_SELECTED_POINT"

    # Selection
    SELECT_WAYPOINT = "SELECT_WAYPOINT"
    SELECT_PATH_SEGMENT = "SELECT_PATH_SEGMENT"
    TOGGLE_PATH_SEGMENT_SELECTION = "TOGGLE_PATH_SEGMENT_SELECTION"

    # Waypoints
    ADD_WAYPOINT = "ADD_WAYPOINT"
    UPDATE_WAYPOINT = "UPDATE_WAYPOINT"
    DELETE_WAYPOINT = "DELETE_WAYPOINT"

    # Path segments
    ADD_PATH_SEGMENT = "ADD_PATH_SEGMENT"
    UPDATE_PATH_SEGMENT = "UPDATE_PATH_SEGMENT"
    DELETE_PATH_SEGMENT = "DELETE_PATH_SEGMENT"

    # Ground control points
    ADD_GCP = "ADD_GCP"
    UPDATE_GCP = "UPDATE_GCP"
    DELETE_GCP = "DELETE_GCP"
    TOGGLE_GCP_VISIBILITY = "TOGGLE_GCP_VISIBILITY"

    # Scene objects
    ADD_SCENE_OBJECT = "ADD_SCENE_OBJECT"
    UPDATE_SCENE_OBJECT = "UPDATE_SCENE_OBJECT"
    REMOVE_SCENE_OBJECT = "REMOVE_SCENE_OBJECT"
    MOVE_SCENE_OBJECT = "MOVE_SCENE_OBJECT"

    # Simulation
    START_SIMULATION = "START_SIMULATION"
    STOP_SIMULATION = "STOP_SIMULATION"
    SET_SIMULATION_TIME = "SET_SIMULATION_TIME"
    SET_SIMULATION_SPEED = "SET_SIMULATION_SPEED"
    SET_SIMULATION_PROGRESS = "SET_SIMULATION_PROGRESS"
    SET_LIVE_MODE = "SET_LIVE_MODE"

    # Polygon drawing
    START_POLYGON_DRAWING = "START_POLYGON_DRAWING"
    ADD_POLYGON_POINT = "ADD_POLYGON_POINT"
    UPDATE_POLYGON_PREVIEW_POINT = "UPDATE_POLYGON_PREVIEW_POINT"
    COMPLETE_POLYGON_DRAWING = "COMPLETE_POLYGON_DRAWING"
    CANCEL_POLYGON_DRAWING = "CANCEL_POLYGON_DRAWING"

    # UI flags
    SET_VIEW_MODE = "SET_VIEW_MODE"
    SET_EDITING = "SET_EDITING"
    TOGGLE_DRONE_VISIBILITY = "TOGGLE_DRONE_VISIBILITY"
    TOGGLE_CAMERA_FRUSTUM_VISIBILITY = "TOGGLE_CAMERA_FRUSTUM_VISIBILITY"
    SET_ACTIVE_CONTROL_PANE = "SET_ACTIVE_CONTROL_PANE"

    # Hardware
    SET_HARDWARE = "SET_HARDWARE"
    UPDATE_HARDWARE_FIELD = "UPDATE_HARDWARE_FIELD"


class Action(BaseModel):
    """A dispatched action."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: ActionType
    payload: Any = None


class CreateMissionPayload(BaseModel):
    """Payload of CREATE_MISSION."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    region: Region


class MoveSceneObjectPayload(BaseModel):
    """Payload of MOVE_SCENE_OBJECT: moves every object of ``type``."""

    model_config = ConfigDict(frozen=True)

    type: SceneObjectType
    position: LocalCoord
    height_offset: float | None = None


class HardwareFieldUpdate(BaseModel):
    """Payload of UPDATE_HARDWARE_FIELD."""

    model_config = ConfigDict(frozen=True)

    field: HardwareField
    value: Any = None
