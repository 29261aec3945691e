"""Mission state reducer.

``reduce`` is a pure function of the current state and an action. Every
change builds new frozen models. An action whose preconditions do not hold
(no mission loaded, unknown id, malformed payload) returns the very same
state object, so callers detect no-ops with ``is``.
"""

import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from mission_sim.geometry.coordinates import LocalCoord
from mission_sim.geometry.geodesy import LatLng, latlng_to_local, local_to_latlng
from mission_sim.geometry.units import feet_to_meters
from mission_sim.hardware.models import HardwareState
from mission_sim.hardware.rules import apply_field_update, configure_hardware
from mission_sim.mission.defaults import (
    DEFAULT_MISSION_ALTITUDE_METERS,
    DEFAULT_MISSION_SPEED_MPS,
    create_default_gcps,
)
from mission_sim.mission.models import (
    GCP,
    AltitudeReference,
    CameraParams,
    Mission,
    PathSegment,
    PathType,
    SafetyParams,
    SceneObject,
    Waypoint,
    generate_id,
    utc_now,
)
from mission_sim.store.actions import (
    Action,
    ActionType,
    CreateMissionPayload,
    HardwareFieldUpdate,
    MoveSceneObjectPayload,
)
from mission_sim.store.state import (
    ControlPane,
    DrawingMode,
    MissionState,
    SimulationProgress,
    ViewMode,
)

logger = logging.getLogger(__name__)

TAKEOFF_ELEVATION_METERS: float = feet_to_meters(16.0)
POLYGON_CLOSING_THRESHOLD_METERS: float = 5.0
DEFAULT_MISSION_NAME = "New Mission"

Handler = Callable[[MissionState, Any], MissionState]

_HANDLERS: dict[ActionType, tuple[Handler, tuple[type, ...]]] = {}
_NONE = type(None)

_CLEARED_SELECTION: dict[str, Any] = {
    "selected_waypoint_id": None,
    "selected_path_segment_id": None,
    "selected_path_segment_ids": (),
}


def _handles(action_type: ActionType, *payload_types: type) -> Callable[[Handler], Handler]:
    """Register a handler; a non-empty ``payload_types`` is enforced before it runs."""

    def register(handler: Handler) -> Handler:
        _HANDLERS[action_type] = (handler, payload_types)
        return handler

    return register


def reduce(state: MissionState, action: Action) -> MissionState:
    """Apply ``action`` to ``state``.

    Args:
        state: Current state.
        action: Action to apply.

    Returns:
        The next state, or ``state`` itself when the action changes nothing.
    """
    entry = _HANDLERS.get(action.type)
    if entry is None:
        logger.warning("No handler registered for action %s", action.type)
        return state

    handler, payload_types = entry
    if payload_types and not isinstance(action.payload, payload_types):
        logger.warning(
            "Ignoring %s with unexpected payload type %s",
            action.type,
            type(action.payload).__name__,
        )
        return state

    logger.debug("Reducing %s", action.type)
    return handler(state, action.payload)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _update(state: MissionState, **changes: Any) -> MissionState:
    """Copy ``state`` with ``changes``, or return it when nothing differs."""
    if all(getattr(state, key) == value for key, value in changes.items()):
        return state
    return state.model_copy(update=changes)


def _with_mission(state: MissionState, mission: Mission, *, touch: bool = True, **changes: Any) -> MissionState:
    """Install ``mission`` as current, replacing or appending it in ``missions``."""
    if touch:
        mission = mission.model_copy(update={"updated_at": utc_now()})

    if any(existing.id == mission.id for existing in state.missions):
        missions = tuple(mission if existing.id == mission.id else existing for existing in state.missions)
    else:
        missions = (*state.missions, mission)

    return state.model_copy(update={"current_mission": mission, "missions": missions, **changes})


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool) and math.isfinite(value)


def _find_waypoint(mission: Mission, waypoint_id: str) -> Waypoint | None:
    for segment in mission.path_segments:
        for waypoint in segment.waypoints:
            if waypoint.id == waypoint_id:
                return waypoint
    return None


def _find_gcp(mission: Mission, gcp_id: str) -> GCP | None:
    return next((gcp for gcp in mission.gcps if gcp.id == gcp_id), None)


def _find_scene_object(state: MissionState, object_id: str) -> SceneObject | None:
    return next((obj for obj in state.scene_objects if obj.id == object_id), None)


def _reorigin_mission(mission: Mission, origin: LocalCoord) -> Mission:
    """Express every local coordinate of ``mission`` relative to ``origin``."""
    segments = []
    for segment in mission.path_segments:
        waypoints = tuple(
            waypoint if waypoint.local is None
            else waypoint.model_copy(update={"local": waypoint.local.relative_to(origin)})
            for waypoint in segment.waypoints
        )
        control_points = tuple(point.relative_to(origin) for point in segment.control_points)
        segments.append(segment.model_copy(update={"waypoints": waypoints, "control_points": control_points}))

    gcps = tuple(gcp.model_copy(update={"local": gcp.local.relative_to(origin)}) for gcp in mission.gcps)
    local_origin, _ = local_to_latlng(origin, mission.local_origin)

    return mission.model_copy(
        update={
            "path_segments": tuple(segments),
            "gcps": gcps,
            "takeoff_point": LocalCoord(),
            "local_origin": local_origin,
        }
    )


def _reorigin_scene_object(scene_object: SceneObject, origin: LocalCoord) -> SceneObject:
    return scene_object.model_copy(
        update={
            "position": scene_object.position.relative_to(origin),
            "points": tuple(point.relative_to(origin) for point in scene_object.points),
        }
    )


def _with_hardware(state: MissionState, hardware: HardwareState) -> MissionState:
    return state.model_copy(
        update={"hardware": hardware, "is_camera_frustum_visible": hardware.frustum_ready}
    )


# ---------------------------------------------------------------------------
# Mission
# ---------------------------------------------------------------------------


@_handles(ActionType.SET_MISSION, Mission)
def _set_mission(state: MissionState, mission: Mission) -> MissionState:
    return _with_mission(state, mission, touch=False, selected_point=None, **_CLEARED_SELECTION)


@_handles(ActionType.CREATE_MISSION, CreateMissionPayload)
def _create_mission(state: MissionState, payload: CreateMissionPayload) -> MissionState:
    origin = payload.region.center
    selected = state.selected_point

    takeoff = LocalCoord() if selected is None else latlng_to_local(selected, origin)
    gcps = create_default_gcps(takeoff)
    if selected is not None:
        anchor = gcps[0].model_copy(update={"lat": selected.latitude, "lng": selected.longitude})
        gcps = (anchor, *gcps[1:])

    mission = Mission(
        name=payload.name or DEFAULT_MISSION_NAME,
        region=payload.region,
        gcps=gcps,
        default_altitude=DEFAULT_MISSION_ALTITUDE_METERS,
        default_speed=DEFAULT_MISSION_SPEED_MPS,
        local_origin=origin,
        takeoff_point=takeoff,
        safety_params=SafetyParams(),
    )
    logger.info("Created mission %s (%s) in region %s", mission.name, mission.id, payload.region.name)

    return _with_mission(
        state,
        mission,
        touch=False,
        view_mode=ViewMode.LOCAL_3D,
        selected_point=None,
        **_CLEARED_SELECTION,
    )


@_handles(ActionType.SET_MISSIONS, tuple, list)
def _set_missions(state: MissionState, missions: tuple | list) -> MissionState:
    if not all(isinstance(mission, Mission) for mission in missions):
        logger.warning("Ignoring SET_MISSIONS with non-mission entries")
        return state

    missions = tuple(missions)
    current = state.current_mission
    if current is not None:
        current = next((mission for mission in missions if mission.id == current.id), None)
    if current is None and missions:
        current = missions[0]

    changes: dict[str, Any] = {"missions": missions, "current_mission": current}
    previous = state.current_mission
    if current is None or previous is None or current.id != previous.id:
        changes.update(_CLEARED_SELECTION)
    return _update(state, **changes)


@_handles(ActionType.SET_ACTIVE_MISSION, str)
def _set_active_mission(state: MissionState, mission_id: str) -> MissionState:
    mission = next((mission for mission in state.missions if mission.id == mission_id), None)
    if mission is None:
        return state
    return _update(state, current_mission=mission, **_CLEARED_SELECTION)


@_handles(ActionType.START_SELECTING_TAKEOFF_POINT)
def _start_selecting_takeoff_point(state: MissionState, _: Any) -> MissionState:
    if state.current_mission is None:
        return state
    return _update(state, is_selecting_takeoff_point=True)


@_handles(ActionType.SET_TAKEOFF_POINT, LocalCoord, _NONE)
def _set_takeoff_point(state: MissionState, point: LocalCoord | None) -> MissionState:
    mission = state.current_mission
    if mission is None:
        return state

    if point is not None and mission.takeoff_point is None:
        # The first takeoff point becomes the scene origin, raised to launch height.
        origin = point.offset(dz=TAKEOFF_ELEVATION_METERS)
        scene_objects = tuple(_reorigin_scene_object(obj, origin) for obj in state.scene_objects)
        logger.info(
            "Re-origined mission %s on takeoff point (%.2f, %.2f, %.2f)",
            mission.id,
            origin.x,
            origin.y,
            origin.z,
        )
        return _with_mission(
            state,
            _reorigin_mission(mission, origin),
            scene_objects=scene_objects,
            is_selecting_takeoff_point=False,
        )

    if mission.takeoff_point == point:
        return _update(state, is_selecting_takeoff_point=False)

    return _with_mission(
        state,
        mission.model_copy(update={"takeoff_point": point}),
        is_selecting_takeoff_point=False,
    )


@_handles(ActionType.SET_SAFETY_PARAMS, Mapping)
def _set_safety_params(state: MissionState, changes: Mapping[str, Any]) -> MissionState:
    mission = state.current_mission
    if mission is None:
        return state

    try:
        params = SafetyParams.model_validate({**mission.safety_params.model_dump(), **changes})
    except PydanticValidationError as exc:
        logger.warning("Ignoring invalid safety parameters: %s", exc)
        return state

    if params == mission.safety_params:
        return state
    return _with_mission(state, mission.model_copy(update={"safety_params": params}))


@_handles(ActionType.SET_SELECTED_POINT, LatLng, _NONE)
def _set_selected_point(state: MissionState, point: LatLng | None) -> MissionState:
    return _update(state, selected_point=point)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


@_handles(ActionType.SELECT_WAYPOINT, str, _NONE)
def _select_waypoint(state: MissionState, waypoint_id: str | None) -> MissionState:
    if waypoint_id is not None:
        mission = state.current_mission
        if mission is None or _find_waypoint(mission, waypoint_id) is None:
            return state
    return _update(state, selected_waypoint_id=waypoint_id, selected_path_segment_id=None)


@_handles(ActionType.SELECT_PATH_SEGMENT, str, _NONE)
def _select_path_segment(state: MissionState, segment_id: str | None) -> MissionState:
    if segment_id is not None:
        mission = state.current_mission
        if mission is None or mission.find_segment(segment_id) is None:
            return state
    return _update(state, selected_path_segment_id=segment_id, selected_waypoint_id=None)


@_handles(ActionType.TOGGLE_PATH_SEGMENT_SELECTION, str)
def _toggle_path_segment_selection(state: MissionState, segment_id: str) -> MissionState:
    mission = state.current_mission
    if mission is None or mission.find_segment(segment_id) is None:
        return state

    if segment_id in state.selected_path_segment_ids:
        selected = tuple(sid for sid in state.selected_path_segment_ids if sid != segment_id)
    else:
        selected = (*state.selected_path_segment_ids, segment_id)
    return state.model_copy(update={"selected_path_segment_ids": selected})


# ---------------------------------------------------------------------------
# Waypoints
# ---------------------------------------------------------------------------


@_handles(ActionType.ADD_WAYPOINT, Waypoint)
def _add_waypoint(state: MissionState, waypoint: Waypoint) -> MissionState:
    mission = state.current_mission
    if mission is None or _find_waypoint(mission, waypoint.id) is not None:
        return state

    target = mission.find_segment(state.selected_path_segment_id) if state.selected_path_segment_id else None
    if target is not None:
        segments = tuple(
            segment.model_copy(update={"waypoints": (*segment.waypoints, waypoint)})
            if segment.id == target.id else segment
            for segment in mission.path_segments
        )
        segment_id = target.id
    else:
        new_segment = PathSegment(type=PathType.STRAIGHT, waypoints=(waypoint,), speed=mission.default_speed)
        segments = (*mission.path_segments, new_segment)
        segment_id = new_segment.id

    return _with_mission(
        state,
        mission.model_copy(update={"path_segments": segments}),
        selected_waypoint_id=waypoint.id,
        selected_path_segment_id=segment_id,
    )


@_handles(ActionType.UPDATE_WAYPOINT, Waypoint)
def _update_waypoint(state: MissionState, waypoint: Waypoint) -> MissionState:
    mission = state.current_mission
    if mission is None or _find_waypoint(mission, waypoint.id) is None:
        return state

    segments = tuple(
        segment.model_copy(
            update={"waypoints": tuple(waypoint if wp.id == waypoint.id else wp for wp in segment.waypoints)}
        )
        if any(wp.id == waypoint.id for wp in segment.waypoints) else segment
        for segment in mission.path_segments
    )
    return _with_mission(
        state,
        mission.model_copy(update={"path_segments": segments}),
        selected_waypoint_id=waypoint.id,
    )


@_handles(ActionType.DELETE_WAYPOINT, str)
def _delete_waypoint(state: MissionState, waypoint_id: str) -> MissionState:
    mission = state.current_mission
    if mission is None or _find_waypoint(mission, waypoint_id) is None:
        return state

    segments = []
    for segment in mission.path_segments:
        waypoints = tuple(wp for wp in segment.waypoints if wp.id != waypoint_id)
        if not waypoints:
            continue
        segments.append(segment if len(waypoints) == len(segment.waypoints)
                        else segment.model_copy(update={"waypoints": waypoints}))

    remaining = {segment.id for segment in segments}
    selected_segment = state.selected_path_segment_id if state.selected_path_segment_id in remaining else None
    return _with_mission(
        state,
        mission.model_copy(update={"path_segments": tuple(segments)}),
        selected_waypoint_id=None,
        selected_path_segment_id=selected_segment,
        selected_path_segment_ids=tuple(sid for sid in state.selected_path_segment_ids if sid in remaining),
    )


# ---------------------------------------------------------------------------
# Path segments
# ---------------------------------------------------------------------------


@_handles(ActionType.ADD_PATH_SEGMENT, PathSegment)
def _add_path_segment(state: MissionState, segment: PathSegment) -> MissionState:
    mission = state.current_mission
    if mission is None or mission.find_segment(segment.id) is not None:
        return state

    return _with_mission(
        state,
        mission.model_copy(update={"path_segments": (*mission.path_segments, segment)}),
        selected_path_segment_id=segment.id,
        selected_path_segment_ids=(*state.selected_path_segment_ids, segment.id),
    )


@_handles(ActionType.UPDATE_PATH_SEGMENT, PathSegment)
def _update_path_segment(state: MissionState, segment: PathSegment) -> MissionState:
    mission = state.current_mission
    if mission is None or mission.find_segment(segment.id) is None:
        return state

    segments = tuple(segment if existing.id == segment.id else existing for existing in mission.path_segments)
    return _with_mission(
        state,
        mission.model_copy(update={"path_segments": segments}),
        selected_path_segment_id=segment.id,
    )


@_handles(ActionType.DELETE_PATH_SEGMENT, str)
def _delete_path_segment(state: MissionState, segment_id: str) -> MissionState:
    mission = state.current_mission
    if mission is None or mission.find_segment(segment_id) is None:
        return state

    removed = mission.find_segment(segment_id)
    segments = tuple(segment for segment in mission.path_segments if segment.id != segment_id)
    changes: dict[str, Any] = {
        "selected_path_segment_ids": tuple(sid for sid in state.selected_path_segment_ids if sid != segment_id),
    }
    if state.selected_path_segment_id == segment_id:
        changes["selected_path_segment_id"] = None
    if any(wp.id == state.selected_waypoint_id for wp in removed.waypoints):
        changes["selected_waypoint_id"] = None

    return _with_mission(state, mission.model_copy(update={"path_segments": segments}), **changes)


# ---------------------------------------------------------------------------
# Ground control points
# ---------------------------------------------------------------------------


@_handles(ActionType.ADD_GCP, GCP)
def _add_gcp(state: MissionState, gcp: GCP) -> MissionState:
    mission = state.current_mission
    if mission is None or _find_gcp(mission, gcp.id) is not None:
        return state
    return _with_mission(state, mission.model_copy(update={"gcps": (*mission.gcps, gcp)}))


@_handles(ActionType.UPDATE_GCP, GCP)
def _update_gcp(state: MissionState, gcp: GCP) -> MissionState:
    mission = state.current_mission
    if mission is None or _find_gcp(mission, gcp.id) is None:
        return state
    gcps = tuple(gcp if existing.id == gcp.id else existing for existing in mission.gcps)
    return _with_mission(state, mission.model_copy(update={"gcps": gcps}))


@_handles(ActionType.DELETE_GCP, str)
def _delete_gcp(state: MissionState, gcp_id: str) -> MissionState:
    mission = state.current_mission
    if mission is None or _find_gcp(mission, gcp_id) is None:
        return state
    gcps = tuple(gcp for gcp in mission.gcps if gcp.id != gcp_id)
    return _with_mission(
        state,
        mission.model_copy(update={"gcps": gcps}),
        hidden_gcp_ids=tuple(hidden for hidden in state.hidden_gcp_ids if hidden != gcp_id),
    )


@_handles(ActionType.TOGGLE_GCP_VISIBILITY, str)
def _toggle_gcp_visibility(state: MissionState, gcp_id: str) -> MissionState:
    mission = state.current_mission
    if mission is None or _find_gcp(mission, gcp_id) is None:
        return state

    if gcp_id in state.hidden_gcp_ids:
        hidden = tuple(hidden for hidden in state.hidden_gcp_ids if hidden != gcp_id)
    else:
        hidden = (*state.hidden_gcp_ids, gcp_id)
    return state.model_copy(update={"hidden_gcp_ids": hidden})


# ---------------------------------------------------------------------------
# Scene objects
# ---------------------------------------------------------------------------


@_handles(ActionType.ADD_SCENE_OBJECT, SceneObject)
def _add_scene_object(state: MissionState, scene_object: SceneObject) -> MissionState:
    if _find_scene_object(state, scene_object.id) is not None:
        logger.warning("Scene object %s already exists", scene_object.id)
        return state
    return state.model_copy(update={"scene_objects": (*state.scene_objects, scene_object)})


@_handles(ActionType.UPDATE_SCENE_OBJECT, Mapping)
def _update_scene_object(state: MissionState, changes: Mapping[str, Any]) -> MissionState:
    existing = _find_scene_object(state, changes.get("id"))
    if existing is None:
        return state

    try:
        merged = SceneObject.model_validate({**existing.model_dump(), **changes})
    except PydanticValidationError as exc:
        logger.warning("Ignoring invalid update for scene object %s: %s", existing.id, exc)
        return state

    if merged == existing:
        return state
    objects = tuple(merged if obj.id == existing.id else obj for obj in state.scene_objects)
    return state.model_copy(update={"scene_objects": objects})


@_handles(ActionType.REMOVE_SCENE_OBJECT, str)
def _remove_scene_object(state: MissionState, object_id: str) -> MissionState:
    if _find_scene_object(state, object_id) is None:
        return state
    objects = tuple(obj for obj in state.scene_objects if obj.id != object_id)
    return state.model_copy(update={"scene_objects": objects})


@_handles(ActionType.MOVE_SCENE_OBJECT, MoveSceneObjectPayload)
def _move_scene_object(state: MissionState, payload: MoveSceneObjectPayload) -> MissionState:
    if not any(obj.type == payload.type for obj in state.scene_objects):
        return state

    update: dict[str, Any] = {"position": payload.position}
    if payload.height_offset is not None:
        update["height_offset"] = payload.height_offset
    objects = tuple(
        obj.model_copy(update=update) if obj.type == payload.type else obj for obj in state.scene_objects
    )
    return _update(state, scene_objects=objects)


# ---------------------------------------------------------------------------
# Simulation control
# ---------------------------------------------------------------------------


@_handles(ActionType.START_SIMULATION)
def _start_simulation(state: MissionState, _: Any) -> MissionState:
    if state.current_mission is None or state.is_live:
        return state
    return _update(state, is_simulating=True)


@_handles(ActionType.STOP_SIMULATION)
def _stop_simulation(state: MissionState, _: Any) -> MissionState:
    return _update(state, is_simulating=False, simulation_progress=SimulationProgress())


@_handles(ActionType.SET_SIMULATION_TIME, int, float)
def _set_simulation_time(state: MissionState, seconds: float) -> MissionState:
    if not _is_number(seconds) or seconds < 0:
        return state
    return _update(state, simulation_time=float(seconds))


@_handles(ActionType.SET_SIMULATION_SPEED, int, float)
def _set_simulation_speed(state: MissionState, multiplier: float) -> MissionState:
    if not _is_number(multiplier) or multiplier <= 0:
        logger.warning("Ignoring non-positive simulation speed %r", multiplier)
        return state
    return _update(state, simulation_speed=float(multiplier))


@_handles(ActionType.SET_SIMULATION_PROGRESS, SimulationProgress)
def _set_simulation_progress(state: MissionState, progress: SimulationProgress) -> MissionState:
    return _update(state, simulation_progress=progress)


@_handles(ActionType.SET_LIVE_MODE, bool)
def _set_live_mode(state: MissionState, live: bool) -> MissionState:
    if live:
        return _update(state, is_live=True, is_simulating=False, simulation_progress=SimulationProgress())
    return _update(state, is_live=False)


# ---------------------------------------------------------------------------
# Polygon drawing
# ---------------------------------------------------------------------------


def _polygon_reset() -> dict[str, Any]:
    return {"drawing_mode": None, "polygon_points": (), "polygon_preview_point": None}


@_handles(ActionType.START_POLYGON_DRAWING)
def _start_polygon_drawing(state: MissionState, _: Any) -> MissionState:
    return _update(
        state,
        drawing_mode=DrawingMode.POLYGON,
        polygon_points=(),
        polygon_preview_point=None,
        selected_path_segment_id=None,
        selected_waypoint_id=None,
    )


@_handles(ActionType.ADD_POLYGON_POINT, LocalCoord)
def _add_polygon_point(state: MissionState, point: LocalCoord) -> MissionState:
    if state.drawing_mode != DrawingMode.POLYGON:
        return state
    return state.model_copy(update={"polygon_points": (*state.polygon_points, point)})


@_handles(ActionType.UPDATE_POLYGON_PREVIEW_POINT, LocalCoord, _NONE)
def _update_polygon_preview_point(state: MissionState, point: LocalCoord | None) -> MissionState:
    if state.drawing_mode != DrawingMode.POLYGON:
        return state
    return _update(state, polygon_preview_point=point)


def _polygon_vertices(points: tuple[LocalCoord, ...]) -> tuple[LocalCoord, ...]:
    """Drop a final click that lands on the first vertex; the ring is closed explicitly."""
    if len(points) > 3:
        first, last = points[0], points[-1]
        if math.hypot(last.x - first.x, last.y - first.y) < POLYGON_CLOSING_THRESHOLD_METERS:
            return points[:-1]
    return points


@_handles(ActionType.COMPLETE_POLYGON_DRAWING)
def _complete_polygon_drawing(state: MissionState, _: Any) -> MissionState:
    if state.drawing_mode != DrawingMode.POLYGON:
        return state

    mission = state.current_mission
    vertices = _polygon_vertices(state.polygon_points)
    if mission is None or len(vertices) < 3:
        logger.info("Discarding polygon with %d vertices", len(vertices))
        return state.model_copy(update=_polygon_reset())

    outline_camera = CameraParams(fov=0, aspect_ratio=1, near=0, far=0)
    waypoints = [
        Waypoint(altitude=0.0, alt_reference=AltitudeReference.RELATIVE, local=vertex, camera=outline_camera)
        for vertex in vertices
    ]
    waypoints.append(waypoints[0].model_copy(update={"id": generate_id()}))

    segment = PathSegment(type=PathType.POLYGON, waypoints=tuple(waypoints))
    return _with_mission(
        state,
        mission.model_copy(update={"path_segments": (*mission.path_segments, segment)}),
        selected_path_segment_id=segment.id,
        **_polygon_reset(),
    )


@_handles(ActionType.CANCEL_POLYGON_DRAWING)
def _cancel_polygon_drawing(state: MissionState, _: Any) -> MissionState:
    return _update(state, **_polygon_reset())


# ---------------------------------------------------------------------------
# UI flags
# ---------------------------------------------------------------------------


@_handles(ActionType.SET_VIEW_MODE, ViewMode)
def _set_view_mode(state: MissionState, mode: ViewMode) -> MissionState:
    return _update(state, view_mode=mode)


@_handles(ActionType.SET_EDITING, bool)
def _set_editing(state: MissionState, editing: bool) -> MissionState:
    return _update(state, is_editing=editing)


@_handles(ActionType.TOGGLE_DRONE_VISIBILITY)
def _toggle_drone_visibility(state: MissionState, _: Any) -> MissionState:
    return state.model_copy(update={"is_drone_visible": not state.is_drone_visible})


@_handles(ActionType.TOGGLE_CAMERA_FRUSTUM_VISIBILITY)
def _toggle_camera_frustum_visibility(state: MissionState, _: Any) -> MissionState:
    return state.model_copy(update={"is_camera_frustum_visible": not state.is_camera_frustum_visible})


@_handles(ActionType.SET_ACTIVE_CONTROL_PANE, str)
def _set_active_control_pane(state: MissionState, pane: str) -> MissionState:
    try:
        control_pane = ControlPane(pane)
    except ValueError:
        logger.warning("Invalid control pane value: %s", pane)
        return state
    return _update(state, active_control_pane=control_pane)


# ---------------------------------------------------------------------------
# Hardware
# ---------------------------------------------------------------------------


@_handles(ActionType.SET_HARDWARE, Mapping)
def _set_hardware(state: MissionState, updates: Mapping[str, Any]) -> MissionState:
    hardware = configure_hardware(state.hardware, updates)
    if hardware == state.hardware:
        return state
    return _with_hardware(state, hardware)


@_handles(ActionType.UPDATE_HARDWARE_FIELD, HardwareFieldUpdate)
def _update_hardware_field(state: MissionState, update: HardwareFieldUpdate) -> MissionState:
    if state.hardware is None:
        logger.warning("Cannot update hardware field %s before hardware is set", update.field)
        return state

    hardware = apply_field_update(state.hardware, update.field, update.value)
    if hardware is state.hardware:
        return state
    return _with_hardware(state, hardware)
