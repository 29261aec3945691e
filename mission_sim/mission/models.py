"""Mission domain models.

All models are frozen: the reducer derives new versions with ``model_copy``
and never mutates a model another state version can see. Sequences are
tuples for the same reason.
"""

from datetime import UTC, datetime
from enum import StrEnum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from mission_sim.geometry.coordinates import LocalCoord
from mission_sim.geometry.geodesy import LatLng


def generate_id() -> str:
    """Return a new random entity id."""
    return str(uuid4())


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(UTC)


class AltitudeReference(StrEnum):
    """Reference surface for a waypoint altitude."""

    TERRAIN = "TERRAIN"
    SEA_LEVEL = "SEA_LEVEL"
    RELATIVE = "RELATIVE"


class WaypointActionType(StrEnum):
    """Payload actions performed on arrival at a waypoint."""

    TAKE_PHOTO = "TAKE_PHOTO"
    START_VIDEO = "START_VIDEO"
    STOP_VIDEO = "STOP_VIDEO"
    START_RECORDING = "START_RECORDING"
    STOP_RECORDING = "STOP_RECORDING"
    ROTATE_GIMBAL = "ROTATE_GIMBAL"
    CUSTOM_PAYLOAD = "CUSTOM_PAYLOAD"


class PathType(StrEnum):
    """Shape of a path segment."""

    STRAIGHT = "STRAIGHT"
    BEZIER = "BEZIER"
    ORBIT = "ORBIT"
    GRID = "GRID"
    POLYGON = "POLYGON"
    PERIMETER = "PERIMETER"
    CUSTOM = "CUSTOM"


class EndAction(StrEnum):
    """Behaviour on link loss or at mission end."""

    RTL = "RTL"
    LAND = "LAND"
    HOLD = "HOLD"


class SceneObjectType(StrEnum):
    """Kinds of objects placed in the local scene."""

    BOX = "box"
    MODEL = "model"
    AREA = "area"
    SHIP = "ship"
    DOCK = "dock"


class SceneObjectClass(StrEnum):
    """Planning classification of a scene object."""

    OBSTACLE = "obstacle"
    NEUTRAL = "neutral"
    ASSET = "asset"


class CameraParams(BaseModel):
    """Camera orientation and projection at a waypoint, angles in degrees."""

    model_config = ConfigDict(frozen=True)

    fov: float = Field(default=60.0, ge=0)
    aspect_ratio: float = Field(default=1.5, ge=0)
    near: float = Field(default=0.1, ge=0)
    far: float = Field(default=1000.0, ge=0)
    heading: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0


class WaypointAction(BaseModel):
    """An action with free-form parameters."""

    model_config = ConfigDict(frozen=True)

    type: WaypointActionType
    params: dict[str, str | float | int | bool] = Field(default_factory=dict)


class Waypoint(BaseModel):
    """Single point in a path segment."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    lat: float = Field(default=0.0, ge=-90, le=90)
    lng: float = Field(default=0.0, ge=-180, le=180)
    altitude: float = 0.0
    alt_reference: AltitudeReference = AltitudeReference.RELATIVE
    local: LocalCoord | None = None
    camera: CameraParams = Field(default_factory=CameraParams)
    speed: float | None = Field(default=None, gt=0)
    hold_time: float | None = Field(default=None, ge=0)
    actions: tuple[WaypointAction, ...] = ()


class PathSegment(BaseModel):
    """Ordered waypoints flown as one unit."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    type: PathType = PathType.STRAIGHT
    waypoints: tuple[Waypoint, ...] = ()
    control_points: tuple[LocalCoord, ...] = ()
    speed: float | None = Field(default=None, gt=0)


class GCP(BaseModel):
    """Ground control point anchoring the local scene."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    name: str
    lat: float = 0.0
    lng: float = 0.0
    altitude: float = 0.0
    local: LocalCoord
    accuracy: float | None = Field(default=None, ge=0)
    color: str | None = None
    size: float | None = Field(default=None, gt=0)


class SafetyParams(BaseModel):
    """Return-to-launch and end-of-mission behaviour."""

    model_config = ConfigDict(frozen=True)

    rtl_altitude: float = Field(default=50.0, ge=0)
    climb_speed: float = Field(default=2.5, gt=0)
    failsafe_action: EndAction = EndAction.RTL
    mission_end_action: EndAction = EndAction.RTL
    climb_to_altitude: float = Field(default=40.0, ge=0)


class RegionBounds(BaseModel):
    """Bounding box of a region in degrees."""

    model_config = ConfigDict(frozen=True)

    north: float
    south: float
    east: float
    west: float


class Region(BaseModel):
    """Geographic area a mission is planned in."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    name: str
    bounds: RegionBounds
    center: LatLng
    zoom_level: int | None = None


class Mission(BaseModel):
    """Aggregate root of a mission plan."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    name: str
    description: str = ""
    region: Region
    path_segments: tuple[PathSegment, ...] = ()
    gcps: tuple[GCP, ...] = ()
    default_altitude: float = Field(default=50.0, ge=0)
    default_speed: float = Field(default=5.0, gt=0)
    local_origin: LatLng
    takeoff_point: LocalCoord | None = None
    safety_params: SafetyParams = Field(default_factory=SafetyParams)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def find_segment(self, segment_id: str) -> PathSegment | None:
        """Return the segment with ``segment_id``, if any."""
        return next((segment for segment in self.path_segments if segment.id == segment_id), None)


class SceneObject(BaseModel):
    """Object placed in the local scene by the builder or by import."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    type: SceneObjectType
    object_class: SceneObjectClass | None = None
    width: float | None = Field(default=None, gt=0)
    length: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    color: str | None = None
    position: LocalCoord = Field(default_factory=LocalCoord)
    rotation: LocalCoord | None = None
    scale: LocalCoord | None = None
    url: str | None = None
    points: tuple[LocalCoord, ...] = ()
    height_offset: float | None = None
    created_at: str = Field(default_factory=lambda: utc_now().isoformat())
    source: str = "build-scene-ui"
