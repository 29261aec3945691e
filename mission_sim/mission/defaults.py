"""Default mission content: GCP layout, development region and mission."""

from mission_sim.geometry.coordinates import LocalCoord
from mission_sim.geometry.geodesy import LatLng
from mission_sim.geometry.units import feet_to_meters
from mission_sim.mission.models import (
    GCP,
    Mission,
    Region,
    RegionBounds,
    SafetyParams,
)

GCP_SIDE_LENGTH_METERS: float = feet_to_meters(20.0)
DEFAULT_MISSION_ALTITUDE_METERS: float = 50.0
DEFAULT_MISSION_SPEED_MPS: float = 5.0

_CENTER_GCP_COLOR = "#ff0000"
_AXIS_GCP_COLOR = "#00ff00"


def create_default_gcps(center: LocalCoord, side_length: float = GCP_SIDE_LENGTH_METERS) -> tuple[GCP, ...]:
    """Lay out three GCPs in an L around ``center``.

    GCP-A sits on the center, GCP-B ``side_length`` east of it and GCP-C
    ``side_length`` north of it, all at the center's height.
    """
    return (
        GCP(name="GCP-A", local=center, color=_CENTER_GCP_COLOR, size=1.5),
        GCP(name="GCP-B", local=center.offset(dx=side_length), color=_AXIS_GCP_COLOR, size=1.0),
        GCP(name="GCP-C", local=center.offset(dy=side_length), color=_AXIS_GCP_COLOR, size=1.0),
    )


DEV_REGION = Region(
    id="dev-region-01",
    name="Dev Test Area (SF)",
    center=LatLng(latitude=37.7749, longitude=-122.4194),
    bounds=RegionBounds(north=37.8, south=37.7, east=-122.4, west=-122.5),
)

DEV_GCP_CENTER = LocalCoord(x=-287.0, y=347.0, z=12.0)


def create_dev_mission() -> Mission:
    """Build the mission a fresh store starts with.

    It has no takeoff point so the first one selected re-origins the scene.
    """
    return Mission(
        id="dev-mission-001",
        name="Default Dev Mission",
        region=DEV_REGION,
        gcps=create_default_gcps(DEV_GCP_CENTER),
        default_altitude=DEFAULT_MISSION_ALTITUDE_METERS,
        default_speed=DEFAULT_MISSION_SPEED_MPS,
        local_origin=DEV_REGION.center,
        takeoff_point=None,
        safety_params=SafetyParams(),
    )
