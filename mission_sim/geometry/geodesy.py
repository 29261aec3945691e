"""WGS84 conversions between geographic positions and the local ENU frame.

The local frame is a tangent plane at the mission's ``local_origin``:
geodetic -> ECEF -> rotate into East-North-Up at the origin.
"""

import math

from pydantic import BaseModel, ConfigDict, Field

from mission_sim.geometry.coordinates import LocalCoord

_WGS84_SEMI_MAJOR_AXIS_METERS: float = 6_378_137.0
_WGS84_FLATTENING: float = 1.0 / 298.257223563
_WGS84_ECCENTRICITY_SQUARED: float = _WGS84_FLATTENING * (2.0 - _WGS84_FLATTENING)
_GEODETIC_ITERATIONS: int = 6


class LatLng(BaseModel):
    """Geographic position in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


def _prime_vertical_radius(latitude_radians: float) -> float:
    sin_latitude = math.sin(latitude_radians)
    return _WGS84_SEMI_MAJOR_AXIS_METERS / math.sqrt(
        1.0 - _WGS84_ECCENTRICITY_SQUARED * sin_latitude * sin_latitude
    )


def _to_ecef(point: LatLng, altitude: float) -> tuple[float, float, float]:
    latitude = math.radians(point.latitude)
    longitude = math.radians(point.longitude)
    radius = _prime_vertical_radius(latitude)
    return (
        (radius + altitude) * math.cos(latitude) * math.cos(longitude),
        (radius + altitude) * math.cos(latitude) * math.sin(longitude),
        (radius * (1.0 - _WGS84_ECCENTRICITY_SQUARED) + altitude) * math.sin(latitude),
    )


def _from_ecef(x: float, y: float, z: float) -> tuple[float, float, float]:
    longitude = math.atan2(y, x)
    horizontal = math.hypot(x, y)
    latitude = math.atan2(z, horizontal * (1.0 - _WGS84_ECCENTRICITY_SQUARED))
    altitude = 0.0
    for _ in range(_GEODETIC_ITERATIONS):
        radius = _prime_vertical_radius(latitude)
        altitude = horizontal / math.cos(latitude) - radius
        latitude = math.atan2(
            z, horizontal * (1.0 - _WGS84_ECCENTRICITY_SQUARED * radius / (radius + altitude))
        )
    return math.degrees(latitude), math.degrees(longitude), altitude


def latlng_to_local(point: LatLng, origin: LatLng, altitude: float = 0.0) -> LocalCoord:
    """Convert a geographic position to ENU meters relative to ``origin``.

    Args:
        point: Position to convert.
        origin: Tangent-plane origin, assumed at zero altitude.
        altitude: Height of ``point`` above the ellipsoid in meters.

    Returns:
        The ENU offset of ``point`` from ``origin``.
    """
    origin_x, origin_y, origin_z = _to_ecef(origin, 0.0)
    point_x, point_y, point_z = _to_ecef(point, altitude)
    dx, dy, dz = point_x - origin_x, point_y - origin_y, point_z - origin_z

    sin_lat = math.sin(math.radians(origin.latitude))
    cos_lat = math.cos(math.radians(origin.latitude))
    sin_lon = math.sin(math.radians(origin.longitude))
    cos_lon = math.cos(math.radians(origin.longitude))

    return LocalCoord(
        x=-sin_lon * dx + cos_lon * dy,
        y=-sin_lat * cos_lon * dx - sin_lat * sin_lon * dy + cos_lat * dz,
        z=cos_lat * cos_lon * dx + cos_lat * sin_lon * dy + sin_lat * dz,
    )


def local_to_latlng(coord: LocalCoord, origin: LatLng) -> tuple[LatLng, float]:
    """Convert ENU meters relative to ``origin`` back to a geographic position.

    Returns:
        The position and its altitude above the ellipsoid in meters.
    """
    origin_x, origin_y, origin_z = _to_ecef(origin, 0.0)

    sin_lat = math.sin(math.radians(origin.latitude))
    cos_lat = math.cos(math.radians(origin.latitude))
    sin_lon = math.sin(math.radians(origin.longitude))
    cos_lon = math.cos(math.radians(origin.longitude))

    east, north, up = coord.x, coord.y, coord.z
    x = origin_x - sin_lon * east - sin_lat * cos_lon * north + cos_lat * cos_lon * up
    y = origin_y + cos_lon * east - sin_lat * sin_lon * north + cos_lat * sin_lon * up
    z = origin_z + cos_lat * north + sin_lat * up

    latitude, longitude, altitude = _from_ecef(x, y, z)
    return LatLng(latitude=latitude, longitude=longitude), altitude
