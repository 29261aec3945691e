"""Local coordinate types and the ENU <-> engine frame mapping.

The mission model stores positions East-North-Up relative to the takeoff
origin. The 3D engine is Y-up with -Z pointing north, so:

    ENU (x, y, z)    -> engine (x, z, -y)
    engine (x, y, z) -> ENU (x, -z, y)
"""

import math
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict


class LocalCoord(BaseModel):
    """Position in meters, East-North-Up, relative to the mission origin."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "LocalCoord":
        """Return a new coordinate shifted by the given deltas."""
        return LocalCoord(x=self.x + dx, y=self.y + dy, z=self.z + dz)

    def relative_to(self, origin: "LocalCoord") -> "LocalCoord":
        """Return this coordinate expressed relative to ``origin``."""
        return LocalCoord(x=self.x - origin.x, y=self.y - origin.y, z=self.z - origin.z)


class EngineCoord(BaseModel):
    """Position in the rendering engine's Y-up frame."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


def enu_to_engine(coord: LocalCoord) -> EngineCoord:
    """Map an ENU coordinate into the engine frame."""
    return EngineCoord(x=coord.x, y=coord.z, z=-coord.y)


def engine_to_enu(coord: EngineCoord) -> LocalCoord:
    """Map an engine-frame coordinate back to ENU."""
    return LocalCoord(x=coord.x, y=-coord.z, z=coord.y)


def enu_path_to_engine(points: Iterable[LocalCoord]) -> list[EngineCoord]:
    """Map a sequence of ENU points into the engine frame, preserving order."""
    return [enu_to_engine(point) for point in points]


def validate_number(value: float, default: float = 0.0) -> float:
    """Return ``value``, or ``default`` when it is NaN or infinite."""
    if math.isnan(value) or math.isinf(value):
        return default
    return value


def distance(start: LocalCoord, end: LocalCoord) -> float:
    """Straight-line distance between two points in meters."""
    return math.dist((start.x, start.y, start.z), (end.x, end.y, end.z))


def lerp(start: LocalCoord, end: LocalCoord, fraction: float) -> LocalCoord:
    """Linear blend from ``start`` (fraction 0) to ``end`` (fraction 1)."""
    return LocalCoord(
        x=start.x + (end.x - start.x) * fraction,
        y=start.y + (end.y - start.y) * fraction,
        z=start.z + (end.z - start.z) * fraction,
    )


def heading_degrees(start: LocalCoord, end: LocalCoord) -> float:
    """Compass heading of the horizontal direction from ``start`` to ``end``.

    0 is north, 90 is east. The result is always in [0, 360).
    """
    bearing = math.degrees(math.atan2(end.x - start.x, end.y - start.y))
    heading = (bearing + 360.0) % 360.0
    # float rounding of tiny negative bearings can land exactly on 360.0
    return 0.0 if heading >= 360.0 else heading
