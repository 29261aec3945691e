"""Tests for local coordinates and the ENU <-> engine mapping."""

import math

import pytest
from pydantic import ValidationError

from mission_sim.geometry.coordinates import (
    EngineCoord,
    LocalCoord,
    distance,
    engine_to_enu,
    enu_path_to_engine,
    enu_to_engine,
    heading_degrees,
    lerp,
    validate_number,
)

_SAMPLE_POINTS = [
    LocalCoord(x=0, y=0, z=0),
    LocalCoord(x=1.5, y=-2.25, z=3.0),
    LocalCoord(x=-287.0, y=347.0, z=12.0),
    LocalCoord(x=1e7, y=-1e7, z=0.001),
    LocalCoord(x=-0.0, y=1e-9, z=-42.0),
]


class TestEnuToEngine:
    def test_north_maps_to_negative_z(self):
        assert enu_to_engine(LocalCoord(y=10)) == EngineCoord(x=0, y=0, z=-10)

    def test_up_maps_to_engine_y(self):
        assert enu_to_engine(LocalCoord(z=5)) == EngineCoord(x=0, y=5, z=0)

    def test_east_is_unchanged(self):
        assert enu_to_engine(LocalCoord(x=3)) == EngineCoord(x=3, y=0, z=0)

    def test_general_mapping(self):
        assert enu_to_engine(LocalCoord(x=1, y=2, z=3)) == EngineCoord(x=1, y=3, z=-2)


class TestEngineToEnu:
    def test_general_mapping(self):
        assert engine_to_enu(EngineCoord(x=1, y=3, z=-2)) == LocalCoord(x=1, y=2, z=3)

    @pytest.mark.parametrize("point", _SAMPLE_POINTS)
    def test_round_trip(self, point):
        restored = engine_to_enu(enu_to_engine(point))
        assert restored.x == pytest.approx(point.x, abs=1e-6)
        assert restored.y == pytest.approx(point.y, abs=1e-6)
        assert restored.z == pytest.approx(point.z, abs=1e-6)


class TestEnuPathToEngine:
    def test_preserves_order_and_length(self):
        path = enu_path_to_engine(_SAMPLE_POINTS)
        assert len(path) == len(_SAMPLE_POINTS)
        assert path[2] == enu_to_engine(_SAMPLE_POINTS[2])

    def test_empty_path(self):
        assert enu_path_to_engine([]) == []

    def test_accepts_generators(self):
        path = enu_path_to_engine(LocalCoord(x=i) for i in range(3))
        assert [point.x for point in path] == [0, 1, 2]


class TestLocalCoord:
    def test_is_frozen(self):
        point = LocalCoord(x=1)
        with pytest.raises(ValidationError):
            point.x = 2

    def test_offset_returns_new_value(self):
        point = LocalCoord(x=1, y=2, z=3)
        moved = point.offset(dz=0.5)
        assert moved == LocalCoord(x=1, y=2, z=3.5)
        assert point.z == 3

    def test_relative_to(self):
        assert LocalCoord(x=5, y=5, z=5).relative_to(LocalCoord(x=1, y=2, z=3)) == LocalCoord(x=4, y=3, z=2)


class TestValidateNumber:
    def test_finite_value_passes_through(self):
        assert validate_number(3.5) == 3.5

    def test_nan_replaced(self):
        assert validate_number(math.nan, default=1.0) == 1.0

    def test_infinity_replaced(self):
        assert validate_number(-math.inf) == 0.0


class TestVectorHelpers:
    def test_distance(self):
        assert distance(LocalCoord(), LocalCoord(x=3, y=4)) == pytest.approx(5.0)

    def test_lerp_endpoints(self):
        start, end = LocalCoord(x=0, y=0, z=0), LocalCoord(x=10, y=-10, z=4)
        assert lerp(start, end, 0.0) == start
        assert lerp(start, end, 1.0) == end

    def test_lerp_midpoint(self):
        assert lerp(LocalCoord(), LocalCoord(x=10, y=-10, z=4), 0.5) == LocalCoord(x=5, y=-5, z=2)


class TestHeadingDegrees:
    @pytest.mark.parametrize(
        ("dx", "dy", "expected"),
        [
            (0, 1, 0.0),
            (1, 0, 90.0),
            (0, -1, 180.0),
            (-1, 0, 270.0),
            (1, 1, 45.0),
        ],
    )
    def test_compass_directions(self, dx, dy, expected):
        assert heading_degrees(LocalCoord(), LocalCoord(x=dx, y=dy)) == pytest.approx(expected)

    def test_ignores_vertical_component(self):
        assert heading_degrees(LocalCoord(), LocalCoord(x=1, z=100)) == pytest.approx(90.0)

    @pytest.mark.parametrize("dx", [-1e-15, -1e-300, -5.0, 0.0])
    def test_always_in_range(self, dx):
        heading = heading_degrees(LocalCoord(), LocalCoord(x=dx, y=1))
        assert 0.0 <= heading < 360.0
