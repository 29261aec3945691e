"""Tests for default mission content."""

import pytest

from mission_sim.geometry.coordinates import LocalCoord
from mission_sim.mission.defaults import (
    DEV_GCP_CENTER,
    DEV_REGION,
    GCP_SIDE_LENGTH_METERS,
    create_default_gcps,
    create_dev_mission,
)


class TestCreateDefaultGcps:
    def test_three_named_points(self):
        gcps = create_default_gcps(LocalCoord())
        assert [gcp.name for gcp in gcps] == ["GCP-A", "GCP-B", "GCP-C"]

    def test_l_layout_around_center(self):
        center = LocalCoord(x=10, y=20, z=3)
        gcp_a, gcp_b, gcp_c = create_default_gcps(center)
        assert gcp_a.local == center
        assert gcp_b.local == LocalCoord(x=10 + GCP_SIDE_LENGTH_METERS, y=20, z=3)
        assert gcp_c.local == LocalCoord(x=10, y=20 + GCP_SIDE_LENGTH_METERS, z=3)

    def test_side_length_is_twenty_feet(self):
        assert GCP_SIDE_LENGTH_METERS == pytest.approx(6.096)

    def test_custom_side_length(self):
        _, gcp_b, _ = create_default_gcps(LocalCoord(), side_length=2.0)
        assert gcp_b.local.x == 2.0

    def test_center_is_highlighted(self):
        gcp_a, gcp_b, _ = create_default_gcps(LocalCoord())
        assert gcp_a.color != gcp_b.color
        assert gcp_a.size > gcp_b.size

    def test_unique_ids(self):
        gcps = create_default_gcps(LocalCoord())
        assert len({gcp.id for gcp in gcps}) == 3


class TestCreateDevMission:
    def test_fixed_id(self):
        assert create_dev_mission().id == "dev-mission-001"

    def test_no_takeoff_point(self):
        assert create_dev_mission().takeoff_point is None

    def test_gcps_at_dev_center(self):
        mission = create_dev_mission()
        assert mission.gcps[0].local == DEV_GCP_CENTER

    def test_origin_is_region_center(self):
        mission = create_dev_mission()
        assert mission.region == DEV_REGION
        assert mission.local_origin == DEV_REGION.center

    def test_defaults(self):
        mission = create_dev_mission()
        assert mission.default_altitude == 50.0
        assert mission.default_speed == 5.0
        assert mission.path_segments == ()
