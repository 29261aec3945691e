"""Combined simulation path of a mission."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from mission_sim.simulation.models import PathPoint

if TYPE_CHECKING:
    from mission_sim.mission.models import Mission, PathSegment

logger = logging.getLogger(__name__)


def _segments_to_fly(mission: Mission, selected_ids: Sequence[str]) -> list[PathSegment]:
    if selected_ids:
        selected = set(selected_ids)
        return [segment for segment in mission.path_segments if segment.id in selected]
    return list(mission.path_segments[:1])


def build_simulation_path(
    mission: Mission,
    selected_segment_ids: Sequence[str] = (),
    extension_meters: float = 10.0,
) -> list[PathPoint]:
    """Build the ordered points the simulated drone flies through.

    The path starts at the takeoff point, when one is set, and continues
    through the local coordinates of every waypoint of the selected segments
    in mission order. With no selection only the first segment is flown.
    Waypoints without a local coordinate are skipped.

    A path holding nothing but the takeoff point gets a synthetic point
    ``extension_meters`` north of it so there is always a leg to fly.

    Args:
        mission: Mission to fly.
        selected_segment_ids: Segments chosen for simulation.
        extension_meters: Length of the synthetic northward leg.

    Returns:
        Path points in flight order; fewer than two means nothing to fly.
    """
    points: list[PathPoint] = []
    if mission.takeoff_point is not None:
        points.append(PathPoint(coord=mission.takeoff_point))

    for segment in _segments_to_fly(mission, selected_segment_ids):
        for waypoint in segment.waypoints:
            if waypoint.local is None:
                logger.debug("Skipping waypoint %s without local coordinates", waypoint.id)
                continue
            points.append(PathPoint(coord=waypoint.local, segment_id=segment.id, waypoint=waypoint))

    if len(points) == 1 and mission.takeoff_point is not None:
        points.append(PathPoint(coord=mission.takeoff_point.offset(dy=extension_meters)))

    return points
