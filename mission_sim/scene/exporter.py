"""GeoJSON export of scene-builder objects."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from mission_sim.exceptions import ValidationError
from mission_sim.mission.models import SceneObject, SceneObjectType
from mission_sim.scene.objects import UI_SOURCE

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "scene_objects.geojson"


def _is_exportable(scene_object: SceneObject) -> bool:
    return scene_object.source == UI_SOURCE or scene_object.type == SceneObjectType.BOX


def _box_feature(box: SceneObject) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [box.position.x, box.position.y]},
        "properties": {
            "id": box.id,
            "type": str(box.type),
            "width": box.width,
            "length": box.length,
            "height": box.height,
            "color": box.color,
            "positionZ": box.position.z,
            "createdAt": box.created_at,
            "source": box.source,
        },
    }


def export_scene_geojson(objects: Iterable[SceneObject]) -> dict[str, Any]:
    """Build a FeatureCollection with one Point feature per box.

    Objects created in the scene builder, and boxes from any source, are
    exportable; only boxes become features. Points carry local ENU x/y in
    meters, the elevation goes to the ``positionZ`` property.

    Raises:
        ValidationError: If no object is exportable.
    """
    exportable = [obj for obj in objects if _is_exportable(obj)]
    if not exportable:
        raise ValidationError("No objects created via UI to export")

    features = [_box_feature(obj) for obj in exportable if obj.type == SceneObjectType.BOX]
    logger.info("Exporting %d features from %d scene objects", len(features), len(exportable))
    return {"type": "FeatureCollection", "features": features}


def write_scene_geojson(objects: Iterable[SceneObject], path: Path | str) -> Path:
    """Export ``objects`` and write them to ``path`` as indented JSON.

    A directory path receives ``scene_objects.geojson``. Nothing is written
    when the export fails.

    Returns:
        The file written.

    Raises:
        ValidationError: If no object is exportable.
    """
    collection = export_scene_geojson(objects)

    target = Path(path)
    if target.is_dir():
        target = target / DEFAULT_EXPORT_FILENAME
    target.write_text(json.dumps(collection, indent=2), encoding="utf-8")

    logger.info("Wrote scene export to %s", target)
    return target
