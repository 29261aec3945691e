"""Import of scene files from disk."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from mission_sim.exceptions import NotFoundError, UnsupportedFileError, ValidationError
from mission_sim.geometry.coordinates import LocalCoord
from mission_sim.mission.models import SceneObject, SceneObjectType
from mission_sim.scene.objects import IMPORT_SOURCE
from mission_sim.store.actions import Action, ActionType

logger = logging.getLogger(__name__)

VECTOR_SUFFIXES: dict[str, str] = {".geojson": "GeoJSON", ".kml": "KML"}
MODEL_SUFFIXES: frozenset[str] = frozenset({".glb", ".gltf"})

Dispatch = Callable[[Action], object]


class SceneFileImporter:
    """Turns files picked in the scene builder into scene objects.

    GeoJSON and KML files are validated as non-empty and logged; their
    features do not become scene objects. glTF
    models are registered as ``model`` scene objects at the origin, referenced
    by file URI, and dispatched as ``ADD_SCENE_OBJECT``.
    """

    def __init__(self, dispatch: Dispatch) -> None:
        """Initialize the importer.

        Args:
            dispatch: Callable receiving the actions produced by an import,
                typically ``MissionStore.dispatch``.
        """
        self._dispatch = dispatch

    def import_file(self, path: Path | str) -> SceneObject | None:
        """Import one file.

        Args:
            path: File to import.

        Returns:
            The scene object dispatched, or None for files that are only read.

        Raises:
            NotFoundError: If ``path`` is not an existing file.
            UnsupportedFileError: If the file type is not handled.
            ValidationError: If a GeoJSON or KML file is empty.
        """
        path = Path(path)
        if not path.is_file():
            raise NotFoundError(f"File not found: {path}", resource_type="file", resource_id=str(path))

        suffix = path.suffix.lower()
        if suffix in VECTOR_SUFFIXES:
            self._read_vector_file(path, VECTOR_SUFFIXES[suffix])
            return None
        if suffix in MODEL_SUFFIXES:
            return self._register_model(path)
        raise UnsupportedFileError(path)

    def _read_vector_file(self, path: Path, kind: str) -> None:
        content = path.read_text(encoding="utf-8")
        if not content.strip():
            raise ValidationError("Failed to read file content.", field="path", value=str(path))
        logger.info("Read %s file %s (%d characters); contents are not applied", kind, path.name, len(content))

    def _register_model(self, path: Path) -> SceneObject:
        model = SceneObject(
            type=SceneObjectType.MODEL,
            position=LocalCoord(),
            rotation=LocalCoord(),
            url=path.resolve().as_uri(),
            source=IMPORT_SOURCE,
        )
        logger.info("Importing 3D model %s as scene object %s", path.name, model.id)
        self._dispatch(Action(type=ActionType.ADD_SCENE_OBJECT, payload=model))
        return model
