"""Tests for concrete simulator errors."""

from pathlib import Path

import pytest

from mission_sim.exceptions import (
    MissionSimError,
    NotFoundError,
    SimulationError,
    UnsupportedFileError,
    ValidationError,
)


class TestValidationError:
    def test_error_code(self):
        assert ValidationError("bad").error_code == "VALIDATION_ERROR"

    def test_field_and_value_in_context(self):
        error = ValidationError("bad width", field="width", value=-1)
        assert error.context == {"field": "width", "value": -1}

    def test_merges_explicit_context(self):
        error = ValidationError("bad", field="height", context={"unit": "ft"})
        assert error.context == {"unit": "ft", "field": "height"}

    def test_is_mission_sim_error(self):
        with pytest.raises(MissionSimError):
            raise ValidationError("bad")


class TestNotFoundError:
    def test_error_code(self):
        assert NotFoundError("missing").error_code == "NOT_FOUND"

    def test_resource_info_in_context(self):
        error = NotFoundError("missing", resource_type="file", resource_id="/tmp/a.glb")
        assert error.context == {"resource_type": "file", "resource_id": "/tmp/a.glb"}


class TestUnsupportedFileError:
    def test_message_names_the_file(self):
        error = UnsupportedFileError(Path("/data/scene.obj"))
        assert error.message == "Unsupported file type: scene.obj"

    def test_context_has_lowercase_suffix(self):
        error = UnsupportedFileError(Path("SCENE.OBJ"))
        assert error.context["suffix"] == ".obj"
        assert error.context["field"] == "path"

    def test_is_validation_error(self):
        assert isinstance(UnsupportedFileError(Path("a.txt")), ValidationError)

    def test_error_code(self):
        assert UnsupportedFileError(Path("a.txt")).error_code == "UNSUPPORTED_FILE"


class TestSimulationError:
    def test_error_code(self):
        assert SimulationError("stalled").error_code == "SIMULATION_ERROR"
