"""Tests for the hardware dependency cascade."""

import pytest

from mission_sim.hardware.catalog import calculate_field_of_view
from mission_sim.hardware.models import DEFAULT_FOCUS_DISTANCE_METERS, HardwareField, HardwareState, SensorType
from mission_sim.hardware.rules import DEPENDENCY_GRAPH, apply_field_update, configure_hardware


def _make_configured(**overrides):
    """Create a Sony body with the 50mm lens at f/4."""
    updates = {"camera": "sony-a7r-iv", "lens": "sony-e-50mm-f1.8", "f_stop": 4.0}
    updates.update(overrides)
    return configure_hardware(None, updates)


class TestDependencyGraph:
    def test_camera_drives_lens(self):
        assert DEPENDENCY_GRAPH[HardwareField.CAMERA] == (HardwareField.LENS,)

    def test_lens_drives_f_stop(self):
        assert DEPENDENCY_GRAPH[HardwareField.LENS] == (HardwareField.F_STOP,)


class TestConfigureHardware:
    def test_empty_configuration(self):
        hardware = configure_hardware(None, {})
        assert hardware.camera is None
        assert hardware.f_stop is None
        assert hardware.calculated_fov is None
        assert hardware.focus_distance == DEFAULT_FOCUS_DISTANCE_METERS

    def test_resolves_details(self):
        hardware = _make_configured(drone="freefly-astro")
        assert hardware.camera_details.id == "sony-a7r-iv"
        assert hardware.lens_details.id == "sony-e-50mm-f1.8"
        assert hardware.drone_details.name == "Freefly Astro"

    def test_explicit_f_stop_survives(self):
        assert _make_configured().f_stop == 4.0

    def test_missing_f_stop_defaults_to_lowest(self):
        hardware = configure_hardware(None, {"camera": "sony-a7r-iv", "lens": "sony-e-50mm-f1.8"})
        assert hardware.f_stop == 1.8

    def test_computes_field_of_view(self):
        hardware = _make_configured()
        assert hardware.calculated_fov == pytest.approx(calculate_field_of_view(50, 35.7))

    def test_frustum_ready(self):
        assert _make_configured().frustum_ready is True

    def test_ignores_unknown_fields(self):
        hardware = configure_hardware(None, {"camera": "sony-a7r-iv", "paint": "red"})
        assert hardware.camera == "sony-a7r-iv"

    def test_merges_into_existing(self):
        hardware = configure_hardware(_make_configured(), {"iso": "200"})
        assert hardware.iso == 200
        assert hardware.lens == "sony-e-50mm-f1.8"


class TestCameraChange:
    def test_clears_lens_chain(self):
        hardware = apply_field_update(_make_configured(), HardwareField.CAMERA, "sony-a6600")
        assert hardware.camera == "sony-a6600"
        assert hardware.lens is None
        assert hardware.lens_details is None
        assert hardware.available_f_stops == ()
        assert hardware.f_stop is None

    def test_clears_field_of_view(self):
        hardware = apply_field_update(_make_configured(), HardwareField.CAMERA, "sony-a6600")
        assert hardware.calculated_fov is None
        assert hardware.frustum_ready is False


class TestLensChange:
    def test_keeps_valid_f_stop(self):
        hardware = apply_field_update(_make_configured(), HardwareField.LENS, "sony-e-24-70mm-f2.8-gm")
        assert hardware.f_stop == 4.0
        assert hardware.available_f_stops[0] == 2.8

    def test_resets_invalid_f_stop_to_lowest(self):
        hardware = apply_field_update(_make_configured(), HardwareField.LENS, "phaseone-rsm-80mm")
        assert hardware.f_stop == 5.6

    def test_zoom_uses_wide_end_for_field_of_view(self):
        hardware = apply_field_update(_make_configured(), HardwareField.LENS, "sony-e-24-70mm-f2.8-gm")
        assert hardware.calculated_fov == pytest.approx(calculate_field_of_view(24, 35.7))

    def test_clearing_lens_clears_f_stop(self):
        hardware = apply_field_update(_make_configured(), HardwareField.LENS, "")
        assert hardware.lens is None
        assert hardware.f_stop is None
        assert hardware.calculated_fov is None


class TestScalarFields:
    def test_f_stop_string_is_parsed(self):
        hardware = apply_field_update(_make_configured(), HardwareField.F_STOP, "5.6")
        assert hardware.f_stop == 5.6

    def test_unchanged_value_returns_same_object(self):
        hardware = _make_configured()
        assert apply_field_update(hardware, HardwareField.F_STOP, 4.0) is hardware

    def test_invalid_number_returns_same_object(self):
        hardware = _make_configured()
        assert apply_field_update(hardware, HardwareField.ISO, "fast") is hardware

    def test_invalid_focus_distance_keeps_current(self):
        hardware = _make_configured()
        assert apply_field_update(hardware, HardwareField.FOCUS_DISTANCE, "far") is hardware

    def test_gimbal_pitch(self):
        hardware = apply_field_update(HardwareState(), HardwareField.GIMBAL_PITCH, "-90")
        assert hardware.gimbal_pitch == -90.0

    def test_shutter_speed_kept_as_text(self):
        hardware = apply_field_update(HardwareState(), HardwareField.SHUTTER_SPEED, "1/1000")
        assert hardware.shutter_speed == "1/1000"

    def test_sensor_type_text_becomes_enum(self):
        hardware = apply_field_update(HardwareState(), HardwareField.SENSOR_TYPE, "Full Frame")
        assert hardware.sensor_type is SensorType.FULL_FRAME

    def test_unknown_sensor_type_returns_same_object(self):
        hardware = _make_configured()
        assert apply_field_update(hardware, HardwareField.SENSOR_TYPE, "Super 35") is hardware

    def test_empty_sensor_type_clears_it(self):
        hardware = apply_field_update(HardwareState(sensor_type=SensorType.APS_C), HardwareField.SENSOR_TYPE, "")
        assert hardware.sensor_type is None
