"""Tests for simulator configuration."""

import pytest
from pydantic import ValidationError

from mission_sim.config import SimulatorSettings, get_settings


class TestSimulatorSettingsDefaults:
    def test_default_fallback_speed(self):
        settings = SimulatorSettings()
        assert settings.fallback_speed_mps == 5.0

    def test_default_leg_epsilon(self):
        settings = SimulatorSettings()
        assert settings.leg_epsilon_meters == 0.01

    def test_default_max_camera_transition(self):
        settings = SimulatorSettings()
        assert settings.max_camera_transition_seconds == 2.0

    def test_default_path_extension(self):
        settings = SimulatorSettings()
        assert settings.default_path_extension_meters == 10.0

    def test_default_frame_interval_is_sixty_hz(self):
        settings = SimulatorSettings()
        assert settings.frame_interval_seconds == pytest.approx(1 / 60)


class TestSimulatorSettingsFromEnvironment:
    def test_custom_fallback_speed(self, monkeypatch):
        monkeypatch.setenv("MISSION_SIM_FALLBACK_SPEED_MPS", "12.5")
        settings = SimulatorSettings()
        assert settings.fallback_speed_mps == 12.5

    def test_custom_max_frames(self, monkeypatch):
        monkeypatch.setenv("MISSION_SIM_MAX_FRAMES", "250")
        settings = SimulatorSettings()
        assert settings.max_frames == 250

    def test_prefix_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("mission_sim_leg_epsilon_meters", "0.5")
        settings = SimulatorSettings()
        assert settings.leg_epsilon_meters == 0.5


class TestSimulatorSettingsValidation:
    def test_zero_fallback_speed_rejected(self):
        with pytest.raises(ValidationError):
            SimulatorSettings(fallback_speed_mps=0)

    def test_negative_epsilon_rejected(self):
        with pytest.raises(ValidationError):
            SimulatorSettings(leg_epsilon_meters=-1)

    def test_zero_max_frames_rejected(self):
        with pytest.raises(ValidationError):
            SimulatorSettings(max_frames=0)

    def test_zero_frame_interval_rejected(self):
        with pytest.raises(ValidationError):
            SimulatorSettings(frame_interval_seconds=0)

    def test_log_level_belongs_to_logging_config(self, monkeypatch):
        monkeypatch.setenv("MISSION_SIM_LOG_LEVEL", "DEBUG")
        settings = SimulatorSettings()
        assert not hasattr(settings, "log_level")


class TestGetSettings:
    def test_returns_settings_instance(self):
        assert isinstance(get_settings(), SimulatorSettings)

    def test_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads_environment(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("MISSION_SIM_FALLBACK_SPEED_MPS", "7")
        get_settings.cache_clear()
        assert get_settings().fallback_speed_mps == 7.0
