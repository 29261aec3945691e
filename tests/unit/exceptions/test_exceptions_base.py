"""Tests for the base exception class."""

from mission_sim.exceptions.base import MissionSimError
from mission_sim.exceptions.errors import SimulationError, ValidationError


class TestMissionSimError:
    def test_default_error_code(self):
        error = MissionSimError("something failed")
        assert error.error_code == "INTERNAL_ERROR"

    def test_message_attribute(self):
        error = MissionSimError("test message")
        assert error.message == "test message"

    def test_empty_context_by_default(self):
        assert MissionSimError("test").context == {}

    def test_to_dict(self):
        error = MissionSimError("test message", context={"key": "value"})
        assert error.to_dict() == {
            "error_code": "INTERNAL_ERROR",
            "message": "test message",
            "context": {"key": "value"},
        }

    def test_to_log_dict(self):
        result = SimulationError("stalled", context={"dt": -1}).to_log_dict()
        assert result["error_code"] == "SIMULATION_ERROR"
        assert result["error_message"] == "stalled"
        assert result["error_context"] == {"dt": -1}
        assert result["exception_type"] == "SimulationError"

    def test_str_without_context(self):
        assert str(MissionSimError("test message")) == "test message"

    def test_str_with_context(self):
        error = MissionSimError("test", context={"id": "123"})
        assert "test" in str(error)
        assert "123" in str(error)

    def test_repr(self):
        error = MissionSimError("test")
        assert repr(error) == "MissionSimError(message='test', error_code='INTERNAL_ERROR', context={})"

    def test_is_exception(self):
        assert isinstance(MissionSimError("test"), Exception)


class TestErrorRegistry:
    def test_lookup_registered_code(self):
        assert MissionSimError.get_by_error_code("VALIDATION_ERROR") is ValidationError

    def test_lookup_unknown_code(self):
        assert MissionSimError.get_by_error_code("NO_SUCH_CODE") is None
