"""Tests for logging context management."""

from mission_sim.logging.context import (
    clear_context,
    generate_run_id,
    get_extra_context,
    get_run_id,
    set_extra_context,
    set_run_id,
)


class TestRunId:
    def test_default_empty(self):
        clear_context()
        assert get_run_id() == ""

    def test_set_and_get(self):
        set_run_id("run-123")
        assert get_run_id() == "run-123"
        clear_context()

    def test_generate_sets_short_hex_id(self):
        result = generate_run_id()
        assert len(result) == 12
        int(result, 16)
        assert get_run_id() == result
        clear_context()

    def test_generate_is_unique(self):
        assert generate_run_id() != generate_run_id()
        clear_context()


class TestExtraContext:
    def test_default_empty(self):
        clear_context()
        assert get_extra_context() == {}

    def test_set_and_get(self):
        clear_context()
        set_extra_context(mission_id="dev-mission-001")
        assert get_extra_context()["mission_id"] == "dev-mission-001"
        clear_context()

    def test_accumulates_values(self):
        clear_context()
        set_extra_context(mission_id="m-1")
        set_extra_context(segment_id="s-1")
        assert get_extra_context() == {"mission_id": "m-1", "segment_id": "s-1"}
        clear_context()

    def test_returns_copy(self):
        clear_context()
        set_extra_context(key="value")
        first = get_extra_context()
        first["key"] = "changed"
        assert get_extra_context()["key"] == "value"
        clear_context()


class TestClearContext:
    def test_clears_run_id_and_extras(self):
        set_run_id("run-1")
        set_extra_context(mission_id="m-1")
        clear_context()
        assert get_run_id() == ""
        assert get_extra_context() == {}
