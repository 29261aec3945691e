"""Tests for log output setup and simulation run context."""

import io
import json
import logging

from mission_sim.logging.config import LogFormat, LoggingConfig, LogLevel
from mission_sim.logging.context import get_extra_context, get_run_id
from mission_sim.logging.logger import (
    PACKAGE_LOGGER,
    SIMULATION_LOGGER,
    bind_simulation_run,
    release_simulation_run,
    reset_logging,
    setup_logging,
)


class TestSetupLogging:
    def setup_method(self):
        reset_logging()

    def teardown_method(self):
        reset_logging()

    def test_installs_one_handler_on_package_logger(self):
        handler = setup_logging(stream=io.StringIO())
        assert logging.getLogger(PACKAGE_LOGGER).handlers == [handler]

    def test_leaves_root_handlers_alone(self):
        root_handlers = list(logging.getLogger().handlers)
        setup_logging(stream=io.StringIO())
        assert logging.getLogger().handlers == root_handlers

    def test_human_format_by_default(self):
        stream = io.StringIO()
        setup_logging(stream=stream)
        logging.getLogger("mission_sim.store").info("test message")
        output = stream.getvalue()
        assert "test message" in output
        assert not output.startswith("{")

    def test_json_format(self):
        stream = io.StringIO()
        setup_logging(config=LoggingConfig(log_format=LogFormat.JSON), stream=stream)
        logging.getLogger("mission_sim.store").info("test message")
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["message"] == "test message"
        assert parsed["service"] == "mission-sim"

    def test_json_format_from_environment(self, monkeypatch):
        monkeypatch.setenv("MISSION_SIM_LOG_FORMAT", "json")
        stream = io.StringIO()
        setup_logging(stream=stream)
        logging.getLogger("mission_sim.store").warning("from env")
        assert json.loads(stream.getvalue().strip())["level"] == "WARNING"

    def test_ignores_other_libraries(self):
        stream = io.StringIO()
        setup_logging(stream=stream)
        logging.getLogger("some_other_library").warning("not ours")
        assert stream.getvalue() == ""

    def test_idempotent_without_force(self):
        first = setup_logging(stream=io.StringIO())
        assert setup_logging(stream=io.StringIO()) is first
        assert logging.getLogger(PACKAGE_LOGGER).handlers == [first]

    def test_force_replaces_handler(self):
        first = setup_logging(stream=io.StringIO())
        second = setup_logging(stream=io.StringIO(), force=True)
        assert second is not first
        assert logging.getLogger(PACKAGE_LOGGER).handlers == [second]

    def test_level_applies_to_package_logger(self):
        setup_logging(config=LoggingConfig(log_level=LogLevel.ERROR), stream=io.StringIO())
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR

    def test_trace_simulation_lowers_simulation_level(self):
        stream = io.StringIO()
        config = LoggingConfig(log_level=LogLevel.WARNING, trace_simulation=True)
        setup_logging(config=config, stream=stream)

        logging.getLogger("mission_sim.simulation.stepper").debug("Flying leg 2 of 3")
        logging.getLogger("mission_sim.store").info("hidden")

        assert logging.getLogger(SIMULATION_LOGGER).level == logging.DEBUG
        assert "Flying leg 2 of 3" in stream.getvalue()
        assert "hidden" not in stream.getvalue()

    def test_records_carry_simulation_run(self):
        stream = io.StringIO()
        setup_logging(config=LoggingConfig(log_format=LogFormat.JSON), stream=stream)
        run_id = bind_simulation_run("mission-1")

        logging.getLogger("mission_sim.simulation.stepper").info("Holding")

        parsed = json.loads(stream.getvalue().strip())
        assert parsed["run_id"] == run_id
        assert parsed["mission_id"] == "mission-1"


class TestSimulationRun:
    def test_bind_sets_run_and_mission(self):
        run_id = bind_simulation_run("mission-1")
        assert get_run_id() == run_id
        assert get_extra_context() == {"mission_id": "mission-1"}

    def test_bind_replaces_previous_run(self):
        first = bind_simulation_run("mission-1")
        second = bind_simulation_run("mission-2")
        assert second != first
        assert get_extra_context() == {"mission_id": "mission-2"}

    def test_release_clears_context(self):
        bind_simulation_run("mission-1")
        release_simulation_run()
        assert get_run_id() == ""
        assert get_extra_context() == {}


class TestResetLogging:
    def test_removes_installed_handler(self):
        setup_logging(stream=io.StringIO())
        reset_logging()
        assert logging.getLogger(PACKAGE_LOGGER).handlers == []

    def test_restores_levels(self):
        setup_logging(config=LoggingConfig(trace_simulation=True), stream=io.StringIO())
        reset_logging()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.NOTSET
        assert logging.getLogger(SIMULATION_LOGGER).level == logging.NOTSET
