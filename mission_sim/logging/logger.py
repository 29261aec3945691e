"""Log output and per-run log context for the simulator.

The library only emits records. An application that wants them rendered
calls ``setup_logging`` once; it installs one handler on the ``mission_sim``
package logger and leaves the root logger and its handlers alone, so
records still propagate to whatever the application configured there.

Every record emitted during a simulation run carries the run id and the
mission id bound by ``bind_simulation_run``.
"""

import logging
import sys
from typing import TextIO

from mission_sim.logging.config import LogFormat, LoggingConfig, get_logging_config
from mission_sim.logging.context import clear_context, generate_run_id, set_extra_context
from mission_sim.logging.formatters import HumanFormatter, JSONFormatter

PACKAGE_LOGGER = "mission_sim"
SIMULATION_LOGGER = "mission_sim.simulation"

_installed_handler: logging.Handler | None = None


def _build_formatter(config: LoggingConfig, stream: TextIO) -> logging.Formatter:
    if config.log_format == LogFormat.JSON:
        return JSONFormatter(
            service_name=config.service_name,
            include_timestamp=config.include_timestamp,
            include_location=config.include_location,
        )
    isatty = getattr(stream, "isatty", None)
    return HumanFormatter(use_colors=bool(isatty and isatty()))


def setup_logging(
    config: LoggingConfig | None = None,
    stream: TextIO | None = None,
    *,
    force: bool = False,
) -> logging.Handler:
    """Render ``mission_sim`` records to ``stream``.

    Args:
        config: Logging configuration. Loads from environment if not provided.
        stream: Output stream. Defaults to sys.stderr.
        force: Replace a handler installed by an earlier call.

    Returns:
        The handler attached to the package logger.
    """
    global _installed_handler

    if _installed_handler is not None and not force:
        return _installed_handler

    if config is None:
        config = get_logging_config()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _installed_handler is not None:
        package_logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_build_formatter(config, handler.stream))
    package_logger.addHandler(handler)
    package_logger.setLevel(config.log_level.number)
    logging.getLogger(SIMULATION_LOGGER).setLevel(config.simulation_level)

    _installed_handler = handler
    return handler


def reset_logging() -> None:
    """Remove the handler installed by ``setup_logging`` and restore levels."""
    global _installed_handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _installed_handler is not None:
        package_logger.removeHandler(_installed_handler)
        _installed_handler = None
    package_logger.setLevel(logging.NOTSET)
    logging.getLogger(SIMULATION_LOGGER).setLevel(logging.NOTSET)

    get_logging_config.cache_clear()


def bind_simulation_run(mission_id: str) -> str:
    """Start tagging records with a fresh run id and ``mission_id``.

    Returns:
        The new run id.
    """
    clear_context()
    run_id = generate_run_id()
    set_extra_context(mission_id=mission_id)
    return run_id


def release_simulation_run() -> None:
    """Stop tagging records with the current run."""
    clear_context()
