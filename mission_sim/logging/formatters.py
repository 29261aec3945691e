"""Log formatters for the simulator's two output modes."""

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import Any, ClassVar

from mission_sim.logging.context import get_extra_context, get_run_id

_RESERVED_ATTRS: frozenset[str] = frozenset(vars(logging.makeLogRecord({})).keys()) | {
    "message",
    "asctime",
}

_NAME_WIDTH = 28


def _record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Return the ``extra=`` fields attached to a record."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """Render each record as a single-line JSON object."""

    def __init__(
        self,
        *,
        service_name: str = "mission-sim",
        include_timestamp: bool = True,
        include_location: bool = False,
    ) -> None:
        """Initialize the JSON formatter.

        Args:
            service_name: Identifier stamped on every record.
            include_timestamp: Whether to include the record creation time.
            include_location: Whether to include module/function/line fields.
        """
        super().__init__()
        self._service_name = service_name
        self._include_timestamp = include_timestamp
        self._include_location = include_location

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        entry: dict[str, Any] = {}

        if self._include_timestamp:
            created = datetime.fromtimestamp(record.created, tz=UTC)
            entry["timestamp"] = created.isoformat(timespec="milliseconds")

        entry["level"] = record.levelname
        entry["logger"] = record.name
        entry["message"] = record.getMessage()
        entry["service"] = self._service_name

        current_run = get_run_id()
        if current_run:
            entry["run_id"] = current_run

        if self._include_location:
            entry["module"] = record.module
            entry["function"] = record.funcName
            entry["line"] = record.lineno

        entry.update(get_extra_context())
        entry.update(_record_extras(record))

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Render records as aligned, optionally coloured terminal lines."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self, *, use_colors: bool = True) -> None:
        """Initialize the human formatter.

        Args:
            use_colors: Whether to wrap the level name in ANSI colours.
        """
        super().__init__()
        self._use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record for a terminal."""
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]

        level = f"{record.levelname:<8}"
        if self._use_colors:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"

        name = record.name
        if len(name) > _NAME_WIDTH:
            name = "~" + name[-(_NAME_WIDTH - 1) :]

        line = f"{timestamp} {level} {name:<{_NAME_WIDTH}} {record.getMessage()}"

        fields = {**get_extra_context(), **_record_extras(record)}
        current_run = get_run_id()
        if current_run:
            fields = {"run": current_run, **fields}
        if fields:
            line += "  [" + " ".join(f"{key}={value}" for key, value in fields.items()) + "]"

        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info))

        return line
