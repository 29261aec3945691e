"""Context variables carrying simulation-run data into log records.

A run id is generated each time a simulation starts so every record of one
run can be grouped; extra context usually holds the mission id.
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

run_id: ContextVar[str] = ContextVar("run_id", default="")

_extra_context: ContextVar[dict[str, Any] | None] = ContextVar("extra_context", default=None)


def get_run_id() -> str:
    """Return the simulation run id of the current context."""
    return run_id.get()


def set_run_id(value: str) -> None:
    """Set the simulation run id for the current context."""
    run_id.set(value)


def generate_run_id() -> str:
    """Generate and set a new simulation run id.

    Returns:
        The generated run id.
    """
    new_id = uuid4().hex[:12]
    run_id.set(new_id)
    return new_id


def get_extra_context() -> dict[str, Any]:
    """Get a copy of the current extra context."""
    context = _extra_context.get()
    if context is None:
        return {}
    return context.copy()


def set_extra_context(**kwargs: Any) -> None:
    """Add fields to include in all subsequent log records.

    Args:
        **kwargs: Key-value pairs to include in log records.
    """
    current = _extra_context.get()
    current = {} if current is None else current.copy()
    current.update(kwargs)
    _extra_context.set(current)


def clear_context() -> None:
    """Clear the run id and extra context."""
    run_id.set("")
    _extra_context.set(None)
