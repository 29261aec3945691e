"""Concrete simulator errors."""

from pathlib import Path
from typing import Any, ClassVar

from mission_sim.exceptions.base import MissionSimError


class ValidationError(MissionSimError):
    """User input failed validation; the operation was aborted before any state change."""

    error_code: ClassVar[str] = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with optional field info.

        Args:
            message: Description of the validation failure.
            field: Name of the field that failed validation.
            value: The invalid value.
            context: Additional context information.
        """
        context_dict = context or {}
        if field is not None:
            context_dict["field"] = field
        if value is not None:
            context_dict["value"] = value
        super().__init__(message, context=context_dict)


class NotFoundError(MissionSimError):
    """A referenced mission entity does not exist."""

    error_code: ClassVar[str] = "NOT_FOUND"

    def __init__(
        self,
        message: str,
        *,
        resource_type: str | None = None,
        resource_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize not found error with optional resource info.

        Args:
            message: Description of what was not found.
            resource_type: Type of entity (e.g., "Waypoint", "PathSegment").
            resource_id: ID of the entity that was not found.
            context: Additional context information.
        """
        context_dict = context or {}
        if resource_type is not None:
            context_dict["resource_type"] = resource_type
        if resource_id is not None:
            context_dict["resource_id"] = resource_id
        super().__init__(message, context=context_dict)


class UnsupportedFileError(ValidationError):
    """An imported file has an extension the importer does not handle."""

    error_code: ClassVar[str] = "UNSUPPORTED_FILE"

    def __init__(self, path: Path) -> None:
        """Initialize with the rejected path."""
        super().__init__(
            f"Unsupported file type: {path.name}",
            field="path",
            value=str(path),
            context={"suffix": path.suffix.lower()},
        )


class SimulationError(MissionSimError):
    """The simulation cannot start or cannot advance."""

    error_code: ClassVar[str] = "SIMULATION_ERROR"
