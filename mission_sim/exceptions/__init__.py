"""Mission simulator exception hierarchy.

Architecture:
    MissionSimError (base)
    ├── ValidationError
    │   └── UnsupportedFileError
    ├── NotFoundError
    └── SimulationError

The reducer never raises: invalid actions come back as the unchanged state.
These exceptions belong to the user-facing workflows (object creation,
import, export) and to simulation start-up.

Usage:
    from mission_sim.exceptions import ValidationError

    if width_ft <= 0:
        raise ValidationError("Dimensions must be positive numbers.", field="width", value=width_ft)
"""

from mission_sim.exceptions.base import MissionSimError
from mission_sim.exceptions.errors import (
    NotFoundError,
    SimulationError,
    UnsupportedFileError,
    ValidationError,
)

__all__ = [
    "MissionSimError",
    "NotFoundError",
    "SimulationError",
    "UnsupportedFileError",
    "ValidationError",
]
