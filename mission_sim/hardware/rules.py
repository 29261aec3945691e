"""Cascading invalidation of dependent hardware fields.

Selections form a small dependency graph::

    camera -> lens -> f_stop

When a field changes, its resolver refreshes the catalog details derived
from it; each dependent is then revalidated and itself treated as changed.
Changing the camera therefore clears the lens, which empties the f-stop
list and clears the f-stop. Changing the lens recomputes the f-stop list
and falls back to the lowest stop when the previous one is no longer offered.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from mission_sim.hardware.catalog import (
    calculate_field_of_view,
    get_camera_by_id,
    get_drone_by_id,
    get_lens_by_id,
    get_lens_f_stops,
)
from mission_sim.hardware.models import HardwareField, HardwareState, SensorType

logger = logging.getLogger(__name__)

HardwareRule = Callable[[HardwareState], HardwareState]

DEPENDENCY_GRAPH: dict[HardwareField, tuple[HardwareField, ...]] = {
    HardwareField.CAMERA: (HardwareField.LENS,),
    HardwareField.LENS: (HardwareField.F_STOP,),
}

# Fields applied in this order by configure_hardware so an explicit lens or
# f-stop in the same update survives the camera's invalidation.
_APPLY_ORDER: tuple[HardwareField, ...] = (
    HardwareField.DRONE,
    HardwareField.CAMERA,
    HardwareField.LENS,
    HardwareField.F_STOP,
    HardwareField.LIDAR,
    HardwareField.SENSOR_TYPE,
    HardwareField.FOCUS_DISTANCE,
    HardwareField.SHUTTER_SPEED,
    HardwareField.ISO,
    HardwareField.GIMBAL_PITCH,
)


def _resolve_drone(hardware: HardwareState) -> HardwareState:
    return hardware.model_copy(update={"drone_details": get_drone_by_id(hardware.drone)})


def _resolve_camera(hardware: HardwareState) -> HardwareState:
    return hardware.model_copy(update={"camera_details": get_camera_by_id(hardware.camera)})


def _resolve_lens(hardware: HardwareState) -> HardwareState:
    lens_details = get_lens_by_id(hardware.lens)
    available = get_lens_f_stops(lens_details) if lens_details is not None else ()
    return hardware.model_copy(
        update={"lens_details": lens_details, "available_f_stops": tuple(sorted(available))}
    )


def _invalidate_lens(hardware: HardwareState) -> HardwareState:
    return hardware.model_copy(update={"lens": None})


def _invalidate_f_stop(hardware: HardwareState) -> HardwareState:
    available = hardware.available_f_stops
    if hardware.f_stop is not None and hardware.f_stop in available:
        return hardware
    return hardware.model_copy(update={"f_stop": available[0] if available else None})


RESOLVERS: dict[HardwareField, HardwareRule] = {
    HardwareField.DRONE: _resolve_drone,
    HardwareField.CAMERA: _resolve_camera,
    HardwareField.LENS: _resolve_lens,
}

INVALIDATORS: dict[HardwareField, HardwareRule] = {
    HardwareField.LENS: _invalidate_lens,
    HardwareField.F_STOP: _invalidate_f_stop,
}


def _coerce(field: HardwareField, value: Any, current: HardwareState) -> Any:
    """Normalise raw form input for ``field``."""
    if field in (HardwareField.F_STOP, HardwareField.GIMBAL_PITCH):
        return None if value is None or value == "" else float(value)
    if field == HardwareField.ISO:
        return None if value is None or value == "" else int(value)
    if field == HardwareField.FOCUS_DISTANCE:
        try:
            return float(value)
        except (TypeError, ValueError):
            return current.focus_distance
    if field == HardwareField.SHUTTER_SPEED:
        return str(value) if value else None
    if field == HardwareField.SENSOR_TYPE:
        return SensorType(value) if value else None
    return value or None


def _with_field_of_view(hardware: HardwareState) -> HardwareState:
    camera, lens = hardware.camera_details, hardware.lens_details
    if camera is None or lens is None:
        fov = None
    else:
        fov = calculate_field_of_view(lens.shortest_focal_length, camera.sensor_width)
    if fov == hardware.calculated_fov:
        return hardware
    return hardware.model_copy(update={"calculated_fov": fov})


def _propagate(hardware: HardwareState, changed: HardwareField) -> HardwareState:
    pending = [changed]
    while pending:
        field = pending.pop(0)
        resolver = RESOLVERS.get(field)
        if resolver is not None:
            hardware = resolver(hardware)
        for dependent in DEPENDENCY_GRAPH.get(field, ()):
            hardware = INVALIDATORS[dependent](hardware)
            pending.append(dependent)
    return hardware


def apply_field_update(hardware: HardwareState, field: HardwareField, value: Any) -> HardwareState:
    """Set one hardware field and cascade to its dependents.

    Args:
        hardware: Current hardware configuration.
        field: Field being changed.
        value: Raw new value; numeric fields accept strings.

    Returns:
        The updated configuration, or ``hardware`` itself when nothing changed
        or the value cannot be interpreted.
    """
    try:
        coerced = _coerce(field, value, hardware)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid value %r for hardware field %s", value, field)
        return hardware

    if getattr(hardware, field.value) == coerced:
        return hardware

    updated = hardware.model_copy(update={field.value: coerced})
    updated = _propagate(updated, field)
    return _with_field_of_view(updated)


def configure_hardware(hardware: HardwareState | None, updates: Mapping[str, Any]) -> HardwareState:
    """Merge several field updates into a configuration.

    Fields are applied in dependency order; unknown keys are ignored. Catalog
    details are resolved even for ids that did not change so a freshly
    created configuration is complete.
    """
    current = hardware or HardwareState()
    for field in _APPLY_ORDER:
        if field.value in updates:
            current = apply_field_update(current, field, updates[field.value])

    for field in (HardwareField.DRONE, HardwareField.CAMERA, HardwareField.LENS):
        current = RESOLVERS[field](current)
    if current.f_stop is None:
        current = INVALIDATORS[HardwareField.F_STOP](current)

    ignored = set(updates) - {field.value for field in _APPLY_ORDER}
    if ignored:
        logger.debug("Ignoring unknown hardware fields: %s", sorted(ignored))

    return _with_field_of_view(current)
