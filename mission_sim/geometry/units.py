"""Length unit conversions used by the scene builder and takeoff handling."""

METERS_PER_FOOT: float = 0.3048


def feet_to_meters(feet: float) -> float:
    """Convert feet to meters."""
    return feet * METERS_PER_FOOT


def meters_to_feet(meters: float) -> float:
    """Convert meters to feet."""
    return meters / METERS_PER_FOOT
