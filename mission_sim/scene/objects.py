"""Scene objects created from the scene builder form."""

import math

from mission_sim.exceptions import ValidationError
from mission_sim.geometry.coordinates import LocalCoord
from mission_sim.geometry.units import feet_to_meters
from mission_sim.mission.models import SceneObject, SceneObjectClass, SceneObjectType

UI_SOURCE = "build-scene-ui"
IMPORT_SOURCE = "build-scene-import"
DEFAULT_BOX_COLOR = "#888888"


def create_box_object(
    width_ft: float,
    length_ft: float,
    height_ft: float,
    *,
    color: str = DEFAULT_BOX_COLOR,
    object_class: SceneObjectClass = SceneObjectClass.OBSTACLE,
) -> SceneObject:
    """Build a box resting on the ground at the scene origin.

    Dimensions are entered in feet and stored in meters.

    Args:
        width_ft: Extent along x.
        length_ft: Extent along y.
        height_ft: Extent along z.
        color: Display color.
        object_class: Planning classification.

    Returns:
        The new scene object; nothing is dispatched.

    Raises:
        ValidationError: If any dimension is not a positive number.
    """
    raw = {"width": width_ft, "length": length_ft, "height": height_ft}
    meters = {}
    for name, value in raw.items():
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValidationError("Dimensions must be positive numbers.", field=name, value=value) from None
        if not math.isfinite(number) or number <= 0:
            raise ValidationError("Dimensions must be positive numbers.", field=name, value=value)
        meters[name] = feet_to_meters(number)

    height = meters["height"]
    return SceneObject(
        type=SceneObjectType.BOX,
        object_class=object_class,
        width=meters["width"],
        length=meters["length"],
        height=height,
        color=color,
        position=LocalCoord(z=height / 2.0),
        rotation=LocalCoord(),
        source=UI_SOURCE,
    )
