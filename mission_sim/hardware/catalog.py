"""In-memory hardware database and lookup helpers."""

import math

from mission_sim.hardware.models import Camera, DroneModel, Lens, SensorType

_PHASE_ONE_MOUNT = "PhaseOne-RSM"
_SONY_MOUNT = "Sony-E"
_FUJI_MOUNT = "Fujifilm-G"

CAMERAS: tuple[Camera, ...] = (
    Camera(
        id="phase-one-ixm-100",
        brand="Phase One",
        model="iXM-100",
        sensor_type=SensorType.MEDIUM_FORMAT,
        sensor_width=53.4,
        sensor_height=40.0,
        image_width=11664,
        image_height=8750,
        megapixels=100,
        compatible_lens_mounts=(_PHASE_ONE_MOUNT,),
    ),
    Camera(
        id="phase-one-ixm-50",
        brand="Phase One",
        model="iXM-50",
        sensor_type=SensorType.MEDIUM_FORMAT,
        sensor_width=44.0,
        sensor_height=33.0,
        image_width=8280,
        image_height=6208,
        megapixels=50,
        compatible_lens_mounts=(_PHASE_ONE_MOUNT,),
    ),
    Camera(
        id="sony-a7r-iv",
        brand="Sony",
        model="Alpha A7R IV",
        sensor_type=SensorType.FULL_FRAME,
        sensor_width=35.7,
        sensor_height=23.8,
        image_width=9504,
        image_height=6336,
        megapixels=61,
        compatible_lens_mounts=(_SONY_MOUNT,),
    ),
    Camera(
        id="sony-a6600",
        brand="Sony",
        model="Alpha A6600",
        sensor_type=SensorType.APS_C,
        sensor_width=23.5,
        sensor_height=15.6,
        image_width=6000,
        image_height=4000,
        megapixels=24.2,
        compatible_lens_mounts=(_SONY_MOUNT,),
    ),
    Camera(
        id="fujifilm-gfx-100s",
        brand="Fujifilm",
        model="GFX 100S",
        sensor_type=SensorType.MEDIUM_FORMAT,
        sensor_width=43.8,
        sensor_height=32.9,
        image_width=11648,
        image_height=8736,
        megapixels=102,
        compatible_lens_mounts=(_FUJI_MOUNT,),
    ),
    Camera(
        id="dji-mavic-3-pro",
        brand="DJI",
        model="Mavic 3 Pro Camera",
        sensor_type=SensorType.ONE_INCH,
        sensor_width=17.3,
        sensor_height=13.0,
        image_width=5280,
        image_height=3956,
        megapixels=20,
    ),
)

LENSES: tuple[Lens, ...] = (
    Lens(
        id="phaseone-rsm-80mm",
        brand="Phase One",
        model="RSM 80mm f/5.6",
        focal_length=80,
        max_aperture=5.6,
        min_aperture=32,
        lens_mount=_PHASE_ONE_MOUNT,
    ),
    Lens(
        id="phaseone-rsm-35mm",
        brand="Phase One",
        model="RSM 35mm f/5.6",
        focal_length=35,
        max_aperture=5.6,
        min_aperture=32,
        lens_mount=_PHASE_ONE_MOUNT,
    ),
    Lens(
        id="sony-e-50mm-f1.8",
        brand="Sony",
        model="FE 50mm f/1.8",
        focal_length=50,
        max_aperture=1.8,
        min_aperture=22,
        lens_mount=_SONY_MOUNT,
    ),
    Lens(
        id="sony-e-24-70mm-f2.8-gm",
        brand="Sony",
        model="FE 24-70mm f/2.8 GM",
        focal_length=(24, 70),
        max_aperture=2.8,
        min_aperture=22,
        lens_mount=_SONY_MOUNT,
    ),
    Lens(
        id="fujifilm-g-gf-110mm-f2",
        brand="Fujifilm",
        model="GF 110mm f/2 R LM WR",
        focal_length=110,
        max_aperture=2.0,
        min_aperture=22,
        lens_mount=_FUJI_MOUNT,
    ),
)

DRONES: tuple[DroneModel, ...] = (
    DroneModel(
        id="freefly-astro",
        name="Freefly Astro",
        brand="Freefly",
        max_payload_kg=1.5,
        compatible_payloads=("Sony-a7R-Series", "MicaSense-RedEdge"),
    ),
    DroneModel(
        id="freefly-alta-x",
        name="Freefly Alta X",
        brand="Freefly",
        max_payload_kg=15.9,
        compatible_payloads=("PhaseOne-iXM", "Gimbal-Payloads"),
    ),
    DroneModel(id="dji-mavic-3-pro-drone", name="DJI Mavic 3 Pro", brand="DJI"),
)

STANDARD_F_STOPS: tuple[float, ...] = (
    1.0, 1.1, 1.2, 1.4, 1.8, 2.0, 2.2, 2.5, 2.8, 3.2, 3.5, 4.0,
    4.5, 5.0, 5.6, 6.3, 7.1, 8.0, 9.0, 10.0, 11.0, 13.0, 14.0, 16.0, 18.0, 20.0, 22.0, 32.0,
)  # fmt: skip

DEFAULT_F_STOPS: tuple[float, ...] = (2.8, 4.0, 5.6, 8.0, 11.0, 16.0, 22.0)


def get_camera_by_id(camera_id: str | None) -> Camera | None:
    """Return the camera with ``camera_id``, or None."""
    if not camera_id:
        return None
    return next((camera for camera in CAMERAS if camera.id == camera_id), None)


def get_lens_by_id(lens_id: str | None) -> Lens | None:
    """Return the lens with ``lens_id``, or None."""
    if not lens_id:
        return None
    return next((lens for lens in LENSES if lens.id == lens_id), None)


def get_drone_by_id(drone_id: str | None) -> DroneModel | None:
    """Return the drone model with ``drone_id``, or None."""
    if not drone_id:
        return None
    return next((drone for drone in DRONES if drone.id == drone_id), None)


def get_compatible_lenses(camera_id: str | None) -> tuple[Lens, ...]:
    """Return lenses whose mount the camera accepts."""
    camera = get_camera_by_id(camera_id)
    if camera is None or not camera.compatible_lens_mounts:
        return ()
    return tuple(lens for lens in LENSES if lens.lens_mount in camera.compatible_lens_mounts)


def get_lens_f_stops(lens: Lens | None) -> tuple[float, ...]:
    """Return the standard f-stops within the lens aperture range, ascending.

    Without a lens, a generic set of stops is returned.
    """
    if lens is None:
        return DEFAULT_F_STOPS
    return tuple(
        stop for stop in STANDARD_F_STOPS if lens.max_aperture <= stop <= lens.min_aperture
    )


def calculate_field_of_view(focal_length: float, sensor_dimension: float) -> float:
    """Angular field of view in degrees across ``sensor_dimension``.

    Both arguments are in millimetres; non-positive input yields 0.
    """
    if focal_length <= 0 or sensor_dimension <= 0:
        return 0.0
    return math.degrees(2.0 * math.atan(sensor_dimension / (2.0 * focal_length)))
