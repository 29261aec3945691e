"""Hardware catalog entries and the selected hardware configuration."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from mission_sim.geometry.units import feet_to_meters

DEFAULT_FOCUS_DISTANCE_METERS: float = feet_to_meters(20.0)


class SensorType(StrEnum):
    """Sensor format classes."""

    MEDIUM_FORMAT = "Medium Format"
    FULL_FRAME = "Full Frame"
    APS_C = "APS-C"
    ONE_INCH = "1-inch"
    HALF_INCH = "1/2-inch"


class Camera(BaseModel):
    """Camera body."""

    model_config = ConfigDict(frozen=True)

    id: str
    brand: str
    model: str
    sensor_type: SensorType
    sensor_width: float = Field(gt=0, description="Sensor width in mm")
    sensor_height: float = Field(gt=0, description="Sensor height in mm")
    image_width: int = Field(gt=0)
    image_height: int = Field(gt=0)
    megapixels: float = Field(gt=0)
    compatible_lens_mounts: tuple[str, ...] = ()


class Lens(BaseModel):
    """Lens; zoom lenses carry a (min, max) focal length in mm."""

    model_config = ConfigDict(frozen=True)

    id: str
    brand: str
    model: str
    focal_length: float | tuple[float, float]
    max_aperture: float = Field(gt=0, description="Widest f-number")
    min_aperture: float = Field(gt=0, description="Narrowest f-number")
    lens_mount: str

    @property
    def shortest_focal_length(self) -> float:
        """Prime focal length, or the wide end of a zoom."""
        if isinstance(self.focal_length, tuple):
            return self.focal_length[0]
        return self.focal_length


class DroneModel(BaseModel):
    """Airframe."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    brand: str
    max_payload_kg: float | None = Field(default=None, gt=0)
    compatible_payloads: tuple[str, ...] = ()


class HardwareField(StrEnum):
    """Fields of HardwareState that UPDATE_HARDWARE_FIELD may set."""

    DRONE = "drone"
    LIDAR = "lidar"
    CAMERA = "camera"
    LENS = "lens"
    SENSOR_TYPE = "sensor_type"
    F_STOP = "f_stop"
    FOCUS_DISTANCE = "focus_distance"
    SHUTTER_SPEED = "shutter_speed"
    ISO = "iso"
    GIMBAL_PITCH = "gimbal_pitch"


class HardwareState(BaseModel):
    """Selected hardware with resolved catalog details."""

    model_config = ConfigDict(frozen=True)

    drone: str | None = None
    lidar: str | None = None
    camera: str | None = None
    lens: str | None = None
    sensor_type: SensorType | None = None
    f_stop: float | None = None
    focus_distance: float = DEFAULT_FOCUS_DISTANCE_METERS
    shutter_speed: str | None = None
    iso: int | None = None
    gimbal_pitch: float | None = None

    drone_details: DroneModel | None = None
    camera_details: Camera | None = None
    lens_details: Lens | None = None
    calculated_fov: float | None = None
    available_f_stops: tuple[float, ...] = ()

    @property
    def frustum_ready(self) -> bool:
        """True when both a camera and a lens are selected."""
        return self.camera is not None and self.lens is not None
