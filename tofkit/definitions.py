"""Descriptions of cameras, frames, sensor modes and frame metadata."""

from __future__ import annotations

import enum
import struct
from dataclasses import astuple, dataclass, field, fields
from typing import ClassVar

from .connections import ConnectionType


class ImagerType(enum.Enum):
    """Kinds of imager a camera can carry."""

    UNSET = 0
    ADSD3100 = 1
    ADSD3030 = 2


@dataclass
class IntrinsicParameters:
    """Intrinsic calibration parameters of a camera."""

    fx: float = 0.0
    fy: float = 0.0
    cx: float = 0.0
    cy: float = 0.0
    codx: float = 0.0
    cody: float = 0.0
    k1: float = 0.0
    k2: float = 0.0
    k3: float = 0.0
    k4: float = 0.0
    k5: float = 0.0
    k6: float = 0.0
    p2: float = 0.0
    p1: float = 0.0


@dataclass
class FrameDataDetails:
    """Properties of one kind of data (depth, AB, ...) held in a frame."""

    type: str = ""
    width: int = 0
    height: int = 0
    subelement_size: int = 0
    """Size in bytes of a sub-element, e.g. one coordinate of a 3D point."""
    subelements_per_element: int = 0
    """Number of sub-elements that make up one element (pixel)."""
    bytes_count: int = 0
    """Total number of bytes of this data."""


@dataclass
class FrameDetails:
    """Properties of a frame."""

    type: str = ""
    data_details: list[FrameDataDetails] = field(default_factory=list)
    camera_mode: str = ""
    width: int = 0
    height: int = 0
    total_captures: int = 0
    """Number of captures (sub-frames) in the frame."""
    passive_ir_captured: bool = False
    """Whether a passive IR frame is appended."""


@dataclass
class CameraDetails:
    """Properties of a camera."""

    camera_id: str = ""
    mode: int = 0
    frame_type: FrameDetails = field(default_factory=FrameDetails)
    connection: ConnectionType = ConnectionType.ON_TARGET
    intrinsics: IntrinsicParameters = field(default_factory=IntrinsicParameters)
    max_depth: int = 0
    """Maximum measurable distance in millimetres (currently unused)."""
    min_depth: int = 0
    """Minimum measurable distance in millimetres (currently unused)."""
    bit_count: int = 0
    """Bits per pixel (currently unused)."""
    u_boot_version: str = ""
    kernel_version: str = ""
    sd_card_image_version: str = ""
    serial_number: str = ""


@dataclass
class Point3I:
    """An XYZ point with 16-bit signed coordinates."""

    a: int = 0
    b: int = 0
    c: int = 0


@dataclass
class Metadata:
    """Metadata attached to a frame by the ADSD3500.

    The binary layout is packed with no padding, little-endian.
    """

    width: int = 0
    height: int = 0
    output_configuration: int = 0
    bits_in_depth: int = 0
    bits_in_ab: int = 0
    bits_in_confidence: int = 0
    invalid_phase_value: int = 0
    frequency_index: int = 0
    ab_frequency_index: int = 0
    frame_number: int = 0
    imager_mode: int = 0
    number_of_phases: int = 0
    number_of_frequencies: int = 0
    xyz_enabled: int = 0
    elapsed_time_fractional_value: int = 0
    elapsed_time_seconds_value: int = 0
    sensor_temperature: int = 0
    laser_temperature: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<HHBBBBHBBIBBBBIIii")
    SIZE: ClassVar[int] = _STRUCT.size

    @classmethod
    def unpack(cls, data: bytes | bytearray | memoryview) -> Metadata:
        """Decode metadata from the leading bytes of ``data``."""
        view = memoryview(data).cast("B")
        if len(view) < cls.SIZE:
            raise ValueError(
                f"metadata needs {cls.SIZE} bytes, got {len(view)}"
            )
        return cls(*cls._STRUCT.unpack_from(view))

    def pack(self) -> bytes:
        """Encode the metadata in its packed binary layout."""
        try:
            return self._STRUCT.pack(*astuple(self))
        except struct.error as exc:
            raise ValueError(f"metadata field out of range: {exc}") from exc

    def __str__(self) -> str:
        return (
            f"\tWidth: {self.width}"
            f"\tHeight: {self.height}"
            f"\tOutputConfiguration: {self.output_configuration}"
            f"\tBitsInDepth: {self.bits_in_depth}"
            f"\tBitsInAb: {self.bits_in_ab}"
            f"\tBitsInConfidenc: {self.bits_in_confidence}"
            f"\tInvalidPhaseValue: {self.invalid_phase_value}"
            f"\tFrequencyIndex: {self.frequency_index}"
            f"\tFrameNumber: {self.frame_number}"
            f"\tImagerMode: {self.imager_mode}"
            f"\tNumberOfPhases: {self.number_of_phases}"
            f"\tNumberOfFrequencies: {self.number_of_frequencies}"
            f"\tXYZEnabled: {self.xyz_enabled}"
            f"\tElapsedTimeFractionalValue: {self.elapsed_time_fractional_value}"
            f"\tElapsedTimeSecondsValue: {self.elapsed_time_seconds_value}"
            f"\tSensorTemperature: {self.sensor_temperature}"
            f"\tLaserTemperature: {self.laser_temperature}\n"
        )


# Keep the packed layout in step with the declared fields.
assert len(fields(Metadata)) == len(Metadata._STRUCT.format) - 1


@dataclass
class SensorDetails:
    """Identification of a sensor and how it is reached."""

    id: str = ""
    """Video driver path on target, or the target's IP over the network."""
    connection_type: ConnectionType = ConnectionType.ON_TARGET


@dataclass
class DriverConfiguration:
    """Configuration of the video driver."""

    base_width: str = ""
    base_heigth: str = ""
    no_of_phases: str = ""
    depth_bits: str = ""
    ab_bits: str = ""
    conf_bits: str = ""
    pixel_format: str = ""
    driver_width: int = 0
    driver_heigth: int = 0
    pixel_format_index: int = 0


@dataclass
class DepthSensorModeDetails:
    """A whole-frame mode that a depth sensor can capture and transmit."""

    mode_number: int = 0
    frame_content: list[str] = field(default_factory=list)
    number_of_phases: int = 0
    pixel_format_index: int = 0
    frame_width_in_bytes: int = 0
    frame_height_in_bytes: int = 0
    base_resolution_width: int = 0
    base_resolution_height: int = 0
    metadata_size: int = 0
    is_pcm: bool = False
    driver_configuration: DriverConfiguration = field(
        default_factory=DriverConfiguration
    )

    def __str__(self) -> str:
        head = (
            f"DepthSensorModeDetails: \tN: {self.mode_number}"
            f"\tW: {self.base_resolution_width}"
            f"\tH: {self.base_resolution_height} contains:\n"
        )
        return head + "".join(f"\t{content}" for content in self.frame_content)