"""Error and status codes reported by the ADSD3500, ADSD3100 and ADSD3030."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from types import MappingProxyType


class Adsd3500StatusCode(enum.IntEnum):
    """Codes read from the ADSD3500 with the "Get Status" (0x0020) command."""

    INVALID_MODE = 0x0001
    INVALID_JBLF_FILTER_SIZE = 0x0002
    UNSUPPORTED_CMD = 0x0003
    INVALID_MEMORY_REGION = 0x0004
    INVALID_FIRMWARE_CRC = 0x0005
    INVALID_IMAGER = 0x0006
    INVALID_CCB = 0x0007
    FLASH_HEADER_PARSE_ERROR = 0x0008
    FLASH_FILE_PARSE_ERROR = 0x0009
    SPIM_ERROR = 0x000A
    INVALID_CHIPID = 0x000B
    IMAGER_COMMUNICATION_ERROR = 0x000C
    IMAGER_BOOT_FAILURE = 0x000D
    FIRMWARE_UPDATE_COMPLETE = 0x000E
    NVM_WRITE_COMPLETE = 0x000F
    IMAGER_ERROR = 0x0010
    TIMEOUT_ERROR = 0x0011
    DYNAMIC_MODE_SWITCHING_NOT_ENABLED = 0x0013
    INVALID_DYNAMIC_MODE_COMPOSITIONS = 0x0014
    INVALID_PHASE_INVALID_VALUE = 0x0015


class Adsd3100ErrorCode(enum.IntEnum):
    """Imager codes read with the "Get Imager Error Code" (0x0038) command.

    Only meaningful when "Get Status" reports ``IMAGER_ERROR`` (0x0010).
    """

    MODE_USECASE = 0x0001
    MODE_MODE_DRIVER = 0x0002
    PLLLOCK_LOCK1 = 0x0004
    PLLLOCK_LOCK2 = 0x0008
    PLLLOCK_LOCK3 = 0x000C
    OVERHEAT_IMAGER = 0x0010
    OVERHEAT_LD = 0x0020
    LASER_CHIPID = 0x0040
    LASER_LPS = 0x0080
    LASER_NO_DIFFUSER = 0x0100
    LASER_SHORT = 0x0140
    LVDS_HIGH_DC = 0x0180
    LVDS_PULSE_LONG = 0x01C0
    LVDS_OPEN_SHORT = 0x0200
    LASER_LONG_LEN_ON = 0x0240
    LASER_SHORT_LEN_OFF = 0x0280
    LASER_LPS_READ = 0x02C0
    LASER_VLD_LOW = 0x0300
    LASER_VLD_HIGH = 0x0340


_ADSD3100_MESSAGES: Mapping[int, str] = MappingProxyType(
    {
        Adsd3100ErrorCode.MODE_USECASE: "Invalid mode selection.",
        Adsd3100ErrorCode.MODE_MODE_DRIVER: "Invalid LD mode selection.",
        Adsd3100ErrorCode.PLLLOCK_LOCK1: "PLLLOCK error location 1.",
        Adsd3100ErrorCode.PLLLOCK_LOCK2: "PLLLOCK error location 2.",
        Adsd3100ErrorCode.PLLLOCK_LOCK3: "PLLLOCK error location 3.",
        Adsd3100ErrorCode.OVERHEAT_IMAGER: "Imager sensor overheat.",
        Adsd3100ErrorCode.OVERHEAT_LD: "Laser driver overheat.",
        Adsd3100ErrorCode.LASER_CHIPID: "Laser driver invalid chip ID.",
        Adsd3100ErrorCode.LASER_LPS: "Corrupted laser driver data.",
        Adsd3100ErrorCode.LASER_NO_DIFFUSER: "Laser diffuser problem.",
        Adsd3100ErrorCode.LASER_SHORT: "Laser driver shorted to GND.",
        Adsd3100ErrorCode.LVDS_HIGH_DC: "Laser driver duty cycle too large.",
        Adsd3100ErrorCode.LVDS_PULSE_LONG: "Laser driver active time too long.",
        Adsd3100ErrorCode.LVDS_OPEN_SHORT: "Laser driver input open or short detected.",
        Adsd3100ErrorCode.LASER_LONG_LEN_ON: "Laser driver enabled for too long of time.",
        Adsd3100ErrorCode.LASER_SHORT_LEN_OFF: "Laser driver disabled for too short of time.",
        Adsd3100ErrorCode.LASER_LPS_READ: "Laser driver corrupted data.",
        Adsd3100ErrorCode.LASER_VLD_LOW: "Laser driver supply too low.",
        Adsd3100ErrorCode.LASER_VLD_HIGH: "Laser driver supply too high.",
    }
)

_ADSD3500_MESSAGES: Mapping[int, str] = MappingProxyType(
    {
        Adsd3500StatusCode.INVALID_MODE: "Mode selected is invalid.",
        Adsd3500StatusCode.INVALID_JBLF_FILTER_SIZE: (
            "The JBLF filter size speficied is incorrect."
        ),
        Adsd3500StatusCode.UNSUPPORTED_CMD: (
            "An unsupported command was sent to the ASDD3500."
        ),
        Adsd3500StatusCode.INVALID_MEMORY_REGION: (
            "A register write or read operation does not match any valid region."
        ),
        Adsd3500StatusCode.INVALID_FIRMWARE_CRC: (
            "The ADSD3500 firmware CRC check failed."
        ),
        Adsd3500StatusCode.INVALID_IMAGER: "The imager firmware is not valid.",
        Adsd3500StatusCode.INVALID_CCB: "The imager CCB file is not valid.",
        Adsd3500StatusCode.FLASH_HEADER_PARSE_ERROR: "Flash update error.",
        Adsd3500StatusCode.FLASH_FILE_PARSE_ERROR: "Flash update error.",
        Adsd3500StatusCode.SPIM_ERROR: (
            "SPI Master error occured, which this impacts the ADSD3500 - "
            "image communication."
        ),
        Adsd3500StatusCode.INVALID_CHIPID: "The image chip ID is invalid.",
        Adsd3500StatusCode.IMAGER_COMMUNICATION_ERROR: (
            "SPI Master error occured during communication between the "
            "ASDSD3500 and the imager."
        ),
        Adsd3500StatusCode.IMAGER_BOOT_FAILURE: "Unable to boot the imager.",
        Adsd3500StatusCode.IMAGER_ERROR: "The imager reported an error.",
        Adsd3500StatusCode.TIMEOUT_ERROR: (
            "This is when timer is expired but ADSD3500 is not able to send "
            "out frame due to some error."
        ),
        Adsd3500StatusCode.DYNAMIC_MODE_SWITCHING_NOT_ENABLED: (
            "Dynamic mode switching is being set, but it is not enabled."
        ),
        Adsd3500StatusCode.INVALID_DYNAMIC_MODE_COMPOSITIONS: (
            "The selected dyanamic mode configuration is not valid."
        ),
        Adsd3500StatusCode.INVALID_PHASE_INVALID_VALUE: (
            "An incorrect phase invalid value specified."
        ),
        Adsd3500StatusCode.FIRMWARE_UPDATE_COMPLETE: "Firmware update is complete.",
        Adsd3500StatusCode.NVM_WRITE_COMPLETE: "NVM update is complete.",
    }
)

_U16_MASK = 0xFFFF


class ADSDErrors:
    """Looks up human-readable descriptions of chip and imager codes.

    Codes are treated as 16-bit values; unknown codes give an empty string.
    """

    def get_string_adsd3500(self, value: int) -> str:
        """Describe an ADSD3500 status code."""
        return _ADSD3500_MESSAGES.get(int(value) & _U16_MASK, "")

    def get_string_adsd3100(self, value: int) -> str:
        """Describe an ADSD3100 imager error code."""
        return _ADSD3100_MESSAGES.get(int(value) & _U16_MASK, "")

    def get_string_adsd3030(self, value: int) -> str:
        """Describe an ADSD3030 imager error code; no codes are defined."""
        return ""