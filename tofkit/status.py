"""Status codes reported by SDK operations and by the ADSD3500 chip."""

from __future__ import annotations

import enum


class Status(enum.Enum):
    """Outcome of an operation performed by the SDK."""

    OK = 0
    BUSY = 1
    UNREACHABLE = 2
    INVALID_ARGUMENT = 3
    UNAVAILABLE = 4
    GENERIC_ERROR = 5

    def __str__(self) -> str:
        return f"Status::{self.name}"


class Adsd3500Status(enum.Enum):
    """Status reported by the ADSD3500 sensor."""

    OK = 0
    INVALID_MODE = 1
    INVALID_JBLF_FILTER_SIZE = 2
    UNSUPPORTED_COMMAND = 3
    INVALID_MEMORY_REGION = 4
    INVALID_FIRMWARE_CRC = 5
    INVALID_IMAGER = 6
    INVALID_CCB = 7
    FLASH_HEADER_PARSE_ERROR = 8
    FLASH_FILE_PARSE_ERROR = 9
    SPIM_ERROR = 10
    INVALID_CHIPID = 11
    IMAGER_COMMUNICATION_ERROR = 12
    IMAGER_BOOT_FAILURE = 13
    FIRMWARE_UPDATE_COMPLETE = 14
    NVM_WRITE_COMPLETE = 15
    IMAGER_ERROR = 16
    UNKNOWN_ERROR_ID = 17

    def __str__(self) -> str:
        return f"Adsd3500Status::{self.name}"


class TofError(Exception):
    """Raised when an operation fails; carries the failing :class:`Status`."""

    def __init__(self, status: Status, message: str = "") -> None:
        if status is Status.OK:
            raise ValueError("TofError cannot carry Status.OK")
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}" if message else str(status))