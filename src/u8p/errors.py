"""Error kinds and the exception hierarchy for u8p."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Type


class ErrorKind(str, Enum):
    INVALID_OFFSET = "invalid_offset"
    INVALID_ENCODING = "invalid_encoding"
    INVALID_LENGTH = "invalid_length"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.INVALID_OFFSET: "offset must be greater than the minimum and less than the buffer length",
    ErrorKind.INVALID_ENCODING: "no UTF-8 lead byte within four bytes of the offset",
    ErrorKind.INVALID_LENGTH: "invalid length",
}


class U8pError(Exception):
    """Base exception for all u8p failures"""


class ConfigError(U8pError):
    """Raised when a configuration file cannot be loaded or validated"""


class BoundaryError(U8pError):
    """Raised when no safe truncation boundary can be returned"""

    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.message)


class InvalidOffsetError(BoundaryError):
    """Raised when the offset is too small or not inside the buffer"""

    kind = ErrorKind.INVALID_OFFSET


class InvalidEncodingError(BoundaryError):
    """Raised when the bytes before the offset are not UTF-8"""

    kind = ErrorKind.INVALID_ENCODING


class InvalidLengthError(BoundaryError):
    """Raised by the legacy policy for empty or too-short buffers"""

    kind = ErrorKind.INVALID_LENGTH


_ERRORS: Dict[ErrorKind, Type[BoundaryError]] = {
    ErrorKind.INVALID_OFFSET: InvalidOffsetError,
    ErrorKind.INVALID_ENCODING: InvalidEncodingError,
    ErrorKind.INVALID_LENGTH: InvalidLengthError,
}


def error_for(kind: ErrorKind) -> BoundaryError:
    return _ERRORS[kind]()


__all__ = [
    "ErrorKind",
    "U8pError",
    "ConfigError",
    "BoundaryError",
    "InvalidOffsetError",
    "InvalidEncodingError",
    "InvalidLengthError",
    "error_for",
]
