"""Safe UTF-8 truncation points."""
from .errors import (
    BoundaryError,
    ConfigError,
    ErrorKind,
    InvalidEncodingError,
    InvalidLengthError,
    InvalidOffsetError,
    U8pError,
)
from .finder import find, is_lead_byte
from .models import BoundaryPolicy, FindResult
from .truncate import truncate
from .version import __version__

__all__ = [
    "BoundaryError",
    "BoundaryPolicy",
    "ConfigError",
    "ErrorKind",
    "FindResult",
    "InvalidEncodingError",
    "InvalidLengthError",
    "InvalidOffsetError",
    "U8pError",
    "find",
    "is_lead_byte",
    "truncate",
    "__version__",
]
