"""Error handling module for the codec."""

from .handlers import (
    BaseCodecError,
    ErrorCollector,
    ErrorKind,
    ValidationError,
    ValidationErrors,
)

__all__ = [
    "BaseCodecError",
    "ErrorCollector",
    "ErrorKind",
    "ValidationError",
    "ValidationErrors",
]
