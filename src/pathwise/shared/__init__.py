"""Shared error types and event identifiers used across features."""

from .errors import (
    AlreadyExistsError,
    InvalidComponentError,
    InvalidInputKindError,
    PathError,
    StubbedOperationError,
    UnsupportedFormatError,
    UnsupportedSchemeError,
)
from .events import PathEvent

__all__ = [
    "AlreadyExistsError",
    "InvalidComponentError",
    "InvalidInputKindError",
    "PathError",
    "PathEvent",
    "StubbedOperationError",
    "UnsupportedFormatError",
    "UnsupportedSchemeError",
]
