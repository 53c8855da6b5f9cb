"""Where: src/pathwise/shared/errors.py
What: Exception hierarchy raised by path values and their collaborators.
Why: Give callers typed failures that still behave like the matching builtins.
"""

from __future__ import annotations

from typing import Any


class PathError(Exception):
    """Base class for every failure raised by pathwise."""


class InvalidInputKindError(PathError, TypeError):
    """Raised when a path value is constructed from an unsupported object."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Cannot build a path from {type(value).__name__}: {value!r}"
        )
        self.value: Any = value


class InvalidComponentError(PathError, ValueError):
    """Raised when a component assignment would break the decomposition model."""

    def __init__(self, component: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid {component} {value!r}: {reason}")
        self.component: str = component
        self.value: Any = value


class AlreadyExistsError(PathError, FileExistsError):
    """Raised when an operation would overwrite an existing filesystem entry."""

    def __init__(self, operation: str, destination: str) -> None:
        super().__init__(f"{operation}: destination {destination!r} already exists")
        self.operation: str = operation
        self.destination: str = destination


class UnsupportedFormatError(PathError, ValueError):
    """Raised when no codec or algorithm is registered for the requested tag."""

    def __init__(self, tag: str | None, *, path: str | None = None) -> None:
        location = f" for {path!r}" if path else ""
        super().__init__(f"Unsupported format {tag!r}{location}")
        self.tag: str | None = tag
        self.path: str | None = path


class UnsupportedSchemeError(PathError, ValueError):
    """Raised when a remote path is read through a scheme without a reader."""

    def __init__(self, scheme: str, url: str) -> None:
        super().__init__(f"No reader registered for scheme {scheme!r} ({url})")
        self.scheme: str = scheme
        self.url: str = url


class StubbedOperationError(PathError, NotImplementedError):
    """Raised by capabilities that are declared but deliberately not implemented."""

    def __init__(self, operation: str, path: str) -> None:
        super().__init__(f"{operation} is not implemented ({path})")
        self.operation: str = operation
        self.path: str = path


__all__ = [
    "PathError",
    "InvalidInputKindError",
    "InvalidComponentError",
    "AlreadyExistsError",
    "UnsupportedFormatError",
    "UnsupportedSchemeError",
    "StubbedOperationError",
]
