"""Where: src/pathwise/shared/events.py
What: Structured event identifiers attached to filesystem side-effect logs.
Why: Let the console handler style path operations without parsing messages.
"""

from __future__ import annotations

from enum import StrEnum


class PathEvent(StrEnum):
    """Structured event identifiers for path side effects."""

    RENAME = "path.rename"
    MOVE = "path.move"
    COPY = "path.copy"
    LINK = "path.link"
    DELETE = "path.delete"
    MKDIR = "path.mkdir"
    COMPRESS = "path.compress"
    DECOMPRESS = "path.decompress"
    CHDIR = "path.chdir"
    ERROR = "path.error"


__all__ = ["PathEvent"]
