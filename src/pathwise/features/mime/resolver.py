"""Where: src/pathwise/features/mime/resolver.py
What: Map extensions to media types and sniff media types from leading bytes.
Why: Let callers learn a file's true type even when its extension lies.
Assumptions: - libmagic is available at runtime whenever sniffing is requested.
Trade-offs: - ``python-magic`` is imported lazily so extension lookups work without libmagic.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from typing import Final

UNKNOWN_TYPE: Final[str] = "unknown"
DIRECTORY_TYPE: Final[str] = "directory"


@dataclass(frozen=True, slots=True)
class MimeType:
    """A media type together with the extensions known to spell it."""

    name: str
    extensions: tuple[str, ...] = ()
    primary_extension: str | None = None

    @property
    def preferred_extension(self) -> str | None:
        """The longest spelling of the primary extension (``jpeg`` over ``jpg``)."""

        if not self.extensions:
            return None
        primary = self.primary_extension or self.extensions[0]
        candidates = [ext for ext in self.extensions if ext[:2] == primary[:2]] or [primary]
        return max(sorted(candidates), key=len)

    def __str__(self) -> str:
        return self.name


def _build_mime_type(name: str) -> MimeType:
    normalized = name.strip().lower()
    extensions = tuple(
        sorted({ext.lstrip(".").lower() for ext in mimetypes.guess_all_extensions(normalized, strict=False)})
    )
    primary = mimetypes.guess_extension(normalized, strict=False)
    return MimeType(
        name=normalized,
        extensions=extensions,
        primary_extension=primary.lstrip(".").lower() if primary else None,
    )


def mime_type_from_extension(ext: str | None) -> MimeType | None:
    """Return the media type registered for ``ext`` or None."""

    if not ext:
        return None
    name, _ = mimetypes.guess_type(f"file.{ext.lstrip('.')}", strict=False)
    if name is None:
        return None
    return _build_mime_type(name)


def sniff_mime_type(head: bytes) -> MimeType | None:
    """Identify a media type from the leading bytes of a stream."""

    import magic

    name = magic.from_buffer(head, mime=True) or ""
    if not name:
        return None
    return _build_mime_type(name)


def resolve_true_extension(ext: str | None, sniffed: MimeType | None) -> str:
    """Pick the extension that really describes a file.

    The file's own extension wins when the sniffed type knows it; otherwise the
    sniffed type's preferred extension is used. Sniffed types without any
    known extension count as no sniff at all.
    """

    preferred = sniffed.preferred_extension if sniffed is not None else None
    if ext and sniffed is not None and preferred:
        return ext if ext.lower() in sniffed.extensions else preferred
    if preferred:
        return preferred
    if ext:
        return ext
    return UNKNOWN_TYPE


__all__ = [
    "DIRECTORY_TYPE",
    "MimeType",
    "UNKNOWN_TYPE",
    "mime_type_from_extension",
    "resolve_true_extension",
    "sniff_mime_type",
]
