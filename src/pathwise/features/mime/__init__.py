from .resolver import (
    DIRECTORY_TYPE,
    UNKNOWN_TYPE,
    MimeType,
    mime_type_from_extension,
    resolve_true_extension,
    sniff_mime_type,
)

__all__ = [
    "DIRECTORY_TYPE",
    "MimeType",
    "UNKNOWN_TYPE",
    "mime_type_from_extension",
    "resolve_true_extension",
    "sniff_mime_type",
]
