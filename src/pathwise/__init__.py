"""pathwise: decomposed path values for local files and URLs.

Typical use::

    from pathwise import lookup

    song = lookup("~/music/song.mp3")
    song.rename(base="Song")
"""

from pathwise.features.path import (
    AnyPath,
    LocalPath,
    PathComponents,
    PathKind,
    RemotePath,
    glob,
    home,
    lookup,
    pwd,
    tmpfile,
)
from pathwise.features.formats import codec_for
from pathwise.features.mime import MimeType
from pathwise.features.search import which
from pathwise.features.workdir import DirectoryStack, working_directory
from pathwise.shared import (
    AlreadyExistsError,
    InvalidComponentError,
    InvalidInputKindError,
    PathError,
    StubbedOperationError,
    UnsupportedFormatError,
    UnsupportedSchemeError,
)

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "AnyPath",
    "DirectoryStack",
    "InvalidComponentError",
    "InvalidInputKindError",
    "LocalPath",
    "MimeType",
    "PathComponents",
    "PathError",
    "PathKind",
    "RemotePath",
    "StubbedOperationError",
    "UnsupportedFormatError",
    "UnsupportedSchemeError",
    "codec_for",
    "glob",
    "home",
    "lookup",
    "pwd",
    "tmpfile",
    "which",
    "working_directory",
]
