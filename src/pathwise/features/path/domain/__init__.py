"""Pure path decomposition model and relative-path algorithm."""

from .components import UNSET, PathComponents, PathKind, split_filename
from .relative import PARENT_MARKER, common_prefix_length, is_proper_prefix, relative_dirs

__all__ = [
    "PARENT_MARKER",
    "PathComponents",
    "PathKind",
    "UNSET",
    "common_prefix_length",
    "is_proper_prefix",
    "relative_dirs",
    "split_filename",
]
