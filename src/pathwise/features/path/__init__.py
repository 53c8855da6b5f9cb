# Path: `src/pathwise/features/path/__init__.py`
# Summary: Export path values, the decomposition model and the factory helpers.
# Why: Provide a stable import surface for the CLI and tests.

from .domain import UNSET, PathComponents, PathKind, relative_dirs, split_filename
from .readable import ReadablePath
from .local import LocalPath, PathInput, expand_braces, expand_path, glob_paths
from .remote import RemotePath, register_reader
from .factory import AnyPath, glob, home, lookup, pwd, tmpfile

__all__ = [
    "AnyPath",
    "LocalPath",
    "PathComponents",
    "PathInput",
    "PathKind",
    "ReadablePath",
    "RemotePath",
    "UNSET",
    "expand_braces",
    "expand_path",
    "glob",
    "glob_paths",
    "home",
    "lookup",
    "pwd",
    "register_reader",
    "relative_dirs",
    "split_filename",
    "tmpfile",
]
