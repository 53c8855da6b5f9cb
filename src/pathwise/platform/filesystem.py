"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os


def ensure_directory(directory: str) -> str:
    """Ensure ``directory`` exists as a folder and return it."""

    if os.path.lexists(directory):
        if not os.path.isdir(directory):
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    os.makedirs(directory, exist_ok=True)
    return directory


def ensure_parent_directory(path: str) -> str:
    """Ensure the parent directory for ``path`` exists and return it."""

    parent = os.path.dirname(os.path.normpath(path)) or os.curdir
    return ensure_directory(parent)


__all__ = ["ensure_directory", "ensure_parent_directory"]
