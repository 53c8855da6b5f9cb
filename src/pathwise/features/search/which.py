"""Where: src/pathwise/features/search/which.py
What: Locate binaries on the PATH search list.
Why: Answer environment-driven lookups with path values instead of raw strings.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pathwise.config import settings
from pathwise.features.path.local import LocalPath
from pathwise.features.path.domain.components import PathKind


def _search_dirs(env: Mapping[str, str]) -> list[str]:
    raw = env.get("PATH") or ""
    return [entry for entry in raw.split(settings.PATH_SEPARATOR) if entry]


def _which_one(name: str, env: Mapping[str, str]) -> LocalPath | None:
    for directory in _search_dirs(env):
        candidate = LocalPath(directory, kind=PathKind.DIR).join(name + settings.BINARY_EXTENSION)
        if candidate.exists():
            return candidate
    return None


def which(
    name: str, *extras: str, env: Mapping[str, str] | None = None
) -> LocalPath | None | list[LocalPath | None]:
    """Search PATH for binaries, like ``/usr/bin/which``.

    Args:
        name: Binary to look for; the platform binary suffix is appended.
        *extras: More binaries; when given, a list is returned in input order.
        env: Environment mapping to read ``PATH`` from (defaults to ``os.environ``).

    Returns:
        The first existing match (or None) for a single name, otherwise a list
        with one entry per requested name.
    """

    mapping = env if env is not None else os.environ
    if not extras:
        return _which_one(name, mapping)
    return [_which_one(each, mapping) for each in (name, *extras)]


__all__ = ["which"]
