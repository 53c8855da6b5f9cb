"""src/pathwise/features/path/factory.py
What: Turn raw strings into path values and expose FileUtils-style helpers.
Why: Callers should not need to decide between local, remote and globbed inputs.
"""

from __future__ import annotations

import os
import re
import tempfile
from collections.abc import Mapping
from typing import Final

from pathwise.shared.errors import InvalidInputKindError

from .domain.components import PathKind
from .local import LocalPath, PathInput, expand_path, glob_paths
from .remote import RemotePath

_URL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-z\-]+://", re.IGNORECASE)
_GLOB_PATTERN: Final[re.Pattern[str]] = re.compile(r"(^|[^\\])[?*{}\[]")

AnyPath = LocalPath | RemotePath


def is_url(raw: str) -> bool:
    return _URL_PATTERN.match(raw) is not None


def has_glob(raw: str) -> bool:
    """True when ``raw`` holds an unescaped glob metacharacter."""

    return _GLOB_PATTERN.search(raw) is not None


def lookup(raw: PathInput | AnyPath) -> AnyPath | list[LocalPath]:
    """Build the right path value for ``raw``.

    Existing values are returned unchanged, ``scheme://`` strings become
    ``RemotePath``, strings with glob metacharacters expand to a sorted list
    and everything else becomes a ``LocalPath``.
    """

    if isinstance(raw, (LocalPath, RemotePath)):
        return raw
    if not isinstance(raw, (str, os.PathLike)):
        raise InvalidInputKindError(raw)
    text = os.fspath(raw)
    if not isinstance(text, str):
        raise InvalidInputKindError(raw)
    if is_url(text):
        return RemotePath(text)
    # Relative patterns glob against the cwd, so its own name is never a pattern.
    if has_glob(text):
        return glob_paths(text)
    return LocalPath(expand_path(text))


glob = glob_paths


def pwd() -> LocalPath:
    """The current working directory."""

    return LocalPath(os.getcwd(), kind=PathKind.DIR)


def home(env: Mapping[str, str] | None = None) -> LocalPath:
    """Return the home directory named by ``HOME`` (falling back to ``~``)."""

    mapping = env if env is not None else os.environ
    directory = (mapping.get("HOME") or "").strip() or os.path.expanduser("~")
    return LocalPath(directory, kind=PathKind.DIR)


def tmpfile(prefix: str = "tmp") -> LocalPath:
    """Create an empty temporary file and return its path."""

    descriptor, name = tempfile.mkstemp(prefix=prefix)
    os.close(descriptor)
    return LocalPath(name, kind=PathKind.FILE)


def _at(target: PathInput | LocalPath) -> LocalPath:
    if isinstance(target, LocalPath):
        return target
    return LocalPath(target)


def mkdir(target: PathInput | LocalPath) -> LocalPath:
    return _at(target).mkdir()


def mkdir_p(target: PathInput | LocalPath) -> LocalPath:
    return _at(target).mkdir_p()


def rm(target: PathInput | LocalPath) -> None:
    _at(target).rm()


def truncate(target: PathInput | LocalPath, offset: int = 0) -> LocalPath:
    return _at(target).truncate(offset)


def realpath(target: PathInput | LocalPath) -> LocalPath:
    return _at(target).realpath()


def mv(source: PathInput | LocalPath, dest: PathInput) -> LocalPath:
    return _at(source).mv(dest)


def chmod(target: PathInput | LocalPath, mode: int) -> LocalPath:
    return _at(target).chmod(mode)


def chown(target: PathInput | LocalPath, usergroup: str) -> LocalPath:
    return _at(target).chown(usergroup)


def chmod_r(target: PathInput | LocalPath, mode: int) -> LocalPath:
    return _at(target).chmod_r(mode)


def chown_r(target: PathInput | LocalPath, usergroup: str) -> LocalPath:
    return _at(target).chown_r(usergroup)


def sha1(target: PathInput | LocalPath) -> str:
    return _at(target).sha1()


def sha2(target: PathInput | LocalPath) -> str:
    return _at(target).sha2()


def md5(target: PathInput | LocalPath) -> str:
    return _at(target).md5()


def ls(target: PathInput | LocalPath) -> list[LocalPath]:
    return _at(target).ls()


def ls_r(target: PathInput | LocalPath) -> list[LocalPath]:
    return _at(target).ls_r()


def ln_s(source: PathInput | LocalPath, dest: PathInput) -> LocalPath:
    return _at(source).ln_s(dest)


__all__ = [
    "AnyPath",
    "chmod",
    "chmod_r",
    "chown",
    "chown_r",
    "glob",
    "has_glob",
    "home",
    "is_url",
    "ln_s",
    "lookup",
    "ls",
    "ls_r",
    "md5",
    "mkdir",
    "mkdir_p",
    "mv",
    "pwd",
    "realpath",
    "rm",
    "sha1",
    "sha2",
    "tmpfile",
    "truncate",
]
