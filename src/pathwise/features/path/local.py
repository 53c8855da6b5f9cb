"""src/pathwise/features/path/local.py
What: Filesystem-backed path value with query, I/O and mutation helpers.
Why: Layer convenience operations over the decomposed path model.
Assumptions: - One owner per instance; the memoized lstat is not guarded by a lock.
Trade-offs: - Stat results are cached until ``reload()``; external changes are not noticed.
"""

from __future__ import annotations

import glob as globbing
import os
import re
import shutil
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager
from datetime import datetime
from typing import IO, Any, ClassVar, Self

from pathwise.config import settings
from pathwise.features.checksum import calculate_digest
from pathwise.features.compression import gunzip_file, gzip_file
from pathwise.features.formats import codec_for
from pathwise.features.mime import (
    DIRECTORY_TYPE,
    UNKNOWN_TYPE,
    MimeType,
    mime_type_from_extension,
    resolve_true_extension,
    sniff_mime_type,
)
from pathwise.features.workdir import change_directory, working_directory
from pathwise.platform.filesystem import ensure_directory, ensure_parent_directory
from pathwise.platform.logging import logger
from pathwise.shared.errors import (
    AlreadyExistsError,
    InvalidComponentError,
    InvalidInputKindError,
    StubbedOperationError,
    UnsupportedFormatError,
)
from pathwise.shared.events import PathEvent

from .domain.components import PathKind
from .readable import ReadablePath

_BRACE_GROUP = re.compile(r"\{([^{}]*)\}")

PathInput = str | os.PathLike[str]


def expand_path(raw: str) -> str:
    """Absolute, normalized form of ``raw`` that keeps a trailing separator."""

    expanded = os.path.abspath(os.path.expanduser(raw))
    separators = (os.sep, os.altsep) if os.altsep else (os.sep,)
    if raw.endswith(separators) and not expanded.endswith(os.sep):
        expanded += os.sep
    return expanded


def expand_braces(pattern: str) -> list[str]:
    """Expand shell-style ``{a,b}`` alternatives, innermost group first."""

    match = _BRACE_GROUP.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return list(dict.fromkeys(expanded))


def glob_paths(pattern: str, *, kind: PathKind | str | None = None) -> list[LocalPath]:
    """Sorted ``LocalPath`` values for every entry matching ``pattern``.

    ``**`` matches recursively and ``{a,b}`` alternatives are expanded.
    """

    entries: set[str] = set()
    for candidate in expand_braces(os.path.expanduser(pattern)):
        entries.update(globbing.glob(candidate, recursive=True))
    return [LocalPath(entry, kind=kind) for entry in sorted(entries)]


class LocalPath(ReadablePath):
    """A path on the local filesystem.

    Construction decomposes the string once: a trailing separator means a
    directory; otherwise the ``kind`` hint, or a probe of the filesystem,
    decides whether the last segment is a filename. Directory parts are always
    expanded to absolute, canonical segments.

    ``lstat()`` is memoized per instance (computed, then stored) and only
    dropped by ``reload()`` or by operations on this instance that change the
    entry. Instances are not meant to be shared between threads.
    """

    _SEPARATOR: ClassVar[str] = os.sep
    _ALT_SEPARATORS: ClassVar[tuple[str, ...]] = (os.altsep,) if os.altsep else ()

    _lstat: os.stat_result | None
    _true_type: str | None

    def __init__(
        self,
        raw: PathInput | LocalPath,
        *,
        kind: PathKind | str | None = None,
        relative: bool = False,
        relative_to: PathInput | LocalPath | None = None,
    ) -> None:
        self._lstat = None
        self._true_type = None

        if isinstance(raw, LocalPath):
            super().__init__(raw._dirs, raw._base, raw._ext, relative=raw._relative)
        elif isinstance(raw, (str, os.PathLike)):
            text = os.fspath(raw)
            if not isinstance(text, str):
                raise InvalidInputKindError(raw)
            super().__init__()
            self._assign_path_string(text, is_dir=self._probe_is_dir(text, kind))
        else:
            raise InvalidInputKindError(raw)

        if relative:
            self.update(self.relative_to(LocalPath(os.getcwd(), kind=PathKind.DIR)))
        elif relative_to is not None:
            self.update(self.relative_to(LocalPath(relative_to, kind=PathKind.DIR)))

    # -- decomposition hooks ------------------------------------------------------

    def _probe_is_dir(self, text: str, kind: PathKind | str | None) -> bool:
        if kind is not None and kind not in tuple(PathKind):
            raise InvalidComponentError("kind", kind, "expected 'file' or 'dir'")
        if text.endswith(self._separators()):
            return True
        if kind is not None:
            return PathKind(kind) is PathKind.DIR
        return os.path.isdir(os.path.expanduser(text))

    def _split_directory(self, raw: str) -> list[str]:
        _, expanded = os.path.splitdrive(os.path.abspath(os.path.expanduser(raw)))
        return [segment for segment in expanded.split(os.sep) if segment]

    def _invalidate(self) -> None:
        self._lstat = None
        self._true_type = None

    @property
    def _fs_path(self) -> str:
        """The path handed to OS calls (no trailing separator)."""

        return self.path.rstrip(self._SEPARATOR) or self._SEPARATOR

    def __fspath__(self) -> str:
        return self._fs_path

    @property
    def is_uri(self) -> bool:
        return False

    def reload(self) -> Self:
        """Drop cached stat data and re-decompose the current path string."""

        if self._relative:
            self._invalidate()
            return self
        current = self.path
        self._assign_path_string(current, is_dir=self._probe_is_dir(current, None))
        return self

    # -- stat queries ---------------------------------------------------------------

    def exists(self) -> bool:
        return os.path.exists(self._fs_path)

    def lstat(self) -> os.stat_result:
        """Stat of the entry itself (symlinks not followed), memoized."""

        cached = self._lstat
        if cached is None:
            cached = os.lstat(self._fs_path)
            self._lstat = cached
        return cached

    def size(self) -> int:
        return os.path.getsize(self._fs_path)

    def mode(self) -> int:
        return self.lstat().st_mode

    def mtime(self) -> datetime:
        return datetime.fromtimestamp(self.lstat().st_mtime)

    def ctime(self) -> datetime:
        return datetime.fromtimestamp(self.lstat().st_ctime)

    def atime(self) -> datetime:
        return datetime.fromtimestamp(self.lstat().st_atime)

    def is_owned(self) -> bool:
        """Whether the current user owns this entry (not implemented)."""

        raise StubbedOperationError("is_owned", self.path)

    def is_executable(self) -> bool:
        return self.mode() & 0o111 != 0

    def is_writable(self) -> bool:
        return self.mode() & 0o222 != 0

    def is_readable(self) -> bool:
        return self.mode() & 0o444 != 0

    def is_dir(self) -> bool:
        return os.path.isdir(self._fs_path)

    def is_file(self) -> bool:
        return os.path.isfile(self._fs_path)

    def is_symlink(self) -> bool:
        return os.path.islink(self._fs_path)

    def is_broken_symlink(self) -> bool:
        return self.is_symlink() and not self.exists()

    def symlink_target(self) -> LocalPath:
        """Where this symlink points; relative targets resolve against the link's directory."""

        target = os.readlink(self._fs_path)
        if not os.path.isabs(target):
            target = os.path.join(os.path.dirname(self._fs_path), target)
        return LocalPath(target)

    readlink = symlink_target

    def realpath(self) -> LocalPath:
        """Follow every symlink to the entry's true location."""

        return LocalPath(os.path.realpath(self._fs_path))

    # -- navigation -------------------------------------------------------------------

    def join(self, *others: PathInput) -> LocalPath:
        """Append path segments; glob metacharacters are kept literally."""

        return LocalPath(os.path.join(self.path, *(os.fspath(other) for other in others)))

    def parent(self) -> LocalPath:
        """The containing directory of a file, otherwise one directory up."""

        if self._base is not None:
            return self.derive(filename=None)
        return self.derive(dirs=self._dirs[:-1])

    def relative(self) -> LocalPath:
        """This path relative to the current working directory."""

        return self.relative_to(LocalPath(os.getcwd(), kind=PathKind.DIR))

    def glob(self, pattern: str) -> list[LocalPath]:
        """Entries under this directory matching ``pattern``."""

        return glob_paths(os.path.join(self.path, pattern))

    def ls(self) -> list[LocalPath]:
        return self.glob("*")

    def ls_r(self) -> list[LocalPath]:
        return self.glob("**/*")

    def ls_dirs(self) -> list[LocalPath]:
        return [entry for entry in self.ls() if entry.is_dir()]

    def ls_files(self) -> list[LocalPath]:
        return [entry for entry in self.ls() if entry.is_file()]

    def siblings(self) -> list[LocalPath]:
        """Other entries in the same directory."""

        return [entry for entry in self.parent().ls() if entry != self]

    # -- reading and writing ------------------------------------------------------------

    def open(self, mode: str = "rb", **kwargs: Any) -> IO[Any]:
        return open(self._fs_path, mode, **kwargs)

    def read(self, length: int | None = None, offset: int | None = None) -> bytes:
        with self.open("rb") as handle:
            if offset:
                _ = handle.seek(offset)
            return handle.read(-1 if length is None else length)

    def touch(self) -> Self:
        with self.open("ab"):
            pass
        os.utime(self._fs_path)
        self._invalidate()
        return self

    def append(self, data: bytes | str | IO[bytes]) -> Self:
        """Append bytes, text (UTF-8) or the rest of a binary stream."""

        with self.open("ab") as handle:
            self._write_payload(handle, data)
        self._invalidate()
        return self

    __lshift__ = append

    def write(self, data: bytes | str | IO[bytes]) -> Self:
        """Overwrite the file with bytes, text (UTF-8) or a binary stream."""

        with self.open("wb") as handle:
            self._write_payload(handle, data)
        self._invalidate()
        return self

    @staticmethod
    def _write_payload(handle: IO[bytes], data: bytes | str | IO[bytes]) -> None:
        if isinstance(data, str):
            _ = handle.write(data.encode("utf-8"))
        elif isinstance(data, (bytes, bytearray, memoryview)):
            _ = handle.write(data)
        else:
            shutil.copyfileobj(data, handle)

    # -- structured formats ---------------------------------------------------------------

    def dump(self, obj: Any) -> Self:
        """Encode ``obj`` with the codec registered for ``ext`` and overwrite the file."""

        return self._encode_as(self.ext, obj)

    def _encode_as(self, tag: str | None, obj: Any) -> Self:
        payload = codec_for(tag, path=self.path).encode(obj)
        return self.write(payload)

    def write_json(self, obj: Any) -> Self:
        return self._encode_as("json", obj)

    def write_yaml(self, obj: Any) -> Self:
        return self._encode_as("yaml", obj)

    def write_pickle(self, obj: Any) -> Self:
        return self._encode_as("pickle", obj)

    def write_msgpack(self, obj: Any) -> Self:
        return self._encode_as("msgpack", obj)

    # -- working directory -----------------------------------------------------------------

    def cd(self) -> AbstractContextManager[str]:
        """Enter this directory for the duration of a ``with`` block."""

        return working_directory(self._fs_path)

    def chdir(self) -> Self:
        """Make this directory the process working directory."""

        _ = change_directory(self._fs_path)
        return self

    # -- mutation ---------------------------------------------------------------------------

    def _log_event(self, event: PathEvent, message: str, target: str | None = None) -> None:
        if target is None:
            logger.info(
                "%s [path=%s]",
                message,
                self.path,
                extra={"path_event": event.value, "source_path": self.path},
            )
            return
        logger.info(
            "%s [src=%s, dest=%s]",
            message,
            self.path,
            target,
            extra={
                "path_event": event.value,
                "source_path": self.path,
                "target_path": target,
            },
        )

    def rename(self, **overrides: Any) -> Self:
        """Rename on disk to ``self.derive(**overrides)`` and adopt the new components.

        Examples:
            ``LocalPath("song.mp3").rename(base="Song")``,
            ``LocalPath("Song.mp3").rename(ext="aac")``,
            ``LocalPath("Song.aac").rename(dir="/music2")``.

        Raises:
            AlreadyExistsError: If the destination exists. The receiver is left
                unchanged whenever the rename does not complete.
        """

        destination = self.derive(**overrides)
        if destination.exists():
            raise AlreadyExistsError("rename", destination.path)
        os.rename(self._fs_path, destination._fs_path)
        self._log_event(PathEvent.RENAME, "Renamed", destination.path)
        self.update(destination)
        return self

    def rename_to(self, path: PathInput) -> Self:
        """Rename to a full destination path."""

        return self.rename(path=os.fspath(path))

    def mkdir(self) -> Self:
        return self._make_directory("mkdir", os.mkdir)

    def mkdir_p(self) -> Self:
        return self._make_directory("mkdir_p", ensure_directory)

    def _make_directory(self, operation: str, make: Callable[[str], Any]) -> Self:
        if self.exists():
            if self.is_dir():
                return self.reload()
            raise AlreadyExistsError(operation, self.path)
        make(self._fs_path)
        self._log_event(PathEvent.MKDIR, "Created directory")
        return self.reload()

    def cp(self, dest: PathInput) -> LocalPath:
        """Copy this file (with metadata) to ``dest``."""

        destination = os.fspath(dest)
        _ = ensure_parent_directory(destination)
        result = shutil.copy2(self._fs_path, destination)
        self._log_event(PathEvent.COPY, "Copied", str(result))
        return LocalPath(result)

    def cp_r(self, dest: PathInput) -> LocalPath:
        """Copy this file or directory tree to ``dest``."""

        if not self.is_dir():
            return self.cp(dest)
        destination = os.fspath(dest)
        _ = ensure_parent_directory(destination)
        result = shutil.copytree(self._fs_path, destination, symlinks=True)
        self._log_event(PathEvent.COPY, "Copied tree", str(result))
        return LocalPath(result, kind=PathKind.DIR)

    def mv(self, dest: PathInput) -> LocalPath:
        """Move this entry to ``dest`` and return the new location.

        Unlike ``rename`` the receiver keeps describing the old location.
        """

        destination = os.fspath(dest)
        _ = ensure_parent_directory(destination)
        result = shutil.move(self._fs_path, destination)
        self._log_event(PathEvent.MOVE, "Moved", str(result))
        return LocalPath(result)

    move = mv

    def ln_s(self, dest: PathInput) -> LocalPath:
        """Create a symlink at ``dest`` pointing to this path."""

        destination = os.fspath(dest).rstrip(os.sep) or os.sep
        os.symlink(self._fs_path, destination)
        self._log_event(PathEvent.LINK, "Linked", destination)
        return LocalPath(destination)

    def chmod(self, mode: int) -> Self:
        os.chmod(self._fs_path, mode)
        self._invalidate()
        return self

    def chown(self, usergroup: str) -> Self:
        """Change ownership from a ``"user:group"`` string (either part may be empty)."""

        user, group = self._split_usergroup(usergroup)
        shutil.chown(self._fs_path, user, group)
        self._invalidate()
        return self

    def chmod_r(self, mode: int) -> Self:
        """Apply ``mode`` to this directory and everything below it."""

        self._require_directory("chmod_r")
        for entry in self._walk_entries():
            os.chmod(entry, mode)
        self._invalidate()
        return self

    def chown_r(self, usergroup: str) -> Self:
        """Apply ``"user:group"`` ownership to this directory and everything below it."""

        self._require_directory("chown_r")
        user, group = self._split_usergroup(usergroup)
        for entry in self._walk_entries():
            shutil.chown(entry, user, group)
        self._invalidate()
        return self

    def _require_directory(self, operation: str) -> None:
        if not self.is_dir():
            raise NotADirectoryError(f"{operation}: {self.path!r} is not a directory")

    def _walk_entries(self) -> Iterator[str]:
        yield self._fs_path
        for root, dirnames, filenames in os.walk(self._fs_path):
            for name in (*dirnames, *filenames):
                entry = os.path.join(root, name)
                if not os.path.islink(entry):
                    yield entry

    @staticmethod
    def _split_usergroup(usergroup: str) -> tuple[str | None, str | None]:
        user, _, group = usergroup.partition(":")
        return user or None, group or None

    def rm(self) -> None:
        """Remove this file, symlink or empty directory."""

        if self.is_dir() and not self.is_symlink():
            os.rmdir(self._fs_path)
        else:
            os.unlink(self._fs_path)
        self._log_event(PathEvent.DELETE, "Removed")
        self._invalidate()

    delete = rm
    unlink = rm

    def truncate(self, offset: int = 0) -> Self:
        """Cut the file down to ``offset`` bytes if it exists."""

        if self.exists():
            os.truncate(self._fs_path, offset)
            self._invalidate()
        return self

    # -- checksums ----------------------------------------------------------------------------

    def checksum(self, algorithm: str = "sha256") -> str:
        return calculate_digest(self._fs_path, algorithm)

    def sha1(self) -> str:
        return self.checksum("sha1")

    def sha2(self) -> str:
        return self.checksum("sha256")

    def md5(self) -> str:
        return self.checksum("md5")

    md5sum = md5

    # -- compression ---------------------------------------------------------------------------

    def gzip(self, level: int | None = None) -> Self:
        """Compress into ``<filename>.gz``, remove the original and point at the archive."""

        archive = self.append_ext("gz")
        if archive.exists():
            raise AlreadyExistsError("gzip", archive.path)
        self._convert(archive, lambda: gzip_file(self._fs_path, archive._fs_path, level))
        self._log_event(PathEvent.COMPRESS, "Compressed", archive.path)
        self.update(archive)
        return self

    def gunzip(self) -> Self:
        """Decompress a ``.gz`` file, remove the archive and point at the result."""

        if (self.ext or "").lower() != "gz":
            raise UnsupportedFormatError(self.ext, path=self.path)
        extracted = self.derive(ext=None)
        if extracted.exists():
            raise AlreadyExistsError("gunzip", extracted.path)
        self._convert(extracted, lambda: gunzip_file(self._fs_path, extracted._fs_path))
        self._log_event(PathEvent.DECOMPRESS, "Decompressed", extracted.path)
        self.update(extracted)
        return self

    def _convert(self, output: LocalPath, produce: Callable[[], None]) -> None:
        """Write ``output`` then remove the source; a failed write leaves no partial output."""

        try:
            produce()
        except BaseException:
            if os.path.lexists(output._fs_path):
                os.unlink(output._fs_path)
            raise
        os.unlink(self._fs_path)

    # -- media types ------------------------------------------------------------------------------

    def mimetype_from_ext(self) -> MimeType | None:
        return mime_type_from_extension(self.ext)

    def magic(self) -> MimeType | None:
        """Media type sniffed from the file's leading bytes."""

        with self.open("rb") as handle:
            head = handle.read(settings.SNIFF_BYTES)
        return sniff_mime_type(head)

    def mimetype(self) -> MimeType | None:
        """Media type from the extension, falling back to magic."""

        return self.mimetype_from_ext() or self.magic()

    identify = mimetype

    def true_type(self) -> str:
        """The extension that really describes this file, verified with magic.

        Returns ``"directory"`` for directories and ``"unknown"`` when neither
        the extension nor the contents say anything.
        """

        if self._true_type is not None:
            return self._true_type
        if self.is_file() or (self.is_symlink() and self.exists()):
            resolved = resolve_true_extension(self.ext, self.magic())
        elif self.is_dir():
            resolved = DIRECTORY_TYPE
        else:
            return UNKNOWN_TYPE
        self._true_type = resolved
        return resolved


__all__ = ["LocalPath", "PathInput", "expand_braces", "expand_path", "glob_paths"]
