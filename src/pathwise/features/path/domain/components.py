"""
Summary: Decomposed path value holding directory segments, base name and extension.
Why: Derive new paths by swapping components instead of re-parsing strings.
"""

from __future__ import annotations

import copy
import posixpath
from collections.abc import Iterable
from enum import StrEnum
from functools import total_ordering
from typing import Any, ClassVar, Final, Self

from pathwise.shared.errors import InvalidComponentError

from .relative import is_proper_prefix, relative_dirs


class _Unset:
    """Marker for overrides that were not supplied."""

    def __repr__(self) -> str:
        return "<unset>"


UNSET: Final[Any] = _Unset()


class PathKind(StrEnum):
    """Hint telling the parser how to interpret a path string."""

    FILE = "file"
    DIR = "dir"


def split_filename(name: str) -> tuple[str, str | None]:
    """Split ``name`` into base and extension at its last dot.

    Leading dots belong to the base, so dotfiles only get an extension when a
    second dot follows: ``.bashrc`` -> (``.bashrc``, None), ``.tar.gz`` ->
    (``.tar``, ``gz``). A trailing dot yields no extension.
    """

    stripped = name.lstrip(".")
    offset = len(name) - len(stripped)
    dot = stripped.rfind(".")
    if dot <= 0 or dot == len(stripped) - 1:
        return name, None
    return name[: offset + dot], name[offset + dot + 1 :]


@total_ordering
class PathComponents:
    """A path decomposed into ``dirs``, ``base`` and ``ext``.

    The full ``path`` and ``filename`` are always derived from the stored
    components. Whether the directory part is absolute or relative is an
    explicit tag (``is_relative``) rather than something inferred from the
    segments.

    This base class interprets strings lexically with POSIX rules; subclasses
    override ``_split_directory`` to anchor strings somewhere concrete.
    """

    _SEPARATOR: ClassVar[str] = "/"
    _ALT_SEPARATORS: ClassVar[tuple[str, ...]] = ()

    _dirs: list[str]
    _base: str | None
    _ext: str | None
    _relative: bool

    def __init__(
        self,
        dirs: Iterable[str] = (),
        base: str | None = None,
        ext: str | None = None,
        *,
        relative: bool = False,
    ) -> None:
        self._dirs = []
        self._base = None
        self._ext = None
        self._relative = relative
        self.dirs = dirs
        self._assign_name(base, ext)

    # -- string decomposition -------------------------------------------------

    @classmethod
    def _separators(cls) -> tuple[str, ...]:
        return (cls._SEPARATOR, *cls._ALT_SEPARATORS)

    def _split_directory(self, raw: str) -> list[str]:
        """Split a directory string into canonical segments."""

        normalized = posixpath.normpath(raw)
        return [segment for segment in normalized.split("/") if segment not in ("", ".")]

    def _assign_path_string(self, raw: str, *, is_dir: bool | None = None) -> None:
        """Replace every component by decomposing ``raw``.

        A trailing separator or ``is_dir`` marks a directory-only value;
        otherwise the last segment becomes the filename.
        """

        if raw.endswith(self._separators()) or is_dir:
            self._dirs = self._split_directory(raw)
            self._base = None
            self._ext = None
        else:
            head, tail = self._split_head_tail(raw)
            self._dirs = self._split_directory(head)
            self.filename = tail or None
        self._relative = False
        self._invalidate()

    def _split_head_tail(self, raw: str) -> tuple[str, str]:
        index = max(raw.rfind(separator) for separator in self._separators())
        if index < 0:
            return "", raw
        head = raw[: index + 1]
        return head, raw[index + 1 :]

    def _invalidate(self) -> None:
        """Drop anything cached from the previous components."""

    # -- components -------------------------------------------------------------

    @property
    def dirs(self) -> list[str]:
        """Directory segments, root first (a copy; assign to change)."""

        return list(self._dirs)

    @dirs.setter
    def dirs(self, value: Iterable[str]) -> None:
        if isinstance(value, str):
            value = [value]
        segments: list[str] = []
        for segment in value:
            if not isinstance(segment, str):
                raise InvalidComponentError("directory segment", segment, "must be a string")
            for separator in self._ALT_SEPARATORS:
                segment = segment.replace(separator, self._SEPARATOR)
            segments.extend(part for part in segment.split(self._SEPARATOR) if part)
        self._dirs = segments
        self._invalidate()

    @property
    def base(self) -> str | None:
        """The filename without its final extension."""

        return self._base

    @base.setter
    def base(self, value: str | None) -> None:
        self._assign_name(value, self._ext if value else None)

    @property
    def ext(self) -> str | None:
        """The extension without its leading dot."""

        return self._ext

    @ext.setter
    def ext(self, value: str | None) -> None:
        self._assign_name(self._base, value)

    def _normalize_ext(self, value: str | None) -> str | None:
        """Drop one leading dot; blank extensions become None."""

        if value is None:
            return None
        self._check_name("ext", value)
        normalized = value[1:] if value.startswith(".") else value
        if not normalized.strip():
            return None
        if "." in normalized:
            raise InvalidComponentError(
                "ext", value, "extensions cannot contain a dot; use append_ext()"
            )
        return normalized

    def _assign_name(self, base: str | None, ext: str | None) -> None:
        """Store ``base`` and ``ext`` together so the filename splits back into them."""

        normalized = self._normalize_ext(ext)
        if base is None or base == "":
            if normalized is not None:
                raise InvalidComponentError("ext", ext, "an extension needs a base name")
            self._base = None
            self._ext = None
        else:
            self._check_name("base", base)
            filename = base if normalized is None else f"{base}.{normalized}"
            if split_filename(filename) != (base, normalized):
                raise InvalidComponentError(
                    "base", base, f"{filename!r} would not split back into this base"
                )
            self._base = base
            self._ext = normalized
        self._invalidate()

    @property
    def filename(self) -> str | None:
        """Base name plus extension, or None for a directory-only value."""

        if self._base is None:
            return None
        if self._ext is None:
            return self._base
        return f"{self._base}.{self._ext}"

    @filename.setter
    def filename(self, value: str | None) -> None:
        if value is None or value == "":
            self._base = None
            self._ext = None
        else:
            self._check_name("filename", value)
            self._base, self._ext = split_filename(value)
        self._invalidate()

    name = filename

    @property
    def exts(self) -> list[str]:
        """Every dotted suffix of the filename (``a.tar.gz`` -> ``["tar", "gz"]``)."""

        if self.filename is None:
            return []
        return [part for part in self.filename.lstrip(".").split(".")[1:] if part]

    @property
    def is_relative(self) -> bool:
        return self._relative

    @property
    def dir(self) -> str:
        """The directory portion as a string."""

        joined = self._SEPARATOR.join(self._dirs)
        if self._relative:
            return joined or "."
        return self._SEPARATOR + joined

    @dir.setter
    def dir(self, value: str) -> None:
        self._dirs = self._split_directory(value)
        self._relative = False
        self._invalidate()

    dirname = dir

    @property
    def path(self) -> str:
        """The full path; directory-only values end with a separator."""

        if self._relative and not self._dirs:
            return self.filename or "."
        directory = self.dir
        if not directory.endswith(self._SEPARATOR):
            directory += self._SEPARATOR
        return directory + (self.filename or "")

    @path.setter
    def path(self, value: str) -> None:
        self._assign_path_string(value)

    def _check_name(self, component: str, value: Any) -> None:
        if not isinstance(value, str):
            raise InvalidComponentError(component, value, "must be a string")
        if any(separator in value for separator in self._separators()):
            raise InvalidComponentError(component, value, "cannot contain a path separator")

    # -- derivation -------------------------------------------------------------

    def copy(self) -> Self:
        """Return an independent copy sharing no mutable state."""

        return copy.copy(self)

    def __copy__(self) -> Self:
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._dirs = list(self._dirs)
        clone._invalidate()
        return clone

    def derive(
        self,
        *,
        path: str = UNSET,
        dir: str = UNSET,
        dirs: Iterable[str] = UNSET,
        filename: str | None = UNSET,
        base: str | None = UNSET,
        ext: str | None = UNSET,
    ) -> Self:
        """Return a copy with the named components replaced.

        Overrides apply in the order path, dir, dirs, filename, base, ext, so
        the more specific ones win. ``path`` and ``dir`` are decomposed
        lexically; the filesystem is never consulted. The receiver is left
        untouched.
        """

        result = self.copy()
        if path is not UNSET:
            result.path = path
        if dir is not UNSET:
            result.dir = dir
        if dirs is not UNSET:
            result.dirs = dirs
        if filename is not UNSET:
            result.filename = filename
        if base is not UNSET and ext is not UNSET:
            result._assign_name(base, ext)
        elif base is not UNSET:
            result.base = base
        elif ext is not UNSET:
            result.ext = ext
        return result

    def append_ext(self, suffix: str) -> Self:
        """Return a copy whose filename gains ``suffix`` as a new extension.

        Works whether or not an extension is already present:
        ``notes.txt`` -> ``notes.txt.bak`` and ``notes`` -> ``notes.bak``.
        """

        cleaned = suffix[1:] if suffix.startswith(".") else suffix
        if not cleaned.strip():
            raise InvalidComponentError("ext", suffix, "suffix cannot be blank")
        if self.filename is None:
            raise InvalidComponentError("ext", suffix, "an extension needs a base name")
        return self.derive(filename=f"{self.filename}.{cleaned}")

    def update(self, other: PathComponents) -> None:
        """Overwrite this value's components with ``other``'s."""

        self._dirs = list(other._dirs)
        self._base = other._base
        self._ext = other._ext
        self._relative = other._relative
        self._invalidate()

    def relative_to(self, anchor: PathComponents) -> Self:
        """Return a relative copy locating this value from ``anchor``'s directory."""

        result = self.copy()
        result._dirs = relative_dirs(self._dirs, anchor._dirs)
        result._relative = True
        return result

    def parent_of(self, other: PathComponents) -> bool:
        """True when this value's dirs are a proper prefix of ``other``'s."""

        return is_proper_prefix(self._dirs, other._dirs)

    def child_of(self, other: PathComponents) -> bool:
        """True when ``other``'s dirs are a proper prefix of this value's."""

        return other.parent_of(self)

    # -- comparison -------------------------------------------------------------

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathComponents):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, PathComponents):
            return str(self) < str(other)
        if isinstance(other, str):
            return str(self) < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


__all__ = ["PathComponents", "PathKind", "UNSET", "split_filename"]
