"""src/pathwise/features/path/readable.py
What: Capabilities shared by local and remote path values.
Why: Both variants honestly support string form, join, decomposition and reads; nothing more.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Any, Self

from pathwise.features.formats import codec_for

from .domain.components import PathComponents


class ReadablePath(PathComponents, ABC):
    """A decomposed path whose contents can be read and parsed."""

    @property
    @abstractmethod
    def is_uri(self) -> bool:
        """True for URL-backed values."""

    @abstractmethod
    def join(self, *others: str) -> Self:
        """Return a new value with ``others`` appended to this one."""

    @abstractmethod
    def open(self, mode: str = "rb") -> IO[bytes]:
        """Open the contents as a binary stream."""

    @abstractmethod
    def read(self) -> bytes:
        """Return the full contents."""

    def __truediv__(self, other: str) -> Self:
        return self.join(other)

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.read().decode(encoding)

    def lines(self, encoding: str = "utf-8") -> list[str]:
        """All lines of the contents with line endings stripped."""

        return self.read_text(encoding).splitlines()

    def parse(self) -> Any:
        """Decode the contents with the codec registered for ``ext``."""

        return self._decode_as(self.ext)

    def _decode_as(self, tag: str | None) -> Any:
        codec = codec_for(tag, path=str(self))
        with self.open() as stream:
            return codec.decode(stream)

    def read_json(self) -> Any:
        return self._decode_as("json")

    def read_yaml(self) -> Any:
        return self._decode_as("yaml")

    def read_xml(self) -> Any:
        return self._decode_as("xml")

    def read_html(self) -> Any:
        return self._decode_as("html")

    def read_pickle(self) -> Any:
        return self._decode_as("pickle")

    def read_msgpack(self) -> Any:
        return self._decode_as("msgpack")


__all__ = ["ReadablePath"]
