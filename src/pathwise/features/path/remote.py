"""src/pathwise/features/path/remote.py
What: URL-backed path value that decomposes only the URL's path component.
Why: Share read-only path capabilities with local paths without inheriting filesystem writes.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import IO, Final
from urllib.parse import SplitResult, parse_qsl, urljoin, urlsplit, urlunsplit

import requests

from pathwise.config import settings
from pathwise.platform.logging import logger
from pathwise.shared.errors import InvalidInputKindError, UnsupportedSchemeError

from .readable import ReadablePath

SchemeReader = Callable[[str, float], bytes]

DEFAULT_PORTS: Final[dict[str, int]] = {
    "ftp": 21,
    "http": 80,
    "https": 443,
}


def read_over_http(url: str, timeout: float) -> bytes:
    """Fetch ``url`` with ``requests`` and return the response body."""

    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content


_READERS: dict[str, SchemeReader] = {
    "http": read_over_http,
    "https": read_over_http,
}


def register_reader(scheme: str, reader: SchemeReader) -> None:
    """Register (or replace) the reader used for ``scheme`` URLs."""

    _READERS[scheme.lower()] = reader


def reader_for(scheme: str, url: str) -> SchemeReader:
    reader = _READERS.get(scheme.lower())
    if reader is None:
        raise UnsupportedSchemeError(scheme, url)
    return reader


class RemotePath(ReadablePath):
    """A URL such as ``http://host.com:8080/dir/file.ext?a=1``.

    ``dirs``/``base``/``ext`` describe the URL path; ``url`` and ``str()``
    rebuild the whole URL from the current components.
    """

    _parts: SplitResult

    def __init__(self, url: str | RemotePath) -> None:
        if isinstance(url, RemotePath):
            url = url.url
        if not isinstance(url, str):
            raise InvalidInputKindError(url)
        self._parts = urlsplit(url)
        super().__init__()
        self._assign_path_string(self._parts.path or "/")

    @property
    def is_uri(self) -> bool:
        return True

    @property
    def url(self) -> str:
        path = self.path
        if not self._parts.path and path == "/":
            path = ""
        return urlunsplit(self._parts._replace(path=path))

    def __str__(self) -> str:
        return self.url

    @property
    def scheme(self) -> str:
        return self._parts.scheme

    protocol = scheme

    @property
    def host(self) -> str | None:
        return self._parts.hostname

    @property
    def port(self) -> int | None:
        """Explicit port, or the scheme's default."""

        return self._parts.port or DEFAULT_PORTS.get(self.scheme.lower())

    @property
    def query(self) -> dict[str, str] | None:
        if not self._parts.query:
            return None
        return dict(parse_qsl(self._parts.query, keep_blank_values=True))

    def join(self, *others: str) -> RemotePath:
        """Resolve ``others`` against this URL, one after another."""

        joined = self.url
        for other in others:
            joined = urljoin(joined, other)
        return RemotePath(joined)

    def read(self) -> bytes:
        reader = reader_for(self.scheme, self.url)
        logger.debug("Reading remote path [url=%s]", self.url)
        return reader(self.url, settings.URL_TIMEOUT)

    def open(self, mode: str = "rb") -> IO[bytes]:
        if mode not in ("r", "rb"):
            raise ValueError(f"Remote paths are read-only (mode={mode!r})")
        return io.BytesIO(self.read())


__all__ = [
    "DEFAULT_PORTS",
    "RemotePath",
    "SchemeReader",
    "read_over_http",
    "reader_for",
    "register_reader",
]
