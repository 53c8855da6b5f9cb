"""src/pathwise/features/compression/gzip_codec.py
What: Stream a file through gzip in either direction.
Why: Keep the byte-copying apart from the path bookkeeping that wraps it.
"""

from __future__ import annotations

import gzip
import os
import shutil

from pathwise.config.settings import GZIP_LEVEL, HASH_CHUNK_SIZE


def gzip_file(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    level: int | None = None,
) -> None:
    """Compress ``source`` into ``destination`` (gzip format)."""

    compresslevel = GZIP_LEVEL if level is None else level
    with open(source, "rb") as raw, gzip.open(destination, "wb", compresslevel=compresslevel) as packed:
        shutil.copyfileobj(raw, packed, HASH_CHUNK_SIZE)


def gunzip_file(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
) -> None:
    """Decompress the gzip file ``source`` into ``destination``."""

    with gzip.open(source, "rb") as packed, open(destination, "wb") as raw:
        shutil.copyfileobj(packed, raw, HASH_CHUNK_SIZE)


__all__ = ["gunzip_file", "gzip_file"]
