"""
Summary: Chunked content digests for files on disk.
Why: Hash large files without loading them into memory.
"""

from __future__ import annotations

import hashlib
import os

from pathwise.config.settings import HASH_CHUNK_SIZE
from pathwise.shared.errors import UnsupportedFormatError

ALGORITHM_ALIASES: dict[str, str] = {
    "sha2": "sha256",
}


def calculate_digest(file_path: str | os.PathLike[str], algorithm: str = "sha256") -> str:
    """Calculate the hex digest of a file with the named hashlib algorithm."""

    name = ALGORITHM_ALIASES.get(algorithm.lower(), algorithm.lower())
    try:
        digest = hashlib.new(name)
    except ValueError as exc:
        raise UnsupportedFormatError(algorithm, path=os.fspath(file_path)) from exc

    with open(file_path, "rb") as handle:
        for byte_block in iter(lambda: handle.read(HASH_CHUNK_SIZE), b""):
            digest.update(byte_block)
    return digest.hexdigest()


__all__ = ["ALGORITHM_ALIASES", "calculate_digest"]
