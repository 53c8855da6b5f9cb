"""Where: src/pathwise/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature modules without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

import os
import sys

from pathwise.config.config import (
    GZIP_LEVEL_DEFAULT,
    HASH_CHUNK_SIZE_DEFAULT,
    SNIFF_BYTES_DEFAULT,
    URL_TIMEOUT_DEFAULT,
    config as app_config,
)

# Filesystem conventions ------------------------------------------------------

# Separator between entries of the PATH search list.
PATH_SEPARATOR: str = os.pathsep

# Suffix appended to binary names when searching PATH.
BINARY_EXTENSION: str = ".exe" if sys.platform.startswith("win") else ""


# Checksums ------------------------------------------------------------------

_hash_chunk_size = getattr(app_config, "hash_chunk_size", HASH_CHUNK_SIZE_DEFAULT)
HASH_CHUNK_SIZE: int = (
    _hash_chunk_size
    if isinstance(_hash_chunk_size, int) and _hash_chunk_size > 0
    else HASH_CHUNK_SIZE_DEFAULT
)


# Compression ----------------------------------------------------------------

_gzip_level = getattr(app_config, "gzip_level", GZIP_LEVEL_DEFAULT)
GZIP_LEVEL: int = (
    min(max(_gzip_level, 0), 9) if isinstance(_gzip_level, int) else GZIP_LEVEL_DEFAULT
)


# Remote reads ---------------------------------------------------------------

_url_timeout = getattr(app_config, "url_timeout", URL_TIMEOUT_DEFAULT)
URL_TIMEOUT: float = (
    float(_url_timeout)
    if isinstance(_url_timeout, (int, float)) and _url_timeout > 0
    else URL_TIMEOUT_DEFAULT
)


# Media type sniffing ----------------------------------------------------------

_sniff_bytes = getattr(app_config, "sniff_bytes", SNIFF_BYTES_DEFAULT)
SNIFF_BYTES: int = (
    _sniff_bytes if isinstance(_sniff_bytes, int) and _sniff_bytes > 0 else SNIFF_BYTES_DEFAULT
)


__all__ = [
    "PATH_SEPARATOR",
    "BINARY_EXTENSION",
    "HASH_CHUNK_SIZE",
    "GZIP_LEVEL",
    "URL_TIMEOUT",
    "SNIFF_BYTES",
]
