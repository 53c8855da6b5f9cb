"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Attach console and rotating-file handlers to the ``pathwise`` logger on request.
Why: Library imports stay side-effect free; only entry points decide where records go.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from pathwise.config.paths import default_log_file
from pathwise.platform.filesystem import ensure_parent_directory

from .handlers import PathEventRichHandler


LOGGER_NAME: Final[str] = "pathwise"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

LOG_ROTATE_BYTES: Final[int] = 5 * 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3
FILE_RECORD_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def _detach_handlers(target: logging.Logger) -> None:
    """Close and remove handlers left by an earlier ``setup_logger`` call."""

    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()


def _console_handler(level: int) -> logging.Handler:
    handler = PathEventRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    """Rotating UTF-8 file handler; the parent directory is created on demand."""

    resolved = log_file.expanduser().resolve()
    _ = ensure_parent_directory(str(resolved))
    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=LOG_ROTATE_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_RECORD_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Route ``pathwise`` records to stderr and, optionally, a log file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Rotating log file; ``None`` keeps output on the console only.
        console_level: Threshold for the Rich console handler.
        file_level: Threshold for the file handler.

    Returns:
        logging.Logger: The configured ``pathwise`` logger.
    """

    target = logging.getLogger(LOGGER_NAME)
    _detach_handlers(target)
    target.setLevel(min(console_level, file_level) if log_file else console_level)
    target.addHandler(_console_handler(console_level))
    if log_file is not None:
        target.addHandler(_file_handler(Path(log_file), file_level))
    return target


# Library code logs through this logger; handlers are installed by ``setup_logger``.
logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "LOG_BACKUP_COUNT",
    "LOG_ROTATE_BYTES",
    "logger",
    "setup_logger",
]
