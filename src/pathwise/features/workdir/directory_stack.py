"""
Summary: Explicit stack of working directories with scoped directory changes.
Why: Replace process-global push/pop state with an object the caller owns.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from pathwise.platform.logging import logger
from pathwise.shared.events import PathEvent


def change_directory(dest: str | os.PathLike[str]) -> str:
    """Change the process working directory to ``dest`` and return it."""

    target = os.fspath(dest)
    if not os.path.isdir(target):
        raise NotADirectoryError(f"Can't change directory into {target!r}: not a directory")
    os.chdir(target)
    logger.debug(
        "Changed directory [dest=%s]",
        target,
        extra={"path_event": PathEvent.CHDIR.value, "source_path": target},
    )
    return target


class DirectoryStack:
    """Working directories remembered by ``push`` and restored by ``pop``."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def push(self, dest: str | os.PathLike[str] | None = None) -> str:
        """Remember the current directory, then optionally enter ``dest``."""

        current = os.getcwd()
        if dest is not None:
            _ = change_directory(dest)
        self._entries.append(current)
        return current

    def pop(self) -> str:
        """Return to the most recently pushed directory."""

        if not self._entries:
            raise IndexError("directory stack is empty")
        previous = self._entries.pop()
        _ = change_directory(previous)
        return previous

    def chdir(self, dest: str | os.PathLike[str]) -> str:
        """Enter ``dest`` without remembering where we came from."""

        return change_directory(dest)

    @contextmanager
    def cd(self, dest: str | os.PathLike[str]) -> Iterator[str]:
        """Enter ``dest`` for the duration of the block, restoring on every exit."""

        _ = self.push(dest)
        try:
            yield os.getcwd()
        finally:
            try:
                _ = self.pop()
            except OSError as exc:
                logger.error(
                    "Failed to restore working directory: %s",
                    exc,
                    extra={"path_event": PathEvent.ERROR.value, "error_message": str(exc)},
                )
                raise


@contextmanager
def working_directory(dest: str | os.PathLike[str]) -> Iterator[str]:
    """Scoped directory change backed by a private stack."""

    with DirectoryStack().cd(dest) as current:
        yield current


__all__ = ["DirectoryStack", "change_directory", "working_directory"]
