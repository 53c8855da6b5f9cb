"""Where: platform/logging/handlers.py
What: Rich console handler that renders structured path events.
Why: Keep console styling separate from logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathEventRichHandler(RichHandler):
    """Rich handler that renders path side effects with compact, coloured paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "path.rename": ("✏️", "cyan", "Renamed "),
        "path.move": ("📦", "magenta", "Moved "),
        "path.copy": ("📄", "blue", "Copied "),
        "path.link": ("🔗", "blue", "Linked "),
        "path.delete": ("🗑️", "yellow", "Removed "),
        "path.mkdir": ("📁", "green", "Created "),
        "path.compress": ("🗜️", "green", "Compressed "),
        "path.decompress": ("📂", "green", "Decompressed "),
        "path.chdir": ("➡️", "cyan", "Entered "),
        "path.error": ("⛔", "red", "Failed "),
    }
    _TWO_PATH_EVENTS: ClassVar[frozenset[str]] = frozenset(
        {
            "path.rename",
            "path.move",
            "path.copy",
            "path.link",
            "path.compress",
            "path.decompress",
        }
    )
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and ellipsis truncation."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor
        elif truncated:
            display_string = "…" + separator
        display_string += separator.join(body_parts)
        if path.endswith(("/", "\\")) and body_parts:
            display_string += separator
        if not display_string:
            display_string = "."

        return self._style_path_string(display_string, separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured path events with dedicated styling."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))
        if event in self._TWO_PATH_EVENTS and target_path:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))

        error_message = getattr(record, "error_message", None)
        if error_message:
            _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path events."""

        event_text = self._render_path_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PathEventRichHandler"]
