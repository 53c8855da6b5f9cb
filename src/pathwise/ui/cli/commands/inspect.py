"""Inspect command implementation for the CLI."""

from __future__ import annotations

from typing import final

from pathwise.features.path import LocalPath, RemotePath, lookup
from pathwise.shared.errors import PathError
from pathwise.ui.cli.args.options import InspectArgs
from pathwise.ui.cli.models import ResultRow

from .executor import CommandExecutor


def describe(value: LocalPath | RemotePath) -> dict[str, str]:
    """Decomposed fields of a path value, ready for display."""

    return {
        "dirs": "/".join(value.dirs),
        "base": value.base or "",
        "ext": value.ext or "",
        "filename": value.filename or "",
        "path": str(value),
    }


@final
class InspectCommand(CommandExecutor):
    """Show how each input decomposes."""

    title = "Inspect"

    def __init__(self, args: InspectArgs) -> None:
        super().__init__(args)
        self.paths = args.paths

    def collect(self) -> list[ResultRow]:
        rows: list[ResultRow] = []
        for raw in self.paths:
            try:
                found = lookup(raw)
            except PathError as exc:
                rows.append(ResultRow(source=raw, error=str(exc)))
                continue
            if isinstance(found, list):
                if not found:
                    rows.append(ResultRow(source=raw, error="no matches"))
                rows.extend(ResultRow(source=raw, fields=describe(entry)) for entry in found)
            else:
                rows.append(ResultRow(source=raw, fields=describe(found)))
        return rows
