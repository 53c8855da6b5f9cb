"""Relative command implementation for the CLI."""

from __future__ import annotations

import os
from typing import final

from pathwise.features.path import LocalPath, PathKind
from pathwise.shared.errors import PathError
from pathwise.ui.cli.args.options import RelativeArgs
from pathwise.ui.cli.models import ResultRow

from .executor import CommandExecutor


@final
class RelativeCommand(CommandExecutor):
    """Express each path relative to an anchor directory."""

    title = "Relative"

    def __init__(self, args: RelativeArgs) -> None:
        super().__init__(args)
        self.paths = args.paths
        self.anchor = LocalPath(args.anchor or os.getcwd(), kind=PathKind.DIR)

    def collect(self) -> list[ResultRow]:
        rows: list[ResultRow] = []
        for raw in self.paths:
            try:
                relative = LocalPath(raw).relative_to(self.anchor)
            except PathError as exc:
                rows.append(ResultRow(source=raw, error=str(exc)))
                continue
            rows.append(
                ResultRow(
                    source=raw,
                    fields={"anchor": self.anchor.path, "relative": relative.path},
                )
            )
        return rows
