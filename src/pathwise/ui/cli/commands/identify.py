"""Identify command implementation for the CLI."""

from __future__ import annotations

from typing import final

from pathwise.features.path import LocalPath
from pathwise.shared.errors import PathError
from pathwise.ui.cli.args.options import IdentifyArgs
from pathwise.ui.cli.models import ResultRow

from .executor import CommandExecutor


@final
class IdentifyCommand(CommandExecutor):
    """Report the media type and true extension of each file."""

    title = "Identify"

    def __init__(self, args: IdentifyArgs) -> None:
        super().__init__(args)
        self.paths = args.paths

    def collect(self) -> list[ResultRow]:
        rows: list[ResultRow] = []
        for raw in self.paths:
            target = LocalPath(raw)
            if not target.exists():
                rows.append(ResultRow(source=raw, error="no such file or directory"))
                continue
            try:
                mime = None if target.is_dir() else target.mimetype()
                true_type = target.true_type()
            except (OSError, PathError) as exc:
                rows.append(ResultRow(source=raw, error=str(exc)))
                continue
            rows.append(
                ResultRow(
                    source=raw,
                    fields={
                        "mimetype": mime.name if mime is not None else "",
                        "true type": true_type,
                    },
                )
            )
        return rows
