"""Which command implementation for the CLI."""

from __future__ import annotations

from typing import final

from pathwise.features.path import LocalPath
from pathwise.features.search import which
from pathwise.ui.cli.args.options import WhichArgs
from pathwise.ui.cli.models import ResultRow

from .executor import CommandExecutor


@final
class WhichCommand(CommandExecutor):
    """Locate each requested binary on the PATH."""

    title = "Which"

    def __init__(self, args: WhichArgs) -> None:
        super().__init__(args)
        self.names = args.names

    def collect(self) -> list[ResultRow]:
        rows: list[ResultRow] = []
        for name in self.names:
            match = which(name)
            if isinstance(match, LocalPath):
                rows.append(ResultRow(source=name, fields={"path": match.path}))
            else:
                rows.append(ResultRow(source=name, error="not found on PATH"))
        return rows
