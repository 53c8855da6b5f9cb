"""Checksum command implementation for the CLI."""

from __future__ import annotations

from typing import final

from pathwise.features.path import LocalPath, PathKind
from pathwise.shared.errors import PathError
from pathwise.ui.cli.args.options import ChecksumArgs
from pathwise.ui.cli.models import ResultRow

from .executor import CommandExecutor


@final
class ChecksumCommand(CommandExecutor):
    """Digest each file with the requested algorithm."""

    title = "Checksum"

    def __init__(self, args: ChecksumArgs) -> None:
        super().__init__(args)
        self.paths = args.paths
        self.algorithm = args.algorithm

    def collect(self) -> list[ResultRow]:
        rows: list[ResultRow] = []
        for raw in self.paths:
            try:
                digest = LocalPath(raw, kind=PathKind.FILE).checksum(self.algorithm)
            except (OSError, PathError) as exc:
                rows.append(ResultRow(source=raw, error=str(exc)))
                continue
            rows.append(ResultRow(source=raw, fields={self.algorithm: digest}))
        return rows
