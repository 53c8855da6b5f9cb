"""src/pathwise/ui/cli/display/table.py
What: Render command result rows as a Rich table.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table

from pathwise.ui.cli.models import ResultRow


@final
class TableDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self) -> None:
        self.console = Console()

    def show_rows(self, rows: list[ResultRow], *, title: str = "", quiet: bool = False) -> None:
        """Print successful rows as a table and failures underneath.

        Args:
            rows: Results to render, in input order.
            title: Table title.
            quiet: Suppress the table; failures are still printed.
        """

        successes = [row for row in rows if row.success]
        failures = [row for row in rows if not row.success]

        if successes and not quiet:
            self.console.print(self.build_table(successes, title=title))

        for row in failures:
            self.console.print(f"[red]  • {row.source}: {row.error}[/red]")

    @staticmethod
    def build_table(rows: list[ResultRow], *, title: str = "") -> Table:
        columns: list[str] = []
        for row in rows:
            for name in row.fields:
                if name not in columns:
                    columns.append(name)

        table = Table(title=title or None, show_lines=False)
        table.add_column("input", style="cyan", no_wrap=True)
        for name in columns:
            table.add_column(name)
        for row in rows:
            table.add_row(row.source, *(row.fields.get(name, "") for name in columns))
        return table


__all__ = ["TableDisplay"]
