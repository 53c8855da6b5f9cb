"""src/pathwise/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Every command turns its inputs into result rows and renders them the same way.
"""

from abc import ABC, abstractmethod

from pathwise.ui.cli.args.options import CLIArgs
from pathwise.ui.cli.display.table import TableDisplay
from pathwise.ui.cli.models import ResultRow


class CommandExecutor(ABC):
    """Base class for command execution."""

    title: str = ""
    args: CLIArgs
    display: TableDisplay

    def __init__(self, args: CLIArgs) -> None:
        self.args = args
        self.display = TableDisplay()

    @abstractmethod
    def collect(self) -> list[ResultRow]:
        """Compute one result row per input."""
        pass

    def execute(self) -> list[ResultRow]:
        """Collect results and render them unless running quietly."""

        results = self.collect()
        self.display.show_rows(results, title=self.title, quiet=self.args.quiet)
        return results
