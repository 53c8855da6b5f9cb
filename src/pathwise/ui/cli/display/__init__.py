"""Display management for CLI interface."""

from pathwise.ui.cli.display.table import TableDisplay

__all__ = ["TableDisplay"]
