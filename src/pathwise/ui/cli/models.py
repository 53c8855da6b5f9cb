"""src/pathwise/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class ResultRow:
    """One line of command output: the input, its fields, or why it failed."""

    source: str
    fields: dict[str, str] = field(default_factory=dict)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


__all__ = ["ResultRow"]
