"""
Summary: Ascend-then-descend computation between two directory sequences.
Why: Keep the relative-path algorithm pure and independently testable.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

PARENT_MARKER: Final[str] = ".."


def common_prefix_length(first: Sequence[str], second: Sequence[str]) -> int:
    """Return the index of the first position where the sequences differ.

    Exhausting either sequence counts as a mismatch at that index.
    """

    length = 0
    for left, right in zip(first, second):
        if left != right:
            break
        length += 1
    return length


def relative_dirs(target: Sequence[str], anchor: Sequence[str]) -> list[str]:
    """Directory segments leading from ``anchor`` to ``target``.

    Examples:
        >>> relative_dirs(["usr", "local", "lib", "pkg"], ["usr", "local", "bin"])
        ['..', 'lib', 'pkg']
        >>> relative_dirs(["c", "d", "e"], ["a", "b"])
        ['..', '..', 'c', 'd', 'e']
    """

    mismatch = common_prefix_length(target, anchor)
    ascents = len(anchor) - mismatch
    return [PARENT_MARKER] * ascents + list(target[mismatch:])


def is_proper_prefix(prefix: Sequence[str], sequence: Sequence[str]) -> bool:
    """Return True when ``prefix`` is strictly shorter than and a prefix of ``sequence``."""

    if len(prefix) >= len(sequence):
        return False
    return common_prefix_length(prefix, sequence) == len(prefix)


__all__ = ["PARENT_MARKER", "common_prefix_length", "is_proper_prefix", "relative_dirs"]
