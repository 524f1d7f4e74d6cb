#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/stats.py
"""Per-comparison operation counts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from versiondiff.diff.script import DiffOp


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Number of inserted, deleted and unchanged lines in an edit script."""

    insert: int = 0
    delete: int = 0
    equal: int = 0

    @property
    def total(self) -> int:
        return self.insert + self.delete + self.equal

    @property
    def changes(self) -> int:
        return self.insert + self.delete

    def badge(self) -> str:
        """Compact summary such as ``+2 · -1 · =3``."""
        return f"+{self.insert} · -{self.delete} · ={self.equal}"

    def to_dict(self) -> dict[str, int]:
        return {"insert": self.insert, "delete": self.delete, "equal": self.equal}


def count_ops(script: Iterable[DiffOp]) -> DiffStats:
    """Count operations by tag in a single pass."""
    counts = {"insert": 0, "delete": 0, "equal": 0}
    for op in script:
        counts[op.tag] += 1
    return DiffStats(**counts)
