#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/script.py
"""Edit-script reconstruction from a Myers backtrace.

The edit script lists one operation per line in document order. Reading the
``equal`` and ``delete`` lines in order gives back the base; reading the
``equal`` and ``insert`` lines gives back the candidate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from versiondiff.constants import OpTag
from versiondiff.diff.myers import Backtrace, shortest_edit_backtrace, takes_insertion

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DiffOp:
    """A single line-level edit operation."""

    tag: OpTag
    line: str

    @property
    def is_change(self) -> bool:
        return self.tag != "equal"


EditScript = List[DiffOp]


def build_script(a: Sequence[str], b: Sequence[str], backtrace: Backtrace) -> EditScript:
    """Rebuild the minimal edit script recorded in ``backtrace``.

    Walks backward from ``(n, m)`` one edit at a time, recomputing each
    predecessor diagonal with the same tie-break the search used. Equal
    lines between the predecessor and the current point are emitted first,
    then the single insertion or deletion that led there.

    Parameters
    ----------
    a : sequence of str
        Base lines the backtrace was computed for
    b : sequence of str
        Candidate lines the backtrace was computed for
    backtrace : Backtrace
        Result of :func:`shortest_edit_backtrace` for ``a`` and ``b``

    Returns
    -------
    list of DiffOp
        Operations in forward document order, with exactly
        ``backtrace.distance`` non-equal entries.

    """
    if backtrace.exhausted:
        logger.error("Backtrace is incomplete, emitting a full delete/insert script")
        return fallback_script(a, b)

    offset = backtrace.offset
    x = backtrace.n
    y = backtrace.m
    ops: EditScript = []

    for d in range(backtrace.distance, 0, -1):
        previous = backtrace.frontier(d - 1)
        k = x - y
        prev_k = k + 1 if takes_insertion(previous, k, d, offset) else k - 1
        prev_x = backtrace.furthest_x(d - 1, prev_k)
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            ops.append(DiffOp("equal", a[x - 1]))
            x -= 1
            y -= 1

        if x == prev_x:
            ops.append(DiffOp("insert", b[prev_y]))
            y -= 1
        else:
            ops.append(DiffOp("delete", a[prev_x]))
            x -= 1

    while x > 0 and y > 0:
        ops.append(DiffOp("equal", a[x - 1]))
        x -= 1
        y -= 1
    while x > 0:
        ops.append(DiffOp("delete", a[x - 1]))
        x -= 1
    while y > 0:
        ops.append(DiffOp("insert", b[y - 1]))
        y -= 1

    ops.reverse()
    return ops


def fallback_script(a: Sequence[str], b: Sequence[str]) -> EditScript:
    """Delete every base line, then insert every candidate line.

    Valid but not minimal. Only used when a backtrace is incomplete, which
    indicates a defect in the search bounds.
    """
    return [DiffOp("delete", line) for line in a] + [DiffOp("insert", line) for line in b]


def diff_lines(a: Sequence[str], b: Sequence[str]) -> EditScript:
    """Compute the minimal line edit script turning ``a`` into ``b``.

    Examples
    --------
    >>> [op.tag for op in diff_lines(["x", "y"], ["x", "z"])]
    ['equal', 'delete', 'insert']

    """
    return build_script(a, b, shortest_edit_backtrace(a, b))
