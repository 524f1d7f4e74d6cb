#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/myers.py
"""Myers' O(ND) shortest edit search over two line sequences.

The search walks edit distances ``d = 0, 1, ...`` and, for every diagonal
``k = x - y`` reachable with ``d`` edits, records the furthest ``x`` it can
reach. Diagonals only ever step by two because ``k`` shares the parity of
``d``. Equal lines are consumed greedily ("snakes") at no extra cost, so the
first ``d`` that reaches the bottom-right corner of the edit graph is the
edit distance.

The frontier array is snapshotted before each round and once more when the
corner is reached. Those immutable snapshots form the :class:`Backtrace` that
:func:`versiondiff.diff.script.build_script` walks to recover the operations.

Time and memory are O((n + m) * D): almost entirely different inputs degrade
to O((n + m) ** 2).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

logger = logging.getLogger(__name__)

Frontier = Tuple[int, ...]


def diagonal_index(k: int, offset: int) -> int:
    """Translate diagonal ``k`` (which may be negative) into a buffer index."""
    return k + offset


def takes_insertion(frontier: Sequence[int], k: int, d: int, offset: int) -> bool:
    """Return True when diagonal ``k`` at distance ``d`` is entered from ``k + 1``.

    Entering from the diagonal above moves down in the edit graph (an
    insertion); otherwise the move comes from ``k - 1`` and is a deletion.
    The comparison is strict, so ties prefer the deletion.
    """
    if k == -d:
        return True
    if k == d:
        return False
    return frontier[diagonal_index(k - 1, offset)] < frontier[diagonal_index(k + 1, offset)]


@dataclass(frozen=True, slots=True)
class Backtrace:
    """Recorded search history needed to rebuild the edit script.

    Attributes
    ----------
    n : int
        Length of the base sequence
    m : int
        Length of the candidate sequence
    trace : tuple of tuple of int
        Frontier snapshots. ``trace[0]`` is the all-zero starting frontier and
        ``trace[d + 1]`` is the frontier reached with ``d`` edits.
    distance : int or None
        Shortest edit distance, or None if the search ran out of rounds

    """

    n: int
    m: int
    trace: Tuple[Frontier, ...]
    distance: int | None

    @property
    def offset(self) -> int:
        return self.n + self.m

    @property
    def exhausted(self) -> bool:
        """True when the search never reached the end of both sequences."""
        return self.distance is None

    def frontier(self, d: int) -> Frontier:
        """Return the furthest-reaching ``x`` per diagonal after ``d`` edits."""
        return self.trace[d + 1]

    def furthest_x(self, d: int, k: int) -> int:
        return self.frontier(d)[diagonal_index(k, self.offset)]


def shortest_edit_backtrace(a: Sequence[str], b: Sequence[str]) -> Backtrace:
    """Run the Myers search between ``a`` (base) and ``b`` (candidate).

    Parameters
    ----------
    a : sequence of str
        Base lines, already normalized
    b : sequence of str
        Candidate lines, already normalized

    Returns
    -------
    Backtrace
        Frontier history up to and including the round that found the
        shortest edit distance.

    """
    n = len(a)
    m = len(b)
    max_d = n + m
    offset = max_d

    # One spare slot keeps k + 1 addressable when both sequences are empty
    v = [0] * (2 * max_d + 2)
    trace: list[Frontier] = []

    for d in range(max_d + 1):
        trace.append(tuple(v))
        for k in range(-d, d + 1, 2):
            if takes_insertion(v, k, d, offset):
                x = v[diagonal_index(k + 1, offset)]
            else:
                x = v[diagonal_index(k - 1, offset)] + 1
            y = x - k

            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1

            v[diagonal_index(k, offset)] = x

            if x >= n and y >= m:
                trace.append(tuple(v))
                logger.debug("Shortest edit distance %d for %d/%d lines", d, n, m)
                return Backtrace(n=n, m=m, trace=tuple(trace), distance=d)

    logger.error("Edit search exhausted %d rounds without reaching (%d, %d)", max_d, n, m)
    return Backtrace(n=n, m=m, trace=tuple(trace), distance=None)
