#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/unified.py
"""Full-context unified diff text for an edit script.

The output is a simplified unified diff: a ``---`` and ``+++`` header
followed by every line of both inputs, prefixed with `` ``, ``-`` or ``+``.
There are no ``@@`` hunk headers and no context window; the text is meant to
be copied whole for manual review.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from versiondiff.constants import DEFAULT_BASE_LABEL, OP_PREFIXES, UNIFIED_NEW_HEADER, UNIFIED_OLD_HEADER
from versiondiff.diff.script import DiffOp


def iter_unified_lines(
    script: Iterable[DiffOp],
    candidate_name: str,
    base_name: str = DEFAULT_BASE_LABEL,
) -> Iterator[str]:
    """Yield the header lines, then one prefixed line per operation."""
    yield f"{UNIFIED_OLD_HEADER} {base_name}"
    yield f"{UNIFIED_NEW_HEADER} {candidate_name}"
    for op in script:
        yield f"{OP_PREFIXES[op.tag]}{op.line}"


def render_unified(
    script: Iterable[DiffOp],
    candidate_name: str,
    base_name: str = DEFAULT_BASE_LABEL,
) -> str:
    """Serialize an edit script as full-context unified diff text.

    Parameters
    ----------
    script : iterable of DiffOp
        Edit script in document order
    candidate_name : str
        Display name written in the ``+++`` header
    base_name : str, default "base"
        Display name written in the ``---`` header

    Returns
    -------
    str
        Lines joined with ``\\n``, without a trailing newline

    Examples
    --------
    >>> from versiondiff.diff.script import DiffOp
    >>> print(render_unified([DiffOp("equal", "a"), DiffOp("insert", "b")], "v2"))
    --- base
    +++ v2
     a
    +b

    """
    return "\n".join(iter_unified_lines(script, candidate_name, base_name))
