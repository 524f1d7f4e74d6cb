#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/lines.py
"""Line splitting and normalization for line-based comparison.

Texts are split on ``\\n`` after folding ``\\r\\n`` line endings, with no
implicit trimming of a final newline: ``"a\\n"`` becomes ``("a", "")``. The
trailing empty element is kept on purpose so the rendered diff round-trips
the input exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from versiondiff.constants import DEFAULT_IGNORE_TRAILING_WHITESPACE, TRAILING_WHITESPACE

LineSequence = Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NormalizationPolicy:
    """How lines are normalized before they are compared.

    Parameters
    ----------
    ignore_trailing_whitespace : bool, default False
        If True, strip trailing whitespace from every line before comparison.
        Rendered output then shows the stripped text.

    """

    ignore_trailing_whitespace: bool = DEFAULT_IGNORE_TRAILING_WHITESPACE


def split_lines(text: str) -> LineSequence:
    """Split text into an immutable sequence of lines.

    Parameters
    ----------
    text : str
        Raw decoded text

    Returns
    -------
    tuple of str
        One element per line. An empty string yields ``("",)``.

    Examples
    --------
    >>> split_lines("L1\\r\\nL2\\n")
    ('L1', 'L2', '')

    """
    return tuple(text.replace("\r\n", "\n").split("\n"))


def normalize_lines(lines: LineSequence, policy: NormalizationPolicy) -> LineSequence:
    """Apply a normalization policy to every line.

    Trailing whitespace means the characters in
    :data:`~versiondiff.constants.TRAILING_WHITESPACE`, not ``str.isspace``:
    the ASCII information separators U+001C..U+001F and NEL (U+0085) are
    kept, a trailing U+FEFF is removed.

    >>> normalize_lines(("a \\t", "b\\u3000", "c\\x1f"), NormalizationPolicy(True))
    ('a', 'b', 'c\\x1f')

    """
    if not policy.ignore_trailing_whitespace:
        return lines
    return tuple(line.rstrip(TRAILING_WHITESPACE) for line in lines)


def prepare_lines(text: str, policy: NormalizationPolicy | None = None) -> LineSequence:
    """Split ``text`` and normalize the result in one step."""
    return normalize_lines(split_lines(text), policy or NormalizationPolicy())
