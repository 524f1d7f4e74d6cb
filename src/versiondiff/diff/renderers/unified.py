#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/renderers/unified.py
"""Unified diff renderer with optional ANSI colors.

This renderer adds ANSI color codes to the full-context unified diff lines
for terminal display.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from versiondiff.constants import UNIFIED_NEW_HEADER, UNIFIED_OLD_HEADER


class UnifiedDiffRenderer:
    """Render unified diff lines with optional ANSI colors.

    - Bold for file headers (the leading --- and +++ lines)
    - Red for deletions (lines starting with -)
    - Green for insertions (lines starting with +)

    Parameters
    ----------
    use_color : bool, default = True
        If True, add ANSI color codes to output

    Examples
    --------
    Colorize a comparison for the terminal:
        >>> from versiondiff import compare_texts
        >>> result = compare_texts("a\\nb", "a\\nc")
        >>> renderer = UnifiedDiffRenderer()
        >>> for line in renderer.render(result.iter_unified_diff()):
        ...     print(line)

    """

    RED = "\033[31m"
    GREEN = "\033[32m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        """Initialize the unified diff renderer."""
        self.use_color = use_color

    def render(self, diff_lines: Iterable[str]) -> Iterator[str]:
        """Render unified diff lines, colorized when enabled.

        Parameters
        ----------
        diff_lines : iterable of str
            Lines of unified diff output

        Yields
        ------
        str
            Colorized diff lines (or original lines if color disabled)

        """
        if not self.use_color:
            yield from diff_lines
            return

        # Only the first two lines are headers; a deleted "-- x" line also starts with "---"
        for index, line in enumerate(diff_lines):
            if index < 2 and (line.startswith(UNIFIED_OLD_HEADER) or line.startswith(UNIFIED_NEW_HEADER)):
                yield f"{self.BOLD}{line}{self.RESET}"
            elif line.startswith("+"):
                yield f"{self.GREEN}{line}{self.RESET}"
            elif line.startswith("-"):
                yield f"{self.RED}{line}{self.RESET}"
            else:
                yield line


def colorize_diff(diff_lines: Iterable[str], use_color: bool = True) -> Iterator[str]:
    """Colorize unified diff output."""
    renderer = UnifiedDiffRenderer(use_color=use_color)
    yield from renderer.render(diff_lines)
