#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/renderers/__init__.py
"""Diff renderers for various output formats.

Available Renderers
-------------------
- HtmlDiffRenderer: Visual HTML page with one section per compared version
- JsonDiffRenderer: Structured JSON output for programmatic access
- UnifiedDiffRenderer: Colorized unified diff output for terminal

Examples
--------
Render with colors for terminal:
    >>> from versiondiff import compare_texts
    >>> from versiondiff.diff.renderers import UnifiedDiffRenderer
    >>> result = compare_texts("a\\nb", "a\\nc")
    >>> renderer = UnifiedDiffRenderer(use_color=True)
    >>> for line in renderer.render(result.iter_unified_diff()):
    ...     print(line)

"""

from versiondiff.diff.renderers.html import HtmlDiffRenderer
from versiondiff.diff.renderers.json import JsonDiffRenderer
from versiondiff.diff.renderers.unified import UnifiedDiffRenderer

__all__ = [
    "HtmlDiffRenderer",
    "JsonDiffRenderer",
    "UnifiedDiffRenderer",
]
