#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/__init__.py
"""Line-based document comparison.

This package compares a base text against one or many candidate versions
using Myers' O(ND) shortest edit script, and renders each comparison as a
typed edit script, operation counts and a full-context unified diff.

Key Features
------------
- Minimal, deterministic line edit scripts (Myers O(ND))
- Optional trailing-whitespace normalization
- One independent result per candidate version
- Unified, HTML and JSON output

Examples
--------
Compare a base text against two versions:
    >>> from versiondiff.diff import Version, compare_all
    >>> results = compare_all("L1\\nL2\\n", [
    ...     Version.create("v2", "L1\\nL2 modified\\n"),
    ...     Version.create("v3", "L1\\nL2\\nL3\\n"),
    ... ])
    >>> [result.stats.badge() for result in results]
    ['+1 · -1 · =2', '+1 · -0 · =3']

"""

from versiondiff.diff.lines import LineSequence, NormalizationPolicy, normalize_lines, prepare_lines, split_lines
from versiondiff.diff.myers import Backtrace, shortest_edit_backtrace
from versiondiff.diff.script import DiffOp, EditScript, build_script, diff_lines, fallback_script
from versiondiff.diff.stats import DiffStats, count_ops
from versiondiff.diff.text_diff import DiffResult, Version, compare_all, compare_texts
from versiondiff.diff.unified import iter_unified_lines, render_unified

__all__ = [
    "Backtrace",
    "DiffOp",
    "DiffResult",
    "DiffStats",
    "EditScript",
    "LineSequence",
    "NormalizationPolicy",
    "Version",
    "build_script",
    "compare_all",
    "compare_texts",
    "count_ops",
    "diff_lines",
    "fallback_script",
    "iter_unified_lines",
    "normalize_lines",
    "prepare_lines",
    "render_unified",
    "shortest_edit_backtrace",
    "split_lines",
]
