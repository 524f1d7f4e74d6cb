"""versiondiff - line-based comparison of a base text against many versions.

versiondiff computes minimal line edit scripts with Myers' O(ND) algorithm
and reports, for every candidate version, the typed operations, insert /
delete / equal counts and a full-context unified diff.

Key Features
------------
- From-scratch Myers O(ND) shortest edit script, deterministic and minimal
- One base compared against any number of versions, optionally in parallel
- Optional trailing-whitespace normalization
- Unified (optionally colored), JSON and HTML output
- Text, Markdown and PDF inputs with encoding detection
- Command-line interface with config file discovery

Quick Start
-----------
    >>> from versiondiff import Version, compare_all
    >>> results = compare_all("L1\\nL2\\nL3", [
    ...     Version.create("draft-2", "L1\\nL2 modified\\nL3\\nL4"),
    ... ])
    >>> print(results[0].unified_text)
    --- base
    +++ draft-2
     L1
    -L2
    +L2 modified
     L3
    +L4

Two texts can be compared directly:
    >>> from versiondiff import compare_texts
    >>> compare_texts("a\\nb", "a\\nc").stats.badge()
    '+1 · -1 · =1'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from versiondiff.diff.lines import LineSequence, NormalizationPolicy, normalize_lines, prepare_lines, split_lines
from versiondiff.diff.myers import Backtrace, shortest_edit_backtrace
from versiondiff.diff.script import DiffOp, EditScript, build_script, diff_lines
from versiondiff.diff.stats import DiffStats, count_ops
from versiondiff.diff.text_diff import DiffResult, Version, compare_all, compare_texts
from versiondiff.diff.unified import render_unified
from versiondiff.exceptions import DependencyError, FileError, ValidationError, VersionDiffError

__all__ = [
    "__version__",
    # Comparison
    "compare_all",
    "compare_texts",
    "diff_lines",
    # Building blocks
    "build_script",
    "count_ops",
    "normalize_lines",
    "prepare_lines",
    "render_unified",
    "shortest_edit_backtrace",
    "split_lines",
    # Data types
    "Backtrace",
    "DiffOp",
    "DiffResult",
    "DiffStats",
    "EditScript",
    "LineSequence",
    "NormalizationPolicy",
    "Version",
    # Exceptions
    "DependencyError",
    "FileError",
    "ValidationError",
    "VersionDiffError",
]
