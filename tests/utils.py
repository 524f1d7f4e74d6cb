"""Test utilities for the versiondiff test suite.

This module provides helpers for creating temporary input files and a
reference implementation of the edit distance used to check minimality.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Sequence


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_text_file(directory: Path, name: str, content: str, encoding: str = "utf-8") -> Path:
    """Write ``content`` to ``directory / name`` and return the path."""
    path = directory / name
    path.write_bytes(content.encode(encoding))
    return path


def lcs_length(a: Sequence[str], b: Sequence[str]) -> int:
    """Length of the longest common subsequence, by dynamic programming."""
    previous = [0] * (len(b) + 1)
    for item in a:
        current = [0]
        for j, other in enumerate(b):
            if item == other:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def reference_edit_distance(a: Sequence[str], b: Sequence[str]) -> int:
    """Insert/delete edit distance between two sequences."""
    return len(a) + len(b) - 2 * lcs_length(a, b)


def old_side(script) -> list[str]:
    """Lines of the base reconstructed from an edit script."""
    return [op.line for op in script if op.tag != "insert"]


def new_side(script) -> list[str]:
    """Lines of the candidate reconstructed from an edit script."""
    return [op.line for op in script if op.tag != "delete"]
