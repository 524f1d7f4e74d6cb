#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/text_diff.py
"""Comparison of a base text against one or many candidate versions.

Each candidate is compared independently against the same normalized base
lines. Results carry the edit script, the operation counts and the rendered
unified text, and are plain values: nothing is cached or shared between
comparisons, so running them concurrently gives the same results as running
them one after another.
"""

from __future__ import annotations

import logging
import secrets
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

from versiondiff.constants import (
    DEFAULT_BASE_LABEL,
    DEFAULT_LEFT_LABEL,
    DEFAULT_RIGHT_LABEL,
    VERSION_ID_BYTES,
)
from versiondiff.diff.lines import LineSequence, NormalizationPolicy, prepare_lines
from versiondiff.diff.script import DiffOp, EditScript, diff_lines
from versiondiff.diff.stats import DiffStats, count_ops
from versiondiff.diff.unified import iter_unified_lines, render_unified
from versiondiff.exceptions import ValidationError
from versiondiff.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def make_version_id() -> str:
    """Return a short random hex identifier for a version."""
    return secrets.token_hex(VERSION_ID_BYTES)


@dataclass(frozen=True)
class Version:
    """A named candidate text.

    Parameters
    ----------
    id : str
        Identifier copied onto the matching :class:`DiffResult`
    label : str
        Display name used in the ``+++`` header
    text : str
        Decoded candidate text
    source : str, optional
        Where the text was loaded from, if it came from a file

    """

    id: str
    label: str
    text: str
    source: str | None = None

    @classmethod
    def create(cls, label: str, text: str, source: str | None = None) -> "Version":
        """Build a version with a freshly generated id."""
        return cls(id=make_version_id(), label=label, text=text, source=source)


@dataclass(frozen=True)
class DiffResult:
    """Outcome of comparing the base text with one candidate.

    Attributes
    ----------
    id : str
        Identifier of the candidate version
    display_name : str
        Candidate label, also used in the ``+++`` header
    edit_script : list of DiffOp
        Operations in document order
    stats : DiffStats
        Insert/delete/equal counts for ``edit_script``
    unified_text : str
        Full-context unified diff text
    base_label : str
        Label used in the ``---`` header

    """

    id: str
    display_name: str
    edit_script: EditScript = field(repr=False)
    stats: DiffStats
    unified_text: str = field(repr=False)
    base_label: str = DEFAULT_BASE_LABEL

    def __iter__(self) -> Iterator[str]:
        """Iterate over the unified diff lines."""
        yield from self.iter_unified_diff()

    def iter_unified_diff(self) -> Iterator[str]:
        """Yield unified diff lines without line terminators."""
        yield from iter_unified_lines(self.edit_script, self.display_name, self.base_label)

    def iter_operations(self) -> Iterator[DiffOp]:
        yield from self.edit_script

    @property
    def has_changes(self) -> bool:
        return self.stats.changes > 0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "base_label": self.base_label,
            "stats": self.stats.to_dict(),
            "edit_script": [{"type": op.tag, "line": op.line} for op in self.edit_script],
            "unified_text": self.unified_text,
        }


def _compare_lines(
    base_lines: LineSequence,
    version: Version,
    policy: NormalizationPolicy,
    base_label: str,
) -> DiffResult:
    candidate_lines = prepare_lines(version.text, policy)
    with debug_timer(logger, f"Comparing {base_label!r} with {version.label!r}"):
        script = diff_lines(base_lines, candidate_lines)
    return DiffResult(
        id=version.id,
        display_name=version.label,
        edit_script=script,
        stats=count_ops(script),
        unified_text=render_unified(script, version.label, base_label),
        base_label=base_label,
    )


def _validate_candidates(candidates: Sequence[Version]) -> None:
    for position, candidate in enumerate(candidates):
        if not isinstance(candidate, Version):
            raise ValidationError(
                f"Candidate at position {position} must be a Version, got {type(candidate).__name__}",
                parameter_name="candidates",
                parameter_value=candidate,
            )


def compare_all(
    base_text: str,
    candidates: Sequence[Version],
    policy: NormalizationPolicy | None = None,
    *,
    base_label: str = DEFAULT_BASE_LABEL,
    max_workers: int | None = None,
) -> list[DiffResult]:
    """Compare ``base_text`` against every candidate version.

    Parameters
    ----------
    base_text : str
        Decoded base text
    candidates : sequence of Version
        Candidate versions to compare, in display order
    policy : NormalizationPolicy, optional
        Line normalization applied to the base and every candidate
    base_label : str, default "base"
        Label for the ``---`` header
    max_workers : int, optional
        If greater than 1, run comparisons on a thread pool of this size

    Returns
    -------
    list of DiffResult
        One result per candidate, in the same order as ``candidates``

    Raises
    ------
    ValidationError
        If a candidate is not a :class:`Version` or ``max_workers`` is not positive

    Examples
    --------
    >>> results = compare_all("L1\\nL2\\n", [Version.create("v2", "L1\\nL2 changed\\n")])
    >>> results[0].stats.badge()
    '+1 · -1 · =2'

    """
    _validate_candidates(candidates)
    if max_workers is not None and max_workers < 1:
        raise ValidationError(
            f"max_workers must be positive, got {max_workers}",
            parameter_name="max_workers",
            parameter_value=max_workers,
        )

    policy = policy or NormalizationPolicy()
    base_lines = prepare_lines(base_text, policy)
    logger.debug("Comparing %d line base against %d candidate(s)", len(base_lines), len(candidates))

    if not max_workers or max_workers == 1 or len(candidates) < 2:
        return [_compare_lines(base_lines, version, policy, base_label) for version in candidates]

    results: list[DiffResult | None] = [None] * len(candidates)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: dict[Future[DiffResult], int] = {
            executor.submit(_compare_lines, base_lines, version, policy, base_label): position
            for position, version in enumerate(candidates)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()

    return [result for result in results if result is not None]


def compare_texts(
    left: str,
    right: str,
    policy: NormalizationPolicy | None = None,
    *,
    left_label: str = DEFAULT_LEFT_LABEL,
    right_label: str = DEFAULT_RIGHT_LABEL,
) -> DiffResult:
    """Compare two texts directly.

    Equivalent to :func:`compare_all` with a single candidate, using the
    ``--- a`` / ``+++ b`` headers of a plain two-way comparison.
    """
    version = Version(id=right_label, label=right_label, text=right)
    return compare_all(left, [version], policy, base_label=left_label)[0]
