#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/renderers/json.py
"""JSON diff renderer for structured output.

Produces a machine-readable payload for one or many comparison results,
with per-version statistics and the typed edit script.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Sequence, Union

from versiondiff.constants import DEFAULT_JSON_INDENT
from versiondiff.diff.text_diff import DiffResult
from versiondiff.exceptions import OutputWriteError

_CHANGE_TYPES = {"insert": "added", "delete": "deleted", "equal": "context"}


class JsonDiffRenderer:
    """Render comparison results as structured JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)
    include_unified : bool, default = True
        If True, include each result's unified diff text

    Examples
    --------
    Render every version comparison as JSON:
        >>> from versiondiff import Version, compare_all
        >>> results = compare_all("a\\nb", [Version.create("v2", "a\\nc")])
        >>> payload = JsonDiffRenderer().render(results)

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = DEFAULT_JSON_INDENT,
        include_unified: bool = True,
    ):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent
        self.include_unified = include_unified

    def render(self, diff: Union[DiffResult, Sequence[DiffResult]]) -> str:
        """Render one result or a list of results to a JSON string."""
        results = [diff] if isinstance(diff, DiffResult) else list(diff)
        data = self.build_payload(results)

        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)

    def build_payload(self, results: Sequence[DiffResult]) -> Dict[str, Any]:
        """Build the dictionary that :meth:`render` serializes."""
        entries = [self._result_entry(result) for result in results]
        return {
            "type": "version_diff",
            "base_label": results[0].base_label if results else None,
            "results": entries,
            "statistics": {
                "versions": len(entries),
                "versions_changed": sum(1 for result in results if result.has_changes),
                "lines_added": sum(entry["statistics"]["lines_added"] for entry in entries),
                "lines_deleted": sum(entry["statistics"]["lines_deleted"] for entry in entries),
            },
        }

    def _result_entry(self, result: DiffResult) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            "id": result.id,
            "display_name": result.display_name,
            "old_file": result.base_label,
            "new_file": result.display_name,
            "changes": [{"type": _CHANGE_TYPES[op.tag], "content": op.line} for op in result.iter_operations()],
            "statistics": {
                "lines_added": result.stats.insert,
                "lines_deleted": result.stats.delete,
                "lines_context": result.stats.equal,
                "total_changes": result.stats.changes,
            },
        }
        if self.include_unified:
            entry["unified_diff"] = result.unified_text
        return entry


def render_to_file(diff: DiffResult | Sequence[DiffResult], output_path: str, **kwargs: Any) -> None:
    """Render comparison results to a JSON file.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    renderer = JsonDiffRenderer(**kwargs)
    json_output = renderer.render(diff)

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(json_output)
    except OSError as e:
        raise OutputWriteError(output_path, original_error=e) from e
