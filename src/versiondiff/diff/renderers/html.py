#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/diff/renderers/html.py
"""HTML diff renderer with full-document visualization.

Each compared version gets a section with a summary badge and a line-by-line
view of the whole document: insertions in green, deletions in red and
struck through, unchanged lines plain. Unchanged runs can be collapsed into
``<details>`` blocks.
"""

from __future__ import annotations

from html import escape
from io import StringIO
from itertools import groupby
from typing import Any, List, Sequence, Union

from versiondiff.diff.script import DiffOp
from versiondiff.diff.text_diff import DiffResult
from versiondiff.exceptions import OutputWriteError

_LINE_CLASSES = {"insert": "inline-added", "delete": "inline-deleted", "equal": "inline-context"}


class HtmlDiffRenderer:
    """Render comparison results as a standalone HTML page.

    Parameters
    ----------
    show_context : bool, default = True
        If True, show unchanged lines; when False they are collapsible
    inline_styles : bool, default = True
        If True, include CSS styles in the output
    title : str, default = "Version Diff"
        Page title and heading

    Examples
    --------
    Render every version against the base:
        >>> from versiondiff import Version, compare_all
        >>> results = compare_all("a\\nb", [Version.create("v2", "a\\nc")])
        >>> html = HtmlDiffRenderer().render(results)

    """

    def __init__(
        self,
        show_context: bool = True,
        inline_styles: bool = True,
        title: str = "Version Diff",
    ):
        """Initialize the HTML diff renderer."""
        self.show_context = show_context
        self.inline_styles = inline_styles
        self.title = title

    def render(self, diff: Union[DiffResult, Sequence[DiffResult]]) -> str:
        """Render one result or a list of results to an HTML string."""
        results = [diff] if isinstance(diff, DiffResult) else list(diff)

        output = StringIO()
        self._write_html_prefix(output)

        if not results:
            output.write("      <p><em>No versions to compare.</em></p>\n")
        for result in results:
            self._render_result(result, output)

        self._write_html_suffix(output)
        return output.getvalue()

    def _write_html_prefix(self, output: StringIO) -> None:
        output.write("<!DOCTYPE html>\n")
        output.write("<html lang='en'>\n")
        output.write("<head>\n")
        output.write("  <meta charset='UTF-8'>\n")
        output.write("  <meta name='viewport' content='width=device-width, initial-scale=1.0'>\n")
        output.write(f"  <title>{escape(self.title)}</title>\n")

        if self.inline_styles:
            output.write("  <style>\n")
            output.write(self._get_css())
            output.write("  </style>\n")

        output.write("</head>\n")
        output.write("<body>\n")
        output.write("  <div class='container'>\n")
        output.write(f"    <h1>{escape(self.title)}</h1>\n")
        output.write("    <div class='diff-content'>\n")

    def _write_html_suffix(self, output: StringIO) -> None:
        output.write("    </div>\n")
        output.write("  </div>\n")
        output.write("</body>\n")
        output.write("</html>\n")

    def _get_css(self) -> str:
        return """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .container {
            background-color: white;
            padding: 30px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        h1 {
            color: #2c3e50;
            border-bottom: 3px solid #3498db;
            padding-bottom: 10px;
        }
        .diff-content {
            margin-top: 30px;
            font-family: 'Courier New', Courier, monospace;
            font-size: 14px;
        }
        .diff-version + .diff-version {
            margin-top: 40px;
        }
        .diff-summary {
            background-color: #f0f4ff;
            border: 1px solid #cbd7f7;
            border-radius: 6px;
            padding: 12px 16px;
            margin-bottom: 20px;
        }
        .diff-summary h2 {
            margin: 0 0 8px 0;
            font-size: 16px;
            color: #1d3c78;
        }
        .diff-summary dl {
            display: grid;
            grid-template-columns: max-content 1fr;
            gap: 4px 16px;
            margin: 0;
        }
        .diff-summary dt {
            font-weight: 600;
            color: #51658a;
        }
        .diff-badge {
            font-weight: 600;
            color: #1d3c78;
        }
        .inline-view {
            border: 1px solid #ddd;
            border-radius: 6px;
            overflow: hidden;
        }
        .inline-line {
            display: grid;
            grid-template-columns: 70px 70px 1fr;
            gap: 12px;
            padding: 4px 12px;
            margin: 0;
            border-left: 4px solid transparent;
            align-items: baseline;
        }
        .inline-line + .inline-line {
            border-top: 1px solid #f1f3f5;
        }
        .line-number {
            color: #7a8699;
            font-size: 12px;
            text-align: right;
        }
        .line-text {
            white-space: pre-wrap;
            word-break: break-word;
        }
        .inline-added {
            background-color: #e6ffed;
            border-left-color: #28a745;
            color: #116329;
        }
        .inline-deleted {
            background-color: #ffeef0;
            border-left-color: #dc3545;
            color: #82071e;
            text-decoration: line-through;
        }
        .inline-context {
            background-color: #ffffff;
        }
        details.diff-context-collapsed {
            margin: 8px 0;
            background-color: #fafbfc;
            border: 1px dashed #d0d7de;
            border-radius: 6px;
            padding: 8px 12px;
        }
        details.diff-context-collapsed summary {
            cursor: pointer;
            font-size: 13px;
            color: #5b6b7f;
        }
        """

    def _render_result(self, result: DiffResult, output: StringIO) -> None:
        output.write(f"      <section class='diff-version' id='version-{escape(result.id)}'>\n")
        self._render_summary(result, output)

        output.write("      <div class='inline-view'>\n")
        old_number = 1
        new_number = 1
        for tag, group in groupby(result.iter_operations(), key=lambda op: op.tag):
            ops = list(group)
            if tag == "equal" and not self.show_context:
                self._render_collapsed(ops, output, old_number, new_number)
            else:
                self._render_lines(ops, output, old_number, new_number)
            if tag != "insert":
                old_number += len(ops)
            if tag != "delete":
                new_number += len(ops)
        output.write("      </div>\n")

        output.write("      </section>\n")

    def _render_summary(self, result: DiffResult, output: StringIO) -> None:
        stats = result.stats
        output.write("      <div class='diff-summary'>\n")
        output.write(f"        <h2>{escape(result.display_name)}</h2>\n")
        output.write(f"        <p class='diff-badge'>{escape(stats.badge())}</p>\n")
        output.write("        <dl>\n")
        output.write(f"          <dt>Base</dt><dd>{escape(result.base_label)}</dd>\n")
        output.write(f"          <dt>Version</dt><dd>{escape(result.display_name)}</dd>\n")
        output.write(f"          <dt>Lines added</dt><dd>{stats.insert}</dd>\n")
        output.write(f"          <dt>Lines deleted</dt><dd>{stats.delete}</dd>\n")
        output.write(f"          <dt>Lines unchanged</dt><dd>{stats.equal}</dd>\n")
        output.write("        </dl>\n")
        output.write("      </div>\n")

    def _render_collapsed(self, ops: List[DiffOp], output: StringIO, old_start: int, new_start: int) -> None:
        line_count = len(ops)
        summary = f"{line_count} unchanged line{'s' if line_count != 1 else ''}"
        output.write("        <details class='diff-context-collapsed'>\n")
        output.write(f"          <summary>{escape(summary)}</summary>\n")
        self._render_lines(ops, output, old_start, new_start, indent="          ")
        output.write("        </details>\n")

    def _render_lines(
        self,
        ops: Sequence[DiffOp],
        output: StringIO,
        old_start: int,
        new_start: int,
        indent: str = "        ",
    ) -> None:
        old_index = old_start
        new_index = new_start

        for op in ops:
            old_display = str(old_index) if op.tag != "insert" else "&nbsp;"
            new_display = str(new_index) if op.tag != "delete" else "&nbsp;"
            text = escape(op.line) if op.line else "&nbsp;"

            output.write(f"{indent}<div class='inline-line {_LINE_CLASSES[op.tag]}'>\n")
            output.write(f"{indent}  <span class='line-number' data-label='old'>{old_display}</span>\n")
            output.write(f"{indent}  <span class='line-number' data-label='new'>{new_display}</span>\n")
            output.write(f"{indent}  <span class='line-text'>{text}</span>\n")
            output.write(f"{indent}</div>\n")

            if op.tag != "insert":
                old_index += 1
            if op.tag != "delete":
                new_index += 1


def render_to_file(diff: DiffResult | Sequence[DiffResult], output_path: str, **kwargs: Any) -> None:
    """Render comparison results to an HTML file.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    renderer = HtmlDiffRenderer(**kwargs)
    html = renderer.render(diff)

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(html)
    except OSError as e:
        raise OutputWriteError(output_path, original_error=e) from e
