"""Unit tests for the versiondiff command-line entry point."""

import argparse
import io
import json
from pathlib import Path

import pytest
from utils import write_text_file

from versiondiff import __version__
from versiondiff.cli import main
from versiondiff.cli.builder import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
    positive_int,
)
from versiondiff.exceptions import (
    DependencyError,
    FileNotFoundError,
    OutputWriteError,
    ValidationError,
)


@pytest.fixture
def inputs(isolated_config: Path, base_text: str, modified_text: str) -> Path:
    """Write a base and two versions into the working directory."""
    write_text_file(isolated_config, "base.txt", base_text)
    write_text_file(isolated_config, "v2.txt", modified_text)
    write_text_file(isolated_config, "v3.txt", base_text)
    return isolated_config


@pytest.mark.unit
class TestPositiveInt:
    """Test positive_int() argument validator."""

    def test_valid_value(self):
        assert positive_int("4") == 4

    def test_zero_rejected(self):
        with pytest.raises(argparse.ArgumentTypeError, match="at least 1"):
            positive_int("0")

    def test_non_integer_rejected(self):
        with pytest.raises(argparse.ArgumentTypeError, match="expected an integer"):
            positive_int("two")


@pytest.mark.unit
class TestCreateParser:
    """Test create_parser() function."""

    def test_defaults(self):
        parsed = create_parser().parse_args(["base.txt", "v2.txt"])
        assert parsed.base == "base.txt"
        assert parsed.versions == ["v2.txt"]
        assert parsed.format == "unified"
        assert parsed.color == "auto"
        assert parsed.jobs == 1
        assert parsed.ignore_trailing_whitespace is False
        assert parsed.show_context is True
        assert parsed.labels is None

    def test_repeatable_labels(self):
        parsed = create_parser().parse_args(["b", "v1", "v2", "--label", "one", "--label", "two"])
        assert parsed.labels == ["one", "two"]

    def test_requires_a_version(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["base.txt"])


@pytest.mark.unit
class TestExitCodes:
    """Test get_exit_code_for_exception() mapping."""

    @pytest.mark.parametrize(
        "exception, expected",
        [
            (DependencyError("pdf", [("pymupdf", ">=1.24.0")]), EXIT_DEPENDENCY_ERROR),
            (ImportError("fitz"), EXIT_DEPENDENCY_ERROR),
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (argparse.ArgumentTypeError("bad config"), EXIT_VALIDATION_ERROR),
            (FileNotFoundError("missing.txt"), EXIT_FILE_ERROR),
            (OutputWriteError("out.txt"), EXIT_RENDERING_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, expected):
        assert get_exit_code_for_exception(exception) == expected


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test main() end to end within the process."""

    def test_unified_output(self, inputs, capsys):
        assert main(["base.txt", "v2.txt"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out == "--- base.txt\n+++ v2.txt\n L1\n-L2\n+L2 modified\n L3\n+L4\n \n"

    def test_multiple_versions(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "v3.txt"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out.count("--- base.txt") == 2
        assert "+++ v2.txt" in out
        assert "+++ v3.txt" in out

    def test_no_differences_still_succeeds(self, inputs, capsys):
        assert main(["base.txt", "v3.txt"]) == EXIT_SUCCESS
        assert "No differences found." in capsys.readouterr().err

    def test_labels(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "--label", "Draft 2", "--base-label", "Original"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out.startswith("--- Original\n+++ Draft 2\n")

    def test_too_many_labels(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "--label", "a", "--label", "b"]) == EXIT_VALIDATION_ERROR
        assert "--label" in capsys.readouterr().err

    def test_color_always(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "--color", "always"]) == EXIT_SUCCESS
        assert "\033[31m-L2\033[0m" in capsys.readouterr().out

    def test_ignore_trailing_whitespace(self, isolated_config, capsys):
        write_text_file(isolated_config, "a.txt", "one  \ntwo\n")
        write_text_file(isolated_config, "b.txt", "one\ntwo\t\n")

        assert main(["a.txt", "b.txt", "-w"]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert "No differences found." in captured.err
        assert "-one" not in captured.out

    def test_json_format(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "v3.txt", "--format", "json"]) == EXIT_SUCCESS

        payload = json.loads(capsys.readouterr().out)
        assert payload["base_label"] == "base.txt"
        assert [entry["display_name"] for entry in payload["results"]] == ["v2.txt", "v3.txt"]

    def test_html_output_file(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "-f", "html", "-o", "report.html"]) == EXIT_SUCCESS

        report = (inputs / "report.html").read_text(encoding="utf-8")
        assert "<!DOCTYPE html>" in report
        assert "Diff written to: report.html" in capsys.readouterr().err

    def test_unified_output_file_has_no_color(self, inputs):
        assert main(["base.txt", "v2.txt", "-o", "out.diff"]) == EXIT_SUCCESS
        assert "\033[" not in (inputs / "out.diff").read_text(encoding="utf-8")

    def test_unwritable_output(self, inputs, capsys):
        exit_code = main(["base.txt", "v2.txt", "-o", str(inputs / "missing" / "out.diff")])
        assert exit_code == EXIT_RENDERING_ERROR

    def test_missing_version_file(self, inputs, capsys):
        assert main(["base.txt", "nope.txt"]) == EXIT_FILE_ERROR
        assert "File not found" in capsys.readouterr().err

    def test_missing_base_fails_before_output(self, inputs, capsys):
        assert main(["nope.txt", "v2.txt"]) == EXIT_FILE_ERROR
        assert capsys.readouterr().out == ""

    def test_text_files_opening_with_pdf_magic(self, inputs, capsys):
        write_text_file(inputs, "notes.txt", "%PDF-1.7 header notes\nline2\n")
        write_text_file(inputs, "notes2.txt", "%PDF-1.7 header notes\nline2 revised\n")

        assert main(["--no-config", "notes.txt", "notes2.txt"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "-line2" in out
        assert "+line2 revised" in out

    def test_stdin_version(self, inputs, capsys, monkeypatch, modified_text):
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(modified_text.encode("utf-8"))))

        assert main(["base.txt", "-"]) == EXIT_SUCCESS
        assert "+++ stdin" in capsys.readouterr().out

    def test_stdin_twice_rejected(self, inputs, capsys):
        assert main(["-", "-"]) == EXIT_VALIDATION_ERROR
        assert "stdin" in capsys.readouterr().err

    def test_empty_stdin(self, inputs, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"")))
        assert main(["base.txt", "-"]) == EXIT_FILE_ERROR

    def test_parallel_jobs_match_sequential(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "v3.txt"]) == EXIT_SUCCESS
        sequential = capsys.readouterr().out

        assert main(["base.txt", "v2.txt", "v3.txt", "--jobs", "2"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == sequential

    def test_invalid_jobs_is_usage_error(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "--jobs", "0"]) == 2

    def test_plain_summary(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "v3.txt", "--summary"]) == EXIT_SUCCESS

        err = capsys.readouterr().err
        assert "v2.txt: +2 · -1 · =3 (changed)" in err
        assert "v3.txt: +0 · -0 · =4 (identical)" in err

    def test_version_flag(self, capsys):
        assert main(["--version"]) == EXIT_SUCCESS
        assert __version__ in capsys.readouterr().out

    def test_verbose_logging(self, inputs, capsys):
        assert main(["base.txt", "v2.txt", "--verbose"]) == EXIT_SUCCESS
        assert "Shortest edit distance" in capsys.readouterr().err

    def test_log_file(self, inputs):
        assert main(["base.txt", "v2.txt", "--log-level", "INFO", "--log-file", "run.log"]) == EXIT_SUCCESS
        assert "Comparing base.txt" in (inputs / "run.log").read_text(encoding="utf-8")
