"""End-to-end tests for the versiondiff command.

This module runs the command as a subprocess, simulating real-world usage
patterns and testing the complete pipeline from command-line to output.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
from utils import cleanup_test_dir, create_test_temp_dir


@pytest.mark.e2e
@pytest.mark.cli
@pytest.mark.slow
class TestDiffCLI:
    """End-to-end tests for the versiondiff command."""

    def setup_method(self):
        """Set up test environment."""
        self.temp_dir = create_test_temp_dir()
        self.home_dir = self.temp_dir / "home"
        self.home_dir.mkdir()

        self.base = self.temp_dir / "contract.md"
        self.base.write_text(
            """# Service Agreement

## Term
The term is twelve months.

## Payment
Invoices are due in 30 days.
""",
            encoding="utf-8",
        )

        self.revision = self.temp_dir / "contract-v2.md"
        self.revision.write_text(
            """# Service Agreement

## Term
The term is twenty-four months.

## Payment
Invoices are due in 30 days.

## Termination
Either party may terminate with notice.
""",
            encoding="utf-8",
        )

    def teardown_method(self):
        """Clean up test environment."""
        cleanup_test_dir(self.temp_dir)

    def _run(self, args: list[str], stdin: bytes | None = None) -> subprocess.CompletedProcess:
        """Run versiondiff as a subprocess in the temporary directory."""
        env = {**os.environ, "HOME": str(self.home_dir)}
        env.pop("VERSIONDIFF_CONFIG", None)
        return subprocess.run(
            [sys.executable, "-m", "versiondiff", *args],
            cwd=self.temp_dir,
            input=stdin,
            capture_output=True,
            env=env,
            timeout=60,
        )

    def test_unified_diff(self):
        result = self._run(["contract.md", "contract-v2.md", "--color", "never"])

        assert result.returncode == 0, result.stderr.decode()
        lines = result.stdout.decode("utf-8").splitlines()
        assert lines[0] == "--- contract.md"
        assert lines[1] == "+++ contract-v2.md"
        assert "-The term is twelve months." in lines
        assert "+The term is twenty-four months." in lines
        assert "+## Termination" in lines
        assert " ## Payment" in lines

    def test_identical_files(self):
        result = self._run(["contract.md", "contract.md"])

        assert result.returncode == 0
        assert b"No differences found." in result.stderr

    def test_json_with_several_versions(self):
        result = self._run(["contract.md", "contract-v2.md", "contract.md", "--format", "json", "--jobs", "2"])

        assert result.returncode == 0, result.stderr.decode()
        payload = json.loads(result.stdout)
        assert payload["statistics"]["versions"] == 2
        assert payload["statistics"]["versions_changed"] == 1
        assert payload["results"][0]["statistics"]["lines_added"] == 4

    def test_html_report(self):
        output_path = self.temp_dir / "report.html"
        result = self._run(["contract.md", "contract-v2.md", "-f", "html", "-o", str(output_path)])

        assert result.returncode == 0, result.stderr.decode()
        html = output_path.read_text(encoding="utf-8")
        assert "inline-added" in html
        assert "contract-v2.md" in html

    def test_stdin_version(self):
        result = self._run(["contract.md", "-"], stdin=self.revision.read_bytes())

        assert result.returncode == 0, result.stderr.decode()
        assert b"+++ stdin" in result.stdout

    def test_missing_file(self):
        result = self._run(["contract.md", "missing.md"])

        assert result.returncode == 4
        assert b"File not found" in result.stderr

    def test_config_file_in_project(self):
        (self.temp_dir / "pyproject.toml").write_text(
            '[tool.versiondiff]\nformat = "json"\nbase_label = "Original"\n', encoding="utf-8"
        )
        result = self._run(["contract.md", "contract-v2.md"])

        assert result.returncode == 0, result.stderr.decode()
        assert json.loads(result.stdout)["base_label"] == "Original"

    def test_version(self):
        result = self._run(["--version"])

        assert result.returncode == 0
        assert result.stdout.decode().startswith("versiondiff ")
        assert "pdf: " in result.stdout.decode()

    def test_help_mentions_stdin(self):
        result = self._run(["--help"])

        assert result.returncode == 0
        assert "stdin" in result.stdout.decode()


@pytest.mark.e2e
def test_module_entry_point_is_importable():
    import versiondiff.__main__  # noqa: F401

    assert Path(versiondiff.__main__.__file__).name == "__main__.py"
