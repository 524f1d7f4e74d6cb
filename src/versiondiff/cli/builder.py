#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/cli/builder.py
"""Argument parser and exit codes for the versiondiff CLI."""

from __future__ import annotations

import argparse

from versiondiff import __version__
from versiondiff.constants import CONFIG_ENV_VAR, DEFAULT_COLOR_MODE, DEFAULT_OUTPUT_FORMAT
from versiondiff.exceptions import DependencyError, FileError, RenderingError, ValidationError
from versiondiff.utils.packages import describe_optional_features

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7


def positive_int(value: str) -> int:
    """Validate that an argument is a positive integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not an integer of at least 1

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from e

    if ivalue < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {ivalue}")

    return ivalue


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``versiondiff`` command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser. Option defaults can be replaced from a config
        file with ``parser.set_defaults`` before parsing.

    """
    parser = argparse.ArgumentParser(
        prog="versiondiff",
        description="Compare a base document against one or more versions, line by line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Compare two drafts (like diff -u, with every line shown)
  versiondiff contract.txt contract-v2.txt

  # Compare a base against several versions with a summary table
  versiondiff base.md v2.md v3.md v4.md --summary --rich

  # Pipe a version in from another tool
  pdftotext draft.pdf - | versiondiff base.txt -

  # Write an HTML report
  versiondiff base.pdf revised.pdf --format html --output report.html

Configuration:
  Options can be set in .versiondiff.toml, .versiondiff.yaml, .versiondiff.json
  or a [tool.versiondiff] table in pyproject.toml, found by searching up from
  the current directory and then the home directory. {CONFIG_ENV_VAR} points
  to an explicit file. Command-line arguments always win.
        """,
    )

    parser.add_argument("base", help="Base document (.txt, .md, .pdf, ... use '-' for stdin)")
    parser.add_argument(
        "versions",
        nargs="+",
        metavar="version",
        help="One or more versions to compare against the base (use '-' for stdin)",
    )

    # Output options
    parser.add_argument(
        "--format",
        "-f",
        choices=["unified", "json", "html"],
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format: unified (default, full-context diff), json (structured), html (visual)",
    )
    parser.add_argument("--output", "-o", metavar="PATH", help="Write diff to file (default: stdout)")
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default=DEFAULT_COLOR_MODE,
        help="Colorize unified output: auto (default, if terminal), always, never",
    )
    parser.add_argument(
        "--no-context",
        dest="show_context",
        action="store_false",
        default=True,
        help="Collapse unchanged lines in HTML output",
    )

    # Comparison options
    parser.add_argument(
        "--ignore-trailing-whitespace",
        "-w",
        action="store_true",
        dest="ignore_trailing_whitespace",
        help="Strip trailing whitespace from every line before comparing",
    )
    parser.add_argument(
        "--label",
        action="append",
        dest="labels",
        metavar="NAME",
        help="Display name for a version, in order (repeatable; defaults to file names)",
    )
    parser.add_argument(
        "--base-label",
        metavar="NAME",
        help="Display name for the base (defaults to the base file name)",
    )
    parser.add_argument(
        "--jobs",
        "-j",
        type=positive_int,
        default=1,
        metavar="N",
        help="Number of versions to compare in parallel (default: 1)",
    )

    # Summary options
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a per-version table of added, deleted and unchanged lines to stderr",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Use rich formatting for the summary table (automatically disabled when stderr is piped)",
    )

    # Configuration
    parser.add_argument(
        "--config",
        metavar="PATH",
        help=f"Path to configuration file (TOML, YAML or JSON). Overrides {CONFIG_ENV_VAR} and auto-discovery.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help=f"Disable loading of configuration files, including {CONFIG_ENV_VAR} and --config",
    )

    # Logging
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING). Overrides --verbose if both are specified.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and per-comparison timing",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"versiondiff {__version__} ({describe_optional_features()})",
    )

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
