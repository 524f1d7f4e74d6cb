"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/versiondiff/cli/output.py
import argparse
import sys
from typing import Sequence, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from versiondiff.diff.text_diff import DiffResult


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stderr unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when the --rich flag is set and the target stream
    is a TTY.

    """
    if not getattr(args, "rich", False):
        return False

    target = stream or sys.stderr
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except ValueError:
            # Closed streams raise ValueError on isatty()
            return False

    return False


def render_summary_rich(results: Sequence[DiffResult], stream: TextIO | None = None) -> None:
    """Print a per-version statistics table using rich formatting."""
    console = Console(file=stream or sys.stderr)

    base_label = results[0].base_label if results else ""
    table = Table(title=f"Changes against {base_label}")
    table.add_column("Version", style="cyan", no_wrap=False)
    table.add_column("Added", style="green", justify="right")
    table.add_column("Deleted", style="red", justify="right")
    table.add_column("Unchanged", style="white", justify="right")
    table.add_column("Status", style="white")

    for result in results:
        status = "[yellow]changed[/yellow]" if result.has_changes else "[green]identical[/green]"
        table.add_row(
            escape(result.display_name),
            str(result.stats.insert),
            str(result.stats.delete),
            str(result.stats.equal),
            status,
        )

    console.print(table)


def render_summary_plain(results: Sequence[DiffResult], stream: TextIO | None = None) -> None:
    """Print a per-version statistics summary as plain text."""
    target = stream or sys.stderr
    for i, result in enumerate(results, 1):
        status = "changed" if result.has_changes else "identical"
        print(f"{i:3d}. {result.display_name}: {result.stats.badge()} ({status})", file=target)
