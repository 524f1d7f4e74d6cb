#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for versiondiff.

This module provides the ``versiondiff`` command, which compares one base
document against one or more versions and writes a unified, JSON or HTML
diff for each of them.

    versiondiff base.txt v2.txt v3.txt --summary
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from versiondiff.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from versiondiff.cli.config import config_to_parser_defaults, load_config_with_priority
from versiondiff.cli.output import render_summary_plain, render_summary_rich, should_use_rich_output
from versiondiff.constants import CONFIG_ENV_VAR, STDIN_LABEL, STDIN_MARKER
from versiondiff.diff.lines import NormalizationPolicy
from versiondiff.diff.renderers.html import HtmlDiffRenderer
from versiondiff.diff.renderers.json import JsonDiffRenderer
from versiondiff.diff.renderers.unified import UnifiedDiffRenderer
from versiondiff.diff.text_diff import DiffResult, Version, compare_all
from versiondiff.exceptions import OutputWriteError, ValidationError, VersionDiffError
from versiondiff.logging_utils import configure_logging
from versiondiff.sources import read_stream, read_text

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _parse_with_config(parser: argparse.ArgumentParser, args: list[str] | None) -> argparse.Namespace:
    """Parse arguments, re-parsing with config file values as defaults.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded or holds invalid values

    """
    parsed_args = parser.parse_args(args)
    if parsed_args.no_config:
        return parsed_args

    config = load_config_with_priority(
        explicit_path=parsed_args.config,
        env_var_path=os.environ.get(CONFIG_ENV_VAR),
    )
    if not config:
        return parsed_args

    parser.set_defaults(**config_to_parser_defaults(config))
    return parser.parse_args(args)


def _validate_inputs(parsed_args: argparse.Namespace) -> None:
    inputs = [parsed_args.base, *parsed_args.versions]
    if inputs.count(STDIN_MARKER) > 1:
        raise ValidationError(
            "Only one input can be read from stdin",
            parameter_name="inputs",
            parameter_value=inputs,
        )

    labels = parsed_args.labels or []
    if len(labels) > len(parsed_args.versions):
        raise ValidationError(
            f"Got {len(labels)} --label values for {len(parsed_args.versions)} version(s)",
            parameter_name="labels",
            parameter_value=labels,
        )


def _read_input(path: str) -> tuple[str, str, str | None]:
    """Return ``(text, default_label, source)`` for a path or the stdin marker."""
    if path == STDIN_MARKER:
        return read_stream(sys.stdin.buffer), STDIN_LABEL, None
    return read_text(path), Path(path).name, path


def _load_inputs(parsed_args: argparse.Namespace) -> tuple[str, str, list[Version]]:
    """Read the base and every version before any comparison runs."""
    base_text, base_name, _ = _read_input(parsed_args.base)
    base_label = parsed_args.base_label or base_name

    labels = list(parsed_args.labels or [])
    versions = []
    for position, path in enumerate(parsed_args.versions):
        text, default_label, source = _read_input(path)
        label = labels[position] if position < len(labels) else default_label
        versions.append(Version.create(label, text, source=source))

    return base_text, base_label, versions


def _use_color(parsed_args: argparse.Namespace) -> bool:
    if parsed_args.color == "always":
        return True
    if parsed_args.color == "auto" and not parsed_args.output:
        return sys.stdout.isatty()
    return False


def _render(results: Sequence[DiffResult], parsed_args: argparse.Namespace, use_color: bool) -> str:
    if parsed_args.format == "html":
        return HtmlDiffRenderer(show_context=parsed_args.show_context).render(results)
    if parsed_args.format == "json":
        return JsonDiffRenderer().render(results)

    renderer = UnifiedDiffRenderer(use_color=use_color)
    blocks = ["\n".join(renderer.render(result.iter_unified_diff())) for result in results]
    return "\n".join(blocks)


def _write_output(output: str, output_path: str | None) -> None:
    if not output_path:
        print(output)
        return

    path = Path(output_path)
    try:
        path.write_text(output, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(path), original_error=e) from e
    print(f"Diff written to: {path}", file=sys.stderr)


def _print_summary(results: Sequence[DiffResult], parsed_args: argparse.Namespace) -> None:
    if should_use_rich_output(parsed_args, stream=sys.stderr):
        render_summary_rich(results)
    else:
        render_summary_plain(results)


def main(args: list[str] | None = None) -> int:
    """Execute the versiondiff command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code: 0 on success whether or not differences were found,
        otherwise the code for the error category

    """
    parser = create_parser()
    try:
        parsed_args = _parse_with_config(parser, args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    try:
        _validate_inputs(parsed_args)
        base_text, base_label, versions = _load_inputs(parsed_args)

        logger.info("Comparing %s against %d version(s)", base_label, len(versions))
        results = compare_all(
            base_text,
            versions,
            NormalizationPolicy(ignore_trailing_whitespace=parsed_args.ignore_trailing_whitespace),
            base_label=base_label,
            max_workers=parsed_args.jobs,
        )

        if not any(result.has_changes for result in results):
            print("No differences found.", file=sys.stderr)

        output = _render(results, parsed_args, _use_color(parsed_args))
        _write_output(output, parsed_args.output)
    except VersionDiffError as e:
        logger.debug("Comparison failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    if parsed_args.summary:
        _print_summary(results, parsed_args)

    return EXIT_SUCCESS


__all__ = ["main"]
