#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the versiondiff command.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
attached here, once, by the CLI. Per-comparison timings and edit distances
are logged at DEBUG under ``versiondiff.diff``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] [%(threadName)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Encoding detection logs every prober it tries at DEBUG
CHATTY_DEPENDENCY_LOGGERS = ("chardet",)


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name such as ``"info"`` into its numeric value.

    Unknown names resolve to ``logging.INFO``.
    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        # Thread names tell parallel comparisons apart
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(PLAIN_FORMAT)


def _set_dependency_log_levels(trace_mode: bool) -> None:
    for name in CHATTY_DEPENDENCY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if trace_mode else logging.WARNING)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the console handler, and optionally a file handler, on the root logger.

    Any handlers already on the root logger are replaced, so calling this
    twice does not duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. "INFO").
    log_file : str, optional
        Append log records to this file as well as to stderr. A file that
        cannot be opened is reported as a warning and otherwise ignored.
    trace_mode : bool, default False
        Add timestamps, logger and thread names to every record, and let
        dependency loggers such as chardet through.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    level = resolve_log_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    _set_dependency_log_levels(trace_mode)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if not log_file:
        return root_logger

    try:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        root_logger.warning("Could not open log file %s: %s", log_file, exc)
        return root_logger

    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    root_logger.info("Logging to file: %s", log_file)
    return root_logger
