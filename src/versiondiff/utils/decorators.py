#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/utils/decorators.py
"""Decorators and context managers shared across versiondiff.

``requires_dependencies`` guards the optional input readers (PDF text
extraction) so a missing extra surfaces as a :class:`DependencyError`
before any comparison starts. ``debug_timer`` is used around each
comparison to log how long the edit-distance search took.
"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Sequence, Tuple

from versiondiff.constants import OPTIONAL_FEATURES
from versiondiff.exceptions import DependencyError
from versiondiff.utils.packages import PackageRequirement, check_version_requirement


def _install_hint(feature_name: str) -> str:
    # Features with a packaging extra are installed through it
    if feature_name in OPTIONAL_FEATURES:
        return f'pip install "versiondiff[{feature_name}]"'
    return ""


def _find_unmet(
    packages: Sequence[PackageRequirement],
) -> Tuple[List[Tuple[str, str]], List[Tuple[str, str, str]], ImportError | None]:
    missing: List[Tuple[str, str]] = []
    mismatches: List[Tuple[str, str, str]] = []
    first_error = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue

        if version_spec:
            meets, installed = check_version_requirement(install_name, version_spec)
            if not meets:
                mismatches.append((install_name, version_spec, installed or "unknown"))

    return missing, mismatches, first_error


def requires_dependencies(feature_name: str, packages: Sequence[PackageRequirement]) -> Callable:
    """Check an optional feature's packages every time the wrapped function is called.

    Parameters
    ----------
    feature_name : str
        Name of the optional feature (e.g. "pdf"). It appears in error
        messages and, for known extras, in the suggested install command.
    packages : sequence of tuple
        (install_name, import_name, version_spec) tuples, such as
        ``("pymupdf", "fitz", ">=1.24.0")``. An empty version_spec accepts
        any installed version.

    Raises
    ------
    DependencyError
        Listing every missing package and version mismatch at once

    Examples
    --------
        >>> @requires_dependencies("pdf", [("pymupdf", "fitz", ">=1.24.0")])
        ... def extract(data):
        ...     import fitz
        ...     # extraction logic here

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, mismatches, first_error = _find_unmet(packages)
            if missing or mismatches:
                raise DependencyError(
                    feature_name=feature_name,
                    missing_packages=missing,
                    version_mismatches=mismatches,
                    install_command=_install_hint(feature_name),
                    original_import_error=first_error,
                ) from first_error
            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the wall-clock time of the enclosed block at DEBUG level.

    Nothing is measured when ``logger`` is not enabled for DEBUG.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    yield
    logger.debug("%s completed in %.4fs", operation, time.perf_counter() - start_time)
