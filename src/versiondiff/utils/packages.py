#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/utils/packages.py
"""Installed-package checks for optional input formats.

Only distribution metadata is consulted here; nothing is imported, so
asking whether PDF input is available does not load PyMuPDF.
"""

from __future__ import annotations

from importlib import metadata
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from packaging import version
from packaging.specifiers import InvalidSpecifier, SpecifierSet

from versiondiff.constants import OPTIONAL_FEATURES

PackageRequirement = Tuple[str, str, str]


def get_package_version(package_name: str) -> Optional[str]:
    """Get the installed version of a distribution, or None if not installed."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check whether an installed distribution satisfies ``version_spec``.

    Parameters
    ----------
    package_name : str
        Distribution name as used by pip (e.g. "pymupdf")
    version_spec : str
        Version specification (e.g. ">=1.24.0"); empty means any version

    Returns
    -------
    tuple
        (meets_requirement, installed_version). An invalid specifier never
        counts as met.

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None
    if not version_spec:
        return True, installed_version

    try:
        spec = SpecifierSet(version_spec)
    except InvalidSpecifier:
        return False, installed_version

    return version.parse(installed_version) in spec, installed_version


def check_feature_packages(packages: Sequence[PackageRequirement]) -> Dict[str, bool]:
    """Map each install name in ``packages`` to whether its requirement is met."""
    return {
        install_name: check_version_requirement(install_name, version_spec)[0]
        for install_name, _import_name, version_spec in packages
    }


def missing_feature_packages(packages: Sequence[PackageRequirement]) -> List[str]:
    """Return pip requirement strings for the packages that are not satisfied."""
    status = check_feature_packages(packages)
    return [f"{name}{spec}" for name, _import_name, spec in packages if not status[name]]


def describe_optional_features(features: Mapping[str, Sequence[PackageRequirement]] = OPTIONAL_FEATURES) -> str:
    """Summarize optional input support in one line, e.g. ``"pdf: available"``.

    Examples
    --------
    >>> describe_optional_features({"demo": [("not-a-real-distribution", "nope", "")]})
    'demo: missing not-a-real-distribution'

    """
    parts = []
    for feature, packages in features.items():
        missing = missing_feature_packages(packages)
        parts.append(f"{feature}: missing {', '.join(missing)}" if missing else f"{feature}: available")
    return "; ".join(parts)
