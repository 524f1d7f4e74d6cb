#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the versiondiff CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and turning them into parser defaults so
that command-line arguments always take precedence.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from versiondiff.constants import CONFIG_BASENAME, CONFIG_EXTENSIONS, PYPROJECT_TOOL_SECTION

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [f"{CONFIG_BASENAME}{ext}" for ext in CONFIG_EXTENSIONS]

# Config key -> (parser dest, accepted type, allowed values or None)
CONFIG_KEYS: Dict[str, tuple[str, type, Optional[tuple[str, ...]]]] = {
    "ignore_trailing_whitespace": ("ignore_trailing_whitespace", bool, None),
    "base_label": ("base_label", str, None),
    "format": ("format", str, ("unified", "json", "html")),
    "color": ("color", str, ("auto", "always", "never")),
    "jobs": ("jobs", int, None),
    "summary": ("summary", bool, None),
    "rich": ("rich", bool, None),
    "log_level": ("log_level", str, ("DEBUG", "INFO", "WARNING", "ERROR")),
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.versiondiff] table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked
    for ``.versiondiff.toml``, ``.versiondiff.yaml``, ``.versiondiff.yml``,
    ``.versiondiff.json`` and finally a ``pyproject.toml`` carrying a
    ``[tool.versiondiff]`` table. The first match wins.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Parent directories are searched first (see :func:`find_config_in_parents`),
    then the dedicated config files in the user's home directory.
    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    Examples
    --------
    >>> config = load_config_file(".versiondiff.toml")
    >>> config.get("format")
    'html'

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json")

    logger.debug("Loaded configuration from %s", config_path)
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None,
    env_var_path: Optional[str] = None,
    start_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (VERSIONDIFF_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file(start_dir)
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def config_to_parser_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Translate a loaded configuration into argparse defaults.

    Unknown keys are ignored with a warning.

    Raises
    ------
    argparse.ArgumentTypeError
        If a known key has the wrong type or an unsupported value

    """
    defaults: Dict[str, Any] = {}

    for key, value in config.items():
        if key not in CONFIG_KEYS:
            logger.warning("Ignoring unknown configuration key: %s", key)
            continue

        dest, expected_type, allowed = CONFIG_KEYS[key]
        # bool is a subclass of int; reject it where a count is expected
        if not isinstance(value, expected_type) or (expected_type is int and isinstance(value, bool)):
            raise argparse.ArgumentTypeError(
                f"Configuration key '{key}' must be {expected_type.__name__}, got {type(value).__name__}"
            )
        if key == "log_level":
            value = value.upper()
        if allowed is not None and value not in allowed:
            raise argparse.ArgumentTypeError(
                f"Configuration key '{key}' must be one of {', '.join(allowed)}, got '{value}'"
            )
        if key == "jobs" and value < 1:
            raise argparse.ArgumentTypeError(f"Configuration key 'jobs' must be at least 1, got {value}")

        defaults[dest] = value

    return defaults
