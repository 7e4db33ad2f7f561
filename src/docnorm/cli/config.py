#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the docnorm CLI.

Formatter options can be stored in ``.docnorm.toml``, ``.docnorm.yaml``,
``.docnorm.yml``, ``.docnorm.json`` or the ``[tool.docnorm]`` table of
``pyproject.toml``. Each holds a flat table of option names, for example::

    # .docnorm.toml
    max-depth = 128
    warn-on-coerced-level = true
"""

import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from docnorm.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from docnorm.exceptions import ConfigurationError


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.docnorm] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration from [tool.docnorm], or empty dict if not found

    Raises
    ------
    ConfigurationError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading pyproject.toml {pyproject_path}: {e}", original_error=e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root, checking each
    directory for the dedicated config files first and then for a
    pyproject.toml with a [tool.docnorm] section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

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
            except ConfigurationError:
                # Unreadable pyproject.toml; keep searching upward
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches parent directories from ``start_dir`` (default: cwd) upward,
    then falls back to the dedicated config files in the home directory.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start the parent search from

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

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
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

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
    ConfigurationError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".docnorm.toml")
    >>> print(config.get("max-depth"))
    128

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    if ext == ".toml":
        loader = _load_toml
    elif ext in (".yaml", ".yml"):
        loader = _load_yaml
    elif ext == ".json":
        loader = _load_json
    else:
        raise ConfigurationError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")

    try:
        config = loader(config_path)
    except OSError as e:
        raise ConfigurationError(f"Error reading config file {config_path}: {e}", original_error=e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def _load_toml(config_path: Path) -> Any:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in config file {config_path}: {e}", original_error=e) from e


def _load_json(config_path: Path) -> Any:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in config file {config_path}: {e}", original_error=e) from e


def _load_yaml(config_path: Path) -> Any:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {config_path}: {e}", original_error=e) from e
