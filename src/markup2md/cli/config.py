#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the markup2md CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and turning the loaded tables into a
``TranspileOptions`` instance.

A configuration file has up to three tables::

    [parser]
    normalize_line_endings = true

    [renderer]
    code_fence_char = "~"
    code_fence_min = 4

    [transpile]
    on_error = "placeholder"
    placeholder = "*unrenderable*"

"""

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from markup2md.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from markup2md.options.markdown import MarkdownRendererOptions
from markup2md.options.markup import MarkupParserOptions
from markup2md.options.transpile import TranspileOptions

PYPROJECT_FILENAME = "pyproject.toml"

# Top-level tables and the options class each one configures
CONFIG_SECTIONS: Dict[str, type] = {
    "parser": MarkupParserOptions,
    "renderer": MarkdownRendererOptions,
    "transpile": TranspileOptions,
}

# Keys of the transpile table; its parser and renderer come from their own tables
TRANSPILE_KEYS = ("on_error", "placeholder")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.markup2md] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.markup2md], or empty dict if not found

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

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

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for ``.markup2md.toml``, ``.markup2md.yaml``,
    ``.markup2md.yml``, ``.markup2md.json`` and finally a pyproject.toml
    with a [tool.markup2md] section.

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

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # A broken pyproject.toml is not ours to report; keep searching
                pass

        parent = current.parent
        if parent == current:
            break

        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in standard locations.

    The working directory and its parents are searched first
    (see ``find_config_in_parents``), then the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON, or pyproject.toml file.

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
    >>> config = load_config_file(".markup2md.toml")
    >>> print(config.get("transpile", {}).get("on_error"))
    raw

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == PYPROJECT_FILENAME:
        return _load_pyproject_section(config_path)
    elif ext == ".toml":
        return _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    elif ext == ".json":
        return _load_json_config(config_path)
    raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .toml, .yaml, or .json")


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from TOML file."""
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from JSON file.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is not valid JSON or does not hold an object

    """
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
    """Load configuration from YAML file.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is not valid YAML or does not hold a mapping

    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    # An empty YAML file loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_with_priority(explicit_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from ``--config`` or, failing that, auto-discovery.

    Parameters
    ----------
    explicit_path : str, optional
        Explicit config file path from the --config flag or MARKUP2MD_CONFIG

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

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def _section_kwargs(config: Dict[str, Any], section: str, allowed_keys: tuple[str, ...]) -> Dict[str, Any]:
    """Return the keyword arguments of one config table, rejecting unknown keys."""
    table = config.get(section, {})
    if not isinstance(table, dict):
        raise argparse.ArgumentTypeError(f"[{section}] must be a table, got {type(table).__name__}")

    unknown = sorted(set(table) - set(allowed_keys))
    if unknown:
        raise argparse.ArgumentTypeError(
            f"Unknown option(s) in [{section}]: {', '.join(unknown)}. Valid options: {', '.join(allowed_keys)}"
        )
    return table


def options_from_config(config: Dict[str, Any]) -> TranspileOptions:
    """Build TranspileOptions from a loaded configuration dictionary.

    Parameters
    ----------
    config : dict
        Dictionary with optional ``parser``, ``renderer`` and ``transpile`` tables

    Returns
    -------
    TranspileOptions
        Options with every configured value applied over the defaults

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration has unknown tables or keys, or invalid values

    """
    unknown_sections = sorted(set(config) - set(CONFIG_SECTIONS))
    if unknown_sections:
        raise argparse.ArgumentTypeError(
            f"Unknown configuration section(s): {', '.join(unknown_sections)}. "
            f"Valid sections: {', '.join(CONFIG_SECTIONS)}"
        )

    parser_keys = tuple(f.name for f in fields(MarkupParserOptions))
    renderer_keys = tuple(f.name for f in fields(MarkdownRendererOptions))

    try:
        return TranspileOptions(
            parser=MarkupParserOptions(**_section_kwargs(config, "parser", parser_keys)),
            renderer=MarkdownRendererOptions(**_section_kwargs(config, "renderer", renderer_keys)),
            **_section_kwargs(config, "transpile", TRANSPILE_KEYS),
        )
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration: {e}") from e
