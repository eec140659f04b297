#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the notedoc CLI.

This module finds configuration files, loads them from TOML, YAML or JSON,
reads ``NOTEDOC_*`` environment variables and merges everything into the
option objects the conversion and edit functions take.

Configuration layout::

    log_level = "INFO"

    [parser]
    parse_tables = true
    max_heading_level = 3

    [edit]
    insert_spacer = false
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from notedoc.constants import CONFIG_FILENAMES, DEFAULT_LOG_LEVEL, ENV_PREFIX, PYPROJECT_TOOL_SECTION
from notedoc.exceptions import ConfigError, ValidationError
from notedoc.logging_utils import resolve_log_level
from notedoc.options.edit import EditOptions
from notedoc.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

CONFIG_SECTIONS = ("parser", "edit")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CliConfig:
    """Resolved CLI configuration.

    Parameters
    ----------
    parser : MarkdownParserOptions
        Options for Markdown conversion
    edit : EditOptions
        Options for append, replace and delete
    log_level : str
        Logging level name
    source : Path, optional
        File the configuration was read from, if any

    """

    parser: MarkdownParserOptions = field(default_factory=MarkdownParserOptions)
    edit: EditOptions = field(default_factory=EditOptions)
    log_level: str = DEFAULT_LOG_LEVEL
    source: Optional[Path] = None


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.notedoc]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.
    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked for
    ``.notedoc.toml``, ``.notedoc.yaml``, ``.notedoc.yml``, ``.notedoc.json``
    and then a ``pyproject.toml`` with a ``[tool.notedoc]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First configuration file found

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
            except ConfigError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed or of an unknown type

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", config_path=str(config_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(
            f"Invalid config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file must contain a mapping at root level, got {type(config).__name__}",
            config_path=str(config_path),
        )
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries, recursing into nested tables.

    Examples
    --------
    >>> merge_configs({"parser": {"parse_tables": False}}, {"parser": {"max_heading_level": 2}})
    {'parser': {'parse_tables': False, 'max_heading_level': 2}}

    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def _coerce_env_value(name: str, raw: str, target: Any) -> Any:
    if isinstance(target, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigError(f"Environment variable {name} must be a boolean, got {raw!r}")
    if isinstance(target, int):
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigError(f"Environment variable {name} must be an integer, got {raw!r}", original_error=e) from e
    return raw


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Read configuration from ``NOTEDOC_*`` environment variables.

    Variables are named after the section and option, e.g.
    ``NOTEDOC_PARSER_PARSE_TABLES=false`` or ``NOTEDOC_EDIT_INSERT_SPACER=0``;
    ``NOTEDOC_LOG_LEVEL`` sets the log level.

    Parameters
    ----------
    environ : Mapping, optional
        Environment to read, defaults to ``os.environ``

    Returns
    -------
    dict
        Configuration mapping in the same layout as a config file

    """
    environ = os.environ if environ is None else environ
    config: Dict[str, Any] = {}

    level = environ.get(f"{ENV_PREFIX}LOG_LEVEL")
    if level:
        config["log_level"] = level

    defaults = {"parser": MarkdownParserOptions(), "edit": EditOptions()}
    for section, options in defaults.items():
        for option_field in fields(options):
            current = getattr(options, option_field.name)
            if not isinstance(current, (bool, int, str)):
                continue
            name = f"{ENV_PREFIX}{section.upper()}_{option_field.name.upper()}"
            if name in environ:
                value = _coerce_env_value(name, environ[name], current)
                config.setdefault(section, {})[option_field.name] = value
    return config


def build_cli_config(data: Mapping[str, Any], source: Optional[Path] = None) -> CliConfig:
    """Turn a configuration mapping into option objects.

    Raises
    ------
    ConfigError
        If a section is not a table or names an unknown option

    """
    unknown = sorted(set(data) - set(CONFIG_SECTIONS) - {"log_level"})
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}", config_path=_path_str(source))

    for section in CONFIG_SECTIONS:
        if not isinstance(data.get(section, {}), dict):
            raise ConfigError(f"Configuration section '{section}' must be a table", config_path=_path_str(source))

    parser_data = dict(data.get("parser", {}))
    edit_data = dict(data.get("edit", {}))
    try:
        parser = MarkdownParserOptions.from_mapping(parser_data)
        edit_data.setdefault("parser", parser)
        edit = EditOptions.from_mapping(edit_data)
    except (ValidationError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}", config_path=_path_str(source), original_error=e) from e

    log_level = str(data.get("log_level", DEFAULT_LOG_LEVEL))
    try:
        resolve_log_level(log_level)
    except ConfigError as e:
        raise ConfigError(e.message, config_path=_path_str(source)) from e

    return CliConfig(parser=parser, edit=edit, log_level=log_level, source=source)


def _path_str(path: Optional[Path]) -> Optional[str]:
    return str(path) if path is not None else None


def load_cli_config(
    explicit_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    start_dir: Optional[Path] = None,
) -> CliConfig:
    """Load configuration with priority handling.

    Environment variables override values from the configuration file. The
    file is the explicit ``--config`` path when given, otherwise the first
    one found by :func:`find_config_in_parents`.

    Parameters
    ----------
    explicit_path : str, optional
        Path from the ``--config`` flag
    environ : Mapping, optional
        Environment to read, defaults to ``os.environ``
    start_dir : Path, optional
        Directory to start discovery from, defaults to the working directory

    Returns
    -------
    CliConfig
        Resolved configuration

    Raises
    ------
    ConfigError
        If a configuration file cannot be loaded or holds invalid values

    """
    source: Optional[Path] = Path(explicit_path) if explicit_path else find_config_in_parents(start_dir)
    file_config = load_config_file(source) if source is not None else {}
    if source is not None:
        logger.debug("Loaded configuration from %s", source)
    return build_cli_config(merge_configs(file_config, config_from_env(environ)), source=source)
