"""Configuration inputs for Stitch: the CLI option bag and the YAML file."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from stitch.core.types import ConstructLengths

CONFIG_FILE_NAMES = (".stitch.yml", ".stitch.yaml")

_LIST_KEYS = ("only", "except", "include", "exclude")
_SCALAR_KEYS = ("format", "max_severity")


class ConfigError(Exception):
    """Error in configuration."""

    pass


@dataclass(frozen=True)
class CLIOptions:
    """Options parsed from the command line.

    ``None`` marks an option that was not given. ``lengths`` holds
    ``(name, value)`` pairs for the construct limits that were given.
    """

    paths: tuple[str, ...] = ()
    only: Optional[frozenset[str]] = None
    except_: Optional[frozenset[str]] = None
    format: Optional[str] = None
    max_severity: Optional[str] = None
    lengths: tuple[tuple[str, int], ...] = ()
    config_path: Optional[str] = None
    help: bool = False
    version: bool = False
    show_rules: bool = False
    list_files: bool = False
    color: bool = True
    invert_color: bool = False
    debug: bool = False


@dataclass(frozen=True)
class FileConfiguration:
    """Settings read from a .stitch.yml file. Every field is optional."""

    only: Optional[frozenset[str]] = None
    except_: Optional[frozenset[str]] = None
    format: Optional[str] = None
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    max_severity: Optional[str] = None
    lengths: tuple[tuple[str, Any], ...] = ()
    file_location: Optional[str] = None


def find_config_file(start_path: Optional[str] = None) -> Optional[str]:
    """Find .stitch.yml in the start directory or its parents.

    Args:
        start_path: Starting directory (defaults to cwd).

    Returns:
        Path to config file if found, None otherwise.
    """
    if start_path:
        current = Path(start_path).resolve()
    else:
        current = Path.cwd()

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.is_file():
                return str(config_path)

        # Stop at git root
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Optional[str] = None, start_path: Optional[str] = None) -> Optional[FileConfiguration]:
    """Load configuration from file.

    Args:
        path: Path to config file. If None, searches for .stitch.yml.
        start_path: Directory the search starts from when ``path`` is None.

    Returns:
        FileConfiguration, or None if no config file exists.

    Raises:
        ConfigError: If the config file is invalid.
    """
    if path is None:
        path = find_config_file(start_path)

    if path is None:
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    location = str(Path(path).resolve())
    if raw is None:
        return FileConfiguration(file_location=location)
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping, got {type(raw).__name__}")

    return _parse_config(raw, location)


def _parse_config(raw: dict, location: Optional[str] = None) -> FileConfiguration:
    """Parse raw YAML dict into FileConfiguration."""
    length_names = ConstructLengths.names()
    values: dict[str, Any] = {}
    lengths: dict[str, Any] = {}

    for raw_key, value in raw.items():
        key = str(raw_key).replace("-", "_")
        if key in _LIST_KEYS:
            values[key] = _string_list(key, value)
        elif key in _SCALAR_KEYS:
            values[key] = _optional_str(key, value)
        elif key in length_names:
            # Range checks happen when the settings are resolved
            if value is not None:
                lengths[key] = value
        else:
            raise ConfigError(f"Unknown key in config file: {raw_key}")

    only = values.get("only")
    excluded_rules = values.get("except")

    return FileConfiguration(
        only=frozenset(only) if only is not None else None,
        except_=frozenset(excluded_rules) if excluded_rules is not None else None,
        format=values.get("format"),
        include=tuple(values.get("include") or ()),
        exclude=tuple(values.get("exclude") or ()),
        max_severity=values.get("max_severity"),
        lengths=tuple(lengths.items()),
        file_location=location,
    )


def _string_list(key: str, value: Any) -> Optional[list[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return list(value)


def _optional_str(key: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {value!r}")
    return value
