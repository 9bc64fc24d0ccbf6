"""Core module for Stitch."""

from stitch.core.config import (
    CLIOptions,
    ConfigError,
    FileConfiguration,
    find_config_file,
    load_config,
)
from stitch.core.discovery import IOUnavailableError, discover_files, get_src_root
from stitch.core.formats import Format, InvalidFormatError, resolve_format
from stitch.core.rules import Rule, RuleValidationError, resolve_rules
from stitch.core.types import (
    AnalysisResult,
    ColorSettings,
    ConstructLengths,
    Location,
    Severity,
    Violation,
)

__all__ = [
    "Severity",
    "Location",
    "Violation",
    "AnalysisResult",
    "ColorSettings",
    "ConstructLengths",
    "CLIOptions",
    "ConfigError",
    "FileConfiguration",
    "load_config",
    "find_config_file",
    "Rule",
    "RuleValidationError",
    "resolve_rules",
    "Format",
    "InvalidFormatError",
    "resolve_format",
    "IOUnavailableError",
    "discover_files",
    "get_src_root",
]
