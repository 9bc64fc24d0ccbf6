"""Effective configuration built from the command line and the config file.

:class:`Configuration` is the single object the CLI driver and the analysis
pipeline query. It answers each question on demand, reading the CLI option
bag first, the config file second and built-in defaults last, and caches
every answer so repeated queries see the same value.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Mapping, Optional

from stitch.core.config import CLIOptions, ConfigError, FileConfiguration
from stitch.core.discovery import discover_files, get_src_root
from stitch.core.formats import Format, resolve_format
from stitch.core.rules import Rule, resolve_rules
from stitch.core.types import ColorSettings, ConstructLengths, Severity
from stitch.output import Formatter, create_formatter

DEFAULT_MAX_SEVERITY = Severity.WARNING


class RangeError(ConfigError):
    """A numeric or enumerated setting is outside its accepted domain."""

    def __init__(self, setting: str, value: Any, accepted: str) -> None:
        self.setting = setting
        self.value = value
        self.accepted = accepted
        super().__init__(f"Invalid value for {setting}: {value!r}. Expected {accepted}.")


@dataclass(frozen=True)
class EffectiveConfiguration:
    """Fully resolved settings for one run."""

    rules: frozenset[Rule]
    files: tuple[str, ...]
    format: Format
    max_severity: Severity
    construct_lengths: ConstructLengths
    color_settings: ColorSettings
    show_rules: bool
    list_files: bool
    debug: bool


class Configuration:
    """Resolves settings from CLI options and an optional config file."""

    def __init__(
        self,
        cli: CLIOptions,
        file_config: Optional[FileConfiguration] = None,
        environ: Optional[Mapping[str, str]] = None,
        notify: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Initialize the configuration.

        Args:
            cli: Parsed command-line options.
            file_config: Parsed config file, or None if there is none.
            environ: Environment used to look up SRCROOT (defaults to os.environ).
            notify: Receives informational messages (defaults to print).
        """
        self.cli = cli
        self.file_config = file_config
        self.src_root = get_src_root(environ)
        self.notify = notify or print

    def should_print_help(self) -> bool:
        return self.cli.help

    def should_print_version(self) -> bool:
        return self.cli.version

    def should_print_rules(self) -> bool:
        return self.cli.show_rules

    def should_list_files(self) -> bool:
        return self.cli.list_files

    def should_color_output(self) -> bool:
        return self.cli.color

    def should_invert_color_output(self) -> bool:
        return self.cli.invert_color

    def debug_flag_set(self) -> bool:
        return self.cli.debug

    def enabled_rules(self) -> frozenset[Rule]:
        """Rules enabled after applying only/except filters.

        Raises:
            RuleValidationError: If a selected filter names unknown rules.
        """
        return self._enabled_rules

    @cached_property
    def _enabled_rules(self) -> frozenset[Rule]:
        file_config = self.file_config
        names = resolve_rules(
            self.cli.only,
            self.cli.except_,
            file_config.only if file_config else None,
            file_config.except_ if file_config else None,
            Rule.names(),
        )
        return frozenset(Rule(name) for name in names)

    def files_to_analyze(self) -> list[str]:
        """Sorted Swift files to analyze.

        Raises:
            IOUnavailableError: If a path is missing or cannot be traversed.
            InvalidFormatError: If the config file names an unknown format
                and the config file location would be reported.
        """
        return list(self._files)

    @cached_property
    def _files(self) -> tuple[str, ...]:
        active_format = None
        if not self.cli.paths and self.file_config and self.file_config.file_location:
            active_format = self.format()
        files = discover_files(
            self.cli.paths,
            self.file_config,
            self.src_root,
            notify=self.notify,
            active_format=active_format,
        )
        return tuple(files)

    def format(self) -> Format:
        """Output format from the CLI, the config file, or the default.

        Raises:
            InvalidFormatError: If the chosen format tag is unknown.
        """
        return self._format

    @cached_property
    def _format(self) -> Format:
        file_format = self.file_config.format if self.file_config else None
        return resolve_format(self.cli.format, file_format)

    def color_settings(self) -> ColorSettings:
        return ColorSettings(
            color=self.should_color_output(),
            invert=self.should_invert_color_output(),
        )

    def formatter(self, color_settings: Optional[ColorSettings] = None) -> Formatter:
        """Create the formatter for the resolved format.

        Raises:
            InvalidFormatError: If the chosen format tag is unknown.
            FormatterConstructionError: If no formatter is registered.
        """
        if color_settings is None:
            color_settings = self.color_settings()
        return create_formatter(self.format(), color_settings)

    def max_severity(self) -> Severity:
        """Highest severity a violation may be reported with.

        Raises:
            RangeError: If the value is not a known severity.
        """
        return self._max_severity

    @cached_property
    def _max_severity(self) -> Severity:
        value = self.cli.max_severity
        if value is None and self.file_config is not None:
            value = self.file_config.max_severity
        if value is None:
            return DEFAULT_MAX_SEVERITY
        try:
            return Severity(value)
        except ValueError:
            accepted = "|".join(s.value for s in Severity)
            raise RangeError("max-severity", value, f"one of <{accepted}>") from None

    def construct_lengths(self) -> ConstructLengths:
        """Length limits, each taken from the CLI, the config file, or the default.

        Raises:
            RangeError: If a limit is not a non-negative integer.
        """
        return self._construct_lengths

    @cached_property
    def _construct_lengths(self) -> ConstructLengths:
        cli_lengths = dict(self.cli.lengths)
        file_lengths = dict(self.file_config.lengths) if self.file_config else {}
        values: dict[str, int] = {}
        for name in ConstructLengths.names():
            if cli_lengths.get(name) is not None:
                value = cli_lengths[name]
            elif file_lengths.get(name) is not None:
                value = file_lengths[name]
            else:
                continue
            values[name] = _check_length(name, value)
        return ConstructLengths(**values)

    def resolve(self) -> EffectiveConfiguration:
        """Resolve every setting at once.

        Raises:
            ConfigError: If any setting is invalid.
        """
        return EffectiveConfiguration(
            rules=self.enabled_rules(),
            files=self._files,
            format=self.format(),
            max_severity=self.max_severity(),
            construct_lengths=self.construct_lengths(),
            color_settings=self.color_settings(),
            show_rules=self.should_print_rules(),
            list_files=self.should_list_files(),
            debug=self.debug_flag_set(),
        )


def _check_length(name: str, value: Any) -> int:
    # bool is an int subclass but never a valid length
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise RangeError(name.replace("_", "-"), value, "a non-negative integer")
    return value
