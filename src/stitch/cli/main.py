"""Stitch CLI entry point."""

import sys
from typing import Callable, Optional

import click

from stitch import __version__
from stitch.core.config import CLIOptions, ConfigError, load_config
from stitch.core.configuration import Configuration, EffectiveConfiguration
from stitch.core.discovery import get_src_root
from stitch.core.types import AnalysisResult, ConstructLengths, Severity, Violation

# Receives the resolved configuration and returns the violations found
Analyzer = Callable[[EffectiveConfiguration], list[Violation]]


def _length_options(func: Callable) -> Callable:
    for name in reversed(ConstructLengths.names()):
        func = click.option(
            f"--{name.replace('_', '-')}",
            name,
            type=int,
            default=None,
            metavar="N",
            help=f"Limit for {name.replace('_', ' ')} (0 disables).",
        )(func)
    return func


@click.command(add_help_option=False)
@click.argument("paths", nargs=-1, type=str)
@click.option("-h", "--help", "show_help", is_flag=True, help="Print this help message.")
@click.option("-v", "--version", "show_version", is_flag=True, help="Print the version.")
@click.option(
    "--only",
    type=str,
    default=None,
    metavar="RULES",
    help="Run only these comma-separated rules.",
)
@click.option(
    "--except",
    "except_",
    type=str,
    default=None,
    metavar="RULES",
    help="Run all rules except these comma-separated rules.",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=str,
    default=None,
    help="Output format (default: xcode).",
)
@click.option(
    "--max-severity",
    type=str,
    default=None,
    help="Highest severity to report violations with: error or warning (default: warning).",
)
@_length_options
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Config file path (default: .stitch.yml).",
)
@click.option("--show-rules", is_flag=True, help="Print the enabled rules and exit.")
@click.option("-l", "--list-files", is_flag=True, help="Print the files to analyze and exit.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option("--invert-color", is_flag=True, help="Invert colors for light terminal themes.")
@click.option("-d", "--debug", is_flag=True, help="Print the resolved settings to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    paths: tuple[str, ...],
    show_help: bool,
    show_version: bool,
    only: Optional[str],
    except_: Optional[str],
    output_format: Optional[str],
    max_severity: Optional[str],
    config_path: Optional[str],
    show_rules: bool,
    list_files: bool,
    no_color: bool,
    invert_color: bool,
    debug: bool,
    **lengths: Optional[int],
) -> None:
    """Stitch - style checking for Swift sources.

    PATHS may be Swift files or directories. Without PATHS, files are found
    through the .stitch.yml include/exclude lists or the SRCROOT directory.
    """
    options = CLIOptions(
        paths=paths,
        only=_split_rules(only),
        except_=_split_rules(except_),
        format=output_format,
        max_severity=max_severity,
        lengths=tuple((name, value) for name, value in lengths.items() if value is not None),
        config_path=config_path,
        help=show_help,
        version=show_version,
        show_rules=show_rules,
        list_files=list_files,
        color=not no_color,
        invert_color=invert_color,
        debug=debug,
    )

    try:
        file_config = load_config(config_path, start_path=get_src_root())
        configuration = Configuration(options, file_config, notify=click.echo)
        exit_code = run(configuration, ctx)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if exit_code:
        sys.exit(exit_code)


def run(
    configuration: Configuration,
    ctx: Optional[click.Context] = None,
    analyzer: Optional[Analyzer] = None,
) -> int:
    """Drive one invocation from a configuration.

    Returns:
        Process exit code.

    Raises:
        ConfigError: If any setting is invalid.
    """
    if configuration.should_print_help():
        click.echo(ctx.get_help() if ctx is not None else cli.get_help(click.Context(cli)))
        return 0

    if configuration.should_print_version():
        click.echo(f"stitch, version {__version__}")
        return 0

    if configuration.should_print_rules():
        for rule in sorted(configuration.enabled_rules(), key=lambda r: r.value):
            click.echo(rule.value)
            click.echo(f"    {rule.description}")
        return 0

    if configuration.should_list_files():
        for path in configuration.files_to_analyze():
            click.echo(path)
        return 0

    settings = configuration.resolve()
    if settings.debug:
        _print_settings(settings)

    violations = analyzer(settings) if analyzer else []
    violations = [
        Violation(
            rule=v.rule,
            location=v.location,
            severity=v.severity.cap(settings.max_severity),
            message=v.message,
        )
        for v in violations
    ]
    result = AnalysisResult(files=list(settings.files), violations=violations)

    formatter = configuration.formatter(settings.color_settings)
    click.echo(formatter.format(result))

    if any(v.severity == Severity.ERROR for v in violations):
        return 1
    return 0


def _split_rules(value: Optional[str]) -> Optional[frozenset[str]]:
    """Split a comma-separated rule list, ignoring blanks."""
    if value is None:
        return None
    names = frozenset(name.strip() for name in value.split(",") if name.strip())
    return names or None


def _print_settings(settings: EffectiveConfiguration) -> None:
    """Echo resolved settings to stderr."""
    click.echo(f"format: {settings.format.value}", err=True)
    click.echo(f"max severity: {settings.max_severity.value}", err=True)
    click.echo(f"rules ({len(settings.rules)}): {', '.join(sorted(r.value for r in settings.rules))}", err=True)
    click.echo(f"files ({len(settings.files)}):", err=True)
    for path in settings.files:
        click.echo(f"  {path}", err=True)
    for name in ConstructLengths.names():
        click.echo(f"{name.replace('_', '-')}: {getattr(settings.construct_lengths, name)}", err=True)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
