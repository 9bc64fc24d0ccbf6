"""Output formatters for Stitch."""

from typing import Callable

from stitch.core.config import ConfigError
from stitch.core.formats import Format
from stitch.core.types import ColorSettings
from stitch.output.base import Formatter
from stitch.output.cc import CCFormatter
from stitch.output.html import HTMLFormatter
from stitch.output.json import JSONFormatter
from stitch.output.xcode import XcodeFormatter


class FormatterConstructionError(ConfigError):
    """No formatter is registered for a resolved format."""

    pass


_FORMATTERS: dict[Format, Callable[[ColorSettings], Formatter]] = {
    Format.XCODE: XcodeFormatter,
    Format.JSON: JSONFormatter,
    Format.CC: CCFormatter,
    Format.HTML: HTMLFormatter,
}


def create_formatter(fmt: Format, color_settings: ColorSettings = ColorSettings()) -> Formatter:
    """Create the formatter for a format.

    Args:
        fmt: Resolved output format.
        color_settings: Command-line color preferences.

    Returns:
        Formatter instance.

    Raises:
        FormatterConstructionError: If no formatter is registered for ``fmt``.
    """
    factory = _FORMATTERS.get(fmt)
    if factory is None:
        raise FormatterConstructionError(f"Formatter was not successfully created: no formatter for {fmt!r}")
    return factory(color_settings)


__all__ = [
    "Formatter",
    "FormatterConstructionError",
    "XcodeFormatter",
    "JSONFormatter",
    "CCFormatter",
    "HTMLFormatter",
    "create_formatter",
]
