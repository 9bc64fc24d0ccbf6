"""Output format identifiers and format resolution."""

from enum import Enum
from typing import Optional, Union

from stitch.core.config import ConfigError


class InvalidFormatError(ConfigError):
    """A format tag does not name a supported output format."""

    def __init__(self, value: str, accepted: list[str]) -> None:
        self.value = value
        self.accepted = tuple(accepted)
        super().__init__(
            f"Invalid format: {value!r}. Options are <{'|'.join(self.accepted)}>."
        )


class Format(Enum):
    """Supported output formats."""

    XCODE = "xcode"
    JSON = "json"
    CC = "cc"
    HTML = "html"

    @classmethod
    def names(cls) -> list[str]:
        """Get all format tags."""
        return [fmt.value for fmt in cls]

    @classmethod
    def parse(cls, value: str) -> "Format":
        """Parse an exact format tag.

        Raises:
            InvalidFormatError: If ``value`` matches no tag.
        """
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise InvalidFormatError(value, cls.names())


DEFAULT_FORMAT = Format.XCODE


def resolve_format(
    cli_format: Optional[Union[Format, str]],
    file_format: Optional[str],
) -> Format:
    """Pick the output format.

    A format given on the command line wins. Otherwise a non-empty format
    from the config file is used, and the default applies only when
    neither is given.

    Raises:
        InvalidFormatError: If the chosen value is not a known tag.
    """
    if cli_format is not None:
        if isinstance(cli_format, Format):
            return cli_format
        return Format.parse(cli_format)

    if file_format:
        return Format.parse(file_format)

    return DEFAULT_FORMAT
