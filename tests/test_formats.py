"""Tests for format identifiers and format resolution."""

import pytest

from stitch.core.formats import DEFAULT_FORMAT, Format, InvalidFormatError, resolve_format


class TestFormat:
    """Tests for the Format enumeration."""

    def test_names(self):
        """Test all format tags in declaration order."""
        assert Format.names() == ["xcode", "json", "cc", "html"]

    def test_parse(self):
        """Test exact tags parse."""
        assert Format.parse("json") is Format.JSON
        assert Format.parse("cc") is Format.CC

    def test_parse_is_exact(self):
        """Test parsing does no case folding."""
        with pytest.raises(InvalidFormatError):
            Format.parse("JSON")

    def test_default_is_xcode(self):
        """Test the default format."""
        assert DEFAULT_FORMAT is Format.XCODE


class TestResolveFormat:
    """Tests for resolve_format precedence."""

    def test_cli_wins_over_file(self):
        """Test the CLI format wins."""
        assert resolve_format("json", "xcode") is Format.JSON

    def test_cli_enum_value(self):
        """Test a Format value from the CLI is used as is."""
        assert resolve_format(Format.HTML, "json") is Format.HTML

    def test_file_format(self):
        """Test the file format applies without a CLI format."""
        assert resolve_format(None, "html") is Format.HTML

    def test_default(self):
        """Test the default applies when nothing is given."""
        assert resolve_format(None, None) is Format.XCODE

    def test_empty_file_format_is_absent(self):
        """Test an empty file format falls back to the default."""
        assert resolve_format(None, "") is Format.XCODE

    def test_invalid_file_format(self):
        """Test an invalid file format names the value and the options."""
        with pytest.raises(InvalidFormatError) as exc_info:
            resolve_format(None, "bogus")
        assert exc_info.value.value == "bogus"
        assert exc_info.value.accepted == ("xcode", "json", "cc", "html")
        assert "bogus" in str(exc_info.value)
        assert "xcode|json|cc|html" in str(exc_info.value)

    def test_invalid_cli_format(self):
        """Test an invalid CLI format does not fall back to the file."""
        with pytest.raises(InvalidFormatError, match="yaml"):
            resolve_format("yaml", "json")

    def test_invalid_file_format_ignored_when_cli_given(self):
        """Test the file format is not parsed when the CLI wins."""
        assert resolve_format("cc", "bogus") is Format.CC
