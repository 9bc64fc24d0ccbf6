"""Tests for output formatters."""

import json

import pytest

from stitch.core.formats import Format
from stitch.core.types import AnalysisResult, ColorSettings, Location, Severity, Violation
from stitch.output import FormatterConstructionError, _FORMATTERS, create_formatter
from stitch.output.cc import CCFormatter
from stitch.output.html import HTMLFormatter
from stitch.output.json import JSONFormatter
from stitch.output.xcode import RESET, XcodeFormatter

NO_COLOR = ColorSettings(color=False)


@pytest.fixture
def sample_violations() -> list[Violation]:
    """Create sample violations for testing."""
    return [
        Violation(
            rule="max-line-length",
            location=Location(file="Sources/App.swift", line=12, column=121),
            severity=Severity.ERROR,
            message="Line is 130 characters long, limit is 120",
        ),
        Violation(
            rule="todo-syntax",
            location=Location(file="Sources/App.swift", line=3),
            severity=Severity.WARNING,
            message="TODO comment not in <TODO: comment> format",
        ),
    ]


@pytest.fixture
def sample_result(sample_violations: list[Violation]) -> AnalysisResult:
    """Create a sample analysis result."""
    return AnalysisResult(
        files=["Sources/App.swift", "Sources/Clean.swift"],
        violations=sample_violations,
    )


@pytest.fixture
def empty_result() -> AnalysisResult:
    """Create an empty analysis result."""
    return AnalysisResult(files=["Sources/Clean.swift"])


class TestXcodeFormatter:
    """Tests for XcodeFormatter."""

    def test_format_with_violations(self, sample_result: AnalysisResult) -> None:
        """Test formatting results with violations."""
        output = XcodeFormatter(NO_COLOR).format(sample_result)

        assert "Sources/App.swift:12:121: error: [max-line-length] Line is 130" in output
        assert "Sources/App.swift:3: warning: [todo-syntax]" in output
        assert "Analyzed 2 files, found 2 violations (1 errors, 1 warnings)." in output

    def test_violations_sorted_by_line(self, sample_result: AnalysisResult) -> None:
        """Test violations are printed in line order."""
        output = XcodeFormatter(NO_COLOR).format(sample_result)
        assert output.index(":3: warning") < output.index(":12:121: error")

    def test_format_empty_result(self, empty_result: AnalysisResult) -> None:
        """Test formatting empty results."""
        output = XcodeFormatter(NO_COLOR).format(empty_result)

        assert "Analyzing Sources/Clean.swift" in output
        assert "Analyzed 1 file, found 0 violations." in output

    def test_no_color(self, sample_result: AnalysisResult) -> None:
        """Test plain output contains no escape codes."""
        output = XcodeFormatter(NO_COLOR).format(sample_result)
        assert "\033[" not in output

    def test_color(self, sample_result: AnalysisResult) -> None:
        """Test colored output."""
        output = XcodeFormatter(ColorSettings(color=True)).format(sample_result)
        assert "\033[91merror" + RESET in output

    def test_inverted_color(self, sample_result: AnalysisResult) -> None:
        """Test the inverted palette."""
        output = XcodeFormatter(ColorSettings(color=True, invert=True)).format(sample_result)
        assert "\033[31merror" + RESET in output
        assert "\033[91m" not in output


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_format_produces_valid_json(self, sample_result: AnalysisResult) -> None:
        """Test that output is valid JSON."""
        data = json.loads(JSONFormatter().format(sample_result))

        assert "version" in data
        assert [f["path"] for f in data["files"]] == ["Sources/App.swift", "Sources/Clean.swift"]
        assert data["summary"]["violations"] == 2
        assert data["summary"]["analyzed"] == 2

    def test_violations_grouped_by_file(self, sample_result: AnalysisResult) -> None:
        """Test violations sit under their file, in line order."""
        data = json.loads(JSONFormatter().format(sample_result))
        app = data["files"][0]
        assert [v["rule"] for v in app["violations"]] == ["todo-syntax", "max-line-length"]
        assert app["violations"][1]["severity"] == "error"
        assert data["files"][1]["violations"] == []


class TestCCFormatter:
    """Tests for CCFormatter."""

    def test_issues_are_nul_separated(self, sample_result: AnalysisResult) -> None:
        """Test each issue ends with a NUL character."""
        output = CCFormatter().format(sample_result)
        chunks = output.split("\0")
        assert chunks[-1] == ""
        issues = [json.loads(chunk) for chunk in chunks[:-1]]
        assert len(issues) == 2

    def test_issue_fields(self, sample_result: AnalysisResult) -> None:
        """Test the Code Climate issue layout."""
        output = CCFormatter().format(sample_result)
        issue = json.loads(output.split("\0")[1])
        assert issue["type"] == "issue"
        assert issue["check_name"] == "max-line-length"
        assert issue["severity"] == "critical"
        assert issue["location"]["path"] == "Sources/App.swift"
        assert issue["location"]["positions"]["begin"] == {"line": 12, "column": 121}
        assert len(issue["fingerprint"]) == 32

    def test_empty(self, empty_result: AnalysisResult) -> None:
        """Test no violations give no output."""
        assert CCFormatter().format(empty_result) == ""


class TestHTMLFormatter:
    """Tests for HTMLFormatter."""

    def test_report(self, sample_result: AnalysisResult) -> None:
        """Test the HTML report content."""
        output = HTMLFormatter().format(sample_result)
        assert output.startswith("<!DOCTYPE html>")
        assert "<h2>Sources/App.swift</h2>" in output
        assert "12:121" in output
        assert "max-line-length" in output

    def test_escaping(self) -> None:
        """Test messages are HTML-escaped."""
        result = AnalysisResult(
            files=["a.swift"],
            violations=[
                Violation(
                    rule="angle-bracket-whitespace",
                    location=Location(file="a.swift", line=1),
                    severity=Severity.WARNING,
                    message="Whitespace inside <T>",
                )
            ],
        )
        output = HTMLFormatter().format(result)
        assert "&lt;T&gt;" in output


class TestCreateFormatter:
    """Tests for create_formatter."""

    def test_every_format_registered(self) -> None:
        """Test each format has a formatter with a matching name."""
        for fmt in Format:
            assert create_formatter(fmt, NO_COLOR).name == fmt.value

    def test_color_settings_passed(self) -> None:
        """Test color settings reach the formatter."""
        settings = ColorSettings(color=True, invert=True)
        assert create_formatter(Format.XCODE, settings).color_settings == settings

    def test_missing_registration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a format without a formatter raises FormatterConstructionError."""
        monkeypatch.delitem(_FORMATTERS, Format.HTML)
        with pytest.raises(FormatterConstructionError, match="html"):
            create_formatter(Format.HTML, NO_COLOR)
