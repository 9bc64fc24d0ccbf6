"""Xcode-compatible output formatter for Stitch.

Each violation is printed as ``file:line:column: severity: [rule] message``
so that Xcode can show it inline when Stitch runs as a build phase.
"""

from stitch.core.types import AnalysisResult, ColorSettings, Severity, Violation
from stitch.output.base import Formatter

# ANSI color codes
COLORS = {
    Severity.ERROR: "\033[91m",  # Red
    Severity.WARNING: "\033[93m",  # Yellow
}
INVERTED_COLORS = {
    Severity.ERROR: "\033[31m",  # Dark red
    Severity.WARNING: "\033[33m",  # Dark yellow
}
RESET = "\033[0m"
BOLD = "\033[1m"
HEADER = "\033[97m"  # White
INVERTED_HEADER = "\033[30m"  # Black


class XcodeFormatter(Formatter):
    """Human-readable formatter understood by Xcode."""

    def __init__(self, color_settings: ColorSettings = ColorSettings()) -> None:
        super().__init__(color_settings)
        if color_settings.invert:
            self._palette = INVERTED_COLORS
            self._header = INVERTED_HEADER
        else:
            self._palette = COLORS
            self._header = HEADER

    @property
    def name(self) -> str:
        return "xcode"

    def format(self, result: AnalysisResult) -> str:
        """Format analysis results for the terminal and Xcode."""
        lines: list[str] = []

        by_file: dict[str, list[Violation]] = {path: [] for path in result.files}
        for violation in result.violations:
            by_file.setdefault(violation.location.file, []).append(violation)

        for path in sorted(by_file.keys()):
            violations = sorted(
                by_file[path],
                key=lambda v: (v.location.line, v.location.column or 0),
            )
            lines.append(self._paint(f"{BOLD}{self._header}", f"* Analyzing {path}"))
            for violation in violations:
                lines.append(self._format_violation(violation))
            lines.append("")

        lines.append(self._format_summary(result))
        return "\n".join(lines)

    def _format_violation(self, violation: Violation) -> str:
        """Format a single violation."""
        severity = self._paint(
            self._palette.get(violation.severity, ""), violation.severity.value
        )
        return f"{violation.location}: {severity}: [{violation.rule}] {violation.message}"

    def _format_summary(self, result: AnalysisResult) -> str:
        summary = result.summary
        analyzed = summary["analyzed"]
        text = (
            f"Analyzed {analyzed} file{'s' if analyzed != 1 else ''}, "
            f"found {summary['violations']} violation{'s' if summary['violations'] != 1 else ''}"
        )
        if summary["violations"]:
            text += f" ({summary['errors']} errors, {summary['warnings']} warnings)"
        return self._paint(BOLD, text + ".")

    def _paint(self, code: str, text: str) -> str:
        if not self.color_settings.color or not code:
            return text
        return f"{code}{text}{RESET}"
