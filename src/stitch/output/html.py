"""HTML output formatter for Stitch."""

import html

from stitch import __version__
from stitch.core.types import AnalysisResult, Severity, Violation
from stitch.output.base import Formatter

STYLE = """\
body { font-family: -apple-system, Helvetica, sans-serif; margin: 2em; }
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #ddd; padding: 4px 8px; text-align: left; }
.error { color: #c0392b; }
.warning { color: #d68910; }
"""


class HTMLFormatter(Formatter):
    """Standalone HTML report."""

    @property
    def name(self) -> str:
        return "html"

    def format(self, result: AnalysisResult) -> str:
        """Format analysis results as an HTML page."""
        summary = result.summary
        lines: list[str] = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            "<title>Stitch Report</title>",
            f"<style>\n{STYLE}</style>",
            "</head>",
            "<body>",
            "<h1>Stitch Report</h1>",
            f"<p>Stitch {html.escape(__version__)}: analyzed {summary['analyzed']} file(s), "
            f"found {summary['violations']} violation(s) "
            f"({summary['errors']} errors, {summary['warnings']} warnings).</p>",
        ]

        # Group by file
        by_file: dict[str, list[Violation]] = {}
        for violation in result.violations:
            by_file.setdefault(violation.location.file, []).append(violation)

        for path in sorted(by_file.keys()):
            lines.append(f"<h2>{html.escape(path)}</h2>")
            lines.append("<table>")
            lines.append("<tr><th>Line</th><th>Severity</th><th>Rule</th><th>Message</th></tr>")
            for violation in sorted(by_file[path], key=lambda v: (v.location.line, v.location.column or 0)):
                lines.append(self._format_row(violation))
            lines.append("</table>")

        lines.extend(["</body>", "</html>"])
        return "\n".join(lines)

    def _format_row(self, violation: Violation) -> str:
        """Format a single violation as a table row."""
        loc = violation.location
        position = f"{loc.line}:{loc.column}" if loc.column is not None else str(loc.line)
        css = "error" if violation.severity == Severity.ERROR else "warning"
        return (
            f"<tr><td>{position}</td>"
            f'<td class="{css}">{violation.severity.value}</td>'
            f"<td>{html.escape(violation.rule)}</td>"
            f"<td>{html.escape(violation.message)}</td></tr>"
        )
