"""JSON output formatter for Stitch."""

import json

from stitch import __version__
from stitch.core.types import AnalysisResult
from stitch.output.base import Formatter


class JSONFormatter(Formatter):
    """JSON formatter for machine-readable output."""

    @property
    def name(self) -> str:
        return "json"

    def format(self, result: AnalysisResult) -> str:
        """Format analysis results as JSON, one entry per analyzed file."""
        by_file: dict[str, list[dict]] = {path: [] for path in result.files}
        for violation in result.violations:
            by_file.setdefault(violation.location.file, []).append(violation.to_dict())

        output = {
            "version": __version__,
            "files": [
                {
                    "path": path,
                    "parsed": True,
                    "violations": sorted(
                        violations,
                        key=lambda v: (v["location"]["line"], v["location"]["column"] or 0),
                    ),
                }
                for path, violations in sorted(by_file.items())
            ],
            "summary": result.summary,
        }

        return json.dumps(output, indent=2)
