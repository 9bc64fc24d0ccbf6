"""Code Climate output formatter for Stitch.

Issues follow the Code Climate engine specification: one JSON object per
violation, each terminated by a NUL character.
"""

import hashlib
import json
from typing import Any

from stitch.core.types import AnalysisResult, Severity, Violation
from stitch.output.base import Formatter

# Map Stitch severity to Code Climate severity
CC_SEVERITIES = {
    Severity.ERROR: "critical",
    Severity.WARNING: "minor",
}


class CCFormatter(Formatter):
    """Code Climate formatter for CI integration."""

    @property
    def name(self) -> str:
        return "cc"

    def format(self, result: AnalysisResult) -> str:
        """Format analysis results as NUL-separated Code Climate issues."""
        violations = sorted(
            result.violations,
            key=lambda v: (v.location.file, v.location.line, v.location.column or 0),
        )
        return "".join(
            json.dumps(self._build_issue(v), sort_keys=True) + "\0" for v in violations
        )

    def _build_issue(self, violation: Violation) -> dict[str, Any]:
        loc = violation.location
        position: dict[str, Any] = {"line": loc.line}
        if loc.column is not None:
            position["column"] = loc.column

        return {
            "type": "issue",
            "check_name": violation.rule,
            "description": violation.message,
            "categories": ["Style"],
            "severity": CC_SEVERITIES.get(violation.severity, "minor"),
            "location": {
                "path": loc.file,
                "positions": {"begin": position, "end": position},
            },
            "fingerprint": self._fingerprint(violation),
        }

    def _fingerprint(self, violation: Violation) -> str:
        key = f"{violation.location}:{violation.rule}:{violation.message}"
        return hashlib.md5(key.encode("utf-8")).hexdigest()
