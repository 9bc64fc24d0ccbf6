"""Core data types for Stitch."""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional


class Severity(Enum):
    """Severity levels for violations."""

    ERROR = "error"
    WARNING = "warning"

    def __lt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        order = [Severity.WARNING, Severity.ERROR]
        return order.index(self) < order.index(other)

    def __le__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return not self < other

    def cap(self, maximum: "Severity") -> "Severity":
        """Return this severity, lowered to ``maximum`` if it exceeds it."""
        return maximum if self > maximum else self


@dataclass(frozen=True)
class ColorSettings:
    """Terminal color preferences taken from the command line."""

    color: bool = True
    invert: bool = False


@dataclass(frozen=True)
class ConstructLengths:
    """Length limits for source constructs. Zero means no limit."""

    max_class_length: int = 0
    max_closure_length: int = 0
    max_file_length: int = 0
    max_function_length: int = 0
    max_line_length: int = 0
    max_name_length: int = 0
    max_struct_length: int = 0
    min_name_length: int = 0

    @classmethod
    def names(cls) -> list[str]:
        """Names of all limits, in declaration order."""
        return [f.name for f in fields(cls)]


@dataclass(frozen=True)
class Location:
    """Location of a violation in source code."""

    file: str
    line: int
    column: Optional[int] = None

    def __str__(self) -> str:
        if self.column is not None:
            return f"{self.file}:{self.line}:{self.column}"
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class Violation:
    """A single rule violation reported by the analyzer."""

    rule: str
    location: Location
    severity: Severity
    message: str

    def to_dict(self) -> dict:
        """Convert violation to dictionary."""
        return {
            "rule": self.rule,
            "location": {
                "file": self.location.file,
                "line": self.location.line,
                "column": self.location.column,
            },
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass
class AnalysisResult:
    """Result of analyzing a set of files."""

    files: list[str] = field(default_factory=list)
    violations: list[Violation] = field(default_factory=list)

    @property
    def summary(self) -> dict:
        """Generate summary statistics."""
        by_severity: dict[str, int] = {}
        files_with_violations = set()

        for violation in self.violations:
            sev = violation.severity.value
            by_severity[sev] = by_severity.get(sev, 0) + 1
            files_with_violations.add(violation.location.file)

        return {
            "analyzed": len(self.files),
            "violations": len(self.violations),
            "errors": by_severity.get(Severity.ERROR.value, 0),
            "warnings": by_severity.get(Severity.WARNING.value, 0),
            "files_with_violations": len(files_with_violations),
        }
