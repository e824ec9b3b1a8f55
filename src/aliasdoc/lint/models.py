"""Lint result models.

Findings and reports are pydantic models so the CLI can emit them as JSON
without hand-written serializers.
"""

from __future__ import annotations

from collections import Counter
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Severity(IntEnum):
    """Finding severity, ordered so thresholds compare with ``>=``."""

    INFO = 10
    WARNING = 20
    ERROR = 30

    @classmethod
    def parse(cls, value: str | int | Severity) -> Severity:
        """Accept a Severity, its value, or a case-insensitive name."""
        if isinstance(value, Severity):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[value.strip().upper()]
        except KeyError:
            names = ", ".join(s.name.lower() for s in cls)
            raise ValueError(f"Unknown severity {value!r} (expected one of: {names})") from None

    @property
    def label(self) -> str:
        return self.name.lower()


class Finding(BaseModel):
    """One problem found in a document."""

    model_config = ConfigDict(frozen=True)

    rule: str
    """Rule code, e.g. ``AD101``."""

    name: str
    """Rule name, e.g. ``unresolved-alias``."""

    severity: Severity
    message: str
    path: str = "<string>"
    line: int = 0

    @field_validator("severity", mode="before")
    @classmethod
    def _parse_severity(cls, value: Any) -> Severity:
        return Severity.parse(value)

    @field_serializer("severity")
    def _serialize_severity(self, severity: Severity) -> str:
        return severity.label

    def format(self) -> str:
        """``path:line: CODE [severity] message``."""
        return f"{self.path}:{self.line}: {self.rule} [{self.severity.label}] {self.message}"


class LintReport(BaseModel):
    """All findings for one document."""

    path: str
    findings: list[Finding] = Field(default_factory=list)

    def sorted_findings(self) -> list[Finding]:
        return sorted(self.findings, key=lambda f: (f.line, f.rule))

    def counts(self) -> dict[str, int]:
        """Findings per severity label (every label present, possibly 0)."""
        counter = Counter(f.severity.label for f in self.findings)
        return {severity.label: counter.get(severity.label, 0) for severity in Severity}

    def has_findings_at(self, threshold: Severity) -> bool:
        """True if any finding is at or above threshold."""
        return any(f.severity >= threshold for f in self.findings)

    def has_errors(self, threshold: Severity = Severity.ERROR) -> bool:
        return self.has_findings_at(threshold)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable dictionary with sorted findings and counts."""
        return {
            "path": self.path,
            "findings": [f.model_dump(mode="json") for f in self.sorted_findings()],
            "counts": self.counts(),
        }
