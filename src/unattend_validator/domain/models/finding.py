"""Finding and ValidationResult: the validation result model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable

from unattend_validator.domain.models.enums import Severity


@dataclass(frozen=True)
class Finding:
    """A single validation observation."""

    message: str
    severity: Severity
    component: str | None = None
    line: int | None = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def icon(self) -> str:
        """Emoji marker for the severity, shown next to the finding in tables."""
        if self.severity is Severity.ERROR:
            return "❌"
        return "⚠️" if self.severity is Severity.WARNING else "ℹ️"

    def same_as(self, other: Finding) -> bool:
        """Compare two findings ignoring their timestamps."""
        return (self.message, self.severity, self.component, self.line) == (
            other.message,
            other.severity,
            other.component,
            other.line,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "severity": self.severity.value,
            "component": self.component,
            "line": self.line,
            "timestamp": self.timestamp.isoformat(),
        }


def error(message: str, component: str | None = None, line: int | None = None) -> Finding:
    return Finding(message=message, severity=Severity.ERROR, component=component, line=line)


def warning(message: str, component: str | None = None, line: int | None = None) -> Finding:
    return Finding(message=message, severity=Severity.WARNING, component=component, line=line)


def info(message: str, component: str | None = None, line: int | None = None) -> Finding:
    return Finding(message=message, severity=Severity.INFO, component=component, line=line)


@dataclass
class ValidationResult:
    """Aggregated findings of one validation pass over an unattend file.

    Findings are only ever appended.  ``overall_valid`` is derived from the
    error list, so once an error has been recorded the result stays FAIL.
    """

    file_path: str
    errors: list[Finding] = field(default_factory=list)
    warnings: list[Finding] = field(default_factory=list)
    infos: list[Finding] = field(default_factory=list)
    xml_well_formed: bool = False
    schema_valid: bool = False

    def add(self, finding: Finding) -> None:
        """Append a finding to the list matching its severity."""
        if finding.severity is Severity.ERROR:
            self.errors.append(finding)
        elif finding.severity is Severity.WARNING:
            self.warnings.append(finding)
        else:
            self.infos.append(finding)

    def extend(self, findings: Iterable[Finding]) -> None:
        for finding in findings:
            self.add(finding)

    @property
    def overall_valid(self) -> bool:
        return not self.errors

    @property
    def status(self) -> str:
        return "PASS" if self.overall_valid else "FAIL"

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def info_count(self) -> int:
        return len(self.infos)

    @property
    def findings(self) -> list[Finding]:
        """All findings: errors, then warnings, then infos."""
        return [*self.errors, *self.warnings, *self.infos]

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "overall_valid": self.overall_valid,
            "xml_well_formed": self.xml_well_formed,
            "schema_valid": self.schema_valid,
            "summary": {
                "errors": self.error_count,
                "warnings": self.warning_count,
                "infos": self.info_count,
            },
            "errors": [f.to_dict() for f in self.errors],
            "warnings": [f.to_dict() for f in self.warnings],
            "infos": [f.to_dict() for f in self.infos],
        }
