"""Plain-text validation report.

Layout::

    <title>
    =======
    Generated: <timestamp>
    File: <source path>

    SUMMARY / ERRORS / WARNINGS / INFORMATION sections
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from unattend_validator.config.models import ReportConfig
from unattend_validator.domain.errors import ReportWriteError
from unattend_validator.domain.models.finding import Finding, ValidationResult
from unattend_validator.domain.ports.report_writer import ReportWriterPort

logger = logging.getLogger(__name__)


def _section(title: str, findings: list[Finding], time_format: str) -> list[str]:
    lines = [title, "-" * len(title)]
    if not findings:
        lines.append("  (none)")
    for f in findings:
        location = f"[{f.component or 'General'}]"
        if f.line is not None:
            location += f" (Line {f.line})"
        lines.append(f"  {location} {f.message}")
        lines.append(f"    Time: {f.timestamp.strftime(time_format)}")
    lines.append("")
    return lines


def render_report(
    result: ValidationResult,
    config: Optional[ReportConfig] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """Render *result* as the plain-text report document."""
    cfg = config or ReportConfig()
    generated = generated_at or datetime.now()

    lines = [
        cfg.title,
        "=" * len(cfg.title),
        f"Generated: {generated.strftime(cfg.timestamp_format)}",
        f"File: {result.file_path}",
        "",
        "SUMMARY",
        "-------",
        f"Overall Status: {result.status}",
        f"XML Well-Formed: {'Yes' if result.xml_well_formed else 'No'}",
        f"Schema Valid: {'Yes' if result.schema_valid else 'No'}",
        f"Errors: {result.error_count}",
        f"Warnings: {result.warning_count}",
        f"Information: {result.info_count}",
        "",
    ]
    lines.extend(_section("ERRORS", result.errors, cfg.finding_time_format))
    lines.extend(_section("WARNINGS", result.warnings, cfg.finding_time_format))
    lines.extend(_section("INFORMATION", result.infos, cfg.finding_time_format))
    return "\n".join(lines)


class TextReportWriter(ReportWriterPort):
    """Write the plain-text report as UTF-8, overwriting any existing file."""

    def __init__(self, config: Optional[ReportConfig] = None) -> None:
        self._config = config or ReportConfig()

    def write(self, result: ValidationResult, path: Path) -> Path:
        content = render_report(result, self._config)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ReportWriteError(f"Unable to write report to {path}: {exc}") from exc
        logger.info("Report written to %s", path)
        return path
