"""Report writers."""

from unattend_validator.infrastructure.reporting.text_report import TextReportWriter, render_report

__all__ = ["TextReportWriter", "render_report"]
