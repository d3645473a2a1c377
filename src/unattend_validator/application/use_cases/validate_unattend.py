"""Use Case: Validate an unattend answer file.

Runs the rule engine, then persists the report through an injected
ReportWriterPort.  Never terminates the process; the caller decides what
to do with ``overall_valid``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from unattend_validator.domain.models.finding import ValidationResult
from unattend_validator.domain.ports.report_writer import ReportWriterPort
from unattend_validator.validators.checker import UnattendChecker


class ValidateUnattendUseCase:
    """Orchestrate validation and report generation."""

    def __init__(self, report_writer: ReportWriterPort, default_report: Path) -> None:
        self._writer = report_writer
        self._default_report = default_report

    def execute(
        self,
        file_path: Path,
        report_path: Optional[Path] = None,
        schema: Optional[Path] = None,
    ) -> tuple[ValidationResult, Path]:
        """Validate *file_path* and write the report.

        Args:
            file_path: The unattend.xml file to validate.
            report_path: Destination of the report; the configured default
                filename when omitted.
            schema: Optional XSD to validate the document against.

        Returns:
            The validation result and the path of the written report.

        Raises:
            ConfigurationError: If *schema* cannot be loaded.
            ReportWriteError: If the report cannot be written.
        """
        result = UnattendChecker(file_path, schema=schema).check()
        written = self._writer.write(result, report_path or self._default_report)
        return result, written
