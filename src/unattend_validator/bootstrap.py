"""Composition Root: Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from unattend_validator.application.use_cases.validate_unattend import ValidateUnattendUseCase
from unattend_validator.config import ValidatorConfig, get_config, load_config
from unattend_validator.domain.ports.report_writer import ReportWriterPort
from unattend_validator.infrastructure.reporting.text_report import TextReportWriter


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container()
        result, report = container.validate_unattend().execute(Path("unattend.xml"))
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        self._config = load_config(Path(config_path)) if config_path else get_config()

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    def report_writer(self) -> ReportWriterPort:
        return TextReportWriter(self._config.report)

    def validate_unattend(self) -> ValidateUnattendUseCase:
        return ValidateUnattendUseCase(
            report_writer=self.report_writer(),
            default_report=Path(self._config.report.default_filename),
        )
