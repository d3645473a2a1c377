"""Pydantic models for Unattend Validator configuration.

These models validate and type the JSON configuration file that controls
report output and console defaults.  The validation rules themselves are
fixed and live in ``unattend_validator.rules.constants``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MetaData(BaseModel):
    """Metadata about the tool and the answer file format."""

    tool: str = "Unattend Validator"
    target_format: str = "Windows unattend.xml"
    description: str = "Pre-deployment checks for Windows Setup / sysprep answer files"


class ReportConfig(BaseModel):
    """Persisted plain-text report settings."""

    default_filename: str = "unattend_validation_report.txt"
    title: str = "Windows Unattend.xml Validation Report"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    finding_time_format: str = "%H:%M:%S"


class ConsoleConfig(BaseModel):
    """Console output defaults."""

    detailed: bool = Field(
        default=False,
        description="List every finding individually instead of only the summary.",
    )


class ValidatorConfig(BaseModel):
    """Root configuration model."""

    metadata: MetaData = Field(default_factory=MetaData)
    report: ReportConfig = Field(default_factory=ReportConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
