"""Domain errors: custom exceptions for Unattend Validator.

These exceptions are raised by the loader, checker and report writer and
caught by the application or presentation layers.
"""

from __future__ import annotations


class UnattendValidatorError(Exception):
    """Base exception for all Unattend Validator errors."""


class UnattendParseError(UnattendValidatorError):
    """Raised when the answer file cannot be read or is not well-formed XML."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class ReportWriteError(UnattendValidatorError):
    """Raised when the validation report cannot be written."""


class ConfigurationError(UnattendValidatorError):
    """Raised when configuration or a schema file is invalid or missing."""
