"""Port: report writer, persists a validation result."""

from abc import ABC, abstractmethod
from pathlib import Path

from unattend_validator.domain.models.finding import ValidationResult


class ReportWriterPort(ABC):
    """Contract for writing a validation report to a file."""

    @abstractmethod
    def write(self, result: ValidationResult, path: Path) -> Path:
        """Write *result* to *path* (overwriting it) and return the path written."""
        ...
