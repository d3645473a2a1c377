"""Domain models: public API."""

from unattend_validator.domain.models.enums import ComponentKind, Severity
from unattend_validator.domain.models.finding import Finding, ValidationResult

__all__ = [
    "ComponentKind",
    "Finding",
    "Severity",
    "ValidationResult",
]
