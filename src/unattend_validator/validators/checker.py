"""Rule engine: run every unattend check over one answer file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from lxml import etree

from unattend_validator.domain.errors import ConfigurationError, UnattendParseError
from unattend_validator.domain.models.finding import Finding, ValidationResult, error, info
from unattend_validator.validators.components import check_components
from unattend_validator.validators.first_logon import check_first_logon_commands
from unattend_validator.validators.loader import load_document
from unattend_validator.validators.structure import check_structure

logger = logging.getLogger(__name__)

Rule = Callable[[etree._ElementTree], list[Finding]]

# Order matters: findings are reported in the order the rules run
RULES: tuple[Rule, ...] = (
    check_structure,
    check_components,
    check_first_logon_commands,
)


def load_schema(schema_path: Path) -> etree.XMLSchema:
    """Load an XSD file, raising ``ConfigurationError`` if it is unusable."""
    try:
        return etree.XMLSchema(etree.parse(str(schema_path)))
    except (OSError, etree.XMLSyntaxError, etree.XMLSchemaParseError) as exc:
        raise ConfigurationError(f"Invalid schema {schema_path}: {exc}") from exc


class UnattendChecker:
    """Validate an unattend.xml file and return a ValidationResult."""

    def __init__(self, file_path: Path | str, schema: Optional[Path] = None) -> None:
        self.file_path = Path(file_path)
        self._schema = load_schema(Path(schema)) if schema is not None else None

    def check(self) -> ValidationResult:
        """Run all checks.  A file that fails to load skips every rule."""
        result = ValidationResult(file_path=str(self.file_path))

        try:
            doc = load_document(self.file_path)
        except UnattendParseError as exc:
            result.add(error(str(exc), line=exc.line))
            result.xml_well_formed = False
            return result

        result.xml_well_formed = True
        result.add(info("XML syntax validation passed"))

        for rule in RULES:
            result.extend(rule(doc))

        if self._schema is not None:
            result.schema_valid = _check_schema(self._schema, doc, result)

        logger.info(
            "Validated %s: %s (%d errors, %d warnings, %d infos)",
            self.file_path,
            result.status,
            result.error_count,
            result.warning_count,
            result.info_count,
        )
        return result


def _check_schema(
    schema: etree.XMLSchema, doc: etree._ElementTree, result: ValidationResult
) -> bool:
    if schema.validate(doc):
        result.add(info("XML schema validation passed"))
        return True
    for entry in schema.error_log:
        result.add(error(f"Schema validation failed: {entry.message}", line=entry.line))
    return False
