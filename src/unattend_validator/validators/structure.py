"""Structural checks for the unattend skeleton."""

from __future__ import annotations

import logging

from lxml import etree

from unattend_validator.domain.models.finding import Finding, error, info, warning
from unattend_validator.rules.constants import (
    REQUIRED_PASSES,
    ROOT_ELEMENT,
    SETTINGS_ELEMENT,
    UNATTEND_NAMESPACE,
)
from unattend_validator.validators.queries import local_name, settings_blocks

logger = logging.getLogger(__name__)


def check_structure(doc: etree._ElementTree) -> list[Finding]:
    """Check the root element, its namespace and the required settings passes.

    A wrong namespace or a missing pass is a warning, not an error.
    """
    findings: list[Finding] = []
    root = doc.getroot()

    if local_name(root) != ROOT_ELEMENT:
        findings.append(
            error(
                f"Missing root element '{ROOT_ELEMENT}' (found '{local_name(root)}')",
                component=ROOT_ELEMENT,
                line=root.sourceline,
            )
        )

    namespace = etree.QName(root).namespace
    if namespace != UNATTEND_NAMESPACE:
        findings.append(
            warning(
                f"Unexpected namespace '{namespace or 'none'}', "
                f"expected '{UNATTEND_NAMESPACE}'",
                component=ROOT_ELEMENT,
                line=root.sourceline,
            )
        )

    passes: dict[str, int | None] = {}
    for block in settings_blocks(root):
        name = block.get("pass")
        if name is not None and name not in passes:
            passes[name] = block.sourceline

    for required in REQUIRED_PASSES:
        if required in passes:
            findings.append(
                info(
                    f"Found required pass: {required}",
                    component=SETTINGS_ELEMENT,
                    line=passes[required],
                )
            )
        else:
            findings.append(
                warning(f"Missing recommended pass: {required}", component=SETTINGS_ELEMENT)
            )

    logger.debug("Structure check produced %d finding(s)", len(findings))
    return findings
