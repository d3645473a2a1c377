"""Informational scan of first logon commands."""

from __future__ import annotations

import logging

from lxml import etree

from unattend_validator.domain.models.finding import Finding, info
from unattend_validator.rules.constants import (
    COMMAND_LINE,
    FIRST_LOGON_PASS,
    RDP_COMMAND_MARKERS,
    REMOTE_MANAGEMENT_MARKERS,
    SYNCHRONOUS_COMMAND,
)
from unattend_validator.validators.queries import child_text, descendants, settings_blocks

logger = logging.getLogger(__name__)


def check_first_logon_commands(doc: etree._ElementTree) -> list[Finding]:
    """Report what the first logon commands do.  Never produces errors or warnings."""
    blocks = [b for b in settings_blocks(doc.getroot()) if b.get("pass") == FIRST_LOGON_PASS]
    if not blocks:
        return []

    commands: list[etree._Element] = []
    for block in blocks:
        commands.extend(descendants(block, SYNCHRONOUS_COMMAND))
    if not commands:
        return []

    findings = [
        info(
            f"Found {len(commands)} first logon command(s)",
            component=FIRST_LOGON_PASS,
            line=blocks[0].sourceline,
        )
    ]
    command_lines = [child_text(c, COMMAND_LINE) or "" for c in commands]

    if any(marker in line for line in command_lines for marker in RDP_COMMAND_MARKERS):
        findings.append(info("RDP enabling commands found", component=FIRST_LOGON_PASS))
    if any(marker in line for line in command_lines for marker in REMOTE_MANAGEMENT_MARKERS):
        findings.append(
            info("SSM/WinRM remote management commands found", component=FIRST_LOGON_PASS)
        )

    logger.debug("First logon scan found %d command(s)", len(commands))
    return findings
