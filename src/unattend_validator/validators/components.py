"""Component checks: identity attributes plus Shell-Setup, RDP and firewall rules."""

from __future__ import annotations

import logging

from lxml import etree

from unattend_validator.domain.models.enums import ComponentKind
from unattend_validator.domain.models.finding import Finding, error, info, warning
from unattend_validator.rules.constants import (
    ADMINISTRATOR_PASSWORD,
    AUTO_LOGON,
    DENY_TS_CONNECTIONS,
    ENABLED,
    FALSE_TOKEN,
    FIREWALL_PROFILE_FLAGS,
    PASSWORD,
    PLAIN_TEXT,
    REQUIRED_COMPONENT_ATTRIBUTES,
    TRUE_TOKEN,
    USERNAME,
    VALUE,
)
from unattend_validator.validators.queries import (
    child_text,
    children,
    components,
    first_descendant,
)

logger = logging.getLogger(__name__)


def check_components(doc: etree._ElementTree) -> list[Finding]:
    """Check every component in every settings pass."""
    findings: list[Finding] = []
    for component in components(doc.getroot()):
        findings.extend(check_identity(component))
        findings.extend(check_component_specific(component))
    logger.debug("Component checks produced %d finding(s)", len(findings))
    return findings


def check_identity(component: etree._Element) -> list[Finding]:
    """A component must declare processorArchitecture and publicKeyToken."""
    name = component.get("name")
    label = name or "(unnamed)"
    findings: list[Finding] = []
    for attribute in REQUIRED_COMPONENT_ATTRIBUTES:
        if not component.get(attribute):
            findings.append(
                error(
                    f"Component '{label}' missing {attribute} attribute",
                    component=name,
                    line=component.sourceline,
                )
            )
    return findings


def check_component_specific(component: etree._Element) -> list[Finding]:
    kind = ComponentKind.from_name(component.get("name"))
    if kind is ComponentKind.SHELL_SETUP:
        return check_shell_setup(component)
    if kind is ComponentKind.TERMINAL_SERVICES:
        return check_rdp(component)
    if kind is ComponentKind.FIREWALL:
        return check_firewall(component)
    return []


# ---------------------------------------------------------------------------
# Microsoft-Windows-Shell-Setup
# ---------------------------------------------------------------------------


def check_shell_setup(component: etree._Element) -> list[Finding]:
    return [*_check_administrator_password(component), *_check_auto_logon(component)]


def _check_administrator_password(component: etree._Element) -> list[Finding]:
    name = ComponentKind.SHELL_SETUP.value
    block = first_descendant(component, ADMINISTRATOR_PASSWORD)
    if block is None:
        return [
            warning(
                "No administrator password configured",
                component=name,
                line=component.sourceline,
            )
        ]

    value = child_text(block, VALUE)
    if not value:
        return [error("Administrator password is empty", component=name, line=block.sourceline)]
    if child_text(block, PLAIN_TEXT) == TRUE_TOKEN:
        return [
            warning(
                "Administrator password is stored in plain text",
                component=name,
                line=block.sourceline,
            )
        ]
    return []


def _check_auto_logon(component: etree._Element) -> list[Finding]:
    name = ComponentKind.SHELL_SETUP.value
    block = first_descendant(component, AUTO_LOGON)
    if block is None or child_text(block, ENABLED) != TRUE_TOKEN:
        return []

    findings: list[Finding] = []
    if not child_text(block, USERNAME):
        findings.append(
            error("AutoLogon is enabled but no username is set", component=name, line=block.sourceline)
        )

    passwords = children(block, PASSWORD)
    if not passwords or not child_text(passwords[0], VALUE):
        findings.append(
            error("AutoLogon is enabled but no password is set", component=name, line=block.sourceline)
        )
    return findings


# ---------------------------------------------------------------------------
# Microsoft-Windows-TerminalServices-LocalSessionManager
# ---------------------------------------------------------------------------


def check_rdp(component: etree._Element) -> list[Finding]:
    name = ComponentKind.TERMINAL_SERVICES.value
    value = child_text(component, DENY_TS_CONNECTIONS)
    if value == FALSE_TOKEN:
        return [info("RDP is enabled", component=name, line=component.sourceline)]
    return [
        warning(
            f"RDP is disabled or not configured ({DENY_TS_CONNECTIONS}={value or 'unset'})",
            component=name,
            line=component.sourceline,
        )
    ]


# ---------------------------------------------------------------------------
# Networking-MPSSVC-Svc
# ---------------------------------------------------------------------------


def check_firewall(component: etree._Element) -> list[Finding]:
    disabled = [
        flag for flag in FIREWALL_PROFILE_FLAGS if child_text(component, flag) == FALSE_TOKEN
    ]
    if not disabled:
        return []
    profiles = ", ".join(flag.split("Profile_", 1)[0] for flag in disabled)
    return [
        warning(
            f"Windows Firewall is disabled ({profiles})",
            component=ComponentKind.FIREWALL.value,
            line=component.sourceline,
        )
    ]
