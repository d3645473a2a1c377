"""Enumerations for unattend validation."""

from enum import Enum


class Severity(str, Enum):
    """Severity of a validation finding."""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"


class ComponentKind(str, Enum):
    """Components that receive component-specific checks.

    The set is closed: components whose name is not listed here only get
    the generic identity-attribute checks.
    """

    SHELL_SETUP = "Microsoft-Windows-Shell-Setup"
    TERMINAL_SERVICES = "Microsoft-Windows-TerminalServices-LocalSessionManager"
    FIREWALL = "Networking-MPSSVC-Svc"

    @classmethod
    def from_name(cls, name: str | None) -> "ComponentKind | None":
        """Return the kind for an exact component name, or ``None``."""
        for member in cls:
            if member.value == name:
                return member
        return None
