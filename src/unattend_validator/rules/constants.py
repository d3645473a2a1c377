"""Fixed rule set for Windows unattend answer files.

These values describe what Windows Setup and sysprep expect.  They are not
configurable: the checker validates against exactly this checklist.
"""

from __future__ import annotations

UNATTEND_NAMESPACE = "urn:schemas-microsoft-com:unattend"
ROOT_ELEMENT = "unattend"
SETTINGS_ELEMENT = "settings"
COMPONENT_ELEMENT = "component"

# Settings passes that every deployable answer file is expected to carry
REQUIRED_PASSES: tuple[str, ...] = ("windowsPE", "specialize", "oobeSystem")

FIRST_LOGON_PASS = "firstLogonCommands"

# Component identity attributes
PROCESSOR_ARCHITECTURE_ATTR = "processorArchitecture"
PUBLIC_KEY_TOKEN_ATTR = "publicKeyToken"
REQUIRED_COMPONENT_ATTRIBUTES: tuple[str, ...] = (
    PROCESSOR_ARCHITECTURE_ATTR,
    PUBLIC_KEY_TOKEN_ATTR,
)

# Literal tokens as authored in the markup (compared case-sensitively)
TRUE_TOKEN = "true"
FALSE_TOKEN = "false"

# Shell-Setup
ADMINISTRATOR_PASSWORD = "AdministratorPassword"
AUTO_LOGON = "AutoLogon"
VALUE = "Value"
PLAIN_TEXT = "PlainText"
ENABLED = "Enabled"
USERNAME = "Username"
PASSWORD = "Password"

# TerminalServices-LocalSessionManager
DENY_TS_CONNECTIONS = "fDenyTSConnections"

# Networking-MPSSVC-Svc
FIREWALL_PROFILE_FLAGS: tuple[str, ...] = (
    "DomainProfile_EnableFirewall",
    "PrivateProfile_EnableFirewall",
    "PublicProfile_EnableFirewall",
)

# FirstLogonCommands
SYNCHRONOUS_COMMAND = "SynchronousCommand"
COMMAND_LINE = "CommandLine"
RDP_COMMAND_MARKERS: tuple[str, ...] = ("fDenyTSConnections",)
REMOTE_MANAGEMENT_MARKERS: tuple[str, ...] = ("winrm", "RemoteRegistry")

# Human-readable checklist, used by the ``rules`` command
RULE_CHECKLIST: list[tuple[str, str, str]] = [
    ("XML syntax", "Error", "File must be well-formed XML"),
    ("Root element", "Error", f"Root element must be <{ROOT_ELEMENT}>"),
    ("Namespace", "Warning", f"Root namespace must be {UNATTEND_NAMESPACE}"),
    ("Required passes", "Warning", ", ".join(REQUIRED_PASSES)),
    ("Component identity", "Error", " and ".join(REQUIRED_COMPONENT_ATTRIBUTES)),
    ("Administrator password", "Error/Warning", "Set, and not stored as plain text"),
    ("Auto-logon", "Error", "Enabled auto-logon needs a username and password"),
    ("RDP", "Info/Warning", f"{DENY_TS_CONNECTIONS} = {FALSE_TOKEN}"),
    ("Firewall", "Warning", "No firewall profile disabled"),
    ("First logon commands", "Info", "Command count, RDP and WinRM/RemoteRegistry usage"),
]
