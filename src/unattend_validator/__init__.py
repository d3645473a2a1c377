"""Windows unattend.xml answer file validator."""

__version__ = "0.1.0"
