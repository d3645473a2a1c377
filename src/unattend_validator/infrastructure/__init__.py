"""Infrastructure adapters for Unattend Validator."""
