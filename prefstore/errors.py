"""
Error taxonomy shared by every prefstore operation.
"""

from __future__ import annotations

class PrefStoreError(Exception):
    """Base class for all errors raised by prefstore."""

class ResolutionError(PrefStoreError):
    """Raised when the config file location cannot be determined."""

class ConfigIOError(PrefStoreError):
    """Raised when a directory or the config file cannot be created, read or written."""

class NotFoundError(PrefStoreError):
    """Raised when loading a config file that does not exist."""

    def __init__(self, path):
        super().__init__(f"Config file not found: {path}")
        self.path = path

class FormatError(PrefStoreError):
    """Raised when a value cannot be encoded to, or decoded from, the chosen format."""

    def __init__(self, format_name: str, message: str):
        super().__init__(f"{format_name}: {message}")
        self.format_name = format_name
