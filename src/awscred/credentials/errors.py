"""
Exceptions raised while loading and saving credentials files.

All errors derive from CredentialsError. They are raised to the immediate
caller and never retried.
"""

from __future__ import annotations


class CredentialsError(Exception):
    """Base exception for credentials file errors."""

    pass


class FileNotReadableError(CredentialsError):
    """
    Raised when a credentials file cannot be opened or read.

    Attributes:
        path: Path that could not be read.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not readable: {path}")


class ParseError(CredentialsError):
    """Raised when text cannot be turned into a profile store."""

    pass


class WriteError(CredentialsError):
    """
    Raised when a credentials file cannot be created or written.

    Attributes:
        path: Destination that could not be written.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Failed to write: {path}")


class PlatformError(CredentialsError):
    """Raised when the home directory cannot be determined."""

    pass
