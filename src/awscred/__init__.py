"""
awscred - AWS shared credentials file manager

Load, edit and save the profiles in ~/.aws/credentials without editing the
file by hand.

Key Features:
    - Lenient parser that tolerates comments, blank lines and unknown keys
    - Chainable per-profile setters
    - Atomic, owner-only writes
    - Blocking and asyncio load/save
"""

__version__ = "0.1.0"

from awscred.credentials import Credentials, CredentialsManager

__all__ = [
    "__version__",
    "Credentials",
    "CredentialsManager",
]
