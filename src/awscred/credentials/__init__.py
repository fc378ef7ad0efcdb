"""
Shared credentials file handling.

Loads the AWS shared credentials file into named profiles, lets callers
change them in memory, and writes them back.

File Structure:
    ~/.aws/credentials
        [profile-name]
        aws_access_key_id = ...
        aws_secret_access_key = ...
        aws_session_token = ...      # optional

Usage:
    from awscred.credentials import CredentialsManager

    manager = CredentialsManager.load("/path/to/credentials")
    manager.with_profile("ci").set_access_key_id("AKIA...")
    manager.save()
"""

from awscred.credentials.codec import parse, serialize
from awscred.credentials.errors import (
    CredentialsError,
    FileNotReadableError,
    ParseError,
    PlatformError,
    WriteError,
)
from awscred.credentials.filesystem import (
    AsyncFileSystem,
    AsyncLocalFileSystem,
    FileSystem,
    LocalFileSystem,
    default_credentials_path,
    resolve_home_directory,
)
from awscred.credentials.manager import CredentialsManager, ProfileSetter
from awscred.credentials.models import Credentials, ProfileStore

__all__ = [
    # Manager
    "CredentialsManager",
    "ProfileSetter",
    # Data models
    "Credentials",
    "ProfileStore",
    # Codec
    "parse",
    "serialize",
    # File access
    "FileSystem",
    "AsyncFileSystem",
    "LocalFileSystem",
    "AsyncLocalFileSystem",
    "resolve_home_directory",
    "default_credentials_path",
    # Exceptions
    "CredentialsError",
    "FileNotReadableError",
    "ParseError",
    "WriteError",
    "PlatformError",
]
