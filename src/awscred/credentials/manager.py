"""
Credentials file manager.

CredentialsManager owns one profile store and the path it was loaded from
(or will be saved to). Reading and writing go through a FileSystem; the
text format is handled by the codec module.

Usage:
    manager = CredentialsManager.load_default()

    manager.with_profile("default") \\
        .set_access_key_id("ACCESS_KEY") \\
        .set_secret_access_key("SECRET_KEY") \\
        .clear_session_token()

    manager.save()
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from awscred.credentials.codec import parse, serialize
from awscred.credentials.errors import FileNotReadableError, WriteError
from awscred.credentials.filesystem import (
    AsyncFileSystem,
    AsyncLocalFileSystem,
    FileSystem,
    LocalFileSystem,
    default_credentials_path,
)
from awscred.credentials.models import Credentials, ProfileStore

if TYPE_CHECKING:
    from awscred.config.settings import Settings

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


class CredentialsManager:
    """
    In-memory view of a credentials file.

    Profiles returned by get_profile are copies; changes are made through
    set_profile, remove_profile or the setter returned by with_profile, and
    reach the disk only when save or save_as is called.

    Attributes:
        file_system: Blocking file access used by load/save.
        async_file_system: Async file access used by the *_async variants.
    """

    def __init__(
        self,
        path: StrPath,
        file_system: FileSystem | None = None,
        async_file_system: AsyncFileSystem | None = None,
    ) -> None:
        """
        Create an empty manager bound to path. Performs no I/O.

        Args:
            path: Credentials file location used by save().
            file_system: Blocking file access. Defaults to LocalFileSystem.
            async_file_system: Async file access. Defaults to running
                              file_system in a worker thread.
        """
        self._path = os.fspath(path)
        self._profiles: ProfileStore = {}
        self.file_system = file_system or LocalFileSystem()
        self.async_file_system = async_file_system or AsyncLocalFileSystem(
            self.file_system
        )

    def __repr__(self) -> str:
        return f"CredentialsManager(path={self._path!r}, profiles={self.profiles()!r})"

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, name: object) -> bool:
        return name in self._profiles

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._profiles))

    @property
    def path(self) -> str:
        """Path the manager saves to."""
        return self._path

    @property
    def store(self) -> ProfileStore:
        """Copy of the full profile mapping."""
        return {name: creds.copy() for name, creds in self._profiles.items()}

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def load(
        cls,
        path: StrPath,
        file_system: FileSystem | None = None,
    ) -> CredentialsManager:
        """
        Load a credentials file.

        Args:
            path: Credentials file to read.
            file_system: Blocking file access. Defaults to LocalFileSystem.

        Returns:
            Manager holding every profile in the file, bound to path.

        Raises:
            FileNotReadableError: If the file cannot be read.
            ParseError: If the contents cannot be parsed.
        """
        manager = cls(path, file_system=file_system)
        try:
            text = manager.file_system.read_text(manager.path)
        except (OSError, UnicodeDecodeError) as e:
            raise FileNotReadableError(manager.path) from e

        manager._populate(text)
        return manager

    @classmethod
    def load_default(
        cls,
        file_system: FileSystem | None = None,
        home_resolver: Callable[[], Path] | None = None,
    ) -> CredentialsManager:
        """
        Load the credentials file from ~/.aws/credentials.

        Raises:
            PlatformError: If the home directory cannot be determined.
            FileNotReadableError: If the file cannot be read.
            ParseError: If the contents cannot be parsed.
        """
        return cls.load(default_credentials_path(home_resolver), file_system)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        file_system: FileSystem | None = None,
        home_resolver: Callable[[], Path] | None = None,
    ) -> CredentialsManager:
        """
        Load the credentials file named by settings.

        Falls back to ~/.aws/credentials when settings.credentials_file
        is not set.
        """
        if settings.credentials_file:
            return cls.load(settings.credentials_file, file_system)
        return cls.load_default(file_system, home_resolver)

    @classmethod
    async def load_async(
        cls,
        path: StrPath,
        async_file_system: AsyncFileSystem | None = None,
    ) -> CredentialsManager:
        """
        Load a credentials file without blocking the event loop.

        Raises:
            FileNotReadableError: If the file cannot be read.
            ParseError: If the contents cannot be parsed.
        """
        manager = cls(path, async_file_system=async_file_system)
        try:
            text = await manager.async_file_system.read_text(manager.path)
        except (OSError, UnicodeDecodeError) as e:
            raise FileNotReadableError(manager.path) from e

        manager._populate(text)
        return manager

    @classmethod
    async def load_default_async(
        cls,
        async_file_system: AsyncFileSystem | None = None,
        home_resolver: Callable[[], Path] | None = None,
    ) -> CredentialsManager:
        """Async variant of load_default."""
        return await cls.load_async(
            default_credentials_path(home_resolver), async_file_system
        )

    def _populate(self, text: str) -> None:
        self._profiles = parse(text)
        logger.debug(f"Loaded {len(self._profiles)} profiles from {self._path}")

    # -------------------------------------------------------------------------
    # Saving
    # -------------------------------------------------------------------------

    def save(self) -> None:
        """
        Write all profiles to the bound path.

        Raises:
            WriteError: If the file cannot be created or written.
        """
        self.save_as(self._path)

    def save_as(self, path: StrPath) -> None:
        """
        Write all profiles to path. The bound path is left unchanged.

        Raises:
            WriteError: If the file cannot be created or written.
        """
        target = os.fspath(path)
        content = serialize(self._profiles)
        try:
            self.file_system.write_text(target, content)
        except OSError as e:
            raise WriteError(target) from e
        logger.debug(f"Saved {len(self._profiles)} profiles to {target}")

    async def save_async(self) -> None:
        """Async variant of save."""
        await self.save_as_async(self._path)

    async def save_as_async(self, path: StrPath) -> None:
        """Async variant of save_as."""
        target = os.fspath(path)
        content = serialize(self._profiles)
        try:
            await self.async_file_system.write_text(target, content)
        except OSError as e:
            raise WriteError(target) from e
        logger.debug(f"Saved {len(self._profiles)} profiles to {target}")

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    def profiles(self) -> list[str]:
        """Return the names of all profiles."""
        return list(self._profiles)

    def get_profile(self, name: str) -> Credentials | None:
        """Return a copy of the named profile, or None if absent."""
        credentials = self._profiles.get(name)
        return credentials.copy() if credentials is not None else None

    def get_profile_mutable(self, name: str) -> Credentials | None:
        """
        Return the stored record for name, or None if absent.

        Changes to the returned object modify the store directly. Intended
        for ProfileSetter; read-only callers should use get_profile.
        """
        return self._profiles.get(name)

    def set_profile(self, name: str, credentials: Credentials) -> None:
        """
        Insert or replace the named profile with a copy of credentials.

        Raises:
            ValueError: If name is empty.
        """
        _require_name(name)
        self._profiles[name] = credentials.copy()

    def profile_exists(self, name: str) -> bool:
        """Check if the named profile exists."""
        return name in self._profiles

    def remove_profile(self, name: str) -> Credentials | None:
        """Remove the named profile and return it, or None if absent."""
        return self._profiles.pop(name, None)

    def with_profile(self, name: str) -> ProfileSetter:
        """
        Return a setter for the named profile.

        The profile is created with empty credentials if it does not exist.

        Raises:
            ValueError: If name is empty.
        """
        _require_name(name)
        if name not in self._profiles:
            self._profiles[name] = Credentials()
        return ProfileSetter(self, name)


def _require_name(name: str) -> None:
    """Raise ValueError for an empty profile name."""
    if not name:
        raise ValueError("Profile name must not be empty")


class ProfileSetter:
    """
    Chainable setter for one profile of a CredentialsManager.

    The profile is looked up again on every call. If it has been removed
    from the manager in the meantime, the call does nothing.
    """

    def __init__(self, manager: CredentialsManager, profile: str) -> None:
        self.manager = manager
        self.profile = profile

    def __repr__(self) -> str:
        return f"ProfileSetter(profile={self.profile!r})"

    def set_access_key_id(self, value: str) -> ProfileSetter:
        credentials = self.manager.get_profile_mutable(self.profile)
        if credentials is not None:
            credentials.access_key_id = value
        return self

    def set_secret_access_key(self, value: str) -> ProfileSetter:
        credentials = self.manager.get_profile_mutable(self.profile)
        if credentials is not None:
            credentials.secret_access_key = value
        return self

    def set_session_token(self, value: str | None) -> ProfileSetter:
        """Set the session token, or clear it when value is None."""
        credentials = self.manager.get_profile_mutable(self.profile)
        if credentials is not None:
            credentials.session_token = value
        return self

    def clear_session_token(self) -> ProfileSetter:
        return self.set_session_token(None)
