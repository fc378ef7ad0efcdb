"""
File-system access for credentials files.

The manager never touches the disk directly. It reads and writes whole
files through a FileSystem (or AsyncFileSystem) so that tests and callers
can substitute their own storage.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from awscred.credentials.errors import PlatformError

CREDENTIALS_DIR_NAME = ".aws"
CREDENTIALS_FILE_NAME = "credentials"


class FileSystem(ABC):
    """Whole-file text storage. Implementations raise OSError on failure."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the full contents of the file at path."""

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """Create or truncate the file at path and write content."""


class AsyncFileSystem(ABC):
    """Async counterpart of FileSystem."""

    @abstractmethod
    async def read_text(self, path: str) -> str:
        """Return the full contents of the file at path."""

    @abstractmethod
    async def write_text(self, path: str, content: str) -> None:
        """Create or truncate the file at path and write content."""


class LocalFileSystem(FileSystem):
    """
    FileSystem backed by the local disk.

    Writes go to a uniquely named temporary file next to the destination
    (after following symlinks), restricted to the owner (0600), which is
    then renamed over the destination. The previous contents stay intact
    if the write fails part way.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def write_text(self, path: str, content: str) -> None:
        # Symlinks are followed so the link itself survives the rename
        target = Path(path).resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}."
        )
        temp_path = Path(temp_name)

        try:
            with os.fdopen(fd, "w", encoding=self.encoding) as f:
                f.write(content)

            try:
                os.chmod(temp_path, 0o600)
            except OSError:
                # Windows or permission error - continue anyway
                pass

            temp_path.replace(target)

        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise


class AsyncLocalFileSystem(AsyncFileSystem):
    """Runs LocalFileSystem calls in a worker thread."""

    def __init__(self, file_system: FileSystem | None = None) -> None:
        self.file_system = file_system or LocalFileSystem()

    async def read_text(self, path: str) -> str:
        return await asyncio.to_thread(self.file_system.read_text, path)

    async def write_text(self, path: str, content: str) -> None:
        await asyncio.to_thread(self.file_system.write_text, path, content)


def resolve_home_directory() -> Path:
    """
    Return the current user's home directory.

    Raises:
        PlatformError: If the home directory cannot be determined.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise PlatformError(f"Cannot determine home directory: {e}") from e


def default_credentials_path(
    home_resolver: Callable[[], Path] | None = None,
) -> Path:
    """
    Return the default credentials file location (~/.aws/credentials).

    Args:
        home_resolver: Callable returning the home directory. Defaults to
                      resolve_home_directory.

    Raises:
        PlatformError: If the home directory cannot be determined.
    """
    resolver = home_resolver or resolve_home_directory
    return Path(resolver()) / CREDENTIALS_DIR_NAME / CREDENTIALS_FILE_NAME
