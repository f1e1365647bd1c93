"""
Filesystem access for bare repositories.

The lifecycle manager only ever needs four operations, so they are gathered
behind a small interface that tests replace with
``gitwarden.testing.RecordingFilesystem``.
"""

import os
import shutil
from abc import ABC, abstractmethod


class Filesystem(ABC):
    """Abstract base class for the filesystem operations used by gitwarden."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if ``path`` exists."""
        pass

    @abstractmethod
    def create_file(self, path: str, content: bytes = b"") -> None:
        """Create (or truncate) a file at ``path`` holding ``content``."""
        pass

    @abstractmethod
    def remove_all(self, path: str) -> None:
        """Recursively remove ``path``. A missing path is not an error."""
        pass

    @abstractmethod
    def rename(self, old_path: str, new_path: str) -> None:
        """Move ``old_path`` to ``new_path``."""
        pass


class LocalFilesystem(Filesystem):
    """Filesystem implementation backed by the local disk."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def create_file(self, path: str, content: bytes = b"") -> None:
        with open(path, "wb") as f:
            f.write(content)

    def remove_all(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        elif os.path.lexists(path):
            os.remove(path)

    def rename(self, old_path: str, new_path: str) -> None:
        os.rename(old_path, new_path)
