"""
Repository lifecycle: create, rename, remove and look up bare repositories.

The record store and the filesystem are updated in sequence, not in a
transaction. When a later step fails the earlier ones are undone where
possible (see each method); a crash between steps can still leave the two
diverged.
"""

import os

from gitwarden.config import Config
from gitwarden.exceptions import (
    ConflictError,
    GitWardenError,
    NotFoundError,
    RemovalError,
    RenameError,
    ValidationError,
)
from gitwarden.filesystem import Filesystem
from gitwarden.logging import get_logger
from gitwarden.plumbing import Plumbing
from gitwarden.store import CONFLICT_MESSAGE, RepositoryStore
from gitwarden.types.repos import Repository
from gitwarden.validation import INVALID_NAME_MESSAGE, is_valid_name, validate

logger = get_logger()

DAEMON_EXPORT_MARKER = "git-daemon-export-ok"


class RepositoryManager:
    """
    Manages bare repositories and their persisted records.

    Example:
        ```python
        manager = RepositoryManager(store, filesystem, plumbing, config)
        repo = manager.create("project", ["alice"], is_public=True)
        manager.rename("project", "project-v2")
        manager.remove("project-v2")
        ```
    """

    def __init__(
        self,
        store: RepositoryStore,
        filesystem: Filesystem,
        plumbing: Plumbing,
        config: Config,
    ) -> None:
        """
        Initialize the manager.

        Args:
            store: Record store holding repository documents
            filesystem: Filesystem holding the bare repositories
            plumbing: Invoker used to run ``git init --bare``
            config: Provides the bare repository location
        """
        self.store = store
        self.filesystem = filesystem
        self.plumbing = plumbing
        self.config = config

    def bare_path(self, name: str) -> str:
        """Return the on-disk path of repository ``name``."""
        return self.config.bare_path(name)

    def create(self, name: str, users: list[str], is_public: bool = False) -> Repository:
        """
        Create a repository record and its bare repository.

        Steps: validate, insert the record, ``git init --bare``, then write
        the daemon export marker for public repositories. If either
        filesystem step fails the record is deleted (and the directory
        removed) before the error is re-raised.

        Raises:
            ValidationError: If the name or the user list is invalid
            ConflictError: If the name is taken
            ExecutionFailedError: If ``git init`` fails
            ToolNotFoundError: If git is not installed
        """
        repository = Repository(
            name=name, users=list(dict.fromkeys(users)), is_public=is_public
        )
        validate(repository)

        self.store.insert(repository)
        try:
            self.plumbing.init_bare(name)
        except Exception:
            logger.warning("Bare repository creation failed for %s, dropping its record", name)
            self._discard_record(name)
            raise

        if is_public:
            try:
                self.filesystem.create_file(
                    os.path.join(self.bare_path(name), DAEMON_EXPORT_MARKER)
                )
            except Exception:
                logger.warning("Could not mark %s as public, rolling back", name)
                self._discard_directory(name)
                self._discard_record(name)
                raise

        logger.info("Created repository %s", name)
        return repository

    def get(self, name: str) -> Repository:
        """
        Return the repository called ``name``.

        Raises:
            NotFoundError: If there is no such repository
        """
        return self.store.get(name)

    def exists(self, name: str) -> bool:
        """Return True if a record named ``name`` exists."""
        try:
            self.store.get(name)
        except NotFoundError:
            return False
        return True

    def remove(self, name: str) -> None:
        """
        Delete a repository record and its bare repository.

        Raises:
            RemovalError: If the record is missing or either step fails
        """
        try:
            self.store.get(name)
            self.store.remove(name)
            self.filesystem.remove_all(self.bare_path(name))
        except (GitWardenError, OSError) as e:
            raise RemovalError(f"Could not remove repository: {e}") from e
        logger.info("Removed repository %s", name)

    def rename(self, old_name: str, new_name: str) -> None:
        """
        Rename a repository record and move its bare repository.

        The directory is moved first; if the record update then fails the
        directory is moved back before the error is re-raised.

        Raises:
            NotFoundError: If ``old_name`` does not exist
            ValidationError: If ``new_name`` is not a valid name
            ConflictError: If ``new_name`` is taken
            RenameError: If the bare repository could not be moved
        """
        repository = self.store.get(old_name)
        if not is_valid_name(new_name):
            raise ValidationError(INVALID_NAME_MESSAGE)
        renamed = Repository(
            name=new_name,
            users=list(repository.users),
            is_public=repository.is_public,
        )
        if new_name != old_name and self.exists(new_name):
            raise ConflictError(CONFLICT_MESSAGE)

        old_path, new_path = self.bare_path(old_name), self.bare_path(new_name)
        try:
            self.filesystem.rename(old_path, new_path)
        except OSError as e:
            raise RenameError(
                f"Could not rename repository {old_name} to {new_name}: {e}"
            ) from e
        try:
            self.store.replace(old_name, renamed)
        except Exception:
            logger.warning("Record update failed renaming %s, restoring directory", old_name)
            try:
                self.filesystem.rename(new_path, old_path)
            except OSError:
                logger.exception(
                    "Could not move %s back to %s; record and disk have diverged",
                    new_path,
                    old_path,
                )
            raise
        logger.info("Renamed repository %s to %s", old_name, new_name)

    def _discard_record(self, name: str) -> None:
        try:
            self.store.remove(name)
        except GitWardenError:
            logger.exception("Could not drop the record of %s; record and disk have diverged", name)

    def _discard_directory(self, name: str) -> None:
        try:
            self.filesystem.remove_all(self.bare_path(name))
        except OSError:
            logger.exception("Could not remove %s; record and disk have diverged", self.bare_path(name))
