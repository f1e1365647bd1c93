"""
gitwarden service facade.

Builds every component from a ``Config`` and exposes them together.
"""

from typing import Any

from gitwarden.access import AccessManager
from gitwarden.config import Config
from gitwarden.content import ContentRetriever
from gitwarden.filesystem import Filesystem, LocalFilesystem
from gitwarden.lifecycle import RepositoryManager
from gitwarden.plumbing import Plumbing, SubprocessPlumbing
from gitwarden.store import MongoRepositoryStore, RepositoryStore


class GitWarden:
    """
    Entry point for repository hosting operations.

    Aggregates the lifecycle manager, access control and the read facade
    over one record store, filesystem and plumbing invoker.

    Example:
        ```python
        from gitwarden import GitWarden

        # Create from environment variables
        with GitWarden.from_env() as warden:
            repo = warden.repos.create("project", ["alice"], is_public=True)
            warden.access.grant_access(["project"], ["bob"])
            branches = warden.content.get_branch("project")
        ```
    """

    def __init__(
        self,
        config: Config,
        store: RepositoryStore,
        filesystem: Filesystem | None = None,
        plumbing: Plumbing | None = None,
    ) -> None:
        """
        Initialize the facade.

        Args:
            config: Runtime settings
            store: Record store holding repository documents
            filesystem: Filesystem holding bare repositories (default: local disk)
            plumbing: Git invoker (default: subprocess-based)
        """
        self.config = config
        self.store = store
        self.filesystem = filesystem or LocalFilesystem()
        self.plumbing = plumbing or SubprocessPlumbing(config, self.filesystem)

        self.repos = RepositoryManager(self.store, self.filesystem, self.plumbing, config)
        self.access = AccessManager(self.store)
        self.content = ContentRetriever(self.plumbing)

    @classmethod
    def from_config(cls, config: Config) -> "GitWarden":
        """Create a facade backed by MongoDB, the local disk and the git binary."""
        store = MongoRepositoryStore.from_url(config.database_url, config.database_name)
        return cls(config, store)

    @classmethod
    def from_env(cls) -> "GitWarden":
        """
        Create a facade from ``GITWARDEN_*`` environment variables.

        Raises:
            ConfigurationError: If a variable holds an unusable value
        """
        return cls.from_config(Config.from_env())

    def close(self) -> None:
        """Close the record store."""
        self.store.close()

    def __enter__(self) -> "GitWarden":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the record store."""
        self.close()
