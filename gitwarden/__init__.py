"""gitwarden - Git repository hosting back end."""

from gitwarden.access import AccessManager
from gitwarden.config import Config
from gitwarden.content import ContentRetriever
from gitwarden.exceptions import (
    ConfigurationError,
    ConflictError,
    ExecutionFailedError,
    GitWardenError,
    NotFoundError,
    ParseError,
    RemovalError,
    RenameError,
    StoreError,
    ToolNotFoundError,
    ValidationError,
)
from gitwarden.filesystem import Filesystem, LocalFilesystem
from gitwarden.lifecycle import RepositoryManager
from gitwarden.logging import configure_logging, get_logger
from gitwarden.plumbing import Plumbing, SubprocessPlumbing
from gitwarden.service import GitWarden
from gitwarden.store import MongoRepositoryStore, RepositoryStore
from gitwarden.types import ArchiveFormat, RefEntry, Repository, TreeEntry
from gitwarden.urls import read_only_url, read_write_url

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main entry point
    "GitWarden",
    "Config",
    # Components
    "RepositoryManager",
    "AccessManager",
    "ContentRetriever",
    # Collaborators
    "RepositoryStore",
    "MongoRepositoryStore",
    "Filesystem",
    "LocalFilesystem",
    "Plumbing",
    "SubprocessPlumbing",
    # Types
    "Repository",
    "TreeEntry",
    "RefEntry",
    "ArchiveFormat",
    # URLs
    "read_only_url",
    "read_write_url",
    # Exceptions
    "GitWardenError",
    "ConfigurationError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "RemovalError",
    "RenameError",
    "StoreError",
    "ToolNotFoundError",
    "ExecutionFailedError",
    "ParseError",
    # Logging
    "configure_logging",
    "get_logger",
]
