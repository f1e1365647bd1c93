"""
Pytest fixtures for gitwarden testing.

Provides common fixtures for testing code built on gitwarden without a
record store server or a git binary.
"""

from collections.abc import Generator
from typing import Any

import pytest

from gitwarden.access import AccessManager
from gitwarden.config import Config
from gitwarden.content import ContentRetriever
from gitwarden.lifecycle import RepositoryManager
from gitwarden.quoting import quote_path
from gitwarden.service import GitWarden
from gitwarden.testing.mock import (
    DEFAULT_BARE_LOCATION,
    InMemoryRepositoryStore,
    MockPlumbing,
    RecordingFilesystem,
)
from gitwarden.types.refs import RefEntry
from gitwarden.types.repos import Repository
from gitwarden.types.tree import TreeEntry

SAMPLE_OBJECT_ID = "b4f3c7e1d2a94c0f8e6b5a7d9c1e3f5a7b9d0c2e"


# ============================================================================
# Collaborator Fixtures
# ============================================================================


@pytest.fixture
def config() -> Config:
    """Provide a Config pointing at a throwaway bare location."""
    return Config(
        host="gitwarden.example.com",
        bare_location=DEFAULT_BARE_LOCATION,
        uid="git",
    )


@pytest.fixture
def mock_plumbing() -> Generator[MockPlumbing, None, None]:
    """
    Provide a MockPlumbing for testing.

    Example:
        ```python
        def test_readme(mock_plumbing):
            mock_plumbing.configure_show(response=b"much WOW")
            retriever = ContentRetriever(mock_plumbing)
            assert retriever.get_file_contents("repo", "master", "README") == b"much WOW"
        ```
    """
    plumbing = MockPlumbing(bare_location=DEFAULT_BARE_LOCATION)
    yield plumbing
    plumbing.reset()


@pytest.fixture
def recording_filesystem() -> Generator[RecordingFilesystem, None, None]:
    """Provide a RecordingFilesystem for testing."""
    filesystem = RecordingFilesystem()
    yield filesystem
    filesystem.reset()


@pytest.fixture
def memory_store() -> Generator[InMemoryRepositoryStore, None, None]:
    """Provide an empty InMemoryRepositoryStore for testing."""
    store = InMemoryRepositoryStore()
    yield store
    store.reset()


# ============================================================================
# Component Fixtures
# ============================================================================


@pytest.fixture
def repository_manager(
    memory_store: InMemoryRepositoryStore,
    recording_filesystem: RecordingFilesystem,
    mock_plumbing: MockPlumbing,
    config: Config,
) -> RepositoryManager:
    """Provide a RepositoryManager wired to the test doubles."""
    return RepositoryManager(memory_store, recording_filesystem, mock_plumbing, config)


@pytest.fixture
def access_manager(memory_store: InMemoryRepositoryStore) -> AccessManager:
    """Provide an AccessManager over the in-memory store."""
    return AccessManager(memory_store)


@pytest.fixture
def content_retriever(mock_plumbing: MockPlumbing) -> ContentRetriever:
    """Provide a ContentRetriever over the mock plumbing."""
    return ContentRetriever(mock_plumbing)


@pytest.fixture
def warden(
    config: Config,
    memory_store: InMemoryRepositoryStore,
    recording_filesystem: RecordingFilesystem,
    mock_plumbing: MockPlumbing,
) -> GitWarden:
    """
    Provide a GitWarden facade wired to the test doubles.

    Example:
        ```python
        def test_workflow(warden, memory_store):
            warden.repos.create("project", ["alice"])
            assert "project" in memory_store.documents
        ```
    """
    return GitWarden(
        config,
        memory_store,
        filesystem=recording_filesystem,
        plumbing=mock_plumbing,
    )


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository."""
    return create_mock_repository()


@pytest.fixture
def sample_tree_entry() -> TreeEntry:
    """Provide a sample TreeEntry."""
    return create_mock_tree_entry()


@pytest.fixture
def sample_ref_entry() -> RefEntry:
    """Provide a sample RefEntry."""
    return create_mock_ref_entry()


# ============================================================================
# Pre-configured Fixtures
# ============================================================================


@pytest.fixture
def store_with_repo(
    memory_store: InMemoryRepositoryStore,
    sample_repository: Repository,
) -> InMemoryRepositoryStore:
    """Provide an in-memory store that already holds ``sample_repository``."""
    memory_store.insert(sample_repository)
    return memory_store


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_repository(
    name: str = "test-repo",
    users: list[str] | None = None,
    **kwargs: Any,
) -> Repository:
    """
    Create a Repository with customizable fields.

    Args:
        name: Repository name
        users: Users with access (default: ["alice"])
        **kwargs: Additional fields to override

    Returns:
        Repository object
    """
    defaults: dict[str, Any] = {"is_public": False}
    defaults.update(kwargs)
    return Repository(
        name=name,
        users=list(users) if users is not None else ["alice"],
        **defaults,
    )


def create_mock_tree_entry(path: str = "README", **kwargs: Any) -> TreeEntry:
    """
    Create a TreeEntry with customizable fields.

    ``raw_path`` defaults to the git-quoted form of ``path``.

    Args:
        path: Display path
        **kwargs: Additional fields to override

    Returns:
        TreeEntry object
    """
    defaults: dict[str, Any] = {
        "permission": "100644",
        "filetype": "blob",
        "hash": SAMPLE_OBJECT_ID,
        "size": 8,
        "raw_path": quote_path(path),
    }
    defaults.update(kwargs)
    return TreeEntry(path=path, **defaults)


def create_mock_ref_entry(name: str = "master", **kwargs: Any) -> RefEntry:
    """
    Create a RefEntry with customizable fields.

    Args:
        name: Short ref name
        **kwargs: Additional fields to override

    Returns:
        RefEntry object
    """
    defaults: dict[str, Any] = {
        "ref": SAMPLE_OBJECT_ID,
        "committer_name": "doge",
        "committer_email": "<much@email.com>",
        "author_name": "doge",
        "author_email": "<much@email.com>",
        "subject": "will bark",
    }
    defaults.update(kwargs)
    return RefEntry(name=name, **defaults)


def format_tree_output(entries: list[TreeEntry]) -> bytes:
    """Render entries as ``git ls-tree -r -l`` would print them."""
    lines = []
    for entry in entries:
        size = "-" if entry.size is None else str(entry.size)
        lines.append(
            f"{entry.permission} {entry.filetype} {entry.hash} {size:>7}\t{entry.raw_path}\n"
        )
    return "".join(lines).encode("utf-8")


def format_ref_output(entries: list[RefEntry]) -> bytes:
    """Render entries as ``git for-each-ref`` prints them with the ref format."""
    lines = []
    for entry in entries:
        values = (
            entry.ref,
            entry.name,
            entry.committer_name,
            entry.committer_email,
            entry.author_name,
            entry.author_email,
            entry.subject,
        )
        lines.append("\t".join(values) + "\n")
    return "".join(lines).encode("utf-8")


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "config",
    "mock_plumbing",
    "recording_filesystem",
    "memory_store",
    "repository_manager",
    "access_manager",
    "content_retriever",
    "warden",
    "sample_repository",
    "sample_tree_entry",
    "sample_ref_entry",
    "store_with_repo",
    # Helper functions
    "create_mock_repository",
    "create_mock_tree_entry",
    "create_mock_ref_entry",
    "format_tree_output",
    "format_ref_output",
]
