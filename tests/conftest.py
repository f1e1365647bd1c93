"""Shared fixtures for the gitwarden test suite."""

from gitwarden.testing.conftest import (  # noqa: F401
    access_manager,
    config,
    content_retriever,
    memory_store,
    mock_plumbing,
    recording_filesystem,
    repository_manager,
    sample_ref_entry,
    sample_repository,
    sample_tree_entry,
    store_with_repo,
    warden,
)
