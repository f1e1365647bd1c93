"""
Pytest plugin for gitwarden testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["gitwarden.testing.conftest"]

Or import the fixtures directly:

    from gitwarden.testing.fixtures import mock_plumbing, sample_repository
"""

# Re-export all fixtures for pytest auto-discovery
from gitwarden.testing.fixtures import (
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

__all__ = [
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
]
