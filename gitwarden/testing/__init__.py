"""gitwarden testing utilities.

Provides test doubles and fixtures for testing applications built on
gitwarden without a record store server or a git binary.
"""

from gitwarden.testing.fixtures import (
    create_mock_ref_entry,
    create_mock_repository,
    create_mock_tree_entry,
    format_ref_output,
    format_tree_output,
)
from gitwarden.testing.mock import (
    InMemoryRepositoryStore,
    MockCall,
    MockPlumbing,
    MockResponse,
    RecordingFilesystem,
)

__all__ = [
    # Test doubles
    "MockPlumbing",
    "RecordingFilesystem",
    "InMemoryRepositoryStore",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository",
    "create_mock_tree_entry",
    "create_mock_ref_entry",
    "format_tree_output",
    "format_ref_output",
]
