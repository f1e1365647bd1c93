"""gitwarden type definitions.

This module exports all data model types used by the package.
"""

from gitwarden.types.archive import ArchiveFormat
from gitwarden.types.refs import RefEntry
from gitwarden.types.repos import Repository
from gitwarden.types.tree import TreeEntry

__all__ = [
    # Repository record
    "Repository",
    # Read path
    "TreeEntry",
    "RefEntry",
    "ArchiveFormat",
]
