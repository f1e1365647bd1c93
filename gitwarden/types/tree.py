"""Tree listing data model."""

from dataclasses import dataclass
from typing import Any


@dataclass
class TreeEntry:
    """One row of ``git ls-tree`` output."""

    permission: str
    filetype: str  # "blob", "tree" or "commit"
    hash: str
    size: int | None
    path: str
    raw_path: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "permission": self.permission,
            "filetype": self.filetype,
            "hash": self.hash,
            "size": self.size,
            "path": self.path,
            "rawPath": self.raw_path,
        }
