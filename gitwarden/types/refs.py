"""Ref listing data model."""

from dataclasses import dataclass
from typing import Any


@dataclass
class RefEntry:
    """One row of ``git for-each-ref`` output."""

    ref: str  # object id the ref points to
    name: str
    committer_name: str
    committer_email: str  # angle brackets included
    author_name: str
    author_email: str
    subject: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "ref": self.ref,
            "name": self.name,
            "committerName": self.committer_name,
            "committerEmail": self.committer_email,
            "authorName": self.author_name,
            "authorEmail": self.author_email,
            "subject": self.subject,
        }
