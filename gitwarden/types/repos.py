"""Repository data model."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gitwarden.config import Config


@dataclass
class Repository:
    """A hosted bare repository and the users allowed to push to it."""

    name: str
    users: list[str] = field(default_factory=list)
    is_public: bool = False

    def to_document(self) -> dict[str, Any]:
        """Convert to the record store document form."""
        return {
            "_id": self.name,
            "users": list(self.users),
            "ispublic": self.is_public,
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Repository":
        """Build a Repository from a record store document."""
        return cls(
            name=document["_id"],
            users=list(document.get("users") or []),
            is_public=bool(document.get("ispublic", False)),
        )

    def to_json(self, config: "Config") -> dict[str, Any]:
        """
        Project the repository for API consumers.

        The user list is never part of the projection.
        """
        from gitwarden.urls import read_only_url, read_write_url

        return {
            "name": self.name,
            "public": self.is_public,
            "ssh_url": read_write_url(self.name, config),
            "git_url": read_only_url(self.name, config),
        }
