"""
Record store for repository documents.

Documents are keyed by repository name (``_id``). ``MongoRepositoryStore``
is the production implementation; tests use
``gitwarden.testing.InMemoryRepositoryStore``.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from gitwarden.exceptions import ConflictError, NotFoundError, StoreError
from gitwarden.logging import get_logger, log_store_operation, mask_sensitive_data
from gitwarden.types.repos import Repository

logger = get_logger("store")

CONFLICT_MESSAGE = "A repository with this name already exists."


class RepositoryStore(ABC):
    """Abstract base class for repository record persistence."""

    @abstractmethod
    def get(self, name: str) -> Repository:
        """
        Load the repository called ``name``.

        Raises:
            NotFoundError: If no such record exists
            StoreError: On any other store failure
        """
        pass

    @abstractmethod
    def insert(self, repository: Repository) -> None:
        """
        Persist a new repository record.

        Raises:
            ConflictError: If a record with the same name exists
            StoreError: On any other store failure
        """
        pass

    @abstractmethod
    def replace(self, name: str, repository: Repository) -> None:
        """
        Replace the record keyed by ``name`` with ``repository``.

        ``repository.name`` may differ from ``name``; the record then moves
        to the new key.

        Raises:
            NotFoundError: If no record is keyed by ``name``
            ConflictError: If the new key is already taken
            StoreError: On any other store failure
        """
        pass

    @abstractmethod
    def remove(self, name: str) -> None:
        """
        Delete the record keyed by ``name``.

        Raises:
            NotFoundError: If no such record exists
            StoreError: On any other store failure
        """
        pass

    def close(self) -> None:
        """Release resources held by the store."""
        pass


class MongoRepositoryStore(RepositoryStore):
    """
    MongoDB-backed repository store.

    Example:
        ```python
        from gitwarden.store import MongoRepositoryStore

        store = MongoRepositoryStore.from_url("mongodb://127.0.0.1:27017", "gitwarden")
        repo = store.get("my-project")
        ```
    """

    COLLECTION_NAME = "repository"

    def __init__(
        self,
        collection: Collection,
        client: MongoClient | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            collection: Collection holding repository documents
            client: Owning client, closed by ``close()`` when given
        """
        self.collection = collection
        self._client = client

    @classmethod
    def from_url(cls, url: str, database_name: str) -> "MongoRepositoryStore":
        """Connect to ``url`` and use the repository collection of ``database_name``."""
        logger.info("Connecting to record store at %s", mask_sensitive_data(url))
        client: MongoClient = MongoClient(url)
        return cls(client[database_name][cls.COLLECTION_NAME], client=client)

    def get(self, name: str) -> Repository:
        document = self._call("get", name, lambda: self.collection.find_one({"_id": name}))
        if document is None:
            raise NotFoundError()
        return Repository.from_document(document)

    def insert(self, repository: Repository) -> None:
        log_store_operation("insert", repository.name, {"users": repository.users})
        try:
            self.collection.insert_one(repository.to_document())
        except DuplicateKeyError as e:
            raise ConflictError(CONFLICT_MESSAGE) from e
        except PyMongoError as e:
            raise StoreError(str(e)) from e

    def replace(self, name: str, repository: Repository) -> None:
        log_store_operation("replace", name, {"new_name": repository.name})
        if repository.name == name:
            result = self._call(
                "replace",
                name,
                lambda: self.collection.find_one_and_replace(
                    {"_id": name}, repository.to_document()
                ),
            )
            if result is None:
                raise NotFoundError()
            return

        # _id is immutable: a rename inserts under the new key, then drops the old one.
        if self._call("replace", name, lambda: self.collection.find_one({"_id": name})) is None:
            raise NotFoundError()
        self.insert(repository)
        self.remove(name)

    def remove(self, name: str) -> None:
        log_store_operation("remove", name)
        result = self._call("remove", name, lambda: self.collection.delete_one({"_id": name}))
        if result.deleted_count == 0:
            raise NotFoundError()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    def _call(self, operation: str, name: str, fn: Callable[[], Any]) -> Any:
        try:
            return fn()
        except PyMongoError as e:
            logger.error("Record store %s failed for %s: %s", operation, name, e)
            raise StoreError(str(e)) from e
