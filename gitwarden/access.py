"""Repository access control.

Grants and revokes are applied repository by repository. A failure on one
repository does not undo the repositories already updated; every repository
is still attempted and the first failure is raised at the end.
"""

from collections.abc import Callable, Iterable

from gitwarden.exceptions import GitWardenError
from gitwarden.logging import get_logger
from gitwarden.store import RepositoryStore

logger = get_logger()


def _granted(current: list[str], users: list[str]) -> list[str]:
    result = list(current)
    for user in users:
        if user not in result:
            result.append(user)
    return result


def _revoked(current: list[str], users: list[str]) -> list[str]:
    return [user for user in current if user not in users]


class AccessManager:
    """Grants and revokes user access on repository records."""

    def __init__(self, store: RepositoryStore) -> None:
        """
        Initialize the access manager.

        Args:
            store: Record store holding repository documents
        """
        self.store = store

    def grant_access(self, repo_names: Iterable[str], user_names: Iterable[str]) -> None:
        """
        Give every user in ``user_names`` access to every repository in ``repo_names``.

        Users already present are skipped; new users are appended in the
        order given.

        Raises:
            NotFoundError: If a repository does not exist (after all others were updated)
            StoreError: If a record update fails (after all others were updated)
        """
        self._apply("grant", repo_names, list(user_names), _granted)

    def revoke_access(self, repo_names: Iterable[str], user_names: Iterable[str]) -> None:
        """
        Remove every user in ``user_names`` from every repository in ``repo_names``.

        Users not present are ignored.

        Raises:
            NotFoundError: If a repository does not exist (after all others were updated)
            StoreError: If a record update fails (after all others were updated)
        """
        self._apply("revoke", repo_names, list(user_names), _revoked)

    def _apply(
        self,
        operation: str,
        repo_names: Iterable[str],
        users: list[str],
        change: Callable[[list[str], list[str]], list[str]],
    ) -> None:
        first_error: GitWardenError | None = None

        for name in repo_names:
            try:
                repository = self.store.get(name)
                updated = change(repository.users, users)
                if updated == repository.users:
                    continue
                repository.users = updated
                self.store.replace(name, repository)
            except GitWardenError as e:
                logger.warning("Could not %s access on %s: %s", operation, name, e)
                if first_error is None:
                    first_error = e
                continue
            logger.info("Access %s on %s for %s", operation, name, ", ".join(users))

        if first_error is not None:
            raise first_error
