"""
Read-only access to repository content.

``ContentRetriever`` runs git plumbing through a ``Plumbing`` instance and
hands the output to the parsers. The record store is never consulted.
"""

from typing import Any

from gitwarden.archive import DEFAULT_FORMAT, archive_args
from gitwarden.exceptions import ExecutionFailedError, ValidationError
from gitwarden.parsers import REF_FORMAT, parse_refs, parse_tree
from gitwarden.plumbing import Plumbing
from gitwarden.types.refs import RefEntry
from gitwarden.types.tree import TreeEntry

BRANCH_PATTERN = "refs/heads/"
TAG_PATTERN = "refs/tags/"
REF_SORT = "--sort=-committerdate"


def _check_ref(ref: str) -> None:
    # A leading dash would be read by git as an option.
    if not ref or ref.startswith("-"):
        raise ValidationError(f"Validation Error: reference {ref!r} is not valid")


class ContentRetriever:
    """
    Retrieves file contents, trees, refs and archives from bare repositories.

    Missing-binary errors from the plumbing are raised unchanged; command
    failures are re-raised as ``ExecutionFailedError`` naming the operation,
    its target and the underlying status.

    Example:
        ```python
        retriever = ContentRetriever(plumbing)
        readme = retriever.get_file_contents("project", "master", "README")
        for entry in retriever.get_tree("project", "master", "docs"):
            print(entry.path, entry.size)
        ```
    """

    def __init__(self, plumbing: Plumbing) -> None:
        """
        Initialize the retriever.

        Args:
            plumbing: Invoker used for every git command
        """
        self.plumbing = plumbing

    def get_file_contents(self, repo: str, ref: str, path: str) -> bytes:
        """
        Return the contents of ``path`` at ``ref``.

        An empty file yields ``b""``.

        Raises:
            ExecutionFailedError: If the ref, the path or the repository is missing
            ToolNotFoundError: If git is not installed
        """
        _check_ref(ref)
        try:
            return self.plumbing.run(repo, "show", f"{ref}:{path}")
        except ExecutionFailedError as e:
            raise ExecutionFailedError(
                f"Error when trying to obtain file {path} on ref {ref} "
                f"of repository {repo} ({e.status}).",
                status=e.status,
                stderr=e.stderr,
            ) from e

    def get_tree(self, repo: str, ref: str, path: str = ".") -> list[TreeEntry]:
        """
        List the files below ``path`` at ``ref``, recursively.

        A path that does not exist yields an empty list.

        Raises:
            ExecutionFailedError: If the ref or the repository is missing
            ToolNotFoundError: If git is not installed
        """
        _check_ref(ref)
        args = ["ls-tree", "-r", "-l", ref]
        if path not in ("", "."):
            args.extend(["--", path])
        try:
            output = self.plumbing.run(repo, *args)
        except ExecutionFailedError as e:
            raise ExecutionFailedError(
                f"Error when trying to obtain tree {path} on ref {ref} "
                f"of repository {repo} ({e.status}).",
                status=e.status,
                stderr=e.stderr,
            ) from e
        return parse_tree(output)

    def get_for_each_ref(self, repo: str, pattern: str) -> list[RefEntry]:
        """
        List the refs matching ``pattern``, most recently committed first.

        Ties keep git's own ordering (ascending ref name).

        Raises:
            ExecutionFailedError: If the repository is missing or git fails
            ToolNotFoundError: If git is not installed
        """
        args = ["for-each-ref", REF_SORT, f"--format={REF_FORMAT}"]
        # An empty pattern lists every ref.
        if pattern:
            _check_ref(pattern)
            args.append(pattern)
        try:
            output = self.plumbing.run(repo, *args)
        except ExecutionFailedError as e:
            raise ExecutionFailedError(
                f"Error when trying to obtain the refs of repository {repo} ({e.status}).",
                status=e.status,
                stderr=e.stderr,
            ) from e
        return parse_refs(output)

    def get_branch(self, repo: str) -> list[RefEntry]:
        """List the branches of ``repo``."""
        return self.get_for_each_ref(repo, BRANCH_PATTERN)

    def get_tags(self, repo: str) -> list[RefEntry]:
        """List the tags of ``repo``."""
        return self.get_for_each_ref(repo, TAG_PATTERN)

    def get_archive(self, repo: str, ref: str, archive_format: Any = DEFAULT_FORMAT) -> bytes:
        """
        Return an archive of ``ref`` as produced by ``git archive``.

        Unrecognized formats fall back to zip.

        Raises:
            ExecutionFailedError: If the ref or the repository is missing
            ToolNotFoundError: If git is not installed
        """
        _check_ref(ref)
        try:
            return self.plumbing.run(repo, *archive_args(repo, ref, archive_format))
        except ExecutionFailedError as e:
            raise ExecutionFailedError(
                f"Error when trying to obtain archive for ref {ref} "
                f"of repository {repo} ({e.status}).",
                status=e.status,
                stderr=e.stderr,
            ) from e
