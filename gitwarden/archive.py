"""
Archive command construction.

The container itself is produced by ``git archive``; this module only picks
the arguments. Entries are prefixed with ``<repo>-<ref>/``.
"""

from typing import Any

from gitwarden.logging import get_logger
from gitwarden.types.archive import ArchiveFormat

logger = get_logger()

DEFAULT_FORMAT = ArchiveFormat.ZIP


def resolve_format(value: Any) -> ArchiveFormat:
    """
    Map ``value`` to an ``ArchiveFormat``.

    Unrecognized values fall back to ``DEFAULT_FORMAT`` and a warning is
    logged.
    """
    if isinstance(value, ArchiveFormat):
        return value
    try:
        return ArchiveFormat(str(value).lower())
    except ValueError:
        logger.warning(
            "Unsupported archive format %r, falling back to %s",
            value,
            DEFAULT_FORMAT.value,
        )
        return DEFAULT_FORMAT


def archive_prefix(repo: str, ref: str) -> str:
    """Return the directory prefix of every archive entry."""
    return f"{repo}-{ref}/"


def archive_args(repo: str, ref: str, archive_format: Any = DEFAULT_FORMAT) -> list[str]:
    """Build the ``git archive`` arguments for ``ref`` of ``repo``."""
    resolved = resolve_format(archive_format)
    return [
        "archive",
        f"--format={resolved.value}",
        f"--prefix={archive_prefix(repo, ref)}",
        ref,
    ]
