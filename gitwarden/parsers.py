"""
Parsers for git plumbing output.

Each parser takes the raw stdout bytes of one command and returns typed
records. They only understand the exact formats the read facade asks git
for; anything else raises ``ParseError``.
"""

from gitwarden.exceptions import ParseError
from gitwarden.quoting import split_path_field
from gitwarden.types.refs import RefEntry
from gitwarden.types.tree import TreeEntry

# Fields requested from ``git for-each-ref``; %09 is a tab.
REF_FIELDS = (
    "%(objectname)",
    "%(refname:short)",
    "%(committername)",
    "%(committeremail)",
    "%(authorname)",
    "%(authoremail)",
    "%(subject)",
)
REF_FORMAT = "%09".join(REF_FIELDS)


def _decode(output: bytes) -> str:
    return output.decode("utf-8", errors="replace")


def _lines(text: str) -> list[str]:
    # Split on "\n" only: subjects may legitimately contain other line
    # separators such as form feeds.
    return [line for line in text.split("\n") if line.strip()]


def parse_tree_line(line: str) -> TreeEntry:
    """
    Parse one line of ``git ls-tree [-l]`` output.

    Format: ``<mode> SP <type> SP <oid> [SP+ <size>] TAB <path>``
    """
    meta, tab, path_field = line.partition("\t")
    if not tab or not path_field:
        raise ParseError(f"Malformed tree entry: {line!r}")

    columns = meta.split()
    if len(columns) == 3:
        permission, filetype, object_hash = columns
        size_column = "-"
    elif len(columns) == 4:
        permission, filetype, object_hash, size_column = columns
    else:
        raise ParseError(f"Malformed tree entry: {line!r}")

    if size_column == "-":
        size = None
    else:
        try:
            size = int(size_column)
        except ValueError:
            raise ParseError(f"Malformed tree entry size: {line!r}")

    path, raw_path = split_path_field(path_field)
    return TreeEntry(
        permission=permission,
        filetype=filetype,
        hash=object_hash,
        size=size,
        path=path,
        raw_path=raw_path,
    )


def parse_tree(output: bytes) -> list[TreeEntry]:
    """Parse ``git ls-tree`` output. Empty output yields an empty list."""
    return [parse_tree_line(line) for line in _lines(_decode(output))]


def parse_ref_line(line: str) -> RefEntry:
    """
    Parse one line produced with ``REF_FORMAT``.

    The subject is the last field and is kept verbatim, tabs included.
    """
    fields = line.split("\t", len(REF_FIELDS) - 1)
    if len(fields) != len(REF_FIELDS):
        raise ParseError(f"Malformed ref entry: {line!r}")

    ref, name, committer_name, committer_email, author_name, author_email, subject = fields
    return RefEntry(
        ref=ref,
        name=name,
        committer_name=committer_name,
        committer_email=committer_email,
        author_name=author_name,
        author_email=author_email,
        subject=subject,
    )


def parse_refs(output: bytes) -> list[RefEntry]:
    """Parse ``git for-each-ref --format=REF_FORMAT`` output, keeping git's order."""
    return [parse_ref_line(line) for line in _lines(_decode(output))]
