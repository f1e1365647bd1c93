"""
Path quoting as printed by git plumbing commands.

With ``core.quotePath`` on (git's default), a path is printed wrapped in
double quotes whenever it holds a double quote, a backslash, a control
character or a non-ASCII byte. Inside the quotes those characters are
backslash escaped: ``\\t``, ``\\n`` and friends for the usual control
characters, ``\\"`` and ``\\\\`` for the quote and the backslash, and a
three digit octal escape for every other byte. Spaces never trigger quoting.

Two renderings of such a field are kept:

* the raw path, exactly as git printed it, quotes included;
* the display path, with the outer quotes removed and ``\\\\`` / ``\\"``
  collapsed. Every other escape is left as its literal backslash sequence,
  so a tab stays visible as ``\\t``.
"""

QUOTE = '"'
BACKSLASH = "\\"

# C-style escapes git uses for control characters
_NAMED_ESCAPES = {
    "\a": "a",
    "\b": "b",
    "\t": "t",
    "\n": "n",
    "\v": "v",
    "\f": "f",
    "\r": "r",
    QUOTE: QUOTE,
    BACKSLASH: BACKSLASH,
}


def _needs_escape(byte: int) -> bool:
    return byte < 0x20 or byte >= 0x7F or byte in (ord(QUOTE), ord(BACKSLASH))


def needs_quoting(path: str) -> bool:
    """Return True if git would print ``path`` quoted."""
    return any(_needs_escape(byte) for byte in path.encode("utf-8", errors="surrogateescape"))


def quote_path(path: str) -> str:
    """
    Render ``path`` the way git prints it with ``core.quotePath`` on.

    Examples:
        >>> quote_path("much README")
        'much README'
        >>> quote_path("much/such\\tREADME")
        '"much/such\\\\tREADME"'
    """
    if not needs_quoting(path):
        return path

    parts = [QUOTE]
    for byte in path.encode("utf-8", errors="surrogateescape"):
        char = chr(byte)
        if char in _NAMED_ESCAPES:
            parts.append(BACKSLASH + _NAMED_ESCAPES[char])
        elif _needs_escape(byte):
            parts.append(f"{BACKSLASH}{byte:03o}")
        else:
            parts.append(char)
    parts.append(QUOTE)
    return "".join(parts)


def is_quoted(field: str) -> bool:
    """Return True if a path field is wrapped in double quotes."""
    return len(field) >= 2 and field.startswith(QUOTE) and field.endswith(QUOTE)


def display_path(field: str) -> str:
    """
    Turn a path field into its display form.

    Unquoted fields are returned unchanged. For quoted fields the outer
    quotes are dropped, ``\\\\`` becomes ``\\`` and ``\\"`` becomes ``"``;
    all other escape sequences are kept literally.
    """
    if not is_quoted(field):
        return field

    inner = field[1:-1]
    result = []
    i = 0
    while i < len(inner):
        char = inner[i]
        if char == BACKSLASH and i + 1 < len(inner):
            following = inner[i + 1]
            if following in (BACKSLASH, QUOTE):
                result.append(following)
            else:
                result.append(char + following)
            i += 2
            continue
        result.append(char)
        i += 1
    return "".join(result)


def split_path_field(field: str) -> tuple[str, str]:
    """Return ``(display_path, raw_path)`` for a path field."""
    return display_path(field), field
