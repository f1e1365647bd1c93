"""Archive format definitions."""

from enum import Enum


class ArchiveFormat(str, Enum):
    """Container formats understood by ``git archive``."""

    ZIP = "zip"
    TAR = "tar"
