"""Repository record validation."""

import re

from gitwarden.exceptions import ValidationError
from gitwarden.types.repos import Repository

NAME_PATTERN = re.compile(r"^[\w\-+.@]+$", re.ASCII)

INVALID_NAME_MESSAGE = "Validation Error: repository name is not valid"
NO_USERS_MESSAGE = "Validation Error: repository should have at least one user"


def is_valid_name(name: str) -> bool:
    """Return True if ``name`` can be used as a repository name."""
    # fullmatch so a trailing newline is rejected as well
    return bool(name) and NAME_PATTERN.fullmatch(name) is not None


def validate(repository: Repository) -> None:
    """
    Validate a repository record.

    The name is checked before the user list.

    Raises:
        ValidationError: If the name is empty or unsafe, or no user is set
    """
    if not is_valid_name(repository.name):
        raise ValidationError(INVALID_NAME_MESSAGE)
    if not repository.users:
        raise ValidationError(NO_USERS_MESSAGE)


def is_valid(repository: Repository) -> bool:
    """Return True if ``repository`` passes ``validate``."""
    try:
        validate(repository)
    except ValidationError:
        return False
    return True
