"""gitwarden exception classes."""


class GitWardenError(Exception):
    """Base exception for all gitwarden errors."""

    code = "GITWARDEN_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class ConfigurationError(GitWardenError):
    """Raised when configuration is invalid or missing."""

    code = "CONFIGURATION_ERROR"


class ValidationError(GitWardenError):
    """Raised when a repository record fails validation."""

    code = "VALIDATION_ERROR"


class ConflictError(GitWardenError):
    """Raised when a repository name is already taken."""

    code = "CONFLICT"


class NotFoundError(GitWardenError):
    """Raised when a repository record or ref does not exist."""

    code = "NOT_FOUND"

    def __init__(self, message: str = "not found", code: str | None = None) -> None:
        super().__init__(message, code)


class RemovalError(GitWardenError):
    """Raised when a repository could not be removed."""

    code = "REMOVAL_FAILED"


class RenameError(GitWardenError):
    """Raised when a bare repository could not be moved to its new name."""

    code = "RENAME_FAILED"


class StoreError(GitWardenError):
    """Raised on record store failures other than not found / conflict."""

    code = "STORE_ERROR"


class ToolNotFoundError(GitWardenError):
    """Raised when the git binary cannot be located."""

    code = "TOOL_NOT_FOUND"


class ExecutionFailedError(GitWardenError):
    """Raised when a git command fails.

    ``status`` carries the underlying cause in short form (``exit status
    128``, ``Repository does not exist``) so callers can embed it in their
    own messages.
    """

    code = "EXECUTION_FAILED"

    def __init__(
        self,
        message: str,
        status: str | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.status = status if status is not None else message
        self.stderr = stderr


class ParseError(GitWardenError):
    """Raised when git output does not match the expected format."""

    code = "PARSE_ERROR"
