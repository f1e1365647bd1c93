"""
Git plumbing invoker.

Every read and write against a bare repository goes through a ``Plumbing``
instance handed to the components at construction. ``SubprocessPlumbing``
runs the real git binary; ``gitwarden.testing.MockPlumbing`` returns canned
output without spawning anything.
"""

import shutil
import subprocess
import time
from abc import ABC, abstractmethod

from gitwarden.config import Config
from gitwarden.exceptions import ExecutionFailedError, ToolNotFoundError
from gitwarden.filesystem import Filesystem, LocalFilesystem
from gitwarden.logging import get_logger, log_git_command

logger = get_logger("git")

REPOSITORY_MISSING_STATUS = "Repository does not exist"


class Plumbing(ABC):
    """Abstract base class for git plumbing execution."""

    @abstractmethod
    def repository_path(self, repo_name: str) -> str:
        """Return the on-disk path of the bare repository ``repo_name``."""
        pass

    @abstractmethod
    def run(self, repo_name: str, *args: str) -> bytes:
        """
        Run ``git <args>`` inside the bare repository ``repo_name``.

        Returns:
            The command's standard output, unmodified

        Raises:
            ToolNotFoundError: If the git binary cannot be located
            ExecutionFailedError: If the repository is missing or the command fails
        """
        pass

    @abstractmethod
    def init_bare(self, repo_name: str) -> None:
        """
        Create the bare repository ``repo_name``.

        Raises:
            ToolNotFoundError: If the git binary cannot be located
            ExecutionFailedError: If ``git init`` fails
        """
        pass


class SubprocessPlumbing(Plumbing):
    """
    Plumbing implementation that runs the git binary as a subprocess.

    Output is fully buffered. ``config.command_timeout`` bounds each call
    when set.

    Example:
        ```python
        from gitwarden.config import Config
        from gitwarden.plumbing import SubprocessPlumbing

        plumbing = SubprocessPlumbing(Config(bare_location="/srv/git"))
        plumbing.init_bare("project")
        refs = plumbing.run("project", "for-each-ref", "refs/heads/")
        ```
    """

    def __init__(self, config: Config, filesystem: Filesystem | None = None) -> None:
        """
        Initialize the invoker.

        Args:
            config: Provides the bare location, binary name and timeout
            filesystem: Used to check that a repository exists (default: local disk)
        """
        self.config = config
        self.filesystem = filesystem or LocalFilesystem()

    def repository_path(self, repo_name: str) -> str:
        return self.config.bare_path(repo_name)

    def run(self, repo_name: str, *args: str) -> bytes:
        git = self._lookup_binary()
        cwd = self.repository_path(repo_name)
        if not self.filesystem.exists(cwd):
            raise ExecutionFailedError(
                f"{REPOSITORY_MISSING_STATUS}: {repo_name}",
                status=REPOSITORY_MISSING_STATUS,
            )
        return self._execute(git, list(args), cwd=cwd, repo_name=repo_name)

    def init_bare(self, repo_name: str) -> None:
        git = self._lookup_binary()
        args = ["init", "--bare"]
        if self.config.bare_template:
            args.append(f"--template={self.config.bare_template}")
        args.append(self.repository_path(repo_name))
        logger.debug("Initializing bare repository %s", repo_name)
        self._execute(git, args, cwd=None, repo_name=None)

    def _lookup_binary(self) -> str:
        path = shutil.which(self.config.git_binary)
        if path is None:
            raise ToolNotFoundError(
                f'exec: "{self.config.git_binary}": executable file not found in $PATH'
            )
        return path

    def _execute(
        self,
        git: str,
        args: list[str],
        cwd: str | None,
        repo_name: str | None,
    ) -> bytes:
        start_time = time.perf_counter()
        try:
            result = subprocess.run(
                [git, *args],
                cwd=cwd,
                capture_output=True,
                timeout=self.config.command_timeout,
            )
        except subprocess.TimeoutExpired as e:
            log_git_command(repo_name, args, None, _elapsed_ms(start_time))
            status = f"timed out after {self.config.command_timeout:g}s"
            raise ExecutionFailedError(f"git {args[0]} {status}", status=status) from e
        except FileNotFoundError as e:
            # Binary vanished between lookup and exec
            raise ToolNotFoundError(str(e)) from e

        stderr = result.stderr.decode("utf-8", errors="replace")
        log_git_command(repo_name, args, result.returncode, _elapsed_ms(start_time), stderr)

        if result.returncode != 0:
            status = f"exit status {result.returncode}"
            raise ExecutionFailedError(
                f"git {args[0]} failed ({status}): {stderr.strip()}",
                status=status,
                stderr=stderr,
            )
        return result.stdout


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000
