"""
gitwarden configuration.

Settings are plain values on a dataclass. ``Config.from_env`` reads them from
``GITWARDEN_*`` environment variables.
"""

import os
from dataclasses import dataclass

from gitwarden.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid {name}: {value!r}. Must be a boolean")


def _parse_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"Invalid {name}: {value!r}. Must be a number")


def _parse_port(name: str, value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ConfigurationError(f"Invalid {name}: {value!r}. Must be an integer")
    if not 0 < port < 65536:
        raise ConfigurationError(f"Invalid {name}: {value!r}. Must be between 1 and 65535")
    return port


@dataclass
class Config:
    """Runtime settings for repository hosting."""

    DEFAULT_BARE_LOCATION = "/var/lib/gitwarden/repositories"
    DEFAULT_DATABASE_URL = "mongodb://127.0.0.1:27017"

    host: str = "localhost"
    bare_location: str = DEFAULT_BARE_LOCATION
    bare_template: str | None = None
    uid: str = "git"
    ssh_use: bool = False
    ssh_port: str | None = None
    readonly_host: str | None = None
    git_binary: str = "git"
    command_timeout: float | None = None
    database_url: str = DEFAULT_DATABASE_URL
    database_name: str = "gitwarden"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create a configuration from environment variables.

        Environment variables:
            GITWARDEN_HOST: Public host name used in clone URLs
            GITWARDEN_BARE_LOCATION: Directory holding the bare repositories
            GITWARDEN_BARE_TEMPLATE: Template directory passed to ``git init``
            GITWARDEN_UID: Remote user in read/write URLs (default: git)
            GITWARDEN_SSH_USE: Build ssh:// URLs (default: false)
            GITWARDEN_SSH_PORT: Port for ssh:// URLs
            GITWARDEN_READONLY_HOST: Host for read-only URLs (default: host)
            GITWARDEN_GIT_BINARY: Name or path of the git executable
            GITWARDEN_COMMAND_TIMEOUT: Seconds before a git command is killed
            GITWARDEN_DATABASE_URL: MongoDB connection string
            GITWARDEN_DATABASE_NAME: MongoDB database name

        Returns:
            Config populated from the environment

        Raises:
            ConfigurationError: If a variable holds an unusable value
        """
        env = os.environ
        config = cls()

        config.host = env.get("GITWARDEN_HOST", config.host)
        config.bare_location = env.get("GITWARDEN_BARE_LOCATION", config.bare_location)
        config.bare_template = env.get("GITWARDEN_BARE_TEMPLATE") or None
        config.uid = env.get("GITWARDEN_UID", config.uid)
        config.ssh_port = env.get("GITWARDEN_SSH_PORT") or None
        config.readonly_host = env.get("GITWARDEN_READONLY_HOST") or None
        config.git_binary = env.get("GITWARDEN_GIT_BINARY", config.git_binary)
        config.database_url = env.get("GITWARDEN_DATABASE_URL", config.database_url)
        config.database_name = env.get("GITWARDEN_DATABASE_NAME", config.database_name)

        if config.ssh_port is not None:
            config.ssh_port = str(_parse_port("GITWARDEN_SSH_PORT", config.ssh_port))

        ssh_use = env.get("GITWARDEN_SSH_USE")
        if ssh_use:
            config.ssh_use = _parse_bool("GITWARDEN_SSH_USE", ssh_use)

        timeout = env.get("GITWARDEN_COMMAND_TIMEOUT")
        if timeout:
            config.command_timeout = _parse_float("GITWARDEN_COMMAND_TIMEOUT", timeout)
            if config.command_timeout <= 0:
                raise ConfigurationError(
                    f"Invalid GITWARDEN_COMMAND_TIMEOUT: {timeout!r}. Must be positive"
                )

        if not config.host:
            raise ConfigurationError("GITWARDEN_HOST must not be empty")
        if not config.bare_location:
            raise ConfigurationError("GITWARDEN_BARE_LOCATION must not be empty")

        return config

    def bare_path(self, name: str) -> str:
        """Return the on-disk path of the bare repository called ``name``."""
        return os.path.join(self.bare_location, f"{name}.git")
