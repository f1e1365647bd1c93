"""Clone URL construction.

Pure string formatting over ``Config``; nothing here performs I/O.
"""

from gitwarden.config import Config


def _port_suffix(config: Config) -> str:
    return f":{config.ssh_port}" if config.ssh_port else ""


def read_only_url(name: str, config: Config) -> str:
    """
    Build the anonymous read-only URL of a repository.

    Uses ``readonly_host`` when configured, ``host`` otherwise.

    Examples:
        git://example.com/project.git
        ssh://git@example.com:2222/project.git
    """
    host = config.readonly_host or config.host
    if config.ssh_use:
        return f"ssh://git@{host}{_port_suffix(config)}/{name}.git"
    return f"git://{host}/{name}.git"


def read_write_url(name: str, config: Config) -> str:
    """
    Build the authenticated read/write URL of a repository.

    Examples:
        git@example.com:project.git
        ssh://git@example.com:2222/project.git
    """
    if config.ssh_use:
        return f"ssh://{config.uid}@{config.host}{_port_suffix(config)}/{name}.git"
    return f"{config.uid}@{config.host}:{name}.git"
