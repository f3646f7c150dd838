"""
Settings Models

Immutable configuration resolved once per invocation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from lagoon_cli.constants import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_CACHE_DIR,
    DEFAULT_CACHE_TIMEOUT,
    DEFAULT_SSH_HOST,
    DEFAULT_SSH_PORT,
    DEFAULT_SSH_TIMEOUT,
    ERROR_PROJECT_NOT_FOUND,
)
from lagoon_cli.exceptions import MissingSettingError


@dataclass(frozen=True)
class SSHEndpoint:
    """Host and port of the Lagoon SSH service."""

    host: str = DEFAULT_SSH_HOST
    port: int = DEFAULT_SSH_PORT

    @classmethod
    def parse(cls, value: Optional[str]) -> "SSHEndpoint":
        """
        Parse a 'host[:port]' string.

        A missing host or a missing/non-numeric port falls back to defaults.
        """
        if not value:
            return cls()

        host, _, port = str(value).strip().partition(":")
        try:
            parsed_port = int(port)
        except ValueError:
            parsed_port = DEFAULT_SSH_PORT
        if parsed_port <= 0:
            parsed_port = DEFAULT_SSH_PORT

        return cls(host=host or DEFAULT_SSH_HOST, port=parsed_port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class Settings:
    """Effective configuration for one invocation."""

    api_endpoint: str = DEFAULT_API_ENDPOINT
    ssh_endpoint: SSHEndpoint = field(default_factory=SSHEndpoint)
    project_name: str = ""
    ssh_timeout_seconds: int = DEFAULT_SSH_TIMEOUT
    cache_timeout_seconds: int = DEFAULT_CACHE_TIMEOUT
    override_token: Optional[str] = None
    ssh_key_path: Optional[str] = None
    cache_disabled: bool = False
    aliases_disabled: bool = False
    cache_dir: str = DEFAULT_CACHE_DIR
    tasks: Dict[str, Any] = field(default_factory=dict, compare=False)

    def require_project_name(self) -> str:
        """
        Get project name, failing when it was never resolved.

        Raises:
            MissingSettingError: If no source provided a project name
        """
        if not self.project_name:
            raise MissingSettingError("project", ERROR_PROJECT_NOT_FOUND)
        return self.project_name

    def __repr__(self) -> str:
        return (
            f"Settings(project={self.project_name!r}, api={self.api_endpoint}, "
            f"ssh={self.ssh_endpoint})"
        )
