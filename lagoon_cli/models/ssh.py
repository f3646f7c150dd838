"""
SSH Configuration Models

Dataclass models for SSH operations.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from lagoon_cli.constants import DEFAULT_SSH_USER, SSH_CONNECTION_TIMEOUT


@dataclass(frozen=True)
class SSHConnection:
    """SSH connection details for a specific host."""

    host: str
    port: int
    user: str = DEFAULT_SSH_USER
    key_path: Optional[str] = None
    connect_timeout: int = SSH_CONNECTION_TIMEOUT
    # Only used when a TTY is needed (rollout tasks); token fetches never prompt
    batch_mode: bool = True

    @property
    def key_path_expanded(self) -> Optional[Path]:
        """Get expanded key path (resolves ~)."""
        if self.key_path:
            return Path(self.key_path).expanduser()
        return None

    @property
    def connection_string(self) -> str:
        """Get SSH connection string (user@host)."""
        return f"{self.user}@{self.host}"

    @property
    def ssh_command_prefix(self) -> List[str]:
        """Get SSH command prefix for subprocess."""
        prefix = [
            "ssh",
            "-p",
            str(self.port),
            "-o",
            f"ConnectTimeout={self.connect_timeout}",
            "-o",
            "LogLevel=FATAL",
            "-o",
            "UserKnownHostsFile=/dev/null",
            "-o",
            "StrictHostKeyChecking=no",
        ]

        if self.batch_mode:
            prefix.extend(["-o", "BatchMode=yes"])

        if self.key_path_expanded:
            prefix.extend(["-i", str(self.key_path_expanded)])

        prefix.append(self.connection_string)
        return prefix

    def build_command(self, remote_command: str) -> List[str]:
        """Build full SSH command with remote command."""
        return self.ssh_command_prefix + [remote_command]

    def __repr__(self) -> str:
        return f"SSHConnection(host={self.host}, port={self.port}, user={self.user})"
