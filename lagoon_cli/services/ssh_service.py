"""SSH service for executing commands on Lagoon SSH endpoints."""

import subprocess
import time
from typing import Optional

from lagoon_cli.exceptions import SSHTransportError
from lagoon_cli.models.results import SSHResult
from lagoon_cli.models.ssh import SSHConnection


class SSHService:
    """Service for SSH operations."""

    def execute_command(
        self,
        connection: SSHConnection,
        command: str,
        timeout: Optional[int] = 30,
        capture_output: bool = True,
    ) -> SSHResult:
        """
        Execute command on remote host via SSH.

        Args:
            connection: Host, port, user and key to connect with
            command: Command to execute
            timeout: Command timeout in seconds
            capture_output: Whether to capture stdout/stderr

        Returns:
            SSHResult with execution details

        Raises:
            SSHTransportError: If ssh could not be started or timed out
        """
        ssh_cmd = connection.build_command(command)

        start_time = time.time()

        try:
            result = subprocess.run(
                ssh_cmd,
                capture_output=capture_output,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise SSHTransportError(
                f"SSH command timed out after {timeout}s",
                context=f"Host: {connection.host}:{connection.port}, Command: {command}",
            ) from e
        except OSError as e:
            raise SSHTransportError(
                f"SSH command failed: {e}",
                context=f"Host: {connection.host}:{connection.port}, Command: {command}",
            ) from e

        return SSHResult(
            returncode=result.returncode,
            stdout=result.stdout if capture_output else "",
            stderr=result.stderr if capture_output else "",
            host=connection.host,
            command=command,
            duration_seconds=time.time() - start_time,
        )

    def run_interactive(self, connection: SSHConnection, command: str) -> SSHResult:
        """
        Run command with a TTY, streaming output to the terminal.

        Args:
            connection: Host, port, user and key to connect with
            command: Command to execute

        Returns:
            SSHResult (without captured output)
        """
        ssh_cmd = connection.ssh_command_prefix
        ssh_cmd = ssh_cmd[:-1] + ["-t", ssh_cmd[-1], command]

        start_time = time.time()
        try:
            result = subprocess.run(ssh_cmd)
        except OSError as e:
            raise SSHTransportError(
                f"SSH command failed: {e}",
                context=f"Host: {connection.host}:{connection.port}, Command: {command}",
            ) from e

        return SSHResult(
            returncode=result.returncode,
            host=connection.host,
            command=command,
            duration_seconds=time.time() - start_time,
        )
