"""
Result Models

Dataclass models for operation results and command outputs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from lagoon_cli.models.alias import Alias


class ResultStatus(Enum):
    """Status of an operation result."""

    SUCCESS = "success"
    FAILURE = "failure"
    WARNING = "warning"
    SKIPPED = "skipped"


@dataclass
class SSHResult:
    """Result of an SSH command execution."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    host: str = ""
    command: str = ""
    duration_seconds: float = 0.0

    @property
    def is_success(self) -> bool:
        """Check if SSH command succeeded."""
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        """Check if SSH command failed."""
        return self.returncode != 0

    @property
    def first_line(self) -> str:
        """First line of stdout with trailing whitespace removed."""
        lines = self.stdout.splitlines()
        return lines[0].rstrip() if lines else ""

    def __repr__(self) -> str:
        return f"SSHResult(host={self.host}, returncode={self.returncode}, duration={self.duration_seconds:.2f}s)"


@dataclass
class DiscoveryResult:
    """Outcome of one environment discovery run."""

    status: ResultStatus
    message: str = ""
    project_name: str = ""
    aliases: List[Alias] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def is_success(self) -> bool:
        """Check if discovery produced aliases."""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if discovery failed."""
        return self.status == ResultStatus.FAILURE

    @property
    def exit_code(self) -> int:
        """Failures exit non-zero, warnings and skips do not."""
        return 1 if self.is_failure else 0

    def __repr__(self) -> str:
        return f"DiscoveryResult(status={self.status.value}, aliases={len(self.aliases)})"


@dataclass
class TaskResult:
    """Result of a single rollout task."""

    command: str
    service: str
    returncode: Optional[int] = None
    skipped: bool = False
    message: str = ""

    @property
    def is_success(self) -> bool:
        """Skipped tasks count as successful."""
        return self.skipped or self.returncode == 0
