"""
Lagoon CLI Domain Models

Clean dataclass-based models for type-safe data handling.
"""

from .alias import Alias
from .cache import CacheEntry
from .environments import EnvironmentRecord, ProjectEnvironments
from .results import (
    DiscoveryResult,
    ResultStatus,
    SSHResult,
    TaskResult,
)
from .settings import Settings, SSHEndpoint
from .ssh import SSHConnection

__all__ = [
    # Settings
    "Settings",
    "SSHEndpoint",
    # Cache
    "CacheEntry",
    # Environments
    "EnvironmentRecord",
    "ProjectEnvironments",
    "Alias",
    # Results
    "DiscoveryResult",
    "ResultStatus",
    "SSHResult",
    "TaskResult",
    # SSH
    "SSHConnection",
]
