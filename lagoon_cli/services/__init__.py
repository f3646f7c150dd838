"""
Lagoon CLI Services Layer

Token retrieval, environment discovery and alias generation.
"""

from .alias_builder import AliasBuilder
from .cache_service import ResponseCache, TokenCache
from .config_resolver import ConfigResolver, load_lagoon_yml
from .discovery_service import AliasDiscoveryService
from .environment_client import EnvironmentClient
from .rollout_service import RolloutService
from .ssh_service import SSHService
from .token_provider import TokenProvider

__all__ = [
    "AliasBuilder",
    "AliasDiscoveryService",
    "ConfigResolver",
    "EnvironmentClient",
    "ResponseCache",
    "RolloutService",
    "SSHService",
    "TokenCache",
    "TokenProvider",
    "load_lagoon_yml",
]
