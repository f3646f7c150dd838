"""
Alias Models

Site alias records derived from environment records.
"""

from dataclasses import dataclass

from lagoon_cli.constants import ALIAS_NAMESPACE, PRODUCTION_SUFFIX


@dataclass(frozen=True)
class Alias:
    """Connection details for one remote environment."""

    alias_name: str
    environment_name: str
    is_production: bool
    target_host: str
    target_user: str
    port: int
    files_path: str
    ssh_options: str

    @property
    def qualified_name(self) -> str:
        """Alias name with the namespace prefix (e.g. '@lagoon.acme-master')."""
        return f"@{ALIAS_NAMESPACE}.{self.alias_name}"

    @property
    def display_name(self) -> str:
        """Qualified name with the production marker."""
        if self.is_production:
            return f"{self.qualified_name} {PRODUCTION_SUFFIX}"
        return self.qualified_name

    @property
    def connection_string(self) -> str:
        """Get SSH connection string (user@host)."""
        return f"{self.target_user}@{self.target_host}"

    def to_dict(self) -> dict:
        """Convert to an alias document entry."""
        return {
            "host": self.target_host,
            "user": self.target_user,
            "paths": {"files": self.files_path},
            "ssh": {"options": self.ssh_options, "tty": "false"},
        }

    def __repr__(self) -> str:
        return f"Alias(name={self.alias_name}, production={self.is_production})"
