"""
Environment Models

Lagoon project and environment records parsed from the API response.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

# Field names that identify an environment's namespace, highest precedence
# first. Older Lagoon releases only expose openshiftProjectName.
NAMESPACE_FIELDS = ("kubernetesNamespaceName", "openshiftProjectName", "name")


def _optional_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class EnvironmentRecord:
    """One deployed environment of a project."""

    name: str
    namespace: str
    ssh_host: Optional[str] = None
    ssh_port: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        """Records without a name cannot be turned into aliases."""
        return bool(self.name)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnvironmentRecord":
        """
        Create from an API environment object.

        The namespace is taken from the first non-empty field in
        NAMESPACE_FIELDS. SSH overrides live under a nested 'kubernetes' key.
        """
        name = data.get("name") or ""
        namespace = ""
        for field_name in NAMESPACE_FIELDS:
            if data.get(field_name):
                namespace = str(data[field_name])
                break

        cluster = data.get("kubernetes") or {}
        if not isinstance(cluster, dict):
            cluster = {}

        return cls(
            name=str(name),
            namespace=namespace,
            ssh_host=cluster.get("sshHost") or None,
            ssh_port=_optional_int(cluster.get("sshPort")),
        )


@dataclass(frozen=True)
class ProjectEnvironments:
    """Environments of a Lagoon project plus its production designation."""

    production_environment: Optional[str] = None
    standby_production_environment: Optional[str] = None
    production_alias: Optional[str] = None
    standby_alias: Optional[str] = None
    environments: Tuple[EnvironmentRecord, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if the project has no environments."""
        return len(self.environments) == 0

    def get_environment(self, name: str) -> Optional[EnvironmentRecord]:
        """Get environment record by name."""
        for environment in self.environments:
            if environment.name == name:
                return environment
        return None

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "ProjectEnvironments":
        """
        Create from a decoded API response body.

        A missing or null project yields an empty result.
        """
        project = (data.get("data") or {}).get("project") or {}

        environments = []
        for item in project.get("environments") or []:
            if isinstance(item, dict):
                environments.append(EnvironmentRecord.from_dict(item))

        return cls(
            production_environment=project.get("productionEnvironment"),
            standby_production_environment=project.get(
                "standbyProductionEnvironment"
            ),
            production_alias=project.get("productionAlias"),
            standby_alias=project.get("standbyAlias"),
            environments=tuple(environments),
        )

    def __repr__(self) -> str:
        return (
            f"ProjectEnvironments(production={self.production_environment}, "
            f"environments={len(self.environments)})"
        )
