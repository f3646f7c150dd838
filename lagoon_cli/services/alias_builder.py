"""
Alias Builder

Maps project environments to site aliases and renders them.
"""

from typing import Dict, Iterable, List

import yaml

from lagoon_cli.constants import ALIAS_FILES_PATH, ALIAS_SSH_OPTIONS_FORMAT
from lagoon_cli.models.alias import Alias
from lagoon_cli.models.environments import EnvironmentRecord, ProjectEnvironments
from lagoon_cli.models.settings import Settings


class AliasBuilder:
    """Build aliases from environment records. Pure; no I/O."""

    def build(
        self, project_environments: ProjectEnvironments, settings: Settings
    ) -> List[Alias]:
        """
        Build one alias per environment, in API order.

        Records without a name are skipped.

        Args:
            project_environments: Parsed API result
            settings: Effective settings (supplies the default SSH endpoint)

        Returns:
            Ordered list of aliases
        """
        production = project_environments.production_environment
        return [
            self.build_alias(record, settings, record.name == production)
            for record in project_environments.environments
            if record.is_valid
        ]

    def build_alias(
        self, record: EnvironmentRecord, settings: Settings, is_production: bool
    ) -> Alias:
        """Build the alias for a single environment."""
        port = record.ssh_port or settings.ssh_endpoint.port
        return Alias(
            alias_name=record.namespace or record.name,
            environment_name=record.name,
            is_production=is_production,
            target_host=record.ssh_host or settings.ssh_endpoint.host,
            target_user=record.namespace or record.name,
            port=port,
            files_path=ALIAS_FILES_PATH,
            ssh_options=ALIAS_SSH_OPTIONS_FORMAT.format(port=port),
        )


def format_alias_lines(aliases: Iterable[Alias]) -> List[str]:
    """Alias lines such as '@lagoon.acme-master (production)'."""
    return [alias.display_name for alias in aliases]


def to_alias_document(aliases: Iterable[Alias]) -> Dict[str, dict]:
    """Alias document keyed by environment name."""
    return {alias.environment_name: alias.to_dict() for alias in aliases}


def dump_alias_document(aliases: Iterable[Alias]) -> str:
    """Render the alias document as YAML."""
    document = to_alias_document(aliases)
    if not document:
        return ""
    return yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
