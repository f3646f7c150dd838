"""
Configuration Resolver

Merges .lagoon.yml values, environment overrides and defaults into Settings.
"""

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from lagoon_cli.constants import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_CACHE_DIR,
    DEFAULT_CACHE_TIMEOUT,
    DEFAULT_SSH_TIMEOUT,
    ENV_CACHE_DIR,
    ENV_DISABLE_ALIASES,
    ENV_IGNORE_CACHE,
    ENV_OVERRIDE_API,
    ENV_OVERRIDE_JWT_TOKEN,
    ENV_OVERRIDE_SSH,
    ENV_OVERRIDE_SSH_TIMEOUT,
    ENV_PROJECT,
    ENV_SSH_KEY,
    LAGOON_YML,
)
from lagoon_cli.exceptions import ConfigurationError
from lagoon_cli.models.settings import Settings, SSHEndpoint


def load_lagoon_yml(project_root: Optional[Path]) -> dict:
    """
    Load .lagoon.yml from the project root.

    Args:
        project_root: Directory containing .lagoon.yml (None for no project)

    Returns:
        Parsed mapping, empty if the file is missing or empty

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    if project_root is None:
        return {}

    lagoon_yml = Path(project_root) / LAGOON_YML
    if not lagoon_yml.exists():
        return {}

    try:
        with open(lagoon_yml) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {lagoon_yml}", context=str(e)
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{lagoon_yml} must contain a mapping",
            context=f"Found: {type(data).__name__}",
        )
    return data


def _first(*values: Any) -> Any:
    """Return the first truthy value."""
    for value in values:
        if value:
            return value
    return None


def _parse_int(value: Any, default: int, minimum: int) -> int:
    """Parse an integer, falling back to default when absent or invalid."""
    if value is None or value == "" or isinstance(value, bool):
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


class ConfigResolver:
    """
    Resolve effective Settings.

    Precedence (highest wins):
    - environment variable overrides
    - .lagoon.yml values
    - built-in defaults
    """

    def resolve(
        self, local_config: Optional[Mapping[str, Any]], env: Mapping[str, str]
    ) -> Settings:
        """
        Build Settings from the project config and environment.

        Never raises on missing values: an unresolved project name is reported
        by the first operation that needs it.

        Args:
            local_config: Parsed .lagoon.yml mapping
            env: Process environment (usually os.environ)

        Returns:
            Immutable Settings
        """
        local_config = local_config or {}

        api_endpoint = _first(
            env.get(ENV_OVERRIDE_API), local_config.get("api"), DEFAULT_API_ENDPOINT
        )
        ssh_endpoint = SSHEndpoint.parse(
            _first(env.get(ENV_OVERRIDE_SSH), local_config.get("ssh"))
        )
        project_name = _first(env.get(ENV_PROJECT), local_config.get("project")) or ""

        ssh_timeout = _parse_int(
            _first(
                env.get(ENV_OVERRIDE_SSH_TIMEOUT), local_config.get("ssh_port_timeout")
            ),
            DEFAULT_SSH_TIMEOUT,
            minimum=1,
        )
        cache_timeout = _parse_int(
            local_config.get("cache_timeout"), DEFAULT_CACHE_TIMEOUT, minimum=0
        )

        tasks = local_config.get("tasks")
        if not isinstance(tasks, dict):
            tasks = {}

        return Settings(
            api_endpoint=str(api_endpoint),
            ssh_endpoint=ssh_endpoint,
            project_name=str(project_name).strip(),
            ssh_timeout_seconds=ssh_timeout,
            cache_timeout_seconds=cache_timeout,
            override_token=env.get(ENV_OVERRIDE_JWT_TOKEN) or None,
            ssh_key_path=env.get(ENV_SSH_KEY) or None,
            cache_disabled=any(name in env for name in ENV_IGNORE_CACHE),
            aliases_disabled=bool(env.get(ENV_DISABLE_ALIASES)),
            cache_dir=env.get(ENV_CACHE_DIR) or DEFAULT_CACHE_DIR,
            tasks=tasks,
        )

    def resolve_for_project(
        self, project_root: Optional[Path], env: Mapping[str, str]
    ) -> Settings:
        """Load .lagoon.yml from project_root and resolve Settings."""
        return self.resolve(load_lagoon_yml(project_root), env)
