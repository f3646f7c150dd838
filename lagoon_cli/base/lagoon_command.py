"""
Lagoon Command Base Class

Base class for commands that talk to Lagoon.
Resolves settings once and wires the services around a shared cache.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from .base_command import BaseCommand
from lagoon_cli.models.results import DiscoveryResult, ResultStatus
from lagoon_cli.models.settings import Settings
from lagoon_cli.services import (
    AliasDiscoveryService,
    ConfigResolver,
    EnvironmentClient,
    ResponseCache,
    SSHService,
    TokenProvider,
)
from lagoon_cli.utils import find_project_root


class LagoonCommand(BaseCommand):
    """
    Base class for Lagoon commands.

    Provides:
    - Settings resolved from .lagoon.yml and the environment
    - One cache instance shared by token and environment lookups
    - Lazily created services
    """

    def __init__(
        self,
        verbose: bool = False,
        json_output: bool = False,
        log_file: Optional[Path] = None,
        project_root: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(verbose=verbose, json_output=json_output, log_file=log_file)
        self.env = os.environ if env is None else env
        self.project_root = project_root or find_project_root()
        self._settings: Optional[Settings] = None
        self.cache: Optional[ResponseCache] = None
        self.ssh_service = SSHService()

    @property
    def settings(self) -> Settings:
        """Effective settings (resolved on first access)."""
        if self._settings is None:
            self._settings = ConfigResolver().resolve_for_project(
                self.project_root, self.env
            )
        return self._settings

    def ensure_cache(self) -> ResponseCache:
        """
        Ensure the shared cache is initialized.

        Returns:
            ResponseCache instance
        """
        if self.cache is None:
            self.cache = ResponseCache(
                cache_dir=self.settings.cache_dir,
                bypass=self.settings.cache_disabled,
                logger=self.logger,
            )
        return self.cache

    def token_provider(self) -> TokenProvider:
        """Token provider using the shared cache."""
        return TokenProvider(
            self.ensure_cache(), ssh_service=self.ssh_service, logger=self.logger
        )

    def discovery_service(self) -> AliasDiscoveryService:
        """Discovery pipeline using the shared cache."""
        return AliasDiscoveryService(
            self.token_provider(),
            EnvironmentClient(self.ensure_cache(), logger=self.logger),
            logger=self.logger,
        )

    def report_result(self, result: DiscoveryResult) -> bool:
        """
        Report a non-successful discovery result.

        Returns:
            True if the caller should go on to output aliases
        """
        if result.is_success:
            return True

        if result.status == ResultStatus.SKIPPED:
            self.print_dim(result.message)
        elif result.is_failure:
            self.handle_error(result.error or Exception(result.message))
        elif self.logger:
            self.logger.warning(result.message)
        else:
            self.print_warning(result.message)

        if self.json_output:
            self.output_json(
                {
                    "project": result.project_name,
                    "status": result.status.value,
                    "message": result.message,
                    "aliases": [],
                },
                exit_code=result.exit_code,
            )
        elif result.exit_code:
            raise SystemExit(result.exit_code)
        return False
