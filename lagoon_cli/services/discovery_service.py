"""
Alias Discovery Service

Runs the token -> environments -> aliases pipeline for one project.
"""

from typing import Optional

from lagoon_cli.exceptions import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    EmptyResultWarning,
)
from lagoon_cli.logger import CommandLogger, NullLogger
from lagoon_cli.models.results import DiscoveryResult, ResultStatus
from lagoon_cli.models.settings import Settings
from lagoon_cli.services.alias_builder import AliasBuilder
from lagoon_cli.services.environment_client import EnvironmentClient
from lagoon_cli.services.token_provider import TokenProvider


class AliasDiscoveryService:
    """
    Discover environments and build aliases.

    Every pipeline error is recovered into a DiscoveryResult; nothing is
    retried and no partial alias list is returned on failure.
    """

    def __init__(
        self,
        token_provider: TokenProvider,
        environment_client: EnvironmentClient,
        alias_builder: Optional[AliasBuilder] = None,
        logger: Optional[CommandLogger] = None,
    ):
        self.token_provider = token_provider
        self.environment_client = environment_client
        self.alias_builder = alias_builder or AliasBuilder()
        self.logger = logger or NullLogger()

    def discover(self, settings: Settings) -> DiscoveryResult:
        """
        Run discovery.

        Args:
            settings: Effective settings

        Returns:
            DiscoveryResult with aliases on success
        """
        if settings.aliases_disabled:
            self.logger.debug("Alias discovery disabled by LAGOON_DISABLE_ALIASES")
            return DiscoveryResult(
                status=ResultStatus.SKIPPED,
                message="Alias discovery is disabled",
                project_name=settings.project_name,
            )

        try:
            project_name = settings.require_project_name()
            token = self.token_provider.get_token(settings)
            environments = self.environment_client.fetch_environments(settings, token)

            if environments.is_empty:
                raise EmptyResultWarning(project_name)

            aliases = self.alias_builder.build(environments, settings)
            if not aliases:
                raise EmptyResultWarning(project_name)
        except EmptyResultWarning as e:
            return DiscoveryResult(
                status=ResultStatus.WARNING,
                message=e.message,
                project_name=settings.project_name,
                error=e,
            )
        except ConfigurationError as e:
            return self._failure(settings, e, ResultStatus.WARNING)
        except (AuthenticationError, ApiError) as e:
            return self._failure(settings, e, ResultStatus.FAILURE)

        self.logger.debug(f"Discovered {len(aliases)} aliases for '{project_name}'")
        return DiscoveryResult(
            status=ResultStatus.SUCCESS,
            message=f"Found {len(aliases)} environments",
            project_name=project_name,
            aliases=aliases,
        )

    @staticmethod
    def _failure(
        settings: Settings, error: Exception, status: ResultStatus
    ) -> DiscoveryResult:
        return DiscoveryResult(
            status=status,
            message=getattr(error, "message", str(error)),
            project_name=settings.project_name,
            error=error,
        )
