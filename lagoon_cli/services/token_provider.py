"""
Token Provider

Retrieves Lagoon API tokens over SSH, with caching.
"""

from typing import Optional

from lagoon_cli.constants import DEFAULT_SSH_USER, TOKEN_CACHE_KEY, TOKEN_COMMAND
from lagoon_cli.exceptions import AuthenticationError, SSHTransportError
from lagoon_cli.logger import CommandLogger, NullLogger, mask_secret
from lagoon_cli.models.settings import Settings
from lagoon_cli.models.ssh import SSHConnection
from lagoon_cli.services.cache_service import TokenCache
from lagoon_cli.services.ssh_service import SSHService


class TokenProvider:
    """
    Resolve a JWT for the Lagoon API.

    Lookup order:
    - LAGOON_OVERRIDE_JWT_TOKEN (no cache, no SSH)
    - token cache
    - `ssh lagoon@<host> token` (result cached)
    """

    def __init__(
        self,
        cache: TokenCache,
        ssh_service: Optional[SSHService] = None,
        logger: Optional[CommandLogger] = None,
    ):
        """
        Initialize token provider.

        Args:
            cache: Cache shared with the environment client
            ssh_service: SSH transport (defaults to subprocess ssh)
            logger: Command logger
        """
        self.cache = cache
        self.ssh_service = ssh_service or SSHService()
        self.logger = logger or NullLogger()

    def get_token(self, settings: Settings) -> str:
        """
        Get a token for the configured project.

        Args:
            settings: Effective settings

        Returns:
            Non-empty token string

        Raises:
            MissingSettingError: If no project name was resolved
            AuthenticationError: If the SSH call failed or returned nothing
        """
        if settings.override_token:
            self.logger.debug("Using token from LAGOON_OVERRIDE_JWT_TOKEN")
            return settings.override_token

        settings.require_project_name()

        cached = self.cache.get(TOKEN_CACHE_KEY)
        if cached is not None and cached.payload:
            self.logger.debug("Found cached JWT token.")
            return cached.payload

        token = self.fetch_token(settings)
        self.cache.set(TOKEN_CACHE_KEY, token, settings.cache_timeout_seconds)
        return token

    def fetch_token(self, settings: Settings) -> str:
        """
        Fetch a fresh token over SSH, bypassing cache and override.

        Raises:
            AuthenticationError: If the SSH call failed or returned nothing
        """
        connection = self.build_connection(settings)
        endpoint = str(settings.ssh_endpoint)

        self.logger.debug(
            "Retrieving token via SSH - " + " ".join(connection.build_command(TOKEN_COMMAND))
        )

        try:
            result = self.ssh_service.execute_command(
                connection, TOKEN_COMMAND, timeout=settings.ssh_timeout_seconds
            )
        except SSHTransportError as e:
            raise AuthenticationError(
                f"Could not retrieve token from {endpoint}", context=e.message
            ) from e

        if result.is_failure:
            raise AuthenticationError(
                f"Token command failed on {endpoint} (exit code {result.returncode})",
                context=result.stderr.strip() or None,
                returncode=result.returncode,
            )

        token = result.first_line.strip()
        if not token:
            raise AuthenticationError(
                f"Token command on {endpoint} returned no output",
                context=result.stderr.strip() or None,
                returncode=result.returncode,
            )

        self.logger.debug(f"JWT token loaded via ssh: {mask_secret(token)}")
        return token

    @staticmethod
    def build_connection(settings: Settings) -> SSHConnection:
        """Connection to the Lagoon token endpoint."""
        return SSHConnection(
            host=settings.ssh_endpoint.host,
            port=settings.ssh_endpoint.port,
            user=DEFAULT_SSH_USER,
            key_path=settings.ssh_key_path,
        )
