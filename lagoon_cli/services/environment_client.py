"""
Environment Client

Queries the Lagoon GraphQL API for the environments of a project.
"""

import json
from typing import Any, Dict, Optional

import requests

from lagoon_cli.constants import API_REQUEST_TIMEOUT, ENVIRONMENTS_CACHE_KEY_FORMAT
from lagoon_cli.exceptions import ApiError
from lagoon_cli.logger import CommandLogger, NullLogger
from lagoon_cli.models.environments import ProjectEnvironments
from lagoon_cli.models.settings import Settings
from lagoon_cli.services.cache_service import ResponseCache

PROJECT_QUERY = """{
    project:projectByName(name: %s) {
        productionEnvironment,
        standbyProductionEnvironment,
        productionAlias,
        standbyAlias,
        environments {
            name,
            kubernetesNamespaceName,
            openshiftProjectName,
            kubernetes {
                sshHost,
                sshPort
            }
        }
    }
}"""


def build_project_query(project_name: str) -> str:
    """Build the projectByName query; the name is JSON-quoted."""
    return PROJECT_QUERY % json.dumps(project_name)


def cache_key(project_name: str) -> str:
    """Cache identifier for a project's environments."""
    return ENVIRONMENTS_CACHE_KEY_FORMAT.format(project=project_name)


class EnvironmentClient:
    """
    Fetch and parse project environments.

    Responsibilities:
    - Serve cached responses while fresh
    - POST the GraphQL query with a bearer token
    - Map transport and HTTP failures to ApiError
    """

    def __init__(
        self,
        cache: ResponseCache,
        session: Optional[requests.Session] = None,
        timeout: int = API_REQUEST_TIMEOUT,
        logger: Optional[CommandLogger] = None,
    ):
        """
        Initialize environment client.

        Args:
            cache: Cache shared with the token provider
            session: HTTP session (defaults to a new requests.Session)
            timeout: Request timeout in seconds
            logger: Command logger
        """
        self.cache = cache
        self.session = session or requests.Session()
        self.timeout = timeout
        self.logger = logger or NullLogger()

    def fetch_environments(self, settings: Settings, token: str) -> ProjectEnvironments:
        """
        Get environments for the configured project.

        Args:
            settings: Effective settings
            token: Bearer token for the API

        Returns:
            ProjectEnvironments (possibly with no environments)

        Raises:
            MissingSettingError: If no project name was resolved
            ApiError: On transport failure, non-2xx status or unparseable body
        """
        project_name = settings.require_project_name()
        key = cache_key(project_name)

        cached = self.cache.get(key)
        if cached is not None:
            try:
                data = json.loads(cached.payload)
            except ValueError:
                self.logger.debug("Ignoring unreadable cached environments.")
            else:
                self.logger.debug("Found cached environments.")
                return ProjectEnvironments.from_response(data)

        body = self._post_query(settings, token, build_project_query(project_name))
        data = self._decode(body, settings.api_endpoint)

        self.cache.set(key, body, settings.cache_timeout_seconds)
        return ProjectEnvironments.from_response(data)

    def _post_query(self, settings: Settings, token: str, query: str) -> str:
        """Send the query and return the raw response body."""
        endpoint = settings.api_endpoint
        self.logger.debug(
            f"Loading environments for '{settings.project_name}' from the API '{endpoint}'"
        )
        self.logger.debug(f"Sending to api: {query}")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

        try:
            response = self.session.post(
                endpoint,
                json={"query": query},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise ApiError(
                f"Could not connect to Lagoon API {endpoint}",
                endpoint=endpoint,
                context=f"Endpoint: {endpoint}, Cause: {e}",
            ) from e

        if not 200 <= response.status_code < 300:
            raise ApiError(
                f"Lagoon API request failed with status {response.status_code}",
                endpoint=endpoint,
                status_code=response.status_code,
            )

        self.logger.debug(f"Response from api: {len(response.text)} bytes")
        return response.text

    def _decode(self, body: str, endpoint: str) -> Dict[str, Any]:
        """Decode a response body, rejecting non-JSON and error-only payloads."""
        try:
            data = json.loads(body)
        except ValueError as e:
            raise ApiError(
                "Lagoon API returned an invalid response",
                endpoint=endpoint,
                context=f"Endpoint: {endpoint}, Cause: {e}",
            ) from e

        if not isinstance(data, dict):
            raise ApiError(
                "Lagoon API returned an unexpected response", endpoint=endpoint
            )

        errors = data.get("errors")
        if errors and not (data.get("data") or {}).get("project"):
            messages = [
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in errors
            ]
            raise ApiError(
                "Lagoon API returned errors",
                endpoint=endpoint,
                context=f"Endpoint: {endpoint}, Errors: {'; '.join(messages)}",
            )

        return data
