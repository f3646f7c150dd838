"""
Lagoon CLI Exception Hierarchy

Clean exception hierarchy for consistent error handling across the CLI.
"""

from typing import Optional

from lagoon_cli.constants import ERROR_NO_ENVIRONMENTS


class LagoonError(Exception):
    """Base exception for all Lagoon CLI errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class ConfigurationError(LagoonError):
    """Raised when configuration is invalid or missing."""

    pass


class MissingSettingError(ConfigurationError):
    """Raised when a required setting could not be resolved."""

    def __init__(self, field_name: str, message: Optional[str] = None):
        self.field_name = field_name
        super().__init__(
            message or f"Required setting '{field_name}' is not set",
            context=f"Missing field: {field_name}",
        )


class SSHTransportError(LagoonError):
    """Raised when the ssh process could not run to completion."""

    pass


class AuthenticationError(LagoonError):
    """Raised when a token could not be retrieved over SSH."""

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        returncode: Optional[int] = None,
    ):
        self.returncode = returncode
        super().__init__(message, context)


class ApiError(LagoonError):
    """Raised when the Lagoon API request fails."""

    def __init__(
        self,
        message: str,
        endpoint: str,
        status_code: Optional[int] = None,
        context: Optional[str] = None,
    ):
        self.endpoint = endpoint
        self.status_code = status_code
        if context is None:
            context = f"Endpoint: {endpoint}"
            if status_code is not None:
                context += f", Status: {status_code}"
        super().__init__(message, context)


class EmptyResultWarning(LagoonError):
    """Raised when the API returned no environments for the project."""

    def __init__(self, project_name: str):
        self.project_name = project_name
        super().__init__(ERROR_NO_ENVIRONMENTS.format(project=project_name))


class TaskError(LagoonError):
    """Raised when a rollout task fails."""

    pass
