"""Pytest configuration and fixtures."""

import json
from typing import List, Optional

import pytest
import requests

from lagoon_cli.exceptions import SSHTransportError
from lagoon_cli.models import Settings, SSHEndpoint, SSHResult
from lagoon_cli.services import ResponseCache

LAGOON_ENV_VARS = [
    "LAGOON_OVERRIDE_API",
    "LAGOON_OVERRIDE_SSH",
    "LAGOON_PROJECT",
    "LAGOON_OVERRIDE_SSH_TIMEOUT",
    "LAGOON_OVERRIDE_JWT_TOKEN",
    "LAGOON_SSH_KEY",
    "LAGOON_IGNORE_CACHE",
    "LAGOON_IGNORE_DRUSHCACHE",
    "LAGOON_DISABLE_ALIASES",
    "LAGOON_CACHE_DIR",
    "FORCE_COLOR",
    "TTY_COMPATIBLE",
]


class FakeClock:
    """Controllable time source."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSSHService:
    """SSH transport double that records calls."""

    def __init__(self, result: Optional[SSHResult] = None, error: Optional[Exception] = None):
        self.result = result or SSHResult(returncode=0, stdout="tok123\n")
        self.error = error
        self.calls: List[tuple] = []
        self.interactive_calls: List[tuple] = []

    def execute_command(self, connection, command, timeout=30, capture_output=True):
        self.calls.append((connection, command, timeout))
        if self.error is not None:
            raise self.error
        return self.result

    def run_interactive(self, connection, command):
        self.interactive_calls.append((connection, command))
        return SSHResult(returncode=0, host=connection.host, command=command)


class FakeResponse:
    """Minimal requests.Response stand-in."""

    def __init__(self, status_code: int = 200, body=None):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body or {})


class FakeSession:
    """HTTP session double that records POSTs."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response or FakeResponse(200, {"data": {"project": None}})
        self.error = error
        self.calls: List[dict] = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append(
            {"url": url, "json": json, "headers": headers, "timeout": timeout}
        )
        if self.error is not None:
            raise self.error
        return self.response


def api_body(environments, production="master", **project_fields) -> dict:
    """Build a Lagoon API response body."""
    project = {
        "productionEnvironment": production,
        "standbyProductionEnvironment": None,
        "productionAlias": None,
        "standbyAlias": None,
        "environments": environments,
    }
    project.update(project_fields)
    return {"data": {"project": project}}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove LAGOON_* variables inherited from the host."""
    for name in LAGOON_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> ResponseCache:
    """In-memory cache on a fake clock."""
    return ResponseCache(clock=clock)


@pytest.fixture
def settings() -> Settings:
    """Settings for the 'acme' project."""
    return Settings(
        api_endpoint="https://api.example.com/graphql",
        ssh_endpoint=SSHEndpoint("ssh.example.com", 32222),
        project_name="acme",
        ssh_timeout_seconds=30,
        cache_timeout_seconds=600,
    )


@pytest.fixture
def ssh_service() -> FakeSSHService:
    return FakeSSHService()


@pytest.fixture
def acme_body() -> dict:
    return api_body(
        [
            {
                "name": "master",
                "kubernetesNamespaceName": "acme-master",
                "kubernetes": {"sshHost": None, "sshPort": None},
            }
        ]
    )


@pytest.fixture
def session(acme_body) -> FakeSession:
    return FakeSession(FakeResponse(200, acme_body))


@pytest.fixture
def connection_error() -> Exception:
    return requests.exceptions.ConnectionError("Connection refused")


@pytest.fixture
def ssh_timeout_error() -> Exception:
    return SSHTransportError(
        "SSH command timed out after 30s", context="Host: ssh.example.com:32222"
    )
