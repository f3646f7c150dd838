"""Tests for the discovery pipeline, including end-to-end scenarios."""

from dataclasses import replace

import pytest

from lagoon_cli.exceptions import (
    ApiError,
    AuthenticationError,
    EmptyResultWarning,
    MissingSettingError,
)
from lagoon_cli.models import ResultStatus, SSHResult
from lagoon_cli.services import AliasDiscoveryService, EnvironmentClient, TokenProvider
from lagoon_cli.services.alias_builder import format_alias_lines
from tests.conftest import FakeResponse, FakeSession, FakeSSHService, api_body


def make_service(cache, ssh_service, session) -> AliasDiscoveryService:
    return AliasDiscoveryService(
        TokenProvider(cache, ssh_service=ssh_service),
        EnvironmentClient(cache, session=session),
    )


class TestAliasDiscoveryService:
    """Tests for AliasDiscoveryService.discover."""

    def test_end_to_end(self, cache, settings, ssh_service, session, clock):
        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.status == ResultStatus.SUCCESS
        assert result.project_name == "acme"
        assert format_alias_lines(result.aliases) == ["@lagoon.acme-master (production)"]
        assert session.calls[0]["headers"]["Authorization"] == "Bearer tok123"

        entry = cache.get("jwt_token")
        assert entry.payload == "tok123"
        assert entry.expires_at == clock.now + 600

    def test_second_invocation_uses_cache(self, cache, settings, ssh_service, session, clock):
        make_service(cache, ssh_service, session).discover(settings)
        clock.advance(60)

        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.is_success
        assert len(ssh_service.calls) == 1
        assert len(session.calls) == 1

    def test_bypass_refetches(self, clock, settings, ssh_service, session):
        from lagoon_cli.services import ResponseCache

        cache = ResponseCache(bypass=True, clock=clock)
        make_service(cache, ssh_service, session).discover(settings)
        make_service(cache, ssh_service, session).discover(settings)

        assert len(ssh_service.calls) == 2
        assert len(session.calls) == 2

    def test_override_token(self, cache, settings, ssh_service, session):
        settings = replace(settings, override_token="override")

        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.is_success
        assert ssh_service.calls == []
        assert session.calls[0]["headers"]["Authorization"] == "Bearer override"

    def test_missing_project_name(self, cache, settings, ssh_service, session):
        settings = replace(settings, project_name="")

        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.status == ResultStatus.WARNING
        assert isinstance(result.error, MissingSettingError)
        assert "project name" in result.message
        assert result.aliases == []
        assert ssh_service.calls == []
        assert session.calls == []

    def test_ssh_failure_halts(self, cache, settings, session):
        ssh_service = FakeSSHService(SSHResult(returncode=255))

        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.status == ResultStatus.FAILURE
        assert isinstance(result.error, AuthenticationError)
        assert result.exit_code == 1
        assert session.calls == []
        assert cache.get("jwt_token") is None

    def test_api_failure_halts(self, cache, settings, ssh_service):
        session = FakeSession(FakeResponse(500, "error"))

        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.status == ResultStatus.FAILURE
        assert isinstance(result.error, ApiError)
        assert result.aliases == []

    def test_empty_environments_warns(self, cache, settings, ssh_service):
        session = FakeSession(FakeResponse(200, {"data": {"project": {"environments": []}}}))

        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.status == ResultStatus.WARNING
        assert isinstance(result.error, EmptyResultWarning)
        assert "'acme'" in result.message
        assert result.aliases == []
        assert result.exit_code == 0

    def test_disabled(self, cache, settings, ssh_service, session):
        settings = replace(settings, aliases_disabled=True)

        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.status == ResultStatus.SKIPPED
        assert ssh_service.calls == []
        assert session.calls == []

    def test_unexpected_errors_propagate(self, cache, settings, session):
        ssh_service = FakeSSHService(error=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            make_service(cache, ssh_service, session).discover(settings)

    def test_only_nameless_environments_warns(self, cache, settings, ssh_service):
        body = api_body([{"name": "", "kubernetesNamespaceName": "acme-orphan"}])
        session = FakeSession(FakeResponse(200, body))

        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.status == ResultStatus.WARNING
        assert isinstance(result.error, EmptyResultWarning)
        assert result.aliases == []

    def test_unwritable_cache_directory_still_succeeds(
        self, tmp_path, clock, settings, ssh_service, session
    ):
        from lagoon_cli.services import ResponseCache

        not_a_dir = tmp_path / "not-a-dir"
        not_a_dir.write_text("")
        cache = ResponseCache(cache_dir=not_a_dir, clock=clock)

        result = make_service(cache, ssh_service, session).discover(settings)

        assert result.status == ResultStatus.SUCCESS
        assert format_alias_lines(result.aliases) == ["@lagoon.acme-master (production)"]
        assert cache.get_payload("jwt_token") == "tok123"
