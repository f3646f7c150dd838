"""Unit tests for configuration resolution."""

import pytest

from lagoon_cli.constants import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_CACHE_DIR,
    DEFAULT_CACHE_TIMEOUT,
    DEFAULT_SSH_HOST,
    DEFAULT_SSH_PORT,
    DEFAULT_SSH_TIMEOUT,
)
from lagoon_cli.exceptions import ConfigurationError, MissingSettingError
from lagoon_cli.models import SSHEndpoint
from lagoon_cli.services import ConfigResolver, load_lagoon_yml


class TestConfigResolver:
    """Tests for ConfigResolver."""

    @pytest.fixture
    def resolver(self) -> ConfigResolver:
        return ConfigResolver()

    def test_defaults(self, resolver):
        """Test built-in defaults when nothing is configured."""
        settings = resolver.resolve({}, {})

        assert settings.api_endpoint == DEFAULT_API_ENDPOINT
        assert settings.ssh_endpoint == SSHEndpoint(DEFAULT_SSH_HOST, DEFAULT_SSH_PORT)
        assert settings.project_name == ""
        assert settings.ssh_timeout_seconds == DEFAULT_SSH_TIMEOUT
        assert settings.cache_timeout_seconds == DEFAULT_CACHE_TIMEOUT
        assert settings.override_token is None
        assert settings.cache_disabled is False
        assert settings.aliases_disabled is False

    def test_local_config_over_defaults(self, resolver):
        """Test .lagoon.yml values replace defaults."""
        settings = resolver.resolve(
            {
                "api": "https://api.example.com/graphql",
                "ssh": "ssh.example.com:2222",
                "project": "acme",
                "ssh_port_timeout": 10,
            },
            {},
        )

        assert settings.api_endpoint == "https://api.example.com/graphql"
        assert settings.ssh_endpoint == SSHEndpoint("ssh.example.com", 2222)
        assert settings.project_name == "acme"
        assert settings.ssh_timeout_seconds == 10

    def test_environment_over_local_config(self, resolver):
        """Test environment overrides win over .lagoon.yml."""
        settings = resolver.resolve(
            {"api": "https://yml/graphql", "ssh": "yml:1", "project": "yml"},
            {
                "LAGOON_OVERRIDE_API": "https://env/graphql",
                "LAGOON_OVERRIDE_SSH": "env.example.com:4000",
                "LAGOON_PROJECT": "env-project",
                "LAGOON_OVERRIDE_SSH_TIMEOUT": "45",
                "LAGOON_OVERRIDE_JWT_TOKEN": "override",
                "LAGOON_SSH_KEY": "~/.ssh/lagoon",
            },
        )

        assert settings.api_endpoint == "https://env/graphql"
        assert settings.ssh_endpoint == SSHEndpoint("env.example.com", 4000)
        assert settings.project_name == "env-project"
        assert settings.ssh_timeout_seconds == 45
        assert settings.override_token == "override"
        assert settings.ssh_key_path == "~/.ssh/lagoon"

    def test_empty_environment_value_does_not_override(self, resolver):
        """Test empty overrides fall through to the next source."""
        settings = resolver.resolve({"project": "acme"}, {"LAGOON_PROJECT": ""})

        assert settings.project_name == "acme"

    @pytest.mark.parametrize("value", ["abc", "", "0", "-5", None, "1.5"])
    def test_invalid_ssh_timeout_falls_back(self, resolver, value):
        """Test numeric fields never raise."""
        settings = resolver.resolve({"ssh_port_timeout": value}, {})

        assert settings.ssh_timeout_seconds == DEFAULT_SSH_TIMEOUT

    def test_cache_timeout_accepts_zero(self, resolver):
        """Test cache timeout may be zero but not negative."""
        assert resolver.resolve({"cache_timeout": 0}, {}).cache_timeout_seconds == 0
        assert (
            resolver.resolve({"cache_timeout": -1}, {}).cache_timeout_seconds
            == DEFAULT_CACHE_TIMEOUT
        )

    @pytest.mark.parametrize(
        "name", ["LAGOON_IGNORE_CACHE", "LAGOON_IGNORE_DRUSHCACHE"]
    )
    def test_cache_bypass_toggle(self, resolver, name):
        """Test presence of the toggle disables the cache, even when empty."""
        assert resolver.resolve({}, {name: ""}).cache_disabled is True

    def test_disable_aliases_toggle(self, resolver):
        """Test alias discovery can be disabled."""
        assert resolver.resolve({}, {"LAGOON_DISABLE_ALIASES": "1"}).aliases_disabled

    def test_missing_project_is_deferred(self, resolver):
        """Test missing project name only fails when required."""
        settings = resolver.resolve({}, {})

        with pytest.raises(MissingSettingError) as exc_info:
            settings.require_project_name()

        assert exc_info.value.field_name == "project"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_cache_dir_default(self, resolver):
        """Test the cache lives in the per-user cache directory by default."""
        assert resolver.resolve({}, {}).cache_dir == DEFAULT_CACHE_DIR

    def test_cache_dir_from_environment(self, resolver, tmp_path):
        """Test LAGOON_CACHE_DIR is read from the given mapping."""
        settings = resolver.resolve({}, {"LAGOON_CACHE_DIR": str(tmp_path)})

        assert settings.cache_dir == str(tmp_path)

    def test_tasks_are_kept(self, resolver):
        """Test rollout task lists are carried into settings."""
        tasks = {"post-rollout": [{"run": {"command": "drush cr", "service": "cli"}}]}
        settings = resolver.resolve({"tasks": tasks}, {})

        assert settings.tasks == tasks


class TestSSHEndpoint:
    """Tests for SSH endpoint parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("ssh.example.com:32222", ("ssh.example.com", 32222)),
            ("ssh.example.com", ("ssh.example.com", DEFAULT_SSH_PORT)),
            ("ssh.example.com:abc", ("ssh.example.com", DEFAULT_SSH_PORT)),
            (":2222", (DEFAULT_SSH_HOST, 2222)),
            (None, (DEFAULT_SSH_HOST, DEFAULT_SSH_PORT)),
        ],
    )
    def test_parse(self, value, expected):
        endpoint = SSHEndpoint.parse(value)

        assert (endpoint.host, endpoint.port) == expected


class TestLoadLagoonYml:
    """Tests for .lagoon.yml loading."""

    def test_missing_file(self, tmp_path):
        assert load_lagoon_yml(tmp_path) == {}

    def test_no_project_root(self):
        assert load_lagoon_yml(None) == {}

    def test_empty_file(self, tmp_path):
        (tmp_path / ".lagoon.yml").write_text("")

        assert load_lagoon_yml(tmp_path) == {}

    def test_valid_file(self, tmp_path):
        (tmp_path / ".lagoon.yml").write_text(
            "project: acme\nssh: ssh.example.com:32222\n"
        )

        assert load_lagoon_yml(tmp_path) == {
            "project": "acme",
            "ssh": "ssh.example.com:32222",
        }

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / ".lagoon.yml").write_text("project: [unclosed\n")

        with pytest.raises(ConfigurationError):
            load_lagoon_yml(tmp_path)

    def test_non_mapping(self, tmp_path):
        (tmp_path / ".lagoon.yml").write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            load_lagoon_yml(tmp_path)
