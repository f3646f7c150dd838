"""Unit tests for alias building and rendering."""

import yaml

from lagoon_cli.models import EnvironmentRecord, ProjectEnvironments
from lagoon_cli.services import AliasBuilder
from lagoon_cli.services.alias_builder import (
    dump_alias_document,
    format_alias_lines,
    to_alias_document,
)


def project(*records, production="main"):
    return ProjectEnvironments(
        production_environment=production, environments=tuple(records)
    )


MAIN = EnvironmentRecord(name="main", namespace="acme-main")
DEVELOP = EnvironmentRecord(
    name="develop",
    namespace="acme-develop",
    ssh_host="ssh.cluster.example.com",
    ssh_port=2020,
)
FEATURE = EnvironmentRecord(name="feature-x", namespace="acme-feature-x")


class TestAliasBuilder:
    """Tests for AliasBuilder.build."""

    def test_alias_fields(self, settings):
        alias = AliasBuilder().build(project(MAIN), settings)[0]

        assert alias.alias_name == "acme-main"
        assert alias.qualified_name == "@lagoon.acme-main"
        assert alias.environment_name == "main"
        assert alias.is_production is True
        assert alias.target_host == "ssh.example.com"
        assert alias.target_user == "acme-main"
        assert alias.port == 32222
        assert alias.files_path == "/app/web/sites/default/files"
        assert alias.ssh_options == (
            "-o UserKnownHostsFile=/dev/null -o StrictHostKeyChecking=no "
            "-o LogLevel=FATAL -p 32222"
        )

    def test_record_ssh_override(self, settings):
        alias = AliasBuilder().build(project(DEVELOP), settings)[0]

        assert alias.target_host == "ssh.cluster.example.com"
        assert alias.port == 2020
        assert alias.ssh_options.endswith("-p 2020")
        assert alias.is_production is False

    def test_order_is_preserved(self, settings):
        aliases = AliasBuilder().build(project(FEATURE, MAIN, DEVELOP), settings)

        assert [a.environment_name for a in aliases] == ["feature-x", "main", "develop"]

    def test_deterministic(self, settings):
        environments = project(FEATURE, MAIN, DEVELOP)
        builder = AliasBuilder()

        assert builder.build(environments, settings) == builder.build(
            environments, settings
        )

    def test_no_production_match(self, settings):
        aliases = AliasBuilder().build(project(MAIN, DEVELOP, production="gone"), settings)

        assert not any(a.is_production for a in aliases)

    def test_multiple_production_matches(self, settings):
        duplicate = EnvironmentRecord(name="main", namespace="acme-main-copy")

        aliases = AliasBuilder().build(project(MAIN, duplicate), settings)

        assert [a.is_production for a in aliases] == [True, True]

    def test_malformed_record_is_skipped(self, settings):
        nameless = EnvironmentRecord(name="", namespace="orphan")

        aliases = AliasBuilder().build(project(MAIN, nameless, DEVELOP), settings)

        assert [a.environment_name for a in aliases] == ["main", "develop"]

    def test_empty_project(self, settings):
        assert AliasBuilder().build(project(), settings) == []


class TestAliasRendering:
    """Tests for alias lines and documents."""

    def test_alias_lines(self, settings):
        aliases = AliasBuilder().build(project(MAIN, DEVELOP), settings)

        assert format_alias_lines(aliases) == [
            "@lagoon.acme-main (production)",
            "@lagoon.acme-develop",
        ]

    def test_alias_document(self, settings):
        aliases = AliasBuilder().build(project(MAIN, DEVELOP), settings)

        document = to_alias_document(aliases)

        assert list(document) == ["main", "develop"]
        assert document["develop"] == {
            "host": "ssh.cluster.example.com",
            "user": "acme-develop",
            "paths": {"files": "/app/web/sites/default/files"},
            "ssh": {
                "options": "-o UserKnownHostsFile=/dev/null -o StrictHostKeyChecking=no "
                "-o LogLevel=FATAL -p 2020",
                "tty": "false",
            },
        }

    def test_dump_is_valid_yaml(self, settings):
        aliases = AliasBuilder().build(project(MAIN, DEVELOP), settings)

        assert yaml.safe_load(dump_alias_document(aliases)) == to_alias_document(aliases)

    def test_dump_empty(self):
        assert dump_alias_document([]) == ""
