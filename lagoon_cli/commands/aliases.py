"""
Aliases Commands

List Lagoon environments as site aliases or write an alias file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from lagoon_cli.base import LagoonCommand
from lagoon_cli.constants import PRODUCTION_SUFFIX
from lagoon_cli.services.alias_builder import (
    dump_alias_document,
    format_alias_lines,
    to_alias_document,
)


class AliasesCommand(LagoonCommand):
    """Print one alias line per environment."""

    def execute(self) -> None:
        """Execute lagoon:aliases command."""
        self.init_logger("aliases")

        result = self.discovery_service().discover(self.settings)
        if not self.report_result(result):
            return

        if self.json_output:
            self.output_json(
                {
                    "project": result.project_name,
                    "status": result.status.value,
                    "aliases": [
                        {
                            "alias": alias.qualified_name,
                            "environment": alias.environment_name,
                            "production": alias.is_production,
                        }
                        for alias in result.aliases
                    ],
                }
            )
            return

        output = Console(highlight=False)
        if not output.is_terminal:
            for line in format_alias_lines(result.aliases):
                self.echo(line)
            return

        for alias in result.aliases:
            if alias.is_production:
                output.print(
                    f"{escape(alias.qualified_name)} "
                    f"[yellow on black]{PRODUCTION_SUFFIX}[/yellow on black]"
                )
            else:
                output.print(escape(alias.qualified_name))


@dataclass
class GenerateAliasesOptions:
    """Options for generate-aliases command."""

    file: Optional[Path] = None


class GenerateAliasesCommand(LagoonCommand):
    """Render the alias document as YAML, to stdout or a file."""

    def __init__(self, options: GenerateAliasesOptions, **kwargs):
        super().__init__(**kwargs)
        self.options = options

    def execute(self) -> None:
        """Execute lagoon:generate-aliases command."""
        logger = self.init_logger("generate-aliases")

        result = self.discovery_service().discover(self.settings)
        if not self.report_result(result):
            return

        if self.json_output:
            self.output_json(to_alias_document(result.aliases))
            return

        contents = dump_alias_document(result.aliases)

        if self.options.file is None:
            self.echo(contents.rstrip("\n"))
            return

        try:
            self.options.file.write_text(contents)
        except OSError as e:
            logger.warning(f"Unable to write aliases to {self.options.file}: {e}")
            raise SystemExit(1)

        self.print_success(f"Successfully wrote aliases to {self.options.file}")


@click.command(name="lagoon:aliases")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.option(
    "--log-file", type=click.Path(dir_okay=False, path_type=Path), help="Write log to file"
)
def aliases(verbose, json_output, log_file):
    """
    Get all remote aliases from the Lagoon API

    Examples:
        lagoon lagoon:aliases
        lagoon la -v
    """
    cmd = AliasesCommand(verbose=verbose, json_output=json_output, log_file=log_file)
    cmd.run()


@click.command(name="lagoon:generate-aliases")
@click.argument(
    "file", required=False, type=click.Path(dir_okay=False, path_type=Path)
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.option(
    "--log-file", type=click.Path(dir_okay=False, path_type=Path), help="Write log to file"
)
def generate_aliases(file, verbose, json_output, log_file):
    """
    Generate a site alias file from the Lagoon API

    Prints the YAML alias document, or writes it to FILE.

    Examples:
        lagoon lagoon:generate-aliases
        lagoon lg drush/sites/lagoon.site.yml
    """
    options = GenerateAliasesOptions(file=file)
    cmd = GenerateAliasesCommand(
        options, verbose=verbose, json_output=json_output, log_file=log_file
    )
    cmd.run()
