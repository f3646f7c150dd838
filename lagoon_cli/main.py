#!/usr/bin/env python3
"""Lagoon CLI - Main entry point"""

import functools
import os
import sys

import rich_click as click
from rich.console import Console

from lagoon_cli import __version__
from lagoon_cli.commands import (
    aliases,
    generate_aliases,
    jwt,
    post_rollout_tasks,
    pre_rollout_tasks,
)

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.MAX_WIDTH = 100
click.rich_click.STYLE_COMMAND = "bold cyan"
click.rich_click.STYLE_OPTION = "bold magenta"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_USAGE = "bold yellow"

console = Console(stderr=True)

# Short names for the namespaced commands
COMMAND_ALIASES = {
    "la": "lagoon:aliases",
    "lg": "lagoon:generate-aliases",
    "jwt": "lagoon:jwt",
}


def handle_cli_errors(func):
    """Decorator to handle CLI errors gracefully."""
    from click.exceptions import ClickException

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ClickException as e:
            e.show()
            sys.exit(e.exit_code)
        except KeyboardInterrupt:
            console.print("\n\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            sys.exit(130)
        except Exception as e:
            console.print(f"\n[bold red]✗ Unexpected error:[/bold red] {e}\n")

            # Show traceback if DEBUG env var is set
            if os.environ.get("DEBUG"):
                import traceback

                console.print("[dim]Traceback:[/dim]")
                traceback.print_exc()
            sys.exit(1)

    return wrapper


class AliasedGroup(click.RichGroup):
    """Click group that resolves short command names (la, lg, jwt)."""

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))


@click.group(cls=AliasedGroup)
@click.version_option(version=__version__)
def cli() -> None:
    """
    Lagoon - site aliases and tokens for Lagoon-hosted projects.

    \b
    Commands:
      lagoon la                       # List environment aliases
      lagoon lg [FILE]                # Generate alias YAML
      lagoon jwt                      # Print an API token
      lagoon lagoon:post-rollout-tasks

    \b
    Configuration is read from .lagoon.yml in the project root and
    LAGOON_* environment variables.
    """


cli.add_command(aliases)
cli.add_command(generate_aliases)
cli.add_command(jwt)
cli.add_command(pre_rollout_tasks)
cli.add_command(post_rollout_tasks)


@handle_cli_errors
def main():
    """Main entry point with error handling."""
    cli()


if __name__ == "__main__":
    main()
