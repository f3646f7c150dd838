"""SSH token command"""

from pathlib import Path

import click

from lagoon_cli.base import LagoonCommand
from lagoon_cli.logger import mask_secret


class JwtCommand(LagoonCommand):
    """Print a Lagoon API token."""

    def execute(self) -> None:
        """Execute lagoon:jwt command."""
        self.init_logger("jwt")

        token = self.token_provider().get_token(self.settings)

        if self.json_output:
            self.output_json(
                {"project": self.settings.project_name, "token": token}
            )
            return

        self.logger.debug(f"Token: {mask_secret(token)}")
        self.echo(token)


@click.command(name="lagoon:jwt")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.option(
    "--log-file", type=click.Path(dir_okay=False, path_type=Path), help="Write log to file"
)
def jwt(verbose, json_output, log_file):
    """
    Generate a JWT token for the Lagoon API

    Examples:
        lagoon jwt
        LAGOON_IGNORE_CACHE=1 lagoon lagoon:jwt -v
    """
    cmd = JwtCommand(verbose=verbose, json_output=json_output, log_file=log_file)
    cmd.run()
