"""
Rollout Task Commands

Run pre/post rollout tasks from .lagoon.yml.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from lagoon_cli.base import LagoonCommand
from lagoon_cli.exceptions import ConfigurationError
from lagoon_cli.services import RolloutService


@dataclass
class RolloutOptions:
    """Options for rollout task commands."""

    stage: str
    environment: Optional[str] = None


class RolloutTasksCommand(LagoonCommand):
    """
    Run rollout tasks.

    Features:
    - Local execution (default)
    - Remote execution on a discovered environment (--environment)
    - Tasks outside the cli service are skipped
    """

    def __init__(self, options: RolloutOptions, **kwargs):
        super().__init__(**kwargs)
        self.options = options

    def execute(self) -> None:
        """Execute lagoon:<stage>-rollout-tasks command."""
        logger = self.init_logger(f"{self.options.stage}-rollout-tasks")

        target = None
        if self.options.environment:
            result = self.discovery_service().discover(self.settings)
            if not self.report_result(result):
                return

            target = next(
                (
                    alias
                    for alias in result.aliases
                    if self.options.environment
                    in (alias.environment_name, alias.alias_name)
                ),
                None,
            )
            if target is None:
                raise ConfigurationError(
                    f"Environment '{self.options.environment}' not found in project '{result.project_name}'",
                    context="Available environments: "
                    + ", ".join(alias.environment_name for alias in result.aliases),
                )

        service = RolloutService(ssh_service=self.ssh_service, logger=logger)
        results = service.run_tasks(self.settings, self.options.stage, target)

        ran = [task for task in results if not task.skipped]
        if self.json_output:
            self.output_json(
                {
                    "stage": self.options.stage,
                    "environment": self.options.environment,
                    "tasks": [
                        {
                            "command": task.command,
                            "service": task.service,
                            "skipped": task.skipped,
                            "returncode": task.returncode,
                        }
                        for task in results
                    ],
                }
            )
            return

        if ran:
            self.print_success(f"{len(ran)} {self.options.stage} rollout task(s) completed")


def _rollout_command(stage: str):
    help_text = f"""
    Run {stage}-rollout tasks from .lagoon.yml

    Only tasks for the 'cli' service are run.

    Examples:
        lagoon lagoon:{stage}-rollout-tasks
        lagoon lagoon:{stage}-rollout-tasks -e main
    """

    @click.command(name=f"lagoon:{stage}-rollout-tasks", help=help_text)
    @click.option(
        "--environment", "-e", help="Run on this environment instead of locally"
    )
    @click.option("--verbose", "-v", is_flag=True, help="Show debug output")
    @click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
    @click.option(
        "--log-file",
        type=click.Path(dir_okay=False, path_type=Path),
        help="Write log to file",
    )
    def command(environment, verbose, json_output, log_file):
        options = RolloutOptions(stage=stage, environment=environment)
        cmd = RolloutTasksCommand(
            options, verbose=verbose, json_output=json_output, log_file=log_file
        )
        cmd.run()

    return command


pre_rollout_tasks = _rollout_command("pre")
post_rollout_tasks = _rollout_command("post")
