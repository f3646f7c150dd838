"""
Rollout Task Service

Runs pre/post rollout tasks from .lagoon.yml locally or on an environment.
"""

import subprocess
from typing import List, Optional

from lagoon_cli.constants import ROLLOUT_SERVICE, ROLLOUT_STAGES
from lagoon_cli.exceptions import ConfigurationError, TaskError
from lagoon_cli.logger import CommandLogger, NullLogger
from lagoon_cli.models.alias import Alias
from lagoon_cli.models.results import TaskResult
from lagoon_cli.models.settings import Settings
from lagoon_cli.models.ssh import SSHConnection
from lagoon_cli.services.ssh_service import SSHService


class RolloutService:
    """Run rollout tasks defined under `tasks.<stage>-rollout`."""

    def __init__(
        self,
        ssh_service: Optional[SSHService] = None,
        logger: Optional[CommandLogger] = None,
    ):
        self.ssh_service = ssh_service or SSHService()
        self.logger = logger or NullLogger()

    def get_tasks(self, settings: Settings, stage: str) -> List[dict]:
        """
        Get task definitions for a stage.

        Raises:
            ConfigurationError: If stage is unknown or tasks are malformed
        """
        if stage not in ROLLOUT_STAGES:
            raise ConfigurationError(
                f"Unknown rollout stage: {stage}",
                context=f"Valid stages: {', '.join(ROLLOUT_STAGES)}",
            )

        tasks = settings.tasks.get(f"{stage}-rollout") or []
        if not isinstance(tasks, list):
            raise ConfigurationError(
                f"tasks.{stage}-rollout in .lagoon.yml must be a list"
            )
        return tasks

    def run_tasks(
        self, settings: Settings, stage: str, target: Optional[Alias] = None
    ) -> List[TaskResult]:
        """
        Run every task of a stage, stopping at the first failure.

        Args:
            settings: Effective settings
            stage: 'pre' or 'post'
            target: Environment alias to run on (None runs locally)

        Returns:
            Results of the tasks that ran or were skipped

        Raises:
            TaskError: If a task exits non-zero
        """
        tasks = self.get_tasks(settings, stage)
        if not tasks:
            self.logger.warning(f"No {stage} rollout tasks found in .lagoon.yml")
            return []

        results = []
        for task in tasks:
            run = (task.get("run") if isinstance(task, dict) else None) or {}
            command = str(run.get("command") or "").strip()
            service = run.get("service") or ""

            if service != ROLLOUT_SERVICE or not command:
                self.logger.warning(
                    f"Only commands in the '{ROLLOUT_SERVICE}' service can be run, skipping: {command or task}"
                )
                results.append(
                    TaskResult(command=command, service=service, skipped=True)
                )
                continue

            result = self._run_task(command, target, settings)
            results.append(result)

            if not result.is_success:
                raise TaskError(
                    f"Rollout task failed: {command}",
                    context=f"Exit code: {result.returncode}",
                )

        return results

    def _run_task(
        self, command: str, target: Optional[Alias], settings: Settings
    ) -> TaskResult:
        if target is None:
            self.logger.info(f"Running locally: {command}")
            completed = subprocess.run(command, shell=True)
            return TaskResult(
                command=command,
                service=ROLLOUT_SERVICE,
                returncode=completed.returncode,
            )

        connection = SSHConnection(
            host=target.target_host,
            port=target.port,
            user=target.target_user,
            key_path=settings.ssh_key_path,
            batch_mode=False,
        )
        self.logger.info(f"Running on {target.qualified_name}: {command}")
        ssh_result = self.ssh_service.run_interactive(connection, command)
        return TaskResult(
            command=command,
            service=ROLLOUT_SERVICE,
            returncode=ssh_result.returncode,
        )
