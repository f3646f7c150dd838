"""
Base Command Class

Abstract base for all Lagoon CLI commands.
Provides common functionality and structure.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console

from lagoon_cli.exceptions import LagoonError
from lagoon_cli.logger import CommandLogger


class BaseCommand(ABC):
    """
    Abstract base command class.

    Provides:
    - Logger initialization
    - Error handling
    - JSON output support
    """

    def __init__(
        self,
        verbose: bool = False,
        json_output: bool = False,
        log_file: Optional[Path] = None,
    ):
        self.verbose = verbose
        self.json_output = json_output
        self.log_file = log_file
        self.console = Console(stderr=True, soft_wrap=True)
        self.logger: Optional[CommandLogger] = None

    def init_logger(self, command_name: str) -> CommandLogger:
        """
        Initialize command logger.

        Args:
            command_name: Command name

        Returns:
            CommandLogger instance
        """
        self.logger = CommandLogger(
            command_name,
            verbose=self.verbose,
            log_path=self.log_file,
            output=self.console,
        )
        return self.logger

    def echo(self, message: str = "") -> None:
        """Write command output to stdout."""
        click.echo(message)

    def output_json(self, data: Dict[str, Any], exit_code: int = 0) -> None:
        """
        Output data as JSON and exit.

        Args:
            data: Data to output as JSON
            exit_code: Exit code (0 for success, non-zero for error)
        """
        click.echo(json.dumps(data, indent=2))
        if exit_code != 0:
            raise SystemExit(exit_code)

    def print_success(self, message: str) -> None:
        """Print success message (skip in JSON mode)."""
        if not self.json_output:
            self.console.print(f"[green]✓ {message}[/green]")

    def print_error(self, message: str) -> None:
        """Print error message (skip in JSON mode)."""
        if not self.json_output:
            self.console.print(f"[red]✗ {message}[/red]")

    def print_warning(self, message: str) -> None:
        """Print warning message (skip in JSON mode)."""
        if not self.json_output:
            self.console.print(f"[yellow]⚠ {message}[/yellow]")

    def print_dim(self, message: str) -> None:
        """Print dim message (skip in JSON mode)."""
        if not self.json_output:
            self.console.print(f"[dim]{message}[/dim]")

    def handle_error(self, error: Exception, context: Optional[str] = None) -> None:
        """
        Handle error with consistent formatting.

        Args:
            error: Exception object
            context: Optional context message
        """
        message = error.message if isinstance(error, LagoonError) else str(error)
        if isinstance(error, LagoonError) and context is None:
            context = error.context

        if self.logger:
            self.logger.error(message, context=context)
        else:
            self.print_error(message)
            if context:
                self.print_dim(f"Context: {context}")

    @abstractmethod
    def execute(self, **kwargs) -> None:
        """
        Execute command logic.

        Must be implemented by subclasses.
        """
        pass

    def run(self, **kwargs) -> None:
        """
        Run command with error handling.

        Args:
            **kwargs: Command arguments
        """
        try:
            self.execute(**kwargs)
        except KeyboardInterrupt:
            self.console.print("\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            raise SystemExit(130)
        except SystemExit:
            raise
        except LagoonError as e:
            if self.json_output:
                self.output_json(
                    {"error": e.message, "context": e.context}, exit_code=1
                )
            self.handle_error(e)
            raise SystemExit(1)
        except Exception as e:
            error_type = type(e).__name__
            self.console.print(f"\n[bold red]✗ {error_type}:[/bold red] {e}\n")
            if self.logger:
                self.logger.log(f"{error_type}: {e}", "ERROR")
            raise SystemExit(1)
        finally:
            if self.logger:
                self.logger.close()
