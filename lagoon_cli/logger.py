"""
Logging system for Lagoon CLI
Provides clean console output with optional real-time log files
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape

from lagoon_cli.constants import LOG_DATETIME_FORMAT

console = Console(stderr=True, soft_wrap=True)

ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def mask_secret(value: Optional[str]) -> str:
    """Mask a credential so it can be logged."""
    if not value:
        return ""
    if len(value) > 8:
        return f"{value[:4]}...{value[-4:]}"
    return "***"


class CommandLogger:
    """
    Manages logging for Lagoon commands
    - Shows warnings and errors in console, debug lines only when verbose
    - Optionally writes every line to a log file in real-time
    """

    def __init__(
        self,
        operation: str,
        verbose: bool = False,
        log_path: Optional[Path] = None,
        output: Optional[Console] = None,
    ):
        """
        Initialize logger

        Args:
            operation: Operation name (e.g., 'aliases', 'jwt')
            verbose: If True, show debug output in console
            log_path: Optional file receiving every log line
            output: Console to print to (defaults to stderr console)
        """
        self.operation = operation
        self.verbose = verbose
        self.console = output or console
        self.log_path = Path(log_path) if log_path else None
        self.log_file: Optional[TextIO] = None
        self.has_errors = False

        if self.log_path:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            # Line buffered for real-time output
            self.log_file = open(self.log_path, "a", buffering=1)
            self._write_log_header()

    def _write_log_header(self):
        """Write log file header"""
        header = f"""
{"=" * 80}
Lagoon CLI Log
{"=" * 80}
Operation: {self.operation}
Started: {datetime.now().isoformat()}
{"=" * 80}

"""
        self.log_file.write(header)
        self.log_file.flush()

    def log(self, message: str, level: str = "INFO"):
        """
        Log a message to file and optionally console

        Args:
            message: Message to log
            level: Log level (INFO, WARNING, ERROR, DEBUG)
        """
        if self.log_file:
            timestamp = datetime.now().strftime(LOG_DATETIME_FORMAT)
            clean_message = ANSI_ESCAPE.sub("", message)
            self.log_file.write(f"[{timestamp}] [{level}] {clean_message}\n")
            self.log_file.flush()

        text = escape(message)
        if level == "ERROR":
            self.console.print(f"[bold red]✗ {text}[/bold red]")
        elif level == "WARNING":
            self.console.print(f"[yellow]⚠[/yellow] {text}")
        elif level == "DEBUG":
            if self.verbose:
                self.console.print(f"[dim]{text}[/dim]")
        elif self.verbose:
            self.console.print(text)

    def debug(self, message: str):
        """Log a debug message (console only when verbose)"""
        self.log(message, "DEBUG")

    def info(self, message: str):
        """Log an informational message"""
        self.log(message, "INFO")

    def warning(self, message: str):
        """Log a warning message"""
        self.log(message, "WARNING")

    def error(self, error: str, context: Optional[str] = None):
        """
        Log an error with context

        Args:
            error: Error message
            context: Additional context (e.g., command that failed)
        """
        self.has_errors = True
        self.log(error, "ERROR")
        if context:
            if self.log_file:
                self.log_file.write(f"  Context: {context}\n")
            self.console.print(f"  [color(208)]{escape(context)}[/color(208)]")

    def close(self):
        """Close log file"""
        if self.log_file:
            footer = f"""
{"=" * 80}
Completed: {datetime.now().isoformat()}
Status: {"FAILED" if self.has_errors else "SUCCESS"}
{"=" * 80}
"""
            self.log_file.write(footer)
            self.log_file.close()
            self.log_file = None

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb):
        """Context manager exit"""
        if exc_type is not None and exc_type != SystemExit:
            self.error(
                str(exc_val) if exc_val else "Operation failed",
                context=f"{exc_type.__name__}",
            )
        self.close()
        return False  # Don't suppress exceptions


class NullLogger(CommandLogger):
    """Logger that discards everything; used when services run without one."""

    def __init__(self):
        super().__init__("null")

    def log(self, message: str, level: str = "INFO"):
        pass

    def error(self, error: str, context: Optional[str] = None):
        self.has_errors = True
