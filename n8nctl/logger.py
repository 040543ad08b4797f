"""
Logging system for n8nctl
Single-line, severity-tagged console output. Nothing is written to files.
"""

import re
import subprocess
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.padding import Padding
from rich.spinner import Spinner
from rich.text import Text

default_console = Console(soft_wrap=True, highlight=False)

ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")

SEVERITY_STYLES = {
    "INFO": "blue",
    "SUCCESS": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "DEBUG": "dim",
}


class StackLogger:
    """
    Operator-facing logger for lifecycle operations
    - Every message is one line with a [SEVERITY] tag
    - Command lines and raw output only show in verbose mode
    """

    def __init__(
        self, operation: str, verbose: bool = False, console: Optional[Console] = None
    ):
        """
        Initialize logger

        Args:
            operation: Operation name (e.g., 'start', 'backup')
            verbose: If True, also show commands and their raw output
            console: Console to write to (defaults to the module console)
        """
        self.operation = operation
        self.verbose = verbose
        self.console = console if console is not None else default_console
        self.has_errors = False

    def _emit(self, level: str, message: str) -> None:
        style = SEVERITY_STYLES[level]
        # Collapse to one line, diagnostics are single-line by contract
        line = " ".join(str(message).split())
        self.console.print(f"[{style}]\\[{level}][/{style}] {escape(line)}")

    def log(self, message: str, level: str = "INFO"):
        """
        Log a message

        Args:
            message: Message to log
            level: Log level (INFO, SUCCESS, WARNING, ERROR, DEBUG)
        """
        if level == "DEBUG" and not self.verbose:
            return
        if level == "ERROR":
            self.has_errors = True
        self._emit(level, message)

    def info(self, message: str):
        self.log(message, "INFO")

    def success(self, message: str):
        """Log a success message"""
        self.log(message, "SUCCESS")

    def warning(self, message: str):
        """Log a warning message"""
        self.log(message, "WARNING")

    def error(self, message: str, context: Optional[str] = None):
        """
        Log an error with optional context

        Args:
            message: Error message
            context: Additional context (e.g., stderr of the failed command)
        """
        if context:
            message = f"{message} ({context})"
        self.log(message, "ERROR")

    def step(self, step_name: str):
        """
        Start a new step

        Args:
            step_name: Name of the step
        """
        self.log(f"{step_name}...", "INFO")

    def log_command(self, command: List[str]):
        """Log a command being executed"""
        self.log(f"Executing: {' '.join(command)}", "DEBUG")

    def log_output(self, output: str, stream: str = "stdout"):
        """
        Log command output (verbose only)

        Args:
            output: Command output (single line or multiline)
            stream: Stream name (stdout, stderr)
        """
        if not output or not self.verbose:
            return

        clean_output = ANSI_ESCAPE.sub("", output)
        for line in clean_output.splitlines():
            if line.strip():
                self._emit("DEBUG", f"[{stream}] {line}")


def run_with_progress(
    logger: StackLogger,
    command: List[str],
    description: str,
    cwd: Optional[Path] = None,
) -> tuple[int, str, str]:
    """
    Run a command with progress indicator

    Args:
        logger: StackLogger instance
        command: Command argv to run
        description: Description for progress indicator
        cwd: Working directory

    Returns:
        Tuple of (return_code, stdout, stderr)

    Raises:
        FileNotFoundError: If the executable does not exist
    """
    logger.log_command(command)

    if logger.verbose:
        result = subprocess.run(command, cwd=cwd, capture_output=True, text=True)
        logger.log_output(result.stdout, "stdout")
        logger.log_output(result.stderr, "stderr")
        return result.returncode, result.stdout, result.stderr

    # Non-verbose: show spinner, capture output
    spinner = Spinner("dots", text=f"[cyan]{escape(description)}...[/cyan]")
    padded_spinner = Padding(spinner, (0, 0, 0, 2))

    with Live(
        padded_spinner,
        console=logger.console,
        refresh_per_second=10,
    ) as live:
        result = subprocess.run(command, cwd=cwd, capture_output=True, text=True)

        if result.returncode == 0:
            checkmark = Text("  ✓ ", style="dim")
            checkmark.append(description, style="dim")
            live.update(checkmark)
        else:
            x_mark = Text("  ✗ ", style="red")
            x_mark.append(description, style="dim")
            live.update(x_mark)

    return result.returncode, result.stdout, result.stderr
