"""
Base Command Class

Abstract base for all n8nctl commands.
Provides common functionality and structure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console

from n8nctl.exceptions import StackError
from n8nctl.logger import StackLogger, default_console
from n8nctl.ui_components import show_header


class BaseCommand(ABC):
    """
    Abstract base command class.

    Provides:
    - Logger initialization
    - Header display
    - Error handling
    - Consistent structure
    """

    name = "command"

    def __init__(self, verbose: bool = False, console: Optional[Console] = None):
        self.verbose = verbose
        self.console = console if console is not None else default_console
        self.logger = StackLogger(self.name, verbose=verbose, console=self.console)

    def show_header(
        self,
        title: str,
        subtitle: Optional[str] = None,
        details: Optional[dict] = None,
    ) -> None:
        """
        Show command header (skip in verbose mode).

        Args:
            title: Header title
            subtitle: Optional subtitle
            details: Additional details dict
        """
        if not self.verbose:
            show_header(
                title=title,
                subtitle=subtitle,
                details=details,
                console=self.console,
            )

    def exit_with_error(
        self, message: str, context: Optional[str] = None, code: int = 1
    ) -> None:
        """
        Print error and exit.

        Args:
            message: Error message
            context: Optional context (e.g. stderr of a failed command)
            code: Exit code
        """
        self.logger.error(message, context=context)
        raise SystemExit(code)

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
            self.logger.warning("Operation cancelled by user")
            raise SystemExit(130)
        except SystemExit:
            raise
        except StackError as e:
            self.logger.error(e.message, context=e.context)
            raise SystemExit(1)
        except PermissionError as e:
            self.logger.error(f"Permission denied: {e}")
            raise SystemExit(1)
        except OSError as e:
            error_type = type(e).__name__
            self.logger.error(f"{error_type}: {e}")
            raise SystemExit(1)
