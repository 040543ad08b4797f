"""
Stack Command Base Class

Base class for commands that operate on a deployment directory.
Provides lazy config loading and service initialization.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from n8nctl.core.config_loader import StackConfig, load_stack_config
from n8nctl.exceptions import ExternalFailureError
from n8nctl.models.results import ExecutionResult
from n8nctl.services import ComposeService
from .base_command import BaseCommand


class StackCommand(BaseCommand):
    """
    Base class for deployment-scoped commands.

    Provides:
    - Deployment config loaded on first use (errors go through run())
    - Shared ComposeService
    - Engine failure handling
    """

    def __init__(
        self,
        directory: Optional[Path] = None,
        verbose: bool = False,
        config: Optional[StackConfig] = None,
        console: Optional[Console] = None,
    ):
        super().__init__(verbose=verbose, console=console)
        self.directory = directory
        self._config = config
        self._compose: Optional[ComposeService] = None

    @property
    def config(self) -> StackConfig:
        if self._config is None:
            self._config = load_stack_config(self.directory)
        return self._config

    @property
    def compose(self) -> ComposeService:
        if self._compose is None:
            self._compose = ComposeService(self.config, logger=self.logger)
        return self._compose

    def require_success(self, result: ExecutionResult, message: str) -> ExecutionResult:
        """
        Raise if an engine call failed, surfacing its stderr verbatim.

        Raises:
            ExternalFailureError: If result is a failure
        """
        if result.is_failure:
            raise ExternalFailureError(message, context=result.stderr.strip() or None)
        return result


@dataclass
class StackContext:
    """Group-level options handed to every subcommand via ctx.obj."""

    directory: Optional[Path] = None
    verbose: bool = False
