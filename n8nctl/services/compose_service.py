"""Docker Compose service: the only place that talks to the orchestration engine."""

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from n8nctl.constants import DOCKER_BINARY
from n8nctl.core.config_loader import StackConfig
from n8nctl.exceptions import MissingBinaryError
from n8nctl.logger import StackLogger, run_with_progress
from n8nctl.models.results import ExecutionResult


class ComposeService:
    """Service for docker compose operations against one deployment."""

    def __init__(self, config: StackConfig, logger: Optional[StackLogger] = None):
        """
        Initialize compose service.

        Args:
            config: Deployment configuration
            logger: Logger for command echo and spinner output
        """
        self.config = config
        self.logger = logger or StackLogger("compose")

    def _compose_cmd(self, *args: str) -> List[str]:
        return [
            DOCKER_BINARY,
            "compose",
            "-f",
            str(self.config.compose_file),
            *args,
        ]

    def is_docker_available(self) -> bool:
        """Check that the docker binary resolves on PATH."""
        return shutil.which(DOCKER_BINARY) is not None

    def execute(self, command: List[str], description: str) -> ExecutionResult:
        """
        Run a command with captured output behind a spinner.

        Args:
            command: Command argv
            description: Spinner text

        Returns:
            ExecutionResult with execution details

        Raises:
            MissingBinaryError: If the executable cannot be spawned
        """
        try:
            returncode, stdout, stderr = run_with_progress(
                self.logger, command, description, cwd=self.config.root
            )
        except FileNotFoundError as e:
            raise MissingBinaryError(
                "Docker is not installed or not in PATH", context=str(e)
            )

        return ExecutionResult(
            returncode=returncode,
            stdout=stdout or "",
            stderr=stderr or "",
            command=" ".join(command),
        )

    def stream(self, command: List[str]) -> ExecutionResult:
        """
        Run a command attached to the operator's terminal.

        Output is not captured; used for ps and logs.
        """
        self.logger.log_command(command)
        try:
            result = subprocess.run(command, cwd=self.config.root)
        except FileNotFoundError as e:
            raise MissingBinaryError(
                "Docker is not installed or not in PATH", context=str(e)
            )
        return ExecutionResult(returncode=result.returncode, command=" ".join(command))

    def version(self) -> ExecutionResult:
        """Run `docker compose version` (no compose file needed)."""
        command = [DOCKER_BINARY, "compose", "version"]
        self.logger.log_command(command)
        try:
            result = subprocess.run(
                command, cwd=self.config.root, capture_output=True, text=True
            )
        except FileNotFoundError as e:
            raise MissingBinaryError(
                "Docker is not installed or not in PATH", context=str(e)
            )
        return ExecutionResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            command=" ".join(command),
        )

    def up(self) -> ExecutionResult:
        return self.execute(self._compose_cmd("up", "-d"), "Starting services")

    def down(self) -> ExecutionResult:
        return self.execute(self._compose_cmd("down"), "Stopping services")

    def restart(self) -> ExecutionResult:
        return self.execute(self._compose_cmd("restart"), "Restarting services")

    def pull(self) -> ExecutionResult:
        return self.execute(self._compose_cmd("pull"), "Pulling latest images")

    def prune_images(self) -> ExecutionResult:
        return self.execute(
            [DOCKER_BINARY, "image", "prune", "-f"], "Cleaning up old images"
        )

    def scale(self, service: str, replicas: int) -> ExecutionResult:
        """Converge service to the given replica count via `up --scale`."""
        return self.execute(
            self._compose_cmd("up", "-d", "--scale", f"{service}={replicas}"),
            f"Scaling {service} to {replicas}",
        )

    def ps(self, service: Optional[str] = None) -> ExecutionResult:
        args = ["ps"]
        if service:
            args.append(service)
        return self.stream(self._compose_cmd(*args))

    def logs(
        self, service: Optional[str] = None, follow: bool = False, tail: int = 100
    ) -> ExecutionResult:
        """
        Show or follow logs.

        Args:
            service: Limit to one service
            follow: Stream until interrupted instead of tailing
            tail: Lines to show when not following
        """
        args = ["logs"]
        if follow:
            args.append("-f")
        else:
            args.append(f"--tail={tail}")
        if service:
            args.append(service)
        return self.stream(self._compose_cmd(*args))

    def exec_to_file(
        self, service: str, command: List[str], destination: Path
    ) -> ExecutionResult:
        """
        Run a command inside a service and write its stdout to a file.

        Args:
            service: Compose service to exec into
            command: Command argv inside the container
            destination: File receiving the raw stdout bytes

        Returns:
            ExecutionResult (stdout is not kept, it went to destination)

        Raises:
            MissingBinaryError: If docker cannot be spawned
            OSError: If destination cannot be opened
        """
        full_command = self._compose_cmd("exec", "-T", service, *command)
        self.logger.log_command(full_command + [">", str(destination)])

        with open(destination, "wb") as out:
            try:
                result = subprocess.run(
                    full_command,
                    cwd=self.config.root,
                    stdout=out,
                    stderr=subprocess.PIPE,
                )
            except FileNotFoundError as e:
                raise MissingBinaryError(
                    "Docker is not installed or not in PATH", context=str(e)
                )

        stderr = result.stderr.decode(errors="replace") if result.stderr else ""
        self.logger.log_output(stderr, "stderr")
        return ExecutionResult(
            returncode=result.returncode,
            stderr=stderr,
            command=" ".join(full_command),
        )
