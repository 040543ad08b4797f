"""
Logs Command - View service logs via docker compose
"""

from typing import Optional

import click

from n8nctl.base import StackCommand


class LogsCommand(StackCommand):
    """Tail or follow logs for all services or one service."""

    name = "logs"

    def __init__(
        self,
        directory=None,
        service: Optional[str] = None,
        follow: bool = False,
        tail: Optional[int] = None,
        verbose: bool = False,
    ):
        super().__init__(directory, verbose=verbose)
        self.service = service
        self.follow = follow
        self.tail = tail

    def execute(self) -> None:
        """Execute logs command."""
        if self.service:
            self.logger.info(f"Showing logs for service: {self.service}")
        else:
            self.logger.info("Showing logs for all services...")

        tail = self.tail if self.tail is not None else self.config.log_tail
        result = self.compose.logs(self.service, follow=self.follow, tail=tail)
        if result.is_failure:
            self.exit_with_error("Failed to show logs")


@click.command("logs")
@click.argument("service", required=False)
@click.option("-f", "--follow", is_flag=True, help="Stream logs in real-time")
@click.option(
    "-n",
    "--tail",
    type=click.IntRange(min=1),
    help="Number of lines to show when not following (default: 100)",
)
@click.pass_obj
def logs(obj, service, follow, tail):
    """
    Show logs (optionally for a specific service)

    \b
    Examples:
      n8nctl logs              # Last 100 lines of every service
      n8nctl logs n8n          # Only the n8n service
      n8nctl logs -f           # Follow all logs
      n8nctl logs -f n8n       # Follow n8n logs
    """
    cmd = LogsCommand(
        obj.directory, service=service, follow=follow, tail=tail, verbose=obj.verbose
    )
    cmd.run()
