"""n8nctl - Stop command"""

import click

from n8nctl.base import StackCommand


class StopCommand(StackCommand):
    """Tear down all services."""

    name = "stop"

    def execute(self) -> None:
        """Execute stop command."""
        self.logger.step("Stopping n8n services")
        self.require_success(self.compose.down(), "Failed to stop services")
        self.logger.success("Services stopped")


@click.command("stop")
@click.pass_obj
def stop(obj):
    """Stop all services"""
    cmd = StopCommand(obj.directory, verbose=obj.verbose)
    cmd.run()
