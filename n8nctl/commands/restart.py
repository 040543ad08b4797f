"""
Restart Command

Restart every service in place.
"""

import click

from n8nctl.base import StackCommand


class RestartCommand(StackCommand):
    """
    Restart all services.

    No preflight checks: restart only makes sense for a stack that is
    already configured and running.
    """

    name = "restart"

    def execute(self) -> None:
        """Execute restart command."""
        self.logger.step("Restarting n8n services")
        self.require_success(self.compose.restart(), "Failed to restart services")
        self.logger.success("Services restarted")


@click.command("restart")
@click.pass_obj
def restart(obj):
    """Restart all services"""
    cmd = RestartCommand(obj.directory, verbose=obj.verbose)
    cmd.run()
