"""
Update Command

Pull newer images, recreate services, prune what is no longer used.
"""

import click

from n8nctl.base import StackCommand


class UpdateCommand(StackCommand):
    """Update services to the latest image versions."""

    name = "update"

    def execute(self) -> None:
        """Execute update command."""
        self.logger.info("Updating services...")

        self.logger.step("Pulling latest images")
        self.require_success(self.compose.pull(), "Failed to pull images")

        self.logger.step("Restarting services with updated images")
        self.require_success(self.compose.up(), "Failed to restart services")

        self.logger.step("Cleaning up old images")
        self.require_success(self.compose.prune_images(), "Failed to prune images")

        self.logger.success("Services updated successfully")


@click.command("update")
@click.pass_obj
def update(obj):
    """Update services to latest versions"""
    cmd = UpdateCommand(obj.directory, verbose=obj.verbose)
    cmd.run()
