"""
Scale Command

Scale n8n worker replicas.
"""

from typing import Optional

import click

from n8nctl.base import StackCommand
from n8nctl.services import ScaleService


class ScaleCommand(StackCommand):
    """
    Scale the worker service.

    Features:
    - Digits-only validation before the engine is touched
    - Convergence delegated to `docker compose up --scale`
    - Replica listing afterwards
    """

    name = "scale"

    def __init__(self, directory=None, replicas: Optional[str] = None, verbose: bool = False):
        super().__init__(directory, verbose=verbose)
        self.raw_replicas = replicas

    def execute(self) -> None:
        """Execute scale command."""
        scale_service = ScaleService(self.compose, self.config.worker_service)
        replicas = scale_service.validate(self.raw_replicas)

        self.logger.step(
            f"Scaling {self.config.worker_service} to {replicas} replicas"
        )
        self.require_success(
            scale_service.scale(replicas),
            f"Failed to scale {self.config.worker_service}",
        )
        self.logger.success(f"Workers scaled to {replicas} replicas")

        scale_service.show_replicas()


@click.command("scale", context_settings={"ignore_unknown_options": True})
@click.argument("replicas", required=False)
@click.pass_obj
def scale(obj, replicas):
    """
    Scale worker nodes to specified number

    \b
    Examples:
      n8nctl scale 3     # Run three n8n-worker replicas
      n8nctl scale 0     # Stop all workers
    """
    cmd = ScaleCommand(obj.directory, replicas=replicas, verbose=obj.verbose)
    cmd.run()
