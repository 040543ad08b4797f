"""n8nctl - Status command"""

import click

from n8nctl.base import StackCommand
from n8nctl.core.config_loader import StackConfig, resolve_root
from n8nctl.exceptions import ConfigurationError, StackError
from n8nctl.services import HealthService


class StatusCommand(StackCommand):
    """Show service states and probe health. Diagnostic only, never fails."""

    name = "status"

    def _load_config(self) -> StackConfig:
        """Deployment config, or the default layout if n8nctl.yml is invalid."""
        try:
            return self.config
        except ConfigurationError as e:
            self.logger.error(e.message, context=e.context)
            self.logger.warning("Using default settings")
            self._config = StackConfig.defaults(resolve_root(self.directory))
            return self._config

    def execute(self) -> None:
        """Execute status command."""
        config = self._load_config()

        self.logger.info("Service status:")
        try:
            result = self.compose.ps()
            if result.is_failure:
                self.logger.warning("Could not list service states")
        except StackError as e:
            self.logger.warning(e.message)

        self.console.print()
        self.logger.info("Service health:")

        with HealthService(
            config.health_targets, timeout=config.probe_timeout
        ) as prober:
            for health in prober.probe_all():
                if health.healthy:
                    self.logger.success(f"{health.service}: Healthy")
                else:
                    self.logger.error(
                        f"{health.service}: Unhealthy or not responding",
                        context=health.detail or None,
                    )


@click.command("status")
@click.pass_obj
def status(obj):
    """
    Show service status and health

    Lists containers via docker compose, then probes the n8n and Nginx
    health endpoints once each. Always exits 0.
    """
    cmd = StatusCommand(obj.directory, verbose=obj.verbose)
    cmd.run()
