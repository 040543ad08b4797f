"""
Start Command

Run the preflight checks, then bring every service up.
"""

import click

from n8nctl.base import StackCommand
from n8nctl.constants import ERROR_ENV_NOT_CONFIGURED, SUCCESS_SERVICES_STARTED
from n8nctl.core.validator import CERTIFICATES, PreflightEngine
from n8nctl.ui_components import report_check_result


class StartCommand(StackCommand):
    """
    Start all services.

    Prerequisites and configuration must pass before the engine is called.
    Missing certificates only warn: the stack can still come up without TLS
    for local testing.
    """

    name = "start"

    def execute(self) -> None:
        """Execute start command."""
        self.show_header(
            title="Start Services", details={"Directory": str(self.config.root)}
        )

        self.logger.step("Checking requirements")
        report = PreflightEngine(self.config, self.compose).for_start()

        for result in report.results:
            if result is report.halted_by and result.is_failed:
                # Raised below, reported once by run()
                continue
            if result.name == CERTIFICATES and result.is_failed:
                self.logger.warning(result.message)
                self.logger.warning(
                    "SSL certificates not found. Services may not start properly"
                )
                continue
            report_check_result(self.logger, result)

        if report.halted_by is not None:
            if report.halted_by.is_failed:
                raise report.halted_by.error
            self.exit_with_error(ERROR_ENV_NOT_CONFIGURED)

        self.logger.step("Starting n8n services")
        self.require_success(self.compose.up(), "Failed to start services")

        self.logger.success(SUCCESS_SERVICES_STARTED)
        self.logger.info(f"n8n will be available at: {self.config.app_url}")
        self.logger.info("Use 'n8nctl status' to check service health")


@click.command("start")
@click.pass_obj
def start(obj):
    """
    Start all services

    Checks requirements and the .env file first. If .env is missing it is
    copied from .env.example and the command stops so you can edit it.
    """
    cmd = StartCommand(obj.directory, verbose=obj.verbose)
    cmd.run()
