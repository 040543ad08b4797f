"""n8nctl - Secrets command"""

import click

from n8nctl.base import BaseCommand
from n8nctl.services import SecretService


class SecretsCommand(BaseCommand):
    """Print fresh credentials for the .env file. Never writes files."""

    name = "secrets"

    def __init__(self, verbose: bool = False, secret_service: SecretService = None):
        super().__init__(verbose=verbose)
        self.secret_service = secret_service or SecretService()

    def execute(self) -> None:
        """Execute secrets command."""
        self.logger.info("Generating secure secrets...")

        values = self.secret_service.generate()
        for line in self.secret_service.render(values):
            self.console.print(line, markup=False)

        self.logger.success("Secrets generated. Copy these to your .env file")


@click.command("secrets")
@click.pass_obj
def secrets(obj):
    """Generate secure secrets for .env file"""
    cmd = SecretsCommand(verbose=obj.verbose)
    cmd.run()
