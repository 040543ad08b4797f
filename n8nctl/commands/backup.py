"""n8nctl - Backup command"""

import click
from rich.table import Table

from n8nctl.base import StackCommand
from n8nctl.exceptions import ExternalFailureError, PartialFailureError
from n8nctl.models.deployment import BackupReport
from n8nctl.services import BackupService


class BackupCommand(StackCommand):
    """Backup the PostgreSQL database and n8n data."""

    name = "backup"

    def execute(self) -> None:
        """Execute backup command."""
        self.show_header(
            title="Create Backup",
            details={"Output": str(self.config.backup_dir)},
        )

        self.logger.info("Creating backup...")
        backup_service = BackupService(self.config, self.compose, logger=self.logger)
        report = backup_service.create_backup()

        if report.artifacts:
            self._display_artifacts(report)

        failed = report.failed_steps
        if not failed:
            self.logger.success(f"Backup completed: {report.directory}/")
            return

        failed_names = ", ".join(step.name for step in failed)
        if len(failed) == len(report.steps):
            raise ExternalFailureError(f"Backup failed: {failed_names}")
        raise PartialFailureError(
            f"Backup incomplete: {failed_names} failed",
            context="completed artifacts were kept",
        )

    def _display_artifacts(self, report: BackupReport) -> None:
        table = Table(title="Backup Artifacts", title_justify="left", padding=(0, 1))
        table.add_column("File", style="cyan", no_wrap=True)
        table.add_column("Size", style="dim", justify="right")

        for artifact in report.artifacts:
            size = artifact.path.stat().st_size if artifact.path.exists() else 0
            table.add_row(artifact.filename, f"{size:,} B")

        self.console.print(table)


@click.command("backup")
@click.pass_obj
def backup(obj):
    """
    Create backup of database and n8n data

    \b
    Writes two files sharing one timestamp into ./backups/:
    - postgres_backup_<timestamp>.sql       (pg_dump)
    - n8n_data_backup_<timestamp>.tar.gz    (/home/node/.n8n)

    Both steps always run; the command fails if either one failed.
    """
    cmd = BackupCommand(obj.directory, verbose=obj.verbose)
    cmd.run()
