"""Backup orchestration: database dump plus n8n data archive."""

from datetime import datetime
from typing import Callable, List, Optional

from n8nctl.constants import (
    BACKUP_TIMESTAMP_FORMAT,
    N8N_DATA_BACKUP_EXTENSION,
    N8N_DATA_BACKUP_PREFIX,
    POSTGRES_BACKUP_EXTENSION,
    POSTGRES_BACKUP_PREFIX,
)
from n8nctl.core.config_loader import StackConfig
from n8nctl.exceptions import StackError
from n8nctl.logger import StackLogger
from n8nctl.models.deployment import BackupArtifact, BackupReport, BackupStepResult


class BackupService:
    """Service for managing backup operations."""

    def __init__(
        self,
        config: StackConfig,
        compose,
        logger: Optional[StackLogger] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            config: Deployment configuration
            compose: ComposeService providing exec_to_file
            logger: Logger for per-step progress
            clock: Source of the backup timestamp
        """
        self.config = config
        self.compose = compose
        self.logger = logger or StackLogger("backup")
        self.clock = clock

    def get_database_dump_command(self) -> List[str]:
        return ["pg_dump", "-U", self.config.db_user, self.config.db_name]

    def get_data_archive_command(self) -> List[str]:
        return ["tar", "-czf", "-", self.config.app_data_path]

    def create_backup(self) -> BackupReport:
        """
        Dump the database, then archive n8n data.

        Both artifacts share one timestamp. The archive step runs even if the
        dump failed; artifacts of failed steps are left where they are.
        """
        self.config.backup_dir.mkdir(parents=True, exist_ok=True)
        timestamp = self.clock().strftime(BACKUP_TIMESTAMP_FORMAT)
        report = BackupReport(timestamp=timestamp, directory=self.config.backup_dir)

        self.logger.step("Backing up PostgreSQL database")
        report.steps.append(
            self._run_step(
                "database",
                self.config.db_service,
                self.get_database_dump_command(),
                BackupArtifact(
                    POSTGRES_BACKUP_PREFIX,
                    timestamp,
                    POSTGRES_BACKUP_EXTENSION,
                    self.config.backup_dir,
                ),
            )
        )

        self.logger.step("Backing up n8n data")
        report.steps.append(
            self._run_step(
                "n8n data",
                self.config.app_service,
                self.get_data_archive_command(),
                BackupArtifact(
                    N8N_DATA_BACKUP_PREFIX,
                    timestamp,
                    N8N_DATA_BACKUP_EXTENSION,
                    self.config.backup_dir,
                ),
            )
        )

        return report

    def _run_step(
        self, name: str, service: str, command: List[str], artifact: BackupArtifact
    ) -> BackupStepResult:
        try:
            result = self.compose.exec_to_file(service, command, artifact.path)
        except (StackError, OSError) as e:
            self.logger.error(f"Backup of {name} failed", context=str(e))
            return BackupStepResult(name, artifact, succeeded=False, error=str(e))

        if result.is_failure:
            error = result.stderr.strip() or f"exit code {result.returncode}"
            self.logger.error(f"Backup of {name} failed", context=error)
            return BackupStepResult(name, artifact, succeeded=False, error=error)

        self.logger.success(f"Backup of {name} written to {artifact.filename}")
        return BackupStepResult(name, artifact, succeeded=True)
