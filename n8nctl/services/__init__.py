"""
n8nctl Services Layer

Operations behind the CLI commands. Only ComposeService spawns processes.
"""

from .compose_service import ComposeService
from .secret_service import SecretService, SecretSlot
from .health_service import HealthService
from .backup_service import BackupService
from .scale_service import ScaleService

__all__ = [
    "ComposeService",
    "SecretService",
    "SecretSlot",
    "HealthService",
    "BackupService",
    "ScaleService",
]
