"""
n8nctl Domain Models

Clean dataclass-based models for type-safe data handling.
"""

from .results import (
    Outcome,
    CheckResult,
    PreflightReport,
    ExecutionResult,
)
from .deployment import (
    CertificateSet,
    HealthTarget,
    ServiceHealth,
    BackupArtifact,
    BackupStepResult,
    BackupReport,
    ReplicaCount,
)

__all__ = [
    # Results
    "Outcome",
    "CheckResult",
    "PreflightReport",
    "ExecutionResult",
    # Deployment
    "CertificateSet",
    "HealthTarget",
    "ServiceHealth",
    "BackupArtifact",
    "BackupStepResult",
    "BackupReport",
    "ReplicaCount",
]
