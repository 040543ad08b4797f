"""
Deployment Models

Dataclass models describing the deployment's certificates, service health,
backup artifacts and replica counts.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from n8nctl.constants import REPLICA_COUNT_PATTERN
from n8nctl.exceptions import InvalidInputError

_REPLICA_RE = re.compile(REPLICA_COUNT_PATTERN)


@dataclass
class CertificateSet:
    """Required TLS artifacts and the subset currently absent."""

    required: Tuple[str, ...]
    missing: List[str] = field(default_factory=list)

    @property
    def is_tls_ready(self) -> bool:
        return not self.missing

    @classmethod
    def scan(cls, cert_dir: Path, required: Tuple[str, ...]) -> "CertificateSet":
        """Build the set from what is on disk in cert_dir."""
        missing = [name for name in required if not (cert_dir / name).is_file()]
        return cls(required=tuple(required), missing=missing)


@dataclass
class HealthTarget:
    """A network-facing service and its liveness endpoint."""

    name: str
    url: str
    verify_tls: bool = True


@dataclass
class ServiceHealth:
    """Outcome of a single probe; never cached between invocations."""

    service: str
    target: str
    healthy: bool
    detail: str = ""


@dataclass
class BackupArtifact:
    """A backup file named <prefix><timestamp><extension>."""

    prefix: str
    timestamp: str
    extension: str
    directory: Path

    @property
    def filename(self) -> str:
        return f"{self.prefix}{self.timestamp}{self.extension}"

    @property
    def path(self) -> Path:
        return self.directory / self.filename


@dataclass
class BackupStepResult:
    """Outcome of one backup step."""

    name: str
    artifact: BackupArtifact
    succeeded: bool
    error: Optional[str] = None


@dataclass
class BackupReport:
    """All steps of one backup run, sharing a single timestamp."""

    timestamp: str
    directory: Path
    steps: List[BackupStepResult] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return bool(self.steps) and all(step.succeeded for step in self.steps)

    @property
    def failed_steps(self) -> List[BackupStepResult]:
        return [step for step in self.steps if not step.succeeded]

    @property
    def artifacts(self) -> List[BackupArtifact]:
        """Artifacts of the steps that succeeded."""
        return [step.artifact for step in self.steps if step.succeeded]


@dataclass(frozen=True)
class ReplicaCount:
    """Validated, non-negative replica count."""

    value: int

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ReplicaCount":
        """
        Parse operator input.

        Only plain ASCII digits are accepted; no sign, no decimal point.
        There is no upper bound here, the engine decides what it can run.

        Raises:
            InvalidInputError: If raw is missing or not all digits
        """
        if raw is None or raw == "":
            raise InvalidInputError(
                "Please specify number of worker replicas",
                context="Usage: n8nctl scale <number>",
            )
        if not _REPLICA_RE.fullmatch(raw):
            raise InvalidInputError(f"Replicas must be a number (got '{raw}')")
        return cls(int(raw))

    def __str__(self) -> str:
        return str(self.value)
