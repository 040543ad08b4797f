"""Worker scaling through the engine's own scale primitive."""

from typing import Optional

from n8nctl.models.deployment import ReplicaCount
from n8nctl.models.results import ExecutionResult


class ScaleService:
    """Validates replica counts and asks compose to converge the worker service."""

    def __init__(self, compose, worker_service: str):
        self.compose = compose
        self.worker_service = worker_service

    def validate(self, raw: Optional[str]) -> ReplicaCount:
        """
        Raises:
            InvalidInputError: Before any engine call, if raw is not all digits
        """
        return ReplicaCount.parse(raw)

    def scale(self, replicas: ReplicaCount) -> ExecutionResult:
        return self.compose.scale(self.worker_service, replicas.value)

    def show_replicas(self) -> ExecutionResult:
        return self.compose.ps(self.worker_service)
