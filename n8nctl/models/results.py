"""
Result Models

Dataclass models for validation outcomes and command outputs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from n8nctl.exceptions import StackError


class Outcome(Enum):
    """Tri-state result of a validation or action step."""

    SATISFIED = "satisfied"
    REMEDIATED = "remediated"
    FAILED = "failed"


@dataclass
class CheckResult:
    """Result of a single precondition check."""

    name: str
    outcome: Outcome
    message: str
    details: List[str] = field(default_factory=list)
    error: Optional[StackError] = None

    @property
    def is_satisfied(self) -> bool:
        """Check passed, caller may proceed."""
        return self.outcome == Outcome.SATISFIED

    @property
    def is_remediated(self) -> bool:
        """Check auto-fixed something but the operator still has to act."""
        return self.outcome == Outcome.REMEDIATED

    @property
    def is_failed(self) -> bool:
        """Check failed."""
        return self.outcome == Outcome.FAILED

    @property
    def blocks_start(self) -> bool:
        """Not satisfied; halts start when the check is blocking."""
        return not self.is_satisfied

    @classmethod
    def satisfied(cls, name: str, message: str) -> "CheckResult":
        return cls(name, Outcome.SATISFIED, message)

    @classmethod
    def remediated(
        cls, name: str, message: str, details: Optional[List[str]] = None
    ) -> "CheckResult":
        return cls(name, Outcome.REMEDIATED, message, details or [])

    @classmethod
    def failed(
        cls, name: str, error: StackError, details: Optional[List[str]] = None
    ) -> "CheckResult":
        return cls(name, Outcome.FAILED, error.message, details or [], error=error)

    def __repr__(self) -> str:
        return f"CheckResult(name={self.name}, outcome={self.outcome.value})"


@dataclass
class PreflightReport:
    """Ordered results of a preflight run."""

    results: List[CheckResult] = field(default_factory=list)
    halted_by: Optional[CheckResult] = None

    @property
    def passed(self) -> bool:
        """True only if every check ran and was satisfied."""
        return self.halted_by is None and all(r.is_satisfied for r in self.results)

    @property
    def can_proceed(self) -> bool:
        """True if no blocking check stopped the run."""
        return self.halted_by is None

    def get(self, name: str) -> Optional[CheckResult]:
        for result in self.results:
            if result.name == name:
                return result
        return None

    def names(self) -> List[str]:
        return [r.name for r in self.results]


@dataclass
class ExecutionResult:
    """Result of a subprocess execution."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    command: str = ""

    @property
    def is_success(self) -> bool:
        """Check if execution succeeded."""
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        """Check if execution failed."""
        return self.returncode != 0

    @property
    def output(self) -> str:
        """Get combined output (stdout + stderr)."""
        return f"{self.stdout}\n{self.stderr}".strip()

    def __repr__(self) -> str:
        return f"ExecutionResult(returncode={self.returncode}, command='{self.command[:50]}...')"
