"""
n8nctl Exception Hierarchy

Clean exception hierarchy for consistent error handling across the CLI.
"""

from typing import Optional


class StackError(Exception):
    """Base exception for all n8nctl errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class MissingBinaryError(StackError):
    """Raised when the orchestration engine cannot be invoked."""

    pass


class MissingFileError(StackError):
    """Raised when a required file or directory is absent."""

    pass


class InvalidInputError(StackError):
    """Raised when operator input fails validation."""

    pass


class ExternalFailureError(StackError):
    """Raised when the engine or a subprocess exits non-zero."""

    pass


class PartialFailureError(StackError):
    """Raised when some steps of a multi-step operation failed."""

    pass


class ConfigurationError(StackError):
    """Raised when n8nctl.yml is invalid."""

    pass
