"""Exceptions raised by the Comprehend demo."""

from __future__ import annotations


class ComprehendDemoError(Exception):
    """Base exception for the Comprehend demo"""  # noqa: D415


class ConfigurationError(ComprehendDemoError):
    """Raised when AWS credentials, region or profile cannot be resolved"""  # noqa: D415


class MalformedResponseError(ComprehendDemoError):
    """Raised when a service response does not match its expected shape"""  # noqa: D415


class AnalysisError(ComprehendDemoError):
    """A single analysis operation failed.

    Carries the operation name and the underlying error so callers can
    report the detail without re-raising.
    """

    def __init__(self, operation: str, cause: Exception) -> None:
        """Initialize with the failing operation and its cause."""
        self.operation = operation
        self.cause = cause
        super().__init__(str(cause))
