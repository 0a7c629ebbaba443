"""Error types raised while querying CloudWatch billing metrics."""

from __future__ import annotations

from typing import Sequence


class MetricsClientError(RuntimeError):
    """Base class for failures talking to the metrics backend."""


class MetricsCommandError(MetricsClientError):
    """Raised when the metrics query itself fails (missing tool, non-zero exit, API error)."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = list(command) if command is not None else None
        self.returncode = returncode
        self.stderr = stderr
        details = message
        if returncode is not None:
            details = f"{details} (exit status {returncode})"
        if stderr:
            details = f"{details}: {stderr.strip()}"
        super().__init__(details)


class MalformedResponseError(MetricsClientError, ValueError):
    """Raised when a response body cannot be parsed or lacks a required field."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)

    @classmethod
    def missing_field(cls, field: str, context: str) -> "MalformedResponseError":
        """Build the error for a required key absent from a response object."""
        return cls(f"{context} is missing required field '{field}'", field=field)
