"""Project-native typed exceptions for connector worker failures."""

from __future__ import annotations


class WorkerError(RuntimeError):
    """Base exception for failures while driving connector processes."""


class ConnectorProcessError(WorkerError):
    """Connector process exited unsuccessfully.

    Attributes:
        exit_code: Process exit code.
    """

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.exit_code = exit_code


class ConnectorOutputError(WorkerError, ValueError):
    """Connector output did not contain the message the command must produce."""


class NormalizationError(WorkerError):
    """Destination normalization pass reported failure."""
