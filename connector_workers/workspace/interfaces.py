"""Typed interfaces for workspace filesystem services.

All attempt directory layout decisions remain in the workspace package.
"""

from typing import Protocol

from connector_workers.domain import HealthStatus


class WorkspaceHealthPort(Protocol):
    """Port definition for workspace root availability checks."""

    def workspace_location_label(self) -> str:
        """Return a stable label for the workspace root being checked.

        Returns:
            str: Workspace location for diagnostics.

        Raises:
            RuntimeError: Raised when location metadata is unavailable.
        """

    def workspace_check_health(self) -> HealthStatus:
        """Check that attempt directories can be created under the workspace root.

        Returns:
            HealthStatus: Workspace health status payload.

        Raises:
            OSError: Raised when the workspace root is unusable.
        """
