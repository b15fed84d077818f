"""Workspace health service implementation for filesystem checks."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from connector_workers.domain import HealthStatus

from .interfaces import WorkspaceHealthPort


class FilesystemWorkspaceHealthService(WorkspaceHealthPort):
    """Workspace health service backed by a local directory probe."""

    def __init__(self, workspace_root: Path):
        """Initialize workspace health service.

        Args:
            workspace_root: Root directory for attempt working directories.

        Raises:
            ValueError: Raised when workspace_root is None.
        """

        if workspace_root is None:
            raise ValueError("workspace_root must not be None")
        self._workspace_root = workspace_root

    def workspace_location_label(self) -> str:
        """Return the workspace root for diagnostics.

        Returns:
            str: Workspace root path.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return str(self._workspace_root)

    def workspace_check_health(self) -> HealthStatus:
        """Verify the workspace root exists and accepts new files.

        Returns:
            HealthStatus: Health payload with status and diagnostic detail.

        Raises:
            OSError: Raised when the workspace root cannot be created or written.
        """

        try:
            self._workspace_root.mkdir(parents=True, exist_ok=True)
            probe_descriptor, probe_name = tempfile.mkstemp(prefix=".health-", dir=self._workspace_root)
            os.close(probe_descriptor)
            os.unlink(probe_name)
        except OSError as error:
            raise OSError(f"workspace root {self._workspace_root} is not writable: {error}") from error
        return HealthStatus(status="ok", detail="workspace root writable")
