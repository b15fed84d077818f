"""Source connectors feeding a sync."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Any, Iterator, Protocol

from connector_workers.adapters import IntegrationLauncherPort, process_gentle_close
from connector_workers.domain import (
    INPUT_STATE_JSON_FILENAME,
    SOURCE_CATALOG_JSON_FILENAME,
    SOURCE_CONFIG_JSON_FILENAME,
)
from connector_workers.workspace import workspace_write_json

from .errors import ConnectorProcessError
from .messages import ConnectorMessage, protocol_iter_messages

logger = logging.getLogger(__name__)


class ConnectorSourcePort(Protocol):
    """Port definition for a message source driven by the sync worker."""

    def source_start(
        self,
        job_root: Path,
        source_configuration: dict[str, Any],
        catalog: dict[str, Any],
        state: dict[str, Any] | None,
    ) -> None:
        """Start emitting messages for a configured catalog."""

    def source_is_finished(self) -> bool:
        """Return True once no further messages will be emitted."""

    def source_attempt_read(self) -> ConnectorMessage | None:
        """Return the next message, or None when none is available."""

    def source_close(self) -> None:
        """Release the source and verify it finished successfully."""


class EmptyConnectorSource(ConnectorSourcePort):
    """Source that emits nothing; reset jobs use it to clear destination data."""

    def source_start(
        self,
        job_root: Path,
        source_configuration: dict[str, Any],
        catalog: dict[str, Any],
        state: dict[str, Any] | None,
    ) -> None:
        _ = (job_root, source_configuration, catalog, state)

    def source_is_finished(self) -> bool:
        return True

    def source_attempt_read(self) -> ConnectorMessage | None:
        return None

    def source_close(self) -> None:
        return None


class DefaultConnectorSource(ConnectorSourcePort):
    """Source backed by a connector `read` process."""

    def __init__(self, launcher: IntegrationLauncherPort, close_timeout_seconds: float = 60.0):
        """Initialize connector source.

        Args:
            launcher: Launcher for the source image.
            close_timeout_seconds: Grace period when closing the process.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when the launcher is missing.
        """

        if launcher is None:
            raise ValueError("launcher must not be None")

        self._launcher = launcher
        self._close_timeout_seconds = close_timeout_seconds
        self._process: subprocess.Popen | None = None
        self._messages: Iterator[ConnectorMessage] | None = None
        self._finished = False

    def source_start(
        self,
        job_root: Path,
        source_configuration: dict[str, Any],
        catalog: dict[str, Any],
        state: dict[str, Any] | None,
    ) -> None:
        """Write source inputs into the job root and start `read`.

        Args:
            job_root: Attempt working directory.
            source_configuration: Source configuration document.
            catalog: Configured catalog.
            state: Optional input state.

        Returns:
            None: Process is started as side effect.

        Raises:
            RuntimeError: Raised when the source was already started.
            ProcessLaunchError: Raised when the process cannot be started.
        """

        if self._process is not None:
            raise RuntimeError("source already started")

        workspace_write_json(job_root, SOURCE_CONFIG_JSON_FILENAME, source_configuration)
        workspace_write_json(job_root, SOURCE_CATALOG_JSON_FILENAME, catalog)
        state_filename = None
        if state is not None:
            workspace_write_json(job_root, INPUT_STATE_JSON_FILENAME, state)
            state_filename = INPUT_STATE_JSON_FILENAME

        self._process = self._launcher.launcher_read(
            job_root,
            SOURCE_CONFIG_JSON_FILENAME,
            SOURCE_CATALOG_JSON_FILENAME,
            state_filename,
        )
        self._messages = protocol_iter_messages(self._process.stdout)

    def source_is_finished(self) -> bool:
        return self._finished

    def source_attempt_read(self) -> ConnectorMessage | None:
        """Read the next message from the process output.

        Returns:
            ConnectorMessage | None: Next message, or None once output is exhausted.

        Raises:
            RuntimeError: Raised when the source was not started.
        """

        if self._messages is None:
            raise RuntimeError("source not started")
        try:
            return next(self._messages)
        except StopIteration:
            self._finished = True
            return None

    def source_close(self) -> None:
        """Wait for the process to exit and check its exit code.

        Returns:
            None: Process is closed as side effect.

        Raises:
            ConnectorProcessError: Raised when the process exits with a non-zero code.
        """

        if self._process is None:
            logger.debug("Closing source that was never started")
            return

        exit_code = process_gentle_close(self._process, self._close_timeout_seconds)
        if exit_code != 0:
            raise ConnectorProcessError(f"source process exited with non-zero exit code {exit_code}", exit_code=exit_code)
