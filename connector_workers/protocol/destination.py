"""Destination connectors consuming a sync."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Any, Protocol

from connector_workers.adapters import IntegrationLauncherPort, process_gentle_close, process_gobble_lines
from connector_workers.domain import DESTINATION_CATALOG_JSON_FILENAME, DESTINATION_CONFIG_JSON_FILENAME
from connector_workers.workspace import workspace_write_json

from .errors import ConnectorProcessError
from .messages import ConnectorMessage, protocol_serialize_message

logger = logging.getLogger(__name__)


class ConnectorDestinationPort(Protocol):
    """Port definition for a message sink driven by the sync worker."""

    def destination_start(
        self,
        job_root: Path,
        destination_configuration: dict[str, Any],
        catalog: dict[str, Any],
    ) -> None:
        """Start accepting messages for a configured catalog."""

    def destination_accept(self, message: ConnectorMessage) -> None:
        """Forward one message."""

    def destination_notify_end_of_stream(self) -> None:
        """Signal that no more messages will be forwarded."""

    def destination_close(self) -> None:
        """Release the destination and verify it finished successfully."""


class DefaultConnectorDestination(ConnectorDestinationPort):
    """Destination backed by a connector `write` process fed through stdin."""

    def __init__(self, launcher: IntegrationLauncherPort, close_timeout_seconds: float = 60.0):
        """Initialize connector destination.

        Args:
            launcher: Launcher for the destination image.
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
        self._end_of_stream = False

    def destination_start(
        self,
        job_root: Path,
        destination_configuration: dict[str, Any],
        catalog: dict[str, Any],
    ) -> None:
        """Write destination inputs into the job root and start `write`.

        Args:
            job_root: Attempt working directory.
            destination_configuration: Destination configuration document.
            catalog: Configured catalog, already mapped for the destination.

        Returns:
            None: Process is started as side effect.

        Raises:
            RuntimeError: Raised when the destination was already started.
            ProcessLaunchError: Raised when the process cannot be started.
        """

        if self._process is not None:
            raise RuntimeError("destination already started")

        workspace_write_json(job_root, DESTINATION_CONFIG_JSON_FILENAME, destination_configuration)
        workspace_write_json(job_root, DESTINATION_CATALOG_JSON_FILENAME, catalog)
        self._process = self._launcher.launcher_write(
            job_root,
            DESTINATION_CONFIG_JSON_FILENAME,
            DESTINATION_CATALOG_JSON_FILENAME,
        )
        process_gobble_lines(self._process.stdout, logging.getLogger(f"{__name__}.stdout").info, "destination-stdout")

    def destination_accept(self, message: ConnectorMessage) -> None:
        """Write one message as a JSON line to the process stdin.

        Args:
            message: Mapped message.

        Returns:
            None: Message is written as side effect.

        Raises:
            RuntimeError: Raised when the destination is not accepting messages.
            OSError: Raised when the process stdin is broken.
        """

        if self._process is None or self._end_of_stream:
            raise RuntimeError("destination is not accepting messages")
        self._process.stdin.write(protocol_serialize_message(message) + "\n")

    def destination_notify_end_of_stream(self) -> None:
        if self._process is None or self._end_of_stream:
            return
        self._end_of_stream = True
        self._process.stdin.flush()
        self._process.stdin.close()

    def destination_close(self) -> None:
        """Close stdin if still open, wait for the process and check its exit code.

        Returns:
            None: Process is closed as side effect.

        Raises:
            ConnectorProcessError: Raised when the process exits with a non-zero code.
        """

        if self._process is None:
            logger.debug("Closing destination that was never started")
            return

        self.destination_notify_end_of_stream()
        exit_code = process_gentle_close(self._process, self._close_timeout_seconds)
        if exit_code != 0:
            raise ConnectorProcessError(
                f"destination process exited with non-zero exit code {exit_code}",
                exit_code=exit_code,
            )
