"""Workers for the single-process connector commands: spec, check and discover."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from connector_workers.adapters import IntegrationLauncherPort, process_gentle_close
from connector_workers.domain import (
    SOURCE_CONFIG_JSON_FILENAME,
    CheckConnectionStatus,
    ConnectorCatalog,
    ConnectorSpecification,
    JobGetSpecConfig,
    StandardCheckConnectionInput,
    StandardCheckConnectionOutput,
    StandardDiscoverCatalogInput,
)
from connector_workers.protocol import (
    ConnectorMessage,
    ConnectorMessageType,
    ConnectorOutputError,
    ConnectorProcessError,
    protocol_iter_messages,
)
from connector_workers.workspace import workspace_write_json

from .interfaces import WorkerPort

logger = logging.getLogger(__name__)


class _ConnectorCommandWorker:
    """Shared process handling for commands answering with one message."""

    def __init__(self, launcher: IntegrationLauncherPort, close_timeout_seconds: float = 60.0):
        if launcher is None:
            raise ValueError("launcher must not be None")
        if close_timeout_seconds <= 0:
            raise ValueError("close_timeout_seconds must be positive")

        self._launcher = launcher
        self._close_timeout_seconds = close_timeout_seconds

    def _worker_collect(self, process: subprocess.Popen, message_type: ConnectorMessageType) -> ConnectorMessage:
        """Read process output, close the process and return the first message of one type.

        Args:
            process: Started connector process.
            message_type: Message type the command must emit.

        Returns:
            ConnectorMessage: First message of the expected type.

        Raises:
            ConnectorProcessError: Raised when the process exits with a non-zero code.
            ConnectorOutputError: Raised when no message of the expected type was emitted.
        """

        expected_message: ConnectorMessage | None = None
        try:
            for message in protocol_iter_messages(process.stdout):
                if expected_message is None and message.type == message_type:
                    expected_message = message
        finally:
            exit_code = process_gentle_close(process, self._close_timeout_seconds)
        if exit_code != 0:
            raise ConnectorProcessError(
                f"connector {self._launcher.image_name} exited with non-zero exit code {exit_code}",
                exit_code=exit_code,
            )
        if expected_message is None:
            raise ConnectorOutputError(
                f"connector {self._launcher.image_name} emitted no {message_type.value} message"
            )
        return expected_message


class DefaultGetSpecWorker(_ConnectorCommandWorker, WorkerPort[JobGetSpecConfig, ConnectorSpecification]):
    """Run `spec` and return the connector specification."""

    def worker_run(self, worker_input: JobGetSpecConfig, job_root: Path) -> ConnectorSpecification:
        _ = worker_input
        message = self._worker_collect(self._launcher.launcher_spec(job_root), ConnectorMessageType.SPEC)
        spec_payload = message.spec or {}
        if "connectionSpecification" not in spec_payload:
            raise ConnectorOutputError("SPEC message has no connectionSpecification")
        return ConnectorSpecification(
            connection_specification=spec_payload["connectionSpecification"],
            documentation_url=spec_payload.get("documentationUrl"),
            changelog_url=spec_payload.get("changelogUrl"),
        )


class DefaultCheckConnectionWorker(
    _ConnectorCommandWorker,
    WorkerPort[StandardCheckConnectionInput, StandardCheckConnectionOutput],
):
    """Run `check` and return the connectivity outcome.

    A `FAILED` status is a regular result; only connector crashes and missing
    output are worker errors.
    """

    def worker_run(self, worker_input: StandardCheckConnectionInput, job_root: Path) -> StandardCheckConnectionOutput:
        """Write the connector configuration and run `check`.

        Args:
            worker_input: Connector configuration to check.
            job_root: Attempt working directory.

        Returns:
            StandardCheckConnectionOutput: Status and optional message.

        Raises:
            ConnectorProcessError: Raised when the connector exits with a non-zero code.
            ConnectorOutputError: Raised when the status is missing or unknown.
        """

        workspace_write_json(job_root, SOURCE_CONFIG_JSON_FILENAME, worker_input.connection_configuration)
        message = self._worker_collect(
            self._launcher.launcher_check(job_root, SOURCE_CONFIG_JSON_FILENAME),
            ConnectorMessageType.CONNECTION_STATUS,
        )
        status_payload = message.connection_status or {}
        try:
            status = CheckConnectionStatus(str(status_payload.get("status", "")).lower())
        except ValueError as error:
            raise ConnectorOutputError(f"unknown connection status {status_payload.get('status')!r}") from error

        logger.info("Check connection status=%s", status.value)
        return StandardCheckConnectionOutput(status=status, message=status_payload.get("message"))


class DefaultDiscoverCatalogWorker(
    _ConnectorCommandWorker,
    WorkerPort[StandardDiscoverCatalogInput, ConnectorCatalog],
):
    """Run `discover` and return the source catalog."""

    def worker_run(self, worker_input: StandardDiscoverCatalogInput, job_root: Path) -> ConnectorCatalog:
        workspace_write_json(job_root, SOURCE_CONFIG_JSON_FILENAME, worker_input.connection_configuration)
        message = self._worker_collect(
            self._launcher.launcher_discover(job_root, SOURCE_CONFIG_JSON_FILENAME),
            ConnectorMessageType.CATALOG,
        )
        catalog_payload = message.catalog or {}
        streams = catalog_payload.get("streams")
        if not isinstance(streams, list):
            raise ConnectorOutputError("CATALOG message has no streams list")
        return ConnectorCatalog(streams=streams)
