"""Worker moving records from a source to a destination."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from connector_workers.domain import (
    NORMALIZATION_DIRECTORY_NAME,
    StandardSyncInput,
    StandardSyncOutput,
    StandardSyncSummary,
    SyncStatus,
)
from connector_workers.protocol import (
    ConnectorDestinationPort,
    ConnectorSourcePort,
    MessageTracker,
    NamespacingMapper,
    NormalizationError,
    NormalizationRunnerPort,
)

from .interfaces import WorkerPort

logger = logging.getLogger(__name__)


class DefaultSyncWorker(WorkerPort[StandardSyncInput, StandardSyncOutput]):
    """Replicate one configured catalog from a source into a destination.

    Every message the source emits is tracked, mapped and forwarded to the
    destination. Once the source is finished both connectors are closed and
    the destination is normalized.
    """

    def __init__(
        self,
        job_id: int,
        attempt_id: int,
        source: ConnectorSourcePort,
        mapper: NamespacingMapper,
        destination: ConnectorDestinationPort,
        tracker: MessageTracker,
        normalization_runner: NormalizationRunnerPort,
    ):
        """Initialize sync worker collaborators.

        Args:
            job_id: Job identifier.
            attempt_id: Attempt identifier.
            source: Message source; the empty source resets the destination.
            mapper: Stream namespacing applied before the destination.
            destination: Message sink.
            tracker: Record and state accounting.
            normalization_runner: Post-write normalization pass.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required collaborators are missing.
        """

        if source is None:
            raise ValueError("source must not be None")
        if mapper is None:
            raise ValueError("mapper must not be None")
        if destination is None:
            raise ValueError("destination must not be None")
        if tracker is None:
            raise ValueError("tracker must not be None")
        if normalization_runner is None:
            raise ValueError("normalization_runner must not be None")

        self._job_id = job_id
        self._attempt_id = attempt_id
        self._source = source
        self._mapper = mapper
        self._destination = destination
        self._tracker = tracker
        self._normalization_runner = normalization_runner

    def worker_run(self, worker_input: StandardSyncInput, job_root: Path) -> StandardSyncOutput:
        """Run the replication and normalization for one attempt.

        Args:
            worker_input: Connector configurations, catalog and optional state.
            job_root: Attempt working directory.

        Returns:
            StandardSyncOutput: Summary counters and the state for the next sync.

        Raises:
            ConnectorProcessError: Raised when a connector exits with a non-zero code.
            NormalizationError: Raised when normalization reports failure.
        """

        start_time_ms = _sync_now_ms()
        destination_catalog = self._mapper.mapper_map_catalog(worker_input.catalog)

        self._destination.destination_start(job_root, worker_input.destination_configuration, destination_catalog)
        try:
            self._source.source_start(
                job_root,
                worker_input.source_configuration,
                worker_input.catalog,
                worker_input.state,
            )
            try:
                while not self._source.source_is_finished():
                    message = self._source.source_attempt_read()
                    if message is None:
                        continue
                    self._tracker.tracker_accept(message)
                    self._destination.destination_accept(self._mapper.mapper_map_message(message))
                self._destination.destination_notify_end_of_stream()
            finally:
                self._source.source_close()
        finally:
            self._destination.destination_close()

        logger.info(
            "Replication finished job_id=%s attempt_id=%s records=%s bytes=%s",
            self._job_id,
            self._attempt_id,
            self._tracker.tracker_get_record_count(),
            self._tracker.tracker_get_bytes_count(),
        )

        self._sync_normalize(job_root, worker_input, destination_catalog)

        output_state = self._tracker.tracker_get_output_state()
        if output_state is None:
            output_state = worker_input.state
        summary = StandardSyncSummary(
            status=SyncStatus.COMPLETED,
            records_synced=self._tracker.tracker_get_record_count(),
            bytes_synced=self._tracker.tracker_get_bytes_count(),
            start_time_ms=start_time_ms,
            end_time_ms=_sync_now_ms(),
        )
        return StandardSyncOutput(standard_sync_summary=summary, state=output_state)

    def _sync_normalize(self, job_root: Path, worker_input: StandardSyncInput, destination_catalog: dict) -> None:
        normalization_root = job_root / NORMALIZATION_DIRECTORY_NAME
        self._normalization_runner.normalization_start()
        try:
            succeeded = self._normalization_runner.normalization_normalize(
                self._job_id,
                self._attempt_id,
                normalization_root,
                worker_input.destination_configuration,
                destination_catalog,
            )
        finally:
            self._normalization_runner.normalization_close()
        if not succeeded:
            raise NormalizationError("normalization failed")


def _sync_now_ms() -> int:
    return int(time.time() * 1000)
