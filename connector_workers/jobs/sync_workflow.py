"""Workflow and activity replicating data from a source into a destination."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from connector_workers.adapters import ConnectorIntegrationLauncher, ProcessFactoryPort
from connector_workers.domain import (
    RESET_JOB_SOURCE_DOCKER_IMAGE_STUB,
    IntegrationLauncherConfig,
    JobRunConfig,
    StandardSyncInput,
    StandardSyncOutput,
)
from connector_workers.protocol import (
    ConnectorSourcePort,
    DefaultConnectorDestination,
    DefaultConnectorSource,
    EmptyConnectorSource,
    MessageTracker,
    NamespacingMapper,
    normalization_create_runner,
)
from connector_workers.workers import DefaultSyncWorker

from .attempt_execution import AttemptExecution

logger = logging.getLogger(__name__)


class SyncWorkflowPort(Protocol):
    """Workflow contract for sync jobs."""

    def workflow_run(
        self,
        job_run_config: JobRunConfig,
        source_launcher_config: IntegrationLauncherConfig,
        destination_launcher_config: IntegrationLauncherConfig,
        sync_input: StandardSyncInput,
    ) -> StandardSyncOutput:
        """Return the outcome of one sync."""


class SyncActivityPort(Protocol):
    """Activity contract for sync jobs."""

    def activity_run(
        self,
        job_run_config: JobRunConfig,
        source_launcher_config: IntegrationLauncherConfig,
        destination_launcher_config: IntegrationLauncherConfig,
        sync_input: StandardSyncInput,
    ) -> StandardSyncOutput:
        """Run the replication for one attempt."""


class SyncWorkflowImpl(SyncWorkflowPort):
    """Delegate the sync job to its activity."""

    def __init__(self, activity: SyncActivityPort):
        if activity is None:
            raise ValueError("activity must not be None")
        self._activity = activity

    def workflow_run(
        self,
        job_run_config: JobRunConfig,
        source_launcher_config: IntegrationLauncherConfig,
        destination_launcher_config: IntegrationLauncherConfig,
        sync_input: StandardSyncInput,
    ) -> StandardSyncOutput:
        return self._activity.activity_run(
            job_run_config,
            source_launcher_config,
            destination_launcher_config,
            sync_input,
        )


class SyncActivityImpl(SyncActivityPort):
    """Assemble the sync worker for one attempt and run it inside the attempt scope.

    A source image equal to `RESET_JOB_SOURCE_DOCKER_IMAGE_STUB` selects the
    empty source, so the destination receives no records and its streams are
    reset.
    """

    def __init__(
        self,
        process_factory: ProcessFactoryPort,
        workspace_root: Path,
        normalization_image: str,
        close_timeout_seconds: float = 60.0,
    ):
        """Initialize sync activity.

        Args:
            process_factory: Factory starting connector and normalization processes.
            workspace_root: Root directory shared by all attempts.
            normalization_image: Normalization image reference.
            close_timeout_seconds: Grace period when closing processes.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required collaborators are missing.
        """

        if process_factory is None:
            raise ValueError("process_factory must not be None")
        if workspace_root is None:
            raise ValueError("workspace_root must not be None")
        if not normalization_image.strip():
            raise ValueError("normalization_image must not be blank")

        self._process_factory = process_factory
        self._workspace_root = workspace_root
        self._normalization_image = normalization_image
        self._close_timeout_seconds = close_timeout_seconds

    def activity_run(
        self,
        job_run_config: JobRunConfig,
        source_launcher_config: IntegrationLauncherConfig,
        destination_launcher_config: IntegrationLauncherConfig,
        sync_input: StandardSyncInput,
    ) -> StandardSyncOutput:
        """Run the replication for one attempt.

        Args:
            job_run_config: Attempt identity.
            source_launcher_config: Source image, or the reset stub.
            destination_launcher_config: Destination image.
            sync_input: Configurations, catalog, state and prefix.

        Returns:
            StandardSyncOutput: Summary and state for the next sync.

        Raises:
            AttemptFailureError: Raised when the attempt fails for any reason.
        """

        def _activity_execute(job_root: Path) -> StandardSyncOutput:
            worker = self.sync_create_worker(
                job_run_config,
                source_launcher_config,
                destination_launcher_config,
                sync_input.prefix,
            )
            return worker.worker_run(sync_input, job_root)

        return AttemptExecution(
            workspace_root=self._workspace_root,
            job_run_config=job_run_config,
            execution=_activity_execute,
        ).attempt_execute()

    def sync_create_worker(
        self,
        job_run_config: JobRunConfig,
        source_launcher_config: IntegrationLauncherConfig,
        destination_launcher_config: IntegrationLauncherConfig,
        prefix: str,
    ) -> DefaultSyncWorker:
        """Assemble the sync worker for one attempt.

        Args:
            job_run_config: Attempt identity.
            source_launcher_config: Source image, or the reset stub.
            destination_launcher_config: Destination image.
            prefix: Stream name prefix for the destination.

        Returns:
            DefaultSyncWorker: Worker wired with source, destination and normalization.

        Raises:
            ValueError: Raised when a launcher image is blank.
        """

        destination_launcher = ConnectorIntegrationLauncher(
            destination_launcher_config.job_id,
            destination_launcher_config.attempt_id,
            destination_launcher_config.docker_image,
            self._process_factory,
        )
        return DefaultSyncWorker(
            job_id=job_run_config.job_id,
            attempt_id=job_run_config.attempt_id,
            source=self._sync_create_source(source_launcher_config),
            mapper=NamespacingMapper(prefix),
            destination=DefaultConnectorDestination(destination_launcher, self._close_timeout_seconds),
            tracker=MessageTracker(),
            normalization_runner=normalization_create_runner(
                destination_launcher_config.docker_image,
                self._process_factory,
                self._normalization_image,
                self._close_timeout_seconds,
            ),
        )

    def _sync_create_source(self, source_launcher_config: IntegrationLauncherConfig) -> ConnectorSourcePort:
        if source_launcher_config.docker_image == RESET_JOB_SOURCE_DOCKER_IMAGE_STUB:
            logger.info("Reset job; using empty source job_id=%s", source_launcher_config.job_id)
            return EmptyConnectorSource()
        source_launcher = ConnectorIntegrationLauncher(
            source_launcher_config.job_id,
            source_launcher_config.attempt_id,
            source_launcher_config.docker_image,
            self._process_factory,
        )
        return DefaultConnectorSource(source_launcher, self._close_timeout_seconds)
