"""Job dispatcher translating job requests into workflow executions."""

from __future__ import annotations

import logging
from typing import Any

from connector_workers.domain import (
    ConnectorCatalog,
    ConnectorSpecification,
    IntegrationLauncherConfig,
    JobCheckConnectionConfig,
    JobDiscoverCatalogConfig,
    JobGetSpecConfig,
    JobRunConfig,
    JobSyncConfig,
    StandardCheckConnectionInput,
    StandardCheckConnectionOutput,
    StandardDiscoverCatalogInput,
    StandardSyncInput,
    StandardSyncOutput,
)
from connector_workers.engine import WorkflowEnginePort

from .check_connection_workflow import CheckConnectionWorkflowPort
from .discover_catalog_workflow import DiscoverCatalogWorkflowPort
from .job_types import JobKind, job_workflow_options
from .spec_workflow import SpecWorkflowPort
from .sync_workflow import SyncWorkflowPort

logger = logging.getLogger(__name__)

_JOB_KIND_CONFIG_TYPES: dict[JobKind, type] = {
    JobKind.GET_SPEC: JobGetSpecConfig,
    JobKind.CHECK_CONNECTION: JobCheckConnectionConfig,
    JobKind.DISCOVER_SCHEMA: JobDiscoverCatalogConfig,
    JobKind.SYNC: JobSyncConfig,
}


class JobDispatcher:
    """Submit one workflow execution per job request and wait for its result.

    Each submission derives the attempt identity, the launcher configuration
    and the job input from the request, then runs the matching workflow
    through the engine with the timeout policy of its job kind. Submissions
    are not deduplicated.
    """

    def __init__(self, engine: WorkflowEnginePort):
        """Initialize dispatcher.

        Args:
            engine: Workflow engine creating workflow stubs.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when engine is missing.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def dispatcher_submit(self, kind: JobKind, job_id: int, attempt: int, config: Any) -> Any:
        """Route one job request to the submit operation of its kind.

        Args:
            kind: Job kind.
            job_id: Job identifier.
            attempt: Attempt identifier.
            config: Job configuration matching the kind.

        Returns:
            Any: Job result of the kind.

        Raises:
            TypeError: Raised when the config type does not match the kind.
            ValueError: Raised when identifiers are negative.
            AttemptFailureError: Raised when the attempt fails.
        """

        expected_type = _JOB_KIND_CONFIG_TYPES[JobKind(kind)]
        if not isinstance(config, expected_type):
            raise TypeError(f"{JobKind(kind).value} job requires {expected_type.__name__}, got {type(config).__name__}")

        if kind == JobKind.GET_SPEC:
            return self.dispatcher_submit_get_spec(job_id, attempt, config)
        if kind == JobKind.CHECK_CONNECTION:
            return self.dispatcher_submit_check_connection(job_id, attempt, config)
        if kind == JobKind.DISCOVER_SCHEMA:
            return self.dispatcher_submit_discover_schema(job_id, attempt, config)
        return self.dispatcher_submit_sync(job_id, attempt, config)

    def dispatcher_submit_get_spec(self, job_id: int, attempt: int, config: JobGetSpecConfig) -> ConnectorSpecification:
        """Run a get-spec job.

        Args:
            job_id: Job identifier.
            attempt: Attempt identifier.
            config: Connector image to query.

        Returns:
            ConnectorSpecification: Connector specification.

        Raises:
            AttemptFailureError: Raised when the attempt fails.
            WorkflowTimeoutError: Raised when the workflow exceeds its timeout.
        """

        job_run_config = _dispatcher_job_run_config(job_id, attempt)
        launcher_config = _dispatcher_launcher_config(job_run_config, config.docker_image)
        stub = self._dispatcher_stub(SpecWorkflowPort, JobKind.GET_SPEC, job_run_config)
        return stub.workflow_run(job_run_config, launcher_config)

    def dispatcher_submit_check_connection(
        self,
        job_id: int,
        attempt: int,
        config: JobCheckConnectionConfig,
    ) -> StandardCheckConnectionOutput:
        job_run_config = _dispatcher_job_run_config(job_id, attempt)
        launcher_config = _dispatcher_launcher_config(job_run_config, config.docker_image)
        connection_input = StandardCheckConnectionInput(connection_configuration=config.connection_configuration)
        stub = self._dispatcher_stub(CheckConnectionWorkflowPort, JobKind.CHECK_CONNECTION, job_run_config)
        return stub.workflow_run(job_run_config, launcher_config, connection_input)

    def dispatcher_submit_discover_schema(
        self,
        job_id: int,
        attempt: int,
        config: JobDiscoverCatalogConfig,
    ) -> ConnectorCatalog:
        job_run_config = _dispatcher_job_run_config(job_id, attempt)
        launcher_config = _dispatcher_launcher_config(job_run_config, config.docker_image)
        discover_input = StandardDiscoverCatalogInput(connection_configuration=config.connection_configuration)
        stub = self._dispatcher_stub(DiscoverCatalogWorkflowPort, JobKind.DISCOVER_SCHEMA, job_run_config)
        return stub.workflow_run(job_run_config, launcher_config, discover_input)

    def dispatcher_submit_sync(self, job_id: int, attempt: int, config: JobSyncConfig) -> StandardSyncOutput:
        """Run a sync job; a source image equal to the reset stub resets the destination.

        Args:
            job_id: Job identifier.
            attempt: Attempt identifier.
            config: Source, destination, catalog, state and prefix.

        Returns:
            StandardSyncOutput: Sync summary and state.

        Raises:
            AttemptFailureError: Raised when the attempt fails.
            WorkflowTimeoutError: Raised when the workflow exceeds its timeout.
        """

        job_run_config = _dispatcher_job_run_config(job_id, attempt)
        source_launcher_config = _dispatcher_launcher_config(job_run_config, config.source_docker_image)
        destination_launcher_config = _dispatcher_launcher_config(job_run_config, config.destination_docker_image)
        sync_input = StandardSyncInput(
            prefix=config.prefix,
            source_configuration=config.source_configuration,
            destination_configuration=config.destination_configuration,
            catalog=config.configured_catalog,
            state=config.state,
        )
        stub = self._dispatcher_stub(SyncWorkflowPort, JobKind.SYNC, job_run_config)
        return stub.workflow_run(job_run_config, source_launcher_config, destination_launcher_config, sync_input)

    def _dispatcher_stub(self, workflow_type: type, kind: JobKind, job_run_config: JobRunConfig) -> Any:
        logger.info(
            "Submitting job kind=%s job_id=%s attempt_id=%s",
            kind.value,
            job_run_config.job_id,
            job_run_config.attempt_id,
        )
        return self._engine.engine_new_workflow_stub(workflow_type, job_workflow_options(kind))


def _dispatcher_job_run_config(job_id: int, attempt: int) -> JobRunConfig:
    if job_id < 0:
        raise ValueError("job_id must not be negative")
    if attempt < 0:
        raise ValueError("attempt must not be negative")
    return JobRunConfig(job_id=job_id, attempt_id=attempt)


def _dispatcher_launcher_config(job_run_config: JobRunConfig, docker_image: str) -> IntegrationLauncherConfig:
    return IntegrationLauncherConfig(
        job_id=job_run_config.job_id,
        attempt_id=job_run_config.attempt_id,
        docker_image=docker_image,
    )
