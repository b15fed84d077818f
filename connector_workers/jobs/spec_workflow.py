"""Workflow and activity returning the specification of a connector image."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from connector_workers.adapters import ConnectorIntegrationLauncher, ProcessFactoryPort
from connector_workers.domain import ConnectorSpecification, IntegrationLauncherConfig, JobGetSpecConfig, JobRunConfig
from connector_workers.workers import DefaultGetSpecWorker

from .attempt_execution import AttemptExecution


class SpecWorkflowPort(Protocol):
    """Workflow contract for get-spec jobs."""

    def workflow_run(self, job_run_config: JobRunConfig, launcher_config: IntegrationLauncherConfig) -> ConnectorSpecification:
        """Return the specification of the launcher image."""


class SpecActivityPort(Protocol):
    """Activity contract for get-spec jobs."""

    def activity_run(self, job_run_config: JobRunConfig, launcher_config: IntegrationLauncherConfig) -> ConnectorSpecification:
        """Run `spec` for one attempt."""


class SpecWorkflowImpl(SpecWorkflowPort):
    """Delegate the get-spec job to its activity."""

    def __init__(self, activity: SpecActivityPort):
        if activity is None:
            raise ValueError("activity must not be None")
        self._activity = activity

    def workflow_run(self, job_run_config: JobRunConfig, launcher_config: IntegrationLauncherConfig) -> ConnectorSpecification:
        return self._activity.activity_run(job_run_config, launcher_config)


class SpecActivityImpl(SpecActivityPort):
    """Run the get-spec worker inside an attempt scope."""

    def __init__(self, process_factory: ProcessFactoryPort, workspace_root: Path, close_timeout_seconds: float = 60.0):
        """Initialize get-spec activity.

        Args:
            process_factory: Factory starting connector processes.
            workspace_root: Root directory shared by all attempts.
            close_timeout_seconds: Grace period when closing connector processes.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required collaborators are missing.
        """

        if process_factory is None:
            raise ValueError("process_factory must not be None")
        if workspace_root is None:
            raise ValueError("workspace_root must not be None")

        self._process_factory = process_factory
        self._workspace_root = workspace_root
        self._close_timeout_seconds = close_timeout_seconds

    def activity_run(self, job_run_config: JobRunConfig, launcher_config: IntegrationLauncherConfig) -> ConnectorSpecification:
        """Run `spec` for one attempt.

        Args:
            job_run_config: Attempt identity.
            launcher_config: Connector image to query.

        Returns:
            ConnectorSpecification: Specification emitted by the connector.

        Raises:
            AttemptFailureError: Raised when the attempt fails for any reason.
        """

        def _activity_execute(job_root: Path) -> ConnectorSpecification:
            launcher = ConnectorIntegrationLauncher(
                launcher_config.job_id,
                launcher_config.attempt_id,
                launcher_config.docker_image,
                self._process_factory,
            )
            return DefaultGetSpecWorker(launcher, self._close_timeout_seconds).worker_run(worker_input, job_root)

        worker_input = JobGetSpecConfig(docker_image=launcher_config.docker_image)
        return AttemptExecution(
            workspace_root=self._workspace_root,
            job_run_config=job_run_config,
            execution=_activity_execute,
        ).attempt_execute()
