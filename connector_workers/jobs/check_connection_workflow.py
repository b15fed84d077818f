"""Workflow and activity checking connectivity of a connector configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from connector_workers.adapters import ConnectorIntegrationLauncher, ProcessFactoryPort
from connector_workers.domain import (
    IntegrationLauncherConfig,
    JobRunConfig,
    StandardCheckConnectionInput,
    StandardCheckConnectionOutput,
)
from connector_workers.workers import DefaultCheckConnectionWorker

from .attempt_execution import AttemptExecution


class CheckConnectionWorkflowPort(Protocol):
    """Workflow contract for check-connection jobs."""

    def workflow_run(
        self,
        job_run_config: JobRunConfig,
        launcher_config: IntegrationLauncherConfig,
        connection_input: StandardCheckConnectionInput,
    ) -> StandardCheckConnectionOutput:
        """Return the connectivity outcome of one configuration."""


class CheckConnectionActivityPort(Protocol):
    """Activity contract for check-connection jobs."""

    def activity_run(
        self,
        job_run_config: JobRunConfig,
        launcher_config: IntegrationLauncherConfig,
        connection_input: StandardCheckConnectionInput,
    ) -> StandardCheckConnectionOutput:
        """Run `check` for one attempt."""


class CheckConnectionWorkflowImpl(CheckConnectionWorkflowPort):
    """Delegate the check-connection job to its activity."""

    def __init__(self, activity: CheckConnectionActivityPort):
        if activity is None:
            raise ValueError("activity must not be None")
        self._activity = activity

    def workflow_run(
        self,
        job_run_config: JobRunConfig,
        launcher_config: IntegrationLauncherConfig,
        connection_input: StandardCheckConnectionInput,
    ) -> StandardCheckConnectionOutput:
        return self._activity.activity_run(job_run_config, launcher_config, connection_input)


class CheckConnectionActivityImpl(CheckConnectionActivityPort):
    """Run the check-connection worker inside an attempt scope."""

    def __init__(self, process_factory: ProcessFactoryPort, workspace_root: Path, close_timeout_seconds: float = 60.0):
        if process_factory is None:
            raise ValueError("process_factory must not be None")
        if workspace_root is None:
            raise ValueError("workspace_root must not be None")

        self._process_factory = process_factory
        self._workspace_root = workspace_root
        self._close_timeout_seconds = close_timeout_seconds

    def activity_run(
        self,
        job_run_config: JobRunConfig,
        launcher_config: IntegrationLauncherConfig,
        connection_input: StandardCheckConnectionInput,
    ) -> StandardCheckConnectionOutput:
        """Run `check` for one attempt.

        Args:
            job_run_config: Attempt identity.
            launcher_config: Connector image to run.
            connection_input: Configuration to check.

        Returns:
            StandardCheckConnectionOutput: Connectivity outcome; a failed check is a result.

        Raises:
            AttemptFailureError: Raised when the attempt fails for any reason.
        """

        def _activity_execute(job_root: Path) -> StandardCheckConnectionOutput:
            launcher = ConnectorIntegrationLauncher(
                launcher_config.job_id,
                launcher_config.attempt_id,
                launcher_config.docker_image,
                self._process_factory,
            )
            return DefaultCheckConnectionWorker(launcher, self._close_timeout_seconds).worker_run(connection_input, job_root)

        return AttemptExecution(
            workspace_root=self._workspace_root,
            job_run_config=job_run_config,
            execution=_activity_execute,
        ).attempt_execute()
