"""Workflow and activity discovering the stream catalog of a source."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from connector_workers.adapters import ConnectorIntegrationLauncher, ProcessFactoryPort
from connector_workers.domain import (
    ConnectorCatalog,
    IntegrationLauncherConfig,
    JobRunConfig,
    StandardDiscoverCatalogInput,
)
from connector_workers.workers import DefaultDiscoverCatalogWorker

from .attempt_execution import AttemptExecution


class DiscoverCatalogWorkflowPort(Protocol):
    """Workflow contract for discover-schema jobs."""

    def workflow_run(
        self,
        job_run_config: JobRunConfig,
        launcher_config: IntegrationLauncherConfig,
        discover_input: StandardDiscoverCatalogInput,
    ) -> ConnectorCatalog:
        """Return the catalog discovered with one configuration."""


class DiscoverCatalogActivityPort(Protocol):
    """Activity contract for discover-schema jobs."""

    def activity_run(
        self,
        job_run_config: JobRunConfig,
        launcher_config: IntegrationLauncherConfig,
        discover_input: StandardDiscoverCatalogInput,
    ) -> ConnectorCatalog:
        """Run `discover` for one attempt."""


class DiscoverCatalogWorkflowImpl(DiscoverCatalogWorkflowPort):
    """Delegate the discover-schema job to its activity."""

    def __init__(self, activity: DiscoverCatalogActivityPort):
        if activity is None:
            raise ValueError("activity must not be None")
        self._activity = activity

    def workflow_run(
        self,
        job_run_config: JobRunConfig,
        launcher_config: IntegrationLauncherConfig,
        discover_input: StandardDiscoverCatalogInput,
    ) -> ConnectorCatalog:
        return self._activity.activity_run(job_run_config, launcher_config, discover_input)


class DiscoverCatalogActivityImpl(DiscoverCatalogActivityPort):
    """Run the discover worker inside an attempt scope."""

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
        discover_input: StandardDiscoverCatalogInput,
    ) -> ConnectorCatalog:
        def _activity_execute(job_root: Path) -> ConnectorCatalog:
            launcher = ConnectorIntegrationLauncher(
                launcher_config.job_id,
                launcher_config.attempt_id,
                launcher_config.docker_image,
                self._process_factory,
            )
            return DefaultDiscoverCatalogWorker(launcher, self._close_timeout_seconds).worker_run(discover_input, job_root)

        return AttemptExecution(
            workspace_root=self._workspace_root,
            job_run_config=job_run_config,
            execution=_activity_execute,
        ).attempt_execute()
