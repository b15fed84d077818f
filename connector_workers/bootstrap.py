"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from connector_workers.adapters import DockerProcessFactory, ProcessFactoryPort
from connector_workers.api import create_api_application
from connector_workers.config import WorkerSettings, config_load_settings
from connector_workers.engine import InProcessWorkflowEngine
from connector_workers.jobs import (
    CheckConnectionActivityImpl,
    CheckConnectionWorkflowImpl,
    CheckConnectionWorkflowPort,
    DiscoverCatalogActivityImpl,
    DiscoverCatalogWorkflowImpl,
    DiscoverCatalogWorkflowPort,
    JobDispatcher,
    SpecActivityImpl,
    SpecWorkflowImpl,
    SpecWorkflowPort,
    SyncActivityImpl,
    SyncWorkflowImpl,
    SyncWorkflowPort,
)
from connector_workers.workspace import FilesystemWorkspaceHealthService


def bootstrap_create_process_factory(settings: WorkerSettings) -> DockerProcessFactory:
    """Build the docker process factory from validated settings."""

    return DockerProcessFactory(
        workspace_root=settings.workspace_root,
        workspace_mount=settings.workspace_docker_mount,
        local_mount=settings.local_docker_mount,
        network=settings.docker_network,
        docker_executable=settings.docker_executable,
    )


def bootstrap_create_engine(settings: WorkerSettings, process_factory: ProcessFactoryPort) -> InProcessWorkflowEngine:
    """Register every job kind workflow with its activity on a new engine.

    Args:
        settings: Validated worker settings.
        process_factory: Factory starting connector and normalization processes.

    Returns:
        InProcessWorkflowEngine: Engine with the four job workflows registered.

    Raises:
        ValueError: Raised when a workflow is registered twice.
    """

    workspace_root = settings.workspace_root
    close_timeout_seconds = settings.process_close_timeout_seconds
    spec_activity = SpecActivityImpl(process_factory, workspace_root, close_timeout_seconds)
    check_activity = CheckConnectionActivityImpl(process_factory, workspace_root, close_timeout_seconds)
    discover_activity = DiscoverCatalogActivityImpl(process_factory, workspace_root, close_timeout_seconds)
    sync_activity = SyncActivityImpl(
        process_factory,
        workspace_root,
        settings.normalization_image,
        close_timeout_seconds,
    )

    engine = InProcessWorkflowEngine()
    engine.engine_register(SpecWorkflowPort, lambda: SpecWorkflowImpl(spec_activity))
    engine.engine_register(CheckConnectionWorkflowPort, lambda: CheckConnectionWorkflowImpl(check_activity))
    engine.engine_register(DiscoverCatalogWorkflowPort, lambda: DiscoverCatalogWorkflowImpl(discover_activity))
    engine.engine_register(SyncWorkflowPort, lambda: SyncWorkflowImpl(sync_activity))
    return engine


def bootstrap_create_dispatcher(settings: WorkerSettings | None = None) -> JobDispatcher:
    """Build a job dispatcher for non-HTTP trigger surfaces.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        JobDispatcher: Dispatcher backed by a fully wired in-process engine.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    if settings is None:
        settings = config_load_settings()
    process_factory = bootstrap_create_process_factory(settings)
    return JobDispatcher(engine=bootstrap_create_engine(settings, process_factory))


def bootstrap_create_application(settings: WorkerSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    if settings is None:
        settings = config_load_settings()
    return create_api_application(
        settings=settings,
        workspace_health=FilesystemWorkspaceHealthService(workspace_root=settings.workspace_root),
        dispatcher=bootstrap_create_dispatcher(settings),
    )
