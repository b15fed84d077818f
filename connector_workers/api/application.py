"""FastAPI application factory for the connector worker service."""

from fastapi import FastAPI

from connector_workers.config import WorkerSettings
from connector_workers.jobs import JobDispatcher
from connector_workers.workspace import WorkspaceHealthPort

from .routers import api_create_health_router, api_create_jobs_router


def create_api_application(
    settings: WorkerSettings,
    workspace_health: WorkspaceHealthPort,
    dispatcher: JobDispatcher,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated worker settings used for runtime metadata.
        workspace_health: Workspace health service used by health endpoints.
        dispatcher: Job dispatcher used by job submission endpoints.

    Returns:
        FastAPI: Framework application instance.

    Raises:
        ValueError: Raised when a router dependency is missing.
    """
    application = FastAPI(title="Connector Workers")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal foundation response for bootstrap verification."""

        return {
            "service": "connector-workers",
            "status": "foundation-ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(workspace_health=workspace_health))
    application.include_router(api_create_jobs_router(dispatcher=dispatcher))

    return application
