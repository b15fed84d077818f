"""Health endpoint router composition for app and workspace checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from connector_workers.workspace import WorkspaceHealthPort


def api_create_health_router(workspace_health: WorkspaceHealthPort) -> APIRouter:
    """Create health-check router with app and workspace status.

    Args:
        workspace_health: Workspace-layer health service interface.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when workspace_health is invalid.
    """

    if workspace_health is None:
        raise ValueError("workspace_health must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application and workspace health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.

        Raises:
            OSError: Raised when the workspace health check fails unexpectedly.
        """

        try:
            workspace_status = workspace_health.workspace_check_health()
            payload = {
                "status": "ok",
                "app": "up",
                "workspace": workspace_status.status,
                "detail": workspace_status.detail,
                "target": workspace_health.workspace_location_label(),
            }
            return JSONResponse(content=payload, status_code=status.HTTP_200_OK)
        except OSError as error:
            payload = {
                "status": "degraded",
                "app": "up",
                "workspace": "down",
                "detail": str(error),
                "target": workspace_health.workspace_location_label(),
            }
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    return router
