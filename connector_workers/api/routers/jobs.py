"""Job submission API router for the four job kinds."""

from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from connector_workers.domain import (
    domain_build_check_connection_config,
    domain_build_discover_catalog_config,
    domain_build_get_spec_config,
    domain_build_sync_config,
    domain_to_payload,
)
from connector_workers.engine import WorkflowTimeoutError
from connector_workers.jobs import AttemptFailureError, JobDispatcher, JobKind


class JobSubmitRequest(BaseModel):
    """Request body shared by job submission endpoints."""

    job_id: int = Field(ge=0)
    attempt: int = Field(default=0, ge=0)
    config: dict[str, Any]


_JOB_CONFIG_BUILDERS: dict[JobKind, Callable[[dict[str, Any]], Any]] = {
    JobKind.GET_SPEC: domain_build_get_spec_config,
    JobKind.CHECK_CONNECTION: domain_build_check_connection_config,
    JobKind.DISCOVER_SCHEMA: domain_build_discover_catalog_config,
    JobKind.SYNC: domain_build_sync_config,
}


def api_create_jobs_router(dispatcher: JobDispatcher) -> APIRouter:
    """Create router submitting jobs through the dispatcher.

    Args:
        dispatcher: Job dispatcher running one workflow per request.

    Returns:
        APIRouter: Router exposing `/jobs/*` submission endpoints.

    Raises:
        ValueError: Raised when dispatcher is invalid.
    """

    if dispatcher is None:
        raise ValueError("dispatcher must not be None")

    router = APIRouter(prefix="/jobs", tags=["jobs"])

    def _api_submit(kind: JobKind, request: JobSubmitRequest) -> JSONResponse:
        try:
            job_config = _JOB_CONFIG_BUILDERS[kind](request.config)
        except ValueError as error:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(error)) from error

        try:
            result = dispatcher.dispatcher_submit(kind, request.job_id, request.attempt, job_config)
        except AttemptFailureError as error:
            payload = {
                "status": "failed",
                "job_id": request.job_id,
                "attempt": request.attempt,
                "log_path": str(error.log_path),
                "cause": None if error.cause is None else f"{type(error.cause).__name__}: {error.cause}",
            }
            return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        except WorkflowTimeoutError as error:
            payload = {
                "status": "timed_out",
                "job_id": request.job_id,
                "attempt": request.attempt,
                "detail": str(error),
            }
            return JSONResponse(content=payload, status_code=status.HTTP_504_GATEWAY_TIMEOUT)

        payload = {
            "status": "succeeded",
            "job_id": request.job_id,
            "attempt": request.attempt,
            "result": domain_to_payload(result),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.post("/get-spec")
    def api_jobs_get_spec(request: JobSubmitRequest) -> JSONResponse:
        """Run a get-spec job for the image in `config.docker_image`."""

        return _api_submit(JobKind.GET_SPEC, request)

    @router.post("/check-connection")
    def api_jobs_check_connection(request: JobSubmitRequest) -> JSONResponse:
        return _api_submit(JobKind.CHECK_CONNECTION, request)

    @router.post("/discover-schema")
    def api_jobs_discover_schema(request: JobSubmitRequest) -> JSONResponse:
        return _api_submit(JobKind.DISCOVER_SCHEMA, request)

    @router.post("/sync")
    def api_jobs_sync(request: JobSubmitRequest) -> JSONResponse:
        """Run a sync job; `source_docker_image` equal to `__RESET__` resets the destination."""

        return _api_submit(JobKind.SYNC, request)

    return router
