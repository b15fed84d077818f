"""API router package for endpoint composition."""

from .health import api_create_health_router
from .jobs import JobSubmitRequest, api_create_jobs_router

__all__ = ["JobSubmitRequest", "api_create_health_router", "api_create_jobs_router"]
