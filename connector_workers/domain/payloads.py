"""JSON payload conversion helpers for domain contracts."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

from .models import JobCheckConnectionConfig, JobDiscoverCatalogConfig, JobGetSpecConfig, JobSyncConfig


def domain_build_get_spec_config(payload: dict[str, Any]) -> JobGetSpecConfig:
    """Build get-spec submit config from a JSON payload.

    Args:
        payload: Decoded JSON object.

    Returns:
        JobGetSpecConfig: Submit config.

    Raises:
        ValueError: Raised when required keys are missing or blank.
    """

    return JobGetSpecConfig(docker_image=_domain_require_image(payload, "docker_image"))


def domain_build_check_connection_config(payload: dict[str, Any]) -> JobCheckConnectionConfig:
    """Build check-connection submit config from a JSON payload.

    Args:
        payload: Decoded JSON object.

    Returns:
        JobCheckConnectionConfig: Submit config.

    Raises:
        ValueError: Raised when required keys are missing or invalid.
    """

    return JobCheckConnectionConfig(
        docker_image=_domain_require_image(payload, "docker_image"),
        connection_configuration=_domain_require_object(payload, "connection_configuration"),
    )


def domain_build_discover_catalog_config(payload: dict[str, Any]) -> JobDiscoverCatalogConfig:
    """Build discover-catalog submit config from a JSON payload.

    Args:
        payload: Decoded JSON object.

    Returns:
        JobDiscoverCatalogConfig: Submit config.

    Raises:
        ValueError: Raised when required keys are missing or invalid.
    """

    return JobDiscoverCatalogConfig(
        docker_image=_domain_require_image(payload, "docker_image"),
        connection_configuration=_domain_require_object(payload, "connection_configuration"),
    )


def domain_build_sync_config(payload: dict[str, Any]) -> JobSyncConfig:
    """Build sync submit config from a JSON payload.

    Args:
        payload: Decoded JSON object.

    Returns:
        JobSyncConfig: Submit config.

    Raises:
        ValueError: Raised when required keys are missing or invalid.
    """

    state = payload.get("state")
    if state is not None and not isinstance(state, dict):
        raise ValueError("state must be a JSON object when provided")
    prefix = payload.get("prefix") or ""
    if not isinstance(prefix, str):
        raise ValueError("prefix must be a string")

    return JobSyncConfig(
        source_docker_image=_domain_require_image(payload, "source_docker_image"),
        destination_docker_image=_domain_require_image(payload, "destination_docker_image"),
        source_configuration=_domain_require_object(payload, "source_configuration"),
        destination_configuration=_domain_require_object(payload, "destination_configuration"),
        configured_catalog=_domain_require_object(payload, "configured_catalog"),
        state=state,
        prefix=prefix,
    )


def domain_to_payload(value: Any) -> Any:
    """Convert a domain contract into JSON-compatible primitives.

    Args:
        value: Dataclass instance, enum, container, or primitive.

    Returns:
        Any: JSON-compatible value with enums rendered as their values.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if is_dataclass(value) and not isinstance(value, type):
        return domain_to_payload(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: domain_to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [domain_to_payload(item) for item in value]
    return value


def _domain_require_image(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{key} must be a non-blank string")
    return value.strip()


def _domain_require_object(payload: dict[str, Any], key: str) -> dict[str, Any]:
    value = payload.get(key)
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be a JSON object")
    return value
