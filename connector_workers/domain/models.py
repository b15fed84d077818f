"""Typed domain contracts shared across worker runtime layers.

Job configs are what callers submit, job inputs are what workflows and
activities receive, and job outputs are what one attempt returns. Payload
fields that belong to connectors (configurations, catalogs, state) stay plain
JSON-compatible dictionaries and pass through the orchestration core unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class JobRunConfig:
    """Identity of one attempt within one job.

    Attributes:
        job_id: Job identifier.
        attempt_id: Attempt number within the job.
    """

    job_id: int
    attempt_id: int


@dataclass(frozen=True)
class IntegrationLauncherConfig:
    """Connector image to launch for one role of one attempt.

    Attributes:
        job_id: Job identifier.
        attempt_id: Attempt number within the job.
        docker_image: Connector image reference.
    """

    job_id: int
    attempt_id: int
    docker_image: str


@dataclass(frozen=True)
class JobGetSpecConfig:
    """Submit payload for fetching a connector specification.

    Attributes:
        docker_image: Connector image reference.
    """

    docker_image: str


@dataclass(frozen=True)
class JobCheckConnectionConfig:
    """Submit payload for checking connector connectivity.

    Attributes:
        docker_image: Connector image reference.
        connection_configuration: Connector configuration document.
    """

    docker_image: str
    connection_configuration: dict[str, Any]


@dataclass(frozen=True)
class JobDiscoverCatalogConfig:
    """Submit payload for discovering a connector catalog.

    Attributes:
        docker_image: Connector image reference.
        connection_configuration: Connector configuration document.
    """

    docker_image: str
    connection_configuration: dict[str, Any]


@dataclass(frozen=True)
class JobSyncConfig:
    """Submit payload for a full source-to-destination sync.

    Attributes:
        source_docker_image: Source connector image, or the reset stub.
        destination_docker_image: Destination connector image.
        source_configuration: Source configuration document.
        destination_configuration: Destination configuration document.
        configured_catalog: Configured catalog selecting streams to sync.
        state: Optional source state from the previous sync.
        prefix: Stream name prefix applied on the destination side.
    """

    source_docker_image: str
    destination_docker_image: str
    source_configuration: dict[str, Any]
    destination_configuration: dict[str, Any]
    configured_catalog: dict[str, Any]
    state: dict[str, Any] | None = None
    prefix: str = ""


@dataclass(frozen=True)
class StandardCheckConnectionInput:
    """Activity input for check-connection attempts."""

    connection_configuration: dict[str, Any]


@dataclass(frozen=True)
class StandardDiscoverCatalogInput:
    """Activity input for discover-catalog attempts."""

    connection_configuration: dict[str, Any]


@dataclass(frozen=True)
class StandardSyncInput:
    """Activity input for sync attempts.

    Attributes:
        prefix: Stream name prefix applied on the destination side.
        source_configuration: Source configuration document.
        destination_configuration: Destination configuration document.
        catalog: Configured catalog.
        state: Optional input state for the source.
    """

    prefix: str
    source_configuration: dict[str, Any]
    destination_configuration: dict[str, Any]
    catalog: dict[str, Any]
    state: dict[str, Any] | None = None


@dataclass(frozen=True)
class ConnectorSpecification:
    """Connector specification document returned by `spec`.

    Attributes:
        connection_specification: JSON schema describing connector configuration.
        documentation_url: Optional connector documentation link.
        changelog_url: Optional connector changelog link.
    """

    connection_specification: dict[str, Any]
    documentation_url: str | None = None
    changelog_url: str | None = None


class CheckConnectionStatus(str, Enum):
    """Outcome of a connectivity check."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class StandardCheckConnectionOutput:
    """Result of a check-connection attempt.

    Attributes:
        status: Connectivity outcome reported by the connector.
        message: Optional connector message.
    """

    status: CheckConnectionStatus
    message: str | None = None


@dataclass(frozen=True)
class ConnectorCatalog:
    """Catalog of streams discovered from a source."""

    streams: list[dict[str, Any]]


class SyncStatus(str, Enum):
    """Final status of one sync attempt."""

    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class StandardSyncSummary:
    """Counters and timing of one sync attempt.

    Attributes:
        status: Final sync status.
        records_synced: Number of records forwarded to the destination.
        bytes_synced: Serialized size of forwarded record data.
        start_time_ms: Epoch milliseconds when the sync started.
        end_time_ms: Epoch milliseconds when the sync finished.
    """

    status: SyncStatus
    records_synced: int
    bytes_synced: int
    start_time_ms: int
    end_time_ms: int


@dataclass(frozen=True)
class StandardSyncOutput:
    """Result of a sync attempt.

    Attributes:
        standard_sync_summary: Counters and timing.
        state: State to hand to the next sync, if any.
    """

    standard_sync_summary: StandardSyncSummary
    state: dict[str, Any] | None = None


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str
