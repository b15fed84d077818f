"""Tests for job config building and result payload conversion."""

from __future__ import annotations

from pathlib import Path

import pytest

from connector_workers.domain import (
    JobRunConfig,
    StandardSyncOutput,
    StandardSyncSummary,
    SyncStatus,
    domain_build_check_connection_config,
    domain_build_sync_config,
    domain_to_payload,
)
from connector_workers.workspace import workspace_resolve_job_root, workspace_resolve_log_path


def test_domain_build_check_connection_config_strips_image() -> None:
    """Build a check config with a trimmed image reference.

    Returns:
        None: Assertions validate config.

    Raises:
        AssertionError: Raised when config differs.
    """

    config = domain_build_check_connection_config(
        {"docker_image": " airbyte/source-pg:1.0 ", "connection_configuration": {"host": "db"}}
    )

    assert config.docker_image == "airbyte/source-pg:1.0"
    assert config.connection_configuration == {"host": "db"}


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"destination_docker_image": "d", "source_configuration": {}}, "source_docker_image"),
        (
            {
                "source_docker_image": "s",
                "destination_docker_image": "d",
                "source_configuration": {},
                "destination_configuration": {},
                "configured_catalog": {},
                "state": [1],
            },
            "state",
        ),
        (
            {
                "source_docker_image": "s",
                "destination_docker_image": "d",
                "source_configuration": {},
                "destination_configuration": "nope",
                "configured_catalog": {},
            },
            "destination_configuration",
        ),
    ],
)
def test_domain_build_sync_config_rejects_invalid_payloads(payload: dict, message: str) -> None:
    """Reject sync payloads with missing or mistyped keys.

    Args:
        payload: Invalid payload.
        message: Expected key named in the error.

    Returns:
        None: Assertions validate rejection.

    Raises:
        AssertionError: Raised when the payload is accepted.
    """

    with pytest.raises(ValueError, match=message):
        domain_build_sync_config(payload)


def test_domain_to_payload_renders_enums_and_nested_dataclasses() -> None:
    """Convert nested results into JSON-compatible primitives.

    Returns:
        None: Assertions validate converted payload.

    Raises:
        AssertionError: Raised when conversion differs.
    """

    output = StandardSyncOutput(
        standard_sync_summary=StandardSyncSummary(
            status=SyncStatus.COMPLETED,
            records_synced=2,
            bytes_synced=14,
            start_time_ms=1,
            end_time_ms=2,
        ),
        state={"cursor": 2},
    )

    assert domain_to_payload(output) == {
        "standard_sync_summary": {
            "status": "completed",
            "records_synced": 2,
            "bytes_synced": 14,
            "start_time_ms": 1,
            "end_time_ms": 2,
        },
        "state": {"cursor": 2},
    }


def test_workspace_layout_partitions_by_job_and_attempt() -> None:
    """Resolve the attempt directory and its log file.

    Returns:
        None: Assertions validate layout.

    Raises:
        AssertionError: Raised when layout differs.
    """

    job_root = workspace_resolve_job_root(Path("/tmp/ws"), JobRunConfig(job_id=11, attempt_id=21))

    assert job_root == Path("/tmp/ws/11/21")
    assert workspace_resolve_log_path(job_root) == Path("/tmp/ws/11/21/logs.log")
