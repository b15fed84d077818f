"""Tests for sync activity assembly, including reset jobs."""

from __future__ import annotations

import contextvars
import json
from pathlib import Path

import pytest
from process_doubles import FakeProcess, FakeProcessFactory

from connector_workers.domain import IntegrationLauncherConfig, JobRunConfig, StandardSyncInput
from connector_workers.jobs import AttemptFailureError, SyncActivityImpl
from connector_workers.protocol import ConnectorProcessError

_CATALOG = {"streams": [{"stream": {"name": "users"}, "sync_mode": "full_refresh"}]}


def _sync_input(prefix: str = "") -> StandardSyncInput:
    return StandardSyncInput(
        prefix=prefix,
        source_configuration={"host": "db"},
        destination_configuration={"path": "/local/out"},
        catalog=_CATALOG,
        state={"cursor": 1},
    )


def _launcher_config(docker_image: str) -> IntegrationLauncherConfig:
    return IntegrationLauncherConfig(job_id=5, attempt_id=1, docker_image=docker_image)


def _run_activity(factory: FakeProcessFactory, workspace_root: Path, source_image: str, destination_image: str, prefix: str = ""):
    """Run the sync activity in an isolated execution context.

    Args:
        factory: Process factory double.
        workspace_root: Workspace root.
        source_image: Source image or reset stub.
        destination_image: Destination image.
        prefix: Stream prefix.

    Returns:
        StandardSyncOutput: Activity output.

    Raises:
        AttemptFailureError: Raised when the attempt fails.
    """

    activity = SyncActivityImpl(factory, workspace_root, "airbyte/normalization:0.1.0", close_timeout_seconds=1.0)
    return contextvars.copy_context().run(
        activity.activity_run,
        JobRunConfig(job_id=5, attempt_id=1),
        _launcher_config(source_image),
        _launcher_config(destination_image),
        _sync_input(prefix),
    )


def test_jobs_sync_activity_reset_stub_uses_empty_source(tmp_path: Path) -> None:
    """Launch only the destination when the source image is the reset stub.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate launches and summary.

    Raises:
        AssertionError: Raised when a source process is started.
    """

    write_process = FakeProcess()
    factory = FakeProcessFactory({"write": write_process})

    output = _run_activity(factory, tmp_path, "__RESET__", "airbyte/destination-csv:0.1.0")

    assert factory.commands() == ["write"]
    assert write_process.stdin.lines() == []
    assert output.standard_sync_summary.records_synced == 0
    assert output.state == {"cursor": 1}
    assert not (tmp_path / "5" / "1" / "source_config.json").exists()


def test_jobs_sync_activity_real_source_forwards_records(tmp_path: Path) -> None:
    """Launch source and destination and forward prefixed records between them.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate launches, forwarded lines and summary.

    Raises:
        AssertionError: Raised when records are not forwarded.
    """

    source_stdout = "".join(
        json.dumps(message) + "\n"
        for message in (
            {"type": "RECORD", "record": {"stream": "users", "data": {"id": 1}}},
            {"type": "RECORD", "record": {"stream": "users", "data": {"id": 2}}},
            {"type": "STATE", "state": {"data": {"cursor": 2}}},
        )
    )
    write_process = FakeProcess()
    factory = FakeProcessFactory({"read": FakeProcess(source_stdout), "write": write_process})

    output = _run_activity(factory, tmp_path, "airbyte/source-pg:1.0", "airbyte/destination-csv:0.1.0", prefix="raw_")

    job_root = tmp_path / "5" / "1"
    forwarded = [json.loads(line) for line in write_process.stdin.lines()]
    assert factory.commands() == ["write", "read"]
    assert [message["record"]["stream"] for message in forwarded if message["type"] == "RECORD"] == [
        "raw_users",
        "raw_users",
    ]
    assert output.standard_sync_summary.records_synced == 2
    assert output.state == {"cursor": 2}
    assert json.loads((job_root / "destination_catalog.json").read_text(encoding="utf-8"))["streams"][0]["stream"][
        "name"
    ] == "raw_users"
    assert (job_root / "source_config.json").is_file()


def test_jobs_sync_activity_runs_normalization_for_warehouse_destination(tmp_path: Path) -> None:
    """Run the normalization image after writing to a supported warehouse.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate normalization launch.

    Raises:
        AssertionError: Raised when normalization is skipped.
    """

    factory = FakeProcessFactory()

    _run_activity(factory, tmp_path, "__RESET__", "airbyte/destination-postgres:0.3.0")

    assert factory.commands() == ["write", "run"]
    assert factory.calls[1]["job_root"] == tmp_path / "5" / "1" / "normalize"


def test_jobs_sync_activity_wraps_connector_failure(tmp_path: Path) -> None:
    """Surface a failing destination as an attempt failure pointing at the attempt log.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate failure classification.

    Raises:
        AssertionError: Raised when failure is not classified.
    """

    factory = FakeProcessFactory({"write": FakeProcess(exit_code=1)})

    with pytest.raises(AttemptFailureError) as error_info:
        _run_activity(factory, tmp_path, "__RESET__", "airbyte/destination-csv:0.1.0")

    assert error_info.value.log_path == tmp_path / "5" / "1" / "logs.log"
    assert isinstance(error_info.value.cause, ConnectorProcessError)
