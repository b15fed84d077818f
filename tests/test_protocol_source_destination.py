"""Tests for connector-backed sources and destinations."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from process_doubles import FakeProcess, FakeProcessFactory

from connector_workers.adapters import ConnectorIntegrationLauncher
from connector_workers.protocol import (
    ConnectorMessage,
    ConnectorMessageType,
    ConnectorProcessError,
    DefaultConnectorDestination,
    DefaultConnectorSource,
    EmptyConnectorSource,
)


def _read_json(path: Path) -> object:
    return json.loads(path.read_text(encoding="utf-8"))


def test_protocol_source_writes_inputs_and_reads_messages(tmp_path: Path) -> None:
    """Write source inputs, start `read` with state and emit messages until exhausted.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate files, command and messages.

    Raises:
        AssertionError: Raised when source behavior differs.
    """

    stdout_text = '{"type": "RECORD", "record": {"stream": "users", "data": {"id": 1}}}\n'
    factory = FakeProcessFactory({"read": FakeProcess(stdout_text)})
    source = DefaultConnectorSource(ConnectorIntegrationLauncher(1, 0, "airbyte/source-pg:1.0", factory))

    source.source_start(tmp_path, {"host": "db"}, {"streams": []}, {"cursor": 5})
    first_message = source.source_attempt_read()
    second_message = source.source_attempt_read()
    source.source_close()

    assert first_message.record["data"] == {"id": 1}
    assert second_message is None
    assert source.source_is_finished() is True
    assert _read_json(tmp_path / "source_config.json") == {"host": "db"}
    assert _read_json(tmp_path / "input_state.json") == {"cursor": 5}
    assert factory.calls[0]["args"] == (
        "read",
        "--config",
        "source_config.json",
        "--catalog",
        "source_catalog.json",
        "--state",
        "input_state.json",
    )


def test_protocol_source_without_state_omits_state_argument(tmp_path: Path) -> None:
    """Start `read` without `--state` when no input state exists.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate command and files.

    Raises:
        AssertionError: Raised when state is passed.
    """

    factory = FakeProcessFactory()
    source = DefaultConnectorSource(ConnectorIntegrationLauncher(1, 0, "airbyte/source-pg:1.0", factory))

    source.source_start(tmp_path, {}, {"streams": []}, None)

    assert "--state" not in factory.calls[0]["args"]
    assert not (tmp_path / "input_state.json").exists()


def test_protocol_source_close_raises_on_non_zero_exit(tmp_path: Path) -> None:
    """Raise a process error when the source exits unsuccessfully.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate error type.

    Raises:
        AssertionError: Raised when the exit code is ignored.
    """

    factory = FakeProcessFactory({"read": FakeProcess(exit_code=1)})
    source = DefaultConnectorSource(ConnectorIntegrationLauncher(1, 0, "airbyte/source-pg:1.0", factory))
    source.source_start(tmp_path, {}, {"streams": []}, None)

    with pytest.raises(ConnectorProcessError):
        source.source_close()


def test_protocol_empty_source_is_finished_immediately(tmp_path: Path) -> None:
    """Emit nothing and report completion from the start.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate empty source.

    Raises:
        AssertionError: Raised when messages are emitted.
    """

    source = EmptyConnectorSource()
    source.source_start(tmp_path, {}, {"streams": []}, None)

    assert source.source_is_finished() is True
    assert source.source_attempt_read() is None
    assert list(tmp_path.iterdir()) == []


def test_protocol_destination_writes_one_line_per_message(tmp_path: Path) -> None:
    """Write each accepted message as a JSON line and close stdin on end of stream.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate stdin content and files.

    Raises:
        AssertionError: Raised when destination behavior differs.
    """

    write_process = FakeProcess()
    factory = FakeProcessFactory({"write": write_process})
    destination = DefaultConnectorDestination(ConnectorIntegrationLauncher(1, 0, "airbyte/destination-csv:1.0", factory))

    destination.destination_start(tmp_path, {"path": "/local"}, {"streams": []})
    destination.destination_accept(
        ConnectorMessage(type=ConnectorMessageType.RECORD, record={"stream": "users", "data": {"id": 1}})
    )
    destination.destination_close()

    assert write_process.stdin.closed is True
    assert [json.loads(line)["record"]["stream"] for line in write_process.stdin.lines()] == ["users"]
    assert _read_json(tmp_path / "destination_config.json") == {"path": "/local"}
    assert factory.calls[0]["args"][0] == "write"


def test_protocol_destination_rejects_messages_after_end_of_stream(tmp_path: Path) -> None:
    """Refuse messages once end of stream was signalled.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate rejection.

    Raises:
        AssertionError: Raised when the message is accepted.
    """

    factory = FakeProcessFactory()
    destination = DefaultConnectorDestination(ConnectorIntegrationLauncher(1, 0, "airbyte/destination-csv:1.0", factory))
    destination.destination_start(tmp_path, {}, {"streams": []})
    destination.destination_notify_end_of_stream()

    with pytest.raises(RuntimeError, match="not accepting"):
        destination.destination_accept(ConnectorMessage(type=ConnectorMessageType.STATE, state={}))


def test_protocol_destination_close_raises_on_non_zero_exit(tmp_path: Path) -> None:
    """Raise a process error when the destination exits unsuccessfully.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate error and exit code.

    Raises:
        AssertionError: Raised when the exit code is ignored.
    """

    factory = FakeProcessFactory({"write": FakeProcess(exit_code=3)})
    destination = DefaultConnectorDestination(ConnectorIntegrationLauncher(1, 0, "airbyte/destination-csv:1.0", factory))
    destination.destination_start(tmp_path, {}, {"streams": []})

    with pytest.raises(ConnectorProcessError) as error_info:
        destination.destination_close()

    assert error_info.value.exit_code == 3
