"""Tests for connector message parsing and serialization."""

from __future__ import annotations

import json
import logging

import pytest

from connector_workers.protocol import (
    ConnectorMessage,
    ConnectorMessageType,
    protocol_iter_messages,
    protocol_parse_message_line,
    protocol_serialize_message,
)


def test_protocol_parse_record_line() -> None:
    """Parse a record line into a typed message.

    Returns:
        None: Assertions validate parsed message.

    Raises:
        AssertionError: Raised when parsing differs.
    """

    message = protocol_parse_message_line('{"type": "RECORD", "record": {"stream": "users", "data": {"id": 1}}}\n')

    assert message is not None
    assert message.type == ConnectorMessageType.RECORD
    assert message.record == {"stream": "users", "data": {"id": 1}}


@pytest.mark.parametrize("line", ["", "   \n", '{"type": "UNKNOWN"}', "{not json"])
def test_protocol_parse_skips_blank_and_invalid_lines(line: str) -> None:
    """Return None for lines that are not valid connector messages.

    Args:
        line: Raw output line.

    Returns:
        None: Assertions validate skip behavior.

    Raises:
        AssertionError: Raised when a message is produced.
    """

    assert protocol_parse_message_line(line) is None


def test_protocol_parse_logs_plain_output(caplog: pytest.LogCaptureFixture) -> None:
    """Log plain connector output lines instead of dropping them silently.

    Args:
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate log capture.

    Raises:
        AssertionError: Raised when the line is not logged.
    """

    with caplog.at_level(logging.INFO, logger="connector_workers.protocol.messages"):
        assert protocol_parse_message_line("Fetching rows from users") is None

    assert "Fetching rows from users" in caplog.text


def test_protocol_iter_messages_logs_and_drops_log_messages(caplog: pytest.LogCaptureFixture) -> None:
    """Yield non-log messages in order and log connector LOG messages at their level.

    Args:
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate yielded messages and log records.

    Raises:
        AssertionError: Raised when filtering differs.
    """

    lines = [
        '{"type": "LOG", "log": {"level": "WARN", "message": "slow query"}}',
        '{"type": "STATE", "state": {"data": {"cursor": 3}}}',
        '{"type": "RECORD", "record": {"stream": "users", "data": {}}}',
    ]

    with caplog.at_level(logging.DEBUG, logger="connector_workers.protocol.messages"):
        messages = list(protocol_iter_messages(lines))

    assert [message.type for message in messages] == [ConnectorMessageType.STATE, ConnectorMessageType.RECORD]
    warning_records = [record for record in caplog.records if record.getMessage() == "slow query"]
    assert warning_records[0].levelno == logging.WARNING


def test_protocol_serialize_omits_unset_payloads() -> None:
    """Serialize one message as compact JSON without empty payload fields.

    Returns:
        None: Assertions validate serialized content.

    Raises:
        AssertionError: Raised when serialization differs.
    """

    message = ConnectorMessage(type=ConnectorMessageType.STATE, state={"data": {"cursor": 3}})

    serialized = protocol_serialize_message(message)

    assert "\n" not in serialized
    assert json.loads(serialized) == {"type": "STATE", "state": {"data": {"cursor": 3}}}
