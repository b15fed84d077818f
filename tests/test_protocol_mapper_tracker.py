"""Tests for stream namespacing and message accounting."""

from __future__ import annotations

from connector_workers.protocol import ConnectorMessage, ConnectorMessageType, MessageTracker, NamespacingMapper


def _record(stream: str, data: dict) -> ConnectorMessage:
    return ConnectorMessage(type=ConnectorMessageType.RECORD, record={"stream": stream, "data": data})


def test_protocol_mapper_prefixes_catalog_without_mutating_input() -> None:
    """Prefix configured stream names in a copy of the catalog.

    Returns:
        None: Assertions validate mapped catalog and untouched input.

    Raises:
        AssertionError: Raised when mapping differs.
    """

    catalog = {"streams": [{"stream": {"name": "users"}, "sync_mode": "full_refresh"}]}

    mapped_catalog = NamespacingMapper("raw_").mapper_map_catalog(catalog)

    assert mapped_catalog["streams"][0]["stream"]["name"] == "raw_users"
    assert mapped_catalog["streams"][0]["sync_mode"] == "full_refresh"
    assert catalog["streams"][0]["stream"]["name"] == "users"


def test_protocol_mapper_prefixes_records_only() -> None:
    """Prefix record stream names and leave other messages untouched.

    Returns:
        None: Assertions validate message mapping.

    Raises:
        AssertionError: Raised when mapping differs.
    """

    mapper = NamespacingMapper("raw_")
    state_message = ConnectorMessage(type=ConnectorMessageType.STATE, state={"data": {"cursor": 1}})
    record_message = _record("users", {"id": 1})

    mapped_record = mapper.mapper_map_message(record_message)

    assert mapped_record.record == {"stream": "raw_users", "data": {"id": 1}}
    assert record_message.record["stream"] == "users"
    assert mapper.mapper_map_message(state_message) is state_message


def test_protocol_mapper_empty_prefix_is_identity() -> None:
    """Leave names unchanged when no prefix is configured.

    Returns:
        None: Assertions validate identity mapping.

    Raises:
        AssertionError: Raised when names change.
    """

    mapper = NamespacingMapper(None)
    record_message = _record("users", {})

    assert mapper.mapper_map_message(record_message) is record_message
    assert mapper.mapper_map_catalog({"streams": [{"stream": {"name": "users"}}]}) == {
        "streams": [{"stream": {"name": "users"}}]
    }


def test_protocol_tracker_counts_records_bytes_and_last_state() -> None:
    """Count records, serialized record bytes and keep the last state data.

    Returns:
        None: Assertions validate tracker counters.

    Raises:
        AssertionError: Raised when counters differ.
    """

    tracker = MessageTracker()

    tracker.tracker_accept(_record("users", {"a": 1}))
    tracker.tracker_accept(ConnectorMessage(type=ConnectorMessageType.STATE, state={"data": {"cursor": 1}}))
    tracker.tracker_accept(_record("users", {"name": "ada"}))
    tracker.tracker_accept(ConnectorMessage(type=ConnectorMessageType.STATE, state={"data": {"cursor": 2}}))

    assert tracker.tracker_get_record_count() == 2
    assert tracker.tracker_get_bytes_count() == len('{"a":1}') + len('{"name":"ada"}')
    assert tracker.tracker_get_output_state() == {"cursor": 2}


def test_protocol_tracker_without_state_reports_none() -> None:
    """Report no output state when no STATE message was seen.

    Returns:
        None: Assertions validate empty state.

    Raises:
        AssertionError: Raised when a state is reported.
    """

    tracker = MessageTracker()
    tracker.tracker_accept(_record("users", {}))

    assert tracker.tracker_get_output_state() is None
