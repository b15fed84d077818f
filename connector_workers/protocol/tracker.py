"""Record and state accounting for messages flowing through a sync."""

from __future__ import annotations

import json
from typing import Any

from .messages import ConnectorMessage, ConnectorMessageType


class MessageTracker:
    """Count records and record bytes, and remember the latest state."""

    def __init__(self):
        self._record_count = 0
        self._bytes_count = 0
        self._output_state: dict[str, Any] | None = None

    def tracker_accept(self, message: ConnectorMessage) -> None:
        """Account for one source message.

        Args:
            message: Message emitted by the source.

        Returns:
            None: Counters are updated as side effect.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        if message.type == ConnectorMessageType.RECORD and message.record is not None:
            self._record_count += 1
            record_data = message.record.get("data", {})
            self._bytes_count += len(json.dumps(record_data, separators=(",", ":")).encode("utf-8"))
        elif message.type == ConnectorMessageType.STATE and message.state is not None:
            self._output_state = message.state.get("data")

    def tracker_get_record_count(self) -> int:
        return self._record_count

    def tracker_get_bytes_count(self) -> int:
        return self._bytes_count

    def tracker_get_output_state(self) -> dict[str, Any] | None:
        """Return the data of the last state message seen, if any."""

        return self._output_state
