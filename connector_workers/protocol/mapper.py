"""Stream namespacing applied between source and destination."""

from __future__ import annotations

import copy
from typing import Any

from .messages import ConnectorMessage, ConnectorMessageType


class NamespacingMapper:
    """Prefix stream names in the configured catalog and in record messages."""

    def __init__(self, prefix: str | None):
        """Initialize mapper.

        Args:
            prefix: Stream name prefix; None or empty leaves names unchanged.

        Returns:
            None: Initializer does not return a value.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        self._prefix = prefix or ""

    def mapper_map_catalog(self, catalog: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of a configured catalog with prefixed stream names.

        Args:
            catalog: Configured catalog with `streams[*].stream.name` entries.

        Returns:
            dict[str, Any]: Mapped catalog; the input is not modified.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        mapped_catalog = copy.deepcopy(catalog)
        if not self._prefix:
            return mapped_catalog

        for configured_stream in mapped_catalog.get("streams", []):
            stream = configured_stream.get("stream")
            if isinstance(stream, dict) and "name" in stream:
                stream["name"] = self._mapper_transform_name(stream["name"])
        return mapped_catalog

    def mapper_map_message(self, message: ConnectorMessage) -> ConnectorMessage:
        """Return a message whose record stream name carries the prefix.

        Args:
            message: Message emitted by the source.

        Returns:
            ConnectorMessage: Mapped copy for records, the same message otherwise.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        if not self._prefix or message.type != ConnectorMessageType.RECORD or message.record is None:
            return message

        mapped_record = dict(message.record)
        mapped_record["stream"] = self._mapper_transform_name(str(mapped_record.get("stream", "")))
        return message.model_copy(update={"record": mapped_record})

    def _mapper_transform_name(self, stream_name: str) -> str:
        return f"{self._prefix}{stream_name}"
