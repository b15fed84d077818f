"""Line-delimited connector message parsing and serialization."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

_CONNECTOR_LOG_LEVELS = {
    "FATAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": logging.DEBUG,
}


class ConnectorMessageType(str, Enum):
    """Message types emitted and consumed by connectors."""

    RECORD = "RECORD"
    STATE = "STATE"
    LOG = "LOG"
    SPEC = "SPEC"
    CONNECTION_STATUS = "CONNECTION_STATUS"
    CATALOG = "CATALOG"


class ConnectorMessage(BaseModel):
    """One connector protocol message; the payload field matching `type` is set."""

    model_config = ConfigDict(extra="allow")

    type: ConnectorMessageType
    record: Optional[dict[str, Any]] = None
    state: Optional[dict[str, Any]] = None
    log: Optional[dict[str, Any]] = None
    spec: Optional[dict[str, Any]] = None
    connection_status: Optional[dict[str, Any]] = None
    catalog: Optional[dict[str, Any]] = None


def protocol_parse_message_line(line: str) -> ConnectorMessage | None:
    """Parse one connector output line.

    Args:
        line: Raw output line.

    Returns:
        ConnectorMessage | None: Parsed message, or None for blank, non-JSON or invalid lines.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    stripped_line = line.strip()
    if not stripped_line:
        return None
    if not stripped_line.startswith("{"):
        logger.info(stripped_line)
        return None
    try:
        return ConnectorMessage.model_validate_json(stripped_line)
    except ValidationError as error:
        logger.warning("Skipping invalid connector message: %s (%s)", stripped_line, error.errors()[0]["msg"])
        return None


def protocol_iter_messages(lines: Iterable[str]) -> Iterator[ConnectorMessage]:
    """Yield connector messages from output lines, logging and dropping `LOG` messages.

    Args:
        lines: Connector output lines.

    Returns:
        Iterator[ConnectorMessage]: Non-log messages in emission order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    for line in lines:
        message = protocol_parse_message_line(line)
        if message is None:
            continue
        if message.type == ConnectorMessageType.LOG:
            _protocol_log_connector_message(message)
            continue
        yield message


def protocol_serialize_message(message: ConnectorMessage) -> str:
    """Render one message as a single JSON line without a trailing newline."""

    return message.model_dump_json(exclude_none=True)


def _protocol_log_connector_message(message: ConnectorMessage) -> None:
    log_payload = message.log or {}
    level = _CONNECTOR_LOG_LEVELS.get(str(log_payload.get("level", "INFO")).upper(), logging.INFO)
    logger.log(level, "%s", log_payload.get("message", ""))
