"""Connector protocol plumbing between connector processes and workers."""

from .destination import ConnectorDestinationPort, DefaultConnectorDestination
from .errors import ConnectorOutputError, ConnectorProcessError, NormalizationError, WorkerError
from .mapper import NamespacingMapper
from .messages import (
	ConnectorMessage,
	ConnectorMessageType,
	protocol_iter_messages,
	protocol_parse_message_line,
	protocol_serialize_message,
)
from .normalization import (
	DefaultNormalizationRunner,
	DestinationType,
	NoOpNormalizationRunner,
	NormalizationRunnerPort,
	normalization_create_runner,
)
from .source import ConnectorSourcePort, DefaultConnectorSource, EmptyConnectorSource
from .tracker import MessageTracker

__all__ = [
	"ConnectorDestinationPort",
	"ConnectorMessage",
	"ConnectorMessageType",
	"ConnectorOutputError",
	"ConnectorProcessError",
	"ConnectorSourcePort",
	"DefaultConnectorDestination",
	"DefaultConnectorSource",
	"DefaultNormalizationRunner",
	"DestinationType",
	"EmptyConnectorSource",
	"MessageTracker",
	"NamespacingMapper",
	"NoOpNormalizationRunner",
	"NormalizationError",
	"NormalizationRunnerPort",
	"WorkerError",
	"normalization_create_runner",
	"protocol_iter_messages",
	"protocol_parse_message_line",
	"protocol_serialize_message",
]
