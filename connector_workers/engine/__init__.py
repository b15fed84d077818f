"""Workflow engine package for the durable execution boundary."""

from .errors import WorkflowEngineError, WorkflowNotRegisteredError, WorkflowTimeoutError
from .in_process import InProcessWorkflowEngine
from .interfaces import WorkflowEnginePort, WorkflowOptions

__all__ = [
	"InProcessWorkflowEngine",
	"WorkflowEngineError",
	"WorkflowEnginePort",
	"WorkflowNotRegisteredError",
	"WorkflowOptions",
	"WorkflowTimeoutError",
]
