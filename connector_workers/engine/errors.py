"""Project-native typed exceptions for workflow engine failures."""

from __future__ import annotations


class WorkflowEngineError(RuntimeError):
    """Base exception for workflow engine failures.

    Attributes:
        workflow_name: Name of the workflow port involved, when known.
    """

    def __init__(self, message: str, workflow_name: str | None = None):
        super().__init__(message)
        self.workflow_name = workflow_name


class WorkflowTimeoutError(WorkflowEngineError, TimeoutError):
    """Workflow execution exceeded its configured execution timeout."""


class WorkflowNotRegisteredError(WorkflowEngineError, LookupError):
    """No workflow implementation is registered for the requested port."""
