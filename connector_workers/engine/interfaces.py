"""Typed interfaces for the durable workflow engine boundary."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol, TypeVar

WorkflowT = TypeVar("WorkflowT")


@dataclass(frozen=True)
class WorkflowOptions:
    """Options a workflow stub is created with.

    Attributes:
        task_queue: Queue the workflow and its activity are scheduled on.
        execution_timeout: Maximum schedule-to-close duration of one execution.
    """

    task_queue: str
    execution_timeout: timedelta


class WorkflowEnginePort(Protocol):
    """Port definition for starting workflow executions and awaiting their result."""

    def engine_new_workflow_stub(self, workflow_type: type[WorkflowT], options: WorkflowOptions) -> WorkflowT:
        """Create a stub whose `workflow_run` starts one workflow execution and blocks for its outcome.

        Args:
            workflow_type: Workflow port class identifying the workflow.
            options: Task queue and execution timeout for the execution.

        Returns:
            WorkflowT: Stub implementing the workflow port.

        Raises:
            LookupError: Raised when no implementation is registered for the port.
        """
