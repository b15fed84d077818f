"""In-process workflow engine running each execution on a worker thread."""

from __future__ import annotations

import contextvars
import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Callable

from .errors import WorkflowNotRegisteredError, WorkflowTimeoutError
from .interfaces import WorkflowEnginePort, WorkflowOptions, WorkflowT

logger = logging.getLogger(__name__)


class _InProcessWorkflowStub:
    """Stub starting one workflow execution per `workflow_run` call."""

    def __init__(self, workflow_name: str, workflow_factory: Callable[[], Any], options: WorkflowOptions):
        self._workflow_name = workflow_name
        self._workflow_factory = workflow_factory
        self._options = options

    @property
    def options(self) -> WorkflowOptions:
        """Return the options this stub was created with."""

        return self._options

    def workflow_run(self, *args: Any) -> Any:
        """Run the workflow to completion and return its result.

        Args:
            *args: Workflow arguments passed through unchanged.

        Returns:
            Any: Workflow result.

        Raises:
            WorkflowTimeoutError: Raised when the execution outlives the execution timeout.
            Exception: Any workflow failure propagates unchanged.
        """

        workflow = self._workflow_factory()
        execution_context = contextvars.copy_context()
        timeout_seconds = self._options.execution_timeout.total_seconds()
        logger.info(
            "Starting workflow=%s task_queue=%s timeout_seconds=%s",
            self._workflow_name,
            self._options.task_queue,
            timeout_seconds,
        )

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"workflow-{self._options.task_queue}")
        try:
            future = executor.submit(execution_context.run, workflow.workflow_run, *args)
            try:
                return future.result(timeout=timeout_seconds)
            except FutureTimeoutError as error:
                raise WorkflowTimeoutError(
                    f"workflow {self._workflow_name} exceeded execution timeout of {timeout_seconds} seconds",
                    workflow_name=self._workflow_name,
                ) from error
        finally:
            # an abandoned execution keeps its thread until the work returns
            executor.shutdown(wait=False)


class InProcessWorkflowEngine(WorkflowEnginePort):
    """Workflow engine executing registered workflows inside the current process.

    Executions are not persisted; each stub call runs the workflow once and
    waits for its outcome up to the execution timeout of the stub options.
    """

    def __init__(self):
        """Initialize an engine with no registered workflows.

        Returns:
            None: Initializer does not return a value.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        self._workflow_factories: dict[type, Callable[[], Any]] = {}

    def engine_register(self, workflow_type: type, workflow_factory: Callable[[], Any]) -> None:
        """Register the implementation factory of one workflow port.

        Args:
            workflow_type: Workflow port class.
            workflow_factory: Zero-argument factory building a workflow implementation.

        Returns:
            None: Registration is stored as side effect.

        Raises:
            ValueError: Raised when the port is already registered.
        """

        if workflow_type in self._workflow_factories:
            raise ValueError(f"workflow {workflow_type.__name__} is already registered")
        self._workflow_factories[workflow_type] = workflow_factory

    def engine_registered_workflows(self) -> tuple[str, ...]:
        """Return registered workflow port names in registration order."""

        return tuple(workflow_type.__name__ for workflow_type in self._workflow_factories)

    def engine_new_workflow_stub(self, workflow_type: type[WorkflowT], options: WorkflowOptions) -> WorkflowT:
        """Create a stub for a registered workflow port.

        Args:
            workflow_type: Workflow port class.
            options: Task queue and execution timeout.

        Returns:
            WorkflowT: Stub exposing `workflow_run`.

        Raises:
            WorkflowNotRegisteredError: Raised when the port has no registered implementation.
        """

        workflow_factory = self._workflow_factories.get(workflow_type)
        if workflow_factory is None:
            raise WorkflowNotRegisteredError(
                f"no workflow registered for {workflow_type.__name__}",
                workflow_name=workflow_type.__name__,
            )
        return _InProcessWorkflowStub(  # type: ignore[return-value]
            workflow_name=workflow_type.__name__,
            workflow_factory=workflow_factory,
            options=options,
        )
