"""Closed set of job kinds and their workflow execution policy."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Final

from connector_workers.engine import WorkflowOptions


class JobKind(str, Enum):
    """Job kinds the worker runtime can execute."""

    GET_SPEC = "get_spec"
    CHECK_CONNECTION = "check_connection"
    DISCOVER_SCHEMA = "discover_schema"
    SYNC = "sync"


JOB_KIND_TIMEOUTS: Final[dict[JobKind, timedelta]] = {
    JobKind.GET_SPEC: timedelta(minutes=10),
    JobKind.CHECK_CONNECTION: timedelta(hours=1),
    JobKind.DISCOVER_SCHEMA: timedelta(hours=1),
    JobKind.SYNC: timedelta(days=3),
}


def job_workflow_options(kind: JobKind) -> WorkflowOptions:
    """Return workflow options carrying the timeout budget of one job kind.

    Args:
        kind: Job kind.

    Returns:
        WorkflowOptions: Task queue and execution timeout for the kind.

    Raises:
        ValueError: Raised when the kind has no timeout policy.
    """

    timeout = JOB_KIND_TIMEOUTS.get(kind)
    if timeout is None:
        raise ValueError(f"unsupported job kind={kind!r}")
    return WorkflowOptions(task_queue=kind.value, execution_timeout=timeout)
