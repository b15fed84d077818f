"""Single-attempt execution wrapper shared by every job kind."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Generic, TypeVar

from connector_workers.domain import JobRunConfig
from connector_workers.workspace import (
    workspace_create_job_root,
    workspace_resolve_job_root,
    workspace_resolve_log_path,
)

from .errors import AttemptFailureError
from .logging_context import job_logging_install_context

OutputT = TypeVar("OutputT")

logger = logging.getLogger(__name__)


class AttemptExecution(Generic[OutputT]):
    """Run one unit of work inside the working directory and logging scope of an attempt.

    Every outcome is normalized: a returned value is the attempt result, an
    `AttemptFailureError` raised by the work passes through untouched, and any
    other error is wrapped into an `AttemptFailureError` pointing at the
    attempt log file. Nothing is retried here; retries belong to the workflow
    engine, which re-invokes the whole activity.
    """

    def __init__(
        self,
        workspace_root: Path,
        job_run_config: JobRunConfig,
        execution: Callable[[Path], OutputT],
        logging_context_installer: Callable[[Path, int], None] = job_logging_install_context,
        job_root_creator: Callable[[Path], None] = workspace_create_job_root,
    ):
        """Initialize attempt execution collaborators.

        Args:
            workspace_root: Root directory shared by all attempts.
            job_run_config: Identity of the attempt.
            execution: Unit of work receiving the attempt working directory.
            logging_context_installer: Installs attempt logging context for `(job_root, job_id)`.
            job_root_creator: Creates the attempt working directory.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required collaborators are missing.
        """

        if workspace_root is None:
            raise ValueError("workspace_root must not be None")
        if job_run_config is None:
            raise ValueError("job_run_config must not be None")
        if execution is None:
            raise ValueError("execution must not be None")

        self._workspace_root = workspace_root
        self._job_run_config = job_run_config
        self._execution = execution
        self._logging_context_installer = logging_context_installer
        self._job_root_creator = job_root_creator

    def attempt_execute(self) -> OutputT:
        """Set up the attempt scope, run the unit of work and classify its outcome.

        Returns:
            OutputT: Value returned by the unit of work.

        Raises:
            AttemptFailureError: Raised for every failure, including setup failures.
        """

        job_root = workspace_resolve_job_root(self._workspace_root, self._job_run_config)
        # resolvable even when job root creation fails
        log_path = workspace_resolve_log_path(job_root)

        try:
            self._logging_context_installer(job_root, self._job_run_config.job_id)
            self._job_root_creator(job_root)
            logger.info(
                "Executing attempt job_id=%s attempt_id=%s job_root=%s",
                self._job_run_config.job_id,
                self._job_run_config.attempt_id,
                job_root,
            )
            return self._execution(job_root)
        except AttemptFailureError:
            raise
        except Exception as error:
            logger.error(
                "Attempt failed job_id=%s attempt_id=%s error_type=%s",
                self._job_run_config.job_id,
                self._job_run_config.attempt_id,
                type(error).__name__,
                exc_info=True,
            )
            raise AttemptFailureError.from_log_path(log_path, error) from error
