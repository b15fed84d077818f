"""Attempt-scoped logging context and log file routing.

Installing a context tags every log record emitted by the current execution
context with the attempt's job id and appends it to the attempt's log file.
The context lives in a `ContextVar`, so attempts running on different threads
never see each other's context.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path

from connector_workers.workspace import workspace_resolve_log_path

_CONSOLE_FORMAT = "%(asctime)s %(levelname)s [job=%(job_id)s] %(name)s - %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


@dataclass(frozen=True)
class JobLogContext:
    """Logging correlation data for one attempt.

    Attributes:
        job_id: Job identifier attached to records.
        job_root: Attempt working directory.
        log_path: Attempt log file receiving records.
    """

    job_id: int
    job_root: Path
    log_path: Path


_JOB_LOG_CONTEXT: ContextVar[JobLogContext | None] = ContextVar("job_log_context", default=None)


def job_logging_install_context(job_root: Path, job_id: int) -> None:
    """Install the logging context of one attempt in the current execution context.

    Args:
        job_root: Attempt working directory.
        job_id: Job identifier.

    Returns:
        None: Context is installed as side effect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    _JOB_LOG_CONTEXT.set(
        JobLogContext(job_id=job_id, job_root=job_root, log_path=workspace_resolve_log_path(job_root))
    )


def job_logging_current_context() -> JobLogContext | None:
    """Return the logging context installed in the current execution context."""

    return _JOB_LOG_CONTEXT.get()


class JobContextFilter(logging.Filter):
    """Stamp `job_id` and `job_root` on every record passing through a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = job_logging_current_context()
        record.job_id = context.job_id if context is not None else "-"
        record.job_root = str(context.job_root) if context is not None else "-"
        return True


class AttemptLogFileHandler(logging.Handler):
    """Append records to the log file of the attempt installed in the current context.

    Records emitted outside an attempt, or before the attempt directory exists,
    are not written to any file.
    """

    def emit(self, record: logging.LogRecord) -> None:
        context = job_logging_current_context()
        if context is None or not context.log_path.parent.is_dir():
            return
        try:
            rendered_record = self.format(record)
            with context.log_path.open("a", encoding="utf-8") as log_file:
                log_file.write(rendered_record + "\n")
        except (OSError, ValueError):
            self.handleError(record)


def job_logging_configure(level: str = "INFO") -> None:
    """Configure root logging with console output and attempt log routing.

    Calling this more than once only updates the level.

    Args:
        level: Root logging level name.

    Returns:
        None: Root logger is configured as side effect.

    Raises:
        ValueError: Raised when the level name is unknown.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    if any(isinstance(handler, AttemptLogFileHandler) for handler in root_logger.handlers):
        return

    context_filter = JobContextFilter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.addFilter(context_filter)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    file_handler = AttemptLogFileHandler()
    file_handler.addFilter(context_filter)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    root_logger.addHandler(file_handler)
