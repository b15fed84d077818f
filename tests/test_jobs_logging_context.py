"""Tests for attempt-scoped logging context and log file routing."""

from __future__ import annotations

import contextvars
import logging
import threading
from pathlib import Path

from connector_workers.jobs import (
    AttemptLogFileHandler,
    JobContextFilter,
    job_logging_current_context,
    job_logging_install_context,
)


def _build_logger(name: str) -> logging.Logger:
    """Create an isolated logger routed to the attempt file handler.

    Args:
        name: Logger name.

    Returns:
        logging.Logger: Non-propagating logger with the attempt handler.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    handler = AttemptLogFileHandler()
    handler.addFilter(JobContextFilter())
    handler.setFormatter(logging.Formatter("%(job_id)s %(message)s"))
    test_logger = logging.getLogger(name)
    test_logger.handlers = [handler]
    test_logger.propagate = False
    test_logger.setLevel(logging.INFO)
    return test_logger


def test_jobs_logging_context_is_absent_in_fresh_context() -> None:
    """Report no context outside an attempt.

    Returns:
        None: Assertions validate empty context.

    Raises:
        AssertionError: Raised when a context leaks.
    """

    assert contextvars.Context().run(job_logging_current_context) is None


def test_jobs_logging_context_routes_records_to_attempt_log(tmp_path: Path) -> None:
    """Append records to the installed attempt log once its directory exists.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate log file content.

    Raises:
        AssertionError: Raised when routing differs.
    """

    test_logger = _build_logger("tests.logging_context.routing")
    job_root = tmp_path / "8" / "0"

    def _attempt() -> None:
        job_logging_install_context(job_root, 8)
        test_logger.info("before directory")
        job_root.mkdir(parents=True)
        test_logger.info("after directory")

    contextvars.copy_context().run(_attempt)

    assert (job_root / "logs.log").read_text(encoding="utf-8") == "8 after directory\n"


def test_jobs_logging_context_isolated_between_threads(tmp_path: Path) -> None:
    """Keep concurrent attempts on different threads in separate log files.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate per-attempt log files.

    Raises:
        AssertionError: Raised when records cross attempts.
    """

    test_logger = _build_logger("tests.logging_context.threads")
    barrier = threading.Barrier(2)

    def _attempt(job_id: int) -> None:
        job_root = tmp_path / str(job_id) / "0"
        job_root.mkdir(parents=True)
        job_logging_install_context(job_root, job_id)
        barrier.wait(timeout=5)
        test_logger.info("work for %s", job_id)

    threads = [threading.Thread(target=_attempt, args=(job_id,)) for job_id in (1, 2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert (tmp_path / "1" / "0" / "logs.log").read_text(encoding="utf-8") == "1 work for 1\n"
    assert (tmp_path / "2" / "0" / "logs.log").read_text(encoding="utf-8") == "2 work for 2\n"


def test_jobs_logging_filter_marks_records_outside_attempts() -> None:
    """Stamp a placeholder job id on records emitted outside attempts.

    Returns:
        None: Assertions validate placeholder.

    Raises:
        AssertionError: Raised when placeholder differs.
    """

    record = logging.LogRecord("tests", logging.INFO, __file__, 1, "message", None, None)

    contextvars.Context().run(JobContextFilter().filter, record)

    assert record.job_id == "-"
    assert record.job_root == "-"
