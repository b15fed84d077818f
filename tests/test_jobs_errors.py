"""Tests for the attempt failure error contract."""

from __future__ import annotations

import pickle
from pathlib import Path

from connector_workers.jobs import AttemptFailureError


def test_jobs_errors_equality_uses_log_path_and_cause() -> None:
    """Compare failures by log path and cause only.

    Returns:
        None: Assertions validate equality semantics.

    Raises:
        AssertionError: Raised when equality semantics differ.
    """

    cause = RuntimeError("boom")
    log_path = Path("/tmp/ws/1/0/logs.log")

    assert AttemptFailureError.from_log_path(log_path, cause) == AttemptFailureError(log_path, cause)
    assert AttemptFailureError.from_log_path(log_path) == AttemptFailureError.from_log_path(log_path)
    assert AttemptFailureError.from_log_path(log_path) != AttemptFailureError.from_log_path(log_path, cause)
    assert AttemptFailureError.from_log_path(log_path) != AttemptFailureError.from_log_path(Path("/other/logs.log"))
    assert len({AttemptFailureError(log_path), AttemptFailureError(log_path)}) == 1


def test_jobs_errors_message_names_log_path_and_cause() -> None:
    """Render the log path and cause in the error message.

    Returns:
        None: Assertions validate message content.

    Raises:
        AssertionError: Raised when message content differs.
    """

    failure = AttemptFailureError.from_log_path(Path("/tmp/ws/1/0/logs.log"), OSError("disk full"))

    assert "/tmp/ws/1/0/logs.log" in str(failure)
    assert "OSError: disk full" in str(failure)


def test_jobs_errors_failure_survives_pickling() -> None:
    """Keep log path and cause when crossing a process boundary.

    Returns:
        None: Assertions validate pickled payload.

    Raises:
        AssertionError: Raised when pickled payload differs.
    """

    failure = AttemptFailureError.from_log_path(Path("/tmp/ws/7/2/logs.log"), ValueError("bad config"))

    restored = pickle.loads(pickle.dumps(failure))

    assert restored.log_path == failure.log_path
    assert isinstance(restored.cause, ValueError)
    assert str(restored.cause) == "bad config"
