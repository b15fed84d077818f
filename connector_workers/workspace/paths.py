"""Attempt working-directory layout under the workspace root."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from connector_workers.domain import LOG_FILENAME, JobRunConfig


def workspace_resolve_job_root(workspace_root: Path, job_run_config: JobRunConfig) -> Path:
    """Resolve the working directory of one attempt.

    Args:
        workspace_root: Root directory shared by all attempts.
        job_run_config: Attempt identity.

    Returns:
        Path: `workspace_root / job_id / attempt_id`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return workspace_root / str(job_run_config.job_id) / str(job_run_config.attempt_id)


def workspace_resolve_log_path(job_root: Path) -> Path:
    """Resolve the attempt log file path inside a job root.

    Args:
        job_root: Attempt working directory.

    Returns:
        Path: Log file path for the attempt.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return job_root / LOG_FILENAME


def workspace_create_job_root(job_root: Path) -> None:
    """Create the attempt working directory, succeeding when it already exists.

    Args:
        job_root: Attempt working directory.

    Returns:
        None: Directory is created as side effect.

    Raises:
        OSError: Raised when the directory cannot be created.
    """

    job_root.mkdir(parents=True, exist_ok=True)


def workspace_write_json(job_root: Path, filename: str, payload: Any) -> Path:
    """Write one JSON document into an attempt working directory.

    Args:
        job_root: Attempt working directory.
        filename: File name relative to the job root.
        payload: JSON-compatible document.

    Returns:
        Path: Written file path.

    Raises:
        OSError: Raised when the file cannot be written.
        TypeError: Raised when the payload is not JSON serializable.
    """

    target_path = job_root / filename
    target_path.write_text(json.dumps(payload), encoding="utf-8")
    return target_path
