"""Helpers for draining and closing connector processes."""

from __future__ import annotations

import contextvars
import logging
import subprocess
import threading
from typing import Callable, Iterable

logger = logging.getLogger(__name__)


def process_gobble_lines(
    stream: Iterable[str],
    log_method: Callable[[str], None],
    thread_name: str = "process-gobbler",
) -> threading.Thread:
    """Drain a process stream on a daemon thread, logging one entry per line.

    The thread runs in a copy of the caller's context so lines stay attributed
    to the attempt that started the process.

    Args:
        stream: Text stream of the process.
        log_method: Logger method receiving each stripped line.
        thread_name: Name of the draining thread.

    Returns:
        threading.Thread: Started daemon thread.

    Raises:
        RuntimeError: Raised when the thread cannot be started.
    """

    execution_context = contextvars.copy_context()

    def _process_drain() -> None:
        try:
            for line in stream:
                stripped_line = line.rstrip("\n")
                if stripped_line:
                    log_method(stripped_line)
        except (OSError, ValueError):
            # stream closed underneath the reader
            logger.debug("Stopped draining %s", thread_name, exc_info=True)

    gobbler = threading.Thread(
        target=execution_context.run,
        args=(_process_drain,),
        name=thread_name,
        daemon=True,
    )
    gobbler.start()
    return gobbler


def process_gentle_close(process: subprocess.Popen, timeout_seconds: float) -> int:
    """Wait for a process to exit, escalating to terminate and then kill.

    Args:
        process: Process to close.
        timeout_seconds: Grace period for each escalation step.

    Returns:
        int: Process exit code.

    Raises:
        subprocess.TimeoutExpired: Raised when the process survives kill.
    """

    try:
        return process.wait(timeout=timeout_seconds)
    except subprocess.TimeoutExpired:
        logger.warning("Process did not exit within %s seconds; terminating", timeout_seconds)

    process.terminate()
    try:
        return process.wait(timeout=timeout_seconds)
    except subprocess.TimeoutExpired:
        logger.warning("Process did not terminate within %s seconds; killing", timeout_seconds)

    process.kill()
    return process.wait(timeout=timeout_seconds)
