"""Connector process doubles shared by worker, protocol and activity tests."""

from __future__ import annotations

import io
import subprocess
from pathlib import Path


class RecordingStdin(io.StringIO):
    """Writable stdin double that keeps its content after close."""

    def __init__(self):
        super().__init__()
        self.written = ""

    def close(self) -> None:
        if not self.closed:
            self.written = self.getvalue()
        super().close()

    def lines(self) -> list[str]:
        """Return written lines, whether or not the stream was closed."""

        content = self.written if self.closed else self.getvalue()
        return [line for line in content.splitlines() if line]


class FakeProcess:
    """Popen double with canned stdout and exit code."""

    def __init__(self, stdout_text: str = "", exit_code: int = 0, hangs: bool = False):
        """Initialize process double.

        Args:
            stdout_text: Text served on stdout.
            exit_code: Exit code reported by `wait`.
            hangs: When True the first `wait` times out.

        Returns:
            None: Initializer does not return values.

        Raises:
            RuntimeError: This double does not raise runtime errors.
        """

        self.stdout = io.StringIO(stdout_text)
        self.stderr = io.StringIO("")
        self.stdin = RecordingStdin()
        self.exit_code = exit_code
        self.returncode: int | None = None
        self.signals: list[str] = []
        self._hangs = hangs

    def wait(self, timeout: float | None = None) -> int:
        if self._hangs and not self.signals:
            raise subprocess.TimeoutExpired(cmd="connector", timeout=timeout)
        self.returncode = self.exit_code
        return self.exit_code

    def poll(self) -> int | None:
        return self.returncode

    def terminate(self) -> None:
        self.signals.append("terminate")

    def kill(self) -> None:
        self.signals.append("kill")


class FakeProcessFactory:
    """Process factory double serving one canned process per connector command."""

    def __init__(self, processes: dict[str, FakeProcess] | None = None):
        self.processes = processes or {}
        self.calls: list[dict[str, object]] = []

    def process_create(self, job_id: int, attempt_id: int, job_root: Path, image_name: str, *args: str) -> FakeProcess:
        """Record the launch and return the process registered for its command.

        Args:
            job_id: Job identifier.
            attempt_id: Attempt identifier.
            job_root: Working directory.
            image_name: Image reference.
            *args: Command arguments; the first one selects the process.

        Returns:
            FakeProcess: Registered process, or an empty successful one.

        Raises:
            RuntimeError: This double does not raise runtime errors.
        """

        self.calls.append(
            {
                "job_id": job_id,
                "attempt_id": attempt_id,
                "job_root": job_root,
                "image_name": image_name,
                "args": args,
            }
        )
        return self.processes.get(args[0], FakeProcess())

    def commands(self) -> list[str]:
        """Return the connector command of every launch in order."""

        return [call["args"][0] for call in self.calls]
