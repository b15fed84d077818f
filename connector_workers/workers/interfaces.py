"""Typed interfaces for worker-layer connector command responsibilities."""

from pathlib import Path
from typing import Protocol, TypeVar

InputT = TypeVar("InputT", contravariant=True)
OutputT = TypeVar("OutputT", covariant=True)


class WorkerPort(Protocol[InputT, OutputT]):
    """Port definition for one connector command run inside an attempt directory."""

    def worker_run(self, worker_input: InputT, job_root: Path) -> OutputT:
        """Run the command and return its typed result.

        Args:
            worker_input: Command input contract.
            job_root: Attempt working directory.

        Returns:
            OutputT: Command result contract.

        Raises:
            WorkerError: Raised when the connector fails or produces no usable output.
        """
