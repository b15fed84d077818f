"""Typed interfaces for adapter-layer process launching responsibilities."""

import subprocess
from pathlib import Path
from typing import Protocol


class ProcessFactoryPort(Protocol):
    """Port definition for starting containerized connector processes."""

    def process_create(
        self,
        job_id: int,
        attempt_id: int,
        job_root: Path,
        image_name: str,
        *args: str,
    ) -> subprocess.Popen:
        """Start one connector process working inside an attempt directory.

        Args:
            job_id: Job identifier.
            attempt_id: Attempt identifier.
            job_root: Attempt working directory on the worker host.
            image_name: Connector image reference.
            *args: Connector command arguments.

        Returns:
            subprocess.Popen: Running process with text-mode stdin and stdout pipes.

        Raises:
            ProcessLaunchError: Raised when the process cannot be started.
        """


class IntegrationLauncherPort(Protocol):
    """Port definition for issuing connector commands for one image."""

    def launcher_spec(self, job_root: Path) -> subprocess.Popen:
        """Start `spec`."""

    def launcher_check(self, job_root: Path, config_filename: str) -> subprocess.Popen:
        """Start `check` against a configuration file inside the job root."""

    def launcher_discover(self, job_root: Path, config_filename: str) -> subprocess.Popen:
        """Start `discover` against a configuration file inside the job root."""

    def launcher_read(
        self,
        job_root: Path,
        config_filename: str,
        catalog_filename: str,
        state_filename: str | None = None,
    ) -> subprocess.Popen:
        """Start `read` for a configured catalog and optional state file."""

    def launcher_write(self, job_root: Path, config_filename: str, catalog_filename: str) -> subprocess.Popen:
        """Start `write` for a configured catalog."""
