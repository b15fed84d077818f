"""Connector command launcher for one connector image."""

from __future__ import annotations

import subprocess
from pathlib import Path

from .interfaces import IntegrationLauncherPort, ProcessFactoryPort


class ConnectorIntegrationLauncher(IntegrationLauncherPort):
    """Issue connector protocol commands for one image within one attempt."""

    def __init__(self, job_id: int, attempt_id: int, image_name: str, process_factory: ProcessFactoryPort):
        """Initialize connector launcher.

        Args:
            job_id: Job identifier.
            attempt_id: Attempt identifier.
            image_name: Connector image reference.
            process_factory: Factory starting connector processes.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when the image is blank or the factory is missing.
        """

        if not image_name.strip():
            raise ValueError("image_name must not be blank")
        if process_factory is None:
            raise ValueError("process_factory must not be None")

        self._job_id = job_id
        self._attempt_id = attempt_id
        self._image_name = image_name.strip()
        self._process_factory = process_factory

    @property
    def image_name(self) -> str:
        """Return the connector image this launcher starts."""

        return self._image_name

    def launcher_spec(self, job_root: Path) -> subprocess.Popen:
        return self._launcher_start(job_root, "spec")

    def launcher_check(self, job_root: Path, config_filename: str) -> subprocess.Popen:
        return self._launcher_start(job_root, "check", "--config", config_filename)

    def launcher_discover(self, job_root: Path, config_filename: str) -> subprocess.Popen:
        return self._launcher_start(job_root, "discover", "--config", config_filename)

    def launcher_read(
        self,
        job_root: Path,
        config_filename: str,
        catalog_filename: str,
        state_filename: str | None = None,
    ) -> subprocess.Popen:
        arguments = ["read", "--config", config_filename, "--catalog", catalog_filename]
        if state_filename is not None:
            arguments.extend(["--state", state_filename])
        return self._launcher_start(job_root, *arguments)

    def launcher_write(self, job_root: Path, config_filename: str, catalog_filename: str) -> subprocess.Popen:
        return self._launcher_start(job_root, "write", "--config", config_filename, "--catalog", catalog_filename)

    def _launcher_start(self, job_root: Path, *args: str) -> subprocess.Popen:
        return self._process_factory.process_create(
            self._job_id,
            self._attempt_id,
            job_root,
            self._image_name,
            *args,
        )
