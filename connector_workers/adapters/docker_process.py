"""Docker-backed connector process factory."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path, PurePosixPath
from typing import Final

from .interfaces import ProcessFactoryPort
from .process_errors import ProcessLaunchError
from .process_utils import process_gobble_lines

logger = logging.getLogger(__name__)


class DockerProcessFactory(ProcessFactoryPort):
    """Start connector images with `docker run`, mounting the workspace as `/data`."""

    _DATA_MOUNT_DESTINATION: Final[str] = "/data"
    _LOCAL_MOUNT_DESTINATION: Final[str] = "/local"

    def __init__(
        self,
        workspace_root: Path,
        workspace_mount: str,
        local_mount: str,
        network: str = "host",
        docker_executable: str = "docker",
    ):
        """Initialize Docker process factory.

        Args:
            workspace_root: Workspace root on the worker host.
            workspace_mount: Docker volume or host path holding the workspace, mounted as `/data`.
            local_mount: Host path mounted as `/local`.
            network: Docker network for connector containers.
            docker_executable: Docker CLI executable.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are blank.
        """

        if workspace_root is None:
            raise ValueError("workspace_root must not be None")
        if not workspace_mount.strip():
            raise ValueError("workspace_mount must not be blank")
        if not local_mount.strip():
            raise ValueError("local_mount must not be blank")
        if not network.strip():
            raise ValueError("network must not be blank")
        if not docker_executable.strip():
            raise ValueError("docker_executable must not be blank")

        self._workspace_root = workspace_root
        self._workspace_mount = workspace_mount.strip()
        self._local_mount = local_mount.strip()
        self._network = network.strip()
        self._docker_executable = docker_executable.strip()

    def process_build_command(self, job_root: Path, image_name: str, *args: str) -> list[str]:
        """Build the `docker run` command for one connector invocation.

        Args:
            job_root: Attempt working directory on the worker host.
            image_name: Connector image reference.
            *args: Connector command arguments.

        Returns:
            list[str]: Command vector.

        Raises:
            ValueError: Raised when the job root is outside the workspace root or the image is blank.
        """

        if not image_name.strip():
            raise ValueError("image_name must not be blank")

        return [
            self._docker_executable,
            "run",
            "--rm",
            "-i",
            "-v",
            f"{self._workspace_mount}:{self._DATA_MOUNT_DESTINATION}",
            "-v",
            f"{self._local_mount}:{self._LOCAL_MOUNT_DESTINATION}",
            "-w",
            self._process_rebase_job_root(job_root),
            "--network",
            self._network,
            image_name.strip(),
            *args,
        ]

    def process_create(
        self,
        job_id: int,
        attempt_id: int,
        job_root: Path,
        image_name: str,
        *args: str,
    ) -> subprocess.Popen:
        """Start one connector container.

        Args:
            job_id: Job identifier.
            attempt_id: Attempt identifier.
            job_root: Attempt working directory on the worker host.
            image_name: Connector image reference.
            *args: Connector command arguments.

        Returns:
            subprocess.Popen: Running process with text-mode pipes; stderr is drained into the log.

        Raises:
            ValueError: Raised when the job root is outside the workspace root.
            ProcessLaunchError: Raised when the Docker CLI cannot be started.
        """

        command = self.process_build_command(job_root, image_name, *args)
        logger.info("Starting connector process job_id=%s attempt_id=%s command=%s", job_id, attempt_id, command)

        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as error:
            raise ProcessLaunchError(
                f"failed to start connector image {image_name}: {error}",
                image_name=image_name,
            ) from error

        process_gobble_lines(
            process.stderr,
            logging.getLogger(f"{__name__}.stderr").error,
            thread_name=f"stderr-{job_id}-{attempt_id}",
        )
        return process

    def _process_rebase_job_root(self, job_root: Path) -> str:
        try:
            relative_job_root = job_root.relative_to(self._workspace_root)
        except ValueError as error:
            raise ValueError(f"job_root {job_root} is not inside workspace root {self._workspace_root}") from error
        return str(PurePosixPath(self._DATA_MOUNT_DESTINATION, *relative_job_root.parts))
