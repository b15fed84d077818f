"""Destination normalization runners and their selection by destination image."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Final, Protocol

from connector_workers.adapters import ProcessFactoryPort, process_gentle_close, process_gobble_lines
from connector_workers.domain import DESTINATION_CATALOG_JSON_FILENAME, DESTINATION_CONFIG_JSON_FILENAME
from connector_workers.workspace import workspace_create_job_root, workspace_write_json

logger = logging.getLogger(__name__)


class DestinationType(str, Enum):
    """Warehouses the normalization image can transform raw tables for."""

    BIGQUERY = "bigquery"
    POSTGRES = "postgres"
    REDSHIFT = "redshift"
    SNOWFLAKE = "snowflake"


NORMALIZATION_DESTINATION_TYPES: Final[dict[str, DestinationType]] = {
    "airbyte/destination-bigquery": DestinationType.BIGQUERY,
    "airbyte/destination-postgres": DestinationType.POSTGRES,
    "airbyte/destination-redshift": DestinationType.REDSHIFT,
    "airbyte/destination-snowflake": DestinationType.SNOWFLAKE,
}


class NormalizationRunnerPort(Protocol):
    """Port definition for the post-write normalization pass."""

    def normalization_start(self) -> None:
        """Prepare the runner."""

    def normalization_normalize(
        self,
        job_id: int,
        attempt_id: int,
        job_root: Path,
        destination_configuration: dict[str, Any],
        catalog: dict[str, Any],
    ) -> bool:
        """Normalize synced data; return True on success."""

    def normalization_close(self) -> None:
        """Release runner resources."""


class NoOpNormalizationRunner(NormalizationRunnerPort):
    """Runner for destinations without normalization support."""

    def normalization_start(self) -> None:
        return None

    def normalization_normalize(
        self,
        job_id: int,
        attempt_id: int,
        job_root: Path,
        destination_configuration: dict[str, Any],
        catalog: dict[str, Any],
    ) -> bool:
        _ = (job_id, attempt_id, job_root, destination_configuration, catalog)
        return True

    def normalization_close(self) -> None:
        return None


class DefaultNormalizationRunner(NormalizationRunnerPort):
    """Runner executing the normalization image against a destination."""

    def __init__(
        self,
        destination_type: DestinationType,
        process_factory: ProcessFactoryPort,
        normalization_image: str,
        close_timeout_seconds: float = 60.0,
    ):
        """Initialize normalization runner.

        Args:
            destination_type: Warehouse type passed as `--integration-type`.
            process_factory: Factory starting the normalization container.
            normalization_image: Normalization image reference.
            close_timeout_seconds: Grace period once normalization output ends.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when the image is blank or the factory is missing.
        """

        if process_factory is None:
            raise ValueError("process_factory must not be None")
        if not normalization_image.strip():
            raise ValueError("normalization_image must not be blank")

        self._destination_type = destination_type
        self._process_factory = process_factory
        self._normalization_image = normalization_image.strip()
        self._close_timeout_seconds = close_timeout_seconds

    def normalization_start(self) -> None:
        return None

    def normalization_normalize(
        self,
        job_id: int,
        attempt_id: int,
        job_root: Path,
        destination_configuration: dict[str, Any],
        catalog: dict[str, Any],
    ) -> bool:
        """Run the normalization image inside `job_root` and report success.

        Args:
            job_id: Job identifier.
            attempt_id: Attempt identifier.
            job_root: Normalization working directory.
            destination_configuration: Destination configuration document.
            catalog: Configured catalog as seen by the destination.

        Returns:
            bool: True when the normalization process exits with code 0.

        Raises:
            OSError: Raised when normalization inputs cannot be written.
            ProcessLaunchError: Raised when the container cannot be started.
        """

        workspace_create_job_root(job_root)
        workspace_write_json(job_root, DESTINATION_CONFIG_JSON_FILENAME, destination_configuration)
        workspace_write_json(job_root, DESTINATION_CATALOG_JSON_FILENAME, catalog)

        process = self._process_factory.process_create(
            job_id,
            attempt_id,
            job_root,
            self._normalization_image,
            "run",
            "--integration-type",
            self._destination_type.value,
            "--config",
            DESTINATION_CONFIG_JSON_FILENAME,
            "--catalog",
            DESTINATION_CATALOG_JSON_FILENAME,
        )
        gobbler = process_gobble_lines(process.stdout, logging.getLogger(f"{__name__}.stdout").info, "normalization-stdout")
        gobbler.join()

        exit_code = process_gentle_close(process, self._close_timeout_seconds)
        if exit_code != 0:
            logger.error("Normalization exited with code %s", exit_code)
            return False
        return True

    def normalization_close(self) -> None:
        return None


def normalization_create_runner(
    destination_image: str,
    process_factory: ProcessFactoryPort,
    normalization_image: str,
    close_timeout_seconds: float = 60.0,
) -> NormalizationRunnerPort:
    """Select the normalization runner for a destination image.

    Args:
        destination_image: Destination image reference; the tag is ignored.
        process_factory: Factory starting normalization containers.
        normalization_image: Normalization image reference.
        close_timeout_seconds: Grace period once normalization output ends.

    Returns:
        NormalizationRunnerPort: Default runner for supported warehouses, no-op runner otherwise.

    Raises:
        ValueError: Raised when the destination image is blank.
    """

    image_name = destination_image.strip()
    if not image_name:
        raise ValueError("destination_image must not be blank")

    repository = image_name.rsplit(":", 1)[0] if ":" in image_name.rsplit("/", 1)[-1] else image_name
    destination_type = NORMALIZATION_DESTINATION_TYPES.get(repository)
    if destination_type is None:
        logger.info("No normalization available for destination image %s", image_name)
        return NoOpNormalizationRunner()
    return DefaultNormalizationRunner(
        destination_type=destination_type,
        process_factory=process_factory,
        normalization_image=normalization_image,
        close_timeout_seconds=close_timeout_seconds,
    )
