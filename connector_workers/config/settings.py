"""Typed runtime settings with dotenv support and startup validation."""

import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class WorkerSettings(BaseSettings):
    """Worker runtime settings for attempt execution and connector launching.

    Environment variable names map directly to field names in uppercase.
    Example: `workspace_root` reads from `WORKSPACE_ROOT`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
        workspace_root: Local directory holding one subtree per job attempt.
        workspace_docker_mount: Docker volume or host path mounted as `/data` in connector containers.
        local_docker_mount: Host path mounted as `/local` in connector containers.
        docker_network: Docker network connector containers join.
        docker_executable: Docker CLI executable name or path.
        normalization_image: Image used for destination normalization passes.
        process_close_timeout_seconds: Grace period before connector processes are terminated.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    workspace_root: Path = Field(default=Path("/tmp/workspace"))
    workspace_docker_mount: str = Field(default="airbyte_workspace", min_length=1)
    local_docker_mount: str = Field(default="/tmp/airbyte_local", min_length=1)
    docker_network: str = Field(default="host", min_length=1)
    docker_executable: str = Field(default="docker", min_length=1)
    normalization_image: str = Field(default="airbyte/normalization:0.1.0", min_length=1)
    process_close_timeout_seconds: float = Field(default=60.0, gt=0)

    @field_validator(
        "workspace_docker_mount",
        "local_docker_mount",
        "docker_network",
        "docker_executable",
        "normalization_image",
    )
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized_value), int):
            raise ValueError(f"unknown log level {value!r}")
        return normalized_value

    @field_validator("workspace_root")
    @classmethod
    def _validate_workspace_root(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError("workspace_root must be an absolute path")
        return value


def config_load_settings() -> WorkerSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        WorkerSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return WorkerSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
