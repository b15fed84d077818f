"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or runs one job attempt from a JSON configuration file.
"""

import argparse
import json
from pathlib import Path
from typing import Any

import uvicorn

from connector_workers.bootstrap import bootstrap_create_application, bootstrap_create_dispatcher
from connector_workers.config import config_load_settings
from connector_workers.domain import (
    domain_build_check_connection_config,
    domain_build_discover_catalog_config,
    domain_build_get_spec_config,
    domain_build_sync_config,
    domain_to_payload,
)
from connector_workers.jobs import AttemptFailureError, JobKind, job_logging_configure

_MAIN_JOB_COMMANDS = {
    "get-spec": (JobKind.GET_SPEC, domain_build_get_spec_config),
    "check-connection": (JobKind.CHECK_CONNECTION, domain_build_check_connection_config),
    "discover-schema": (JobKind.DISCOVER_SCHEMA, domain_build_discover_catalog_config),
    "sync": (JobKind.SYNC, domain_build_sync_config),
}


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when a job attempt fails.
    """

    argument_parser = argparse.ArgumentParser(description="Connector workers runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", *_MAIN_JOB_COMMANDS),
        help="Runtime command: `api` starts server, the others run one job attempt",
        type=str,
    )
    argument_parser.add_argument("--job-id", dest="job_id", type=int, default=0, help="Job identifier")
    argument_parser.add_argument("--attempt", dest="attempt", type=int, default=0, help="Attempt identifier")
    argument_parser.add_argument(
        "--config-file",
        dest="config_file",
        type=Path,
        help="JSON file holding the job configuration for job commands",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    job_logging_configure(settings.log_level)

    if parsed_arguments.command != "api":
        if parsed_arguments.config_file is None:
            argument_parser.error(f"--config-file is required for `{parsed_arguments.command}`")
        kind, config_builder = _MAIN_JOB_COMMANDS[parsed_arguments.command]
        job_config = config_builder(main_read_config_file(parsed_arguments.config_file))
        dispatcher = bootstrap_create_dispatcher(settings)
        try:
            result = dispatcher.dispatcher_submit(kind, parsed_arguments.job_id, parsed_arguments.attempt, job_config)
        except AttemptFailureError as error:
            print(f"JOB_FAILED: see logs at {error.log_path}")
            raise SystemExit(1) from error
        print(json.dumps(domain_to_payload(result), indent=2, sort_keys=True))
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


def main_read_config_file(config_file: Path) -> dict[str, Any]:
    """Read a job configuration JSON object from disk.

    Args:
        config_file: Path of the JSON file.

    Returns:
        dict[str, Any]: Decoded configuration object.

    Raises:
        ValueError: Raised when the file does not hold a JSON object.
        OSError: Raised when the file cannot be read.
    """

    payload = json.loads(config_file.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"{config_file} must contain a JSON object")
    return payload


if __name__ == "__main__":
    main()
