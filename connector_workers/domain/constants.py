"""Worker runtime constants shared by attempt execution and connector plumbing."""

from typing import Final

LOG_FILENAME: Final[str] = "logs.log"

# Source image of reset jobs: an empty source wipes destination data.
RESET_JOB_SOURCE_DOCKER_IMAGE_STUB: Final[str] = "__RESET__"

SOURCE_CONFIG_JSON_FILENAME: Final[str] = "source_config.json"
SOURCE_CATALOG_JSON_FILENAME: Final[str] = "source_catalog.json"
DESTINATION_CONFIG_JSON_FILENAME: Final[str] = "destination_config.json"
DESTINATION_CATALOG_JSON_FILENAME: Final[str] = "destination_catalog.json"
INPUT_STATE_JSON_FILENAME: Final[str] = "input_state.json"

NORMALIZATION_DIRECTORY_NAME: Final[str] = "normalize"
