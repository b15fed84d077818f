"""Domain models used across worker runtime layer boundaries."""

from .constants import (
	DESTINATION_CATALOG_JSON_FILENAME,
	DESTINATION_CONFIG_JSON_FILENAME,
	INPUT_STATE_JSON_FILENAME,
	LOG_FILENAME,
	NORMALIZATION_DIRECTORY_NAME,
	RESET_JOB_SOURCE_DOCKER_IMAGE_STUB,
	SOURCE_CATALOG_JSON_FILENAME,
	SOURCE_CONFIG_JSON_FILENAME,
)
from .models import (
	CheckConnectionStatus,
	ConnectorCatalog,
	ConnectorSpecification,
	HealthStatus,
	IntegrationLauncherConfig,
	JobCheckConnectionConfig,
	JobDiscoverCatalogConfig,
	JobGetSpecConfig,
	JobRunConfig,
	JobSyncConfig,
	StandardCheckConnectionInput,
	StandardCheckConnectionOutput,
	StandardDiscoverCatalogInput,
	StandardSyncInput,
	StandardSyncOutput,
	StandardSyncSummary,
	SyncStatus,
)
from .payloads import (
	domain_build_check_connection_config,
	domain_build_discover_catalog_config,
	domain_build_get_spec_config,
	domain_build_sync_config,
	domain_to_payload,
)

__all__ = [
	"CheckConnectionStatus",
	"ConnectorCatalog",
	"ConnectorSpecification",
	"DESTINATION_CATALOG_JSON_FILENAME",
	"DESTINATION_CONFIG_JSON_FILENAME",
	"HealthStatus",
	"INPUT_STATE_JSON_FILENAME",
	"IntegrationLauncherConfig",
	"JobCheckConnectionConfig",
	"JobDiscoverCatalogConfig",
	"JobGetSpecConfig",
	"JobRunConfig",
	"JobSyncConfig",
	"LOG_FILENAME",
	"NORMALIZATION_DIRECTORY_NAME",
	"RESET_JOB_SOURCE_DOCKER_IMAGE_STUB",
	"SOURCE_CATALOG_JSON_FILENAME",
	"SOURCE_CONFIG_JSON_FILENAME",
	"StandardCheckConnectionInput",
	"StandardCheckConnectionOutput",
	"StandardDiscoverCatalogInput",
	"StandardSyncInput",
	"StandardSyncOutput",
	"StandardSyncSummary",
	"SyncStatus",
	"domain_build_check_connection_config",
	"domain_build_discover_catalog_config",
	"domain_build_get_spec_config",
	"domain_build_sync_config",
	"domain_to_payload",
]
