"""Job layer package for attempt execution and workflow dispatch."""

from .attempt_execution import AttemptExecution
from .check_connection_workflow import (
	CheckConnectionActivityImpl,
	CheckConnectionActivityPort,
	CheckConnectionWorkflowImpl,
	CheckConnectionWorkflowPort,
)
from .discover_catalog_workflow import (
	DiscoverCatalogActivityImpl,
	DiscoverCatalogActivityPort,
	DiscoverCatalogWorkflowImpl,
	DiscoverCatalogWorkflowPort,
)
from .dispatcher import JobDispatcher
from .errors import AttemptFailureError
from .job_types import JOB_KIND_TIMEOUTS, JobKind, job_workflow_options
from .logging_context import (
	AttemptLogFileHandler,
	JobContextFilter,
	JobLogContext,
	job_logging_configure,
	job_logging_current_context,
	job_logging_install_context,
)
from .spec_workflow import SpecActivityImpl, SpecActivityPort, SpecWorkflowImpl, SpecWorkflowPort
from .sync_workflow import SyncActivityImpl, SyncActivityPort, SyncWorkflowImpl, SyncWorkflowPort

__all__ = [
	"AttemptExecution",
	"AttemptFailureError",
	"AttemptLogFileHandler",
	"CheckConnectionActivityImpl",
	"CheckConnectionActivityPort",
	"CheckConnectionWorkflowImpl",
	"CheckConnectionWorkflowPort",
	"DiscoverCatalogActivityImpl",
	"DiscoverCatalogActivityPort",
	"DiscoverCatalogWorkflowImpl",
	"DiscoverCatalogWorkflowPort",
	"JOB_KIND_TIMEOUTS",
	"JobContextFilter",
	"JobDispatcher",
	"JobKind",
	"JobLogContext",
	"SpecActivityImpl",
	"SpecActivityPort",
	"SpecWorkflowImpl",
	"SpecWorkflowPort",
	"SyncActivityImpl",
	"SyncActivityPort",
	"SyncWorkflowImpl",
	"SyncWorkflowPort",
	"job_logging_configure",
	"job_logging_current_context",
	"job_logging_install_context",
	"job_workflow_options",
]
