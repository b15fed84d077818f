"""Workspace package for the per-attempt filesystem boundary."""

from .health import FilesystemWorkspaceHealthService
from .interfaces import WorkspaceHealthPort
from .paths import (
	workspace_create_job_root,
	workspace_resolve_job_root,
	workspace_resolve_log_path,
	workspace_write_json,
)

__all__ = [
	"FilesystemWorkspaceHealthService",
	"WorkspaceHealthPort",
	"workspace_create_job_root",
	"workspace_resolve_job_root",
	"workspace_resolve_log_path",
	"workspace_write_json",
]
