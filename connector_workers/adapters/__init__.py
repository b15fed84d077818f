"""Adapter layer package for connector process launching boundaries."""

from .docker_process import DockerProcessFactory
from .integration_launcher import ConnectorIntegrationLauncher
from .interfaces import IntegrationLauncherPort, ProcessFactoryPort
from .process_errors import ProcessLaunchError
from .process_utils import process_gentle_close, process_gobble_lines

__all__ = [
	"ConnectorIntegrationLauncher",
	"DockerProcessFactory",
	"IntegrationLauncherPort",
	"ProcessFactoryPort",
	"ProcessLaunchError",
	"process_gentle_close",
	"process_gobble_lines",
]
