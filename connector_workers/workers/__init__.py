"""Worker layer package running connector commands inside an attempt."""

from .connector import DefaultCheckConnectionWorker, DefaultDiscoverCatalogWorker, DefaultGetSpecWorker
from .interfaces import WorkerPort
from .sync import DefaultSyncWorker

__all__ = [
	"DefaultCheckConnectionWorker",
	"DefaultDiscoverCatalogWorker",
	"DefaultGetSpecWorker",
	"DefaultSyncWorker",
	"WorkerPort",
]
