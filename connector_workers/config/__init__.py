"""Configuration package for runtime settings and startup validation."""

from .settings import SettingsLoadError, WorkerSettings, config_load_settings

__all__ = ["SettingsLoadError", "WorkerSettings", "config_load_settings"]
