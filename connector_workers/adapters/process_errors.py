"""Project-native typed exceptions for connector process launching."""

from __future__ import annotations


class ProcessLaunchError(RuntimeError):
    """Connector process could not be started.

    Attributes:
        image_name: Connector image the launch was attempted for.
    """

    def __init__(self, message: str, image_name: str | None = None):
        super().__init__(message)
        self.image_name = image_name
