"""Platform information collaborators."""

from __future__ import annotations

import platform
import uuid
from abc import ABC, abstractmethod


class PlatformInfo(ABC):
    """Abstract source of device metadata attached to events."""

    @abstractmethod
    def device_id(self) -> str:
        """Stable identifier of the device running the application."""

    @abstractmethod
    def os_version(self) -> str:
        """Version of the operating system."""

    @abstractmethod
    def orientation(self) -> str:
        """Current screen orientation. Read on every event."""


class HostPlatform(PlatformInfo):
    """Platform info for the host running the interpreter.

    Servers and desktops have no meaningful screen orientation, so a fixed
    value is reported unless one is given.
    """

    def __init__(self, orientation: str = "unknown") -> None:
        self._orientation = orientation
        self._device_id: str | None = None

    def device_id(self) -> str:
        if self._device_id is None:
            self._device_id = str(uuid.uuid5(uuid.NAMESPACE_OID, str(uuid.getnode())))
        return self._device_id

    def os_version(self) -> str:
        return platform.release()

    def orientation(self) -> str:
        return self._orientation
