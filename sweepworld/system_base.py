"""Base class of the systems run by groups, executors and the registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class System(ABC):
    """A unit of game logic; subclasses set ``name`` and implement ``update``."""

    name: str

    def init(self, context: Any) -> None:
        """Hook called once before the first update; does nothing by default."""

    @abstractmethod
    def update(self, context: Any, delta_time: float) -> None:
        """Advance the system by ``delta_time`` seconds."""

    def shutdown(self, context: Any) -> None:
        """Hook called before the system is discarded; does nothing by default."""

    def dependencies(self) -> list[str]:
        """Names of systems that must run before this one."""
        return []

    def resource_dependencies(self) -> list[type]:
        """Resource types this system depends on."""
        return []

    def read_resources(self) -> list[type]:
        """Resource types this system only reads."""
        return []

    def write_resources(self) -> list[type]:
        """Resource types this system writes."""
        return []

    def resource_dependency_names(self) -> list[str]:
        """Readable names of the read then the written resource types."""
        return []

    def is_runnable(self, context: Any) -> bool:
        """Whether the system should run this frame."""
        return True

    def priority(self) -> int:
        """Lower values run earlier."""
        return 0

    def is_active(self) -> bool:
        return True

    def set_active(self, active: bool) -> None:
        """Switch the system on or off; ignored unless a subclass keeps the flag."""