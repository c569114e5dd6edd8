"""Named groups of systems that are updated together."""

from __future__ import annotations

from typing import Any, Iterator

from sweepworld.system_base import System


class SystemGroup:
    """A named, prioritised collection of systems that can be switched off as a whole."""

    def __init__(self, name: str, priority: int = 0) -> None:
        self.name = str(name)
        self.priority = priority
        self.active = True
        self._systems: list[System] = []

    def add(self, system: System) -> None:
        """Append ``system`` to the group."""
        self._systems.append(system)

    def update_all(self, context: Any, delta_time: float) -> None:
        """Update every active, runnable system in priority order."""
        if not self.active:
            return
        self._systems.sort(key=lambda system: system.priority())
        for system in self._systems:
            if system.is_active() and system.is_runnable(context):
                system.update(context, delta_time)

    def init_all(self, context: Any) -> None:
        for system in self._systems:
            system.init(context)

    def shutdown_all(self, context: Any) -> None:
        for system in self._systems:
            system.shutdown(context)

    def contains_system(self, system_name: str) -> bool:
        return any(system.name == system_name for system in self._systems)

    def get_system(self, system_name: str) -> System | None:
        """The first system called ``system_name``, or ``None``."""
        return next(
            (system for system in self._systems if system.name == system_name), None
        )

    def __len__(self) -> int:
        return len(self._systems)

    def __iter__(self) -> Iterator[System]:
        return iter(self._systems)