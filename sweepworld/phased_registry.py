"""Registry that runs systems phase by phase, ordered by priority and dependencies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from sweepworld.resource_manager import ResourceManager


class SystemPhase(Enum):
    """Stage of a frame in which a system runs."""

    STARTUP = "startup"
    INPUT = "input"
    UPDATE = "update"
    RENDER = "render"
    CLEANUP = "cleanup"


_FRAME_PHASES = (
    SystemPhase.INPUT,
    SystemPhase.UPDATE,
    SystemPhase.RENDER,
    SystemPhase.CLEANUP,
)


class System(ABC):
    """A unit of game logic; subclasses set ``name`` and ``phase``."""

    name: str
    phase: SystemPhase

    def priority(self) -> int:
        """Lower values run earlier within a phase."""
        return 0

    @abstractmethod
    def run(self, resources: ResourceManager) -> None:
        """Do one step of work against the shared resources."""

    def dependencies(self) -> list[int]:
        """Ids of systems that must run before this one."""
        return []


class SystemRegistry:
    """Holds systems by id and runs them phase by phase."""

    def __init__(self) -> None:
        self._systems: dict[int, System] = {}
        self._next_id = 0
        self._phase_systems: dict[SystemPhase, list[tuple[int, int]]] = {}
        self._dependencies: dict[int, list[int]] = {}
        self._execution_order: dict[SystemPhase, list[int]] = {}
        self._dirty = False

    def add_system(self, system: System) -> int:
        """Register ``system`` and return its id."""
        system_id = self._next_id
        self._next_id += 1
        self._phase_systems.setdefault(system.phase, []).append(
            (system_id, system.priority())
        )
        self._dependencies[system_id] = list(system.dependencies())
        self._systems[system_id] = system
        self._dirty = True
        return system_id

    def remove_system(self, system_id: int) -> System | None:
        """Unregister and return the system with ``system_id``, if any."""
        system = self._systems.pop(system_id, None)
        if system is None:
            return None
        entries = self._phase_systems.get(system.phase)
        if entries is not None:
            for position, (entry_id, _) in enumerate(entries):
                if entry_id == system_id:
                    del entries[position]
                    break
        self._dependencies.pop(system_id, None)
        for deps in self._dependencies.values():
            deps[:] = [dep for dep in deps if dep != system_id]
        self._dirty = True
        return system

    def run_phase(self, phase: SystemPhase, resources: ResourceManager) -> None:
        """Run every system of ``phase`` in execution order."""
        if self._dirty:
            self._update_execution_order()
        for system_id in list(self._execution_order.get(phase, ())):
            system = self._systems.get(system_id)
            if system is not None:
                system.run(resources)

    def run_all_phases(self, resources: ResourceManager) -> None:
        """Run one frame: input, update, render and cleanup, not startup."""
        for phase in _FRAME_PHASES:
            self.run_phase(phase, resources)

    def run_startup(self, resources: ResourceManager) -> None:
        self.run_phase(SystemPhase.STARTUP, resources)

    def _update_execution_order(self) -> None:
        self._execution_order.clear()
        for phase, entries in self._phase_systems.items():
            ordered: list[int] = []
            visited: set[int] = set()
            in_progress: set[int] = set()
            for system_id, _ in sorted(entries, key=lambda entry: entry[1]):
                self._visit(system_id, visited, in_progress, ordered)
            self._execution_order[phase] = ordered
        self._dirty = False

    def _visit(
        self,
        system_id: int,
        visited: set[int],
        in_progress: set[int],
        ordered: list[int],
    ) -> None:
        # A node already on the current path closes a cycle; it is skipped.
        if system_id in visited or system_id in in_progress:
            return
        in_progress.add(system_id)
        for dep_id in self._dependencies.get(system_id, ()):
            self._visit(dep_id, visited, in_progress, ordered)
        in_progress.discard(system_id)
        visited.add(system_id)
        ordered.append(system_id)

    def __len__(self) -> int:
        return len(self._systems)

    def get_system(self, system_id: int) -> System | None:
        return self._systems.get(system_id)