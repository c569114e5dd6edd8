"""Registry that orders systems by declared and resource-derived dependencies."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from sweepworld.core_game import CoreGameResource
from sweepworld.game_config import GameConfigResource
from sweepworld.player_state import PlayerStateResource
from sweepworld.resource_dependency import ResourceDependency
from sweepworld.resource_manager import ResourceBatch, ResourceBatchMut, ResourceManager
from sweepworld.system_base import System
from sweepworld.system_group import SystemGroup
from sweepworld.time_resource import TimeResource

T = TypeVar("T")
R = TypeVar("R")


class SystemRegistry:
    """Holds systems, groups and shared resources, and runs systems in dependency order."""

    def __init__(self) -> None:
        self._systems: list[System] = []
        self._name_to_index: dict[str, int] = {}
        self._groups: dict[str, SystemGroup] = {}
        self._resources = ResourceManager()
        self._resource_access: dict[int, tuple[list[type], list[type]]] = {}
        self._dependency_cache: dict[str, set[str]] = {}
        self._execution_order: list[int] = []
        self._cache_valid = False

    def __len__(self) -> int:
        return len(self._systems)

    @property
    def execution_order(self) -> list[str]:
        """Names of the systems in the order the last resolution produced."""
        return [self._systems[index].name for index in self._execution_order]

    def _add(self, system: System, reads: list[type], writes: list[type]) -> None:
        index = len(self._systems)
        self._resource_access[index] = (reads, writes)
        self._name_to_index[system.name] = index
        self._systems.append(system)
        self._cache_valid = False

    def register(self, system: System) -> None:
        """Add ``system`` with the resources it declares to read and write."""
        self._add(system, list(system.read_resources()), list(system.write_resources()))

    def register_with_deps(self, system: System, dependencies: ResourceDependency) -> None:
        """Add ``system``; every type in ``dependencies`` is recorded as read."""
        self._add(system, list(dependencies.resource_type_ids()), [])

    def register_group(self, group: SystemGroup) -> None:
        """Add ``group``, replacing any group of the same name."""
        self._groups[group.name] = group
        self._cache_valid = False

    def get_group(self, name: str) -> SystemGroup | None:
        return self._groups.get(name)

    def update_group(self, group_name: str, context: Any, delta_time: float) -> None:
        """Update every system of a group; ``KeyError`` if no such group exists."""
        group = self._groups.get(group_name)
        if group is None:
            raise KeyError(f"group not found: {group_name}")
        group.update_all(context, delta_time)

    def update_all(self, context: Any, delta_time: float) -> None:
        """Update every active, runnable system in dependency order.

        Raises ``ValueError`` on a dependency cycle or an unknown dependency.
        """
        if not self._cache_valid:
            self._resolve_dependencies()
            self._cache_valid = True
        for index in self._execution_order:
            system = self._systems[index]
            if system.is_active() and system.is_runnable(context):
                system.update(context, delta_time)

    def add_resource(self, resource: Any) -> None:
        self._resources.insert(resource)

    def get_resource(self, resource_type: type[T]) -> T | None:
        return self._resources.get(resource_type)

    def with_resources(self, func: Callable[[ResourceBatch], R]) -> R:
        return self._resources.batch(func)

    def with_resources_mut(self, func: Callable[[ResourceBatchMut], R]) -> R:
        return self._resources.batch_mut(func)

    def has_resource(self, resource_type: type) -> bool:
        return self._resources.contains(resource_type)

    def remove_resource(self, resource_type: type[T]) -> T | None:
        return self._resources.remove(resource_type)

    def _resolve_dependencies(self) -> None:
        self._dependency_cache = {
            system.name: set(system.dependencies()) for system in self._systems
        }
        self._infer_dependencies_from_resources()

        order: list[int] = []
        visited: set[int] = set()
        in_progress: set[int] = set()
        for index in range(len(self._systems)):
            if index not in visited:
                self._visit(index, visited, in_progress, order)
        self._execution_order = order

    def _infer_dependencies_from_resources(self) -> None:
        writers: dict[type, list[int]] = {}
        for index, (_, writes) in self._resource_access.items():
            for resource_type in writes:
                writers.setdefault(resource_type, []).append(index)

        for index, (reads, writes) in self._resource_access.items():
            name = self._systems[index].name
            deps = self._dependency_cache.setdefault(name, set())

            # A reader runs after every other writer of the resource.
            for resource_type in reads:
                for writer in writers.get(resource_type, ()):
                    if writer != index:
                        deps.add(self._systems[writer].name)

            for resource_type in writes:
                # Writers of the same resource run in registration order.
                for writer in writers.get(resource_type, ()):
                    if writer < index:
                        deps.add(self._systems[writer].name)
                for reader, (reader_reads, _) in self._resource_access.items():
                    if reader != index and resource_type in reader_reads:
                        reader_name = self._systems[reader].name
                        self._dependency_cache.setdefault(reader_name, set()).add(name)

    def _visit(
        self,
        index: int,
        visited: set[int],
        in_progress: set[int],
        order: list[int],
    ) -> None:
        name = self._systems[index].name
        if index in in_progress:
            raise ValueError(f"cyclic system dependency detected: {name}")
        if index in visited:
            return
        in_progress.add(index)
        for dep_name in sorted(self._dependency_cache.get(name, ())):
            dep_index = self._name_to_index.get(dep_name)
            if dep_index is None:
                raise ValueError(f"unregistered dependency: {name} -> {dep_name}")
            self._visit(dep_index, visited, in_progress, order)
        in_progress.discard(index)
        visited.add(index)
        order.append(index)

    def init_all(self, context: Any) -> None:
        for system in self._systems:
            system.init(context)

    def shutdown_all(self, context: Any) -> None:
        for system in self._systems:
            system.shutdown(context)

    def set_system_active(self, name: str, active: bool) -> bool:
        """Switch a system on or off; ``False`` if no system has that name."""
        index = self._name_to_index.get(name)
        if index is None:
            return False
        self._systems[index].set_active(active)
        return True

    def set_group_active(self, name: str, active: bool) -> bool:
        """Switch a group on or off; ``False`` if no group has that name."""
        group = self._groups.get(name)
        if group is None:
            return False
        group.active = active
        return True

    def init_core_resources(self) -> None:
        """Add the time, game, player and configuration resources."""
        self.add_resource(TimeResource())
        self.add_resource(CoreGameResource())
        self.add_resource(PlayerStateResource())
        self.add_resource(GameConfigResource())

    def debug_info(self) -> str:
        """A readable summary of systems, groups and execution order."""
        lines = [
            "=== System registry ===",
            f"Systems: {len(self._systems)}",
            f"Groups: {len(self._groups)}",
            f"Resources: {len(self._resources)}",
            "",
            "--- Systems ---",
        ]
        for index, system in enumerate(self._systems):
            lines.append(
                f"{index}. {system.name} (priority: {system.priority()}, "
                f"active: {system.is_active()})"
            )
            deps = system.dependencies()
            if deps:
                lines.append("   depends on: " + ", ".join(deps))
            access = self._resource_access.get(index)
            if access is None:
                continue
            reads, writes = access
            names = system.resource_dependency_names()

            def _label(position: int) -> str:
                return names[position] if position < len(names) else "unknown"

            if reads:
                lines.append(
                    "   reads: " + ", ".join(_label(j) for j in range(len(reads)))
                )
            if writes:
                lines.append(
                    "   writes: "
                    + ", ".join(_label(j + len(reads)) for j in range(len(writes)))
                )

        lines.extend(["", "--- Groups ---"])
        for name, group in self._groups.items():
            lines.append(
                f"group: {name} (priority: {group.priority}, active: {group.active}, "
                f"systems: {len(group)})"
            )

        lines.extend(["", "--- Execution order ---"])
        for position, index in enumerate(self._execution_order):
            lines.append(f"{position}. {self._systems[index].name}")
        return "\n".join(lines) + "\n"