"""Registry of plain functions run as systems, with named shared resources."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, MutableMapping

SystemFunction = Callable[[Any, MutableMapping[str, Any], float], None]


def _now_ms() -> float:
    return time.time() * 1000.0


class SystemPriority(IntEnum):
    """Execution slot of a function system; lower runs earlier."""

    FIRST = 0
    INPUT = 100
    NETWORK = 200
    PRE_UPDATE = 300
    UPDATE = 400
    POST_UPDATE = 500
    PRE_RENDER = 600
    RENDER = 700
    POST_RENDER = 800
    LAST = 900


@dataclass
class FunctionSystem:
    """A registered function with its priority and on/off switch."""

    name: str
    function: SystemFunction
    priority: SystemPriority
    enabled: bool = True


class FunctionRegistry:
    """Registers system functions and runs them against shared resources."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or _now_ms
        self._systems: list[FunctionSystem] = []
        self._last_frame_time = self._clock()
        self._functions: dict[str, SystemFunction] = {}
        self._execution_order: list[str] = []
        self._resources: dict[str, Any] = {}

    @property
    def systems(self) -> list[FunctionSystem]:
        """Registered systems sorted by priority."""
        return list(self._systems)

    def register_system(
        self, name: str, function: SystemFunction, priority: SystemPriority
    ) -> None:
        """Register ``function``; a repeated name replaces the function it runs."""
        self._systems.append(FunctionSystem(name, function, priority))
        self._systems.sort(key=lambda system: system.priority)
        self._functions[name] = function
        if name not in self._execution_order:
            self._execution_order.append(name)

    def set_system_enabled(self, name: str, enabled: bool) -> bool:
        """Switch the first system called ``name``; ``False`` if there is none."""
        for system in self._systems:
            if system.name == name:
                system.enabled = enabled
                return True
        return False

    def set_priority_enabled(self, priority: SystemPriority, enabled: bool) -> None:
        for system in self._systems:
            if system.priority == priority:
                system.enabled = enabled

    def add_resource(self, name: str, resource: Any) -> None:
        self._resources[name] = resource

    def get_resource(self, name: str) -> Any | None:
        return self._resources.get(name)

    def run_systems(self, context: Any, delta_time: float) -> None:
        """Run every registered function in registration order with the registry's resources."""
        for name in self._execution_order:
            function = self._functions.get(name)
            if function is not None:
                function(context, self._resources, delta_time)

    def run_priority_range(
        self,
        context: Any,
        resources: MutableMapping[str, Any],
        min_priority: SystemPriority,
        max_priority: SystemPriority,
    ) -> None:
        """Run the enabled systems whose priority lies in the inclusive range.

        The delta time passed on is the seconds since the registry was created.
        """
        delta_time = (self._clock() - self._last_frame_time) / 1000.0
        for system in self._systems:
            if system.enabled and min_priority <= system.priority <= max_priority:
                system.function(context, resources, delta_time)