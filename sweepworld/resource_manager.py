"""Container holding one resource per type."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


class ResourceManager:
    """Stores at most one resource of each exact type."""

    def __init__(self) -> None:
        self._resources: dict[type, Any] = {}

    def insert(self, resource: Any) -> None:
        """Add a resource, replacing any of the same type."""
        self._resources[type(resource)] = resource

    def get(self, resource_type: type[T]) -> T | None:
        return self._resources.get(resource_type)

    def contains(self, resource_type: type) -> bool:
        return resource_type in self._resources

    def remove(self, resource_type: type[T]) -> T | None:
        """Remove and return the resource of ``resource_type``."""
        return self._resources.pop(resource_type, None)

    def clear(self) -> None:
        self._resources.clear()

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._resources

    def get_multi(self, first_type: type[A], second_type: type[B]) -> tuple[A, B] | None:
        """Both resources, or ``None`` when either is missing."""
        first = self.get(first_type)
        if first is None:
            return None
        second = self.get(second_type)
        if second is None:
            return None
        return first, second

    def get_multi_mut(self, first_type: type[A], second_type: type[B]) -> tuple[A, B] | None:
        """Like :meth:`get_multi`, but ``None`` when both types are the same."""
        if first_type is second_type:
            return None
        return self.get_multi(first_type, second_type)

    def batch(self, func: Callable[[ResourceBatch], R]) -> R:
        return func(ResourceBatch(self))

    def batch_mut(self, func: Callable[[ResourceBatchMut], R]) -> R:
        return func(ResourceBatchMut(self))


class ResourceBatch:
    """Read access to the resources of a manager."""

    def __init__(self, manager: ResourceManager) -> None:
        self._manager = manager

    def read(self, resource_type: type[T]) -> T | None:
        return self._manager.get(resource_type)


class ResourceBatchMut:
    """Read and write access to the resources of a manager."""

    def __init__(self, manager: ResourceManager) -> None:
        self._manager = manager

    def read(self, resource_type: type[T]) -> T | None:
        return self._manager.get(resource_type)

    def write(self, resource_type: type[T]) -> T | None:
        return self._manager.get(resource_type)