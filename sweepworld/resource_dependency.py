"""Declarations of which resource types a system reads or writes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _type_name(resource_type: type) -> str:
    module = resource_type.__module__
    if module == "builtins":
        return resource_type.__qualname__
    return f"{module}.{resource_type.__qualname__}"


class ResourceDependency(ABC):
    """A set of resource types a system depends on."""

    @abstractmethod
    def resource_type_ids(self) -> list[type]:
        """The resource types, in declaration order."""

    @abstractmethod
    def resource_type_names(self) -> list[str]:
        """Readable names of the resource types, in the same order."""


@dataclass(frozen=True, repr=False)
class ReadResource(ResourceDependency):
    """Read-only dependency on one resource type."""

    resource_type: type

    def resource_type_ids(self) -> list[type]:
        return [self.resource_type]

    def resource_type_names(self) -> list[str]:
        return [_type_name(self.resource_type)]

    def __repr__(self) -> str:
        return f"ReadResource<{_type_name(self.resource_type)}>"


@dataclass(frozen=True, repr=False)
class WriteResource(ResourceDependency):
    """Writable dependency on one resource type."""

    resource_type: type

    def resource_type_ids(self) -> list[type]:
        return [self.resource_type]

    def resource_type_names(self) -> list[str]:
        return [_type_name(self.resource_type)]

    def __repr__(self) -> str:
        return f"WriteResource<{_type_name(self.resource_type)}>"


@dataclass(frozen=True)
class ResourceSet(ResourceDependency):
    """Two dependencies combined, first before second."""

    first: ResourceDependency
    second: ResourceDependency

    def resource_type_ids(self) -> list[type]:
        return self.first.resource_type_ids() + self.second.resource_type_ids()

    def resource_type_names(self) -> list[str]:
        return self.first.resource_type_names() + self.second.resource_type_names()


@dataclass(frozen=True)
class NoResources(ResourceDependency):
    """No resource dependencies at all."""

    def resource_type_ids(self) -> list[type]:
        return []

    def resource_type_names(self) -> list[str]:
        return []