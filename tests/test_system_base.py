from __future__ import annotations

import pytest

from sweepworld.resource_dependency import ReadResource, WriteResource
from sweepworld.system_base import System


class Score:
    pass


class Board:
    pass


class Minimal(System):
    name = "Minimal"

    def __init__(self):
        self.updates = []

    def update(self, context, delta_time):
        self.updates.append(delta_time)


def test_system_is_abstract():
    with pytest.raises(TypeError):
        System()


def test_default_dependency_lists_are_empty():
    system = Minimal()
    assert System.dependencies(system) == []
    assert System.resource_dependencies(system) == []
    assert System.read_resources(system) == []
    assert System.write_resources(system) == []
    assert System.resource_dependency_names(system) == []


def test_default_runnable_and_priority():
    system = Minimal()
    assert System.is_runnable(system, {"anything": 1}) is True
    assert System.priority(system) == 0


def test_default_active_ignores_switching():
    system = Minimal()
    System.set_active(system, False)
    assert System.is_active(system) is True


def test_default_hooks_leave_context_untouched():
    system = Minimal()
    context = {"frame": 3}
    System.init(system, context)
    System.shutdown(system, context)
    assert context == {"frame": 3}
    assert system.updates == []


def test_declared_resources_line_up_with_names():
    read = ReadResource(Score)
    write = WriteResource(Board)
    assert read.resource_type_ids() == [Score]
    assert write.resource_type_ids() == [Board]
    names = read.resource_type_names() + write.resource_type_names()
    assert len(names) == 2
    assert names[0].endswith("Score")
    assert names[1].endswith("Board")