"""Splits systems into dependency levels and runs them level by level."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sweepworld.system_base import System


class ParallelExecutor:
    """Groups systems into levels whose members do not depend on each other."""

    def __init__(self) -> None:
        self._levels: list[list[int]] = []
        self._dependencies: dict[int, set[int]] = {}

    def build_from_systems(
        self, systems: Sequence[System], name_to_index: Mapping[str, int]
    ) -> None:
        """Compute the levels; raise ``ValueError`` on a dependency cycle.

        Dependencies whose names are not in ``name_to_index`` are ignored.
        """
        self._dependencies.clear()
        self._levels.clear()

        for index, system in enumerate(systems):
            self._dependencies[index] = {
                name_to_index[name]
                for name in system.dependencies()
                if name in name_to_index
            }

        remaining = set(range(len(systems)))
        while remaining:
            level = sorted(
                index
                for index in remaining
                if not self._dependencies.get(index, set()) & remaining
            )
            if not level:
                self._levels.clear()
                raise ValueError("cyclic dependency detected between systems")
            remaining.difference_update(level)
            self._levels.append(level)

    @property
    def levels(self) -> list[tuple[int, ...]]:
        """System indices of each level, in execution order."""
        return [tuple(level) for level in self._levels]

    def execute(self, systems: Sequence[System], context: Any, delta_time: float) -> None:
        """Update every active, runnable system, one level after another."""
        for level in self._levels:
            for index in level:
                system = systems[index]
                if system.is_active() and system.is_runnable(context):
                    system.update(context, delta_time)

    def describe_levels(self) -> str:
        """A readable listing of the levels."""
        lines = ["=== Parallel execution levels ==="]
        lines.extend(
            f"Level {number}: " + ", ".join(str(index) for index in level)
            for number, level in enumerate(self._levels)
        )
        return "\n".join(lines) + "\n"

    def level_count(self) -> int:
        return len(self._levels)