"""Frame scheduling with fixed-rate steps, and a rate-limiting system wrapper."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from sweepworld.system_base import System
from sweepworld.system_registry import SystemRegistry

logger = logging.getLogger(__name__)

VARIABLE_UPDATE_GROUP = "VariableUpdate"
FIXED_UPDATE_GROUP = "FixedUpdate"
PRE_RENDER_GROUP = "PreRender"
RENDER_GROUP = "Render"
POST_RENDER_GROUP = "PostRender"


def _now_ms() -> float:
    return time.time() * 1000.0


class SystemScheduler:
    """Runs the registry's frame groups, stepping ``FixedUpdate`` at a fixed rate.

    The clock returns milliseconds; delta times passed to systems are seconds.
    """

    def __init__(
        self, fixed_update_rate: float, clock: Callable[[], float] | None = None
    ) -> None:
        self._clock = clock or _now_ms
        self.fixed_update_rate = fixed_update_rate
        self.max_delta_time = 0.1
        self.debug_mode = False
        self.fps = 0.0
        self._accumulated_time = 0.0
        now = self._clock()
        self._last_frame_time = now
        self._last_second = now / 1000.0
        self._frame_count = 0

    def update(self, registry: SystemRegistry, context: Any) -> None:
        """Run one frame; ``KeyError`` if one of the frame groups is missing."""
        now = self._clock()
        delta_time = min((now - self._last_frame_time) / 1000.0, self.max_delta_time)
        self._last_frame_time = now

        self._frame_count += 1
        current_second = now / 1000.0
        if current_second - self._last_second >= 1.0:
            self.fps = float(self._frame_count)
            self._frame_count = 0
            self._last_second = current_second
            if self.debug_mode:
                logger.info("FPS: %.1f", self.fps)

        registry.update_group(VARIABLE_UPDATE_GROUP, context, delta_time)

        fixed_dt = 1.0 / self.fixed_update_rate
        self._accumulated_time += delta_time
        while self._accumulated_time >= fixed_dt:
            registry.update_group(FIXED_UPDATE_GROUP, context, fixed_dt)
            self._accumulated_time -= fixed_dt

        for group_name in (PRE_RENDER_GROUP, RENDER_GROUP, POST_RENDER_GROUP):
            registry.update_group(group_name, context, delta_time)


class RateControlledSystem(System):
    """Wraps a system so it updates at most ``updates_per_second`` times a second.

    The wrapped system receives the time accumulated since its last update.
    """

    def __init__(self, system: System, updates_per_second: float) -> None:
        self.system = system
        self.update_interval = 1.0 / updates_per_second
        self.time_since_last_update = 0.0
        self.active = True

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.system.name

    def set_update_rate(self, updates_per_second: float) -> None:
        self.update_interval = 1.0 / updates_per_second

    def init(self, context: Any) -> None:
        self.system.init(context)

    def update(self, context: Any, delta_time: float) -> None:
        self.time_since_last_update += delta_time
        if self.time_since_last_update >= self.update_interval:
            self.system.update(context, self.time_since_last_update)
            self.time_since_last_update = 0.0

    def shutdown(self, context: Any) -> None:
        self.system.shutdown(context)

    def dependencies(self) -> list[str]:
        return self.system.dependencies()

    def is_runnable(self, context: Any) -> bool:
        return self.system.is_runnable(context)

    def priority(self) -> int:
        return self.system.priority()

    def is_active(self) -> bool:
        return self.active and self.system.is_active()

    def set_active(self, active: bool) -> None:
        self.active = active