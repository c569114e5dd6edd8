"""Frame timing, frame rate and scaled game time."""

from __future__ import annotations

import math
import time
from collections import deque
from typing import Callable


def _now_ms() -> float:
    return time.time() * 1000.0


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_u32(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    return min(int(value), 2**32 - 1)


class TimeResource:
    """Tracks per-frame delta time (seconds) and a rolling frame rate."""

    max_samples = 60

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or _now_ms
        self.delta_time = 0.0
        self.total_time = 0.0
        self.frame_count = 0
        self.last_frame_time = 0.0
        self._frame_times: deque[float] = deque(maxlen=self.max_samples)
        self.fps = 0.0
        self.current_time = self._clock()
        self.is_paused = False
        self.time_scale = 1.0

    def begin_frame(self) -> float:
        """Start a frame and return its scaled delta time in seconds."""
        now = self._clock()
        if self.last_frame_time == 0.0:
            self.last_frame_time = now
            self.delta_time = 0.0
            self.current_time = now
            return self.delta_time

        self.delta_time = (now - self.last_frame_time) / 1000.0
        if self.is_paused:
            self.delta_time = 0.0
        else:
            self.delta_time *= self.time_scale
            self.total_time += self.delta_time

        self.frame_count += 1
        self._update_fps(now)
        self.last_frame_time = now
        self.current_time = now
        return self.delta_time

    def _update_fps(self, now: float) -> None:
        self._frame_times.append(now)
        if len(self._frame_times) >= 2:
            span = self._frame_times[-1] - self._frame_times[0]
            if span > 0.0:
                self.fps = (len(self._frame_times) - 1) / span * 1000.0

    def set_paused(self, paused: bool) -> None:
        self.is_paused = paused

    def set_time_scale(self, scale: float) -> None:
        """Set the speed of game time; negative values become zero."""
        self.time_scale = max(scale, 0.0)

    def every_seconds(self, interval: float) -> bool:
        """True when the total time lands on a multiple of ``interval``."""
        interval = max(interval, 0.001)
        elapsed = _round_half_away(self.total_time / interval)
        return _round_half_away(elapsed * interval) == _round_half_away(self.total_time)

    def format_ms(self, ms: float) -> str:
        """Format milliseconds as ``MM:SS.mmm``."""
        seconds = math.floor(ms / 1000.0)
        minutes = math.floor(seconds / 60.0)
        seconds = math.fmod(seconds, 60.0)
        ms_part = math.fmod(ms, 1000.0)
        return f"{_to_u32(minutes):02}:{_to_u32(seconds):02}.{_to_u32(ms_part):03}"

    def format_fps(self) -> str:
        return f"{self.fps:.1f} FPS"