"""Phase, timing and frame statistics of the running game."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


def _now_ms() -> float:
    return time.time() * 1000.0


def _to_u32(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    return min(int(value), 2**32 - 1)


class GamePhase(Enum):
    """Where the game currently stands."""

    TITLE = "title"
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    WON = "won"
    LOST = "lost"

    @property
    def is_game_over(self) -> bool:
        return self in (GamePhase.WON, GamePhase.LOST)


@dataclass
class GameState:
    """Game progress; ``elapsed_time`` is in seconds, clock values in milliseconds."""

    phase: GamePhase = GamePhase.TITLE
    start_time: float | None = None
    elapsed_time: float = 0.0
    local_player_id: str | None = None
    frame_count: int = 0
    clock: Callable[[], float] = field(default=_now_ms, repr=False, compare=False)
    last_update_time: float = field(init=False)
    last_frame_time: float = field(init=False)

    def __post_init__(self) -> None:
        now = self.clock()
        self.last_update_time = now
        self.last_frame_time = now

    def initialize(self) -> None:
        """Prepare for a new game, waiting for the first move."""
        self.phase = GamePhase.READY
        self.start_time = None
        self.elapsed_time = 0.0
        self.frame_count = 0

    def start_game(self) -> None:
        self.phase = GamePhase.PLAYING
        self.start_time = self.clock()

    def pause_game(self) -> None:
        if self.phase is GamePhase.PLAYING:
            self.phase = GamePhase.PAUSED

    def resume_game(self) -> None:
        if self.phase is GamePhase.PAUSED:
            self.phase = GamePhase.PLAYING

    def end_game(self, win: bool) -> None:
        self.phase = GamePhase.WON if win else GamePhase.LOST

    def is_game_started(self) -> bool:
        return self.phase is GamePhase.PLAYING or self.phase is GamePhase.PAUSED or self.phase.is_game_over

    def is_playing(self) -> bool:
        return self.phase is GamePhase.PLAYING

    def is_paused(self) -> bool:
        return self.phase is GamePhase.PAUSED

    def is_game_over(self) -> bool:
        return self.phase.is_game_over

    def is_win(self) -> bool:
        return self.phase is GamePhase.WON

    def update_elapsed_time(self) -> None:
        """Refresh the elapsed time while the game is being played."""
        if self.start_time is not None and self.phase is GamePhase.PLAYING:
            self.elapsed_time = (self.clock() - self.start_time) / 1000.0

    def update_frame(self) -> float:
        """Count a frame and return the seconds since the previous one."""
        now = self.clock()
        delta_time = (now - self.last_frame_time) / 1000.0
        self.frame_count += 1
        self.last_frame_time = now
        self.last_update_time = now
        self.update_elapsed_time()
        return delta_time

    def elapsed_time_string(self) -> str:
        """Elapsed time as ``MM:SS``."""
        minutes = _to_u32(self.elapsed_time / 60.0)
        seconds = _to_u32(math.fmod(self.elapsed_time, 60.0))
        return f"{minutes:02}:{seconds:02}"

    def current_fps(self) -> float:
        """Average frame rate since the game started."""
        if self.frame_count <= 1:
            return 0.0
        start = self.start_time if self.start_time is not None else self.last_frame_time
        time_diff = self.last_frame_time - start
        if time_diff <= 0.0:
            return 0.0
        return (self.frame_count - 1) / (time_diff / 1000.0)