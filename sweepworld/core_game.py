"""Game phase, timer, score and mine counter of a single match."""

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
    """Where a match currently stands."""

    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    WON = "won"
    LOST = "lost"

    @property
    def is_game_over(self) -> bool:
        return self in (GamePhase.WON, GamePhase.LOST)


@dataclass
class CoreGameResource:
    """Core state of a match; times are in milliseconds."""

    phase: GamePhase = GamePhase.READY
    start_time: float | None = None
    elapsed_time: float = 0.0
    score: int = 0
    remaining_mines: int = 0
    clock: Callable[[], float] = field(default=_now_ms, repr=False, compare=False)

    def initialize(self, mine_count: int) -> None:
        """Reset for a new match with ``mine_count`` mines."""
        self.phase = GamePhase.READY
        self.start_time = None
        self.elapsed_time = 0.0
        self.score = 0
        self.remaining_mines = mine_count

    def start_game(self) -> None:
        if self.phase is GamePhase.READY:
            self.phase = GamePhase.PLAYING
            self.start_time = self.clock()

    def pause_game(self) -> None:
        if self.phase is GamePhase.PLAYING:
            self.phase = GamePhase.PAUSED
            self.update_elapsed_time()

    def resume_game(self) -> None:
        if self.phase is GamePhase.PAUSED:
            self.phase = GamePhase.PLAYING
            self.start_time = self.clock() - self.elapsed_time

    def end_game(self, win: bool) -> None:
        self.update_elapsed_time()
        self.phase = GamePhase.WON if win else GamePhase.LOST

    def is_playing(self) -> bool:
        return self.phase is GamePhase.PLAYING

    def is_paused(self) -> bool:
        return self.phase is GamePhase.PAUSED

    def is_game_over(self) -> bool:
        return self.phase.is_game_over

    def is_win(self) -> bool:
        return self.phase is GamePhase.WON

    def update_elapsed_time(self) -> None:
        """Refresh the elapsed time while the match is running."""
        if self.start_time is not None and self.is_playing():
            self.elapsed_time = self.clock() - self.start_time

    def add_score(self, points: int) -> None:
        self.score += points

    def decrement_mines(self) -> None:
        """Count a placed flag; never goes below zero."""
        if self.remaining_mines > 0:
            self.remaining_mines -= 1

    def increment_mines(self) -> None:
        """Count a removed flag."""
        self.remaining_mines += 1

    def format_elapsed_time(self) -> str:
        """Elapsed time as ``MM:SS``."""
        minutes, seconds = divmod(_to_u32(self.elapsed_time / 1000.0), 60)
        return f"{minutes:02}:{seconds:02}"