"""Play settings: board size, rules, scoring and seeding."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

_U64 = 2**64
_U32 = 2**32
_MIN_SIDE = 5
# Cells kept free so the first click can open an area.
_SAFE_OPENING = 9


def _now_ms() -> float:
    return time.time() * 1000.0


class Difficulty(Enum):
    """Preset difficulty of a match."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    CUSTOM = "custom"


_PRESETS: dict[Difficulty, tuple[int, int, int]] = {
    Difficulty.EASY: (9, 9, 10),
    Difficulty.MEDIUM: (16, 16, 40),
    Difficulty.HARD: (30, 16, 99),
}

_BASE_SCORES: dict[Difficulty, int] = {
    Difficulty.EASY: 100,
    Difficulty.MEDIUM: 200,
    Difficulty.HARD: 500,
    Difficulty.CUSTOM: 300,
}


@dataclass
class BoardConfig:
    """Board dimensions, clamped to at least 5x5 with room for a safe opening."""

    width: int
    height: int
    mine_count: int
    cell_size: float

    def __post_init__(self) -> None:
        self.width = max(self.width, _MIN_SIDE)
        self.height = max(self.height, _MIN_SIDE)
        self.mine_count = min(self.mine_count, self.width * self.height - _SAFE_OPENING)

    def total_cells(self) -> int:
        return self.width * self.height

    def mine_ratio(self) -> float:
        return self.mine_count / self.total_cells()

    def update_cell_size(self, cell_size: float) -> None:
        self.cell_size = cell_size

    def _size_hash(self) -> int:
        return self.width * 31 + self.height * 17 + self.mine_count * 13


def _default_board() -> BoardConfig:
    return BoardConfig(9, 9, 10, 30.0)


@dataclass
class GameConfigResource:
    """Rules and board settings of a match."""

    board_config: BoardConfig = field(default_factory=_default_board)
    auto_flag: bool = False
    first_click_safe: bool = True
    win_by_revealing: bool = True
    use_timer: bool = True
    max_score: int = 10000
    multiplayer: bool = True
    difficulty: Difficulty = Difficulty.EASY
    clock: Callable[[], float] = field(default=_now_ms, repr=False, compare=False)

    def set_difficulty(self, difficulty: Difficulty) -> None:
        """Apply a preset; ``CUSTOM`` keeps the current dimensions."""
        current = self.board_config
        width, height, mines = _PRESETS.get(
            difficulty, (current.width, current.height, current.mine_count)
        )
        self.board_config = BoardConfig(width, height, mines, current.cell_size)
        self.difficulty = difficulty

    def set_custom_board(self, width: int, height: int, mine_count: int) -> None:
        self.board_config = BoardConfig(
            width, height, mine_count, self.board_config.cell_size
        )

    def update_cell_size(self, canvas_width: float, canvas_height: float) -> None:
        """Fit the board into the canvas with cells between 15 and 50 pixels."""
        by_width = canvas_width / self.board_config.width
        by_height = canvas_height / self.board_config.height
        self.board_config.update_cell_size(min(max(min(by_width, by_height), 15.0), 50.0))

    def total_cells(self) -> int:
        return self.board_config.total_cells()

    def mine_ratio(self) -> float:
        return self.board_config.mine_ratio()

    def get_random_seed(self) -> int:
        """Seed derived from the current time and the board settings."""
        scaled = math.floor(self.clock() * 1000.0)
        if math.isnan(scaled) or scaled <= 0:
            seed = 0
        else:
            seed = min(int(scaled), _U64 - 1)
        return (seed + self.board_config._size_hash()) % _U64

    def calculate_score(self, elapsed_time: float, win: bool) -> int:
        """Score of a finished match; ``elapsed_time`` is in milliseconds."""
        if not win:
            return 0
        time_bonus = 0
        if elapsed_time > 0.0:
            time_bonus = int(min(5000.0 / (elapsed_time / 1000.0), 1000.0))
        additional = self.board_config._size_hash() % _U32
        return _BASE_SCORES[self.difficulty] + time_bonus + additional