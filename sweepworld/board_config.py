"""Board dimensions and difficulty presets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Difficulty(Enum):
    """Preset difficulty of a board."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"
    CUSTOM = "custom"


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


@dataclass
class BoardConfig:
    """Size, mine count and drawing scale of a board; defaults to intermediate."""

    width: int = 16
    height: int = 16
    mine_count: int = 40
    cell_size: float = 30.0
    difficulty: Difficulty = Difficulty.INTERMEDIATE

    @classmethod
    def beginner(cls) -> BoardConfig:
        """9x9 board with 10 mines."""
        return cls(9, 9, 10, 40.0, Difficulty.BEGINNER)

    @classmethod
    def intermediate(cls) -> BoardConfig:
        """16x16 board with 40 mines."""
        return cls(16, 16, 40, 30.0, Difficulty.INTERMEDIATE)

    @classmethod
    def expert(cls) -> BoardConfig:
        """30x16 board with 99 mines."""
        return cls(30, 16, 99, 25.0, Difficulty.EXPERT)

    @classmethod
    def custom(cls, width: int, height: int, mine_count: int) -> BoardConfig:
        """Board of arbitrary size."""
        return cls(width, height, mine_count, 30.0, Difficulty.CUSTOM)

    def update_cell_size(self, canvas_width: float, canvas_height: float) -> None:
        """Fit the cells into the canvas, leaving a 20 pixel margin on each edge."""
        available_width = canvas_width - 40.0
        available_height = canvas_height - 40.0
        self.cell_size = min(
            _divide(available_width, self.width),
            _divide(available_height, self.height),
        )

    def total_cells(self) -> int:
        return self.width * self.height

    def mine_ratio(self) -> float:
        """Fraction of cells that hold a mine."""
        return _divide(self.mine_count, self.total_cells())