"""Coordinate helpers shared by the board logic."""

from __future__ import annotations

import math

_ADJACENT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def index_to_coordinates(index: int, width: int) -> tuple[int, int]:
    """Return the ``(row, col)`` pair of a flat cell index."""
    return divmod(index, width)


def coordinates_to_index(row: int, col: int, width: int) -> int:
    """Return the flat cell index of ``(row, col)``."""
    return row * width + col


def _divide(numerator: float, denominator: float) -> float:
    """Float division with IEEE results instead of ZeroDivisionError."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _cell_position(value: float) -> float:
    """Truncate towards zero, saturating negatives and NaN to zero."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return math.inf
    return math.floor(value)


def get_cell_index_from_coordinates(
    x: float,
    y: float,
    cell_size: float,
    board_width: int,
    board_height: int,
) -> int | None:
    """Map a pointer position to a cell index, or ``None`` when off the board."""
    col = _cell_position(_divide(x, cell_size))
    row = _cell_position(_divide(y, cell_size))
    if col >= board_width or row >= board_height:
        return None
    return int(row) * board_width + int(col)


def get_adjacent_offsets() -> tuple[tuple[int, int], ...]:
    """Return the ``(row, col)`` offsets of the eight neighbouring cells."""
    return _ADJACENT_OFFSETS