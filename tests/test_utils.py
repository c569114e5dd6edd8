import pytest

from sweepworld.utils import (
    coordinates_to_index,
    get_adjacent_offsets,
    get_cell_index_from_coordinates,
    index_to_coordinates,
)


@pytest.mark.parametrize("width", [1, 5, 9, 30])
def test_index_round_trip(width):
    for index in range(width * 7):
        row, col = index_to_coordinates(index, width)
        assert 0 <= col < width
        assert coordinates_to_index(row, col, width) == index


def test_coordinates_round_trip():
    assert index_to_coordinates(coordinates_to_index(3, 4, 9), 9) == (3, 4)


def test_cell_index_inside_board_matches_coordinates():
    cell_size = 30.0
    for row in range(4):
        for col in range(6):
            x = (col + 0.5) * cell_size
            y = (row + 0.5) * cell_size
            got = get_cell_index_from_coordinates(x, y, cell_size, 6, 4)
            assert got == coordinates_to_index(row, col, 6)


def test_cell_index_outside_board_is_none():
    assert get_cell_index_from_coordinates(6 * 30.0, 10.0, 30.0, 6, 4) is None
    assert get_cell_index_from_coordinates(10.0, 4 * 30.0, 30.0, 6, 4) is None


def test_negative_coordinates_saturate_to_origin():
    assert get_cell_index_from_coordinates(-50.0, -50.0, 30.0, 6, 4) == 0


def test_zero_cell_size_is_off_board():
    assert get_cell_index_from_coordinates(10.0, 10.0, 0.0, 6, 4) is None


def test_adjacent_offsets_are_all_neighbours():
    offsets = get_adjacent_offsets()
    assert len(offsets) == 8
    assert (0, 0) not in offsets
    expected = {(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)} - {(0, 0)}
    assert set(offsets) == expected