import pytest

from sweepworld.board_config import BoardConfig, Difficulty


def test_default_is_intermediate():
    assert BoardConfig() == BoardConfig.intermediate()


@pytest.mark.parametrize(
    "factory, expected",
    [
        (BoardConfig.beginner, (9, 9, 10, 40.0, Difficulty.BEGINNER)),
        (BoardConfig.intermediate, (16, 16, 40, 30.0, Difficulty.INTERMEDIATE)),
        (BoardConfig.expert, (30, 16, 99, 25.0, Difficulty.EXPERT)),
    ],
)
def test_presets(factory, expected):
    config = factory()
    assert (
        config.width,
        config.height,
        config.mine_count,
        config.cell_size,
        config.difficulty,
    ) == expected


def test_custom_keeps_dimensions():
    config = BoardConfig.custom(12, 7, 20)
    assert (config.width, config.height, config.mine_count) == (12, 7, 20)
    assert config.difficulty is Difficulty.CUSTOM
    assert config.cell_size == 30.0


def test_total_cells_and_ratio_are_consistent():
    config = BoardConfig.expert()
    assert config.total_cells() == config.width * config.height
    assert config.mine_ratio() * config.total_cells() == pytest.approx(config.mine_count)
    assert 0.0 < config.mine_ratio() < 1.0


def test_update_cell_size_fits_board_in_canvas():
    config = BoardConfig.expert()
    config.update_cell_size(800.0, 600.0)
    assert config.cell_size * config.width <= 800.0 - 40.0 + 1e-9
    assert config.cell_size * config.height <= 600.0 - 40.0 + 1e-9
    assert config.cell_size == pytest.approx(
        min((800.0 - 40.0) / config.width, (600.0 - 40.0) / config.height)
    )


def test_update_cell_size_square_canvas_uses_height_for_tall_board():
    config = BoardConfig.custom(4, 8, 3)
    config.update_cell_size(500.0, 500.0)
    assert config.cell_size * config.height == pytest.approx(500.0 - 40.0)