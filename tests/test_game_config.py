import pytest

from sweepworld.game_config import BoardConfig, Difficulty, GameConfigResource


def test_board_config():
    config = BoardConfig(10, 10, 20, 30.0)
    assert config.width == 10
    assert config.height == 10
    assert config.mine_count == 20
    assert config.cell_size == 30.0
    assert config.total_cells() == 100
    assert config.mine_ratio() == 0.2


def test_mine_count_limits():
    config = BoardConfig(10, 10, 100, 30.0)
    assert config.mine_count == 91


def test_minimum_dimensions():
    config = BoardConfig(3, 2, 100, 30.0)
    assert (config.width, config.height) == (5, 5)
    assert config.mine_count == 16


def test_board_update_cell_size():
    config = BoardConfig(10, 10, 20, 30.0)
    config.update_cell_size(42.0)
    assert config.cell_size == 42.0


def test_defaults():
    config = GameConfigResource()
    assert (config.board_config.width, config.board_config.height) == (9, 9)
    assert config.board_config.mine_count == 10
    assert config.difficulty is Difficulty.EASY
    assert config.max_score == 10000
    assert config.first_click_safe and config.multiplayer and config.use_timer
    assert not config.auto_flag


def test_set_difficulty():
    config = GameConfigResource()

    config.set_difficulty(Difficulty.EASY)
    assert config.board_config.width == 9
    assert config.board_config.height == 9
    assert config.board_config.mine_count == 10

    config.set_difficulty(Difficulty.MEDIUM)
    assert config.board_config.width == 16
    assert config.board_config.height == 16
    assert config.board_config.mine_count == 40

    config.set_difficulty(Difficulty.HARD)
    assert config.board_config.width == 30
    assert config.board_config.height == 16
    assert config.board_config.mine_count == 99
    assert config.difficulty is Difficulty.HARD


def test_custom_difficulty_keeps_board():
    config = GameConfigResource()
    config.set_custom_board(12, 8, 20)
    assert config.difficulty is Difficulty.EASY
    config.set_difficulty(Difficulty.CUSTOM)
    assert (config.board_config.width, config.board_config.height) == (12, 8)
    assert config.board_config.mine_count == 20
    assert config.difficulty is Difficulty.CUSTOM


def test_update_cell_size_clamps():
    config = GameConfigResource()
    config.update_cell_size(270.0, 540.0)
    assert config.board_config.cell_size == 30.0
    config.update_cell_size(90.0, 90.0)
    assert config.board_config.cell_size == 15.0
    config.update_cell_size(9000.0, 9000.0)
    assert config.board_config.cell_size == 50.0


def test_score_calculation():
    config = GameConfigResource()
    score1 = config.calculate_score(60.0, True)
    score2 = config.calculate_score(120.0, True)
    assert score1 >= score2
    assert config.calculate_score(60000.0, True) > config.calculate_score(120000.0, True)


def test_score_values():
    config = GameConfigResource()
    assert config.calculate_score(60.0, True) == 100 + 1000 + 562
    assert config.calculate_score(60000.0, True) == 100 + 83 + 562
    assert config.calculate_score(0.0, True) == 100 + 562
    assert config.calculate_score(60000.0, False) == 0


def test_random_seed():
    config = GameConfigResource(clock=lambda: 1.5)
    assert config.get_random_seed() == 1500 + 562


def test_random_seed_wraps():
    config = GameConfigResource(clock=lambda: 1e30)
    assert config.get_random_seed() == 561


def test_resource_delegates_ratio():
    config = GameConfigResource()
    assert config.total_cells() == 81
    assert config.mine_ratio() == pytest.approx(10 / 81)