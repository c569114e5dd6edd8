import pytest

from sweepworld.game_state import GamePhase, GameState


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def state(clock):
    return GameState(clock=clock)


def test_new_state_starts_on_title(state, clock):
    assert state.phase is GamePhase.TITLE
    assert state.start_time is None
    assert state.frame_count == 0
    assert state.last_frame_time == clock.now
    assert state.last_update_time == clock.now
    assert not state.is_game_started()


def test_initialize_resets(state):
    state.start_game()
    state.update_frame()
    state.initialize()
    assert state.phase is GamePhase.READY
    assert state.start_time is None
    assert state.elapsed_time == 0.0
    assert state.frame_count == 0
    assert not state.is_game_started()


def test_start_records_time(state, clock):
    clock.now = 5000.0
    state.start_game()
    assert state.is_playing()
    assert state.start_time == 5000.0
    assert state.is_game_started()


def test_pause_and_resume(state):
    state.pause_game()
    assert state.phase is GamePhase.TITLE
    state.start_game()
    state.pause_game()
    assert state.is_paused()
    assert state.is_game_started()
    state.resume_game()
    assert state.is_playing()
    state.resume_game()
    assert state.is_playing()


@pytest.mark.parametrize("win, phase", [(True, GamePhase.WON), (False, GamePhase.LOST)])
def test_end_game(state, win, phase):
    state.start_game()
    state.end_game(win)
    assert state.phase is phase
    assert state.is_game_over()
    assert state.is_win() is win
    assert state.is_game_started()


def test_elapsed_time_frozen_while_paused(state, clock):
    state.start_game()
    clock.now += 2000.0
    state.update_elapsed_time()
    running = state.elapsed_time
    assert running > 0.0
    state.pause_game()
    clock.now += 7000.0
    state.update_elapsed_time()
    assert state.elapsed_time == running


def test_elapsed_time_not_updated_before_start(state, clock):
    clock.now += 4000.0
    state.update_elapsed_time()
    assert state.elapsed_time == 0.0


def test_update_frame_returns_delta_seconds(state, clock):
    clock.now += 500.0
    delta = state.update_frame()
    assert delta == 0.5
    assert state.frame_count == 1
    assert state.last_frame_time == clock.now
    assert state.last_update_time == clock.now


def test_elapsed_time_string(state):
    state.elapsed_time = 125.0
    assert state.elapsed_time_string() == "02:05"


def test_current_fps_needs_two_frames(state, clock):
    state.start_game()
    clock.now += 1000.0
    state.update_frame()
    assert state.current_fps() == 0.0


def test_current_fps(state, clock):
    state.start_game()
    clock.now += 1000.0
    state.update_frame()
    clock.now += 1000.0
    state.update_frame()
    assert state.current_fps() == 0.5


def test_current_fps_without_start_is_zero(state, clock):
    clock.now += 100.0
    state.update_frame()
    clock.now += 100.0
    state.update_frame()
    assert state.current_fps() == 0.0