import numpy as np
import pytest

from ascii_life.board import Board
from ascii_life.config import LifeConfig
from ascii_life.game_of_life import evolve
from ascii_life.patterns import place


def test_random_board_uses_config_dimensions():
    config = LifeConfig(width=16, height=8, p_alive=0.5)
    board = Board.random(config, rng=np.random.default_rng(0))
    assert (board.width, board.height) == (16, 8)
    assert board.generation == 0


def test_random_board_is_deterministic_for_seed():
    config = LifeConfig(width=12, height=6, seed=42)
    assert Board.random(config).snapshot() == Board.random(config).snapshot()


def test_tick_replaces_grid():
    start = place("blinker", 5, 5, 1, 2)
    board = Board(start)

    nxt = board.tick()

    assert board.generation == 1
    assert board.snapshot() is nxt
    assert nxt == evolve(start)
    assert start == place("blinker", 5, 5, 1, 2)


def test_run_keeps_dimensions():
    board = Board.random(LifeConfig(width=10, height=7, seed=3))
    grids = board.run(5)
    assert len(grids) == 5
    assert board.generation == 5
    assert all(g.shape == (10, 7) for g in grids)
    assert grids[-1] is board.snapshot()


def test_run_rejects_negative_steps():
    with pytest.raises(ValueError):
        Board(place("block", 4, 4, 1, 1)).run(-1)
