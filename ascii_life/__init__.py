"""Conway's Game of Life on a clamped grid, animated as ASCII art."""

from .grid import CellState, Coordinate, Cell, Grid
from .game_of_life import random_states, initialize, random_board, neighbors, neighbor_count, evolve, run_trajectory
from .board import Board
from .config import LifeConfig, PRESETS, from_preset
from .patterns import PATTERNS, place

__all__ = [
    "CellState",
    "Coordinate",
    "Cell",
    "Grid",
    "random_states",
    "initialize",
    "random_board",
    "neighbors",
    "neighbor_count",
    "evolve",
    "run_trajectory",
    "Board",
    "LifeConfig",
    "PRESETS",
    "from_preset",
    "PATTERNS",
    "place",
]
