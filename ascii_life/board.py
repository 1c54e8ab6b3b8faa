"""The Board: owner of the current grid and driver of evolution."""

from typing import List

import numpy as np

from .config import LifeConfig
from .game_of_life import evolve, random_board
from .grid import Grid


class Board:
    """Holds the single current grid of a simulation and its generation number."""

    def __init__(self, grid: Grid):
        self._grid = grid
        self.generation = 0

    @classmethod
    def random(cls, config: LifeConfig, rng: np.random.Generator | None = None) -> "Board":
        """Seed a board from config.num_cells weighted picks."""
        if rng is None:
            rng = np.random.default_rng(config.seed)
        return cls(random_board(config.width, config.height, config.p_alive, rng))

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def snapshot(self) -> Grid:
        return self._grid

    def tick(self) -> Grid:
        """Advance one generation and return the new grid."""
        self._grid = evolve(self._grid)
        self.generation += 1
        return self._grid

    def run(self, steps: int) -> List[Grid]:
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        return [self.tick() for _ in range(steps)]

    def __repr__(self) -> str:
        return f"Board(generation={self.generation}, grid={self._grid!r})"
