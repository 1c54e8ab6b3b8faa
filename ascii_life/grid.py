"""Grid data model for the Game of Life board."""

from enum import IntEnum
from typing import Iterable, Iterator, List, NamedTuple, Sequence, Tuple

import numpy as np


class CellState(IntEnum):
    """The two states a cell can take."""
    EMPTY = 0
    ALIVE = 1


class Coordinate(NamedTuple):
    x: int
    y: int


class Cell(NamedTuple):
    """A grid slot: its fixed coordinate and current state."""
    coord: Coordinate
    state: CellState

    @property
    def x(self) -> int:
        return self.coord.x

    @property
    def y(self) -> int:
        return self.coord.y

    @property
    def alive(self) -> bool:
        return self.state is CellState.ALIVE


class Grid:
    """
    Fixed-size (height x width) board of cells, addressed row-major as grid[y][x].

    States are stored as a 2-D uint8 array of 0/1 values. The array is copied on
    construction and exposed read-only, so two grids never share a buffer.
    """

    def __init__(self, states: np.ndarray):
        raw = np.asarray(states)
        if raw.ndim != 2:
            raise ValueError(f"Grid states must be 2-D, got shape {raw.shape}")
        if raw.shape[0] == 0 or raw.shape[1] == 0:
            raise ValueError(f"Grid must have at least one row and column, got shape {raw.shape}")
        # checked before the uint8 cast, which would truncate floats and wrap negatives
        if not np.isin(raw, (0, 1)).all():
            raise ValueError("Grid states must only contain 0 (empty) or 1 (alive)")
        arr = raw.astype(np.uint8, copy=True)
        arr.setflags(write=False)
        self._states = arr

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        return cls(np.zeros((height, width), dtype=np.uint8))

    @classmethod
    def from_cells(cls, coords: Iterable[Tuple[int, int]], width: int, height: int) -> "Grid":
        """Build a grid with the given (x, y) coordinates alive."""
        states = np.zeros((height, width), dtype=np.uint8)
        for x, y in coords:
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"Coordinate ({x}, {y}) outside {width}x{height} grid")
            states[y, x] = 1
        return cls(states)

    @classmethod
    def from_rows(cls, rows: Sequence[str], alive: str = "+") -> "Grid":
        """Parse text rows; any character other than `alive` is empty."""
        if not rows:
            raise ValueError("Cannot build a grid from zero rows")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has length {len(row)}, expected {width}")
        states = np.array([[1 if ch == alive else 0 for ch in row] for row in rows], dtype=np.uint8)
        return cls(states)

    @property
    def states(self) -> np.ndarray:
        return self._states

    @property
    def width(self) -> int:
        return self._states.shape[1]

    @property
    def height(self) -> int:
        return self._states.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def population(self) -> int:
        return int(self._states.sum())

    @property
    def density(self) -> float:
        return float(self._states.mean())

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.contains(x, y):
            raise IndexError(f"Coordinate ({x}, {y}) outside {self.width}x{self.height} grid")
        return Cell(Coordinate(x, y), CellState(int(self._states[y, x])))

    def __getitem__(self, y: int) -> Tuple[Cell, ...]:
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} outside grid of height {self.height}")
        return tuple(self.cell(x, y) for x in range(self.width))

    def __len__(self) -> int:
        return self.height

    def __iter__(self) -> Iterator[Tuple[Cell, ...]]:
        for y in range(self.height):
            yield self[y]

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield self.cell(x, y)

    def alive_coordinates(self) -> List[Coordinate]:
        ys, xs = np.nonzero(self._states)
        return [Coordinate(int(x), int(y)) for y, x in zip(ys, xs)]

    def copy(self) -> "Grid":
        return Grid(self._states)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._states.shape == other._states.shape and bool(np.array_equal(self._states, other._states))

    def __hash__(self) -> int:
        return hash((self._states.shape, self._states.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, population={self.population})"
