"""Conway's Game of Life simulation utilities on a clamped (non-wrapping) grid."""

from itertools import islice
from typing import Iterable, List

import numpy as np

from .grid import CellState, Coordinate, Grid


_MISSING = object()

# (dx, dy) offsets of the Moore neighborhood
NEIGHBOR_OFFSETS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
]


def random_states(
    width: int,
    height: int,
    p_alive: float = 0.2,
    rng: np.random.Generator | None = None,
) -> List[CellState]:
    """Return width * height independent picks, each ALIVE with probability p_alive."""
    if rng is None:
        rng = np.random.default_rng()
    draws = rng.random(width * height) < p_alive
    return [CellState.ALIVE if d else CellState.EMPTY for d in draws]


def initialize(width: int, height: int, outcomes: Iterable) -> Grid:
    """
    Build a grid from an ordered sequence of exactly width * height outcomes.

    Outcomes are consumed once in row-major order: cell (x, y) receives outcome
    y * width + x, so chunk y of `width` outcomes fills row y left to right.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    needed = width * height
    it = iter(outcomes)
    values = []
    for v in islice(it, needed):
        if v not in (CellState.EMPTY, CellState.ALIVE):
            raise ValueError(f"Outcome {len(values)} must be 0 (empty) or 1 (alive), got {v!r}")
        values.append(int(v))
    if len(values) < needed:
        raise ValueError(f"Expected {needed} outcomes for a {width}x{height} grid, got {len(values)}")
    if next(it, _MISSING) is not _MISSING:
        raise ValueError(f"Expected exactly {needed} outcomes for a {width}x{height} grid, got more")
    return Grid(np.array(values, dtype=np.uint8).reshape(height, width))


def random_board(
    width: int,
    height: int,
    p_alive: float = 0.2,
    rng: np.random.Generator | None = None,
) -> Grid:
    """Return a random (height x width) grid with Bernoulli(p_alive) cells."""
    return initialize(width, height, random_states(width, height, p_alive, rng))


def neighbors(coord: Coordinate, width: int, height: int) -> List[Coordinate]:
    """In-bounds Moore neighbors of `coord`; coordinates past an edge are dropped, not wrapped."""
    x, y = coord
    result = []
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            result.append(Coordinate(nx, ny))
    return result


def neighbor_count(grid: Grid, coord: Coordinate) -> int:
    """Number of alive in-bounds neighbors of a single cell."""
    states = grid.states
    return sum(int(states[ny, nx]) for nx, ny in neighbors(coord, grid.width, grid.height))


def count_neighbors(board: np.ndarray) -> np.ndarray:
    """Count living neighbors for each cell; cells beyond the edge count as empty."""
    h, w = board.shape
    # One ring of zeros stands in for everything outside the grid
    padded = np.pad(board.astype(np.int8), 1, mode="constant", constant_values=0)

    neighbor_count = np.zeros((h, w), dtype=np.int8)
    for dx, dy in NEIGHBOR_OFFSETS:
        neighbor_count += padded[1 + dy:1 + dy + h, 1 + dx:1 + dx + w]

    return neighbor_count


def step(board: np.ndarray) -> np.ndarray:
    """Compute one Game of Life step (B3/S23) and return the new board."""
    neighbor_count = count_neighbors(board)

    # Rule 1: Cell survives if it was alive and has 2 or 3 neighbors
    survives = (board == 1) & ((neighbor_count == 2) | (neighbor_count == 3))

    # Rule 2: Cell is born if it was empty and has exactly 3 neighbors
    born = (board == 0) & (neighbor_count == 3)

    return (survives | born).astype(np.uint8)


def evolve(grid: Grid) -> Grid:
    """Return the next generation of `grid` as a new grid of the same size."""
    return Grid(step(grid.states))


def run_trajectory(grid: Grid, num_steps: int, burn_in: int = 0) -> List[Grid]:
    """
    Evolve `grid` and return the generations after it.

    Runs `burn_in` steps without storing them, then `num_steps` more steps,
    storing each one.
    """
    if num_steps < 0 or burn_in < 0:
        raise ValueError(f"num_steps and burn_in must be non-negative, got {num_steps}, {burn_in}")

    board = grid.states
    for _ in range(burn_in):
        board = step(board)

    trajectory = []
    for _ in range(num_steps):
        board = step(board)
        trajectory.append(Grid(board))

    return trajectory
