"""Statistics over Game of Life trajectories."""

from typing import Dict, List, Tuple

from .game_of_life import evolve
from .grid import Grid


def compute_density(grid: Grid) -> float:
    """Fraction of alive cells."""
    return grid.density


def population_curve(grids: List[Grid]) -> List[int]:
    return [g.population for g in grids]


def first_extinction_step(populations: List[int]) -> int | None:
    """
    Return the first generation whose population is zero
    (None if it never happens within the curve).
    """
    for generation, population in enumerate(populations):
        if population == 0:
            return generation
    return None


def detect_cycle(grid: Grid, max_steps: int = 200) -> Tuple[int, int] | None:
    """
    Evolve `grid` until a configuration repeats.

    Returns (start, period): the generation where the cycle begins and its
    length. Still lifes give period 1. None if no repeat within max_steps.
    """
    seen: Dict[Grid, int] = {}
    current = grid
    for generation in range(max_steps + 1):
        if current in seen:
            start = seen[current]
            return start, generation - start
        seen[current] = generation
        current = evolve(current)
    return None
