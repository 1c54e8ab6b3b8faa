"""Canonical still lifes and oscillators, as text rows ('+' alive, '.' empty)."""

from typing import Dict, List, Sequence

import numpy as np

from .grid import Grid


PATTERNS: Dict[str, List[str]] = {
    # still lifes
    "block": [
        "++",
        "++",
    ],
    "beehive": [
        ".++.",
        "+..+",
        ".++.",
    ],
    # period 2
    "blinker": [
        "+++",
    ],
    "toad": [
        ".+++",
        "+++.",
    ],
    "beacon": [
        "++..",
        "++..",
        "..++",
        "..++",
    ],
    # spaceship
    "glider": [
        ".+.",
        "..+",
        "+++",
    ],
}


def place(pattern: str | Sequence[str], width: int, height: int, x: int, y: int) -> Grid:
    """Return an otherwise empty grid with `pattern`'s top-left corner at (x, y)."""
    if isinstance(pattern, str):
        if pattern not in PATTERNS:
            raise ValueError(f"Unknown pattern {pattern!r}, expected one of {sorted(PATTERNS)}")
        pattern = PATTERNS[pattern]
    cells = Grid.from_rows(pattern).states
    ph, pw = cells.shape
    if x < 0 or y < 0 or x + pw > width or y + ph > height:
        raise ValueError(f"{pw}x{ph} pattern at ({x}, {y}) does not fit a {width}x{height} grid")

    states = np.zeros((height, width), dtype=np.uint8)
    states[y:y + ph, x:x + pw] = cells
    return Grid(states)
