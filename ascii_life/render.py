"""Rendering of board snapshots: ASCII frames for the terminal, figures for files."""

from pathlib import Path
from typing import Dict, List

import matplotlib.pyplot as plt
import numpy as np

from .config import LifeConfig
from .grid import Grid


BOLD = "\033[1m"
RESET = "\033[0m"


def render_ascii(grid: Grid, alive: str = "+", empty: str = "_", bold: bool = False) -> str:
    """Map each cell to a glyph; rows top to bottom, columns left to right."""
    alive_glyph = f"{BOLD}{alive}{RESET}" if bold else alive
    glyphs = np.array([empty, alive_glyph], dtype=object)
    return "\n".join("".join(row) for row in glyphs[grid.states])


def render_frame(grid: Grid, generation: int, config: LifeConfig) -> str:
    """Status line followed by the board."""
    header = f"generation {generation:>5} | population {grid.population:>5} | {grid.width}x{grid.height}"
    body = render_ascii(grid, config.alive_glyph, config.empty_glyph, config.bold)
    return f"{header}\n{body}"


def plot_snapshots(snapshots: Dict[int, Grid], out_dir: Path, prefix: str) -> Path | None:
    """Save side-by-side snapshots, one panel per generation in `snapshots`."""
    steps = sorted(snapshots)
    if not steps:
        return None
    out_dir.mkdir(parents=True, exist_ok=True)
    n = len(steps)
    fig, axes = plt.subplots(1, n, figsize=(3 * n, 3), squeeze=False)

    for col, step_id in enumerate(steps):
        ax = axes[0, col]
        ax.imshow(snapshots[step_id].states, cmap="binary", interpolation="nearest", vmin=0, vmax=1)
        ax.set_title(f"Step {step_id}" + (" (t0)" if step_id == 0 else ""))
        ax.set_xticks([])
        ax.set_yticks([])

    fig.tight_layout()
    out_path = out_dir / f"{prefix}_snapshots.png"
    fig.savefig(out_path, dpi=200)
    plt.close(fig)
    print(f"Saved snapshots to {out_path}")
    return out_path


def plot_population(populations: List[int], num_cells: int, out_dir: Path, prefix: str) -> Path:
    """Save a line plot of population (left axis) and density (right axis) per generation."""
    out_dir.mkdir(parents=True, exist_ok=True)
    steps = np.arange(len(populations))
    fig, ax1 = plt.subplots(figsize=(8, 5))

    ax1.plot(steps, populations, label="population", color="tab:blue")
    ax1.set_xlabel("generation")
    ax1.set_ylabel("alive cells")
    ax1.legend(loc="upper left")

    ax2 = ax1.twinx()
    ax2.plot(steps, np.asarray(populations) / num_cells, label="density", color="tab:orange", linestyle="--")
    ax2.set_ylabel("density")
    ax2.set_ylim(0, 1)
    ax2.legend(loc="upper right")

    fig.tight_layout()
    out_path = out_dir / f"{prefix}_population.png"
    fig.savefig(out_path, dpi=200)
    plt.close(fig)
    print(f"Saved population curve to {out_path}")
    return out_path
