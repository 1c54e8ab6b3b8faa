"""
Animated ASCII Game of Life in the terminal.

What it does:
- Seed a random board from the configured size and alive probability.
- On every tick of a fixed-interval clock, evolve the board one generation and
  redraw it ('+' alive, '_' or '.' empty).
- Report final population, extinction generation and any cycle reached.

Notes:
- Ticks are serial: a tick that falls due while a generation is still being
  computed or drawn is dropped, never queued.
- Edges are clamped; nothing wraps around.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, TextIO
import argparse
import itertools
import sys
import time

import numpy as np

from .analysis import compute_density, detect_cycle, first_extinction_step
from .board import Board
from .config import PRESETS, LifeConfig, from_preset
from .grid import Grid
from .render import plot_population, plot_snapshots, render_frame


CLEAR_SCREEN = "\033[H\033[2J"


class TickClock:
    """
    Iterator yielding one tick per `interval` seconds.

    A tick that is already overdue fires immediately and any whole intervals
    missed in between are counted in `dropped` instead of being replayed.
    """

    def __init__(self, interval: float, clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        if interval < 0:
            raise ValueError(f"interval must be non-negative, got {interval}")
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._deadline: float | None = None
        self.ticks = 0
        self.dropped = 0

    def __iter__(self) -> "TickClock":
        return self

    def __next__(self) -> int:
        now = self._clock()
        if self._deadline is None:
            self._deadline = now + self.interval

        if now < self._deadline:
            self._sleep(self._deadline - now)
            self._deadline += self.interval
        else:
            if self.interval > 0:
                self.dropped += int((now - self._deadline) // self.interval)
            self._deadline = now + self.interval

        self.ticks += 1
        return self.ticks


@dataclass
class AnimationResult:
    populations: List[int] = field(default_factory=list)
    snapshots: Dict[int, Grid] = field(default_factory=dict)
    interrupted: bool = False
    dropped_ticks: int = 0


def animate(
    board: Board,
    config: LifeConfig,
    steps: int | None = None,
    out: TextIO | None = None,
    clock: Iterable | None = None,
    snap_steps: Iterable[int] = (),
) -> AnimationResult:
    """
    Draw the board, then evolve and redraw it once per tick.

    Runs `steps` generations, or until interrupted when steps is None.
    Grids for the generations in `snap_steps` are kept in the result.
    """
    if out is None:
        out = sys.stdout
    if clock is None:
        clock = TickClock(config.interval)
    clear = out.isatty()
    keep = set(snap_steps)
    result = AnimationResult()

    def draw() -> None:
        grid = board.snapshot()
        result.populations.append(grid.population)
        if board.generation in keep:
            result.snapshots[board.generation] = grid
        if clear:
            out.write(CLEAR_SCREEN)
        out.write(render_frame(grid, board.generation, config) + "\n")
        out.flush()

    ticks = iter(clock)
    generations = range(steps) if steps is not None else itertools.count()
    try:
        draw()
        for _ in generations:
            next(ticks)
            board.tick()
            draw()
    except KeyboardInterrupt:
        result.interrupted = True

    result.dropped_ticks = getattr(clock, "dropped", 0)
    return result


def build_config(args: argparse.Namespace) -> LifeConfig:
    return from_preset(
        args.preset,
        width=args.width,
        height=args.height,
        p_alive=args.p_alive,
        seed=args.seed,
        interval=args.interval,
        alive_glyph=args.alive_glyph,
        empty_glyph=args.empty_glyph,
        bold=False if args.no_bold else None,
    )


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Animated ASCII Game of Life on a clamped grid.")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="classic",
                        help="Base configuration; other flags override its fields.")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--p_alive", type=float, default=None, help="Probability each cell starts alive.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--interval", type=float, default=None, help="Seconds between ticks.")
    parser.add_argument("--steps", type=int, default=None,
                        help="Generations to run; runs until Ctrl-C if not set.")
    parser.add_argument("--alive_glyph", type=str, default=None)
    parser.add_argument("--empty_glyph", type=str, default=None)
    parser.add_argument("--no_bold", action="store_true", help="Do not embolden alive cells.")
    parser.add_argument("--cycle_steps", type=int, default=200,
                        help="Generations to search for a repeat after the run ends.")
    parser.add_argument("--viz_dir", type=Path, default=None, help="Directory to save plots.")
    parser.add_argument("--snap_steps", type=int, nargs="*", default=[0, 1, 5, 10, 20, 50],
                        help="Generations to draw in the snapshot figure.")
    args = parser.parse_args(argv)

    if args.steps is not None and args.steps < 0:
        parser.error(f"--steps must be non-negative, got {args.steps}")
    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    print(f"Preset: {args.preset}")
    print(f"Board: {config.width}x{config.height}, p_alive={config.p_alive}, seed={config.seed}")
    print(f"Interval: {config.interval}s, steps: {args.steps if args.steps is not None else 'until interrupted'}")

    rng = np.random.default_rng(config.seed)
    board = Board.random(config, rng=rng)
    result = animate(board, config, steps=args.steps, snap_steps=args.snap_steps)

    final = board.snapshot()
    extinct = first_extinction_step(result.populations)
    cycle = detect_cycle(final, max_steps=args.cycle_steps)

    print("\n=== Summary ===")
    if result.interrupted:
        print("Stopped by user")
    print(f"Generations: {board.generation}")
    if result.populations:
        print(f"Initial population: {result.populations[0]}")
    print(f"Final population: {final.population}")
    print(f"Final density: {compute_density(final):.4f}")
    print(f"First extinct generation: {extinct}")
    if cycle is None:
        print(f"No repeat within {args.cycle_steps} further generations")
    else:
        start, period = cycle
        print(f"Repeats after {start} further generations with period {period}")
    if result.dropped_ticks:
        print(f"Dropped ticks: {result.dropped_ticks}")

    if args.viz_dir is not None:
        prefix = f"{config.width}x{config.height}_seed{config.seed}"
        plot_snapshots(result.snapshots, args.viz_dir, prefix)
        plot_population(result.populations, config.num_cells, args.viz_dir, prefix)

    return 0


if __name__ == "__main__":
    sys.exit(main())
