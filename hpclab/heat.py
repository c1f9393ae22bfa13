"""Explicit finite-difference simulation of 2-D heat diffusion."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from hpclab.pngio import write_image

N = 2048

SOURCE_TEMP = 100.0
ENVIROM_TEMP = 25.0
BOUNDARY_TEMP = 5.0

MIN_DELTA = 0.01
MAX_ITERATIONS = 2000

_A = np.float32(0.5)
_DX = np.float32(0.01)
_DY = np.float32(0.01)
_DX2 = _DX * _DX
_DY2 = _DY * _DY
_DT = _DX2 * _DY2 / (np.float32(2.0) * _A * (_DX2 + _DY2))
_TWO = np.float32(2.0)


@dataclass
class HeatResult:
    """Outcome of a simulation: the final grid, steps taken and last change."""

    grid: np.ndarray
    iterations: int
    delta: float


def init_grid(size: int, source_x: int, source_y: int) -> np.ndarray:
    """Return a ``(size, size)`` float32 grid with the source and cold borders."""
    if size < 1:
        raise ValueError(f"grid size must be positive, got {size}")
    if not (0 <= source_x < size and 0 <= source_y < size):
        raise ValueError(f"source ({source_x}, {source_y}) lies outside the grid")
    grid = np.full((size, size), ENVIROM_TEMP, dtype=np.float32)
    grid[source_y, source_x] = SOURCE_TEMP
    grid[0, :] = BOUNDARY_TEMP
    grid[-1, :] = BOUNDARY_TEMP
    grid[:, 0] = BOUNDARY_TEMP
    grid[:, -1] = BOUNDARY_TEMP
    return grid


def step(current: np.ndarray, source_x: int, source_y: int) -> np.ndarray:
    """Advance the grid by one time step and return the new grid."""
    c = np.asarray(current, dtype=np.float32)
    nxt = c.copy()
    centre = c[1:-1, 1:-1]
    lap = ((c[1:-1, 2:] - _TWO * centre + c[1:-1, :-2]) / _DX2
           + (c[2:, 1:-1] - _TWO * centre + c[:-2, 1:-1]) / _DY2)
    nxt[1:-1, 1:-1] = centre + _A * _DT * lap
    nxt[source_y, source_x] = SOURCE_TEMP
    return nxt


def max_diff(current: np.ndarray, next_grid: np.ndarray) -> float:
    """Return the largest absolute change over the interior of the grid."""
    a = np.asarray(current, dtype=np.float32)[1:-1, 1:-1]
    b = np.asarray(next_grid, dtype=np.float32)[1:-1, 1:-1]
    if a.size == 0:
        return 0.0
    return float(max(np.float32(0.0), np.abs(b - a).max()))


def random_source(size: int, seed: int | None = 0) -> tuple[int, int]:
    """Pick a source position strictly inside the grid."""
    if size < 3:
        raise ValueError(f"grid size must be at least 3, got {size}")
    rng = np.random.default_rng(seed)
    x = int(rng.integers(0, size - 2)) + 1
    y = int(rng.integers(0, size - 2)) + 1
    return x, y


def simulate(
    size: int = N,
    source_x: int | None = None,
    source_y: int | None = None,
    max_iterations: int = MAX_ITERATIONS,
    min_delta: float = MIN_DELTA,
    report: Optional[Callable[[int, float], None]] = None,
) -> HeatResult:
    """Run until the change drops to ``min_delta`` or the step limit is hit.

    ``report(iteration, delta)`` is called every ``max_iterations // 40`` steps.
    """
    if source_x is None or source_y is None:
        rx, ry = random_source(size)
        source_x = rx if source_x is None else source_x
        source_y = ry if source_y is None else source_y
    current = init_grid(size, source_x, source_y)
    interval = max(1, max_iterations // 40)

    delta = SOURCE_TEMP
    iterations = 0
    while iterations < max_iterations and delta > min_delta:
        nxt = step(current, source_x, source_y)
        delta = max_diff(current, nxt)
        if report is not None and iterations % interval == 0:
            report(iterations, delta)
        current = nxt
        iterations += 1
    return HeatResult(grid=current, iterations=iterations, delta=float(delta))


def _write_png(grid: np.ndarray, path: str) -> None:
    maxval = max(SOURCE_TEMP, BOUNDARY_TEMP)
    scaled = np.clip(grid.astype(np.float64) / maxval, 0.0, 1.0) * 255.0
    write_image(path, np.rint(scaled).astype(np.uint8))


def main(argv=None) -> int:
    """Simulate heat diffusion from a random source and write the final grid."""
    parser = argparse.ArgumentParser(description="2-D heat diffusion")
    parser.add_argument("size", nargs="?", type=int, default=N, help="grid side length")
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    if args.size < 3:
        print(f"grid size must be at least 3, got {args.size}")
        return 1

    source_x, source_y = random_source(args.size)
    print("Heat source at (%u, %u)" % (source_x, source_y))

    start = time.perf_counter()
    result = simulate(
        args.size,
        source_x,
        source_y,
        report=lambda it, delta: print("%u: %f" % (it, delta)),
    )
    stop = time.perf_counter()
    print("Computing time %f s." % (stop - start))

    _write_png(result.grid, f"heat{result.iterations}.png")
    return 0


if __name__ == "__main__":
    sys.exit(main())