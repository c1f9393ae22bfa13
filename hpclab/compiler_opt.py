"""Shifted sine over random angles, with a single-precision reduction."""

from __future__ import annotations

import re
import sys

import numpy as np

from hpclab.timing import Timer

SHIFT = 3.1415927

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def shifted_sine(theta) -> np.ndarray:
    """Return ``sin(theta + 3.1415927)`` as single-precision values."""
    angles = np.asarray(theta, dtype=np.float32).astype(np.float64)
    return np.sin(angles + SHIFT).astype(np.float32)


def reduction(values) -> float:
    """Sum values in order with single-precision accumulation."""
    data = np.asarray(values, dtype=np.float32).ravel()
    if data.size == 0:
        return 0.0
    return float(np.cumsum(data, dtype=np.float32)[-1])


def random_angles(n: int, seed: int | None = None) -> np.ndarray:
    """Draw ``n`` angles from the thousandths in [-0.5, 0.499]."""
    if n < 0:
        raise ValueError(f"number of angles must be non-negative, got {n}")
    rng = np.random.default_rng(seed)
    ints = rng.integers(0, 1000, size=n)
    return ((ints - 500) / 1000).astype(np.float32)


def main(argv=None) -> int:
    """Time the shifted sine over ``n`` random angles."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("./exec n")
        return 1
    n = _atoi(args[0])
    if n < 0:
        print(f"invalid size {n}")
        return 1

    theta = random_angles(n)
    with Timer() as timer:
        sth = shifted_sine(theta)
    print("Time %f s red=%f" % (timer.elapsed, reduction(sth)))
    return 0


if __name__ == "__main__":
    sys.exit(main())