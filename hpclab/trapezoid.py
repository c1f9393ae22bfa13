"""Trapezoidal-rule integration of a fixed test function."""

from __future__ import annotations

import re
import sys

import numpy as np

from hpclab.timing import Timer

DEFAULT_TRAPEZOIDS = 10_000_000
LEFT = 0.0
RIGHT = 1.0

_CHUNK = 1 << 20
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def f(x):
    """Return ``1 / (1 + exp(x*x - 4x - 10) + sin(x / 3.14))``.

    Accepts a scalar or an array; a scalar gives a float back.
    """
    values = np.asarray(x, dtype=np.float64)
    result = 1.0 / (1.0 + np.exp(values * values - 4 * values - 10.0) + np.sin(values / 3.14))
    if result.ndim == 0:
        return float(result)
    return result


def trap(a: float, b: float, n: int, h: float) -> float:
    """Estimate the integral of ``f`` from ``a`` with ``n`` trapezoids of width ``h``.

    ``b`` is the right end point; the trapezoids are laid out from ``a``
    using ``h``, so ``h`` is normally ``(b - a) / n``.
    """
    integral = 0.0
    for start in range(1, n + 1, _CHUNK):
        k = np.arange(start, min(start + _CHUNK, n + 1), dtype=np.float64)
        area = h * (f(a + k * h) + f(a + (k - 1) * h)) / 2.0
        integral += float(area.sum())
    return integral


def main(argv=None) -> int:
    """Integrate ``f`` over [0, 1] and report the result and the time taken."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("./exec num_traps")
        return 1
    n = _atoi(args[0]) if args else DEFAULT_TRAPEZOIDS
    if n <= 0:
        print(f"number of trapezoids must be positive, got {n}")
        return 1

    h = (RIGHT - LEFT) / n
    with Timer() as timer:
        integral = trap(LEFT, RIGHT, n, h)

    print("With n = %d trapezoids" % n)
    print("Integral from %f to %f = %.15f" % (LEFT, RIGHT, integral))
    print("Computed in %f s." % timer.elapsed)
    return 0


if __name__ == "__main__":
    sys.exit(main())