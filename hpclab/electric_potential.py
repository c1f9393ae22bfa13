"""Electric potential of a set of point charges on a grid of observation points."""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass
from enum import Enum

import numpy as np

DEFAULT_SIZE = 1 << 10
DEFAULT_CHARGES = 1 << 10
N_TRIALS = 10
SKIP_TRIALS = 2
COORD_MIN = -5.0
COORD_MAX = 5.0
RNG_PRECISION = 1000.0

_RULE = "-----------------------------------------------------"


class Precision(str, Enum):
    """Floating-point precision of the distance computation."""

    SINGLE = "single"
    DOUBLE = "double"

    @property
    def dtype(self):
        return np.float32 if self is Precision.SINGLE else np.float64


@dataclass
class ChargeDistribution:
    """Coordinates and values of point charges, as float32 arrays."""

    x: np.ndarray
    y: np.ndarray
    z: np.ndarray
    q: np.ndarray

    def __post_init__(self) -> None:
        self.x = np.array(self.x, dtype=np.float32).ravel()
        for name in ("y", "z", "q"):
            value = np.array(getattr(self, name), dtype=np.float32).ravel()
            if value.shape != self.x.shape:
                raise ValueError(f"field {name!r} does not match the number of charges")
            setattr(self, name, value)

    def __len__(self) -> int:
        return len(self.x)


def _irange(min_v: float, max_v: float, precision: float) -> int:
    irange = int(np.float32((max_v - min_v) * precision))
    if irange <= 0:
        raise ValueError("the range times the precision must be at least 1")
    return irange


def _draw(min_v, max_v, precision, rng, size):
    ints = rng.integers(0, _irange(min_v, max_v, precision), size=size)
    return (ints / np.float32(precision) + np.float32(min_v)).astype(np.float32)


def rng_number(min_v: float, max_v: float, precision: float, rng=None) -> float:
    """Draw a value from [min_v, max_v) on a grid of step ``1 / precision``."""
    if rng is None:
        rng = np.random.default_rng()
    return float(_draw(min_v, max_v, precision, rng, None))


def random_charges(m: int, seed: int | None = 1) -> ChargeDistribution:
    """Create ``m`` charges with coordinates and values in [-5, 5)."""
    if m < 0:
        raise ValueError(f"number of charges must be non-negative, got {m}")
    rng = np.random.default_rng(seed)
    values = _draw(COORD_MIN, COORD_MAX, RNG_PRECISION, rng, (m, 4))
    return ChargeDistribution(x=values[:, 0], y=values[:, 1], z=values[:, 2], q=values[:, 3])


def electric_potential(charges: ChargeDistribution, rx: float, ry: float, rz: float,
                       precision: str = Precision.SINGLE) -> float:
    """Return the potential at ``(rx, ry, rz)`` by Coulomb's law, as float32."""
    dtype = Precision(precision).dtype
    dx = charges.x.astype(dtype) - dtype(rx)
    dy = charges.y.astype(dtype) - dtype(ry)
    dz = charges.z.astype(dtype) - dtype(rz)
    with np.errstate(divide="ignore"):
        terms = charges.q.astype(dtype) / np.sqrt(dx * dx + dy * dy + dz * dz)
    return float(np.float32(-terms.sum(dtype=dtype)))


def potential_grid(charges: ChargeDistribution, n: int,
                   precision: str = Precision.SINGLE) -> np.ndarray:
    """Return an ``(n, n)`` float32 array; element ``[ry, rx]`` is the potential at z = 0."""
    if n < 0:
        raise ValueError(f"grid size must be non-negative, got {n}")
    dtype = Precision(precision).dtype
    x = charges.x.astype(dtype)
    y = charges.y.astype(dtype)
    z = charges.z.astype(dtype)
    q = charges.q.astype(dtype)
    xs = np.arange(n, dtype=dtype)
    dx = x[np.newaxis, :] - xs[:, np.newaxis]
    dx2 = dx * dx
    dz2 = z * z
    out = np.empty((n, n), dtype=np.float32)
    with np.errstate(divide="ignore"):
        for ry in range(n):
            dy = y - dtype(ry)
            terms = q / np.sqrt(dx2 + (dy * dy + dz2)[np.newaxis, :])
            out[ry] = -terms.sum(axis=1, dtype=dtype)
    return out


def summarize_trials(times, skip_trials: int, work: float) -> tuple[float, float]:
    """Return mean and standard deviation of ``work / time`` over the counted trials."""
    counted = list(times)[skip_trials:]
    if not counted:
        raise ValueError("no trials left after skipping the warm-up trials")
    if any(t <= 0 for t in counted):
        raise ValueError("trial times must be positive")
    rates = [work / t for t in counted]
    perf = sum(rates) / len(rates)
    mean_sq = sum(r * r for r in rates) / len(rates)
    return perf, math.sqrt(max(0.0, mean_sq - perf * perf))


def _rate(work: float, seconds: float) -> float:
    return work / seconds if seconds > 0 else float("inf")


def main(argv=None) -> int:
    """Time the potential over an ``n`` by ``n`` grid for several trials."""
    parser = argparse.ArgumentParser(description="electric potential benchmark")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--charges", type=int, default=DEFAULT_CHARGES)
    parser.add_argument("--trials", type=int, default=N_TRIALS)
    parser.add_argument("--skip", type=int, default=SKIP_TRIALS)
    parser.add_argument("--precision", choices=[p.value for p in Precision],
                        default=Precision.SINGLE.value)
    parser.add_argument("--seed", type=int, default=1)
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.trials <= args.skip:
        print("the number of trials must exceed the warm-up trials")
        return 1
    if args.size < 0 or args.charges < 0:
        print("sizes must be non-negative")
        return 1

    print("Initialization...", end="")
    charges = random_charges(args.charges, args.seed)
    print(" complete.")

    print("\033[1m%5s %10s %8s\033[0m" % ("Trial", "Time, s", "GFLOP/s"))
    work = 10.0 * 1e-9 * float(args.size * args.size) * float(args.charges)
    times = []
    for trial in range(1, args.trials + 1):
        t0 = time.perf_counter()
        potential_grid(charges, args.size, args.precision)
        elapsed = time.perf_counter() - t0
        times.append(elapsed)
        print("%5d %10.3e %8.1f %s" % (trial, elapsed, _rate(work, elapsed),
                                       "*" if trial <= args.skip else ""), flush=True)

    try:
        perf, dperf = summarize_trials(times, args.skip, work)
    except ValueError as exc:
        print(exc)
        return 1
    print(_RULE)
    print("\033[1m%s %4s \033[42m%10.1f +- %.1f GFLOP/s\033[0m"
          % ("Average performance:", "", perf, dperf))
    print(_RULE)
    print("* - warm-up, not included in average\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())