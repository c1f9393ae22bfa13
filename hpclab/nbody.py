"""All-pairs gravitational N-body simulation in single precision."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field

import numpy as np

from hpclab.timing import Timer

G = 6.674e-11
SOFTENING_SQUARED = 1e-3
DEFAULT_BODIES = 1000
DT = 0.01
N_ITERS = 100

_FIELDS = ("m", "x", "y", "z", "vx", "vy", "vz")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Bodies:
    """Masses, positions and velocities of a set of bodies, as float32 arrays."""

    m: np.ndarray
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray
    vx: np.ndarray = field(default=None)
    vy: np.ndarray = field(default=None)
    vz: np.ndarray = field(default=None)

    def __post_init__(self) -> None:
        self.m = np.array(self.m, dtype=np.float32).ravel()
        for name in _FIELDS[1:]:
            value = getattr(self, name)
            if value is None:
                value = np.zeros_like(self.m)
            value = np.array(value, dtype=np.float32).ravel()
            if value.shape != self.m.shape:
                raise ValueError(f"field {name!r} does not match the number of bodies")
            setattr(self, name, value)

    def __len__(self) -> int:
        return len(self.m)


def random_bodies(n: int, seed: int | None = 1) -> Bodies:
    """Create ``n`` bodies with every attribute uniform in [-1, 1)."""
    if n < 0:
        raise ValueError(f"number of bodies must be non-negative, got {n}")
    rng = np.random.default_rng(seed)
    values = {name: rng.uniform(-1.0, 1.0, n).astype(np.float32) for name in _FIELDS}
    return Bodies(**values)


def body_force(bodies: Bodies, dt: float) -> None:
    """Update velocities in place from the pairwise gravitational forces."""
    dt32 = np.float32(dt)
    x, y, z, m = bodies.x, bodies.y, bodies.z, bodies.m
    dx = x[np.newaxis, :] - x[:, np.newaxis]
    dy = y[np.newaxis, :] - y[:, np.newaxis]
    dz = z[np.newaxis, :] - z[:, np.newaxis]
    dist_sqr = ((dx * dx + dy * dy + dz * dz).astype(np.float64)
                + SOFTENING_SQUARED).astype(np.float32)
    inv_dist = np.float32(1.0) / np.sqrt(dist_sqr)
    inv_dist3 = inv_dist * inv_dist * inv_dist
    g_masses = (G * m.astype(np.float64)[np.newaxis, :]
                * m.astype(np.float64)[:, np.newaxis]).astype(np.float32)
    weight = g_masses * inv_dist3
    np.fill_diagonal(weight, 0.0)

    fx = (weight * dx).sum(axis=1, dtype=np.float32)
    fy = (weight * dy).sum(axis=1, dtype=np.float32)
    fz = (weight * dz).sum(axis=1, dtype=np.float32)

    with np.errstate(divide="ignore", invalid="ignore"):
        bodies.vx += dt32 * fx / m
        bodies.vy += dt32 * fy / m
        bodies.vz += dt32 * fz / m


def integrate(bodies: Bodies, dt: float) -> None:
    """Advance positions in place by one time step."""
    dt32 = np.float32(dt)
    bodies.x += bodies.vx * dt32
    bodies.y += bodies.vy * dt32
    bodies.z += bodies.vz * dt32


def solution_pos(bodies: Bodies) -> float:
    """Return the sum of the distances of all bodies from the origin."""
    dist = np.sqrt(bodies.x * bodies.x + bodies.y * bodies.y + bodies.z * bodies.z)
    return float(dist.astype(np.float64).sum())


def main(argv=None) -> int:
    """Run the simulation and report the interaction rate."""
    args = sys.argv[1:] if argv is None else list(argv)
    n_bodies = _atoi(args[0]) if args else DEFAULT_BODIES
    if n_bodies < 0:
        print(f"invalid number of bodies {n_bodies}")
        return 1

    bodies = random_bodies(n_bodies)
    with Timer() as timer:
        for _ in range(N_ITERS):
            body_force(bodies, DT)
            integrate(bodies, DT)

    seconds = timer.elapsed
    rate = 1e-6 * n_bodies * n_bodies / seconds if seconds > 0 else float("inf")
    print("%d Bodies with %d iterations: %0.3f Millions Interactions/second"
          % (n_bodies, N_ITERS, rate))
    print("pos=%e" % solution_pos(bodies))
    return 0


if __name__ == "__main__":
    sys.exit(main())