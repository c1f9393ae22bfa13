# hpclab

Small numerical kernels and the benchmark commands that drive them. Each
kernel is a plain function over NumPy arrays. You can call it from Python
or time it through one of the bundled commands.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

Python 3.10 or newer is required. The package depends on NumPy and Pillow.

## Modules

- `hpclab.timing`: `wall_time()` returns the wall-clock time in seconds.
  `Timer` is a context manager. It records `start` and `stop` and reports
  `elapsed`.
- `hpclab.black_scholes`: Black-Scholes prices of European calls and puts.
  - `generate_options(nopt, seed=7777777)` returns an `OptionBatch` with `s0`, `x`
    and `t` arrays. Spot and strike are uniform in [10, 50] and maturity is
    uniform in [1, 2].
  - `black_scholes(s0, x, t, r=0.1, sig=0.2)` returns `(call, put)`.
  - `black_scholes_blocked(..., block_size=1024)` gives the same prices,
    computed block by block.
- `hpclab.stencil`: `apply_stencil(image)` applies a 3x3 edge-detection
  stencil to a 2-D image. Each interior pixel becomes eight times itself
  minus its eight neighbours. Results are clamped to 0..255 and the border
  is zero.
- `hpclab.pngio`: `read_image(path)` reads an 8-bit grayscale PNG into a
  `(height, width)` uint8 array. It raises `ValueError` for non-PNG or
  non-grayscale files. `write_image(path, pixels)` writes a 2-D array as a
  grayscale PNG, clamped to 0..255.
- `hpclab.compiler_opt`:
  - `shifted_sine(theta)` computes `sin(theta + 3.1415927)` in single
    precision.
  - `reduction(values)` sums in order with float32 accumulation.
  - `random_angles(n, seed)` draws angles in [-0.5, 0.499].
- `hpclab.nbody`: all-pairs gravitational simulation in float32 with
  softening.
  - `Bodies` holds the masses, positions and velocities.
  - `random_bodies(n, seed)` creates bodies.
  - `body_force(bodies, dt)` and `integrate(bodies, dt)` update the bodies
    in place.
  - `solution_pos(bodies)` sums the distances of the bodies from the origin.
- `hpclab.trapezoid`: `f(x)` is the test function
  `1 / (1 + exp(x*x - 4x - 10) + sin(x / 3.14))`.
  `trap(a, b, n, h)` applies the trapezoidal rule with `n` trapezoids of
  width `h`, laid out from `a`.
- `hpclab.heat`: explicit 2-D heat diffusion on a square grid with a fixed
  100° source, 25° interior and 5° border.
  - `init_grid`, `step`, `max_diff` and `random_source` are the individual
    steps.
  - `simulate(size, source_x, source_y, max_iterations, min_delta, report)`
    iterates until the largest change is at most `min_delta` or
    `max_iterations` is reached. It returns a `HeatResult`.
- `hpclab.electric_potential`: Coulomb potential of point charges.
  - `ChargeDistribution` holds the charges. `random_charges(m, seed)` and
    `rng_number(...)` generate them.
  - `electric_potential(charges, rx, ry, rz, precision)` gives the
    potential at one point.
  - `potential_grid(charges, n, precision)` gives the potential on an
    `n` x `n` grid at z = 0.
  - `precision` is `"single"` or `"double"`.
  - `summarize_trials(times, skip_trials, work)` gives the mean and standard
    deviation of the throughput.

```python
from hpclab.black_scholes import generate_options, black_scholes
from hpclab.trapezoid import trap
from hpclab.timing import Timer

options = generate_options(1024)
call, put = black_scholes(options.s0, options.x, options.t)

with Timer() as timer:
    area = trap(0.0, 1.0, 1000, 1.0 / 1000)
print(area, timer.elapsed)
```

```python
from hpclab.pngio import read_image, write_image
from hpclab.stencil import apply_stencil

write_image("edges.png", apply_stencil(read_image("input.png")))
```

## Commands

| Command | What it does |
| --- | --- |
| `hpclab-black-scholes [nopt]` | Prices `nopt` random options (default 4194304) directly and block by block. Prints mean call and put prices and the time of each. |
| `hpclab-edge IMAGE.png` | Applies the stencil twice, feeding each result back in. Prints time, GB/s and GFLOP/s per trial, with the first trial marked as warm-up. Writes `test_out.png`. |
| `hpclab-compiler-opt N` | Evaluates the shifted sine over `N` random angles. Prints the time and the reduction. |
| `hpclab-nbody [n]` | Simulates `n` bodies (default 1000) for 100 steps. Prints millions of interactions per second and the position checksum. |
| `hpclab-trapezoid [n]` | Integrates `f` over [0, 1] with `n` trapezoids (default 10000000). |
| `hpclab-heat [size]` | Runs heat diffusion on a `size` x `size` grid (default 2048) from a seeded random source. Reports the change every 50 steps. Writes `heat<iterations>.png`. |
| `hpclab-electric-potential` | Computes the potential grid for several trials and reports GFLOP/s. Options: `--size`, `--charges`, `--trials`, `--skip`, `--precision`, `--seed`. |

Examples:

```
hpclab-black-scholes 1048576
hpclab-nbody 2000
hpclab-trapezoid 1000000
hpclab-heat 256
hpclab-electric-potential --size 128 --charges 256 --precision double
```

## What it does not do

- The kernels run on NumPy in a single process. There is no multithreaded
  or GPU execution.
- The heat command writes its result as a grayscale image, scaled from 0 to
  100°. It has no colour map.
- PNG input must be 8-bit, one-channel (grayscale or palette). Colour
  images are rejected.