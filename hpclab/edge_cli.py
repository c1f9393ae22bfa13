"""Command that runs edge detection on a PNG and reports its throughput."""

from __future__ import annotations

import sys

from hpclab.pngio import read_image, write_image
from hpclab.stencil import apply_stencil
from hpclab.timing import Timer

N_TRIALS = 2
SKIP_TRIALS = 1
OUTPUT_FILE = "test_out.png"


def _rate(amount: float, seconds: float) -> float:
    return amount / seconds if seconds > 0 else float("inf")


def main(argv=None) -> int:
    """Apply the stencil repeatedly to the image named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "hpclab-edge"
        print(f"Usage: {prog} {{file}}")
        return 1

    path = args[0]
    try:
        image = read_image(path)
    except FileNotFoundError:
        print(f"Could not open {path}")
        return 1
    except (OSError, ValueError) as exc:
        print(exc)
        return 1

    height, width = image.shape
    print("\n\033[1mEdge detection with a 3x3 stencil\033[0m")
    print(f"\nImage size: {width} x {height}\n")
    print("\033[1m%5s %15s %15s %15s\033[0m" % ("Step", "Time, ms", "GB/s", "GFLOP/s"),
          flush=True)

    current = image
    result = image
    for trial in range(1, N_TRIALS + 1):
        with Timer() as timer:
            result = apply_stencil(current)
        seconds = timer.elapsed
        gbps = _rate(width * height * 2 * 1e-9, seconds)
        gflops = _rate(width * height * 2 * 9 * 1e-9, seconds)
        marker = "*" if trial <= SKIP_TRIALS else ""
        print("%5d %15.3f %15.3f %15.3f %s" % (trial, seconds * 1e3, gbps, gflops, marker),
              flush=True)
        current = result

    write_image(OUTPUT_FILE, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())