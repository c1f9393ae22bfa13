"""Command that prices a random batch of options in two ways and times each."""

from __future__ import annotations

import re
import sys

import numpy as np

from hpclab.black_scholes import (
    RISK_FREE,
    VOLATILITY,
    black_scholes,
    black_scholes_blocked,
    generate_options,
)
from hpclab.timing import Timer

DEFAULT_NOPT = 4 * 1024 * 1024

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _scan_int(text: str) -> int | None:
    """Read a leading decimal integer, or return None if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def mean_prices(call, put) -> tuple[float, float]:
    """Return the mean call and put prices; an empty batch gives zeros."""
    call = np.asarray(call, dtype=float)
    put = np.asarray(put, dtype=float)
    if call.size == 0:
        return 0.0, 0.0
    return float(call.mean()), float(put.mean())


def _report(label: str, nopt: int, call, put, seconds: float) -> None:
    calls, puts = mean_prices(call, put)
    print("call_%s[0:%d]= %g" % (label, nopt, calls))
    print("put_%s[0:%d]= %g" % (label, nopt, puts))
    print("Time %s: %f sec." % (label, seconds))


def main(argv=None) -> int:
    """Price ``nopt`` options directly and block by block, then report."""
    args = sys.argv[1:] if argv is None else list(argv)
    nopt = DEFAULT_NOPT
    if not args:
        print(f"Usage: expect nopt input integer parameter, defaulting to {nopt}")
    else:
        parsed = _scan_int(args[0])
        if parsed is not None:
            nopt = parsed

    try:
        batch = generate_options(nopt)
    except ValueError:
        print("Memory allocation failure")
        return 1

    with Timer() as direct:
        call_direct, put_direct = black_scholes(
            batch.s0, batch.x, batch.t, RISK_FREE, VOLATILITY
        )
    with Timer() as blocked:
        call_blocked, put_blocked = black_scholes_blocked(
            batch.s0, batch.x, batch.t, RISK_FREE, VOLATILITY
        )

    _report("direct", nopt, call_direct, put_direct, direct.elapsed)
    print()
    _report("blocked", nopt, call_blocked, put_blocked, blocked.elapsed)
    return 0


if __name__ == "__main__":
    sys.exit(main())