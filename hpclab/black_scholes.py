"""Black-Scholes pricing of European call and put options."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

SEED = 7777777

S0L = 10.0
S0H = 50.0
XL = 10.0
XH = 50.0
TL = 1.0
TH = 2.0

RISK_FREE = 0.1
VOLATILITY = 0.2

DEFAULT_BLOCK_SIZE = 1024

_erf = np.vectorize(math.erf, otypes=[float])


@dataclass
class OptionBatch:
    """Input parameters of a batch of options: spot, strike and maturity."""

    s0: np.ndarray
    x: np.ndarray
    t: np.ndarray

    def __len__(self) -> int:
        return len(self.s0)


def generate_options(nopt: int, seed: int = SEED) -> OptionBatch:
    """Draw ``nopt`` options with uniformly distributed parameters."""
    if nopt < 0:
        raise ValueError(f"number of options must be non-negative, got {nopt}")
    rng = np.random.default_rng(seed)
    s0 = rng.uniform(S0L, S0H, nopt)
    x = rng.uniform(XL, XH, nopt)
    t = rng.uniform(TL, TH, nopt)
    return OptionBatch(s0=s0, x=x, t=t)


def _as_inputs(s0, x, t) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    arrays = tuple(np.asarray(v, dtype=float) for v in (s0, x, t))
    if not arrays[0].shape == arrays[1].shape == arrays[2].shape:
        raise ValueError("s0, x and t must have the same shape")
    return arrays


def _price(s0: np.ndarray, x: np.ndarray, t: np.ndarray, r: float, sig: float):
    mr = -r
    sig_sig_two = sig * sig * 2.0

    a = np.log(s0 / x)
    b = t * mr
    z = t * sig_sig_two
    c = 0.25 * z
    e = np.exp(b)
    y = 1.0 / np.sqrt(z)

    w1 = (a - b + c) * y
    w2 = (a - b - c) * y
    d1 = 0.5 + 0.5 * _erf(w1)
    d2 = 0.5 + 0.5 * _erf(w2)

    call = s0 * d1 - x * e * d2
    put = call - s0 + x * e
    return call, put


def black_scholes(s0, x, t, r: float = RISK_FREE, sig: float = VOLATILITY):
    """Return ``(call, put)`` price arrays for the given options."""
    s0, x, t = _as_inputs(s0, x, t)
    return _price(s0, x, t, r, sig)


def black_scholes_blocked(
    s0,
    x,
    t,
    r: float = RISK_FREE,
    sig: float = VOLATILITY,
    block_size: int = DEFAULT_BLOCK_SIZE,
):
    """Price the options block by block; the last block may be shorter."""
    if block_size <= 0:
        raise ValueError(f"block size must be positive, got {block_size}")
    s0, x, t = _as_inputs(s0, x, t)
    s0, x, t = s0.ravel(), x.ravel(), t.ravel()
    call = np.zeros_like(s0)
    put = np.zeros_like(s0)
    for start in range(0, len(s0), block_size):
        block = slice(start, start + block_size)
        call[block], put[block] = _price(s0[block], x[block], t[block], r, sig)
    return call, put