import numpy as np
import pytest

from hpclab.black_scholes import (
    RISK_FREE,
    S0H,
    S0L,
    TH,
    TL,
    VOLATILITY,
    XH,
    XL,
    OptionBatch,
    black_scholes,
    black_scholes_blocked,
    generate_options,
)


def test_generate_options_length_and_ranges():
    batch = generate_options(500)
    assert len(batch) == 500
    assert np.all((batch.s0 >= S0L) & (batch.s0 <= S0H))
    assert np.all((batch.x >= XL) & (batch.x <= XH))
    assert np.all((batch.t >= TL) & (batch.t <= TH))


def test_generate_options_deterministic_for_seed():
    first = generate_options(50, seed=3)
    second = generate_options(50, seed=3)
    assert np.array_equal(first.s0, second.s0)
    assert np.array_equal(first.x, second.x)
    assert np.array_equal(first.t, second.t)


def test_generate_options_rejects_negative_count():
    with pytest.raises(ValueError):
        generate_options(-1)


def test_known_reference_price():
    call, put = black_scholes([100.0], [100.0], [1.0], 0.05, 0.2)
    assert call[0] == pytest.approx(10.4506, abs=1e-4)
    assert put[0] == pytest.approx(5.5735, abs=1e-4)


def test_put_call_parity():
    batch = generate_options(1000)
    call, put = black_scholes(batch.s0, batch.x, batch.t, RISK_FREE, VOLATILITY)
    parity = batch.s0 - batch.x * np.exp(-RISK_FREE * batch.t)
    assert np.allclose(call - put, parity)


def test_prices_respect_no_arbitrage_bounds():
    batch = generate_options(1000)
    call, put = black_scholes(batch.s0, batch.x, batch.t, RISK_FREE, VOLATILITY)
    assert call.shape == (1000,)
    assert put.shape == (1000,)
    discounted = batch.x * np.exp(-RISK_FREE * batch.t)
    lower_call = np.maximum(batch.s0 - discounted, 0.0)
    assert float((call - lower_call).min()) >= -1e-9
    assert float((batch.s0 - call).min()) >= -1e-9
    assert float(put.min()) >= -1e-9
    assert float((discounted - put).min()) >= -1e-9


@pytest.mark.parametrize("block_size", [1, 7, 1024, 5000])
def test_blocked_matches_plain(block_size):
    batch = generate_options(2500)
    plain_call, plain_put = black_scholes(batch.s0, batch.x, batch.t, RISK_FREE, VOLATILITY)
    call, put = black_scholes_blocked(
        batch.s0, batch.x, batch.t, RISK_FREE, VOLATILITY, block_size
    )
    assert np.allclose(call, plain_call)
    assert np.allclose(put, plain_put)


def test_call_increases_with_spot():
    spots = np.linspace(20.0, 40.0, 11)
    call, _ = black_scholes(spots, np.full(11, 30.0), np.full(11, 1.5), RISK_FREE, VOLATILITY)
    assert np.all(np.diff(call) > 0)


def test_option_batch_len():
    batch = OptionBatch(s0=np.ones(4), x=np.ones(4), t=np.ones(4))
    assert len(batch) == 4


def test_mismatched_shapes_raise():
    with pytest.raises(ValueError):
        black_scholes([10.0, 20.0], [10.0], [1.0, 1.0], RISK_FREE, VOLATILITY)


def test_blocked_rejects_nonpositive_block():
    with pytest.raises(ValueError):
        black_scholes_blocked([10.0], [10.0], [1.0], RISK_FREE, VOLATILITY, 0)


def test_blocked_empty_input():
    call, put = black_scholes_blocked([], [], [], RISK_FREE, VOLATILITY, 16)
    assert call.shape == (0,)
    assert put.shape == (0,)