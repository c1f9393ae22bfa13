import pytest

from hpclab.black_scholes import black_scholes, generate_options
from hpclab.black_scholes_cli import main, mean_prices


def test_mean_of_constant_prices():
    assert mean_prices([3.0] * 4, [1.5] * 4) == (3.0, 1.5)


def test_mean_of_empty_batch_is_zero():
    assert mean_prices([], []) == (0.0, 0.0)


def test_main_reports_means(capsys):
    assert main(["16"]) == 0
    out = capsys.readouterr().out
    batch = generate_options(16)
    call, put = black_scholes(batch.s0, batch.x, batch.t)
    calls, puts = mean_prices(call, put)
    assert "call_direct[0:16]= %g" % calls in out
    assert "put_direct[0:16]= %g" % puts in out
    assert "call_blocked[0:16]= %g" % calls in out
    assert "Time blocked:" in out


def test_main_with_zero_options(capsys):
    assert main(["0"]) == 0
    out = capsys.readouterr().out
    assert "call_direct[0:0]= 0" in out


def test_main_negative_count_fails(capsys):
    assert main(["-3"]) == 1
    assert "Memory allocation failure" in capsys.readouterr().out


@pytest.mark.parametrize("arg", ["8abc", " 8"])
def test_main_reads_leading_integer(arg, capsys):
    assert main([arg]) == 0
    assert "call_direct[0:8]=" in capsys.readouterr().out