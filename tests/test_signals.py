"""
Tests for the continuous-time signal algebra
"""

import pytest
import sys
import os
import numpy as np

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dsp_mcp.signals import (
    ContinuousSignal,
    impulse,
    step,
    constant,
    complex_exponential,
    sine,
    cosine,
    triangle,
    square,
    hold,
    add,
    scale,
    modulate,
    sample
)
from dsp_mcp.analysis import DiscreteSignal


def test_impulse():
    signal = impulse()
    assert signal.evaluate(-4.0) == complex(0, 0)
    assert signal.evaluate(0.0) == complex(1, 0)
    assert signal.evaluate(42.0) == complex(0, 0)
    for n in range(-10, 11):
        assert signal.evaluate(n) == (1 if n == 0 else 0)


def test_step():
    signal = step()
    assert signal.evaluate(-0.001) == 0
    assert signal.evaluate(0.0) == 1
    assert signal.evaluate(3.5) == 1


def test_call_is_evaluate():
    signal = sine(2.0, 0.0)
    assert signal(0.1) == signal.evaluate(0.1)


def test_evaluation_is_repeatable():
    signal = modulate(add(sine(3.0, 0.2), square(2.0)), complex_exponential(5.0, 0.1))
    assert signal.evaluate(0.37) == signal.evaluate(0.37)


def test_complex_exponential_phase_convention():
    """Offset is halved before being added to t"""
    signal = complex_exponential(1.0, 0.5)
    expected = np.exp(1j * 2 * np.pi * (0.1 + 0.25))
    assert signal.evaluate(0.1) == pytest.approx(expected)
    assert abs(signal.evaluate(0.7)) == pytest.approx(1.0)


def test_sine_and_cosine():
    assert sine(1.0, 0.0).evaluate(0.25) == pytest.approx(1.0)
    assert cosine(1.0, 0.0).evaluate(0.0) == pytest.approx(1.0)
    # offset of 0.5 shifts t by 0.25
    assert sine(1.0, 0.5).evaluate(0.0) == pytest.approx(1.0)
    assert cosine(2.0, 0.0).evaluate(0.3).imag == 0.0


def test_triangle():
    signal = triangle(1.0)
    assert signal.evaluate(0.0) == pytest.approx(0.0)
    assert signal.evaluate(0.25) == pytest.approx(0.5)
    assert signal.evaluate(0.5) == pytest.approx(-1.0)
    # Remainder keeps the sign of the dividend for negative t
    assert signal.evaluate(-1.0) == pytest.approx(-2.0)


def test_square():
    signal = square(1.0)
    assert signal.evaluate(0.25) == 1
    assert signal.evaluate(0.75) == -1
    assert signal.evaluate(-0.75) == 1
    assert signal.evaluate(-0.25) == -1


def test_square_boundaries_resolve_to_minus_one():
    signal = square(1.0)
    assert signal.evaluate(0.0) == -1
    assert signal.evaluate(0.5) == -1
    assert signal.evaluate(-0.5) == -1
    assert signal.evaluate(1.0) == -1


def test_scale():
    signal = scale(impulse(), complex(5, 3))
    assert signal.evaluate(-4.0) == 0
    assert signal.evaluate(0.0) == complex(5, 3)
    assert signal.evaluate(42.0) == 0


def test_sum():
    signal = add(impulse(), step())
    assert signal.evaluate(-4.0) == 0
    assert signal.evaluate(0.0) == 2
    assert signal.evaluate(42.0) == 1
    assert signal.evaluate(0.001) == 1


def test_modulate():
    signal = modulate(step(), complex_exponential(1.0, 0.0))
    assert signal.evaluate(-0.5) == 0
    assert signal.evaluate(0.25) == pytest.approx(1j)


def test_combinators_leave_operands_untouched():
    base = sine(1.0, 0.0)
    before = base.evaluate(0.1)
    scale(base, 10)
    add(base, base)
    assert base.evaluate(0.1) == before


def test_operators():
    assert (impulse() + step()).evaluate(0.0) == 2
    assert (3 * step()).evaluate(1.0) == 3
    assert (step() * 2j).evaluate(1.0) == 2j
    assert (step() * impulse()).evaluate(0.0) == 1
    assert (-step()).evaluate(1.0) == -1
    with pytest.raises(TypeError):
        step() + 1


def test_constant():
    assert constant(2 + 1j).evaluate(-100.0) == 2 + 1j


def test_hold():
    x = DiscreteSignal.from_reals([1.0, 2.0, 3.0, 4.0])
    signal = hold(x)
    assert isinstance(signal, ContinuousSignal)
    assert signal.evaluate(0.0) == 1
    assert signal.evaluate(0.3) == 2
    assert signal.evaluate(0.99) == 4
    assert signal.evaluate(1.0) == 0
    assert signal.evaluate(-0.01) == 0


def test_sample():
    xs = sample(impulse(), -1.0, 2.0, 1.0)
    assert xs.tolist() == [0, 1, 0]
    assert xs.dtype == np.complex128


def test_sample_stops_strictly_before_end():
    xs = sample(step(), 0.0, 1.0, 0.25)
    assert len(xs) == 4
    xs = sample(step(), 0.0, 1.0, 0.3)
    assert len(xs) == 4


def test_sample_degenerate_range_is_empty():
    assert len(sample(step(), 1.0, 1.0, 0.1)) == 0
    assert len(sample(step(), 2.0, 1.0, 0.1)) == 0


@pytest.mark.parametrize("bad_step", [0.0, -1.0, float("nan"), float("inf")])
def test_sample_rejects_bad_step(bad_step):
    with pytest.raises(ValueError):
        sample(step(), 0.0, 1.0, bad_step)


@pytest.mark.parametrize("start, end", [
    (0.0, float("inf")),
    (float("-inf"), 1.0),
    (float("nan"), 1.0),
    (0.0, float("nan")),
])
def test_sample_rejects_non_finite_bounds(start, end):
    with pytest.raises(ValueError):
        sample(step(), start, end, 1.0)


if __name__ == "__main__":
    pytest.main([__file__])
