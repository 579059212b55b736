import math

import pytest

from mmmsim.signals import (
    PI,
    InputSignal,
    angular_frequency,
    gaussian_step_input,
    sample_count,
    sine_input,
    step_input,
)


def test_sample_count_default_grid():
    assert sample_count(50.0, 0.001) == 50001


def test_sample_count_rejects_bad_step():
    with pytest.raises(ValueError):
        sample_count(1.0, 0.0)
    with pytest.raises(ValueError):
        sample_count(-1.0, 0.1)


def test_step_input_values():
    signal = step_input(5)
    assert len(signal) == 5
    assert signal.u == (1.0,) * 5
    assert signal.u1p == (0.0,) * 5
    assert signal.u3p == (0.0,) * 5


def test_input_signal_length_mismatch():
    with pytest.raises(ValueError):
        InputSignal(u=(1.0, 1.0), u1p=(0.0,))


def test_sine_input_derivative_relations():
    w = angular_frequency(5.0, 50.0)
    signal = sine_input(200, 0.01, 8.0, w)
    assert signal.u[0] == 0.0
    assert signal.u1p[0] == pytest.approx(8.0 * w)
    for u, u1, u2, u3 in zip(signal.u, signal.u1p, signal.u2p, signal.u3p):
        assert u2 == pytest.approx(-w * w * u, abs=1e-12)
        assert u3 == pytest.approx(-w * w * u1, abs=1e-12)


def test_angular_frequency_one_period():
    assert angular_frequency(1.0, 1.0) == pytest.approx(2.0 * PI)
    with pytest.raises(ValueError):
        angular_frequency(1.0, 0.0)


def test_gaussian_step_input_shape():
    signal = gaussian_step_input(1000)
    assert all(v == 1.0 for v in signal.u)
    assert signal.u1p[0] > 0
    assert all(a >= b for a, b in zip(signal.u1p, signal.u1p[1:]))
    assert math.isfinite(signal.u1p[-1])