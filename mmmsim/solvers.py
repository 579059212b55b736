"""Numerical integration of the model responses to sampled inputs."""

from __future__ import annotations

import math
from typing import Sequence

from mmmsim.models import FourthOrderSystem, ThirdOrderSystem
from mmmsim.signals import InputSignal


def _check_step(step: float) -> None:
    if step <= 0:
        raise ValueError("step must be positive")


def _shift(state: Sequence[float], slope: Sequence[float], scale: float) -> tuple[float, ...]:
    return tuple(s + scale * k for s, k in zip(state, slope))


def simulate_rk4(system: ThirdOrderSystem, signal: InputSignal, step: float) -> list[float]:
    """Output of a third-order system integrated with the classical Runge-Kutta method."""
    _check_step(step)
    state: tuple[float, ...] = (0.0, 0.0, 0.0)
    output = []
    for u, u1p in zip(signal.u, signal.u1p):
        output.append(state[0])
        k1 = system.derivatives(state, u, u1p)
        k2 = system.derivatives(_shift(state, k1, 0.5 * step), u, u1p)
        k3 = system.derivatives(_shift(state, k2, 0.5 * step), u, u1p)
        k4 = system.derivatives(_shift(state, k3, step), u, u1p)
        state = tuple(
            s + (step / 6.0) * (a + 2.0 * b + 2.0 * c + d)
            for s, a, b, c, d in zip(state, k1, k2, k3, k4)
        )
    return output


def simulate_taylor3(system: ThirdOrderSystem, signal: InputSignal, step: float) -> list[float]:
    """Output of a third-order system integrated with a third-order Taylor expansion.

    A non-finite output sample is replaced by the last finite one.
    """
    _check_step(step)
    if len(signal) == 0:
        return []
    norm = system.normalized()
    h2 = step * step / 2.0
    h3 = step * step * step / 6.0
    y, y1p, y2p = 0.0, 0.0, 0.0
    output = [y]
    for u, u1p in zip(signal.u[:-1], signal.u1p[:-1]):
        y3p = -norm.a2 * y2p - norm.a1 * y1p - norm.a0 * y + norm.b1 * u1p + norm.b0 * u
        next_y = y + step * y1p + h2 * y2p + h3 * y3p
        y1p, y2p = y1p + step * y2p + h2 * y3p, y2p + step * y3p
        if math.isfinite(next_y):
            y = next_y
        output.append(y)
    return output


def simulate_taylor4(system: FourthOrderSystem, signal: InputSignal, step: float) -> list[float]:
    """Output of a fourth-order system integrated with a fourth-order Taylor expansion."""
    _check_step(step)
    if len(signal) == 0:
        return []
    h2 = step**2 / 2.0
    h3 = step**3 / 6.0
    h4 = step**4 / 24.0
    y = y1p = y2p = y3p = 0.0
    output = [y]
    inputs = zip(signal.u[:-1], signal.u1p[:-1], signal.u2p[:-1], signal.u3p[:-1])
    for u, u1p, u2p, u3p in inputs:
        y4p = system.highest_derivative(y, y1p, y2p, y3p, u, u1p, u2p, u3p)
        y, y1p, y2p, y3p = (
            y + step * y1p + h2 * y2p + h3 * y3p + h4 * y4p,
            y1p + step * y2p + h2 * y3p + h3 * y4p,
            y2p + step * y3p + h2 * y4p,
            y3p + step * y4p,
        )
        output.append(y)
    return output