"""Input signals and their derivatives sampled on a uniform time grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

PI = 3.14159265

_GAUSS_SPREAD = 0.0005


@dataclass(frozen=True)
class InputSignal:
    """Sampled input u(t) with its first three derivatives."""

    u: tuple[float, ...]
    u1p: tuple[float, ...] = ()
    u2p: tuple[float, ...] = ()
    u3p: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        count = len(self.u)
        object.__setattr__(self, "u", tuple(float(v) for v in self.u))
        for name in ("u1p", "u2p", "u3p"):
            values: Sequence[float] = getattr(self, name)
            if not values:
                values = (0.0,) * count
            if len(values) != count:
                raise ValueError(f"{name} has {len(values)} samples, expected {count}")
            object.__setattr__(self, name, tuple(float(v) for v in values))

    def __len__(self) -> int:
        return len(self.u)


def sample_count(duration: float, step: float) -> int:
    """Number of samples covering [0, duration] with the given step."""
    if step <= 0:
        raise ValueError("step must be positive")
    if duration < 0:
        raise ValueError("duration must not be negative")
    return int(duration / step) + 1


def step_input(count: int) -> InputSignal:
    """Unit step with all derivatives equal to zero."""
    return InputSignal(u=(1.0,) * count)


def sine_input(count: int, step: float, amplitude: float, frequency: float) -> InputSignal:
    """Sine amplitude*sin(frequency*t) with its analytic derivatives."""
    times = [i * step for i in range(count)]
    sines = [math.sin(frequency * t) for t in times]
    cosines = [math.cos(frequency * t) for t in times]
    return InputSignal(
        u=tuple(amplitude * s for s in sines),
        u1p=tuple(amplitude * frequency * c for c in cosines),
        u2p=tuple(-amplitude * frequency**2 * s for s in sines),
        u3p=tuple(-amplitude * frequency**3 * c for c in cosines),
    )


def gaussian_step_input(count: int) -> InputSignal:
    """Unit step whose first derivative is a Gaussian pulse at the start."""
    scale = 1.0 / math.sqrt(2.0 * PI * _GAUSS_SPREAD)
    return InputSignal(
        u=(1.0,) * count,
        u1p=tuple(scale * math.exp(-(i * i) / 2.0 * _GAUSS_SPREAD) for i in range(count)),
    )


def angular_frequency(periods: float, duration: float) -> float:
    """Angular frequency giving the number of sine periods over the duration."""
    if duration == 0:
        raise ValueError("duration must not be zero")
    return 2.0 * PI * periods / duration