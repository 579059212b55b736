"""Linear dynamic system models described by their differential equations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class ThirdOrderSystem:
    """System a3*y''' + a2*y'' + a1*y' + a0*y = b1*u' + b0*u."""

    a3: float
    a2: float
    a1: float
    a0: float
    b1: float
    b0: float

    @classmethod
    def from_time_constants(cls, t1, t2, k1, k2) -> "ThirdOrderSystem":
        """Build the system from time constants T1, T2 and gains k1, k2."""
        gain = k1 * k2
        return cls(
            a3=t1 * t2,
            a2=float(t1),
            a1=t1 * gain,
            a0=float(gain),
            b1=t1 * gain,
            b0=float(gain),
        )

    def _require_leading(self) -> None:
        if self.a3 == 0:
            raise ValueError("leading coefficient a3 must not be zero")

    def derivatives(self, state: Sequence[float], u: float, u1p: float) -> tuple[float, float, float]:
        """Time derivative of the state (y, y', y'') for input u and its derivative u1p."""
        self._require_leading()
        y0, y1, y2 = state
        y3 = (1.0 / self.a3) * (
            -self.a2 * y2 - self.a1 * y1 - self.a0 * y0 + self.b1 * u1p + self.b0 * u
        )
        return (y1, y2, y3)

    def normalized(self) -> "ThirdOrderSystem":
        """Equivalent system with the leading coefficient scaled to one."""
        self._require_leading()
        return ThirdOrderSystem(
            a3=1.0,
            a2=self.a2 / self.a3,
            a1=self.a1 / self.a3,
            a0=self.a0 / self.a3,
            b1=self.b1 / self.a3,
            b0=self.b0 / self.a3,
        )


@dataclass(frozen=True)
class FourthOrderSystem:
    """System y'''' + a3*y''' + a2*y'' + a1*y' + a0*y = b3*u''' + b2*u'' + b1*u' + b0*u."""

    a3: float
    a2: float
    a1: float
    a0: float
    b3: float
    b2: float
    b1: float
    b0: float

    def highest_derivative(self, y, y1p, y2p, y3p, u, u1p, u2p, u3p) -> float:
        """Fourth derivative of the output for the given output and input derivatives."""
        return (
            -self.a3 * y3p
            - self.a2 * y2p
            - self.a1 * y1p
            - self.a0 * y
            + self.b3 * u3p
            + self.b2 * u2p
            + self.b1 * u1p
            + self.b0 * u
        )