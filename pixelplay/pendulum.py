"""A damped double pendulum integrated one frame at a time."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pixelplay.geometry import Vec

DAMPING = 0.9996


def default_angles() -> tuple[float, float]:
    """Return the starting angles of the two arms."""
    return math.pi / 2, math.pi / 3


@dataclass
class DoublePendulum:
    """Two arms hanging from the origin; angles are measured from the +Y axis."""

    g: float = 0.1
    r1: float = 180.0
    r2: float = 90.0
    m1: float = 32.0
    m2: float = 8.0
    a1: float = math.pi / 2
    a2: float = math.pi / 3
    a1v: float = 0.0
    a2v: float = 0.0

    def reset(self) -> None:
        """Put both arms back at their starting angles, keeping their velocities."""
        self.a1, self.a2 = default_angles()

    def first_acceleration(self) -> float:
        """Angular acceleration of the first arm."""
        g, r1, r2, m1, m2 = self.g, self.r1, self.r2, self.m1, self.m2
        a1, a2, a1v, a2v = self.a1, self.a2, self.a1v, self.a2v
        num1 = -g * (2 * m1 + m2) * math.sin(a1)
        num2 = -m2 * g * math.sin(a1 - 2 * a2)
        num3 = -2 * math.sin(a1 - a2) * m2
        num4 = a2v * a2v * r2 + a1v * a1v * r1 * math.cos(a1 - a2)
        den = r1 * (2 * m1 + m2 - m2 * math.cos(2 * a1 - 2 * a2))
        return (num1 + num2 + num3 * num4) / den

    def second_acceleration(self) -> float:
        """Angular acceleration of the second arm."""
        g, r1, r2, m1, m2 = self.g, self.r1, self.r2, self.m1, self.m2
        a1, a2, a1v, a2v = self.a1, self.a2, self.a1v, self.a2v
        num1 = 2 * math.sin(a1 - a2)
        num2 = a1v * a1v * r1 * (m1 + m2)
        num3 = g * (m1 + m2) * math.cos(a1)
        num4 = a2v * a2v * r2 * m2 * math.cos(a1 - a2)
        den = r2 * (2 * m1 + m2 - m2 * math.cos(2 * a2 - 2 * a2))
        return (num1 * (num2 + num3 + num4)) / den

    def step(self) -> tuple[Vec, Vec]:
        """Advance one frame and return the positions of both bobs."""
        acc1 = self.first_acceleration()
        acc2 = self.second_acceleration()

        self.a1v += acc1
        self.a2v += acc2

        self.a1 += self.a1v
        self.a2 += self.a2v

        self.a1v *= DAMPING
        self.a2v *= DAMPING

        a = Vec(self.r1 * math.sin(self.a1), self.r1 * math.cos(self.a1))
        b = Vec(a.x + self.r2 * math.sin(self.a2), a.y + self.r2 * math.cos(self.a2))
        return a, b