"""Plane vectors and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y)

    def scaled(self, c: float) -> Vec:
        """Return the vector multiplied by ``c``."""
        return Vec(self.x * c, self.y * c)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)

    def unit(self) -> Vec:
        """Return a vector of length one pointing the same way.

        The zero vector has no direction; it yields the unit X vector.
        """
        if self.x == 0 and self.y == 0:
            return Vec(1.0, 0.0)
        return self.scaled(1 / self.length())

    def rotated(self, angle: float) -> Vec:
        """Return the vector rotated counter-clockwise by ``angle`` radians."""
        sin, cos = math.sin(angle), math.cos(angle)
        return Vec(self.x * cos - self.y * sin, self.x * sin + self.y * cos)


ZERO = Vec()


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimal and maximal corners."""

    min: Vec
    max: Vec

    def moved(self, delta: Vec) -> Rect:
        """Return the rectangle translated by ``delta``."""
        return Rect(self.min + delta, self.max + delta)

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def center(self) -> Vec:
        return lerp(self.min, self.max, 0.5)


def lerp(a: Vec, b: Vec, t: float) -> Vec:
    """Linearly interpolate between ``a`` (t=0) and ``b`` (t=1)."""
    return a.scaled(1 - t) + b.scaled(t)