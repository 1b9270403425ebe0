"""Colored spotlights sweeping over a picture from the corners of a window."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pixelplay.geometry import ZERO, Vec

Color = tuple[float, float, float]

DEFAULT_RADIUS = 800.0
DEFAULT_DUST = 0.3
DEFAULT_SPREAD = math.pi / math.e
SWAY_AMPLITUDE = math.pi / 8
ARC_SEGMENTS = 64

COLORS: tuple[Color, ...] = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
    (1 / math.sqrt(2), 1 / math.sqrt(2), 0.0),
)

BASE_ANGLES: tuple[float, ...] = (
    math.pi / 4,
    math.pi / 4 + math.pi / 2,
    math.pi / 4 + 2 * math.pi / 2,
    math.pi / 4 + 3 * math.pi / 2,
)

SPEEDS: tuple[float, ...] = (11.0 / 23, 13.0 / 23, 17.0 / 23, 19.0 / 23)


@dataclass
class ColorLight:
    """A cone of colored light shining from ``point`` in direction ``angle``."""

    color: Color
    point: Vec = ZERO
    angle: float = 0.0
    radius: float = DEFAULT_RADIUS
    dust: float = DEFAULT_DUST
    spread: float = DEFAULT_SPREAD

    def arc_points(self) -> list[Vec]:
        """Return the cone polygon: its apex first, then the rim of the arc."""
        unit = [ZERO]
        step = self.spread / ARC_SEGMENTS
        angle = -self.spread / 2
        while angle <= self.spread / 2:
            unit.append(Vec(1.0, 0.0).rotated(angle))
            angle += step
        return [p.scaled(self.radius).rotated(self.angle) + self.point for p in unit]

    def sway(self, base_angle: float, elapsed: float, speed: float) -> float:
        """Swing the light around ``base_angle`` and return the new angle."""
        self.angle = base_angle + math.sin(elapsed * speed) * SWAY_AMPLITUDE
        return self.angle

    def adjust_dust(self, delta: float) -> float:
        """Change how much light the dust reflects, kept within 0 and 1."""
        self.dust = min(1.0, max(0.0, self.dust + delta))
        return self.dust


def build_lights(width: float, height: float) -> list[ColorLight]:
    """Place four lights in the corners of a window, each pointing inwards."""
    corners = (Vec(0.0, 0.0), Vec(width, 0.0), Vec(width, height), Vec(0.0, height))
    return [
        ColorLight(color=color, point=point, angle=angle)
        for color, point, angle in zip(COLORS, corners, BASE_ANGLES)
    ]