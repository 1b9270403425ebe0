"""A field of stars rushing towards the viewer."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from pixelplay.geometry import Vec

Color = tuple[int, int, int, int]

DEFAULT_WIDTH = 1024.0
DEFAULT_HEIGHT = 512.0
DEFAULT_COUNT = 1024
DEFAULT_SEED = 4
DEFAULT_SPEED = 200.0
RESET_SPEED = 100.0
SPEED_STEP = 10.0
MAX_RADIUS = 11.0
TRAIL_THRESHOLD = 6.0

# Colors of the stellar spectral types, hottest first.
COLORS: tuple[Color, ...] = (
    (157, 180, 255, 255),
    (162, 185, 255, 255),
    (167, 188, 255, 255),
    (170, 191, 255, 255),
    (175, 195, 255, 255),
    (186, 204, 255, 255),
    (192, 209, 255, 255),
    (202, 216, 255, 255),
    (228, 232, 255, 255),
    (237, 238, 255, 255),
    (251, 248, 255, 255),
    (255, 249, 249, 255),
    (255, 245, 236, 255),
    (255, 244, 232, 255),
    (255, 241, 223, 255),
    (255, 235, 209, 255),
    (255, 215, 174, 255),
    (255, 198, 144, 255),
    (255, 190, 127, 255),
    (255, 187, 123, 255),
    (255, 187, 123, 255),
)


def random_between(rng: random.Random, low: float, high: float) -> float:
    """Return a uniform random number in ``[low, high)``."""
    return rng.random() * (high - low) + low


def scale(value: float, low: float, high: float, low_allowed: float, high_allowed: float) -> float:
    """Map ``value`` linearly from ``[low, high]`` onto ``[low_allowed, high_allowed]``."""
    return (high_allowed - low_allowed) * (value - low) / (high - low) + low_allowed


def _divide(num: float, den: float) -> float:
    """Floating-point division that yields infinities or NaN instead of raising."""
    if den != 0:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


@dataclass(frozen=True)
class Projection:
    """Where a star appears on screen this frame."""

    head: Vec
    tail: Vec
    radius: float
    color: Color

    @property
    def has_trail(self) -> bool:
        """Whether the star moved far enough to be drawn with a streak."""
        return (self.head - self.tail).length() > TRAIL_THRESHOLD


@dataclass(eq=False)
class Star:
    """A star in view space; ``p`` is its depth in the previous frame."""

    x: float
    y: float
    z: float
    p: float
    color: Color

    def update(self, dt: float, speed: float, width: float, height: float, rng: random.Random) -> None:
        """Move the star closer; respawn it far away once it passes the viewer."""
        self.p = self.z
        self.z -= dt * speed
        if self.z < 0:
            self.x = random_between(rng, -width, width)
            self.y = random_between(rng, -height, height)
            self.z = width
            self.p = self.z

    def projected(self, width: float, height: float) -> Projection:
        """Project the current and previous positions onto the screen."""
        head = Vec(
            scale(_divide(self.x, self.z), 0, 1, 0, width),
            scale(_divide(self.y, self.z), 0, 1, 0, height),
        )
        tail = Vec(
            scale(_divide(self.x, self.p), 0, 1, 0, width),
            scale(_divide(self.y, self.p), 0, 1, 0, height),
        )
        radius = scale(self.z, 0, width, MAX_RADIUS, 0)
        return Projection(head, tail, radius, self.color)


class Starfield:
    """A seeded collection of stars flying at an adjustable speed."""

    def __init__(
        self,
        count: int = DEFAULT_COUNT,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        seed: int | None = DEFAULT_SEED,
    ) -> None:
        if count < 0:
            raise ValueError("star count cannot be negative")
        self.width = width
        self.height = height
        self.speed = DEFAULT_SPEED
        self.rng = random.Random(seed)
        self.stars = [self._new_star() for _ in range(count)]

    def _new_star(self) -> Star:
        x = random_between(self.rng, -self.width, self.width)
        y = random_between(self.rng, -self.height, self.height)
        z = random_between(self.rng, 0, self.width)
        return Star(x, y, z, 0.0, self.rng.choice(COLORS))

    def speed_up(self) -> None:
        self.speed += SPEED_STEP

    def slow_down(self) -> None:
        """Lower the speed, never going below one step."""
        if self.speed > SPEED_STEP:
            self.speed -= SPEED_STEP

    def reset_speed(self) -> None:
        self.speed = RESET_SPEED

    def update(self, dt: float) -> list[Projection]:
        """Advance every star and return how each should be drawn."""
        projections = []
        for star in self.stars:
            star.update(dt, self.speed, self.width, self.height, self.rng)
            projections.append(star.projected(self.width, self.height))
        return projections