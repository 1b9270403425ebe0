"""A generic particle system and a rising smoke effect built on it."""

from __future__ import annotations

import csv
import math
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Sequence

from PIL import Image

from pixelplay.geometry import ZERO, Rect, Vec

FADE_IN = 0.2
FADE_OUT = 0.4


@dataclass(eq=False)
class Particle:
    """A single sprite instance with its own transform and alpha."""

    sprite: Rect | None = None
    pos: Vec = ZERO
    rot: float = 0.0
    scale: float = 1.0
    mask: float = 1.0
    data: Any = None


class ParticleSystem:
    """Spawns particles at random intervals and keeps the ones still alive."""

    def __init__(
        self,
        generate: Callable[[], Particle],
        update: Callable[[float, Particle], bool],
        spawn_avg: float,
        spawn_dist: float,
        rng: random.Random | None = None,
    ) -> None:
        self.generate = generate
        self.update = update
        self.spawn_avg = spawn_avg
        self.spawn_dist = spawn_dist
        self.rng = rng or random.Random()
        self.spawn_time = 0.0
        self._parts: deque[Particle] = deque()

    def __iter__(self) -> Iterator[Particle]:
        """Iterate from the newest particle to the oldest."""
        return iter(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def update_all(self, dt: float) -> None:
        """Spawn due particles, then update all and drop the expired ones."""
        self.spawn_time -= dt
        while self.spawn_time <= 0:
            self._parts.appendleft(self.generate())
            self.spawn_time += max(0.0, self.spawn_avg + self.rng.gauss(0.0, 1.0) * self.spawn_dist)

        alive = [self.update(dt, part) for part in self._parts]
        self._parts = deque(part for part, keep in zip(self._parts, alive) if keep)


@dataclass
class SmokeData:
    vel: Vec = ZERO
    time: float = 0.0
    life: float = 0.0


@dataclass
class SmokeSystem:
    """Generates and animates smoke puffs drifting away from an origin."""

    rects: Sequence[Rect]
    sheet: Any = None
    orig: Vec = ZERO
    vel_basis: Sequence[Vec] = (Vec(-100, 100), Vec(100, 100), Vec(0, 100))
    vel_dist: float = 0.1
    life_avg: float = 7.0
    life_dist: float = 0.5
    rng: random.Random = field(default_factory=random.Random)

    def generate(self) -> Particle:
        """Create a fresh puff at the origin with a randomised velocity and lifetime."""
        vel = ZERO
        for base in self.vel_basis:
            vel = vel + base.scaled(max(0.0, 1 + self.rng.gauss(0.0, 1.0) * self.vel_dist))
        vel = vel.scaled(1 / len(self.vel_basis))
        life = max(0.0, self.life_avg + self.rng.gauss(0.0, 1.0) * self.life_dist)
        return Particle(
            sprite=self.rng.choice(self.rects),
            pos=self.orig,
            scale=1.0,
            mask=1.0,
            data=SmokeData(vel=vel, life=life),
        )

    def update(self, dt: float, particle: Particle) -> bool:
        """Advance a puff; return whether it is still alive."""
        sd: SmokeData = particle.data
        sd.time += dt
        frac = sd.time / sd.life if sd.life else math.inf

        particle.pos = particle.pos + sd.vel.scaled(dt)
        particle.scale = 0.5 + frac * 1.5

        if frac < FADE_IN:
            particle.mask = (frac / FADE_IN) ** 0.75
        elif frac >= FADE_OUT:
            particle.mask = max(0.0, 1 - (frac - FADE_OUT) / (1 - FADE_OUT)) ** 1.5
        else:
            particle.mask = 1.0

        return sd.time < sd.life


def _float_or_zero(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def parse_sprite_rects(rows: Iterable[Sequence[str]], sheet_height: float) -> list[Rect]:
    """Turn top-down ``x, y, w, h`` rows into bottom-up rectangles."""
    rects = []
    for row in rows:
        x, y, w, h = (_float_or_zero(value) for value in row[:4])
        if len(row) < 4:
            raise IndexError(f"sprite row needs four fields, got {len(row)}")
        y = sheet_height - y - h
        rects.append(Rect(Vec(x, y), Vec(x + w, y + h)))
    return rects


def load_sprite_sheet(sheet_path: str, description_path: str) -> tuple[Image.Image, list[Rect]]:
    """Load a sprite sheet image and the rectangles described in its CSV file."""
    with Image.open(sheet_path) as img:
        sheet = img.copy()
    with open(description_path, newline="") as desc:
        rows = [row for row in csv.reader(desc) if row]
    return sheet, parse_sprite_rects(rows, sheet.height)