"""Physics, animation and level pieces of a small side-view platformer."""

from __future__ import annotations

import csv
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Sequence

from PIL import Image

from pixelplay.geometry import ZERO, Rect, Vec

Color = tuple[float, float, float]

LEVEL: tuple[Rect, ...] = tuple(
    Rect(Vec(x0, y0), Vec(x1, y1))
    for x0, y0, x1, y1 in (
        (-50, -34, 50, -32),
        (20, 0, 70, 2),
        (-100, 10, -50, 12),
        (120, -22, 140, -20),
        (120, -72, 140, -70),
        (120, -122, 140, -120),
        (-100, -152, 100, -150),
        (-150, -127, -140, -125),
        (-180, -97, -170, -95),
        (-150, -67, -140, -65),
        (-180, -37, -170, -35),
        (-150, -7, -140, -5),
    )
)


class AnimationSheetError(Exception):
    """Raised when an animation sheet or its description cannot be loaded."""


def random_nice_color(rng: random.Random | None = None) -> Color:
    """Return a random RGB color whose components form a unit vector."""
    rng = rng or random.Random()
    while True:
        r, g, b = rng.random(), rng.random(), rng.random()
        length = math.sqrt(r * r + g * g + b * b)
        if length != 0:
            return (r / length, g / length, b / length)


def split_frames(sheet_width: float, sheet_height: float, frame_width: float) -> list[Rect]:
    """Cut a horizontal strip of the sheet into frames of equal width."""
    if frame_width <= 0:
        raise ValueError("frame width must be positive")
    frames = []
    x = 0.0
    while x + frame_width <= sheet_width:
        frames.append(Rect(Vec(x, 0.0), Vec(x + frame_width, sheet_height)))
        x += frame_width
    return frames


def _int_or_zero(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def parse_animations(rows: Iterable[Sequence[str]], frames: Sequence[Rect]) -> dict[str, list[Rect]]:
    """Map each animation name to its inclusive range of frames.

    Every row holds a name, a first frame index and a last frame index.
    """
    anims: dict[str, list[Rect]] = {}
    for row in rows:
        name = row[0]
        start = _int_or_zero(row[1])
        end = _int_or_zero(row[2])
        if start < 0 or end + 1 > len(frames) or start > end + 1:
            raise IndexError(f"animation {name!r} range {start}..{end} is outside {len(frames)} frames")
        anims[name] = list(frames[start : end + 1])
    return anims


def load_animation_sheet(
    sheet_path: str, desc_path: str, frame_width: float
) -> tuple[Image.Image, dict[str, list[Rect]]]:
    """Load a sprite strip and its CSV description of named animations."""
    try:
        with Image.open(sheet_path) as img:
            sheet = img.copy()
        frames = split_frames(sheet.width, sheet.height, frame_width)
        with open(desc_path, newline="") as desc:
            rows = [row for row in csv.reader(desc) if row]
    except (OSError, csv.Error) as err:
        raise AnimationSheetError(f"error loading animation sheet: {err}") from err
    return sheet, parse_animations(rows, frames)


@dataclass
class Platform:
    """A solid ledge the gopher can stand on."""

    rect: Rect
    color: Color | None = None


@dataclass
class GopherPhys:
    """Position, velocity and ground contact of the player."""

    gravity: float = -512.0
    run_speed: float = 64.0
    jump_speed: float = 192.0
    rect: Rect = field(default_factory=lambda: Rect(Vec(-6, -7), Vec(6, 7)))
    vel: Vec = ZERO
    ground: bool = False

    def update(self, dt: float, ctrl: Vec, platforms: Iterable[Platform]) -> None:
        """Apply controls, gravity and platform collisions for one time step."""
        if ctrl.x < 0:
            vx = -self.run_speed
        elif ctrl.x > 0:
            vx = self.run_speed
        else:
            vx = 0.0

        self.vel = Vec(vx, self.vel.y + self.gravity * dt)
        self.rect = self.rect.moved(self.vel.scaled(dt))

        self.ground = False
        if self.vel.y <= 0:
            for p in platforms:
                if self.rect.max.x <= p.rect.min.x or self.rect.min.x >= p.rect.max.x:
                    continue
                if self.rect.min.y > p.rect.max.y or self.rect.min.y < p.rect.max.y + self.vel.y * dt:
                    continue
                self.vel = Vec(self.vel.x, 0.0)
                self.rect = self.rect.moved(Vec(0.0, p.rect.max.y - self.rect.min.y))
                self.ground = True

        if self.ground and ctrl.y > 0:
            self.vel = Vec(self.vel.x, self.jump_speed)


class AnimState(Enum):
    IDLE = 0
    RUNNING = 1
    JUMPING = 2


@dataclass
class GopherAnim:
    """Chooses the sprite frame and facing direction from the physics state."""

    anims: dict[str, list[Rect]]
    sheet: Any = None
    rate: float = 1.0 / 10
    state: AnimState = AnimState.IDLE
    counter: float = 0.0
    dir: float = 1.0
    frame: Rect | None = None

    def update(self, dt: float, phys: GopherPhys) -> None:
        self.counter += dt

        if not phys.ground:
            new_state = AnimState.JUMPING
        elif phys.vel.length() > 0:
            new_state = AnimState.RUNNING
        else:
            new_state = AnimState.IDLE

        if self.state != new_state:
            self.state = new_state
            self.counter = 0.0

        if self.state is AnimState.IDLE:
            self.frame = self.anims["Front"][0]
        elif self.state is AnimState.RUNNING:
            run = self.anims["Run"]
            self.frame = run[math.floor(self.counter / self.rate) % len(run)]
        else:
            jump = self.anims["Jump"]
            i = int((-phys.vel.y / phys.jump_speed + 1) / 2 * len(jump))
            self.frame = jump[min(max(i, 0), len(jump) - 1)]

        if phys.vel.x != 0:
            self.dir = 1.0 if phys.vel.x > 0 else -1.0


@dataclass
class Goal:
    """A pulsing target whose rings cycle through random colors."""

    pos: Vec = Vec(-75, 40)
    radius: float = 18.0
    step: float = 1.0 / 7
    counter: float = 0.0
    cols: list[Color | None] = field(default_factory=lambda: [None] * 5)
    rng: random.Random = field(default_factory=random.Random)

    def update(self, dt: float) -> None:
        """Shift the ring colors outward once per elapsed step."""
        self.counter += dt
        while self.counter > self.step:
            self.counter -= self.step
            self.cols = [random_nice_color(self.rng), *self.cols[:-1]]