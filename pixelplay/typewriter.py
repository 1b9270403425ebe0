"""A typewriter that types in random styles, shakes on key strikes and scrolls."""

from __future__ import annotations

import math
import random
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from pixelplay.geometry import ZERO, Vec

Color = tuple[float, float, float, float]

SHAKE_FREQ = 24
SCROLL_FREQ = 120
TAB_STOP = 4
DICE_SIDES = 21


class Style(Enum):
    """Typeface a character was struck in."""

    REGULAR = "regular"
    BOLD = "bold"
    ITALIC = "italic"


@dataclass(frozen=True)
class Glyph:
    """A character put on the paper, with where it landed and in which style."""

    char: str
    style: Style
    pos: Vec


class Typewriter:
    """Paper with a pen position, a shake offset and a scroll position.

    All methods are safe to call from several threads at once.
    """

    def __init__(self, advance: float, line_height: float, rng: random.Random | None = None) -> None:
        if advance <= 0 or line_height <= 0:
            raise ValueError("advance and line height must be positive")
        self.advance = advance
        self.line_height = line_height
        self.tab_width = advance * TAB_STOP
        self.rng = rng or random.Random()
        self.glyphs: list[Glyph] = []
        self._lock = threading.Lock()
        self._orig = ZERO
        self._dot = ZERO
        self._offset = ZERO
        self._position = ZERO
        self._move = ZERO

    def _write(self, char: str, style: Style) -> None:
        dot = self._dot
        if char == "\n":
            self._dot = Vec(self._orig.x, dot.y - self.line_height)
        elif char == "\r":
            self._dot = Vec(self._orig.x, dot.y)
        elif char == "\t":
            rem = (dot.x - self._orig.x) % self.tab_width
            self._dot = Vec(dot.x + self.tab_width - rem, dot.y)
        else:
            self.glyphs.append(Glyph(char, style, dot))
            self._dot = Vec(dot.x + self.advance, dot.y)

    def ribbon(self, char: str) -> Style:
        """Strike one character, mostly in the regular face; return the face used."""
        with self._lock:
            dice = self.rng.randrange(DICE_SIDES)
            if dice <= 18:
                style = Style.REGULAR
            elif dice == 19:
                style = Style.BOLD
            else:
                style = Style.ITALIC
            self._write(char, style)
            return style

    def back(self) -> None:
        """Move the pen back by the width of one space."""
        with self._lock:
            self._dot = Vec(self._dot.x - self.advance, self._dot.y)

    def offset_by(self, off: Vec) -> None:
        """Add ``off`` to the shake offset of the paper."""
        with self._lock:
            self._offset = self._offset + off

    def set_move(self, vel: Vec) -> None:
        """Set the velocity the paper scrolls with."""
        with self._lock:
            self._move = vel

    def update(self, dt: float) -> None:
        """Scroll the paper for ``dt`` seconds."""
        with self._lock:
            self._position = self._position + self._move.scaled(dt)

    def dot(self) -> Vec:
        """Return where the next character will be struck."""
        with self._lock:
            return self._dot

    def position(self) -> Vec:
        """Return how far the paper has scrolled."""
        with self._lock:
            return self._position

    def offset(self) -> Vec:
        """Return the current shake offset."""
        with self._lock:
            return self._offset


def shake_offsets(
    intensity: float, friction: float, rng: random.Random | None = None
) -> Iterator[Vec]:
    """Yield a decaying random offset for every shake tick.

    Each offset replaces the previous one; when the sequence ends the paper
    should be back at rest.
    """
    rng = rng or random.Random()
    dt = 1.0 / SHAKE_FREQ
    while intensity >= 0.01 * dt:
        off = Vec((rng.random() - 0.5) * intensity * 2, (rng.random() - 0.5) * intensity * 2)
        intensity -= friction * dt
        yield off


def scroll_speeds(tw: Typewriter, intensity: float, speed_up: float) -> Iterator[float]:
    """Steer the paper so the pen line returns to the baseline, one tick at a time.

    Every tick sets the scroll velocity of ``tw`` and yields the speed; the
    caller advances ``tw`` between ticks. The sequence ends once the line sits
    on the baseline.
    """
    dt = 1.0 / SCROLL_FREQ
    speed = 0.0
    while True:
        gap = tw.dot().y + tw.position().y
        if abs(gap) < 0.01:
            return
        target = -gap * intensity
        if speed < target:
            speed += speed_up * dt
        else:
            speed = target
        tw.set_move(Vec(0.0, speed))
        yield speed


class Dotlight:
    """A glowing dot that chases the pen of a typewriter."""

    def __init__(
        self,
        tw: Typewriter,
        color: Color = (1.0, 0.0, 0.0, 1.0),
        radius: float = 6.0,
        intensity: float = 30.0,
        acceleration: float = 20.0,
        max_speed: float = 1600.0,
    ) -> None:
        self.tw = tw
        self.color = color
        self.radius = radius
        self.intensity = intensity
        self.acceleration = acceleration
        self.max_speed = max_speed
        self.pos = tw.dot()
        self.vel = ZERO

    def update(self, dt: float) -> None:
        """Accelerate towards the pen, never faster than ``max_speed``."""
        target_vel = (self.tw.dot() + self.tw.position() - self.pos).scaled(self.intensity)
        acc = (target_vel - self.vel).scaled(self.acceleration)
        self.vel = self.vel + acc.scaled(dt)
        if self.vel.length() > self.max_speed:
            self.vel = self.vel.unit().scaled(self.max_speed)
        self.pos = self.pos + self.vel.scaled(dt)

    def outline(self) -> list[Vec]:
        """Return the closed rim of the glow, 33 points around the centre."""
        return [
            self.pos + Vec(self.radius, 0.0).rotated(i * 2 * math.pi / 32)
            for i in range(33)
        ]