"""An endlessly scrolling background made of two side-by-side halves."""

from __future__ import annotations

from pixelplay.geometry import Rect, Vec


class ScrollingBackground:
    """Scrolls two halves of a double-width picture to the left or right.

    The left half of the picture fills the view, and the right half waits just
    outside it. Once the scroll has covered a whole view width, the two halves
    swap places, so the background never ends.
    """

    def __init__(self, width: float, height: float, speed: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("background width and height must be positive")
        self.width = width
        self.height = height
        self.speed = speed
        self.displacement = 0.0
        self.frames: tuple[Rect, Rect] = (
            Rect(Vec(0.0, 0.0), Vec(width, height)),
            Rect(Vec(width, 0.0), Vec(width * 2, height)),
        )
        self.positions: list[Vec] = self._initial_positions()

    def _initial_positions(self) -> list[Vec]:
        # The second half waits on the side the picture scrolls in from.
        first = Vec(self.width / 2, self.height / 2)
        if self.speed > 0:
            second = Vec(self.width / 2 - self.width, self.height / 2)
        else:
            second = Vec(self.width + self.width / 2, self.height / 2)
        return [first, second]

    def update(self, dt: float) -> tuple[Vec, Vec]:
        """Return where to draw the centres of both halves, then scroll by ``dt`` seconds."""
        if abs(self.displacement) >= self.width:
            self.displacement = 0.0
            self.positions.reverse()
        d = Vec(self.displacement, 0.0)
        drawn = (self.positions[0] + d, self.positions[1] + d)
        self.displacement += self.speed * dt
        return drawn