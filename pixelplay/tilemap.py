"""Tile sheet arithmetic and a panning, zooming camera."""

from __future__ import annotations

from dataclasses import dataclass

from pixelplay.geometry import ZERO, Rect, Vec


def tile_id_to_coord(tile_id: int, columns: int, rows: int) -> tuple[int, int]:
    """Return the column and bottom-up row of a tile inside its tileset image."""
    if columns <= 0:
        raise ValueError("a tileset needs at least one column")
    return tile_id % columns, rows - tile_id // columns - 1


def index_to_game_pos(index: int, width: int, height: int) -> Vec:
    """Return the map position, in tiles, of the tile stored at ``index``."""
    if width <= 0:
        raise ValueError("a map needs at least one column")
    return Vec(float(index % width) - 1, float(height) - float(index // width))


def tile_frame(
    tile_id: int, columns: int, tile_count: int, tile_width: float, tile_height: float
) -> Rect:
    """Return the rectangle a tile occupies inside its tileset image."""
    x, y = tile_id_to_coord(tile_id, columns, tile_count // columns)
    left = x * tile_width
    bottom = y * tile_height
    return Rect(Vec(left, bottom), Vec(left + tile_width, bottom + tile_height))


def grid_frames(min_x: float, min_y: float, max_x: float, max_y: float, size: float) -> list[Rect]:
    """Cut a sheet into square frames, column by column, bottom to top."""
    if size <= 0:
        raise ValueError("frame size must be positive")
    frames = []
    x = min_x
    while x < max_x:
        y = min_y
        while y < max_y:
            frames.append(Rect(Vec(x, y), Vec(x + size, y + size)))
            y += size
        x += size
    return frames


@dataclass
class Camera:
    """A camera that pans with the arrow keys and zooms with the mouse wheel."""

    pos: Vec = ZERO
    speed: float = 500.0
    zoom: float = 1.0
    zoom_speed: float = 1.2

    def move(self, dx: float, dy: float, dt: float) -> None:
        """Pan in the direction ``(dx, dy)`` for ``dt`` seconds."""
        self.pos = self.pos + Vec(dx, dy).scaled(self.speed * dt)

    def zoom_by(self, scroll: float) -> None:
        """Zoom in for positive wheel scroll and out for negative."""
        self.zoom *= self.zoom_speed ** scroll