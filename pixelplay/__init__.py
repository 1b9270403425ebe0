"""Window-free state and update logic for small 2D game and simulation demos."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "stack",
    "maze",
    "platformer",
    "smoke",
    "starfield",
    "pendulum",
    "scrolling",
    "sudoku",
    "tilemap",
    "typewriter",
    "lights",
    "shaderutil",
]