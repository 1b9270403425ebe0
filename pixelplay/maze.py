"""Maze generation with the recursive backtracker algorithm."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field

from pixelplay.stack import Stack

TOP, RIGHT, BOTTOM, LEFT = range(4)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 800
DEFAULT_WALL_SIZE = 40


class NoUnvisitedNeighbors(LookupError):
    """Raised when a cell has no unvisited neighbour left."""


@dataclass(eq=False)
class Cell:
    """One maze cell; walls are ordered top, right, bottom, left."""

    col: int
    row: int
    walls: list[bool] = field(default_factory=lambda: [True, True, True, True])
    visited: bool = False

    def neighbors(self, maze: Maze) -> list[Cell]:
        """Return the unvisited neighbours in the order top, right, bottom, left."""
        found = []
        for col, row in (
            (self.col, self.row - 1),
            (self.col + 1, self.row),
            (self.col, self.row + 1),
            (self.col - 1, self.row),
        ):
            try:
                cell = maze.cell_at(col, row)
            except IndexError:
                continue
            if not cell.visited:
                found.append(cell)
        return found

    def random_neighbor(self, maze: Maze) -> Cell:
        """Return a random unvisited neighbour."""
        candidates = self.neighbors(maze)
        if not candidates:
            raise NoUnvisitedNeighbors("all neighbouring cells have been visited")
        return maze.rng.choice(candidates)


def cell_index(col: int, row: int, cols: int, rows: int) -> int:
    """Return the flat index of a cell stored row by row."""
    if col < 0 or row < 0 or col > cols - 1 or row > rows - 1:
        raise IndexError(f"cell ({col}, {row}) lies outside a {cols}x{rows} grid")
    return col + row * cols


def remove_walls(a: Cell, b: Cell) -> None:
    """Open the walls between two adjacent cells."""
    dx = a.col - b.col
    if dx == 1:
        a.walls[LEFT] = False
        b.walls[RIGHT] = False
    elif dx == -1:
        a.walls[RIGHT] = False
        b.walls[LEFT] = False

    dy = a.row - b.row
    if dy == 1:
        a.walls[TOP] = False
        b.walls[BOTTOM] = False
    elif dy == -1:
        a.walls[BOTTOM] = False
        b.walls[TOP] = False


class Maze:
    """A grid of cells carved one step at a time."""

    def __init__(self, cols: int, rows: int) -> None:
        if cols <= 0 or rows <= 0:
            raise ValueError("a maze needs at least one column and one row")
        self.cols = cols
        self.rows = rows
        self.rng: random.Random = random.SystemRandom()
        self.reset()

    def reset(self) -> None:
        """Start over with a fresh grid of walled, unvisited cells."""
        self.cells = [Cell(col, row) for row in range(self.rows) for col in range(self.cols)]
        self.stack = Stack(len(self.cells))
        self.current = self.cells[0]

    def cell_at(self, col: int, row: int) -> Cell:
        return self.cells[cell_index(col, row, self.cols, self.rows)]

    def step(self) -> Cell:
        """Advance the backtracker by one move and return the new current cell."""
        current = self.current
        current.visited = True
        try:
            nxt = current.random_neighbor(self)
        except NoUnvisitedNeighbors:
            nxt = None

        if nxt is not None and not nxt.visited:
            self.stack.push(current)
            remove_walls(current, nxt)
            nxt.visited = True
            self.current = nxt
        elif len(self.stack) > 0:
            self.current = self.stack.pop()
        return self.current


def _unsigned(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid unsigned value {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid unsigned value {text!r}")
    return value


def parse_args(argv: list[str] | None = None) -> tuple[int, int, int]:
    """Parse the maze width, height and cell size in pixels."""
    parser = argparse.ArgumentParser(prog="maze", add_help=False)
    parser.add_argument("-w", type=_unsigned, default=DEFAULT_WIDTH,
                        help="w sets the maze's width in pixels.")
    parser.add_argument("-h", type=_unsigned, default=DEFAULT_HEIGHT,
                        help="h sets the maze's height in pixels.")
    parser.add_argument("-c", type=_unsigned, default=DEFAULT_WALL_SIZE,
                        help="c sets the maze cell's size in pixels.")
    args = parser.parse_args(argv)

    if (args.w != DEFAULT_WIDTH or args.h != DEFAULT_HEIGHT) and args.w != args.h:
        print(f"WARNING: maze width: {args.w} and maze height: {args.h} don't match. ")
        print("Maze will look funny because the maze size is bond to the window size!")

    return args.w, args.h, args.c