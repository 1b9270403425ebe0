"""A sudoku board where the player fills in the hidden cells."""

from __future__ import annotations

import copy
from typing import Sequence

SIZE = 9
DEFAULT_WIDTH = 900

PUZZLE: tuple[tuple[int, ...], ...] = (
    (6, 7, 2, 3, 4, 1, 5, 8, 9),
    (5, 3, 4, 9, 6, 8, 1, 2, 7),
    (8, 9, 1, 7, 5, 2, 6, 3, 4),
    (3, 5, 6, 8, 2, 9, 4, 7, 1),
    (7, 2, 8, 4, 1, 5, 3, 9, 6),
    (4, 1, 9, 6, 7, 3, 8, 5, 2),
    (1, 8, 3, 2, 9, 6, 7, 4, 5),
    (9, 6, 7, 5, 3, 4, 2, 1, 8),
    (2, 4, 5, 1, 8, 7, 9, 6, 3),
)

MASK: tuple[tuple[bool, ...], ...] = (
    (False, False, True, False, False, True, True, True, False),
    (False, False, True, True, True, False, False, False, True),
    (True, False, False, False, False, False, True, True, False),
    (False, True, True, False, True, False, True, True, False),
    (False, True, False, False, False, True, False, True, False),
    (False, True, True, False, True, False, True, True, False),
    (False, True, True, False, False, False, False, False, True),
    (True, False, False, False, True, True, True, False, False),
    (False, True, True, True, False, False, True, False, False),
)


def cell_at_position(px: float, py: float, width: int = DEFAULT_WIDTH) -> tuple[int, int]:
    """Return the board indices of the cell under a point of a square board ``width`` wide."""
    cell = width // SIZE
    if cell <= 0:
        raise ValueError(f"board width {width} is too small for a {SIZE}x{SIZE} grid")
    x = int(px) // cell
    y = int(py) // cell
    if not (0 <= x < SIZE and 0 <= y < SIZE):
        raise IndexError(f"point ({px}, {py}) lies outside the board")
    return x, y


class Sudoku:
    """The solution, the shown cells, and the board the player is filling in."""

    def __init__(
        self,
        puzzle: Sequence[Sequence[int]] = PUZZLE,
        mask: Sequence[Sequence[bool]] = MASK,
    ) -> None:
        if len(puzzle) != SIZE or any(len(row) != SIZE for row in puzzle):
            raise ValueError("puzzle must be a 9x9 grid")
        if len(mask) != SIZE or any(len(row) != SIZE for row in mask):
            raise ValueError("mask must be a 9x9 grid")
        self.puzzle = [list(row) for row in puzzle]
        self.mask = [list(row) for row in mask]
        self.board = [
            [value if shown else 0 for value, shown in zip(p_row, m_row)]
            for p_row, m_row in zip(self.puzzle, self.mask)
        ]
        self.selected: tuple[int, int] | None = None
        self.input = False

    def select(self, px: float, py: float, width: int = DEFAULT_WIDTH) -> bool:
        """Select the cell under a click; return whether it can be filled in."""
        x, y = cell_at_position(px, py, width)
        self.selected = (x, y)
        if not self.mask[x][y]:
            self.input = True
        return self._editable()

    def _editable(self) -> bool:
        if not self.input or self.selected is None:
            return False
        x, y = self.selected
        return not self.mask[x][y]

    def enter(self, value: int) -> bool:
        """Write ``value`` (0 clears) into the selected cell; return whether it was written."""
        if not 0 <= value <= SIZE:
            raise ValueError(f"cell value must be between 0 and {SIZE}, got {value}")
        if not self._editable():
            return False
        x, y = self.selected  # type: ignore[misc]
        self.board[x][y] = value
        self.input = False
        return True

    def solved(self) -> bool:
        """Whether the board matches the solution."""
        return self.board == self.puzzle

    def snapshot(self) -> list[list[int]]:
        """Return a copy of the current board."""
        return copy.deepcopy(self.board)