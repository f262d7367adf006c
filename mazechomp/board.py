"""The maze: walls, pellets and open cells."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

MAP_ROWS = 25
MAP_COLS = 40

WALL = "#"
PELLET = "."
EMPTY = " "
FILLER = "\0"

_RAW_MAP = (
    "########################################",
    "#......................................#",
    "#.####.##########.##########.####.####.#",
    "#.####.##########.##########.####.####.#",
    "#......................................#",
    "#.####.##.##############.##.####.####.#",
    "#......##....##....##....##......##....#",
    "########.##.##.######.##.##.###########",
    "      #.##.##.######.##.##.#           ",
    "      #.##....##....##....##           ",
    "      #.##.##############.##           ",
    "      #.##.##############.##           ",
    "      #.##....##....##....##           ",
    "      #.##.##.######.##.##.#           ",
    "########.##.##.######.##.##.###########",
    "#......##....##....##....##......##....#",
    "#.####.##########.##########.####.####.#",
    "#......##................##......##....#",
    "########.##.##############.##.##########",
    "#......................................#",
    "#.####.##########.##########.####.####.#",
    "#.####.##########.##########.####.####.#",
    "#......................................#",
    "########################################",
)

# Rows shorter than the map width, and the missing final row, are filled
# with NUL cells: they are neither walls nor pellets.
STANDARD_LAYOUT: tuple[str, ...] = tuple(
    row.ljust(MAP_COLS, FILLER) for row in _RAW_MAP
) + (FILLER * MAP_COLS,) * (MAP_ROWS - len(_RAW_MAP))


class Pos(NamedTuple):
    """A cell on the board, by row and column."""

    r: int
    c: int


PAC_START = Pos(12, 1)
GHOST_STARTS = (Pos(11, 19), Pos(11, 20), Pos(13, 19), Pos(13, 20))


class Board:
    """A rectangular grid of cells with a running pellet count."""

    def __init__(self, layout: Iterable[str]) -> None:
        lines = list(layout)
        if not lines:
            raise ValueError("board layout has no rows")
        self.rows = len(lines)
        self.cols = max(len(line) for line in lines)
        if self.cols == 0:
            raise ValueError("board layout has no columns")
        self._cells = [list(line.ljust(self.cols, FILLER)) for line in lines]
        self.pellets_remaining = self.count_pellets()

    @classmethod
    def standard(cls) -> Board:
        """Return a fresh copy of the built-in maze."""
        return cls(STANDARD_LAYOUT)

    def in_bounds(self, pos: Pos) -> bool:
        return 0 <= pos.r < self.rows and 0 <= pos.c < self.cols

    def is_open(self, pos: Pos) -> bool:
        """True when the cell is on the board and not a wall."""
        return self.in_bounds(pos) and not self.is_wall(pos)

    def is_wall(self, pos: Pos) -> bool:
        """True for walls and for anything off the board."""
        if not self.in_bounds(pos):
            return True
        return self._cells[pos.r][pos.c] == WALL

    def has_pellet(self, pos: Pos) -> bool:
        if not self.in_bounds(pos):
            return False
        return self._cells[pos.r][pos.c] == PELLET

    def remove_pellet(self, pos: Pos) -> None:
        """Eat the pellet at ``pos``; raise ValueError if there is none."""
        if not self.has_pellet(pos):
            raise ValueError(f"no pellet at {pos}")
        self._cells[pos.r][pos.c] = EMPTY
        self.pellets_remaining -= 1

    def count_pellets(self) -> int:
        return sum(row.count(PELLET) for row in self._cells)

    def char_at(self, pos: Pos) -> str:
        """The cell's character, or a space off the board."""
        if not self.in_bounds(pos):
            return EMPTY
        return self._cells[pos.r][pos.c]