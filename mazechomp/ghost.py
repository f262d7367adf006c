"""Moving entities and the ghosts' random wandering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .board import Board, Pos
from .rng import Rng

# Up, down, left, right: the order in which ghosts consider moves.
_ALL_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class Entity:
    """Something that moves on the board and can be sent back to its start."""

    start: Pos
    pos: Pos = field(default=None)  # type: ignore[assignment]
    dr: int = 0
    dc: int = 0
    alive: bool = True

    def __post_init__(self) -> None:
        if self.pos is None:
            self.pos = self.start

    def move_to(self, pos: Pos) -> None:
        """Move to ``pos``, recording the step taken as the heading."""
        self.dr = pos.r - self.pos.r
        self.dc = pos.c - self.pos.c
        self.pos = pos

    def respawn(self) -> None:
        self.pos = self.start
        self.dr = 0
        self.dc = 0
        self.alive = True


def valid_directions(
    board: Board, pos: Pos, prev_dr: int, prev_dc: int
) -> list[tuple[int, int]]:
    """Open moves from ``pos``, avoiding a reversal unless nothing else is open."""
    moves = [
        (dr, dc)
        for dr, dc in _ALL_DIRECTIONS
        if not (dr == -prev_dr and dc == -prev_dc)
        and board.is_open(Pos(pos.r + dr, pos.c + dc))
    ]
    if moves:
        return moves
    if board.is_open(Pos(pos.r - prev_dr, pos.c - prev_dc)):
        return [(-prev_dr, -prev_dc)]
    return []


def update_ghost(ghost: Entity, board: Board, rng: Rng) -> None:
    """Move a live ghost one step in a randomly chosen valid direction."""
    if not ghost.alive:
        return
    moves = valid_directions(board, ghost.pos, ghost.dr, ghost.dc)
    if not moves:
        return
    dr, dc = moves[rng.choice(len(moves))]
    ghost.move_to(Pos(ghost.pos.r + dr, ghost.pos.c + dc))


def update_ghosts(ghosts: Iterable[Entity], board: Board, rng: Rng) -> None:
    """Advance every live ghost, in order."""
    for ghost in ghosts:
        if ghost.alive:
            update_ghost(ghost, board, rng)