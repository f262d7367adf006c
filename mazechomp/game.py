"""Game state and the rules applied on each tick."""

from __future__ import annotations

from .board import GHOST_STARTS, PAC_START, Board, Pos
from .controls import direction, is_quit
from .ghost import Entity, update_ghosts
from .rng import Rng

MAX_GHOSTS = len(GHOST_STARTS)
STARTING_LIVES = 3
PELLET_SCORE = 10


class Game:
    """One game: the maze, Pac-Man, the ghosts, score, lives and tick count."""

    def __init__(self, seed: int = 12345, ghost_count: int = 4) -> None:
        if not 1 <= ghost_count <= MAX_GHOSTS:
            raise ValueError(f"ghost count must be 1-{MAX_GHOSTS}, got {ghost_count}")
        self.seed = seed & 0xFFFFFFFF
        self.rng = Rng(self.seed)
        self.board = Board.standard()
        self.pac = Entity(PAC_START)
        self.ghosts = [Entity(start) for start in GHOST_STARTS[:ghost_count]]
        self.score = 0
        self.lives = STARTING_LIVES
        self.tick = 0

    @property
    def ghost_count(self) -> int:
        return len(self.ghosts)

    @property
    def pellets_remaining(self) -> int:
        return self.board.pellets_remaining

    def step(self, key: str | None) -> bool:
        """Advance one tick with ``key``; return False when the player quits."""
        self.tick += 1
        if key is not None and is_quit(key):
            return False

        if key is not None and self.pac.alive:
            delta = direction(key)
            if delta is not None:
                dr, dc = delta
                target = Pos(self.pac.pos.r + dr, self.pac.pos.c + dc)
                if self.board.is_open(target):
                    self.pac.move_to(target)
                    if self.board.has_pellet(target):
                        self.board.remove_pellet(target)
                        self.score += PELLET_SCORE

        update_ghosts(self.ghosts, self.board, self.rng)

        if self.check_collision():
            self.handle_collision()
        return True

    def won(self) -> bool:
        return self.board.pellets_remaining == 0

    def lost(self) -> bool:
        return self.lives == 0

    def check_collision(self) -> bool:
        """True when a live ghost shares Pac-Man's cell."""
        if not self.pac.alive:
            return False
        return any(
            ghost.alive and ghost.pos == self.pac.pos for ghost in self.ghosts
        )

    def handle_collision(self) -> None:
        """Lose a life and send everyone back to their starting cells."""
        self.lives -= 1
        self.pac.respawn()
        for ghost in self.ghosts:
            ghost.respawn()

    def result_line(self) -> str:
        return (
            f"RESULT seed={self.seed} ghosts={self.ghost_count} "
            f"score={self.score} lives={self.lives} "
            f"pellets={self.pellets_remaining} ticks={self.tick}"
        )