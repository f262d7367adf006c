"""Text rendering of the board and status lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .board import Pos

if TYPE_CHECKING:
    from .game import Game

PAC_CHAR = "P"
GHOST_CHAR = "G"
CLEAR_LINES = 50


def render_board(game: Game) -> str:
    """The board with Pac-Man and ghosts drawn over it, one line per row."""
    board = game.board
    display = [
        [board.char_at(Pos(r, c)) for c in range(board.cols)]
        for r in range(board.rows)
    ]
    if game.pac.alive:
        display[game.pac.pos.r][game.pac.pos.c] = PAC_CHAR
    for ghost in game.ghosts:
        if ghost.alive:
            display[ghost.pos.r][ghost.pos.c] = GHOST_CHAR
    return "".join("".join(row) + "\n" for row in display)


def render_status(game: Game) -> str:
    return (
        f"Score: {game.score:4d} Lives: {game.lives} "
        f"Pellets: {game.pellets_remaining:3d} Tick: {game.tick:3d}\n"
    )


def clear_screen() -> str:
    """Enough blank lines to scroll the previous frame away."""
    return "\n" * CLEAR_LINES


def _final(banner: str, game: Game) -> str:
    return f"\n=== {banner} ===\nFinal Score: {game.score}\nFinal Tick: {game.tick}\n"


def render_game_over(game: Game) -> str:
    return _final("GAME OVER", game)


def render_win(game: Game) -> str:
    return _final("YOU WIN!", game)