"""Interactive terminal front end."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

from .controls import read_key
from .game import MAX_GHOSTS, Game
from .render import (
    clear_screen,
    render_board,
    render_game_over,
    render_status,
    render_win,
)

DEFAULT_SEED = 12345
DEFAULT_GHOSTS = 4
PROGRAM_NAME = "mazechomp"

_NUMBER = re.compile(r"\s*([+-]?)(\d*)")
_ULONG_MAX = 2**64 - 1
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1


class UsageError(ValueError):
    """Bad command-line arguments."""


@dataclass(frozen=True)
class Options:
    seed: int = DEFAULT_SEED
    ghost_count: int = DEFAULT_GHOSTS
    show_help: bool = False


def _leading_int(text: str) -> int:
    match = _NUMBER.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def _parse_seed(text: str) -> int:
    """Unsigned parse of a leading number, wrapped to 32 bits."""
    value = _leading_int(text)
    if abs(value) > _ULONG_MAX:
        value = _ULONG_MAX
    return value & 0xFFFFFFFF


def _parse_count(text: str) -> int:
    """Signed parse of a leading number, narrowed to a 32-bit int."""
    value = min(max(_leading_int(text), _LONG_MIN), _LONG_MAX)
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def parse_args(argv: list[str]) -> Options:
    """Parse the arguments after the program name; raise UsageError on error."""
    seed, ghost_count = DEFAULT_SEED, DEFAULT_GHOSTS
    args = iter(argv)
    for arg in args:
        if arg in ("-h", "--help"):
            return Options(seed, ghost_count, show_help=True)
        if arg == "-s":
            value = next(args, None)
            if value is None:
                raise UsageError("-s requires a seed value")
            seed = _parse_seed(value)
        elif arg == "-g":
            value = next(args, None)
            if value is None:
                raise UsageError("-g requires a ghost count value")
            ghost_count = _parse_count(value)
            if not 1 <= ghost_count <= MAX_GHOSTS:
                raise UsageError(f"ghost count must be 1-{MAX_GHOSTS}")
        else:
            raise UsageError(f"Unknown option '{arg}'")
    return Options(seed, ghost_count)


def usage(program_name: str) -> str:
    return (
        f"Usage: {program_name} [-s <seed>] [-g <ghostCount>]\n"
        f"  -s <seed>      : RNG seed (default: {DEFAULT_SEED})\n"
        f"  -g <ghostCount>: Number of ghosts 1-{MAX_GHOSTS} (default: {DEFAULT_GHOSTS})\n"
        "  -h             : Show this help\n"
        "\nControls:\n"
        "  W/A/S/D : Move Pac-Man\n"
        "  Q       : Quit game\n"
    )


def _skip_line(stream) -> None:
    while True:
        char = stream.read(1)
        if not char or char == "\n":
            return


def _frame(game: Game) -> str:
    return clear_screen() + render_board(game) + render_status(game)


def main(argv: list[str] | None = None) -> int:
    """Play a game on the terminal; return the process exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        options = parse_args(args)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if options.show_help:
        sys.stdout.write(usage(PROGRAM_NAME))
        return 0

    game = Game(options.seed, options.ghost_count)
    stdin, stdout = sys.stdin, sys.stdout

    print("Pac-Man Game Started!")
    print(f"Seed: {options.seed}, Ghosts: {options.ghost_count}")
    print("Press any key to start...")
    stdin.read(1)

    running = True
    while running and not game.won() and not game.lost():
        stdout.write(_frame(game))
        stdout.write("Enter move (W/A/S/D) or Q to quit: ")
        stdout.flush()
        running = game.step(read_key(stdin))
        _skip_line(stdin)

    stdout.write(_frame(game))
    if game.won():
        stdout.write(render_win(game))
    elif game.lost():
        stdout.write(render_game_over(game))
    print(game.result_line())
    return 0