"""Keyboard controls: validation and direction mapping."""

from __future__ import annotations

from typing import TextIO

QUIT = "Q"

_DIRECTIONS: dict[str, tuple[int, int]] = {
    "W": (-1, 0),
    "S": (1, 0),
    "A": (0, -1),
    "D": (0, 1),
}

_VALID_KEYS = frozenset(_DIRECTIONS) | {QUIT}


def parse_key(key: str) -> str | None:
    """Upper-case a single key; return it if it is a control, else None."""
    if len(key) != 1:
        return None
    upper = key.upper()
    return upper if upper in _VALID_KEYS else None


def direction(key: str) -> tuple[int, int] | None:
    """Row and column deltas for a movement key, or None."""
    return _DIRECTIONS.get(key)


def is_movement(key: str) -> bool:
    return key in _DIRECTIONS


def is_quit(key: str) -> bool:
    return key == QUIT


def read_key(stream: TextIO) -> str | None:
    """Read one character from ``stream``; end of input counts as quit."""
    char = stream.read(1)
    if not char:
        return QUIT
    return parse_key(char)