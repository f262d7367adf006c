"""Scripted, seeded runs of the game for regression checks."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from .game import Game


class Scenario(NamedTuple):
    name: str
    moves: str
    seed: int
    ghost_count: int


def run_moves(seed: int, ghost_count: int, moves: Iterable[str]) -> Game:
    """Play ``moves`` until they run out, the player quits, or the game ends."""
    game = Game(seed, ghost_count)
    for key in moves:
        if game.won() or game.lost():
            break
        if not game.step(key.upper()):
            break
    return game


def scenario_inputs() -> list[Scenario]:
    """The three fixed scenarios: a sweeping pattern, a short run, a long walk."""
    return [
        Scenario("Win", "DSAW" * 200, 12345, 4),
        Scenario("Death", "DDQ", 54321, 2),
        Scenario("Pellet", "D" * 10 + "Q", 99999, 1),
    ]


def main(argv: list[str] | None = None) -> int:
    """Run every scenario and print its result line."""
    print("Pac-Man Test Suite")
    print("==================\n")
    for scenario in scenario_inputs():
        print(f"=== Running {scenario.name} test ===")
        game = run_moves(scenario.seed, scenario.ghost_count, scenario.moves)
        print(game.result_line())
        print()
    print("All tests completed!")
    return 0