# mazechomp

A small turn-based maze chase game that runs in the terminal. You steer the
chomper (`P`) around a fixed 25×40 maze and eat the pellets (`.`). Ghosts
(`G`) wander the corridors at random. If one lands on your cell you lose a
life. The game is fully deterministic. The same seed and the same keys always
give the same game.

## Installing

```
pip install .
```

## Playing

```
mazechomp [-s SEED] [-g GHOSTS]
```

- `-s SEED`: seed for the ghosts' random choices (default `12345`). The
  leading number of the value is used and wrapped to 32 bits.
- `-g GHOSTS`: number of ghosts, 1 to 4 (default `4`)
- `-h`, `--help`: show usage

An unknown option, a missing value or a ghost count outside 1–4 prints an
error and exits with status 1.

The game first waits for a key. After that each turn reads one key followed
by Enter. The rest of the line is ignored.

| Key | Action     |
|-----|------------|
| W   | move up    |
| A   | move left  |
| S   | move down  |
| D   | move right |
| Q   | quit       |

Keys are not case-sensitive. Any other key still uses up a turn: you stay put
and the ghosts move. End of input counts as quitting. A move into a wall does
nothing. Each pellet is worth 10 points. You start with 3 lives. When a ghost
catches you, you and every ghost go back to the starting cells.

The game ends when every pellet is eaten, when your lives run out, or when you
quit. It draws the board one last time. It shows a win or game-over banner when
one applies, and then a summary line:

```
RESULT seed=12345 ghosts=4 score=... lives=... pellets=... ticks=...
```

## Scripted runs

To replay the three built-in scenarios ("Win", "Death" and "Pellet") and
print their result lines:

```
mazechomp-scenarios
```

## Using it as a library

```python
from mazechomp.game import Game
from mazechomp.render import render_board, render_status

game = Game(12345, 2)
for key in "DDDSS":
    if not game.step(key):
        break
print(render_board(game))
print(render_status(game))
print(game.result_line())
```

- `Game(seed, ghost_count)` raises `ValueError` when the ghost count is not
  between 1 and 4. `step(key)` takes an upper-case key, or `None` for no move.
  It returns `False` when the key is `Q`. `won()` and `lost()` report how the
  game stands.
- The functions in `mazechomp.render` return strings and do not print them.
- `mazechomp.scenarios.run_moves(seed, ghost_count, moves)` plays a string of
  keys, upper-casing each one. It stops when the keys run out, on `Q`, or when
  the game is won or lost, and returns the game.
- `mazechomp.board.Board`, `mazechomp.ghost` and `mazechomp.rng.Rng` give
  access to the maze, to ghost movement and to the seeded generator.

## What it does not do

Turns advance only when you enter a key. Nothing moves in real time. There is
one maze. There are no power pellets, and ghosts cannot be eaten. Scores are
not saved between games.

## Running the tests

```
pip install .[test]
pytest
```