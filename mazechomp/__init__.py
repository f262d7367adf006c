"""A deterministic, turn-based maze chase game for the terminal."""

__version__ = "1.0.0"
__all__ = ["board", "cli", "controls", "game", "ghost", "render", "rng", "scenarios"]