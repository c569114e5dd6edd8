"""Resources, timing, game state and system scheduling for a multiplayer minesweeper game."""

__version__ = "0.1.0"