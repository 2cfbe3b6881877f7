"""A labyrinth game with enemies that chase the player, plus its frame-buffer and grid helpers."""

__version__ = "0.1.0"