"""A text-based dungeon crawler: characters, items, monsters, rooms and the game loop."""

__version__ = "0.1.0"