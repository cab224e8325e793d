"""A turn-based terminal role-playing game with battles, dungeons, loot and saves."""

__version__ = "0.1.0"