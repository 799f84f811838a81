"""A tile-based coin collecting puzzle game: map checks, XPM sprites and game state."""

__version__ = "0.1.0"