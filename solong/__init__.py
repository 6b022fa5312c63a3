"""A tile-based puzzle game with map checking, XPM sprites and named colours."""

__version__ = "0.1.0"
__all__ = ["colors", "xpm", "gamemap", "game", "app"]