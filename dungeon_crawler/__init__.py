"""A turn-based terminal dungeon crawler with walls, floors and paired portals."""

__version__ = "0.1.0"
__all__ = ["character", "game", "level", "tiles", "ui"]