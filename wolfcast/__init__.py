"""Scene parsing, map validation, XPM textures and grid raycasting for .cub worlds."""

__version__ = "0.1.0"