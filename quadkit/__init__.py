"""Building blocks for frame-based games: colors, 2D geometry, sprite animation, slot storage and input tracking."""

__version__ = "0.3.25"