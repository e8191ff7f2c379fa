"""2D computational geometry: points, strokes, a quadtree index and path unscrambling."""

__version__ = "0.1.0"