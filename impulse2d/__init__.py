"""Impulse-based 2D rigid body physics with circles and convex polygons."""

__version__ = "1.0.0"

__all__ = ["vecmath", "shapes", "body", "collision", "manifold", "scene", "clock"]