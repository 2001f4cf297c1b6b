"""Geometric shapes with area and volume computed in a chosen number kind."""

__version__ = "0.1.0"
__all__ = ["numeric", "shapes"]