"""Geometry primitives and block-to-lot subdivision for procedural city generation."""

__version__ = "0.1.1"

__all__ = [
    "area",
    "block",
    "line",
    "linesegment",
    "polygon",
    "primitives",
    "ray",
    "shape",
    "subregion",
    "urbanentity",
]