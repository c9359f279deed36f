"""Geometry: Point/Box primitives and the convex-hull engine.

Submodules:
  primitives  Point and Box value types.
  hull        Monotone-chain hull, containment and disjointness tests.
"""

from .primitives import (
    Point, Box, InvalidGeometryError, CORNER_ORDER, box_at, box_from_bounds,
)
from .hull import (
    Containment, Shape, cross, convex_hull, convex_hull_boxes,
    shape_points, inside_hull, outside_hull,
)

__all__ = [
    # Primitives
    "Point", "Box", "InvalidGeometryError", "CORNER_ORDER",
    "box_at", "box_from_bounds",
    # Hull engine
    "Containment", "Shape", "cross", "convex_hull", "convex_hull_boxes",
    "shape_points", "inside_hull", "outside_hull",
]
