"""Point and Box value types.

All comparisons are exact float comparisons.  The placement tests rely
on exact coordinates (e.g. 4.5, 7.5) so no tolerance is applied anywhere.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field


class InvalidGeometryError(ValueError):
    """Raised for degenerate geometry (zero-size boxes, empty hulls, ...)."""


def _fmt(v: float) -> str:
    """Format a coordinate the short way: 5.0 -> '5', 3.14 -> '3.14'."""
    if v.is_integer() and abs(v) < 1e15:
        return str(int(v))
    return repr(v)


# ── Point ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)})"

    def distance(self, other: Point) -> float:
        """Euclidean distance to *other*."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# ── Box ────────────────────────────────────────────────────────────

CORNER_ORDER = ("dl", "dr", "tr", "tl")


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle tracked by its center.

    ``min`` and ``max`` are derived from ``center`` on every access, so
    they can never drift away from it.  Equality compares width, height
    and center only.
    """

    width: float
    height: float
    center: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) and v > 0 for v in (self.width, self.height)):
            raise InvalidGeometryError(
                f"Box dimensions must be finite and > 0, got {self.width} x {self.height}"
            )
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))

    @property
    def min(self) -> Point:
        return Point(self.center.x - self.width / 2.0,
                     self.center.y - self.height / 2.0)

    @property
    def max(self) -> Point:
        return Point(self.center.x + self.width / 2.0,
                     self.center.y + self.height / 2.0)

    def corner(self, which: str) -> Point | list[Point]:
        """Return one corner ('dl', 'dr', 'tr', 'tl') or all of them ('all')."""
        lo, hi = self.min, self.max
        if which == "dl":
            return lo
        if which == "dr":
            return Point(hi.x, lo.y)
        if which == "tr":
            return hi
        if which == "tl":
            return Point(lo.x, hi.y)
        if which == "all":
            return self.corners()
        raise InvalidGeometryError(
            f"Unknown corner '{which}', expected one of {CORNER_ORDER + ('all',)}"
        )

    def corners(self) -> list[Point]:
        """The four corners counter-clockwise from bottom-left (dl, dr, tr, tl)."""
        lo, hi = self.min, self.max
        return [lo, Point(hi.x, lo.y), hi, Point(lo.x, hi.y)]

    def hull(self) -> list[Point]:
        """Convex hull of the box, which is just its corners in CCW order."""
        return self.corners()

    def translated(self, position: Point) -> Box:
        """Return a copy of this box centered at *position*."""
        return Box(self.width, self.height, position)

    def distance(self, other: Box) -> float:
        """Center-to-center distance."""
        return self.center.distance(other.center)

    @property
    def area(self) -> float:
        return self.width * self.height

    def __str__(self) -> str:
        return f"{self.min} by {self.max}"


def box_at(width: float, height: float, x: float = 0.0, y: float = 0.0) -> Box:
    """Shorthand for ``Box(width, height, Point(x, y))``."""
    return Box(width, height, Point(x, y))


def box_from_bounds(min_x: float, min_y: float, max_x: float, max_y: float) -> Box:
    """Build a Box from bounding-box extremes."""
    width = max_x - min_x
    height = max_y - min_y
    return Box(width, height, Point(min_x + width / 2.0, min_y + height / 2.0))
