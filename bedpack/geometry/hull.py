"""Convex hull engine: monotone chain plus containment/disjointness tests.

Hulls are plain lists of Points in counter-clockwise order with no
repeated vertices and no collinear interior points.  All predicates use
exact arithmetic on the cross product, there is no epsilon.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Sequence

from .primitives import Box, InvalidGeometryError, Point


Shape = Point | Box


class Containment(IntEnum):
    """Result of :func:`inside_hull`."""

    OUTSIDE = -1
    ON_BOUNDARY = 0
    INSIDE = 1


def cross(p0: Point, p1: Point, p2: Point) -> float:
    """Cross product of p0->p1 and p0->p2.

    Positive: p2 is left of the directed line p0->p1 (CCW turn).
    Zero: collinear.  Negative: p2 is right of the line.
    """
    return (p1.x - p0.x) * (p2.y - p0.y) - (p1.y - p0.y) * (p2.x - p0.x)


def _sort_key(p: Point) -> tuple[float, float]:
    return (p.x, p.y)


def _half_chain(points: Iterable[Point]) -> list[Point]:
    chain: list[Point] = []
    for p in points:
        # Pop on <= 0 so collinear points never stay on the hull
        while len(chain) >= 2 and cross(chain[-2], chain[-1], p) <= 0:
            chain.pop()
        chain.append(p)
    return chain


def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Andrew's monotone chain.  Returns the hull in CCW order.

    The first vertex is the lowest-x (then lowest-y) point.  Repeated
    points are collapsed.  The input sequence is not modified.
    """
    pts: list[Point] = []
    for p in sorted(points, key=_sort_key):
        if pts and p == pts[-1]:
            continue
        pts.append(p)
    if len(pts) <= 1:
        return pts

    lower = _half_chain(pts)
    upper = _half_chain(reversed(pts))
    return lower[:-1] + upper[:-1]


def convex_hull_boxes(boxes: Sequence[Box]) -> list[Point]:
    """Convex hull around the corners of a set of boxes."""
    return convex_hull([c for b in boxes for c in b.corners()])


def shape_points(shape: Shape) -> list[Point]:
    """Points that represent *shape* in the hull predicates."""
    if isinstance(shape, Box):
        return shape.corners()
    if isinstance(shape, Point):
        return [shape]
    raise InvalidGeometryError(
        f"Expected a Point or Box, got {type(shape).__name__}"
    )


def _require_hull(hull: Sequence[Point]) -> None:
    if not hull:
        raise InvalidGeometryError("Hull must contain at least one point")


def _on_segment(p: Point, a: Point, b: Point) -> bool:
    """True if p (known to be collinear with a-b) lies within the segment."""
    return (min(a.x, b.x) <= p.x <= max(a.x, b.x)
            and min(a.y, b.y) <= p.y <= max(a.y, b.y))


def inside_hull(shape: Shape, hull: Sequence[Point]) -> Containment:
    """Classify *shape* against a CCW *hull*.

    Returns OUTSIDE as soon as one test point is right of an edge or on
    an edge's supporting line but off the segment.  If every test point
    sits on an edge the result is ON_BOUNDARY, otherwise INSIDE.
    """
    _require_hull(hull)
    points = shape_points(shape)
    n = len(hull)

    on_edge = 0
    for p in points:
        for j in range(n):
            a, b = hull[j], hull[(j + 1) % n]
            c = cross(a, b, p)
            if c < 0:
                return Containment.OUTSIDE
            if c == 0:
                if not _on_segment(p, a, b):
                    return Containment.OUTSIDE
                on_edge += 1
                break

    return Containment.ON_BOUNDARY if on_edge == len(points) else Containment.INSIDE


def outside_hull(shape: Shape, hull: Sequence[Point]) -> bool:
    """True if *shape* and *hull* do not overlap (touching is allowed).

    A test point strictly left of every hull edge is surrounded by the
    hull, which means overlap.  For boxes the reverse direction is also
    checked: no hull vertex may lie inside or on the box.
    """
    _require_hull(hull)
    n = len(hull)

    for p in shape_points(shape):
        n_left = sum(
            1 for j in range(n)
            if cross(hull[j], hull[(j + 1) % n], p) > 0
        )
        if n_left == n:
            return False

    if isinstance(shape, Box):
        box_hull = shape.hull()
        for v in hull:
            if inside_hull(v, box_hull) >= Containment.ON_BOUNDARY:
                return False

    return True
