"""Bed center and outline construction."""

from __future__ import annotations

import math

from bedpack.config import RULES
from bedpack.geometry import Box, Point

from .models import ORIGIN_CORNER, BedShape, RectangularShape, RoundShape


def bed_center(shape: BedShape, origin: str) -> Point:
    """Position of the bed's center in bed coordinates.

    Round beds are always centered on the origin.  Rectangular beds
    with the origin in a corner have their center at (width/2, height/2).
    """
    if isinstance(shape, RoundShape):
        return Point(0, 0)
    if origin == ORIGIN_CORNER:
        return Point(shape.width / 2.0, shape.height / 2.0)
    return Point(0, 0)


def round_outline(
    radius: float, step: float = RULES.round_outline_step_rad,
) -> list[Point]:
    """Polygon approximating a circle around the origin, CCW.

    Sampled from angle 2*pi downwards in fixed steps until the angle
    reaches 0.  The first vertex is the top of the circle.
    """
    outline: list[Point] = []
    angle = 2 * math.pi
    while angle > 0:
        outline.append(Point(radius * math.sin(angle), radius * math.cos(angle)))
        angle -= step
    return outline


def bed_outline(shape: BedShape, center: Point) -> list[Point]:
    """Outline polygon of the bed in CCW order."""
    if isinstance(shape, RectangularShape):
        return Box(shape.width, shape.height, center).hull()
    return round_outline(shape.radius)
