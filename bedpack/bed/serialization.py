"""Bed and box serialization: descriptor parsing and JSON conversion.

Bed descriptor format (as produced by the printer front-end):

    {"printerType": "CARTESIAN", "placeOfOrigin": "CORNER",
     "xLength": 200, "yLength": 150, "margin": 2}

``printerType`` "DELTA" describes a round bed whose diameter is
``xLength``; ``yLength`` is ignored for it.
"""

from __future__ import annotations

from bedpack.config import RULES
from bedpack.geometry import Box, Point, box_from_bounds

from .engine import Bed
from .models import (
    BedConfigError, BedSpec, RectangularShape, RoundShape,
)
from .validation import validate_bed_descriptor


# ── Parsing ────────────────────────────────────────────────────────


def parse_bed_descriptor(data: dict) -> BedSpec:
    """Parse a bed descriptor dict into a BedSpec.

    Raises BedConfigError listing every problem if the descriptor is invalid.
    """
    errors = validate_bed_descriptor(data)
    if errors:
        raise BedConfigError(errors)

    printer = str(data["printerType"]).upper()
    margin = float(data.get("margin", RULES.default_margin))
    if printer == "DELTA":
        shape = RoundShape(diameter=float(data["xLength"]))
    else:
        shape = RectangularShape(width=float(data["xLength"]),
                                 height=float(data["yLength"]))
    return BedSpec(
        shape=shape,
        origin=str(data["placeOfOrigin"]).lower(),
        margin=margin,
    )


def parse_box(data: dict) -> Box:
    """Parse a box object.

    Accepts either ``{"width": w, "height": h}`` with an optional
    ``"x"``/``"y"`` center, or a bounding box
    ``{"min": {"x": .., "y": ..}, "max": {"x": .., "y": ..}}``.
    """
    if "min" in data and "max" in data:
        lo, hi = data["min"], data["max"]
        return box_from_bounds(float(lo["x"]), float(lo["y"]),
                               float(hi["x"]), float(hi["y"]))
    return Box(
        float(data["width"]),
        float(data["height"]),
        Point(float(data.get("x", 0.0)), float(data.get("y", 0.0))),
    )


def parse_boxes(data: list) -> list[Box]:
    return [parse_box(b) for b in data]


# ── Serialization ──────────────────────────────────────────────────


def point_to_dict(p: Point) -> dict:
    return {"x": p.x, "y": p.y}


def box_to_dict(box: Box) -> dict:
    """Serialize a Box to a JSON-safe dict (parse_box accepts it back)."""
    return {
        "width": box.width,
        "height": box.height,
        "x": box.center.x,
        "y": box.center.y,
    }


def bed_to_dict(bed: Bed) -> dict:
    """Serialize a Bed's configuration, outline and placed boxes."""
    if isinstance(bed.shape, RoundShape):
        shape = {"type": "round", "diameter": bed.shape.diameter}
    else:
        shape = {"type": "rectangular",
                 "width": bed.shape.width, "height": bed.shape.height}
    return {
        "shape": shape,
        "origin": bed.origin,
        "margin": bed.margin,
        "center": point_to_dict(bed.center),
        "outline": [point_to_dict(p) for p in bed.outline],
        "boxes": [box_to_dict(b) for b in bed.boxes],
    }
