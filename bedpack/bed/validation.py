"""Bed validation: descriptor checks and layout cross-checks."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from shapely.geometry import Polygon, box as shapely_box

if TYPE_CHECKING:
    from .engine import Bed


VALID_PRINTER_TYPES = ("CARTESIAN", "DELTA")
VALID_PLACES_OF_ORIGIN = ("CORNER", "CENTER")


def _positive_number(value) -> bool:
    if isinstance(value, bool):
        return False
    try:
        v = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(v) and v > 0


def validate_bed_descriptor(data: dict) -> list[str]:
    """Validate a bed descriptor dict. Returns error messages (empty = valid)."""
    if not isinstance(data, dict):
        return [f"Bed descriptor must be an object, got {type(data).__name__}"]

    errors: list[str] = []

    # ── Printer type ──
    printer = data.get("printerType")
    if printer is None:
        errors.append("printerType not found")
    elif str(printer).upper() not in VALID_PRINTER_TYPES:
        errors.append(
            f"printerType should be one of {VALID_PRINTER_TYPES}, got '{printer}'"
        )

    # ── Origin ──
    origin = data.get("placeOfOrigin")
    if origin is None:
        errors.append("placeOfOrigin not found")
    elif str(origin).upper() not in VALID_PLACES_OF_ORIGIN:
        errors.append(
            f"placeOfOrigin should be one of {VALID_PLACES_OF_ORIGIN}, got '{origin}'"
        )

    # ── Dimensions ──
    if "xLength" not in data:
        errors.append("xLength not found")
    elif not _positive_number(data["xLength"]):
        errors.append(f"xLength must be a number > 0, got {data['xLength']!r}")

    # yLength is only needed for cartesian printers
    if printer is not None and str(printer).upper() == "CARTESIAN":
        if "yLength" not in data:
            errors.append("yLength not found (required for CARTESIAN printers)")
        elif not _positive_number(data["yLength"]):
            errors.append(f"yLength must be a number > 0, got {data['yLength']!r}")

    # ── Margin ──
    if data.get("margin") is not None:
        margin = data["margin"]
        try:
            ok = (not isinstance(margin, bool)
                  and math.isfinite(float(margin)) and float(margin) >= 0)
        except (TypeError, ValueError):
            ok = False
        if not ok:
            errors.append(f"margin must be a number >= 0, got {margin!r}")

    return errors


def validate_layout(bed: Bed) -> list[str]:
    """Cross-check a bed's placed boxes with Shapely.

    Every box must be covered by the outline and no two boxes may share
    any area.  Returns error messages (empty = valid).  Useful after
    replaying boxes with ``add_box_at_position``, which skips all checks.
    """
    errors: list[str] = []
    outline_poly = Polygon([p.as_tuple() for p in bed.outline])
    if not outline_poly.is_valid or outline_poly.area <= 0:
        return ["Bed outline polygon is invalid or has zero area"]

    rects = []
    for i, b in enumerate(bed.boxes):
        lo, hi = b.min, b.max
        rect = shapely_box(lo.x, lo.y, hi.x, hi.y)
        if not outline_poly.covers(rect):
            errors.append(f"Box {i} {b} is not inside the bed outline")
        rects.append(rect)

    for i in range(len(rects)):
        for j in range(i + 1, len(rects)):
            overlap = rects[i].intersection(rects[j]).area
            if overlap > 0:
                errors.append(
                    f"Boxes {i} and {j} overlap by {overlap:g} square units"
                )

    return errors
