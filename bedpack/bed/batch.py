"""Batch placement: rebuild a bed from known boxes, then place new ones."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from bedpack.geometry import Box, Point

from .engine import Bed
from .models import BedSpec


log = logging.getLogger(__name__)


def build_bed(spec: BedSpec, current_boxes: Iterable[Box] | None = None) -> Bed:
    """Create a Bed and replay *current_boxes* at their own centers.

    Replayed boxes are not checked; they are assumed to come from an
    earlier, valid placement.
    """
    bed = Bed.from_spec(spec)
    for box in current_boxes or ():
        bed.add_box_at_position(box, box.center)
    if len(bed):
        log.debug("Replayed %d existing boxes", len(bed))
    return bed


def place_box(
    spec: BedSpec,
    new_box: Box,
    current_boxes: Iterable[Box] | None = None,
) -> Point | None:
    """Position for *new_box* on a bed already holding *current_boxes*."""
    return build_bed(spec, current_boxes).add_box(new_box)


def place_boxes(
    spec: BedSpec,
    new_boxes: Sequence[Box],
    current_boxes: Iterable[Box] | None = None,
) -> list[Point | None]:
    """Place *new_boxes* one after the other.

    Returns one entry per new box: its position, or None if it did not
    fit.  A failed box does not stop the ones after it.
    """
    bed = build_bed(spec, current_boxes)
    positions = [bed.add_box(b) for b in new_boxes]
    n_failed = sum(1 for p in positions if p is None)
    if n_failed:
        log.warning("%d of %d boxes could not be placed", n_failed, len(positions))
    return positions
