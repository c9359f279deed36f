"""Spiral placement engine: the Bed and its placed-box list.

A Bed starts empty.  The first box goes to the bed center; every later
box is tried above, left, below and right of the most recently placed
box (the anchor), and the first direction that keeps the box on the bed
without hitting another box wins.  There is no backtracking: if all four
directions fail the box is not placed and the bed is left untouched.

The Bed does no locking.  Callers sharing a Bed between threads must
serialize ``add_box`` / ``remove_box`` themselves.
"""

from __future__ import annotations

import logging
from typing import Sequence

from bedpack.config import RULES
from bedpack.geometry import Box, Containment, Point, inside_hull, outside_hull

from .models import BedShape, BedSpec, ORIGIN_CORNER
from .outline import bed_center, bed_outline


log = logging.getLogger(__name__)


def last_box(boxes: Sequence[Box]) -> Box | None:
    """Most recently placed box, or None for an empty sequence."""
    return boxes[-1] if boxes else None


class Bed:
    """Placement surface with an outline, a margin and placed boxes."""

    def __init__(
        self,
        shape: BedShape,
        origin: str = ORIGIN_CORNER,
        margin: float = RULES.default_margin,
    ) -> None:
        # BedSpec validates shape, origin and margin
        spec = BedSpec(shape=shape, origin=origin, margin=margin)
        self.shape = spec.shape
        self.origin = spec.origin
        self._margin = float(spec.margin)
        self._center = bed_center(self.shape, self.origin)
        self._outline = bed_outline(self.shape, self._center)
        self._boxes: list[Box] = []

    @classmethod
    def from_spec(cls, spec: BedSpec) -> Bed:
        return cls(spec.shape, spec.origin, spec.margin)

    # ── Read-only state ────────────────────────────────────────────

    @property
    def margin(self) -> float:
        return self._margin

    @property
    def center(self) -> Point:
        return self._center

    @property
    def outline(self) -> list[Point]:
        return list(self._outline)

    @property
    def boxes(self) -> tuple[Box, ...]:
        return tuple(self._boxes)

    def is_empty(self) -> bool:
        return not self._boxes

    def last_box(self) -> Box | None:
        return last_box(self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)

    def __repr__(self) -> str:
        return (f"Bed(shape={self.shape!r}, origin={self.origin!r}, "
                f"margin={self._margin}, boxes={len(self._boxes)})")

    # ── Feasibility tests ──────────────────────────────────────────

    def is_on_bed(self, box: Box) -> bool:
        """True if the box lies inside the outline (touching it is fine)."""
        return inside_hull(box, self._outline) >= Containment.ON_BOUNDARY

    def collides(self, box: Box) -> bool:
        """True if *box* overlaps any box already on the bed."""
        for placed in self._boxes:
            # outside_hull cannot tell two identical boxes apart
            if box == placed:
                return True
            if not outside_hull(box, placed.hull()):
                return True
        return False

    def can_place_at(self, box: Box, position: Point) -> bool:
        """True if *box* moved to *position* fits on the bed without collisions."""
        candidate = box.translated(position)
        return self.is_on_bed(candidate) and not self.collides(candidate)

    def try_at(self, direction: str, new_box: Box, anchor: Box) -> Point | None:
        """Position next to *anchor* in *direction* if *new_box* fits there.

        The gap between the two boxes equals the bed margin.
        """
        hdist = 0.5 * (anchor.width + new_box.width) + self._margin
        vdist = 0.5 * (anchor.height + new_box.height) + self._margin
        c = anchor.center

        if direction == "left":
            position = Point(c.x - hdist, c.y)
        elif direction == "right":
            position = Point(c.x + hdist, c.y)
        elif direction == "above":
            position = Point(c.x, c.y + vdist)
        elif direction == "below":
            position = Point(c.x, c.y - vdist)
        else:
            raise ValueError(
                f"Unknown direction '{direction}', expected one of {RULES.directions}"
            )

        if self.can_place_at(new_box, position):
            return position
        log.debug("Rejected %s of anchor %s at %s", direction, c, position)
        return None

    # ── Mutation ───────────────────────────────────────────────────

    def add_box_at_position(self, box: Box, position: Point) -> Box:
        """Put *box* at *position* without any checks.  Returns the placed box."""
        placed = box.translated(position)
        self._boxes.append(placed)
        return placed

    def add_box(self, new_box: Box) -> Point | None:
        """Place *new_box* with the spiral strategy.

        Returns the accepted center, or None if the box does not fit.
        Only the box's width and height are used; its current center is
        ignored.  Nothing changes on failure.
        """
        anchor = self.last_box()
        if anchor is None:
            if self.can_place_at(new_box, self._center):
                self.add_box_at_position(new_box, self._center)
                log.info("Placed %gx%g box at bed center %s",
                         new_box.width, new_box.height, self._center)
                return self._center
            log.info("%gx%g box does not fit on the empty bed",
                     new_box.width, new_box.height)
            return None

        for direction in RULES.directions:
            position = self.try_at(direction, new_box, anchor)
            if position is not None:
                self.add_box_at_position(new_box, position)
                log.info("Placed %gx%g box %s of %s at %s (%d on bed)",
                         new_box.width, new_box.height, direction,
                         anchor.center, position, len(self._boxes))
                return position

        log.info("No room for %gx%g box around anchor %s",
                 new_box.width, new_box.height, anchor.center)
        return None

    def remove_box(self) -> Box | None:
        """Remove and return the most recently placed box (None if empty)."""
        if not self._boxes:
            return None
        return self._boxes.pop()
