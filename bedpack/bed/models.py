"""Bed shape dataclasses, origin conventions and configuration errors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from bedpack.config import RULES


ORIGIN_CORNER = "corner"
ORIGIN_CENTER = "center"
VALID_ORIGINS = (ORIGIN_CORNER, ORIGIN_CENTER)


def _positive_finite(v: float) -> bool:
    return math.isfinite(v) and v > 0


class BedConfigError(ValueError):
    """Raised when a bed cannot be constructed from the given values.

    ``errors`` holds every problem found, so callers can report them all
    at once instead of fixing one at a time.
    """

    def __init__(self, errors: list[str] | str) -> None:
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("Invalid bed: " + "; ".join(self.errors))


# ── Shapes ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RectangularShape:
    width: float
    height: float

    def __post_init__(self) -> None:
        errs = []
        if not _positive_finite(self.width):
            errs.append(f"width must be finite and > 0, got {self.width}")
        if not _positive_finite(self.height):
            errs.append(f"height must be finite and > 0, got {self.height}")
        if errs:
            raise BedConfigError(errs)
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))


@dataclass(frozen=True)
class RoundShape:
    """Round bed.  Its origin is always the geometric center."""

    diameter: float

    def __post_init__(self) -> None:
        if not _positive_finite(self.diameter):
            raise BedConfigError(f"diameter must be finite and > 0, got {self.diameter}")
        object.__setattr__(self, "diameter", float(self.diameter))

    @property
    def radius(self) -> float:
        return self.diameter / 2.0


BedShape = RectangularShape | RoundShape


# ── Construction input ─────────────────────────────────────────────


@dataclass(frozen=True)
class BedSpec:
    """Everything needed to construct a Bed."""

    shape: BedShape
    origin: str = ORIGIN_CORNER
    margin: float = RULES.default_margin

    def __post_init__(self) -> None:
        errs = []
        if not isinstance(self.shape, (RectangularShape, RoundShape)):
            errs.append(f"unsupported bed shape {type(self.shape).__name__}")
        if self.origin not in VALID_ORIGINS:
            errs.append(f"origin must be one of {VALID_ORIGINS}, got '{self.origin}'")
        if not (math.isfinite(self.margin) and self.margin >= 0):
            errs.append(f"margin must be finite and >= 0, got {self.margin}")
        if errs:
            raise BedConfigError(errs)
