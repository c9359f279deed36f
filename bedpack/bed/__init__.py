"""Bed: the placement surface and the spiral placement engine.

Submodules:
  models         Shape dataclasses, BedSpec, origin constants, BedConfigError.
  outline        Bed center and outline polygon construction.
  engine         Bed class (spiral placement with single-anchor search).
  batch          Replay known boxes, then place new ones (place_box/place_boxes).
  serialization  Descriptor parsing and JSON conversion.
  validation     Descriptor validation and Shapely layout cross-check.
  loader         Read descriptor / box list JSON files.
"""

from .models import (
    BedConfigError, BedSpec, BedShape, RectangularShape, RoundShape,
    ORIGIN_CORNER, ORIGIN_CENTER,
)
from .outline import bed_center, bed_outline, round_outline
from .engine import Bed, last_box
from .batch import build_bed, place_box, place_boxes
from .serialization import (
    parse_bed_descriptor, parse_box, parse_boxes,
    bed_to_dict, box_to_dict, point_to_dict,
)
from .validation import validate_bed_descriptor, validate_layout
from .loader import load_bed, load_boxes

__all__ = [
    # Models
    "BedConfigError", "BedSpec", "BedShape", "RectangularShape", "RoundShape",
    "ORIGIN_CORNER", "ORIGIN_CENTER",
    # Outline
    "bed_center", "bed_outline", "round_outline",
    # Engine
    "Bed", "last_box",
    # Batch
    "build_bed", "place_box", "place_boxes",
    # Serialization
    "parse_bed_descriptor", "parse_box", "parse_boxes",
    "bed_to_dict", "box_to_dict", "point_to_dict",
    # Validation / Loading
    "validate_bed_descriptor", "validate_layout", "load_bed", "load_boxes",
]
