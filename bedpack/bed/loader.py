"""Loader: reads bed descriptor and box list JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from bedpack.geometry import Box

from .models import BedConfigError, BedSpec
from .serialization import parse_bed_descriptor, parse_boxes


def _read_json(path: Path):
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise BedConfigError(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise BedConfigError(f"{path}: not UTF-8 text ({e})") from e


def load_bed(path: Path | str) -> BedSpec:
    """Load a bed descriptor file.  Raises BedConfigError if it is invalid."""
    data = _read_json(Path(path))
    try:
        return parse_bed_descriptor(data)
    except BedConfigError as e:
        raise BedConfigError([f"{path}: {msg}" for msg in e.errors]) from e


def load_boxes(path: Path | str) -> list[Box]:
    """Load a JSON list of box objects (see ``parse_box`` for the formats)."""
    data = _read_json(Path(path))
    if not isinstance(data, list):
        raise BedConfigError(f"{path}: expected a list of boxes")
    try:
        return parse_boxes(data)
    except KeyError as e:
        raise BedConfigError(f"{path}: box is missing key {e}") from e
    except (TypeError, ValueError) as e:
        raise BedConfigError(f"{path}: invalid box ({e})") from e
