"""Shared placement constants.

The engine, the descriptor parser and the CLI all read their defaults
from ``RULES`` so a single change here keeps them in sync.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlacementRules:
    """Defaults for bed construction and the spiral heuristic."""

    default_margin: float = 1.0
    """Clearance between a new box and the box it is placed next to."""

    round_outline_step_rad: float = 0.2
    """Angular step used to sample the outline polygon of a round bed."""

    directions: tuple[str, ...] = ("above", "left", "below", "right")
    """Order in which candidate positions around the anchor are tried."""


# Module-level singleton, importable everywhere.
RULES = PlacementRules()
