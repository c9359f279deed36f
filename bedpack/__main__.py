"""
bedpack: command-line entry point.

Usage:
    python -m bedpack place --bed bed.json --boxes new.json
    python -m bedpack place --bed bed.json --boxes new.json --current placed.json --margin 2
    python -m bedpack outline --bed bed.json
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from bedpack.bed import (
    BedConfigError, bed_to_dict, build_bed, load_bed, load_boxes,
    validate_layout,
)


log = logging.getLogger("bedpack")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bedpack",
        description="Place rectangular parts on a build bed (spiral strategy)",
    )
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="More logging (-v info, -vv debug)")
    sub = p.add_subparsers(dest="cmd", required=True)

    pl = sub.add_parser("place", help="Find positions for new boxes")
    pl.add_argument("--bed", required=True, help="Path to bed descriptor JSON")
    pl.add_argument("--boxes", required=True, help="Path to JSON list of new boxes")
    pl.add_argument("--current", default=None,
                    help="Path to JSON list of boxes already on the bed")
    pl.add_argument("--margin", type=float, default=None,
                    help="Override the descriptor's margin")

    ol = sub.add_parser("outline", help="Print the bed center and outline")
    ol.add_argument("--bed", required=True, help="Path to bed descriptor JSON")

    return p


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _cmd_place(args: argparse.Namespace) -> int:
    spec = load_bed(args.bed)
    if args.margin is not None:
        spec = dataclasses.replace(spec, margin=args.margin)
    new_boxes = load_boxes(args.boxes)
    current = load_boxes(args.current) if args.current else []

    bed = build_bed(spec, current)
    errors = validate_layout(bed)
    for e in errors:
        log.warning("Existing layout: %s", e)

    positions = [bed.add_box(b) for b in new_boxes]
    out = {
        "positions": [[p.x, p.y] if p is not None else None for p in positions],
        "placed": sum(1 for p in positions if p is not None),
        "errors": errors,
    }
    print(json.dumps(out, indent=2))
    return 0 if out["placed"] == len(positions) else 2


def _cmd_outline(args: argparse.Namespace) -> int:
    bed = build_bed(load_bed(args.bed))
    data = bed_to_dict(bed)
    print(json.dumps(
        {"center": data["center"], "outline": data["outline"]}, indent=2,
    ))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.cmd == "place":
            return _cmd_place(args)
        if args.cmd == "outline":
            return _cmd_outline(args)
    except (BedConfigError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 1


if __name__ == "__main__":
    sys.exit(main())
