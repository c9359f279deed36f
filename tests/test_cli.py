"""Tests for the ``python -m bedpack`` command line.

Run: python -m pytest tests/test_cli.py -v
"""

from __future__ import annotations

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from bedpack.__main__ import build_parser, main
from tests.bed_fixtures import (
    CARTESIAN_9X9, DELTA_11, SPIRAL_9X9_X, SPIRAL_9X9_Y,
)


class TestCli(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.boxes = self._write("boxes.json", [{"width": 2, "height": 2}] * 9)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name: str, data) -> str:
        p = self.dir / name
        p.write_text(json.dumps(data), encoding="utf-8")
        return str(p)

    def _run(self, argv: list[str]) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_place_all(self):
        bed = self._write("bed.json", CARTESIAN_9X9)
        code, out, _ = self._run(["place", "--bed", bed, "--boxes", self.boxes])
        self.assertEqual(code, 0)
        result = json.loads(out)
        self.assertEqual(result["placed"], 9)
        self.assertEqual(result["errors"], [])
        self.assertEqual(result["positions"],
                         [[x, y] for x, y in zip(SPIRAL_9X9_X, SPIRAL_9X9_Y)])

    def test_place_partial_failure(self):
        bed = self._write("bed.json", DELTA_11)
        code, out, _ = self._run(["place", "--bed", bed, "--boxes", self.boxes])
        self.assertEqual(code, 2)
        result = json.loads(out)
        self.assertEqual(result["placed"], 2)
        self.assertIsNone(result["positions"][-1])

    def test_place_with_current_boxes(self):
        bed = self._write("bed.json", CARTESIAN_9X9)
        current = self._write("current.json", [{"width": 2, "height": 2, "x": 4.5, "y": 4.5}])
        new = self._write("new.json", [{"width": 2, "height": 2}])
        code, out, _ = self._run(
            ["place", "--bed", bed, "--boxes", new, "--current", current])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["positions"], [[4.5, 7.5]])

    def test_margin_override(self):
        bed = self._write("bed.json", {**CARTESIAN_9X9, "xLength": 20, "yLength": 20})
        new = self._write("new.json", [{"width": 2, "height": 2}] * 2)
        code, out, _ = self._run(
            ["place", "--bed", bed, "--boxes", new, "--margin", "3"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["positions"], [[10.0, 10.0], [10.0, 15.0]])

    def test_invalid_bed(self):
        bed = self._write("bed.json", {"printerType": "CARTESIAN"})
        code, out, err = self._run(["place", "--bed", bed, "--boxes", self.boxes])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("placeOfOrigin not found", err)

    def test_missing_file(self):
        code, _, err = self._run(
            ["place", "--bed", str(self.dir / "nope.json"), "--boxes", self.boxes])
        self.assertEqual(code, 1)
        self.assertIn("Error", err)

    def test_non_utf8_bed_file(self):
        bed = self.dir / "bed.json"
        bed.write_bytes(b'{"printerType": "\xff"}')
        code, out, err = self._run(["outline", "--bed", str(bed)])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error", err)

    def test_outline(self):
        bed = self._write("bed.json", CARTESIAN_9X9)
        code, out, _ = self._run(["outline", "--bed", bed])
        self.assertEqual(code, 0)
        result = json.loads(out)
        self.assertEqual(result["center"], {"x": 4.5, "y": 4.5})
        self.assertEqual(result["outline"][2], {"x": 9.0, "y": 9.0})

    def test_parser_requires_command(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                build_parser().parse_args([])


if __name__ == "__main__":
    unittest.main()
