"""Tests for the Point and Box value types."""

from __future__ import annotations

import math
import unittest

from bedpack.geometry import (
    Box, InvalidGeometryError, Point, box_at, box_from_bounds,
)


class TestPoint(unittest.TestCase):

    def test_defaults_to_origin(self):
        p = Point()
        self.assertEqual(p.x, 0)
        self.assertEqual(p.y, 0)

    def test_coordinates(self):
        p = Point(3.14, 6.7)
        self.assertEqual(p.x, 3.14)
        self.assertEqual(p.y, 6.7)

    def test_addition(self):
        self.assertEqual(Point(2, 1) + Point(3, 2), Point(5, 3))

    def test_subtraction(self):
        self.assertEqual(Point(5, 1) - Point(6, 0), Point(-1, 1))

    def test_distance(self):
        self.assertEqual(Point().distance(Point(3, 4)), 5)

    def test_str(self):
        self.assertEqual(str(Point(3.14, 6.7)), "(3.14, 6.7)")
        self.assertEqual(str(Point(-5, 0)), "(-5, 0)")

    def test_equality_is_exact(self):
        self.assertNotEqual(Point(0.1 + 0.2, 0), Point(0.3, 0))

    def test_immutable(self):
        p = Point(1, 2)
        with self.assertRaises(AttributeError):
            p.x = 5


class TestBox(unittest.TestCase):

    def setUp(self):
        self.box = Box(5, 10)

    def test_dimensions(self):
        self.assertEqual(self.box.width, 5)
        self.assertEqual(self.box.height, 10)

    def test_default_center_is_origin(self):
        self.assertEqual(self.box.center, Point())

    def test_named_corners(self):
        self.assertEqual(self.box.corner("tl"), Point(-2.5, 5))
        self.assertEqual(self.box.corner("tr"), Point(2.5, 5))
        self.assertEqual(self.box.corner("dr"), Point(2.5, -5))
        self.assertEqual(self.box.corner("dl"), Point(-2.5, -5))

    def test_all_corners_ccw_from_bottom_left(self):
        expected = [Point(-2.5, -5), Point(2.5, -5), Point(2.5, 5), Point(-2.5, 5)]
        self.assertEqual(self.box.corners(), expected)
        self.assertEqual(self.box.corner("all"), expected)
        self.assertEqual(self.box.hull(), expected)

    def test_unknown_corner(self):
        with self.assertRaises(InvalidGeometryError):
            self.box.corner("middle")

    def test_translated_moves_min_and_max(self):
        moved = self.box.translated(Point(2.5, 5))
        self.assertEqual(moved.min, Point(0, 0))
        self.assertEqual(moved.max, Point(5, 10))
        self.assertEqual(moved.center, Point(2.5, 5))

    def test_translated_leaves_original_untouched(self):
        self.box.translated(Point(10, 10))
        self.assertEqual(self.box.center, Point())

    def test_str(self):
        self.assertEqual(str(self.box), "(-2.5, -5) by (2.5, 5)")

    def test_equality_uses_size_and_center(self):
        self.assertEqual(box_at(2, 2, 1, 1), box_at(2, 2, 1, 1))
        self.assertNotEqual(box_at(2, 2, 1, 1), box_at(2, 3, 1, 1))
        self.assertNotEqual(box_at(2, 2, 1, 1), box_at(2, 2, 1, 1.5))

    def test_distance_between_centers(self):
        self.assertEqual(box_at(1, 1).distance(box_at(4, 4, 3, 4)), 5)

    def test_area(self):
        self.assertEqual(self.box.area, 50)

    def test_non_positive_dimensions_rejected(self):
        for w, h in ((0, 1), (1, 0), (-2, 3), (3, -2)):
            with self.subTest(w=w, h=h):
                with self.assertRaises(InvalidGeometryError):
                    Box(w, h)

    def test_non_finite_dimensions_rejected(self):
        for w, h in ((math.inf, 1), (1, math.inf), (math.nan, 1), (1, -math.inf)):
            with self.subTest(w=w, h=h):
                with self.assertRaises(InvalidGeometryError):
                    Box(w, h)

    def test_from_bounds(self):
        b = box_from_bounds(0, 0, 4, 2)
        self.assertEqual(b.width, 4)
        self.assertEqual(b.height, 2)
        self.assertEqual(b.center, Point(2, 1))


if __name__ == "__main__":
    unittest.main()
