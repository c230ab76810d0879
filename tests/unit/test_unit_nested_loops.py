"""
Unit tests for NestedLoops orientation correction.

Tests cover containment nesting, alternating orientations, loop lengths,
the orientation_corrected flag and the rejection of open and crossing loops.
"""

import math
import unittest

from bspgeom.bspgeom_errors import CrossingBoundaryLoopsError, OpenBoundaryLoopError
from bspgeom.euclidean.twod.nested_loops import NestedLoops
from bspgeom.euclidean.twod.polygons_set import PolygonsSet

TOLERANCE = 1.0e-10

# outer square clockwise, hole counter-clockwise, island clockwise:
# every level has the wrong orientation
OUTER_CW = [(0, 0), (0, 4), (4, 4), (4, 0)]
HOLE_CCW = [(1, 1), (3, 1), (3, 3), (1, 3)]
ISLAND_CW = [(1.5, 1.5), (1.5, 2.5), (2.5, 2.5), (2.5, 1.5)]


def _signed_area(loop):
    total = 0.0
    for i, (x0, y0) in enumerate(loop):
        x1, y1 = loop[(i + 1) % len(loop)]
        total += x0 * y1 - x1 * y0
    return 0.5 * total


def _perimeter(loop):
    return sum(math.dist(loop[i], loop[(i + 1) % len(loop)]) for i in range(len(loop)))


def _three_levels():
    nested = NestedLoops(TOLERANCE)
    for loop in (OUTER_CW, HOLE_CCW, ISLAND_CW):
        nested.add(loop)
    return nested


class NestingTests(unittest.TestCase):
    """Tests for the containment tree"""

    def testThreeLevels(self):
        """Test loops are nested by containment whatever the insertion order"""
        nested = NestedLoops(TOLERANCE)
        for loop in (ISLAND_CW, OUTER_CW, HOLE_CCW):
            nested.add(loop)

        self.assertIsNone(nested.loop)
        self.assertEqual(len(nested.surrounded), 1)
        outer = nested.surrounded[0]
        self.assertEqual(len(outer.surrounded), 1)
        hole = outer.surrounded[0]
        self.assertEqual(len(hole.surrounded), 1)
        self.assertAlmostEqual(outer.polygon.get_size(), 16.0)
        self.assertAlmostEqual(hole.polygon.get_size(), 4.0)
        self.assertAlmostEqual(hole.surrounded[0].polygon.get_size(), 1.0)

    def testDisjointLoops(self):
        """Test disjoint loops are siblings"""
        nested = NestedLoops(TOLERANCE)
        nested.add([(0, 0), (1, 0), (1, 1), (0, 1)])
        nested.add([(5, 5), (6, 5), (6, 6), (5, 6)])
        self.assertEqual(len(nested.surrounded), 2)

    def testOpenLoopRejected(self):
        """Test a loop starting with None is rejected"""
        with self.assertRaises(OpenBoundaryLoopError):
            NestedLoops(TOLERANCE).add([None, (0, 0), (1, 0)])

    def testEmptyLoopRejected(self):
        """Test a loop without points is rejected"""
        with self.assertRaises(OpenBoundaryLoopError):
            NestedLoops(TOLERANCE).add([])

    def testCrossingLoopsRejected(self):
        """Test partially overlapping loops are rejected"""
        nested = NestedLoops(TOLERANCE)
        nested.add([(0, 0), (2, 0), (2, 2), (0, 2)])
        with self.assertRaises(CrossingBoundaryLoopsError):
            nested.add([(1, 1), (3, 1), (3, 3), (1, 3)])


class OrientationTests(unittest.TestCase):
    """Tests for correct_orientation"""

    def testAlternatingSignedAreas(self):
        """Test orientations alternate from counter-clockwise at the top level"""
        nested = _three_levels()
        nested.correct_orientation()
        areas = [_signed_area(loop) for loop in nested.get_loops()]
        self.assertEqual(len(areas), 3)
        self.assertAlmostEqual(areas[0], 16.0)
        self.assertAlmostEqual(areas[1], -4.0)
        self.assertAlmostEqual(areas[2], 1.0)

    def testLengthsUnchanged(self):
        """Test reversing loops keeps their vertices and lengths"""
        nested = _three_levels()
        nested.correct_orientation()
        for corrected, original in zip(nested.get_loops(), (OUTER_CW, HOLE_CCW, ISLAND_CW)):
            self.assertAlmostEqual(_perimeter(corrected), _perimeter(original))
            self.assertEqual(sorted(corrected), sorted(original))

    def testCorrectedFlag(self):
        """Test only reversed loops are flagged"""
        nested = NestedLoops(TOLERANCE)
        nested.add([(0, 0), (4, 0), (4, 4), (0, 4)])
        nested.add(HOLE_CCW)
        self.assertFalse(nested.surrounded[0].orientation_corrected)

        nested.correct_orientation()
        outer = nested.surrounded[0]
        self.assertFalse(outer.orientation_corrected)
        self.assertTrue(outer.surrounded[0].orientation_corrected)
        self.assertFalse(nested.orientation_corrected)

    def testIdempotent(self):
        """Test correcting twice gives the same loops as correcting once"""
        nested = _three_levels()
        nested.correct_orientation()
        once = nested.get_loops()
        nested.correct_orientation()
        self.assertEqual(nested.get_loops(), once)

    def testPolygonFromThreeLevels(self):
        """Test a polygon with a hole holding an island"""
        polygon = PolygonsSet.from_loops([OUTER_CW, HOLE_CCW, ISLAND_CW], TOLERANCE)
        self.assertAlmostEqual(polygon.get_size(), 13.0)
        self.assertAlmostEqual(polygon.get_boundary_size(), 28.0)


if __name__ == '__main__':
    unittest.main()
