"""Custom assertions for bspgeom testing."""

import numpy as np


def assert_points_close(test_case, actual, expected, atol=1e-9, msg=None):
    """Assert a list of points matches expected coordinates.

    Points may be Vec2, Vec3, S2Point (compared through their vector) or plain
    sequences. Uses numpy.allclose for floating point comparison and reports
    which point failed.

    Args:
        test_case: unittest.TestCase instance for assertions
        actual: Sequence of points to check
        expected: Sequence of expected coordinates, same length
        atol: Absolute tolerance
        msg: Optional custom failure message (keyword-only)

    Raises:
        AssertionError: If the lengths differ or any point is off by more than atol
    """
    actual = [tuple(getattr(p, 'vector', p)) for p in actual]
    test_case.assertEqual(len(actual), len(expected),
                          msg or f"expected {len(expected)} points, got {len(actual)}")
    for i, (a, e) in enumerate(zip(actual, expected)):
        test_case.assertTrue(np.allclose(np.array(a), np.array(e, dtype=float), atol=atol),
                             msg or f"point {i}: expected {e}, got {a}")


def assert_locations(test_case, region, expected):
    """Assert the location of several points with respect to a region.

    Args:
        test_case: unittest.TestCase instance for assertions
        region: Region with a check_point method
        expected: Sequence of (point, Location) pairs

    Examples:
        >>> assert_locations(self, square, [
        ...     ((0.5, 0.5), Location.INSIDE),
        ...     ((2.0, 2.0), Location.OUTSIDE),
        ... ])
    """
    for point, location in expected:
        test_case.assertIs(region.check_point(point), location,
                           f"{point!r} should be {location.name} of {region!r}")
