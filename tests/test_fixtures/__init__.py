"""Test fixtures and utilities for bspgeom testing.

- assertions: Custom assertion functions (assert_points_close, assert_locations)
"""

from .assertions import assert_points_close, assert_locations

__all__ = [
    'assert_points_close',
    'assert_locations',
]
