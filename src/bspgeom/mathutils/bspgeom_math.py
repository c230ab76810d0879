"""
    Angle helpers and numpy based point-array utilities shared by the
    concrete spaces.
"""

import math
from typing import List

import numpy as np

from bspgeom.bspgeom_errors import DimensionMismatchError
from bspgeom.mathutils.vec2 import Vec2
from bspgeom.mathutils.vec3 import Vec3

# ==============================================================================
# CONSTANTS
# ==============================================================================

TWO_PI = 2.0 * math.pi
HALF_PI = 0.5 * math.pi

# Default tolerance used by the high level entry points
DEFAULT_TOLERANCE = 1.0e-10


# ==============================================================================
# ANGLES
# ==============================================================================

def normalize_angle(a: float, center: float) -> float:
    """
    Normalize an angle into a 2π wide interval around a center.

    Args:
        a: Angle to normalize
        center: Center of the target interval

    Returns:
        a - 2kπ, with integer k such that center - π <= a - 2kπ < center + π
    """
    return a - TWO_PI * math.floor((a + math.pi - center) / TWO_PI)


# ==============================================================================
# POINT ARRAYS
# ==============================================================================

def _as_array(points, dimension: int) -> np.ndarray:
    array = np.asarray(points, dtype=float)
    if array.size == 0:
        return array.reshape(0, dimension)
    if array.ndim != 2 or array.shape[1] != dimension:
        raise DimensionMismatchError(array.shape, f"(n, {dimension})")
    return array


def as_points_2d(points) -> List[Vec2]:
    """
    Convert a sequence of planar points (lists, tuples, Vec2 or an (n, 2)
    numpy array) to a list of Vec2.

    Raises:
        DimensionMismatchError: If the points are not 2-dimensional
    """
    if all(isinstance(p, Vec2) for p in points):
        return list(points)
    return [Vec2(row[0], row[1]) for row in _as_array(points, 2)]


def as_points_3d(points) -> List[Vec3]:
    """
    Convert a sequence of 3D directions (lists, tuples, Vec3 or an (n, 3)
    numpy array) to a list of Vec3.

    Raises:
        DimensionMismatchError: If the points are not 3-dimensional
    """
    if all(isinstance(p, Vec3) for p in points):
        return list(points)
    return [Vec3(row[0], row[1], row[2]) for row in _as_array(points, 3)]

