"""
    Points of the unit circle.
"""

import math

from bspgeom.mathutils.bspgeom_math import normalize_angle
from bspgeom.mathutils.vec2 import Vec2


class S1Point:
    """
    A point on the unit circle, given by its azimuthal angle.

    The angle is normalized to [0, 2π).
    """
    __slots__ = ('_alpha', '_vector')

    def __init__(self, alpha: float):
        self._alpha = normalize_angle(alpha, math.pi) if not math.isnan(alpha) else alpha
        self._vector = Vec2(math.cos(alpha), math.sin(alpha))

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def vector(self) -> Vec2:
        """Unit vector of the point in the plane of the circle."""
        return self._vector

    def is_nan(self) -> bool:
        return math.isnan(self._alpha)

    def distance(self, other: 'S1Point') -> float:
        """Angular distance to another point, in [0, π]."""
        dot = self._vector.dot(other.vector)
        cross = self._vector.x * other.vector.y - self._vector.y * other.vector.x
        return abs(math.atan2(cross, dot))

    def __eq__(self, other):
        if not isinstance(other, S1Point):
            return NotImplemented
        if other.is_nan():
            return self.is_nan()
        return self._alpha == other.alpha

    def __hash__(self):
        return 542 if self.is_nan() else hash(self._alpha)

    def __repr__(self):
        return f"S1Point({self._alpha!r})"


S1Point.NAN = S1Point(math.nan)
