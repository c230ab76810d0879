"""
    Points of the unit sphere.
"""

import math

from bspgeom.bspgeom_errors import GeometryError
from bspgeom.mathutils.vec3 import MINUS_I, MINUS_J, MINUS_K, PLUS_I, PLUS_J, PLUS_K, Vec3, vec3_angle


class S2Point:
    """
    A point on the unit sphere.

    Built from any non-zero direction (normalized on construction) or from
    spherical coordinates with S2Point.from_angles.

    Attributes:
        theta: Azimuthal angle in the x-y plane
        phi: Polar angle from the +z axis, in [0, π]
        vector: Unit direction of the point
    """
    __slots__ = ('_theta', '_phi', '_vector')

    def __init__(self, vector):
        vector = Vec3(vector)
        self._theta = math.atan2(vector.y, vector.x)
        self._phi = vec3_angle(PLUS_K, vector)
        self._vector = vector.normalized()

    @classmethod
    def from_angles(cls, theta: float, phi: float) -> 'S2Point':
        """
        Raises:
            GeometryError: If phi is not in [0, π]
        """
        if phi < 0 or phi > math.pi:
            raise GeometryError(f"polar angle {phi} out of [0, π] range")
        sin_phi = math.sin(phi)
        return cls._build(theta, phi, Vec3(math.cos(theta) * sin_phi,
                                           math.sin(theta) * sin_phi,
                                           math.cos(phi)))

    @classmethod
    def _build(cls, theta, phi, vector):
        point = cls.__new__(cls)
        point._theta = theta
        point._phi = phi
        point._vector = vector
        return point

    @property
    def theta(self) -> float:
        return self._theta

    @property
    def phi(self) -> float:
        return self._phi

    @property
    def vector(self) -> Vec3:
        return self._vector

    def is_nan(self) -> bool:
        return math.isnan(self._theta) or math.isnan(self._phi)

    def negate(self) -> 'S2Point':
        """Antipodal point."""
        return S2Point._build(-self._theta, math.pi - self._phi, -self._vector)

    def distance(self, other: 'S2Point') -> float:
        """Great circle distance to another point."""
        return vec3_angle(self._vector, other.vector)

    def __eq__(self, other):
        if not isinstance(other, S2Point):
            return NotImplemented
        if other.is_nan():
            return self.is_nan()
        return self._theta == other.theta and self._phi == other.phi

    def __hash__(self):
        return 542 if self.is_nan() else hash((self._theta, self._phi))

    def __repr__(self):
        return f"S2Point(theta={self._theta!r}, phi={self._phi!r})"


S2Point.NAN = S2Point._build(math.nan, math.nan, Vec3(math.nan, math.nan, math.nan))
S2Point.PLUS_I = S2Point._build(0.0, 0.5 * math.pi, PLUS_I)
S2Point.PLUS_J = S2Point._build(0.5 * math.pi, 0.5 * math.pi, PLUS_J)
S2Point.PLUS_K = S2Point._build(0.0, 0.0, PLUS_K)
S2Point.MINUS_I = S2Point._build(math.pi, 0.5 * math.pi, MINUS_I)
S2Point.MINUS_J = S2Point._build(1.5 * math.pi, 0.5 * math.pi, MINUS_J)
S2Point.MINUS_K = S2Point._build(0.0, math.pi, MINUS_K)
