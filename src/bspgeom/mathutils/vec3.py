"""
Pure Python 3D vector math.

This module provides Vec3, a lightweight immutable 3D vector used for the
directions of the spherical geometry (points on the unit sphere, circle poles
and in-plane axes). For 3-element vectors, pure Python is much faster than
numpy arrays due to avoiding array creation overhead.

Vec3 supports arithmetic operators (+, -, *, /, unary -) and indexing.
"""
import math

from bspgeom.bspgeom_errors import DegenerateGeometryError


class Vec3:
    """
    A lightweight 3D vector class that supports arithmetic operators.

    Stores components directly as attributes for fast access.
    Supports indexing like a tuple/list for compatibility.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        try:
            self.x = float(x)
            self.y = float(y)
            self.z = float(z)
        except TypeError:
            # x is a sequence (tuple, list, array, Vec3)
            self.x = float(x[0])
            self.y = float(x[1])
            self.z = float(x[2])

    def __getitem__(self, i):
        if i == 0: return self.x
        if i == 1: return self.y
        if i == 2: return self.z
        raise IndexError(f"Vec3 index {i} out of range")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __repr__(self):
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def __add__(self, other):
        return Vec3(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other):
        return Vec3(self.x - other[0], self.y - other[1], self.z - other[2])

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar):
        inv = 1.0 / scalar
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other):
        """Dot product."""
        return self.x * other[0] + self.y * other[1] + self.z * other[2]

    def cross(self, other):
        """Cross product."""
        return Vec3(
            self.y * other[2] - self.z * other[1],
            self.z * other[0] - self.x * other[2],
            self.x * other[1] - self.y * other[0]
        )

    def length_sq(self):
        """Squared length (avoids sqrt)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self):
        """Vector length/magnitude."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self):
        """
        Return normalized copy.

        Raises:
            DegenerateGeometryError: If the vector has zero norm
        """
        mag = self.length()
        if mag == 0.0:
            raise DegenerateGeometryError("Cannot normalize a zero vector")
        inv_mag = 1.0 / mag
        return Vec3(self.x * inv_mag, self.y * inv_mag, self.z * inv_mag)

    def orthogonal(self):
        """
        Return a unit vector orthogonal to this one.

        The component of largest magnitude is the one zeroed out last, which
        keeps the result well conditioned.
        """
        threshold = 0.6 * self.length()
        if threshold == 0.0:
            raise DegenerateGeometryError("Cannot find a vector orthogonal to a zero vector")

        if abs(self.x) <= threshold:
            inverse = 1.0 / math.sqrt(self.y * self.y + self.z * self.z)
            return Vec3(0.0, inverse * self.z, -inverse * self.y)
        elif abs(self.y) <= threshold:
            inverse = 1.0 / math.sqrt(self.x * self.x + self.z * self.z)
            return Vec3(-inverse * self.z, 0.0, inverse * self.x)
        inverse = 1.0 / math.sqrt(self.x * self.x + self.y * self.y)
        return Vec3(inverse * self.y, -inverse * self.x, 0.0)

    def to_tuple(self):
        """Convert to tuple."""
        return (self.x, self.y, self.z)


PLUS_I = Vec3(1.0, 0.0, 0.0)
MINUS_I = Vec3(-1.0, 0.0, 0.0)
PLUS_J = Vec3(0.0, 1.0, 0.0)
MINUS_J = Vec3(0.0, -1.0, 0.0)
PLUS_K = Vec3(0.0, 0.0, 1.0)
MINUS_K = Vec3(0.0, 0.0, -1.0)
ZERO = Vec3(0.0, 0.0, 0.0)


def vec3_angle(v1, v2):
    """
    Angular separation between two vectors, in [0, π].

    Nearly aligned vectors use the cross product norm instead of the dot
    product, whose arc-cosine loses accuracy close to 0 and π.

    Raises:
        DegenerateGeometryError: If either vector has zero norm
    """
    norm_product = v1.length() * v2.length()
    if norm_product == 0.0:
        raise DegenerateGeometryError("Cannot compute the angle of a zero vector")

    dot = v1.dot(v2)
    threshold = norm_product * 0.9999
    if dot < -threshold or dot > threshold:
        v3 = v1.cross(v2)
        if dot >= 0:
            return math.asin(v3.length() / norm_product)
        return math.pi - math.asin(v3.length() / norm_product)

    return math.acos(dot / norm_product)


def vec3_combine(a1, u1, a2, u2):
    """Linear combination a1 * u1 + a2 * u2."""
    return Vec3(a1 * u1[0] + a2 * u2[0],
                a1 * u1[1] + a2 * u2[1],
                a1 * u1[2] + a2 * u2[2])


def vec3_rotate(v, axis, angle):
    """Rotate v by angle around axis (right hand rule, Rodrigues' formula)."""
    k = Vec3(axis).normalized()
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return v * cos_a + k.cross(v) * sin_a + k * (k.dot(v) * (1.0 - cos_a))
