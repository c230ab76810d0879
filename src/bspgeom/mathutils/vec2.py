"""
Pure Python 2D vector math, the planar counterpart of Vec3.
"""
import math


class Vec2:
    """
    A lightweight 2D point/vector supporting arithmetic operators.

    Supports indexing like a tuple/list for compatibility with numpy rows.
    """
    __slots__ = ('x', 'y')

    def __init__(self, x=0.0, y=0.0):
        try:
            self.x = float(x)
            self.y = float(y)
        except TypeError:
            # x is a sequence (tuple, list, array, Vec2)
            self.x = float(x[0])
            self.y = float(x[1])

    def __getitem__(self, i):
        if i == 0: return self.x
        if i == 1: return self.y
        raise IndexError(f"Vec2 index {i} out of range")

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self):
        return 2

    def __repr__(self):
        return f"Vec2({self.x}, {self.y})"

    def __add__(self, other):
        return Vec2(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Vec2(self.x - other[0], self.y - other[1])

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def dot(self, other):
        """Dot product."""
        return self.x * other[0] + self.y * other[1]

    def length(self):
        """Vector length/magnitude."""
        return math.hypot(self.x, self.y)

    def distance(self, other):
        """Euclidean distance to another point."""
        return math.hypot(self.x - other[0], self.y - other[1])

    def to_tuple(self):
        """Convert to tuple."""
        return (self.x, self.y)
