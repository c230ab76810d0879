"""
    Boundary information attached to the internal nodes of a region tree.
"""


class BoundaryAttribute:
    """
    Parts of a node cut that belong to the region boundary.

    The cut of an internal node may be only partially on the boundary. The
    parts that are on the boundary are split in two groups depending on the
    side of the region they face.

    Attributes:
        plus_outside: Part of the cut with the outside of the region on its
            plus side (and the inside on its minus side), or None
        plus_inside: Part of the cut with the inside of the region on its
            plus side, or None
    """
    __slots__ = ('plus_outside', 'plus_inside')

    def __init__(self, plus_outside=None, plus_inside=None):
        self.plus_outside = plus_outside
        self.plus_inside = plus_inside

    def __repr__(self):
        return f"BoundaryAttribute(plus_outside={self.plus_outside!r}, plus_inside={self.plus_inside!r})"
