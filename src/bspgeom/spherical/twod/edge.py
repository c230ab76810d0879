"""
    Vertices and edges of spherical polygon boundaries.
"""

import math

from bspgeom.mathutils.bspgeom_math import TWO_PI, normalize_angle
from bspgeom.spherical.twod.s2_point import S2Point


class Vertex:
    """
    Boundary vertex, linking an incoming and an outgoing edge.

    Attributes:
        location: Point of the vertex
        incoming: Edge ending at this vertex, None until linked
        outgoing: Edge starting at this vertex, None until linked
        circles: Circles known to contain this vertex
    """
    __slots__ = ('location', 'incoming', 'outgoing', 'circles')

    def __init__(self, location: S2Point):
        self.location = location
        self.incoming = None
        self.outgoing = None
        self.circles = []

    def bind_with(self, circle) -> None:
        self.circles.append(circle)

    def shared_circle_with(self, vertex: 'Vertex'):
        """First circle (same instance) known to contain both vertices, or None."""
        for circle1 in self.circles:
            for circle2 in vertex.circles:
                if circle1 is circle2:
                    return circle1
        return None

    def set_incoming(self, edge: 'Edge') -> None:
        self.incoming = edge
        self.bind_with(edge.circle)

    def set_outgoing(self, edge: 'Edge') -> None:
        self.outgoing = edge
        self.bind_with(edge.circle)

    def __repr__(self):
        return f"Vertex({self.location!r})"


class Edge:
    """
    Boundary edge: an arc of a circle going from start to end.

    Creating an edge links it to its vertices.

    Args:
        start: Start vertex
        end: End vertex
        length: Angular length of the edge, may exceed π
        circle: Circle supporting the edge, inside on its pole side
    """
    __slots__ = ('start', 'end', 'length', 'circle')

    def __init__(self, start: Vertex, end: Vertex, length: float, circle):
        self.start = start
        self.end = end
        self.length = length
        self.circle = circle
        start.set_outgoing(self)
        end.set_incoming(self)

    def get_point_at(self, alpha: float):
        """Point of the edge at an angular distance from its start."""
        return self.circle.get_point_at(alpha + self.circle.get_phase(self.start.location.vector))

    def set_next_edge(self, following: 'Edge') -> None:
        """Connect the end of this edge to the start of the following one."""
        self.end = following.start
        self.end.set_incoming(self)
        self.end.bind_with(self.circle)

    def split(self, split_circle, outside_list: list, inside_list: list) -> None:
        """
        Split the edge by a circle, appending its parts to the lists.

        Parts on the pole side of split_circle go to inside_list, the others
        to outside_list. Parts shorter than the tolerance are dropped. An
        edge entirely on one side is appended as is.
        """
        circle = self.circle
        edge_start = circle.get_phase(self.start.location.vector)
        arc = circle.get_inside_arc(split_circle)
        arc_relative_start = normalize_angle(arc.inf, edge_start + math.pi) - edge_start
        arc_relative_end = arc_relative_start + arc.get_size()
        unwrapped_end = arc_relative_end - TWO_PI

        tolerance = circle.tolerance
        previous_vertex = self.start

        if unwrapped_end >= self.length - tolerance:
            # the edge is entirely within the inside arc
            inside_list.append(self)
            return

        # the edge leaves the inside arc at some point
        already_managed_length = 0.0
        if unwrapped_end >= 0:
            # the start of the edge is inside
            previous_vertex = self._add_sub_edge(
                previous_vertex, self._vertex_at(edge_start + unwrapped_end),
                unwrapped_end, inside_list, split_circle)
            already_managed_length = unwrapped_end

        if arc_relative_start >= self.length - tolerance:
            # the rest of the edge is outside
            if unwrapped_end >= 0:
                self._add_sub_edge(previous_vertex, self.end,
                                   self.length - already_managed_length, outside_list, split_circle)
            else:
                outside_list.append(self)
            return

        # the edge goes outside, then back inside
        previous_vertex = self._add_sub_edge(
            previous_vertex, self._vertex_at(edge_start + arc_relative_start),
            arc_relative_start - already_managed_length, outside_list, split_circle)
        already_managed_length = arc_relative_start

        if arc_relative_end >= self.length - tolerance:
            self._add_sub_edge(previous_vertex, self.end,
                               self.length - already_managed_length, inside_list, split_circle)
        else:
            # and outside again
            previous_vertex = self._add_sub_edge(
                previous_vertex, self._vertex_at(edge_start + arc_relative_end),
                arc_relative_end - already_managed_length, inside_list, split_circle)
            already_managed_length = arc_relative_end
            self._add_sub_edge(previous_vertex, self.end,
                               self.length - already_managed_length, outside_list, split_circle)

    def _vertex_at(self, phase):
        return Vertex(S2Point(self.circle.get_point_at(phase)))

    def _add_sub_edge(self, sub_start, sub_end, sub_length, edges, split_circle):
        if sub_length <= self.circle.tolerance:
            # too short, the end point is merged with the start
            return sub_start

        sub_end.bind_with(split_circle)
        edges.append(Edge(sub_start, sub_end, sub_length, self.circle))
        return sub_end

    def __repr__(self):
        return f"Edge({self.start.location!r} -> {self.end.location!r}, length={self.length!r})"
