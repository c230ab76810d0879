"""
    Extraction of the boundary edges of a spherical polygon.
"""

from bspgeom.bspgeom_errors import OpenBoundaryLoopError
from bspgeom.bspgeom_types import VisitOrder
from bspgeom.mathutils.vec3 import vec3_angle
from bspgeom.partitioning.visitors import BSPTreeVisitor
from bspgeom.spherical.oned.s1_point import S1Point
from bspgeom.spherical.twod.edge import Edge, Vertex


class EdgesBuilder(BSPTreeVisitor):
    """
    Collects the boundary of a region as edges, then links them into loops.

    The tree must carry its boundary attributes.

    Args:
        root: Root of the region tree
        tolerance: Angular distance below which edge ends are connected
    """

    def __init__(self, root, tolerance: float):
        self._root = root
        self._tolerance = tolerance
        # edges by insertion order, with the node holding them
        self._edge_to_node = {}
        self._node_to_edges = {}

    def visit_order(self, node):
        return VisitOrder.MINUS_SUB_PLUS

    def visit_internal_node(self, node):
        self._node_to_edges[node] = []
        attribute = node.attribute
        if attribute.plus_outside is not None:
            self._add_contribution(attribute.plus_outside, False, node)
        if attribute.plus_inside is not None:
            self._add_contribution(attribute.plus_inside, True, node)

    def visit_leaf_node(self, node):
        pass

    def _add_contribution(self, sub, reversed_, node):
        circle = sub.hyperplane
        for arc in sub.remaining_region.as_list():
            start = Vertex(circle.to_space(S1Point(arc.inf)))
            end = Vertex(circle.to_space(S1Point(arc.sup)))
            start.bind_with(circle)
            end.bind_with(circle)
            if reversed_:
                edge = Edge(end, start, arc.get_size(), circle.get_reverse())
            else:
                edge = Edge(start, end, arc.get_size(), circle)
            self._edge_to_node[edge] = node
            self._node_to_edges[node].append(edge)

    def _get_following_edge(self, previous: Edge) -> Edge:
        point = previous.end.location
        closest = self._tolerance
        following = None
        for node in self._root.get_close_cuts(point, self._tolerance):
            for edge in self._node_to_edges[node]:
                if edge is not previous and edge.start.incoming is None:
                    gap = vec3_angle(point.vector, edge.start.location.vector)
                    if gap <= closest:
                        closest = gap
                        following = edge

        if following is None:
            if vec3_angle(point.vector, previous.start.location.vector) <= self._tolerance:
                # the edge is a full circle, closing on itself
                return previous
            raise OpenBoundaryLoopError(f"no edge follows {previous!r}")

        return following

    def get_edges(self) -> list:
        """
        Link every edge to its follower and return all edges.

        Raises:
            OpenBoundaryLoopError: If an edge end is not connected to any edge start
        """
        for previous in self._edge_to_node:
            previous.set_next_edge(self._get_following_edge(previous))
        return list(self._edge_to_node)
