"""
    Polygons of the unit sphere.

A SphericalPolygonsSet is any region of the sphere bounded by great circle
arcs. The inside of each boundary edge is on the pole side of its circle,
so counter-clockwise loops (seen from outside the sphere) enclose the
smaller side.
"""

import logging
import math

from bspgeom.bspgeom_errors import DegenerateGeometryError
from bspgeom.bspgeom_types import SPHERE_2D
from bspgeom.mathutils.bspgeom_math import TWO_PI
from bspgeom.mathutils.vec3 import Vec3, vec3_angle, vec3_rotate
from bspgeom.partitioning.bsp_tree import BSPTree
from bspgeom.partitioning.region import AbstractRegion
from bspgeom.profiling import profile
from bspgeom.spherical.twod.circle import Circle
from bspgeom.spherical.twod.edge import Edge, Vertex
from bspgeom.spherical.twod.edges_builder import EdgesBuilder
from bspgeom.spherical.twod.properties_computer import PropertiesComputer
from bspgeom.spherical.twod.s2_point import S2Point

logger = logging.getLogger(__name__)


class SphericalPolygonsSet(AbstractRegion):
    """
    Region of the unit sphere.

    Args:
        tree: Tree describing the region, None for the whole sphere
        tolerance: Angular tolerance below which points are considered identical
    """
    space = SPHERE_2D

    def __init__(self, tree=None, tolerance=1.0e-10):
        super().__init__(tree, tolerance)
        self._loops = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def hemisphere(cls, pole, tolerance=1.0e-10) -> 'SphericalPolygonsSet':
        """Hemisphere centered on a pole direction."""
        tree = BSPTree.from_cut(Circle(pole, tolerance).whole_hyperplane(),
                                BSPTree(False), BSPTree(True), None)
        return cls(tree, tolerance)

    @classmethod
    def regular_polygon(cls, center, meridian, outside_radius, n,
                        tolerance=1.0e-10) -> 'SphericalPolygonsSet':
        """
        Regular polygon with n vertices.

        Args:
            center: Direction of the polygon center
            meridian: Direction defining, with center, the great circle
                holding the first vertex
            outside_radius: Angular distance from the center to the vertices
            n: Number of sides
            tolerance: Angular tolerance, also used as hyperplane thickness
        """
        center = Vec3(center)
        first = vec3_rotate(center, center.cross(meridian), outside_radius)
        vertices = [S2Point(first)]
        for _ in range(1, n):
            vertices.append(S2Point(vec3_rotate(vertices[-1].vector, center, TWO_PI / n)))
        return cls(cls._vertices_to_tree(tolerance, vertices), tolerance)

    @classmethod
    @profile
    def from_vertices(cls, hyperplane_thickness, *vertices) -> 'SphericalPolygonsSet':
        """
        Build a polygon from a simple list of vertices.

        The polygon is the area on the left of the boundary going from one
        vertex to the next along the shortest arcs, the last vertex being
        connected back to the first. Consecutive vertices must be neither
        identical nor antipodal.

        Vertices may be S2Point instances or directions (sequences of three
        floats). Vertices lying within hyperplane_thickness of a circle are
        considered on it; the thickness is also used as the region tolerance.

        Raises:
            DegenerateGeometryError: If two consecutive vertices are identical
                or antipodal
        """
        points = [v if isinstance(v, S2Point) else S2Point(v) for v in vertices]
        return cls(cls._vertices_to_tree(hyperplane_thickness, points), hyperplane_thickness)

    @staticmethod
    def _vertices_to_tree(thickness, vertices):
        n = len(vertices)
        if n == 0:
            return BSPTree(True)

        v_array = [Vertex(location) for location in vertices]

        edges = []
        end = v_array[-1]
        for i in range(n):
            start = end
            end = v_array[i]

            length = vec3_angle(start.location.vector, end.location.vector)
            if length <= thickness or math.pi - length <= thickness:
                raise DegenerateGeometryError(
                    f"consecutive vertices {start.location!r} and {end.location!r} are identical or antipodal")

            # vertices already known to lie on a common circle reuse it
            circle = start.shared_circle_with(end)
            if circle is None:
                circle = Circle.through(start.location, end.location, thickness)

            edges.append(Edge(start, end, length, circle))

            # bind all vertices lying on the circle
            for vertex in v_array:
                if vertex is not start and vertex is not end and \
                        abs(circle.get_offset(vertex.location)) <= thickness:
                    vertex.bind_with(circle)

        tree = BSPTree()
        _insert_edges(tree, edges)
        return tree

    def build_new(self, tree) -> 'SphericalPolygonsSet':
        return SphericalPolygonsSet(tree, self.tolerance)

    # ------------------------------------------------------------------
    # Geometrical properties
    # ------------------------------------------------------------------

    def compute_geometrical_properties(self) -> None:
        tree = self.get_tree(True)
        if tree.cut is None:
            if tree.attribute:
                self.set_size(2 * TWO_PI)
                self.set_barycenter(S2Point.from_angles(0.0, 0.0))
            else:
                self.set_size(0.0)
                self.set_barycenter(S2Point.NAN)
            return

        computer = PropertiesComputer(self.tolerance)
        tree.visit(computer)
        self.set_size(computer.area)
        self.set_barycenter(computer.barycenter)

    @profile
    def get_boundary_loops(self) -> list:
        """
        Get the boundary loops of the polygon.

        Each loop is given by one of its vertices; the loop is walked by
        following vertex.outgoing.end until coming back to it. Walking a
        loop keeps the inside of the region on the left.

        Raises:
            OpenBoundaryLoopError: If the boundary cannot be closed
        """
        if self._loops is None:
            if self.get_tree(False).cut is None:
                self._loops = []
            else:
                root = self.get_tree(True)
                builder = EdgesBuilder(root, self.tolerance)
                root.visit(builder)
                edges = builder.get_edges()
                count = len(edges)

                loops = []
                while edges:
                    edge = edges[0]
                    start_vertex = edge.start
                    loops.append(start_vertex)
                    while True:
                        _remove_edge(edges, edge)
                        edge = edge.end.outgoing
                        if edge.start is start_vertex:
                            break

                self._loops = loops
                logger.debug("extracted %d boundary loops from %d edges", len(loops), count)
        return list(self._loops)

    def get_loop_points(self) -> list:
        """Boundary loops as lists of their vertex locations."""
        loops = []
        for start in self.get_boundary_loops():
            points = []
            edge = start.outgoing
            while True:
                points.append(edge.start.location)
                edge = edge.end.outgoing
                if edge.start is start:
                    break
            loops.append(points)
        return loops


def _remove_edge(edges, edge):
    for i, candidate in enumerate(edges):
        if candidate is edge:
            del edges[i]
            return


def _insert_edges(node, edges):
    # find an edge whose circle crosses the node cell
    index = 0
    inserted = None
    while inserted is None and index < len(edges):
        inserted = edges[index]
        index += 1
        if not node.insert_cut(inserted.circle):
            inserted = None

    if inserted is None:
        # leaf node: inside if it is on the minus side of its parent
        parent = node.parent
        node.attribute = parent is None or node is parent.minus
        return

    outside_list = []
    inside_list = []
    for edge in edges:
        if edge is not inserted:
            edge.split(inserted.circle, outside_list, inside_list)

    if outside_list:
        _insert_edges(node.plus, outside_list)
    else:
        node.plus.attribute = False

    if inside_list:
        _insert_edges(node.minus, inside_list)
    else:
        node.minus.attribute = True
