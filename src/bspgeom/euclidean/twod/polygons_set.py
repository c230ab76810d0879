"""
    Polygons of the plane.

A PolygonsSet is any region of the plane bounded by lines: it may be
non-convex, have holes, be made of several disconnected parts or be
unbounded.
"""

import logging
import math

from bspgeom.bspgeom_errors import DegenerateGeometryError, InconsistentTreeError
from bspgeom.bspgeom_types import EUCLIDEAN_2D, Side, VisitOrder
from bspgeom.euclidean.twod.line import Line
from bspgeom.euclidean.twod.sub_line import Segment, SubLine
from bspgeom.mathutils.bspgeom_math import as_points_2d
from bspgeom.mathutils.vec2 import Vec2
from bspgeom.partitioning.bsp_tree import BSPTree
from bspgeom.partitioning.region import AbstractRegion
from bspgeom.partitioning.visitors import BSPTreeVisitor
from bspgeom.profiling import profile

logger = logging.getLogger(__name__)

# Distance below which a segment end and the next segment start are the same point
_LINK_DISTANCE = 1.0e-10

# Largest single precision float, used to materialize unbounded lines
_FLT_MAX = 3.4028234663852886e38


class PolygonsSet(AbstractRegion):
    """
    Region of the plane.

    Args:
        tree: Tree describing the region, None for the whole plane
        tolerance: Distance below which points are considered identical
    """
    space = EUCLIDEAN_2D

    def __init__(self, tree=None, tolerance=1.0e-10):
        super().__init__(tree, tolerance)
        self._vertices = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def box(cls, x_min, x_max, y_min, y_max, tolerance=1.0e-10) -> 'PolygonsSet':
        """
        Axis aligned rectangle.

        A box thinner than the tolerance in either direction is empty.
        """
        if x_min >= x_max - tolerance or y_min >= y_max - tolerance:
            return cls(BSPTree(False), tolerance)

        min_min = Vec2(x_min, y_min)
        min_max = Vec2(x_min, y_max)
        max_min = Vec2(x_max, y_min)
        max_max = Vec2(x_max, y_max)
        return cls.convex([
            Line.from_points(min_min, max_min, tolerance),
            Line.from_points(max_min, max_max, tolerance),
            Line.from_points(max_max, min_max, tolerance),
            Line.from_points(min_max, min_min, tolerance),
        ], tolerance)

    @classmethod
    @profile
    def from_vertices(cls, hyperplane_thickness, *vertices) -> 'PolygonsSet':
        """
        Build a polygon from a simple list of vertices.

        The polygon is the area on the left of the boundary going from one
        vertex to the next, the last vertex being connected back to the
        first. Counter-clockwise vertices therefore give a finite polygon,
        clockwise ones its unbounded complement. The boundary must not
        self-intersect.

        Vertices lying within hyperplane_thickness of a line are considered
        on it; the thickness is also used as the region tolerance.

        Raises:
            DegenerateGeometryError: If two consecutive vertices coincide
        """
        return cls(cls._vertices_to_tree(hyperplane_thickness, as_points_2d(vertices)),
                   hyperplane_thickness)

    @classmethod
    def from_loops(cls, loops, tolerance=1.0e-10) -> 'PolygonsSet':
        """
        Build a polygon from several closed loops, whatever their orientation.

        Loops are nested by containment and reoriented so outer loops are
        counter-clockwise and holes clockwise.

        Raises:
            OpenBoundaryLoopError: If a loop starts with None
            CrossingBoundaryLoopsError: If two loops overlap
        """
        from bspgeom.euclidean.twod.nested_loops import NestedLoops

        nested = NestedLoops(tolerance)
        for loop in loops:
            nested.add(loop)
        nested.correct_orientation()

        boundary = []
        for loop in nested.get_loops():
            boundary.extend(loop_edges(loop, tolerance))
        return cls.from_boundary(boundary, tolerance)

    @staticmethod
    def _vertices_to_tree(thickness, vertices):
        n = len(vertices)
        if n == 0:
            return BSPTree(True)

        v_array = [_Vertex(location) for location in vertices]

        edges = []
        for i in range(n):
            start = v_array[i]
            end = v_array[(i + 1) % n]

            if start.location.distance(end.location) <= thickness:
                raise DegenerateGeometryError(f"consecutive vertices coincide at {start.location!r}")

            # vertices already known to lie on a common line reuse it
            line = start.shared_line_with(end)
            if line is None:
                line = Line.from_points(start.location, end.location, thickness)

            edges.append(_Edge(start, end, line))

            # bind all vertices lying on the line
            for vertex in v_array:
                if vertex is not start and vertex is not end and \
                        abs(line.get_offset(vertex.location)) <= thickness:
                    vertex.bind_with(line)

        tree = BSPTree()
        _insert_edges(thickness, tree, edges)
        return tree

    def build_new(self, tree) -> 'PolygonsSet':
        return PolygonsSet(tree, self.tolerance)

    # ------------------------------------------------------------------
    # Geometrical properties
    # ------------------------------------------------------------------

    def compute_geometrical_properties(self) -> None:
        v = self.get_vertices()
        if not v:
            tree = self.get_tree(False)
            if tree.cut is None and tree.attribute:
                self.set_size(math.inf)
                self.set_barycenter(Vec2(math.nan, math.nan))
            else:
                self.set_size(0.0)
                self.set_barycenter(Vec2(0.0, 0.0))
            return

        if v[0][0] is None:
            # open loops bound unbounded regions
            self.set_size(math.inf)
            self.set_barycenter(Vec2(math.nan, math.nan))
            return

        total = 0.0
        sum_x = 0.0
        sum_y = 0.0
        for loop in v:
            x1 = loop[-1].x
            y1 = loop[-1].y
            for point in loop:
                x0 = x1
                y0 = y1
                x1 = point.x
                y1 = point.y
                factor = x0 * y1 - y0 * x1
                total += factor
                sum_x += factor * (x0 + x1)
                sum_y += factor * (y0 + y1)

        if total < 0:
            # clockwise outer boundary: the region is the unbounded complement
            self.set_size(math.inf)
            self.set_barycenter(Vec2(math.nan, math.nan))
        elif total == 0.0:
            # degenerate loops enclose nothing
            self.set_size(0.0)
            self.set_barycenter(Vec2(math.nan, math.nan))
        else:
            self.set_size(total / 2)
            self.set_barycenter(Vec2(sum_x / (3 * total), sum_y / (3 * total)))

    @profile
    def get_vertices(self):
        """
        Get the boundary loops of the polygon.

        Closed loops are tuples of their vertices, counter-clockwise for
        outer boundaries and clockwise for holes. Open loops (unbounded
        regions) start with None, followed by a point far before the first
        vertex and ending with a point far after the last one. A single
        unbounded line gives (None, far point, far point).

        Returns:
            A list of tuples of Vec2
        """
        if self._vertices is None:
            if self.get_tree(False).cut is None:
                self._vertices = []
            else:
                builder = _SegmentsBuilder()
                self.get_tree(True).visit(builder)
                segments = builder.segments

                loops = []
                while segments:
                    loop = _follow_loop(segments)
                    if loop is not None:
                        loops.append(loop)

                self._vertices = [_loop_to_vertices(loop) for loop in loops]
                logger.debug("extracted %d boundary loops from %d segments",
                             len(loops), builder.count)
        return list(self._vertices)


def loop_edges(loop, tolerance):
    """Sub-lines joining consecutive points of a closed loop (last back to first)."""
    points = as_points_2d(loop)
    edges = []
    current = points[-1]
    for point in points:
        previous = current
        current = point
        edges.append(SubLine.from_endpoints(previous, current, tolerance))
    return edges


# ==============================================================================
# VERTICES TO TREE
# ==============================================================================

class _Vertex:
    __slots__ = ('location', 'incoming', 'outgoing', 'lines')

    def __init__(self, location):
        self.location = location
        self.incoming = None
        self.outgoing = None
        self.lines = []

    def bind_with(self, line):
        self.lines.append(line)

    def shared_line_with(self, vertex):
        for line1 in self.lines:
            for line2 in vertex.lines:
                if line1 is line2:
                    return line1
        return None

    def set_incoming(self, edge):
        self.incoming = edge
        self.bind_with(edge.line)

    def set_outgoing(self, edge):
        self.outgoing = edge
        self.bind_with(edge.line)


class _Edge:
    __slots__ = ('start', 'end', 'line', 'node')

    def __init__(self, start, end, line):
        self.start = start
        self.end = end
        self.line = line
        # node whose cut contains this edge, once inserted
        self.node = None
        start.set_outgoing(self)
        end.set_incoming(self)

    def split(self, split_line):
        """Split the edge at its crossing with a line, returning the new vertex."""
        split_vertex = _Vertex(self.line.intersection(split_line))
        split_vertex.bind_with(split_line)
        start_half = _Edge(self.start, split_vertex, self.line)
        end_half = _Edge(split_vertex, self.end, self.line)
        start_half.node = self.node
        end_half.node = self.node
        return split_vertex


def _insert_edges(thickness, node, edges):
    # find an edge not yet inserted whose line crosses the node cell
    index = 0
    inserted = None
    while inserted is None and index < len(edges):
        inserted = edges[index]
        index += 1
        if inserted.node is None:
            if node.insert_cut(inserted.line):
                inserted.node = node
            else:
                inserted = None
        else:
            inserted = None

    if inserted is None:
        # leaf node: inside if it is on the minus side of its parent
        parent = node.parent
        node.attribute = parent is None or node is parent.minus
        return

    plus_list = []
    minus_list = []
    for edge in edges:
        if edge is inserted:
            continue
        start_offset = inserted.line.get_offset(edge.start.location)
        end_offset = inserted.line.get_offset(edge.end.location)
        start_side = _thick_side(start_offset, thickness)
        end_side = _thick_side(end_offset, thickness)

        if start_side is Side.PLUS:
            if end_side is Side.MINUS:
                split_point = edge.split(inserted.line)
                minus_list.append(split_point.outgoing)
                plus_list.append(split_point.incoming)
            else:
                plus_list.append(edge)
        elif start_side is Side.MINUS:
            if end_side is Side.PLUS:
                split_point = edge.split(inserted.line)
                minus_list.append(split_point.incoming)
                plus_list.append(split_point.outgoing)
            else:
                minus_list.append(edge)
        else:
            if end_side is Side.PLUS:
                plus_list.append(edge)
            elif end_side is Side.MINUS:
                minus_list.append(edge)
            # edges lying on the inserted line are dropped

    if plus_list:
        _insert_edges(thickness, node.plus, plus_list)
    else:
        node.plus.attribute = False

    if minus_list:
        _insert_edges(thickness, node.minus, minus_list)
    else:
        node.minus.attribute = True


def _thick_side(offset, thickness):
    if abs(offset) <= thickness:
        return Side.HYPER
    return Side.MINUS if offset < 0 else Side.PLUS


# ==============================================================================
# TREE TO VERTICES
# ==============================================================================

class _ComparableSegment(Segment):
    __slots__ = ('sorting_key',)

    def __init__(self, start, end, line):
        super().__init__(start, end, line)
        self.sorting_key = (-math.inf, -math.inf) if start is None else (start.x, start.y)


class _SegmentsBuilder(BSPTreeVisitor):
    """Collects the boundary of a polygon as oriented segments."""

    def __init__(self):
        self.segments = []
        self.count = 0

    def visit_order(self, node):
        return VisitOrder.MINUS_SUB_PLUS

    def visit_internal_node(self, node):
        attribute = node.attribute
        if attribute.plus_outside is not None:
            self._add_contribution(attribute.plus_outside, False)
        if attribute.plus_inside is not None:
            self._add_contribution(attribute.plus_inside, True)

    def visit_leaf_node(self, node):
        pass

    def _add_contribution(self, sub, reversed_):
        line = sub.hyperplane
        for interval in sub.remaining_region.as_list():
            start = None if math.isinf(interval.inf) else line.to_space(interval.inf)
            end = None if math.isinf(interval.sup) else line.to_space(interval.sup)
            if reversed_:
                # inside on the plus side: walk the boundary the other way
                self.segments.append(_ComparableSegment(end, start, line.get_reverse()))
            else:
                self.segments.append(_ComparableSegment(start, end, line))
            self.count += 1


def _follow_loop(segments):
    """
    Extract one loop from the pool of segments, starting with the smallest one.

    Returns:
        The list of segments forming the loop, or None if the segments
        picked up do not form a usable loop (they are consumed anyway)
    """
    first = min(segments, key=lambda s: s.sorting_key)
    segments.remove(first)
    loop = [first]
    global_start = first.start
    end = first.end
    is_open = first.start is None

    while end is not None and (is_open or global_start.distance(end) > _LINK_DISTANCE):
        selected = None
        selected_distance = math.inf
        for segment in segments:
            if segment.start is None:
                continue
            distance = end.distance(segment.start)
            if distance < selected_distance:
                selected = segment
                selected_distance = distance

        if selected_distance > _LINK_DISTANCE:
            logger.debug("dropping unterminated chain of %d segments", len(loop))
            return None

        end = selected.end
        loop.append(selected)
        segments.remove(selected)

    if len(loop) == 2 and not is_open:
        # two segments going back and forth on the same line
        logger.debug("dropping degenerate two segments loop")
        return None

    if end is None and not is_open:
        raise InconsistentTreeError("closed boundary loop ends at infinity")

    return loop


def _loop_to_vertices(loop):
    if len(loop) < 2:
        # a single infinite line
        line = loop[0].line
        return (None, line.to_space(-_FLT_MAX), line.to_space(_FLT_MAX))

    if loop[0].start is None:
        # open loop: add far points before the first vertex and after the last one
        size = len(loop) + 2
        array = []
        for segment in loop:
            if not array:
                x = segment.line.to_sub_space(segment.end)
                x -= max(1.0, abs(x / 2))
                array.append(None)
                array.append(segment.line.to_space(x))
            if len(array) < size - 1:
                array.append(segment.end)
            if len(array) == size - 1:
                x = segment.line.to_sub_space(segment.start)
                x += max(1.0, abs(x / 2))
                array.append(segment.line.to_space(x))
        return tuple(array)

    return tuple(segment.start for segment in loop)
