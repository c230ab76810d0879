"""
    Binary space partitioning tree.

A BSP tree is either a leaf, carrying an attribute (for regions, a bool
telling whether the cell is inside), or an internal node carrying a cut
sub-hyperplane and exactly two children: the plus subtree on the plus side of
the cut and the minus subtree on its minus side.

Each node keeps a reference to its parent. The parent link is bookkeeping
only (fitting cuts to cells, grafting and pruning); a node's children are
owned through its plus/minus links.

Cuts are always fitted to the cell of the node that holds them: the cut of a
node is the part of its hyperplane lying inside the convex cell defined by
all the ancestor cuts.
"""

from abc import ABC, abstractmethod

from bspgeom.bspgeom_errors import InconsistentTreeError
from bspgeom.bspgeom_types import Side, VisitOrder


class LeafMerger(ABC):
    """Policy deciding the result of a merge when one operand is a leaf."""

    @abstractmethod
    def merge(self, leaf: 'BSPTree', tree: 'BSPTree', parent_tree: 'BSPTree',
              is_plus_child: bool, leaf_from_instance: bool) -> 'BSPTree':
        """
        Merge a leaf node and a tree node.

        Args:
            leaf: Leaf node (one of the operands)
            tree: Node of the other operand (may be a leaf too)
            parent_tree: Node of the merged tree under which the result must
                be grafted, or None if the result is the root
            is_plus_child: Whether the result becomes the plus child of parent_tree
            leaf_from_instance: True if the leaf comes from the tree whose
                merge method was called, False if it comes from the argument

        Returns:
            The merged subtree, already grafted under parent_tree
        """


class BSPTree:
    """
    A node of a binary space partitioning tree.

    Leaves are built with BSPTree(attribute), internal nodes with
    BSPTree.from_cut(cut, plus, minus, attribute).
    """
    __slots__ = ('_cut', '_plus', '_minus', '_parent', 'attribute')

    def __init__(self, attribute=None):
        self._cut = None
        self._plus = None
        self._minus = None
        self._parent = None
        self.attribute = attribute

    @classmethod
    def from_cut(cls, cut, plus: 'BSPTree', minus: 'BSPTree', attribute=None) -> 'BSPTree':
        """
        Build an internal node.

        Args:
            cut: Sub-hyperplane splitting the node cell
            plus: Subtree on the plus side of the cut
            minus: Subtree on the minus side of the cut
            attribute: Node attribute (boundary attribute for region trees)

        Raises:
            ValueError: If the cut or one of the children is missing
        """
        if cut is None:
            raise ValueError("an internal node requires a cut")
        if not isinstance(plus, BSPTree) or not isinstance(minus, BSPTree):
            raise ValueError("an internal node requires both a plus and a minus child")

        node = cls(attribute)
        node._cut = cut
        node._plus = plus
        node._minus = minus
        plus._parent = node
        minus._parent = node
        return node

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def cut(self):
        """Cut sub-hyperplane, None for leaves."""
        return self._cut

    @property
    def plus(self) -> 'BSPTree':
        return self._plus

    @property
    def minus(self) -> 'BSPTree':
        return self._minus

    @property
    def parent(self) -> 'BSPTree':
        return self._parent

    def is_leaf(self) -> bool:
        return self._cut is None

    def __repr__(self):
        if self._cut is None:
            return f"BSPTree(leaf, attribute={self.attribute!r})"
        return f"BSPTree(cut={self._cut.hyperplane!r})"

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def insert_cut(self, hyperplane) -> bool:
        """
        Insert a cut sub-hyperplane in a node.

        The hyperplane is first fitted to the node cell. If nothing of it
        remains in the cell the node becomes a leaf. Otherwise the node
        becomes an internal node whose two children are leaves carrying the
        attribute this node had.

        Returns:
            True if a cut has been inserted
        """
        if self._cut is not None:
            self._plus._parent = None
            self._minus._parent = None

        chopped = self._fit_to_cell(hyperplane.whole_hyperplane())
        if chopped is None or chopped.is_empty():
            self._cut = None
            self._plus = None
            self._minus = None
            return False

        leaf_attribute = self.attribute
        self._cut = chopped
        self._plus = BSPTree(leaf_attribute)
        self._plus._parent = self
        self._minus = BSPTree(leaf_attribute)
        self._minus._parent = self
        self.attribute = None
        return True

    def copy_self(self) -> 'BSPTree':
        """Deep copy of the tree (sub-hyperplanes copied, attributes shared)."""
        if self._cut is None:
            return BSPTree(self.attribute)
        return BSPTree.from_cut(self._cut.copy_self(), self._plus.copy_self(),
                                self._minus.copy_self(), self.attribute)

    def _fit_to_cell(self, sub):
        s = sub
        tree = self
        while tree._parent is not None and s is not None:
            parent = tree._parent
            split = s.split(parent._cut.hyperplane)
            s = split.plus if tree is parent._plus else split.minus
            tree = parent
        return s

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def visit(self, visitor) -> None:
        """
        Visit the tree.

        The visitor decides, for each internal node, whether the node itself
        is handled before, between or after its two subtrees. The traversal
        uses an explicit stack so deep trees do not exhaust the interpreter
        call stack.
        """
        # stack entries: (node, expand); expand=False means "call visit_internal_node"
        stack = [(self, True)]
        while stack:
            node, expand = stack.pop()
            if not expand:
                visitor.visit_internal_node(node)
                continue
            if node._cut is None:
                visitor.visit_leaf_node(node)
                continue

            order = visitor.visit_order(node)
            if order is VisitOrder.PLUS_MINUS_SUB:
                steps = ((node._plus, True), (node._minus, True), (node, False))
            elif order is VisitOrder.PLUS_SUB_MINUS:
                steps = ((node._plus, True), (node, False), (node._minus, True))
            elif order is VisitOrder.MINUS_PLUS_SUB:
                steps = ((node._minus, True), (node._plus, True), (node, False))
            elif order is VisitOrder.MINUS_SUB_PLUS:
                steps = ((node._minus, True), (node, False), (node._plus, True))
            elif order is VisitOrder.SUB_PLUS_MINUS:
                steps = ((node, False), (node._plus, True), (node._minus, True))
            elif order is VisitOrder.SUB_MINUS_PLUS:
                steps = ((node, False), (node._minus, True), (node._plus, True))
            else:
                raise InconsistentTreeError(f"unknown visit order {order!r}")
            stack.extend(reversed(steps))

    def classify(self, point, tolerance: float = 0.0) -> 'BSPTree':
        """
        Descend to the leaf whose cell contains a point.

        Points strictly on the plus side of a cut (beyond tolerance) go to the
        plus child. All other points go to the minus child, including points
        lying on the cut.
        """
        node = self
        while node._cut is not None:
            offset = node._cut.hyperplane.get_offset(point)
            node = node._plus if offset > tolerance else node._minus
        return node

    def get_cell(self, point, tolerance: float) -> 'BSPTree':
        """
        Get the cell to which a point belongs.

        Returns:
            The leaf containing the point, or the internal node whose cut
            contains the point (within tolerance)
        """
        node = self
        while node._cut is not None:
            offset = node._cut.hyperplane.get_offset(point)
            if abs(offset) < tolerance:
                return node
            node = node._minus if offset <= 0 else node._plus
        return node

    def get_close_cuts(self, point, max_offset: float) -> list:
        """Internal nodes whose cut passes within max_offset of a point."""
        close = []
        self._recurse_close_cuts(point, max_offset, close)
        return close

    def _recurse_close_cuts(self, point, max_offset, close):
        if self._cut is None:
            return
        offset = self._cut.hyperplane.get_offset(point)
        if offset < -max_offset:
            self._minus._recurse_close_cuts(point, max_offset, close)
        elif offset > max_offset:
            self._plus._recurse_close_cuts(point, max_offset, close)
        else:
            close.append(self)
            self._minus._recurse_close_cuts(point, max_offset, close)
            self._plus._recurse_close_cuts(point, max_offset, close)

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def _condense(self):
        if self._cut is None or self._plus._cut is not None or self._minus._cut is not None:
            return
        plus_attribute = self._plus.attribute
        minus_attribute = self._minus.attribute
        if (plus_attribute is None and minus_attribute is None) or \
                (plus_attribute is not None and plus_attribute == minus_attribute):
            self.attribute = minus_attribute if plus_attribute is None else plus_attribute
            self._cut = None
            self._plus = None
            self._minus = None

    def merge(self, tree: 'BSPTree', leaf_merger: LeafMerger) -> 'BSPTree':
        """
        Merge this tree with another one.

        Both trees are consumed: their nodes are reused in the result. Copy
        them first when the operands must survive.
        """
        return self._merge(tree, leaf_merger, None, False)

    def _merge(self, tree, leaf_merger, parent_tree, is_plus_child):
        if self._cut is None:
            return leaf_merger.merge(self, tree, parent_tree, is_plus_child, True)
        elif tree._cut is None:
            return leaf_merger.merge(tree, self, parent_tree, is_plus_child, False)

        merged = tree.split(self._cut)
        if parent_tree is not None:
            merged._parent = parent_tree
            if is_plus_child:
                parent_tree._plus = merged
            else:
                parent_tree._minus = merged

        self._plus._merge(merged._plus, leaf_merger, merged, True)
        self._minus._merge(merged._minus, leaf_merger, merged, False)
        merged._condense()
        if merged._cut is not None:
            merged._cut = merged._fit_to_cell(merged._cut.hyperplane.whole_hyperplane())
            if merged._cut is None:
                merged._collapse_vanished_cut()

        return merged

    def split(self, sub) -> 'BSPTree':
        """
        Split a BSP tree by an external sub-hyperplane.

        Returns:
            A new tree whose root cut is sub, with the parts of this tree
            lying on each side of it as plus and minus subtrees. This tree is
            left unchanged.
        """
        if self._cut is None:
            return BSPTree.from_cut(sub, self.copy_self(), BSPTree(self.attribute), None)

        c_hyperplane = self._cut.hyperplane
        s_hyperplane = sub.hyperplane
        side = sub.side(c_hyperplane)

        if side is Side.PLUS:
            # the splitting sub-hyperplane lies entirely in the plus subtree
            split = self._plus.split(sub)
            if self._cut.side(s_hyperplane) is Side.PLUS:
                split._plus = BSPTree.from_cut(self._cut.copy_self(), split._plus,
                                               self._minus.copy_self(), self.attribute)
                split._plus._condense()
                split._plus._parent = split
            else:
                split._minus = BSPTree.from_cut(self._cut.copy_self(), split._minus,
                                                self._minus.copy_self(), self.attribute)
                split._minus._condense()
                split._minus._parent = split
            return split

        if side is Side.MINUS:
            # the splitting sub-hyperplane lies entirely in the minus subtree
            split = self._minus.split(sub)
            if self._cut.side(s_hyperplane) is Side.PLUS:
                split._plus = BSPTree.from_cut(self._cut.copy_self(), self._plus.copy_self(),
                                               split._plus, self.attribute)
                split._plus._condense()
                split._plus._parent = split
            else:
                split._minus = BSPTree.from_cut(self._cut.copy_self(), self._plus.copy_self(),
                                                split._minus, self.attribute)
                split._minus._condense()
                split._minus._parent = split
            return split

        if side is Side.BOTH:
            cut_parts = self._cut.split(s_hyperplane)
            sub_parts = sub.split(c_hyperplane)
            split = BSPTree.from_cut(sub,
                                     self._plus.split(sub_parts.plus),
                                     self._minus.split(sub_parts.minus),
                                     None)
            split._plus._cut = cut_parts.plus
            split._minus._cut = cut_parts.minus
            tmp = split._plus._minus
            split._plus._minus = split._minus._plus
            split._plus._minus._parent = split._plus
            split._minus._plus = tmp
            split._minus._plus._parent = split._minus
            split._plus._condense()
            split._minus._condense()
            return split

        # the splitting sub-hyperplane lies on this node cut
        if c_hyperplane.same_orientation_as(s_hyperplane):
            return BSPTree.from_cut(sub, self._plus.copy_self(), self._minus.copy_self(), self.attribute)
        return BSPTree.from_cut(sub, self._minus.copy_self(), self._plus.copy_self(), self.attribute)

    def insert_in_tree(self, parent_tree: 'BSPTree', is_plus_child: bool,
                       vanished_attribute=None) -> None:
        """
        Graft this subtree under a node of another tree.

        The cuts of the subtree are chopped so they fit inside the cell of
        their new position.

        Args:
            parent_tree: Node under which the subtree is grafted, None for a root
            is_plus_child: Whether the subtree becomes the plus child
            vanished_attribute: Attribute of the leaf replacing a node whose
                cut vanished while its subtrees differ. None raises
                InconsistentTreeError in that case.
        """
        self._parent = parent_tree
        if parent_tree is not None:
            if is_plus_child:
                parent_tree._plus = self
            else:
                parent_tree._minus = self

        if self._cut is None:
            return

        tree = self
        while tree._parent is not None:
            hyperplane = tree._parent._cut.hyperplane
            if tree is tree._parent._plus:
                self._cut = self._cut.split(hyperplane).plus
                self._plus._chop_off_minus(hyperplane, vanished_attribute)
                self._minus._chop_off_minus(hyperplane, vanished_attribute)
            else:
                self._cut = self._cut.split(hyperplane).minus
                self._plus._chop_off_plus(hyperplane, vanished_attribute)
                self._minus._chop_off_plus(hyperplane, vanished_attribute)
            if self._cut is None:
                self._collapse_vanished_cut(vanished_attribute)
                return
            tree = tree._parent

        self._condense()

    def _collapse_vanished_cut(self, vanished_attribute=None):
        # the cut no longer crosses the cell
        plus, minus = self._plus, self._minus
        if plus._cut is None and minus._cut is None and plus.attribute == minus.attribute:
            self.attribute = plus.attribute
        elif vanished_attribute is not None:
            self.attribute = vanished_attribute
        else:
            raise InconsistentTreeError("a cut vanished while its subtrees still differ")
        self._plus = None
        self._minus = None

    def _chop_off_minus(self, hyperplane, vanished_attribute):
        if self._cut is not None:
            self._cut = self._cut.split(hyperplane).plus
            self._plus._chop_off_minus(hyperplane, vanished_attribute)
            self._minus._chop_off_minus(hyperplane, vanished_attribute)
            if self._cut is None:
                self._collapse_vanished_cut(vanished_attribute)

    def _chop_off_plus(self, hyperplane, vanished_attribute):
        if self._cut is not None:
            self._cut = self._cut.split(hyperplane).minus
            self._plus._chop_off_plus(hyperplane, vanished_attribute)
            self._minus._chop_off_plus(hyperplane, vanished_attribute)
            if self._cut is None:
                self._collapse_vanished_cut(vanished_attribute)

    def prune_around_convex_cell(self, cell_attribute, other_leafs_attribute, internal_attribute) -> 'BSPTree':
        """
        Build a tree keeping only the cuts bounding this leaf's convex cell.

        Args:
            cell_attribute: Attribute of the leaf standing for this cell
            other_leafs_attribute: Attribute of every other leaf
            internal_attribute: Attribute of the internal nodes

        Returns:
            A new tree, this tree is unchanged
        """
        tree = BSPTree(cell_attribute)
        current = self
        while current._parent is not None:
            parent_cut = current._parent._cut.copy_self()
            sibling = BSPTree(other_leafs_attribute)
            if current is current._parent._plus:
                tree = BSPTree.from_cut(parent_cut, tree, sibling, internal_attribute)
            else:
                tree = BSPTree.from_cut(parent_cut, sibling, tree, internal_attribute)
            current = current._parent
        return tree
