"""
Leaf-axis layout for ordered trees.

Every visible node gets one coordinate along the leaf axis, the axis on which
sibling subtrees sit side by side. Combined with the node depth this gives the
drawing position; the scaling and orientation of the two axes is left to the
renderer.

The layout runs in two passes:

1. Leaves (and collapsed nodes) are numbered consecutively from left to right
   and every internal node is centred over its median child.
2. Starting from the pivot (median) child of each node, every subtree is
   pushed as close to its parent's pivot child as its siblings allow. To find
   the largest permissible shift, each node keeps the leftmost and rightmost
   position its subtree reaches at every relative depth (its margin profile),
   so siblings are compared level by level instead of node by node.
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from cladelayout.logger import layout_logger
from cladelayout.tree import Node

logger = logging.getLogger(__name__)

# Position along the leaf axis. Integers for leaves, halves and other dyadic
# fractions for centred internal nodes, so float arithmetic stays exact.
Position = float
MarginProfile = List[Position]


def pivot_index(count: int) -> int:
    """Index of the median child; the left one of the two for even counts."""
    return (count - 1) // 2


class LayoutResult:
    """Leaf-axis positions of one layout run, keyed by node identity.

    Nodes hidden below a collapsed ancestor have no entry.
    """

    def __init__(self, root: Node, positions: Dict[Node, Position]):
        self.root = root
        self._positions = positions

    def __getitem__(self, node: Node) -> Position:
        return self._positions[node]

    def __contains__(self, node: object) -> bool:
        return node in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    def position(self, node: Node) -> Optional[Position]:
        return self._positions.get(node)

    def depth(self, node: Node) -> int:
        """Depth of ``node`` relative to the root the layout was computed for."""
        return node.depth() - self.root.depth()

    def nodes(self) -> List[Node]:
        """Laid out nodes, parents before children."""
        return [node for node in self.root.visual_queue() if node in self._positions]

    def items(self) -> List[Tuple[Node, Position]]:
        return [(node, self._positions[node]) for node in self.nodes()]

    def rows(self) -> List[Tuple[str, int, Position]]:
        """(label, depth, position) for every laid out node."""
        return [(node.label, self.depth(node), pos) for node, pos in self.items()]

    def extent(self) -> Tuple[Position, Position]:
        """Smallest and largest position used."""
        values = self._positions.values()
        return min(values), max(values)


class LayoutEngine:
    """Computes leaf-axis positions for the visible part of a tree.

    Positions and margin profiles live in side tables owned by the engine,
    so the tree itself is never modified. Every :meth:`run` starts from empty
    tables; given the same tree and collapsed flags the result is the same.
    """

    def __init__(self, root: Node, start: int = 0):
        self.root = root
        self.start = start
        self.positions: Dict[Node, Position] = {}
        self._left_margins: Dict[Node, MarginProfile] = {}
        self._right_margins: Dict[Node, MarginProfile] = {}

    def run(self) -> LayoutResult:
        self.positions = {}
        self._left_margins = {}
        self._right_margins = {}

        end = self.assign_leaf_positions(self.root, self.start)
        logger.debug("Assigned %d leaf slots", end - self.start)
        self._log_positions("Initial leaf positions")

        self.realign(self.root)
        self._log_positions("Realigned positions")

        return LayoutResult(self.root, dict(self.positions))

    # ------------------------------------------------------------------------
    # Pass 1: initial leaf numbering
    # ------------------------------------------------------------------------
    def assign_leaf_positions(self, node: Node, counter: int) -> int:
        """
        Number leaves left to right and centre internal nodes over them.

        Args:
            node: Root of the subtree to position
            counter: Position handed to the next leaf

        Returns:
            The counter after all leaves of the subtree were numbered
        """
        if node.is_leaf() or node.collapsed:
            self.positions[node] = counter
            return counter + 1

        for child in node.children:
            counter = self.assign_leaf_positions(child, counter)
        self.positions[node] = self._median_position(node.children)
        return counter

    def _median_position(self, children: List[Node]) -> Position:
        pivot = pivot_index(len(children))
        if len(children) % 2 == 1:
            return self.positions[children[pivot]]
        return (self.positions[children[pivot]] + self.positions[children[pivot + 1]]) / 2

    # ------------------------------------------------------------------------
    # Pass 2: realignment
    # ------------------------------------------------------------------------
    def realign(self, node: Node) -> None:
        """
        Move every subtree as close to its parent's pivot child as possible.

        Children are settled first, pivot child first and then outwards, so a
        node is always compared against siblings that already have their final
        shape. The margin profiles are dropped once the layout root is done.
        """
        if not node.collapsed and not node.is_leaf():
            children = node.children
            pivot = pivot_index(len(children))
            for idx in range(pivot, -1, -1):
                self.realign(children[idx])
            for idx in range(pivot + 1, len(children)):
                self.realign(children[idx])
            self.positions[node] = self._median_position(children)

        if node is self.root:
            self._left_margins.clear()
            self._right_margins.clear()
            return

        self._calculate_margins(node)
        self._shift_toward_pivot(node)

    def _calculate_margins(self, node: Node) -> None:
        position = self.positions[node]
        left: MarginProfile = [position]
        right: MarginProfile = [position]

        if not node.collapsed:
            for child in node.children:
                _merge_profile(left, self._left_margins[child], min)
                _merge_profile(right, self._right_margins[child], max)

        self._left_margins[node] = left
        self._right_margins[node] = right

    def _shift_toward_pivot(self, node: Node) -> None:
        siblings = node.parent.children
        pos = node.position()
        pivot = pivot_index(len(siblings))
        if pos == pivot:
            return

        # Left of the pivot the node moves right, so its right profile is
        # compared with the left profiles of the siblings towards the pivot.
        if pos < pivot:
            direction = 1
            own = self._right_margins[node]
            others = self._left_margins
            scanned = siblings[pos + 1:]
        else:
            direction = -1
            own = self._left_margins[node]
            others = self._right_margins
            scanned = siblings[pos - 1::-1]

        shift: Optional[Position] = None
        for sibling in scanned:
            profile = others.get(sibling)
            if profile is None:
                # Not realigned yet; it will be compared against this node later
                continue
            for own_margin, sibling_margin in zip(own, profile):
                gap = direction * (sibling_margin - own_margin) - 1
                shift = gap if shift is None else min(shift, gap)

        if not shift:
            return
        self._apply_shift(node, shift * direction)

    def _apply_shift(self, node: Node, shift: Position) -> None:
        for profile in (self._left_margins[node], self._right_margins[node]):
            for depth in range(len(profile)):
                profile[depth] += shift

        for descendant in node.visual_queue():
            self.positions[descendant] += shift

    def _log_positions(self, title: str) -> None:
        if layout_logger.disabled:
            return
        rows = [
            [node.label, node.depth() - self.root.depth(), self.positions[node]]
            for node in self.root.visual_queue()
        ]
        layout_logger.table(rows, headers=["label", "depth", "position"], title=title)


def _merge_profile(
    profile: MarginProfile,
    child_profile: MarginProfile,
    pick: Callable[[Position, Position], Position],
) -> None:
    """Fold a child's profile into its parent's, one depth level lower."""
    for depth, value in enumerate(child_profile):
        if depth + 1 >= len(profile):
            profile.append(value)
        else:
            profile[depth + 1] = pick(profile[depth + 1], value)


def compute_layout(root: Node, start: int = 0) -> LayoutResult:
    """
    Compute leaf-axis positions for ``root`` and its visible descendants.

    Args:
        root: Root of the (sub)tree to lay out
        start: Position of the leftmost leaf

    Returns:
        LayoutResult mapping each visible node to its position
    """
    return LayoutEngine(root, start=start).run()
