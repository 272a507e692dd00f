from __future__ import annotations

import re
from collections import deque
from typing import Any, Callable, Deque, List, Optional, Tuple

from typing_extensions import Self

Matcher = Callable[[str], bool]


def _normalize_matcher(matcher: Any) -> Matcher:
    """Turn a value, predicate or pattern object into a label predicate."""
    if callable(matcher):
        return matcher
    test = getattr(matcher, "test", None)
    if callable(test):
        return test
    if isinstance(matcher, re.Pattern):
        return lambda label: matcher.search(label) is not None
    return lambda label: label == matcher


class Node:
    """
    Ordered n-ary tree node carrying a string label.

    The children list is owned by the node and its order is the left-to-right
    drawing order. ``parent`` is a plain back reference; a node is either a
    root (``parent is None``) or listed in exactly its parent's children.

    ``collapsed`` is set by whoever renders the tree. A collapsed node keeps
    its children but is treated as a leaf by the layout.

    Layout positions are not stored here; see
    :class:`cladelayout.plot.layout.LayoutResult`.
    """

    __slots__ = ("children", "parent", "label", "collapsed")

    children: List[Self]
    parent: Optional[Self]
    label: str
    collapsed: bool

    def __init__(
        self,
        label: str = "",
        children: Optional[List[Self]] = None,
        collapsed: bool = False,
    ):
        self.label = label
        self.parent = None
        self.collapsed = collapsed
        self.children = []
        for child in children or []:
            self.append(child)

    def __repr__(self) -> str:
        return f"Node('{self.label}')"

    def __str__(self) -> str:
        return self.to_newick()

    # ------------------------------------------------------------------------
    # Construction from / conversion to Newick
    # ------------------------------------------------------------------------
    @classmethod
    def from_newick(cls, text: str, fallback: bool = False) -> Self:
        from cladelayout.parser.newick_parser import parse_newick

        return parse_newick(text, factory=cls, fallback=fallback)

    def to_newick(self) -> str:
        from cladelayout.parser.newick_writer import to_newick

        return to_newick(self)

    # ------------------------------------------------------------------------
    # Structural mutation
    # ------------------------------------------------------------------------
    def remove_child(self, child: Self) -> None:
        """Remove ``child`` by identity; no-op if it is not a child.

        The child's parent reference is left untouched.
        """
        for idx, candidate in enumerate(self.children):
            if candidate is child:
                del self.children[idx]
                return

    def append(self, child: Self) -> None:
        """Move ``child`` to the end of this node's children."""
        if child.parent is not None:
            child.parent.remove_child(child)
        self.children.append(child)
        child.parent = self

    def prepend(self, child: Self) -> None:
        """Move ``child`` to the front of this node's children."""
        if child.parent is not None:
            child.parent.remove_child(child)
        self.children.insert(0, child)
        child.parent = self

    def insert(self, child: Self, position: int) -> None:
        """
        Move ``child`` so that it ends up at ``position`` among the children.

        When ``child`` already sits before ``position`` in this node, its own
        removal shifts the later indices down by one, so the target index is
        decremented first: ``[A, B, C].insert(A, 2)`` gives ``[B, A, C]``.
        """
        if child.parent is self:
            if child.position() < position:
                position -= 1

        if child.parent is not None:
            child.parent.remove_child(child)

        self.children.insert(position, child)
        child.parent = self

    def detach(self) -> None:
        """Remove this node (with its subtree) from its parent."""
        if self.parent is not None:
            self.parent.remove_child(self)
        self.parent = None

    # ------------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------------
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def position(self) -> int:
        """Zero-based index among the siblings, or -1 for a root."""
        if self.parent is None:
            return -1
        for idx, sibling in enumerate(self.parent.children):
            if sibling is self:
                return idx
        return -1

    def depth(self) -> int:
        depth = 0
        node = self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    def root(self) -> Self:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def is_ancestor_of(self, other: Self) -> bool:
        """True if ``other`` lies in this node's subtree (including itself)."""
        node: Optional[Self] = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def find(self, matcher: Any) -> Optional[Self]:
        """
        Breadth-first search among the descendants for a label match.

        Args:
            matcher: A predicate ``label -> bool``, an object with a
                ``test(label)`` method, a compiled regular expression, or a
                plain value compared for equality.

        Returns:
            The first matching node in breadth-first, left-to-right order,
            or None. The node itself is never returned.
        """
        matches = _normalize_matcher(matcher)

        queue: Deque[Self] = deque([self])
        while queue:
            node = queue.popleft()
            for child in node.children:
                if matches(child.label):
                    return child
                queue.append(child)
        return None

    # ------------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------------
    def traverse(self) -> List[Self]:
        """Pre-order list of this node and all descendants."""
        nodes: List[Self] = []
        stack: List[Self] = [self]
        while stack:
            current = stack.pop()
            nodes.append(current)
            # Reverse so children are visited left to right
            stack.extend(reversed(current.children))
        return nodes

    def queue(self) -> List[Self]:
        """Breadth-first list of this node and all descendants."""
        return self._breadth_first(visual=False)

    def visual_queue(self) -> List[Self]:
        """Breadth-first list that does not descend into collapsed nodes."""
        return self._breadth_first(visual=True)

    def _breadth_first(self, visual: bool) -> List[Self]:
        nodes: List[Self] = [self]
        ptr = 0
        while ptr < len(nodes):
            node = nodes[ptr]
            if not (visual and node.collapsed):
                nodes.extend(node.children)
            ptr += 1
        return nodes

    def get_leaves(self) -> List[Self]:
        return [node for node in self.traverse() if node.is_leaf()]

    # ------------------------------------------------------------------------
    # Copy & comparison
    # ------------------------------------------------------------------------
    def deep_copy(self) -> Self:
        new_node = type(self)(self.label, collapsed=self.collapsed)
        for child in self.children:
            new_node.append(child.deep_copy())
        return new_node

    def same_structure(self, other: "Node") -> bool:
        """Compare shape and labels of two subtrees, ignoring identity."""
        pending: List[Tuple[Node, Node]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left.label != right.label:
                return False
            if len(left.children) != len(right.children):
                return False
            pending.extend(zip(left.children, right.children))
        return True


def get_child(node: Node, *path: int) -> Node:
    """Follow child indices from ``node``: ``get_child(root, 2, 0)``."""
    for i in path:
        node = node.children[i]
    return node
