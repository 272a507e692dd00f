"""
A tree being displayed and edited.

``TreeDocument`` owns a root node and keeps its layout current: every edit
made through the document (collapsing, removing, relabelling, inserting)
re-runs the layout and notifies the ``on_change`` callback. Drawing the
result is up to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from cladelayout.errors import NewickError
from cladelayout.parser.newick_parser import parse_newick
from cladelayout.plot.layout import LayoutResult, compute_layout
from cladelayout.plot.tree_printer import default_summary
from cladelayout.tree import Node


@dataclass
class DocumentOptions:
    """Configuration for a TreeDocument."""

    summary: Callable[[Node], str] = default_summary
    on_change: Optional[Callable[["TreeDocument"], None]] = None
    on_render: Optional[Callable[["TreeDocument", LayoutResult], None]] = None
    leaf_start: int = 0
    logger_name: str = __name__


class TreeDocument:
    """Holds one tree together with its most recent layout."""

    def __init__(
        self,
        newick: Optional[str] = None,
        options: Optional[DocumentOptions] = None,
    ):
        self.options = options or DocumentOptions()
        self.logger = logging.getLogger(self.options.logger_name)
        self.root: Node = Node()
        self.layout_result: Optional[LayoutResult] = None
        if newick is not None:
            self.set_content(newick, notify=False)

    # ------------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------------
    def parse(self, text: str) -> Node:
        """
        Parse Newick text, never failing.

        Malformed text is kept as a single leaf whose label is the whole
        input, so user content is not lost.
        """
        try:
            return parse_newick(text)
        except NewickError as e:
            self.logger.warning("Keeping unparsable Newick text as a label: %s", e)
            return Node(text)

    def set_content(self, content: Union[str, Node], notify: bool = True) -> None:
        self.root = self.parse(content) if isinstance(content, str) else content
        if notify:
            self._notify_change()
        self.render()

    def newick(self) -> str:
        return self.root.to_newick()

    def find(self, matcher: Any) -> Optional[Node]:
        return self.root.find(matcher)

    def summary(self, node: Node) -> str:
        return self.options.summary(node)

    # ------------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------------
    def render(self, node: Optional[Node] = None) -> LayoutResult:
        """
        Lay the tree out.

        Args:
            node: A single node whose label changed. The previous layout is
                still valid in that case and is reused.

        Returns:
            The current LayoutResult
        """
        if node is None or self.layout_result is None:
            self.layout_result = compute_layout(self.root, start=self.options.leaf_start)
            self.logger.debug("Laid out %d nodes", len(self.layout_result))

        if self.options.on_render is not None:
            self.options.on_render(self, self.layout_result)
        return self.layout_result

    # ------------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------------
    def collapse(self, node: Node) -> Optional[Node]:
        """Hide the descendants of ``node``; leaves cannot be collapsed."""
        if node.is_leaf() or node.collapsed:
            return None
        node.collapsed = True
        self.render()
        return node

    def expand(self, node: Node) -> Optional[Node]:
        if node.is_leaf() or not node.collapsed:
            return None
        node.collapsed = False
        self.render()
        return node

    def toggle(self, node: Node) -> Optional[Node]:
        if node.collapsed:
            return self.expand(node)
        return self.collapse(node)

    def remove(self, node: Node) -> None:
        """Remove ``node`` and its subtree from the tree."""
        node.detach()
        self._notify_change()
        self.render()

    def set_label(self, node: Node, label: str) -> None:
        if node.label != label:
            node.label = label
            self._notify_change()
            self.render(node)

    def insert_content(
        self,
        parent: Node,
        content: Union[Node, str, int, None] = None,
        position: Optional[int] = None,
    ) -> Node:
        """
        Insert a node or Newick text as a child of ``parent``.

        Args:
            parent: New parent of the content
            content: An existing node (moved), Newick text (parsed), an int
                (shorthand for an empty node at that position) or None (an
                empty node)
            position: Child index; defaults to appending

        Returns:
            The inserted node
        """
        if isinstance(content, int):
            position, content = content, None
        if position is None:
            position = len(parent.children)
        if content is None:
            content = ";"

        old_position = None
        if isinstance(content, str):
            node = self.parse(content)
        else:
            node = content
            if node is parent:
                raise ValueError("Cannot insert a node into itself")
            if node.parent is parent:
                old_position = node.position()

            if node.is_ancestor_of(parent):
                # Moving a node below its own descendant: the descendant takes
                # the node's place first, so no cycle is formed.
                node_pos, node_parent = node.position(), node.parent
                parent.detach()
                node.detach()
                if node_parent is not None:
                    node_parent.insert(parent, node_pos)
                else:
                    self.root = parent

        parent.insert(node, position)

        if node.position() != old_position:
            self._notify_change()
            self.render()
        return node

    def _notify_change(self) -> None:
        if self.options.on_change is not None:
            self.options.on_change(self)
