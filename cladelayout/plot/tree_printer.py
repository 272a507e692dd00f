"""
ASCII tree printer for Node objects.

Collapsed nodes are printed with a summary instead of their descendants,
the same way a renderer hides them.
"""

from typing import Callable, List, Optional

from cladelayout.tree import Node

Summary = Callable[[Node], str]


def default_summary(node: Node) -> str:
    """``(n)`` where n is the number of hidden descendants."""
    return f"({len(node.queue()) - 1})"


def node_caption(node: Node, summary: Optional[Summary] = None) -> str:
    label = node.label
    if node.collapsed and node.children:
        text = (summary or default_summary)(node)
        label = f"{label} {text}" if label else text
    elif not label and node.children:
        label = "●"  # Simple dot for unnamed internal nodes
    return label


def render_tree_lines(
    node: Node,
    prefix: str = "",
    is_last: bool = True,
    summary: Optional[Summary] = None,
) -> List[str]:
    """
    Recursively render a tree as ASCII art lines.

    Args:
        node: Root of the subtree to render
        prefix: Current line prefix for indentation
        is_last: Whether this is the last child at current level
        summary: Text shown after collapsed nodes

    Returns:
        List[str]: Lines representing the tree structure
    """
    lines: List[str] = []
    label = node_caption(node, summary)

    if prefix == "":
        lines.append(label)
    else:
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{label}")

    if node.collapsed:
        return lines

    child_prefix = prefix + ("    " if is_last else "│   ")
    for i, child in enumerate(node.children):
        is_last_child = i == len(node.children) - 1
        lines.extend(render_tree_lines(child, child_prefix, is_last_child, summary))

    return lines


def tree_to_string(node: Node, summary: Optional[Summary] = None) -> str:
    return "\n".join(render_tree_lines(node, summary=summary))
