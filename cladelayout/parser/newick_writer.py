"""Serialization of trees back into Newick text."""

from typing import Any

from cladelayout.parser.tokenizer import escape


def to_newick(node: Any) -> str:
    """
    Render a node and all its descendants in Newick format.

    Internal nodes are written as ``(child,child,...)label``, leaves as their
    label alone. Reserved characters in labels are escaped, so the output
    parses back into an identical tree.

    Args:
        node: Root of the subtree; needs ``label`` and ``children``

    Returns:
        Newick text terminated by a semicolon
    """
    return _to_newick(node) + ";"


def _to_newick(node: Any) -> str:
    if node.children:
        child_str = "(" + ",".join(_to_newick(ch) for ch in node.children) + ")"
        return child_str + escape(node.label)
    return escape(node.label)
