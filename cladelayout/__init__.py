"""Newick trees with a leaf-axis layout."""

__all__ = [
    "Node",
    "parse_newick",
    "to_newick",
    "compute_layout",
    "LayoutEngine",
    "LayoutResult",
    "TreeDocument",
    "DocumentOptions",
    "NewickError",
    "NewickParseError",
    "InvalidEscapeError",
]


def __getattr__(name):
    if name == "Node":
        from .tree import Node

        return Node
    if name in {"parse_newick", "to_newick"}:
        from .parser import parse_newick, to_newick

        return locals()[name]
    if name in {"compute_layout", "LayoutEngine", "LayoutResult"}:
        from .plot.layout import compute_layout, LayoutEngine, LayoutResult

        return locals()[name]
    if name in {"TreeDocument", "DocumentOptions"}:
        from .document import TreeDocument, DocumentOptions

        return locals()[name]
    if name in {"NewickError", "NewickParseError", "InvalidEscapeError"}:
        from .errors import NewickError, NewickParseError, InvalidEscapeError

        return locals()[name]
    raise AttributeError(name)
