"""
Newick format reading and writing.

This module provides the tokenizer, the backward-scanning parser and the
serializer for labelled Newick trees.
"""

from .tokenizer import (
    RESERVED,
    Token,
    escape,
    unescape,
    tokenize,
)
from .newick_parser import (
    NodeFactory,
    parse_into,
    parse_newick,
)
from .newick_writer import to_newick

__all__ = [
    "RESERVED",
    "Token",
    "escape",
    "unescape",
    "tokenize",
    "NodeFactory",
    "parse_into",
    "parse_newick",
    "to_newick",
]
