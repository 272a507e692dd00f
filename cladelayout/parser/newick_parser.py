import logging
from typing import Callable, Optional, TypeVar

from cladelayout.errors import NewickError, NewickParseError
from cladelayout.parser.tokenizer import Token, TokenList, is_label, tokenize
from cladelayout.tree import Node

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Node)

# Builds a fresh, detached node from a label. Node subclasses qualify as-is.
NodeFactory = Callable[[str], N]


# ===================================================================
# 1. TOKEN SCANNING
# ===================================================================


def _strip_terminator(tokens: TokenList) -> int:
    """Return the index of the last token that belongs to the tree itself."""
    last = len(tokens) - 1
    if last >= 0 and tokens[last] == Token.SEMICOLON:
        last -= 1
    return last


def _scan_backward(tokens: TokenList, last: int, receiver: N, factory: NodeFactory) -> N:
    """
    Rebuild the tree by walking the tokens from right to left.

    Reading backwards, a ``)`` opens a nesting level and a ``(`` closes it.
    Children are prepended, so the right-to-left walk restores the textual
    left-to-right order, and the partially built tree itself serves as the
    stack: ascending is just ``parent = parent.parent``.

    Raises:
        NewickParseError: If the token sequence is not a single balanced tree
    """
    parent: Optional[N] = None
    node: Optional[N] = None
    level = 0
    receiver_used = False
    pos = last

    while pos >= 0:
        if pos < last and tokens[pos + 1] == Token.LPAREN:
            # Only "(", "," or the start of the text may precede "("
            if is_label(tokens[pos]) or tokens[pos] == Token.RPAREN:
                raise NewickParseError("Unexpected content before '('", pos)
        else:
            label = ""
            if is_label(tokens[pos]):
                label = tokens[pos]
                pos -= 1

            if parent is None:
                if receiver_used:
                    raise NewickParseError("More than one subtree at top level", pos + 1)
                receiver.label = label
                node = receiver
                receiver_used = True
            else:
                node = factory(label)
                parent.prepend(node)

            if pos < 0:
                break

        token = tokens[pos]
        if token == Token.LPAREN:
            if parent is None:
                raise NewickParseError("Unbalanced '('", pos)
            level -= 1
            parent = parent.parent if level > 0 else None
        elif token == Token.RPAREN:
            level += 1
            parent = node
        elif token == Token.COMMA:
            if parent is None:
                raise NewickParseError("Unexpected ',' at top level", pos)
        elif token == Token.SEMICOLON:
            raise NewickParseError("Unexpected ';' inside tree", pos)

        pos -= 1

    if level != 0:
        raise NewickParseError("Unbalanced ')'")

    return receiver


# ===================================================================
# 2. PUBLIC API FUNCTIONS
# ===================================================================


def parse_into(text: str, receiver: N, factory: NodeFactory) -> N:
    """
    Parse Newick text into an existing node.

    The outermost label is written to ``receiver`` itself; every other node is
    created with ``factory`` and attached below it.

    Args:
        text: Newick text, the trailing semicolon may be omitted
        receiver: Node that becomes the root of the parsed tree
        factory: Callable building a new node from its label

    Returns:
        ``receiver``

    Raises:
        InvalidEscapeError: On a malformed escape sequence
        NewickParseError: On unbalanced parentheses or stray separators
    """
    tokens = tokenize(text)
    last = _strip_terminator(tokens)
    return _scan_backward(tokens, last, receiver, factory)


def parse_newick(
    text: str,
    factory: NodeFactory = Node,
    fallback: bool = False,
) -> N:
    """
    Parse a Newick string into a tree.

    Args:
        text: Newick text
        factory: Node constructor, called with the label of each node
        fallback: On malformed input return a single leaf labelled with the
            entire text instead of raising

    Returns:
        Root node of the parsed tree

    Raises:
        NewickError: On malformed input when ``fallback`` is False
    """
    receiver = factory("")
    try:
        return parse_into(text, receiver, factory)
    except NewickError as e:
        if not fallback:
            raise
        logger.warning("Could not parse Newick text, keeping it as one label: %s", e)
        return factory(text)
