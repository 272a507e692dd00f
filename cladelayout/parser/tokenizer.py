"""
Tokenizer for the Newick tree format.

Newick text is split into structural markers and label fragments. Labels may
contain any character; the reserved characters ``( ) , ; \\`` are written with
a leading backslash.
"""

from enum import IntEnum
from typing import List, Optional, Union

from cladelayout.errors import InvalidEscapeError

RESERVED = "(),;\\"


class Token(IntEnum):
    SEMICOLON = 0
    COMMA = 1
    LPAREN = 2
    RPAREN = 3


TokenList = List[Union[Token, str]]

_STRUCTURAL = {
    ";": Token.SEMICOLON,
    ",": Token.COMMA,
    "(": Token.LPAREN,
    ")": Token.RPAREN,
}


def escape(text: str) -> str:
    """Prefix every reserved character of ``text`` with a backslash."""
    return "".join("\\" + char if char in RESERVED else char for char in text)


def unescape(symbol: Optional[str], strict: bool = False) -> str:
    """
    Validate the character that follows a backslash.

    Args:
        symbol: The character after the backslash, or None/"" at end of input
        strict: Reject anything that is not a reserved character

    Returns:
        The symbol itself, to be taken literally

    Raises:
        InvalidEscapeError: In strict mode, if ``symbol`` is not reserved
    """
    if strict and (not symbol or symbol not in RESERVED):
        raise InvalidEscapeError(symbol)
    return symbol or ""


def is_label(token: Union[Token, str, None]) -> bool:
    # Token is an IntEnum, so plain str checks are enough to tell them apart
    return isinstance(token, str)


def tokenize(text: str, strict: bool = True) -> TokenList:
    """
    Split Newick text into structural tokens and label fragments.

    Consecutive label characters (including escaped ones) are merged into a
    single string token.

    Args:
        text: Newick text
        strict: Validate escape sequences, see :func:`unescape`

    Returns:
        List whose items are :class:`Token` members or label strings

    Raises:
        InvalidEscapeError: On a malformed escape sequence
    """
    tokens: TokenList = []
    pos = 0

    while pos < len(text):
        char = text[pos]
        marker = _STRUCTURAL.get(char)
        if marker is not None:
            tokens.append(marker)
            pos += 1
            continue

        if char == "\\":
            following = text[pos + 1] if pos + 1 < len(text) else None
            symbol = unescape(following, strict=strict)
            if following is None:
                # Lenient mode keeps a dangling backslash as a literal
                symbol = "\\"
            pos += 2
        else:
            symbol = char
            pos += 1

        if tokens and is_label(tokens[-1]):
            tokens[-1] = tokens[-1] + symbol
        else:
            tokens.append(symbol)

    return tokens
