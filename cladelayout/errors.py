"""Exceptions raised while reading Newick text."""

from typing import Optional


class NewickError(ValueError):
    """Base class for all Newick reading errors."""


class InvalidEscapeError(NewickError):
    """A backslash is followed by a non-reserved character or by end of input."""

    def __init__(self, symbol: Optional[str] = None):
        self.symbol = symbol
        if symbol:
            message = f"Invalid location of backslash \\ before {symbol!r}"
        else:
            message = "Invalid location of backslash \\ at end of input"
        super().__init__(message)


class NewickParseError(NewickError):
    """Structurally malformed Newick input (unbalanced parentheses, stray commas)."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (token {position})"
        super().__init__(message)
