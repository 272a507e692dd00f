import pytest

from cladelayout.errors import InvalidEscapeError
from cladelayout.parser.tokenizer import RESERVED, Token, escape, tokenize, unescape


def test_escape_reserved_characters():
    assert escape("a(b)c,d;e\\f") == r"a\(b\)c\,d\;e\\f"


def test_escape_plain_text_unchanged():
    assert escape("Homo sapiens") == "Homo sapiens"
    assert escape("") == ""


def test_unescape_strict_accepts_reserved():
    for symbol in RESERVED:
        assert unescape(symbol, strict=True) == symbol


def test_unescape_strict_rejects_other_symbols():
    with pytest.raises(InvalidEscapeError):
        unescape("a", strict=True)
    with pytest.raises(InvalidEscapeError):
        unescape(None, strict=True)


def test_unescape_lenient_returns_symbol():
    assert unescape("a") == "a"


def test_tokenize_structure():
    tokens = tokenize("(A,B)C;")
    assert tokens == [
        Token.LPAREN,
        "A",
        Token.COMMA,
        "B",
        Token.RPAREN,
        "C",
        Token.SEMICOLON,
    ]


def test_tokenize_merges_escaped_characters_into_label():
    assert tokenize("a\\,b;") == ["a,b", Token.SEMICOLON]
    assert tokenize("\\(x") == ["(x"]


@pytest.mark.parametrize(
    "label",
    ["A", "two words", "(),;\\", "a\\b", "f(x, y);", "\\\\", "ünïcødé"],
)
def test_escape_round_trip(label):
    assert tokenize(escape(label) + ";") == [label, Token.SEMICOLON]


def test_tokenize_rejects_invalid_escape():
    with pytest.raises(InvalidEscapeError):
        tokenize("a\\b;")


def test_tokenize_rejects_trailing_backslash():
    with pytest.raises(InvalidEscapeError):
        tokenize("abc\\")


def test_tokenize_lenient_mode():
    assert tokenize("a\\b", strict=False) == ["ab"]
    assert tokenize("a\\", strict=False) == ["a\\"]
