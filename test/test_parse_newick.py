import pytest

from cladelayout.errors import InvalidEscapeError, NewickParseError
from cladelayout.parser.newick_parser import parse_into, parse_newick
from cladelayout.tree import Node, get_child


def test_parse_newick_1():
    s = "(,,(,));"
    root = parse_newick(s)
    assert len(root.children) == 3
    assert len(get_child(root, 2).children) == 2
    assert all(node.label == "" for node in root.traverse())


def test_parse_newick_2():
    s = "(A,B,(C,D));"
    root = parse_newick(s)
    assert len(root.children) == 3
    assert len(root.children[2].children) == 2
    assert get_child(root, 0).label == "A"
    assert get_child(root, 1).label == "B"
    assert get_child(root, 2, 0).label == "C"
    assert get_child(root, 2, 1).label == "D"


def test_parse_newick_3():
    s = "(A,B,(C,D)E)F;"
    root = parse_newick(s)
    assert get_child(root, 0).label == "A"
    assert get_child(root, 1).label == "B"
    assert get_child(root, 2, 0).label == "C"
    assert get_child(root, 2, 1).label == "D"
    assert get_child(root, 2).label == "E"
    assert get_child(root).label == "F"
    assert root.to_newick() == s


def test_parse_newick_4():
    s = "((B,(C,D)E)F)A;"
    root = parse_newick(s)

    assert get_child(root).label == "A"
    assert get_child(root, 0).label == "F"
    assert get_child(root, 0, 0).label == "B"
    assert get_child(root, 0, 1).label == "E"
    assert get_child(root, 0, 1, 0).label == "C"
    assert get_child(root, 0, 1, 1).label == "D"


def test_parse_newick_5():
    s = "((A,(B,C),((D,E),((F,G),H))),I);"
    root = parse_newick(s)

    assert get_child(root, 0, 0).label == "A"
    assert get_child(root, 0, 1, 0).label == "B"
    assert get_child(root, 0, 1, 1).label == "C"
    assert get_child(root, 0, 2, 0, 0).label == "D"
    assert get_child(root, 0, 2, 0, 1).label == "E"
    assert get_child(root, 0, 2, 1, 0, 0).label == "F"
    assert get_child(root, 0, 2, 1, 0, 1).label == "G"
    assert get_child(root, 0, 2, 1, 1).label == "H"
    assert get_child(root, 1).label == "I"


def test_parent_links_are_set():
    root = parse_newick("(A,(B,C)D)E;")
    for node in root.traverse()[1:]:
        assert node in node.parent.children
    assert root.parent is None
    assert get_child(root, 1, 0).depth() == 2


def test_single_leaf():
    root = parse_newick("A;")
    assert root.label == "A"
    assert root.is_leaf()


def test_semicolon_is_optional():
    root = parse_newick("(A,B)C")
    assert root.label == "C"
    assert [child.label for child in root.children] == ["A", "B"]


def test_empty_input():
    root = parse_newick("")
    assert root.label == ""
    assert root.is_leaf()
    assert parse_newick(";").is_leaf()


def test_single_unnamed_child():
    root = parse_newick("();")
    assert len(root.children) == 1
    assert root.to_newick() == "();"


def test_escaped_labels():
    root = parse_newick(r"(a\,b,c\(d\));")
    assert [child.label for child in root.children] == ["a,b", "c(d)"]


def test_parse_into_reuses_receiver():
    receiver = Node("old")
    created = []

    def factory(label):
        node = Node(label)
        created.append(node)
        return node

    result = parse_into("(A,B)R;", receiver, factory)
    assert result is receiver
    assert receiver.label == "R"
    assert [node.label for node in created] == ["B", "A"]
    assert receiver.children == list(reversed(created))


class LabelledNode(Node):
    __slots__ = ()


def test_factory_class_is_used_for_every_node():
    root = parse_newick("((A,B)C,D)E;", factory=LabelledNode)
    assert all(isinstance(node, LabelledNode) for node in root.traverse())
    assert isinstance(LabelledNode.from_newick("(X)Y;"), LabelledNode)


@pytest.mark.parametrize(
    "text",
    [
        "(A,B;",
        "A,B;",
        "((A);",
        "A,B)C;",
        "(A)(B);",
        "A(B);",
        "(A;B);",
        "A;B;",
    ],
)
def test_malformed_input_raises(text):
    with pytest.raises(NewickParseError):
        parse_newick(text)


def test_malformed_escape_raises():
    with pytest.raises(InvalidEscapeError):
        parse_newick("(A\\x,B);")


def test_fallback_keeps_text_as_single_leaf():
    root = parse_newick("(A,B;", fallback=True)
    assert root.label == "(A,B;"
    assert root.is_leaf()

    root = Node.from_newick("bad\\", fallback=True)
    assert root.label == "bad\\"
