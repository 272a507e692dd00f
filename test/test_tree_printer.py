from cladelayout.parser.newick_parser import parse_newick
from cladelayout.plot.tree_printer import render_tree_lines, tree_to_string


def test_render_tree_lines():
    root = parse_newick("((A,B)X,C)R;")
    assert render_tree_lines(root) == [
        "R",
        "    ├── X",
        "    │   ├── A",
        "    │   └── B",
        "    └── C",
    ]


def test_unnamed_internal_nodes_get_a_dot():
    root = parse_newick("((A,B),C);")
    assert render_tree_lines(root)[:2] == ["●", "    ├── ●"]


def test_collapsed_node_shows_summary():
    root = parse_newick("((A,B)X,(D)C)R;")
    root.children[0].collapsed = True
    root.children[1].collapsed = True
    root.children[1].label = ""
    assert tree_to_string(root).splitlines() == [
        "R",
        "    ├── X (2)",
        "    └── (1)",
    ]
    custom = tree_to_string(root, summary=lambda node: "...")
    assert "X ..." in custom
