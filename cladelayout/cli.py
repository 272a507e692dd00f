import logging

import click
from tabulate import tabulate

from cladelayout.document import TreeDocument
from cladelayout.logger import layout_logger
from cladelayout.plot.tree_printer import tree_to_string


def _collapse_labels(document: TreeDocument, labels) -> None:
    for label in labels:
        if document.root.label == label:
            node = document.root
        else:
            node = document.find(label)
        if node is None:
            raise click.BadParameter(f"No node labelled {label!r}", param_hint="--collapse")
        document.collapse(node)


@click.command()
@click.argument("path", type=click.File("r"), default="-")
@click.option("--collapse", "collapse", multiple=True, help="Label of a node to collapse.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "ascii", "newick"]),
    default="table",
    show_default=True,
)
@click.option("--tablefmt", default="simple", show_default=True, help="tabulate table format.")
@click.option("--start", default=0, show_default=True, help="Position of the leftmost leaf.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--debug-layout", is_flag=True, help="Print the positions after each layout pass.")
def main(path, collapse, output_format, tablefmt, start, verbose, debug_layout):
    """Lay out the Newick tree in PATH (stdin by default)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    layout_logger.disabled = not debug_layout

    document = TreeDocument()
    document.options.leaf_start = start
    document.set_content(path.read().strip(), notify=False)
    _collapse_labels(document, collapse)

    if output_format == "newick":
        click.echo(document.newick())
    elif output_format == "ascii":
        click.echo(tree_to_string(document.root, summary=document.summary))
    else:
        result = document.render()
        click.echo(
            tabulate(
                result.rows(),
                headers=["label", "depth", "position"],
                tablefmt=tablefmt,
            )
        )


if __name__ == "__main__":
    main()
