"""Logging package for cladelayout."""

from cladelayout.logger.base_logger import AlgorithmLogger
from cladelayout.logger.table_logger import TableLogger

# Algorithm trace of the layout passes; enabled from the CLI or by tests
layout_logger = TableLogger("TreeLayout")
layout_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "layout_logger",
]
