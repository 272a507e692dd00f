"""Layout and text rendering of trees."""

from cladelayout.plot.layout import (
    LayoutEngine,
    LayoutResult,
    compute_layout,
    pivot_index,
)

__all__ = [
    "LayoutEngine",
    "LayoutResult",
    "compute_layout",
    "pivot_index",
]
