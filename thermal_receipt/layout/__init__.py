"""Fixed-width layout of receipt elements."""

from thermal_receipt.layout.engine import (
    LayoutEngine,
    LayoutLine,
    LineKind,
    layout,
    layout_receipt,
    resolve_row_style,
)
from thermal_receipt.layout.text import pad_text, wrap_text

__all__ = [
    "LayoutEngine",
    "LayoutLine",
    "LineKind",
    "layout",
    "layout_receipt",
    "resolve_row_style",
    "pad_text",
    "wrap_text",
]
