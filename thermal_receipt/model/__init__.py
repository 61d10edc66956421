"""Receipt model: enums and immutable element types."""

from thermal_receipt.model.elements import (
    DEFAULT_DIVIDER_CHAR,
    DEFAULT_STYLE,
    Column,
    DividerElement,
    LineFeedElement,
    PaperCutElement,
    PrintElement,
    PrinterConfig,
    Receipt,
    RowElement,
    TextElement,
    TextStyle,
)
from thermal_receipt.model.enums import (
    DEFAULT_ALIGNMENT,
    DEFAULT_CHARS_PER_LINE,
    Align,
    ElementKind,
)

__all__ = [
    "Align",
    "ElementKind",
    "DEFAULT_ALIGNMENT",
    "DEFAULT_CHARS_PER_LINE",
    "DEFAULT_DIVIDER_CHAR",
    "DEFAULT_STYLE",
    "Column",
    "DividerElement",
    "LineFeedElement",
    "PaperCutElement",
    "PrintElement",
    "PrinterConfig",
    "Receipt",
    "RowElement",
    "TextElement",
    "TextStyle",
]
