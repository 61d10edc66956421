"""
Layout engine for thermal receipt content.

Converts print elements into aligned, padded layout lines:

- rows: per-column word wrap, padding to exact column widths, and a
  line-by-line merge of the wrapped columns;
- text: passed through as a single line (no wrapping);
- dividers: a full-width rule;
- feeds and cuts: marker lines for the renderer.

No ESC/POS here; styling travels on each LayoutLine and is turned into
commands downstream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Iterable, List, Sequence

from thermal_receipt.errors import LayoutError
from thermal_receipt.layout.text import pad_text, wrap_text
from thermal_receipt.model.elements import (
    DEFAULT_STYLE,
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
from thermal_receipt.model.enums import Align

logger: Final = logging.getLogger(__name__)


class LineKind(str, Enum):
    TEXT = "text"  # regular text line
    LINEFEED = "linefeed"  # blank line
    DIVIDER = "divider"  # full-width rule
    PAPERCUT = "papercut"  # cut marker


@dataclass(frozen=True, slots=True)
class LayoutLine:
    """One laid-out line. Row-derived text is exactly the row's total width."""

    text: str
    style: TextStyle = field(default_factory=TextStyle)
    align: Align = Align.LEFT
    kind: LineKind = LineKind.TEXT


class LayoutEngine:
    """Lays elements out for one printer configuration. Stateless apart from config."""

    def __init__(self, config: PrinterConfig) -> None:
        self.config = config

    def layout(self, elements: Iterable[PrintElement]) -> List[LayoutLine]:
        lines: List[LayoutLine] = []
        for element in elements:
            lines.extend(self.layout_element(element))
        return lines

    def layout_element(self, element: PrintElement) -> List[LayoutLine]:
        if isinstance(element, TextElement):
            return [LayoutLine(text=element.value, style=element.style, align=element.align)]
        if isinstance(element, RowElement):
            return self._layout_row(element)
        if isinstance(element, LineFeedElement):
            return [LayoutLine(text="", kind=LineKind.LINEFEED) for _ in range(element.count)]
        if isinstance(element, DividerElement):
            return [
                LayoutLine(text=element.char * self.config.chars_per_line, kind=LineKind.DIVIDER)
            ]
        if isinstance(element, PaperCutElement):
            return [LayoutLine(text="", kind=LineKind.PAPERCUT)]
        raise LayoutError(
            f"Unsupported print element: {type(element).__name__}",
            context={"element": repr(element)},
        )

    def _layout_row(self, row: RowElement) -> List[LayoutLine]:
        wrapped = [wrap_text(column.text, column.width) for column in row.columns]
        line_count = max((len(w) for w in wrapped), default=0)
        style = resolve_row_style(row)

        lines: List[LayoutLine] = []
        for index in range(line_count):
            cells = [
                pad_text(w[index] if index < len(w) else "", column.width, column.align)
                for column, w in zip(row.columns, wrapped)
            ]
            lines.append(LayoutLine(text="".join(cells), style=style, align=Align.LEFT))

        if line_count > 1:
            logger.debug("Row wrapped to %d lines (width %d)", line_count, row.total_width)
        return lines


def resolve_row_style(row: RowElement) -> TextStyle:
    """
    Style applied to every line of a row: the first bold or underlined column
    in declaration order wins; otherwise the default style.
    """
    for column in row.columns:
        if column.style.is_styled:
            return column.style
    return DEFAULT_STYLE


def layout(config: PrinterConfig, elements: Sequence[PrintElement]) -> List[LayoutLine]:
    return LayoutEngine(config).layout(elements)


def layout_receipt(receipt: Receipt) -> List[LayoutLine]:
    return LayoutEngine(receipt.config).layout(receipt.elements)
