"""
Receipt elements: the shared vocabulary of the printing pipeline.

Immutable value types for print configuration, styled text, tabular rows,
feeds, dividers and paper cuts. The parser builds them from JSON, the layout
engine consumes them. Constructors enforce the structural invariants
(positive widths and counts, rows that fit the paper), so every ``Receipt``
that exists is printable.

New element kinds are added as a new dataclass plus a member of the
``PrintElement`` union; existing variants are never changed.

Module: thermal_receipt/model/elements.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Tuple, Union

from thermal_receipt.errors import ValidationError
from thermal_receipt.model.enums import Align, ElementKind

logger: Final = logging.getLogger(__name__)

DEFAULT_DIVIDER_CHAR: Final[str] = "-"


def _require_positive_int(value: object, name: str) -> None:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}", path=name
        )
    if value <= 0:
        raise ValidationError(f"{name} must be > 0, got {value}", path=name)


@dataclass(frozen=True, slots=True)
class PrinterConfig:
    """Printer line geometry. Extension point: dpi, code page."""

    chars_per_line: int

    def __post_init__(self) -> None:
        _require_positive_int(self.chars_per_line, "charsPerLine")


@dataclass(frozen=True, slots=True)
class TextStyle:
    bold: bool = False
    underline: bool = False

    @property
    def is_styled(self) -> bool:
        return self.bold or self.underline


DEFAULT_STYLE: Final[TextStyle] = TextStyle()


@dataclass(frozen=True, slots=True)
class Column:
    """One fixed-width cell of a row."""

    text: str
    width: int
    align: Align = Align.LEFT
    style: TextStyle = field(default_factory=TextStyle)

    def __post_init__(self) -> None:
        _require_positive_int(self.width, "width")


@dataclass(frozen=True, slots=True)
class TextElement:
    """Single-line paragraph. Never wrapped; only row columns wrap."""

    value: str
    align: Align = Align.LEFT
    style: TextStyle = field(default_factory=TextStyle)

    @property
    def kind(self) -> ElementKind:
        return ElementKind.TEXT


@dataclass(frozen=True, slots=True)
class RowElement:
    columns: Tuple[Column, ...] = ()

    def __post_init__(self) -> None:
        # lists from callers are frozen into a tuple
        object.__setattr__(self, "columns", tuple(self.columns))

    @property
    def kind(self) -> ElementKind:
        return ElementKind.ROW

    @property
    def total_width(self) -> int:
        return sum(column.width for column in self.columns)


@dataclass(frozen=True, slots=True)
class LineFeedElement:
    count: int = 1

    def __post_init__(self) -> None:
        _require_positive_int(self.count, "count")

    @property
    def kind(self) -> ElementKind:
        return ElementKind.LINEFEED


@dataclass(frozen=True, slots=True)
class DividerElement:
    char: str = DEFAULT_DIVIDER_CHAR

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValidationError(
                f"Divider char must be a single character, got {self.char!r}", path="char"
            )

    @property
    def kind(self) -> ElementKind:
        return ElementKind.DIVIDER


@dataclass(frozen=True, slots=True)
class PaperCutElement:
    @property
    def kind(self) -> ElementKind:
        return ElementKind.CUT


PrintElement = Union[TextElement, RowElement, LineFeedElement, DividerElement, PaperCutElement]


@dataclass(frozen=True, slots=True)
class Receipt:
    """
    Validated print job: configuration plus ordered elements.

    Construction rejects any row whose column widths add up to more than
    ``config.chars_per_line``.
    """

    config: PrinterConfig
    elements: Tuple[PrintElement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))
        for index, element in enumerate(self.elements):
            if isinstance(element, RowElement):
                total = element.total_width
                if total > self.config.chars_per_line:
                    logger.debug("Row %d rejected: %d > %d", index, total, self.config.chars_per_line)
                    raise ValidationError(
                        f"Row column widths ({total}) exceed charsPerLine "
                        f"({self.config.chars_per_line})",
                        path=f"elements[{index}].columns",
                    )

    def __len__(self) -> int:
        return len(self.elements)
