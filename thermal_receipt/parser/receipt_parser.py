"""
RU: Парсер JSON-описания чека: строгая структурная проверка и значения по умолчанию.
EN: JSON receipt description parser: strict structural validation plus defaults.

The JSON schema is the contract with producers:

    {
      "config": {"charsPerLine": 32},
      "elements": [
        {"type": "text", "value": "Store", "align": "center", "bold": true},
        {"type": "row", "columns": [{"text": "Item", "width": 16},
                                    {"text": "Price", "width": 16, "align": "right"}]},
        {"type": "linefeed", "count": 2},
        {"type": "divider", "char": "="},
        {"type": "cut"}
      ]
    }

No protocol knowledge and no layout here. Any problem raises ValidationError
and no partial Receipt is ever returned.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from thermal_receipt.errors import ValidationError
from thermal_receipt.model.elements import (
    DEFAULT_DIVIDER_CHAR,
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
from thermal_receipt.model.enums import Align, ElementKind
from thermal_receipt.parser.validation import ObjectValidator, one_of

logger = logging.getLogger(__name__)

_ALIGN_RULES = ["string", one_of(*(a.value for a in Align))]

_ROOT_SCHEMA = ObjectValidator({"config": ["object"], "elements": ["required", "array"]})
_CONFIG_SCHEMA = ObjectValidator({"charsPerLine": ["int", "positive"]})
_ELEMENT_SCHEMA = ObjectValidator({"type": ["required", "string"]})
_TEXT_SCHEMA = ObjectValidator(
    {
        "value": ["required", "string"],
        "align": _ALIGN_RULES,
        "bold": ["bool"],
        "underline": ["bool"],
    }
)
_ROW_SCHEMA = ObjectValidator({"columns": ["required", "array"]})
_COLUMN_SCHEMA = ObjectValidator(
    {
        "text": ["required", "string"],
        "width": ["required", "int", "positive"],
        "align": _ALIGN_RULES,
        "bold": ["bool"],
        "underline": ["bool"],
    }
)
_LINEFEED_SCHEMA = ObjectValidator({"count": ["int", "positive"]})
_DIVIDER_SCHEMA = ObjectValidator({"char": ["string", "not_empty"]})


class ReceiptParser:
    """
    Converts a JSON receipt description into a validated Receipt.

    Args:
        default_chars_per_line: Line width used when the description omits
            ``config.charsPerLine``. When None (default) the field is required.
    """

    def __init__(self, default_chars_per_line: Optional[int] = None) -> None:
        self.default_chars_per_line = default_chars_per_line
        self._element_parsers: Dict[str, Callable[[Mapping[str, Any], str], PrintElement]] = {
            ElementKind.TEXT.value: self._parse_text,
            ElementKind.ROW.value: self._parse_row,
            ElementKind.LINEFEED.value: self._parse_linefeed,
            ElementKind.DIVIDER.value: self._parse_divider,
            ElementKind.CUT.value: self._parse_cut,
        }

    def parse(self, description: Union[str, bytes]) -> Receipt:
        try:
            data = json.loads(description)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Malformed JSON: {e.msg} at line {e.lineno}, column {e.colno}",
                context={"line": e.lineno, "column": e.colno},
            ) from e
        except RecursionError as e:
            raise ValidationError("Receipt description nested too deeply") from e
        except (TypeError, UnicodeDecodeError) as e:
            raise ValidationError(f"Unreadable receipt description: {e}") from e
        return self.parse_data(data)

    def parse_data(self, data: Any) -> Receipt:
        """Build a Receipt from an already decoded JSON value."""
        if not isinstance(data, dict):
            raise ValidationError(
                f"Receipt description must be a JSON object, got {type(data).__name__}"
            )
        _ROOT_SCHEMA.check(data)

        config = self._parse_config(data.get("config"))
        elements = [
            self._parse_element(item, f"elements[{index}]")
            for index, item in enumerate(data["elements"])
        ]
        receipt = Receipt(config=config, elements=tuple(elements))
        logger.debug(
            "Parsed receipt: %d elements, %d chars per line",
            len(receipt.elements),
            config.chars_per_line,
        )
        return receipt

    def _parse_config(self, config: Optional[Mapping[str, Any]]) -> PrinterConfig:
        config = config or {}
        _CONFIG_SCHEMA.check(config, "config")
        chars_per_line = config.get("charsPerLine", self.default_chars_per_line)
        if chars_per_line is None:
            raise ValidationError(
                "Missing required field 'charsPerLine'", path="config.charsPerLine"
            )
        try:
            return PrinterConfig(chars_per_line)
        except ValidationError as e:
            raise ValidationError(e.message, path="config.charsPerLine") from e

    def _parse_element(self, item: Any, path: str) -> PrintElement:
        if not isinstance(item, dict):
            raise ValidationError(
                f"Element must be an object, got {type(item).__name__}", path=path
            )
        _ELEMENT_SCHEMA.check(item, path)
        element_type = item["type"]
        parser = self._element_parsers.get(element_type)
        if parser is None:
            raise ValidationError(f"Unknown element type: {element_type!r}", path=f"{path}.type")
        return parser(item, path)

    def _parse_text(self, item: Mapping[str, Any], path: str) -> TextElement:
        _TEXT_SCHEMA.check(item, path)
        return TextElement(
            value=item["value"],
            align=Align.parse(item.get("align", Align.LEFT.value), f"{path}.align"),
            style=_parse_style(item),
        )

    def _parse_row(self, item: Mapping[str, Any], path: str) -> RowElement:
        _ROW_SCHEMA.check(item, path)
        columns: List[Column] = []
        for index, col in enumerate(item["columns"]):
            col_path = f"{path}.columns[{index}]"
            if not isinstance(col, dict):
                raise ValidationError(
                    f"Column must be an object, got {type(col).__name__}", path=col_path
                )
            _COLUMN_SCHEMA.check(col, col_path)
            columns.append(
                Column(
                    text=col["text"],
                    width=col["width"],
                    align=Align.parse(col.get("align", Align.LEFT.value), f"{col_path}.align"),
                    style=_parse_style(col),
                )
            )
        # total width against charsPerLine is checked by Receipt
        return RowElement(columns=tuple(columns))

    def _parse_linefeed(self, item: Mapping[str, Any], path: str) -> LineFeedElement:
        _LINEFEED_SCHEMA.check(item, path)
        return LineFeedElement(count=item.get("count", 1))

    def _parse_divider(self, item: Mapping[str, Any], path: str) -> DividerElement:
        _DIVIDER_SCHEMA.check(item, path)
        char = item.get("char", DEFAULT_DIVIDER_CHAR)
        return DividerElement(char=char[0])

    def _parse_cut(self, item: Mapping[str, Any], path: str) -> PaperCutElement:
        return PaperCutElement()


def _parse_style(item: Mapping[str, Any]) -> TextStyle:
    return TextStyle(bold=item.get("bold", False), underline=item.get("underline", False))


def parse(description: Union[str, bytes], *, default_chars_per_line: Optional[int] = None) -> Receipt:
    """Parse a JSON receipt description. Raises ValidationError on any problem."""
    return ReceiptParser(default_chars_per_line=default_chars_per_line).parse(description)
