import json
from typing import Any, Dict, List

import pytest

from thermal_receipt.errors import ValidationError
from thermal_receipt.model import (
    Align,
    DividerElement,
    LineFeedElement,
    PaperCutElement,
    RowElement,
    TextElement,
    TextStyle,
)
from thermal_receipt.parser import ReceiptParser, parse


def _doc(elements: List[Dict[str, Any]], chars_per_line: Any = 32) -> str:
    return json.dumps({"config": {"charsPerLine": chars_per_line}, "elements": elements})


class TestValidDescriptions:
    """Descriptions that parse into a Receipt."""

    def test_full_receipt(self) -> None:
        receipt = parse(
            _doc(
                [
                    {"type": "text", "value": "Store", "align": "center", "bold": True},
                    {
                        "type": "row",
                        "columns": [
                            {"text": "Item", "width": 16},
                            {"text": "Price", "width": 16, "align": "right", "underline": True},
                        ],
                    },
                    {"type": "linefeed", "count": 2},
                    {"type": "divider", "char": "="},
                    {"type": "cut"},
                ]
            )
        )
        assert receipt.config.chars_per_line == 32
        kinds = [type(e) for e in receipt.elements]
        assert kinds == [TextElement, RowElement, LineFeedElement, DividerElement, PaperCutElement]

        text = receipt.elements[0]
        assert isinstance(text, TextElement)
        assert text.align is Align.CENTER
        assert text.style == TextStyle(bold=True)

        row = receipt.elements[1]
        assert isinstance(row, RowElement)
        assert row.columns[1].align is Align.RIGHT
        assert row.columns[1].style.underline

    def test_defaults_applied(self) -> None:
        receipt = parse(
            _doc(
                [
                    {"type": "text", "value": "Hello"},
                    {"type": "linefeed"},
                    {"type": "divider"},
                ]
            )
        )
        text, feed, divider = receipt.elements
        assert isinstance(text, TextElement) and text.align is Align.LEFT
        assert not text.style.is_styled
        assert isinstance(feed, LineFeedElement) and feed.count == 1
        assert isinstance(divider, DividerElement) and divider.char == "-"

    def test_align_case_insensitive(self) -> None:
        receipt = parse(_doc([{"type": "text", "value": "x", "align": "RIGHT"}]))
        assert receipt.elements[0].align is Align.RIGHT  # type: ignore[union-attr]

    def test_divider_keeps_first_char(self) -> None:
        receipt = parse(_doc([{"type": "divider", "char": "=-"}]))
        assert receipt.elements[0] == DividerElement("=")

    def test_extra_fields_ignored(self) -> None:
        receipt = parse(_doc([{"type": "cut", "partial": True, "note": "x"}]))
        assert receipt.elements == (PaperCutElement(),)

    def test_empty_columns_allowed(self) -> None:
        receipt = parse(_doc([{"type": "row", "columns": []}]))
        assert receipt.elements == (RowElement(),)

    def test_empty_elements(self) -> None:
        assert len(parse(_doc([]))) == 0

    def test_bytes_input(self) -> None:
        receipt = parse(_doc([{"type": "text", "value": "商店名"}]).encode("utf-8"))
        assert receipt.elements[0].value == "商店名"  # type: ignore[union-attr]

    def test_default_chars_per_line_used_when_config_missing(self) -> None:
        receipt = parse('{"elements": []}', default_chars_per_line=48)
        assert receipt.config.chars_per_line == 48

    def test_explicit_chars_per_line_wins_over_default(self) -> None:
        receipt = parse(_doc([], 40), default_chars_per_line=48)
        assert receipt.config.chars_per_line == 40

    def test_parse_data(self) -> None:
        receipt = ReceiptParser().parse_data(
            {"config": {"charsPerLine": 5}, "elements": [{"type": "cut"}]}
        )
        assert receipt.config.chars_per_line == 5


class TestInvalidDescriptions:
    """Every problem raises ValidationError with a path to the offending field."""

    def test_row_overflow(self) -> None:
        doc = _doc(
            [
                {
                    "type": "row",
                    "columns": [{"text": "Item", "width": 7}, {"text": "Price", "width": 5}],
                }
            ],
            10,
        )
        with pytest.raises(ValidationError) as exc_info:
            parse(doc)
        assert exc_info.value.path == "elements[0].columns"

    def test_malformed_json(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse('{"config": ')
        assert "Malformed JSON" in exc_info.value.message
        assert exc_info.value.context["line"] == 1

    def test_not_a_string(self) -> None:
        with pytest.raises(ValidationError):
            parse(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("doc", ["[]", "42", '"text"', "null"])
    def test_root_not_object(self, doc: str) -> None:
        with pytest.raises(ValidationError, match="must be a JSON object"):
            parse(doc)

    def test_missing_elements(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse('{"config": {"charsPerLine": 32}}')
        assert exc_info.value.path == "elements"
        assert "Missing required field 'elements'" in exc_info.value.message

    def test_missing_chars_per_line_without_default(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse('{"elements": []}')
        assert exc_info.value.path == "config.charsPerLine"

    @pytest.mark.parametrize("value", [0, -5, True, "32", 1.5, None])
    def test_bad_chars_per_line(self, value: Any) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([], value))
        assert exc_info.value.path == "config.charsPerLine"

    def test_bad_default_chars_per_line(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse('{"elements": []}', default_chars_per_line=0)
        assert exc_info.value.path == "config.charsPerLine"

    def test_config_not_object(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse('{"config": 32, "elements": []}')
        assert exc_info.value.path == "config"

    def test_unknown_element_type(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([{"type": "cut"}, {"type": "image"}]))
        assert exc_info.value.path == "elements[1].type"
        assert "Unknown element type: 'image'" in exc_info.value.message

    def test_element_not_object(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc(["cut"]))  # type: ignore[list-item]
        assert exc_info.value.path == "elements[0]"

    def test_missing_type(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([{"value": "x"}]))
        assert exc_info.value.path == "elements[0].type"

    def test_text_missing_value(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([{"type": "text"}]))
        assert exc_info.value.path == "elements[0].value"

    def test_unknown_alignment(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([{"type": "text", "value": "x", "align": "middle"}]))
        assert exc_info.value.path == "elements[0].align"

    def test_null_optional_field_is_type_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([{"type": "text", "value": "x", "bold": None}]))
        assert exc_info.value.path == "elements[0].bold"
        assert "null" in exc_info.value.message

    @pytest.mark.parametrize("width", [0, -1, "5", True])
    def test_bad_column_width(self, width: Any) -> None:
        doc = _doc([{"type": "row", "columns": [{"text": "a", "width": width}]}])
        with pytest.raises(ValidationError) as exc_info:
            parse(doc)
        assert exc_info.value.path == "elements[0].columns[0].width"

    def test_column_not_object(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([{"type": "row", "columns": ["a"]}]))
        assert exc_info.value.path == "elements[0].columns[0]"

    def test_columns_not_array(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([{"type": "row", "columns": {}}]))
        assert exc_info.value.path == "elements[0].columns"

    def test_linefeed_zero(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([{"type": "linefeed", "count": 0}]))
        assert exc_info.value.path == "elements[0].count"

    def test_empty_divider_char(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(_doc([{"type": "divider", "char": ""}]))
        assert exc_info.value.path == "elements[0].char"

    def test_lone_surrogate_in_text_value(self) -> None:
        doc = r'{"config": {"charsPerLine": 32}, "elements": [{"type": "text", "value": "A\ud800B"}]}'
        with pytest.raises(ValidationError) as exc_info:
            parse(doc)
        assert exc_info.value.path == "elements[0].value"
        assert "UTF-8" in exc_info.value.message

    def test_lone_surrogate_in_column_text(self) -> None:
        doc = (
            r'{"config": {"charsPerLine": 32}, "elements": ['
            r'{"type": "row", "columns": [{"text": "\udc80", "width": 5}]}]}'
        )
        with pytest.raises(ValidationError) as exc_info:
            parse(doc)
        assert exc_info.value.path == "elements[0].columns[0].text"

    def test_deeply_nested_json(self) -> None:
        with pytest.raises(ValidationError, match="nested too deeply"):
            parse("[" * 100000 + "]" * 100000)


def test_parse_debug_logging(caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
    import logging

    monkeypatch.setattr(logging.getLogger("thermal_receipt"), "propagate", True)
    with caplog.at_level(logging.DEBUG, logger="thermal_receipt"):
        parse(_doc([{"type": "cut"}]))
    assert any("Parsed receipt: 1 elements" in r.message for r in caplog.records)
