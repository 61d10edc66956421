import pytest

from thermal_receipt.layout.text import pad_text, wrap_text
from thermal_receipt.model.enums import Align


class TestWrapText:
    def test_fits(self) -> None:
        assert wrap_text("Hi there", 10) == ["Hi there"]

    def test_wraps_on_words(self) -> None:
        assert wrap_text("Hello World", 5) == ["Hello", "World"]

    def test_long_word_hard_split(self) -> None:
        lines = wrap_text("Supercalifragilistic", 5)
        assert lines == ["Super", "calif", "ragil", "istic"]
        assert all(len(line) <= 5 for line in lines)

    def test_split_remainder_joins_next_word(self) -> None:
        assert wrap_text("abcdefg hi", 5) == ["abcde", "fg hi"]

    def test_long_word_between_short_words(self) -> None:
        assert wrap_text("a Supercalifragilistic b", 5) == [
            "a",
            "Super",
            "calif",
            "ragil",
            "istic",
            "b",
        ]

    def test_whitespace_collapsed(self) -> None:
        assert wrap_text("  a \t  b\n c ", 10) == ["a b c"]

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty_gives_one_blank_line(self, text: str) -> None:
        assert wrap_text(text, 4) == [""]

    @pytest.mark.parametrize("width", [0, -3])
    def test_bad_width(self, width: int) -> None:
        with pytest.raises(ValueError):
            wrap_text("x", width)

    @pytest.mark.parametrize("width", [1, 2, 3, 7, 12])
    def test_no_fragment_exceeds_width(self, width: int) -> None:
        text = "The quick brownish fox jumped over extraordinarily lazy dogs"
        for line in wrap_text(text, width):
            assert 0 < len(line) <= width


class TestPadText:
    @pytest.mark.parametrize(
        "align, expected",
        [
            (Align.LEFT, "Hi   "),
            (Align.RIGHT, "   Hi"),
            (Align.CENTER, " Hi  "),
        ],
    )
    def test_alignment(self, align: Align, expected: str) -> None:
        assert pad_text("Hi", 5, align) == expected

    def test_center_even_padding(self) -> None:
        assert pad_text("ab", 6, Align.CENTER) == "  ab  "

    def test_truncates(self) -> None:
        assert pad_text("Hello World", 5, Align.RIGHT) == "Hello"

    def test_exact_width_unchanged(self) -> None:
        assert pad_text("abc", 3, Align.CENTER) == "abc"

    @pytest.mark.parametrize("align", list(Align))
    @pytest.mark.parametrize("text", ["", "x", "Hi", "toolongtext"])
    def test_idempotent(self, align: Align, text: str) -> None:
        once = pad_text(text, 6, align)
        assert len(once) == 6
        assert pad_text(once, 6, align) == once

    def test_unicode_counts_code_points(self) -> None:
        assert pad_text("商店", 4) == "商店  "

    def test_wide_characters_are_one_unit_each(self) -> None:
        # two code points, four display columns
        padded = pad_text("商店", 2, Align.RIGHT)
        assert padded == "商店"
        assert wrap_text("商店 名", 3) == ["商店", "名"]
