"""
Fixed-width text helpers for column layout.

Pure string manipulation: greedy word wrap with hard splitting of overlong
words, and alignment padding/truncation to an exact width.

Every width here is a count of Unicode code points (``len(text)``), not of
printed display columns: a double-width CJK character occupies one unit of
``width`` but two columns on paper. Callers laying out wide scripts size
their columns accordingly.
"""

from typing import List

from thermal_receipt.model.enums import Align

__all__ = ["wrap_text", "pad_text"]


def wrap_text(text: str, width: int) -> List[str]:
    """
    Wrap ``text`` into lines of at most ``width`` characters.

    Words are whitespace-delimited and joined with single spaces. A word longer
    than ``width`` is split into ``width``-sized fragments; the last, shorter
    fragment stays open so following words can join it.

    Args:
        text: Column text.
        width: Column width, > 0.

    Returns:
        At least one line; ``[""]`` for empty or all-whitespace text.

    Example:
        >>> wrap_text("Hello World", 5)
        ['Hello', 'World']
        >>> wrap_text("Supercalifragilistic", 5)
        ['Super', 'calif', 'ragil', 'istic']
    """
    if width <= 0:
        raise ValueError(f"width must be > 0, got {width}")

    lines: List[str] = []
    current = ""

    for word in text.split():
        if len(word) > width:
            if current:
                lines.append(current)
                current = ""
            remaining = word
            while len(remaining) > width:
                lines.append(remaining[:width])
                remaining = remaining[width:]
            current = remaining
            continue

        candidate = f"{current} {word}" if current else word
        if len(candidate) <= width:
            current = candidate
        else:
            lines.append(current)
            current = word

    if current:
        lines.append(current)

    return lines or [""]


def pad_text(text: str, width: int, align: Align = Align.LEFT) -> str:
    """
    Pad or truncate ``text`` to exactly ``width`` code points.

    Centering puts the odd extra space on the right: left pad is
    ``padding // 2``, right pad the remainder.

    Example:
        >>> pad_text("Hi", 5, Align.CENTER)
        ' Hi  '
    """
    if len(text) >= width:
        return text[:width]

    padding = width - len(text)
    if align == Align.RIGHT:
        return " " * padding + text
    if align == Align.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding
