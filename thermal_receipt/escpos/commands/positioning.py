"""
Positioning and justification ESC/POS commands.

Contains the line feed control byte and the justification (alignment)
selector.

Reference: ESC/POS Application Programming Guide, "Print position"
"""

from typing import Final

__all__ = [
    "LF",
    "ESC_ALIGN",
    "select_justification",
]

# =============================================================================
# CONTROL CHARACTERS
# =============================================================================

LF: Final[bytes] = b"\n"
"""
Line feed.

ASCII: 10
Hex: 0A
Effect: Prints the buffer and feeds one line
Note: One LF terminates every printed line and every blank line
"""

# =============================================================================
# JUSTIFICATION
# =============================================================================

ESC_ALIGN: Final[bytes] = b"\x1ba"
"""
Select justification prefix.

Command: ESC a
Hex: 1B 61
Note: Followed by one selector byte, see select_justification()
"""


def select_justification(n: int) -> bytes:
    """
    Select justification.

    Command: ESC a n
    Hex: 1B 61 n

    Args:
        n: 0 = left, 1 = center, 2 = right.

    Returns:
        ESC/POS command bytes.

    Raises:
        ValueError: If n is out of range.

    Note:
        Takes effect only at the beginning of a line.

    Example:
        >>> select_justification(1)
        b'\\x1ba\\x01'
    """
    if not (0 <= n <= 2):
        raise ValueError(f"Justification must be 0-2, got {n}")
    return ESC_ALIGN + bytes([n])
