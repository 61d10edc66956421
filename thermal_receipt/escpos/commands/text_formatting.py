"""
Text formatting ESC/POS commands.

Contains commands for bold (emphasized) and underline modes. Every enable
command is paired with its disable command around the text it applies to.

Reference: ESC/POS Application Programming Guide, "Print characters"
"""

from typing import Final

__all__ = [
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "ESC_UNDERLINE_ON",
    "ESC_UNDERLINE_OFF",
]

# =============================================================================
# BOLD (EMPHASIZED) MODE
# =============================================================================

ESC_BOLD_ON: Final[bytes] = b"\x1bE\x01"
"""
Enable emphasized (bold) printing.

Command: ESC E 1
Hex: 1B 45 01
Effect: Prints characters with heavier dots
Reset: Cancelled by ESC E 0 or ESC @

Example:
    >>> printer.send(ESC_BOLD_ON + b"TOTAL" + ESC_BOLD_OFF)
"""

ESC_BOLD_OFF: Final[bytes] = b"\x1bE\x00"
"""
Disable emphasized (bold) printing.

Command: ESC E 0
Hex: 1B 45 00
"""

# =============================================================================
# UNDERLINE
# =============================================================================

ESC_UNDERLINE_ON: Final[bytes] = b"\x1b-\x01"
"""
Enable 1-dot underline.

Command: ESC - 1
Hex: 1B 2D 01
Note: Not applied to spaces produced by HT or to 90° rotated characters
Reset: Cancelled by ESC - 0 or ESC @

Example:
    >>> printer.send(ESC_UNDERLINE_ON + b"Underlined" + ESC_UNDERLINE_OFF)
"""

ESC_UNDERLINE_OFF: Final[bytes] = b"\x1b-\x00"
"""
Disable underline.

Command: ESC - 0
Hex: 1B 2D 00
"""
