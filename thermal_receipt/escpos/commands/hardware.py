"""
Printer control ESC/POS commands.

Reference: ESC/POS Application Programming Guide, "Miscellaneous commands"
Compatibility: Epson TM series and ESC/POS-compatible 58/80 mm thermal printers
"""

from typing import Final

__all__ = [
    "ESC",
    "GS",
    "ESC_INIT",
]

ESC: Final[bytes] = b"\x1b"
"""Escape prefix. Hex: 1B"""

GS: Final[bytes] = b"\x1d"
"""Group separator prefix used by GS commands. Hex: 1D"""

# =============================================================================
# INITIALIZATION
# =============================================================================

ESC_INIT: Final[bytes] = ESC + b"@"
"""
Initialize printer.

Command: ESC @
Hex: 1B 40
Effect: Clears the print buffer and resets all modes (bold, underline,
        alignment) to their power-on defaults
Note: Sent once at the start of every encoded receipt

Example:
    >>> printer.send(ESC_INIT + b"Hello" + LF)
"""
