"""
ESC/POS command constants for thermal receipt printers.

This package contains the low-level ESC/POS control sequences the encoder
emits. Byte values are protocol-mandated; no sequence is computed except the
justification selector.

Module Structure:
    commands/
    ├── __init__.py             # This file (public API exports)
    ├── hardware.py             # ESC/GS prefixes, initialize
    ├── text_formatting.py      # Bold, underline
    ├── positioning.py          # Line feed, justification
    └── paper.py                # Full and partial cut

Usage:
    >>> from thermal_receipt.escpos.commands import ESC_BOLD_ON, ESC_BOLD_OFF
    >>> command = ESC_BOLD_ON + b"Bold text" + ESC_BOLD_OFF
    >>> transport.write(command)

Public API:
    All command constants are re-exported from this module for convenience.
    Import either from specific modules or from this package root.
"""

from thermal_receipt.escpos.commands.hardware import ESC, ESC_INIT, GS
from thermal_receipt.escpos.commands.paper import GS_CUT_FULL, GS_CUT_PARTIAL
from thermal_receipt.escpos.commands.positioning import (
    ESC_ALIGN,
    LF,
    select_justification,
)
from thermal_receipt.escpos.commands.text_formatting import (
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    ESC_UNDERLINE_OFF,
    ESC_UNDERLINE_ON,
)

__all__ = [
    # Hardware
    "ESC",
    "GS",
    "ESC_INIT",
    # Text formatting
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "ESC_UNDERLINE_ON",
    "ESC_UNDERLINE_OFF",
    # Positioning
    "LF",
    "ESC_ALIGN",
    "select_justification",
    # Paper
    "GS_CUT_FULL",
    "GS_CUT_PARTIAL",
]
