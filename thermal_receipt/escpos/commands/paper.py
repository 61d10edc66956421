"""
Paper cutting ESC/POS commands.

Reference: ESC/POS Application Programming Guide, "Mechanism control"
Compatibility: printers with an auto-cutter; ignored by printers without one
"""

from typing import Final

from thermal_receipt.escpos.commands.hardware import GS

__all__ = [
    "GS_CUT_FULL",
    "GS_CUT_PARTIAL",
]

GS_CUT_FULL: Final[bytes] = GS + b"V\x00"
"""
Full cut.

Command: GS V 0
Hex: 1D 56 00
Effect: Cuts the paper completely at the current position
Note: Feed enough lines beforehand for the last printed line to clear the
      cutter; the receipt description controls that with linefeed elements

Example:
    >>> printer.send(b"Thank you!" + LF + GS_CUT_FULL)
"""

GS_CUT_PARTIAL: Final[bytes] = GS + b"VA"
"""
Partial cut (one point left uncut).

Command: GS V A
Hex: 1D 56 41
Note: Present in the command table but never emitted by the encoder
"""
