"""ESC/POS protocol encoding."""

from thermal_receipt.escpos.encoder import (
    COMMAND_TABLE,
    TEXT_ENCODING,
    ControlCode,
    EscPosEncoder,
    encode,
    encode_alignment,
    to_hex,
)

__all__ = [
    "COMMAND_TABLE",
    "TEXT_ENCODING",
    "ControlCode",
    "EscPosEncoder",
    "encode",
    "encode_alignment",
    "to_hex",
]
