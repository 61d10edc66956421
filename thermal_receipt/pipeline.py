"""
Receipt pipeline facade.

description → parse → Receipt → layout → LayoutLines → render → commands
→ encode → bytes

Each call works on its own input and returns fresh values, so the functions
here are safe to call concurrently. Every failure surfaces as a single
ReceiptError subclass; on failure no bytes are produced or written.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from thermal_receipt.errors import NotConnectedError, PrintError
from thermal_receipt.escpos.encoder import EscPosEncoder, to_hex
from thermal_receipt.layout.engine import LayoutEngine, LayoutLine
from thermal_receipt.model.elements import Receipt
from thermal_receipt.model.enums import DEFAULT_CHARS_PER_LINE
from thermal_receipt.parser.receipt_parser import ReceiptParser
from thermal_receipt.render.commands import PrinterCommand
from thermal_receipt.render.renderer import TextRenderer
from thermal_receipt.transport.base import PrinterTransport

logger = logging.getLogger(__name__)

Description = Union[str, bytes]


def build_layout(
    description: Description, *, default_chars_per_line: Optional[int] = None
) -> List[LayoutLine]:
    receipt = ReceiptParser(default_chars_per_line).parse(description)
    return LayoutEngine(receipt.config).layout(receipt.elements)


def build_commands(
    description: Description, *, default_chars_per_line: Optional[int] = None
) -> List[PrinterCommand]:
    lines = build_layout(description, default_chars_per_line=default_chars_per_line)
    return TextRenderer().render(lines)


def encode_receipt(receipt: Receipt) -> bytes:
    """Lay out, render and encode an already validated receipt."""
    lines = LayoutEngine(receipt.config).layout(receipt.elements)
    return EscPosEncoder().encode(TextRenderer().render(lines))


def encode_description(
    description: Description, *, default_chars_per_line: Optional[int] = None
) -> bytes:
    """
    Run the whole pipeline on a JSON receipt description.

    Raises:
        ValidationError: If the description is invalid.

    Example:
        >>> encode_description('{"config": {"charsPerLine": 32}, '
        ...                    '"elements": [{"type": "text", "value": "Hello"}]}')
        b'\\x1b@\\x1ba\\x00Hello\\n'
    """
    receipt = ReceiptParser(default_chars_per_line).parse(description)
    return encode_receipt(receipt)


def describe_bytes(
    description: Description, *, default_chars_per_line: Optional[int] = None
) -> str:
    """Hex dump of the encoded receipt, for debugging without a printer."""
    return to_hex(encode_description(description, default_chars_per_line=default_chars_per_line))


def print_description(
    description: Description,
    transport: PrinterTransport,
    *,
    default_chars_per_line: Optional[int] = None,
) -> int:
    """
    Encode a receipt and write it to a connected transport.

    Returns:
        Number of bytes written.

    Raises:
        NotConnectedError: If the transport is not connected.
        ValidationError: If the description is invalid; nothing is written.
        PrintError: If the transport fails while writing.
    """
    if not transport.is_connected():
        raise NotConnectedError("Printer not connected. Call connect() first.")

    data = encode_description(description, default_chars_per_line=default_chars_per_line)
    try:
        transport.write(data)
    except OSError as exc:
        logger.error("Print failed after encoding %d bytes: %s", len(data), exc)
        raise PrintError(str(exc) or type(exc).__name__, context={"bytes": len(data)}) from exc

    logger.info("Printed %d bytes", len(data))
    return len(data)


def printer_info(
    config: Mapping[str, Any], transport: Optional[PrinterTransport] = None
) -> Dict[str, Any]:
    """Describe the configured printer in the description's JSON vocabulary."""
    return {
        "charsPerLine": config.get("chars_per_line", DEFAULT_CHARS_PER_LINE),
        "printerWidthMm": config.get("printer_width_mm"),
        "name": config.get("printer_name"),
        "connected": transport.is_connected() if transport is not None else False,
    }
