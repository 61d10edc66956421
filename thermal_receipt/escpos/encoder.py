"""
ESC/POS encoder: the final stage of the printing pipeline.

Encodes device-neutral PrinterCommand objects into ESC/POS bytes. All control
sequences come from COMMAND_TABLE; only the UTF-8 payload and the alignment
selector vary per command. Encoding is pure: equal command sequences always
give byte-identical output.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Iterable, Mapping

from thermal_receipt.errors import RenderError
from thermal_receipt.escpos.commands import (
    ESC_ALIGN,
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    ESC_INIT,
    ESC_UNDERLINE_OFF,
    ESC_UNDERLINE_ON,
    GS_CUT_FULL,
    GS_CUT_PARTIAL,
    LF,
    select_justification,
)
from thermal_receipt.model.enums import Align
from thermal_receipt.render.commands import (
    LineFeedCommand,
    PaperCutCommand,
    PrinterCommand,
    TextCommand,
)

logger: Final = logging.getLogger(__name__)

TEXT_ENCODING: Final[str] = "utf-8"


class ControlCode(Enum):
    INIT = "init"
    BOLD_ON = "bold_on"
    BOLD_OFF = "bold_off"
    UNDERLINE_ON = "underline_on"
    UNDERLINE_OFF = "underline_off"
    ALIGN = "align"  # prefix; selector byte appended
    LINE_FEED = "line_feed"
    CUT_FULL = "cut_full"
    CUT_PARTIAL = "cut_partial"


COMMAND_TABLE: Final[Mapping[ControlCode, bytes]] = {
    ControlCode.INIT: ESC_INIT,
    ControlCode.BOLD_ON: ESC_BOLD_ON,
    ControlCode.BOLD_OFF: ESC_BOLD_OFF,
    ControlCode.UNDERLINE_ON: ESC_UNDERLINE_ON,
    ControlCode.UNDERLINE_OFF: ESC_UNDERLINE_OFF,
    ControlCode.ALIGN: ESC_ALIGN,
    ControlCode.LINE_FEED: LF,
    ControlCode.CUT_FULL: GS_CUT_FULL,
    ControlCode.CUT_PARTIAL: GS_CUT_PARTIAL,
}


class EscPosEncoder:
    """Stateless; may be instantiated freely or shared."""

    def encode(self, commands: Iterable[PrinterCommand]) -> bytes:
        buffer = bytearray(COMMAND_TABLE[ControlCode.INIT])
        for command in commands:
            buffer += self.encode_command(command)
        logger.debug("Encoded %d bytes", len(buffer))
        return bytes(buffer)

    def encode_command(self, command: PrinterCommand) -> bytes:
        if isinstance(command, TextCommand):
            return self._encode_text(command)
        if isinstance(command, LineFeedCommand):
            return COMMAND_TABLE[ControlCode.LINE_FEED]
        if isinstance(command, PaperCutCommand):
            return COMMAND_TABLE[ControlCode.CUT_FULL]
        raise RenderError(f"Unsupported printer command: {type(command).__name__}")

    def _encode_text(self, command: TextCommand) -> bytes:
        out = bytearray(encode_alignment(command.align))
        if command.bold:
            out += COMMAND_TABLE[ControlCode.BOLD_ON]
        if command.underline:
            out += COMMAND_TABLE[ControlCode.UNDERLINE_ON]
        out += command.content.encode(TEXT_ENCODING)
        if command.bold:
            out += COMMAND_TABLE[ControlCode.BOLD_OFF]
        if command.underline:
            out += COMMAND_TABLE[ControlCode.UNDERLINE_OFF]
        return bytes(out)


def encode_alignment(align: Align) -> bytes:
    return select_justification(align.selector)


def encode(commands: Iterable[PrinterCommand]) -> bytes:
    return EscPosEncoder().encode(commands)


def to_hex(data: bytes) -> str:
    """
    Render bytes as space-separated upper-case hex pairs.

    Example:
        >>> to_hex(b"\\x1b@")
        '1B 40'
    """
    return " ".join(f"{b:02X}" for b in data)
