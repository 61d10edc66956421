"""
Device-neutral printer commands.

The encoder turns these into protocol bytes; nothing here knows about
ESC/POS. Extension point: bit-image or barcode commands are added as new
dataclasses in the ``PrinterCommand`` union.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from thermal_receipt.model.enums import Align


class CommandKind(str, Enum):
    TEXT = "text"
    LINE_FEED = "line_feed"
    PAPER_CUT = "paper_cut"


@dataclass(frozen=True, slots=True)
class TextCommand:
    """Text to print with optional styling."""

    content: str
    bold: bool = False
    underline: bool = False
    align: Align = Align.LEFT

    @property
    def kind(self) -> CommandKind:
        return CommandKind.TEXT


@dataclass(frozen=True, slots=True)
class LineFeedCommand:
    @property
    def kind(self) -> CommandKind:
        return CommandKind.LINE_FEED


@dataclass(frozen=True, slots=True)
class PaperCutCommand:
    """Full paper cut."""

    @property
    def kind(self) -> CommandKind:
        return CommandKind.PAPER_CUT


PrinterCommand = Union[TextCommand, LineFeedCommand, PaperCutCommand]
