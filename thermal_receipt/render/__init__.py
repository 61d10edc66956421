"""Layout lines to device-neutral printer commands."""

from thermal_receipt.render.commands import (
    CommandKind,
    LineFeedCommand,
    PaperCutCommand,
    PrinterCommand,
    TextCommand,
)
from thermal_receipt.render.renderer import TextRenderer, render

__all__ = [
    "CommandKind",
    "LineFeedCommand",
    "PaperCutCommand",
    "PrinterCommand",
    "TextCommand",
    "TextRenderer",
    "render",
]
