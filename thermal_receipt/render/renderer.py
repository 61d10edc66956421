"""
Text renderer: layout lines → printer commands.

Mapping per line kind:
    TEXT     → TextCommand(style, align) + LineFeedCommand
    DIVIDER  → TextCommand(unstyled) + LineFeedCommand
    LINEFEED → LineFeedCommand
    PAPERCUT → PaperCutCommand (no feed)

A bitmap renderer can sit beside this one behind the same LayoutLine input.
"""

import logging
from typing import Iterable, List

from thermal_receipt.errors import RenderError
from thermal_receipt.layout.engine import LayoutLine, LineKind
from thermal_receipt.render.commands import (
    LineFeedCommand,
    PaperCutCommand,
    PrinterCommand,
    TextCommand,
)

logger = logging.getLogger(__name__)

_LINE_FEED = LineFeedCommand()
_PAPER_CUT = PaperCutCommand()


class TextRenderer:
    """Stateless; one instance may be shared."""

    def render(self, lines: Iterable[LayoutLine]) -> List[PrinterCommand]:
        commands: List[PrinterCommand] = []
        for line in lines:
            commands.extend(self.render_line(line))
        logger.debug("Rendered %d commands", len(commands))
        return commands

    def render_line(self, line: LayoutLine) -> List[PrinterCommand]:
        if line.kind == LineKind.TEXT:
            return [
                TextCommand(
                    content=line.text,
                    bold=line.style.bold,
                    underline=line.style.underline,
                    align=line.align,
                ),
                _LINE_FEED,
            ]
        if line.kind == LineKind.DIVIDER:
            return [TextCommand(content=line.text, align=line.align), _LINE_FEED]
        if line.kind == LineKind.LINEFEED:
            return [_LINE_FEED]
        if line.kind == LineKind.PAPERCUT:
            return [_PAPER_CUT]
        raise RenderError(f"Unsupported layout line kind: {line.kind!r}")


def render(lines: Iterable[LayoutLine]) -> List[PrinterCommand]:
    return TextRenderer().render(lines)
