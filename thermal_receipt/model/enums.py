"""
model/enums.py

(Краткое RU: Перечисления модели чека, без логики протокола ESC/POS.)

EN: Domain enums for the receipt model. Values are the JSON tokens used by
the receipt description, so ``Align("center")`` round-trips with the input.
NO protocol/ESC/POS command logic here!

See Also:
    - thermal_receipt.escpos.commands (for protocol bytes)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final

from thermal_receipt.errors import ValidationError

_logger: Final[logging.Logger] = logging.getLogger(__name__)

DEFAULT_CHARS_PER_LINE: Final[int] = 32


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def selector(self) -> int:
        """Index used by the ESC a n alignment command."""
        mapping = {
            Align.LEFT: 0,
            Align.CENTER: 1,
            Align.RIGHT: 2,
        }
        return mapping[self]

    @classmethod
    def parse(cls, token: str, path: str = "align") -> "Align":
        """Parse an alignment token case-insensitively."""
        if not isinstance(token, str):
            raise ValidationError(
                f"Alignment must be a string, got {type(token).__name__}", path=path
            )
        try:
            return cls(token.lower())
        except ValueError:
            _logger.debug("Rejected alignment token %r", token)
            raise ValidationError(
                f"Unknown alignment: {token!r} (expected left, center or right)",
                path=path,
            ) from None


class ElementKind(str, Enum):
    """Discriminator values of print elements in a receipt description."""

    TEXT = "text"
    ROW = "row"
    LINEFEED = "linefeed"
    DIVIDER = "divider"
    CUT = "cut"


DEFAULT_ALIGNMENT: Final[Align] = Align.LEFT
