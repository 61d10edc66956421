"""
Typed exceptions for the receipt pipeline.

Every error carries a machine-distinguishable ``kind`` code and a
human-readable message, so the invocation boundary can hand a single error
value back to the caller.

Иерархия:
    ReceiptError (базовое)
    ├── ValidationError
    ├── LayoutError
    ├── RenderError
    ├── NotConnectedError
    └── PrintError

Example:
    >>> from thermal_receipt.errors import ReceiptError
    >>> try:
    ...     encode_description(payload)
    ... except ReceiptError as e:
    ...     logger.error("Receipt failed: %s", e)
    ...     print(e.kind)
"""

from __future__ import annotations

from typing import Any, Dict, Final, Optional

__all__: list[str] = [
    "ReceiptError",
    "ValidationError",
    "LayoutError",
    "RenderError",
    "NotConnectedError",
    "PrintError",
    "ERROR_KINDS",
]


class ReceiptError(Exception):
    """
    Base class for all pipeline errors.

    Attributes:
        kind: Stable error code (e.g. ``"PARSE_ERROR"``).
        message: Human-readable description.
        context: Extra debugging details.
    """

    kind: str = "RECEIPT_ERROR"

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        parts = [self.__class__.__name__, ": ", self.message]
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"kind={self.kind!r}, "
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )


class ValidationError(ReceiptError, ValueError):
    """
    Invalid receipt description.

    Raised by the parser and by model construction, always before any layout
    work begins. ``path`` points at the offending field, for example
    ``elements[2].columns[0].width``.

    Example:
        >>> parse('{"config": {"charsPerLine": 0}, "elements": []}')
        ValidationError: charsPerLine: must be > 0, got 0 [path=config.charsPerLine]
    """

    kind = "PARSE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, context=context)
        self.path = path

    def __str__(self) -> str:
        text = super().__str__()
        if self.path:
            text += f" [path={self.path}]"
        return text


class LayoutError(ReceiptError):
    """Element that the layout engine cannot place."""

    kind = "LAYOUT_ERROR"


class RenderError(ReceiptError):
    """Layout line that the renderer cannot map onto printer commands."""

    kind = "RENDER_ERROR"


class NotConnectedError(ReceiptError):
    """Write attempted while no transport is connected."""

    kind = "NOT_CONNECTED"


class PrintError(ReceiptError):
    """Transport failed while delivering encoded bytes."""

    kind = "PRINT_ERROR"


ERROR_KINDS: Final[tuple[str, ...]] = (
    ReceiptError.kind,
    ValidationError.kind,
    LayoutError.kind,
    RenderError.kind,
    NotConnectedError.kind,
    PrintError.kind,
)
