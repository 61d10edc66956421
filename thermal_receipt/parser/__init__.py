"""JSON receipt description parsing and field validation."""

from thermal_receipt.parser.receipt_parser import ReceiptParser, parse
from thermal_receipt.parser.validation import (
    BUILTIN_VALIDATORS,
    ObjectValidator,
    ValidationResult,
    Validator,
    one_of,
)

__all__ = [
    "ReceiptParser",
    "parse",
    "BUILTIN_VALIDATORS",
    "ObjectValidator",
    "ValidationResult",
    "Validator",
    "one_of",
]
