"""Printer transport interface and composite fallback transport."""

from thermal_receipt.transport.base import CompositeTransport, PrinterTransport

__all__ = ["CompositeTransport", "PrinterTransport"]
