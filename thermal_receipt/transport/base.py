"""
Транспортный интерфейс: граница между конвейером и принтером.

Transport interface for delivering encoded bytes to a printer. The pipeline
produces bytes and never talks to a device; a caller composes pipeline output
with a transport. Concrete network, serial, USB or Bluetooth transports live
outside this package and only have to satisfy ``PrinterTransport``.

The protocol is ``@runtime_checkable`` so callers can check any object with
``isinstance(obj, PrinterTransport)``.

Example:
    >>> transport = CompositeTransport([network, bluetooth])
    >>> transport.connect()  # first transport that connects wins
    >>> transport.write(encode_description(payload))
    >>> transport.close()
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from thermal_receipt.errors import NotConnectedError

logger = logging.getLogger(__name__)

__all__ = ["PrinterTransport", "CompositeTransport"]


@runtime_checkable
class PrinterTransport(Protocol):
    """
    Протокол транспорта принтера.

    Methods:
        connect: Open the connection. Raises ConnectionError on failure.
        write: Send raw ESC/POS bytes. Raises OSError on failure.
        close: Close the connection; safe to call when not connected.
        is_connected: Whether ``write`` can currently be called.
    """

    def connect(self) -> None: ...

    def write(self, data: bytes) -> None: ...

    def close(self) -> None: ...

    def is_connected(self) -> bool: ...


class CompositeTransport:
    """
    Tries several transports in order and uses the first that connects.

    Lets a caller fall back (e.g. network, then Bluetooth) without changing
    the code that writes receipts.
    """

    def __init__(self, transports: Sequence[PrinterTransport]) -> None:
        if not transports:
            raise ValueError("CompositeTransport needs at least one transport")
        self._transports: List[PrinterTransport] = list(transports)
        self._active: Optional[PrinterTransport] = None

    @property
    def active(self) -> Optional[PrinterTransport]:
        return self._active

    def connect(self) -> None:
        if self.is_connected():
            logger.debug("Already connected via %s", type(self._active).__name__)
            return
        if self._active is not None:
            # stale transport that dropped its connection
            self.close()

        failures: List[str] = []
        for transport in self._transports:
            try:
                transport.connect()
            except (ConnectionError, OSError) as exc:
                name = type(transport).__name__
                logger.warning("Transport %s failed to connect: %s", name, exc)
                failures.append(f"{name}: {exc}")
                continue
            self._active = transport
            logger.info("Connected via %s", type(transport).__name__)
            return
        raise ConnectionError("All transports failed to connect: " + "; ".join(failures))

    def write(self, data: bytes) -> None:
        if self._active is None:
            raise NotConnectedError("Not connected. Call connect() first.")
        self._active.write(data)

    def close(self) -> None:
        if self._active is not None:
            self._active.close()
            self._active = None

    def is_connected(self) -> bool:
        return self._active is not None and self._active.is_connected()
