"""Error types raised by the browser-print client."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Category of a client failure."""

    TRANSPORT_EXHAUSTED = "transport_exhausted"
    """Every request attempt failed."""

    EMPTY_RESPONSE = "empty_response"
    """A request completed without producing a response object."""

    NO_PRINTERS_AVAILABLE = "no_printers_available"
    """Printer listing failed or the agent reported no printers."""

    INVALID_PRINTER_FORMAT = "invalid_printer_format"
    """The default-printer reply had too few lines."""

    NO_DEFAULT_PRINTER = "no_default_printer"
    """Any other default-printer lookup failure."""


class BrowserPrintError(RuntimeError):
    """Base exception for all client failures."""

    kind: ErrorKind


class TransportExhaustedError(BrowserPrintError):
    """Raised when all retry attempts for a request failed."""

    kind = ErrorKind.TRANSPORT_EXHAUSTED


class EmptyResponseError(BrowserPrintError):
    """Raised when a request produced no response."""

    kind = ErrorKind.EMPTY_RESPONSE

    def __init__(self, message: str = "Response is undefined") -> None:
        super().__init__(message)


class NoPrintersAvailableError(BrowserPrintError):
    """Raised when the agent lists no printers or cannot be reached.

    The message is identical for every cause; ``reason`` tells them apart
    (``"network"``, ``"malformed"`` or ``"empty"``).
    """

    kind = ErrorKind.NO_PRINTERS_AVAILABLE

    def __init__(self, reason: Optional[str] = None) -> None:
        super().__init__("No printers available or network error")
        self.reason = reason


class InvalidPrinterFormatError(BrowserPrintError):
    """Raised when the default-printer reply is incomplete."""

    kind = ErrorKind.INVALID_PRINTER_FORMAT

    def __init__(self) -> None:
        super().__init__("Invalid printer data format")


class NoDefaultPrinterError(BrowserPrintError):
    """Raised when the default printer cannot be determined."""

    kind = ErrorKind.NO_DEFAULT_PRINTER

    def __init__(self) -> None:
        super().__init__("No default printer found")
