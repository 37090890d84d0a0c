"""Asyncio client for local Browser Print label-printer agents."""

from .client import BrowserPrintClient
from .config import BrowserPrintConfig, load_config, save_config
from .core import ConnectionReport, Device, StatusReport
from .exceptions import (
    BrowserPrintError,
    EmptyResponseError,
    ErrorKind,
    InvalidPrinterFormatError,
    NoDefaultPrinterError,
    NoPrintersAvailableError,
    TransportExhaustedError,
)
from .logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    "BrowserPrintClient",
    "BrowserPrintConfig",
    "BrowserPrintError",
    "ConnectionReport",
    "Device",
    "EmptyResponseError",
    "ErrorKind",
    "InvalidPrinterFormatError",
    "NoDefaultPrinterError",
    "NoPrintersAvailableError",
    "StatusReport",
    "TransportExhaustedError",
    "configure_logging",
    "load_config",
    "save_config",
]
