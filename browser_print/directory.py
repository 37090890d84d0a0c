"""Printer discovery through the agent's ``available`` and ``default`` endpoints."""

from __future__ import annotations

import logging
from typing import Any, List

from .constants import TEXT_CONTENT_TYPE
from .core import Device, RequestConfig
from .exceptions import (
    BrowserPrintError,
    EmptyResponseError,
    InvalidPrinterFormatError,
    NoDefaultPrinterError,
    NoPrintersAvailableError,
)
from .requester import RetryingRequester
from .store import DeviceStore

LOGGER = logging.getLogger(__name__)

# Only the first six lines carry fields; the seventh must exist as a
# completeness marker.
MIN_DEFAULT_LINES = 7


class PrinterDirectory:
    """Lists the agent's printers and resolves the system default."""

    def __init__(self, requester: RetryingRequester, store: DeviceStore, base_url: str) -> None:
        self.requester = requester
        self.store = store
        self.base_url = base_url

    async def list_available(self) -> List[Any]:
        """Return the agent's printer entries as decoded from JSON.

        Raises:
            NoPrintersAvailableError: If the agent is unreachable, replies
                with malformed data or lists no printers
        """

        try:
            response = await self.requester.send(
                self.base_url + "available", _text_request()
            )
            if response is None:
                raise EmptyResponseError()
        except BrowserPrintError as exc:
            raise NoPrintersAvailableError("network") from exc

        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            raise NoPrintersAvailableError("malformed") from exc

        printers = payload.get("printer") if isinstance(payload, dict) else None
        if not isinstance(printers, list):
            raise NoPrintersAvailableError("malformed")
        if not printers:
            raise NoPrintersAvailableError("empty")

        LOGGER.debug("Agent reported %d printer(s)", len(printers))
        return printers

    async def get_default(self) -> Device:
        """Fetch the agent's default printer and make it the selection.

        Raises:
            InvalidPrinterFormatError: If the reply has fewer than seven lines
            NoDefaultPrinterError: On any other failure
        """

        try:
            response = await self.requester.send(
                self.base_url + "default", _text_request()
            )
            if response is None:
                raise EmptyResponseError()
            device = parse_default_printer(response.text())
            self.store.select(device)
        except InvalidPrinterFormatError:
            raise
        except (BrowserPrintError, ValueError, OSError) as exc:
            raise NoDefaultPrinterError() from exc

        return device


def parse_default_printer(text: str) -> Device:
    """Decode the ``Label: value`` lines of a default-printer reply.

    Raises:
        InvalidPrinterFormatError: If fewer than seven lines are present
        ValueError: If one of the first six lines has no ``:``
    """

    lines = text.split("\n")
    if len(lines) < MIN_DEFAULT_LINES:
        raise InvalidPrinterFormatError()

    name, device_type, connection, uid, provider, manufacturer = (
        _field_value(line) for line in lines[:6]
    )
    return Device(
        name=name,
        device_type=device_type,
        connection=connection,
        uid=uid,
        provider=provider,
        manufacturer=manufacturer,
        version=0,
    )


def _field_value(line: str) -> str:
    _, separator, value = line.partition(":")
    if not separator:
        raise ValueError(f"Malformed printer field: {line!r}")
    return value.strip()


def _text_request() -> RequestConfig:
    return RequestConfig(method="GET", headers={"Content-Type": TEXT_CONTENT_TYPE})
