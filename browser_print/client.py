"""High-level client wiring discovery, selection and printing together.

Usage::

    from browser_print import BrowserPrintClient

    async with BrowserPrintClient() as client:
        printer = await client.get_default_printer()
        status = await client.check_printer_status()
        if status.is_ready_to_print:
            await client.print_label("Hello")
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, List, Optional, Type

import aiohttp

from . import constants
from .adapters import AiohttpTransport, JsonFileStorage
from .channel import CommandChannel
from .config import BrowserPrintConfig
from .core import ConnectionReport, Device, DeviceStorage, StatusReport, Transport
from .directory import PrinterDirectory
from .requester import RetryingRequester
from .status import StatusInterpreter
from .store import DeviceStore

LOGGER = logging.getLogger(__name__)


class BrowserPrintClient:
    """Client for a local Browser Print agent."""

    def __init__(
        self,
        *,
        base_url: str = constants.DEFAULT_AGENT_URL,
        storage: Optional[DeviceStorage] = None,
        transport: Optional[Transport] = None,
        retries: int = constants.DEFAULT_RETRIES,
        storage_key: str = constants.SELECTED_PRINTER_KEY,
    ) -> None:
        """
        Initialize client.

        Args:
            base_url: Agent base URL; endpoint names are appended verbatim
            storage: Where the selected printer is persisted (defaults to a
                JSON file in the user's home directory)
            transport: HTTP transport (defaults to an aiohttp transport)
            retries: Attempts per request
            storage_key: Key the selection is stored under
        """
        self.base_url = base_url

        self._owns_transport = transport is None
        self.transport: Transport = transport or AiohttpTransport()

        self.requester = RetryingRequester(self.transport, max_attempts=retries)
        self.store = DeviceStore(
            storage if storage is not None else JsonFileStorage(constants.DEFAULT_STORAGE_PATH),
            key=storage_key,
        )
        self.directory = PrinterDirectory(self.requester, self.store, base_url)
        self.channel = CommandChannel(self.requester, self.store, base_url)
        self.status = StatusInterpreter(self.channel, self.store)

    @classmethod
    def from_config(
        cls,
        config: BrowserPrintConfig,
        *,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> "BrowserPrintClient":
        """Build a client from loaded configuration."""

        transport = AiohttpTransport(
            session=session, timeout=config.agent.request_timeout_seconds
        )
        client = cls(
            base_url=config.agent.url,
            storage=JsonFileStorage(config.storage.path),
            transport=transport,
            retries=config.agent.retries,
            storage_key=config.storage.key,
        )
        client._owns_transport = True
        return client

    async def __aenter__(self) -> "BrowserPrintClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_transport:
            await self.transport.aclose()

    # =========================================================================
    # Printers
    # =========================================================================

    async def get_available_printers(self) -> List[Any]:
        """List the printers the agent can see."""
        return await self.directory.list_available()

    async def get_default_printer(self) -> Device:
        """Fetch the default printer and select it."""
        return await self.directory.get_default()

    def set_printer(self, device: Device) -> None:
        self.store.select(device)

    def get_printer(self) -> Device:
        return self.store.current()

    # =========================================================================
    # Status
    # =========================================================================

    async def check_printer_status(self) -> StatusReport:
        return await self.status.check_status()

    async def check_connection(self) -> ConnectionReport:
        return await self.status.check_connection()

    # =========================================================================
    # Printing
    # =========================================================================

    async def write(self, data: str) -> None:
        await self.channel.write(data)

    async def read(self) -> str:
        return await self.channel.read()

    async def print(self, text: str) -> None:
        """Send raw printer commands as-is."""
        await self.channel.print(text)

    async def print_label(self, label_data: str) -> None:
        """Print ``label_data`` as a single text field on a ZPL label."""
        await self.channel.print_label(label_data)
