"""Raw write/read exchange with the selected printer."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from .constants import JSON_CONTENT_TYPE, LABEL_TEMPLATE
from .core import RequestConfig
from .exceptions import EmptyResponseError
from .requester import RetryingRequester
from .store import DeviceStore

LOGGER = logging.getLogger(__name__)


class CommandChannel:
    """Sends payloads to, and reads replies from, the current device."""

    def __init__(self, requester: RetryingRequester, store: DeviceStore, base_url: str) -> None:
        self.requester = requester
        self.store = store
        self.base_url = base_url

    async def write(self, data: str) -> None:
        """Send ``data`` to the printer; the agent's reply body is ignored."""

        LOGGER.debug("Writing %d character(s) to %s", len(data), self.store.current().name)
        await self.requester.send(
            self.base_url + "write",
            self._json_request({"device": self.store.current().to_dict(), "data": data}),
        )

    async def read(self) -> str:
        """Return whatever the printer has sent back since the last write.

        Raises:
            EmptyResponseError: If the agent produced no response
            TransportExhaustedError: If every attempt failed
        """

        response = await self.requester.send(
            self.base_url + "read",
            self._json_request({"device": self.store.current().to_dict()}),
        )
        if response is None:
            raise EmptyResponseError()
        return response.text()

    async def print(self, text: str) -> None:
        await self.write(text)

    async def print_label(self, label_data: str) -> None:
        await self.write(LABEL_TEMPLATE.format(data=label_data))

    @staticmethod
    def _json_request(payload: Dict[str, Any]) -> RequestConfig:
        return RequestConfig(
            method="POST",
            headers={"Content-Type": JSON_CONTENT_TYPE},
            body=json.dumps(payload),
        )
