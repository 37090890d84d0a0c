"""aiohttp transport for the local print agent."""

from __future__ import annotations

import logging
from typing import Optional

import aiohttp

from ..core import AgentResponse, RequestConfig

LOGGER = logging.getLogger(__name__)


class AiohttpTransport:
    """Performs single HTTP exchanges with the agent over aiohttp."""

    def __init__(
        self,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.timeout = timeout

        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def request(self, endpoint: str, config: RequestConfig) -> AgentResponse:
        """Send ``config`` to ``endpoint`` and return the fully read response.

        Raises:
            aiohttp.ClientError: If the connection or exchange fails
            asyncio.TimeoutError: If the configured timeout elapses
        """

        session = await self._ensure_session()
        data = config.body.encode("utf-8") if config.body is not None else None

        options: dict[str, aiohttp.ClientTimeout] = {}
        if self.timeout is not None:
            options["timeout"] = aiohttp.ClientTimeout(total=self.timeout)

        async with session.request(
            config.method,
            endpoint,
            headers=dict(config.headers),
            data=data,
            **options,
        ) as response:
            body = await response.read()
            LOGGER.debug(
                "%s %s -> %d (%d bytes)",
                config.method,
                endpoint,
                response.status,
                len(body),
            )
            return AgentResponse(
                status=response.status,
                body=body,
                reason=response.reason or "",
            )

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session
