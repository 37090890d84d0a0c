"""Bounded-attempt request wrapper shared by every agent call."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_RETRIES
from .core import AgentResponse, RequestConfig, Transport
from .exceptions import TransportExhaustedError

LOGGER = logging.getLogger(__name__)


class HTTPStatusError(RuntimeError):
    """Raised internally when the agent answers with a non-2xx status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"HTTP error! Status: {status}")
        self.status = status


@dataclass(slots=True)
class AttemptResult:
    """Outcome of one attempt: either a response or the failure."""

    response: Optional[AgentResponse] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RetryingRequester:
    """Issues agent requests, retrying immediately up to ``max_attempts`` times."""

    def __init__(self, transport: Transport, *, max_attempts: int = DEFAULT_RETRIES) -> None:
        _validate_attempts(max_attempts)
        self.transport = transport
        self.max_attempts = max_attempts

    async def send(
        self,
        endpoint: str,
        config: RequestConfig,
        max_attempts: Optional[int] = None,
    ) -> Optional[AgentResponse]:
        """Send a request, returning the first successful response.

        Returns ``None`` when the transport produced no response object.

        Raises:
            TransportExhaustedError: If every attempt failed
            ValueError: If ``max_attempts`` is below 1
        """

        attempts = self.max_attempts if max_attempts is None else max_attempts
        _validate_attempts(attempts)

        result = AttemptResult()
        for attempt in range(1, attempts + 1):
            result = await self._attempt(endpoint, config)
            if result.ok:
                return result.response

            if attempt < attempts:
                LOGGER.debug(
                    "%s %s attempt %d/%d failed: %s",
                    config.method,
                    endpoint,
                    attempt,
                    attempts,
                    result.error,
                )

        LOGGER.warning(
            "%s %s failed after %d attempt(s): %s",
            config.method,
            endpoint,
            attempts,
            result.error,
        )
        message = str(result.error) if result.error is not None else ""
        raise TransportExhaustedError(message or "Unknown error") from result.error

    async def _attempt(self, endpoint: str, config: RequestConfig) -> AttemptResult:
        try:
            response = await self.transport.request(endpoint, config)
        except Exception as exc:
            return AttemptResult(error=exc)

        if response is not None and not response.ok:
            return AttemptResult(response=response, error=HTTPStatusError(response.status))

        return AttemptResult(response=response)


def _validate_attempts(value: int) -> None:
    if value < 1:
        raise ValueError(f"max_attempts must be at least 1, got {value}")
