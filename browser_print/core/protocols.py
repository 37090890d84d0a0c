"""Protocol definitions for the transport and persistence seams."""

from __future__ import annotations

from typing import Optional, Protocol

from .models import AgentResponse, RequestConfig


class Transport(Protocol):
    """Minimal contract for components that carry requests to the agent."""

    async def request(
        self, endpoint: str, config: RequestConfig
    ) -> Optional[AgentResponse]:
        """Perform one HTTP exchange.

        Raises on transport failure. A non-2xx status is returned, not
        raised; returning ``None`` means no response object was produced.
        """
        ...

    async def aclose(self) -> None:
        """Close any underlying resources."""
        ...


class DeviceStorage(Protocol):
    """Key-value store holding the serialised printer selection."""

    def load(self, key: str) -> Optional[str]:
        """Return the stored value, or ``None`` when absent."""
        ...

    def save(self, key: str, value: str) -> None:
        """Durably store ``value`` under ``key``."""
        ...
