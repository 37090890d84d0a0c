"""Core primitives for browser-print."""

from .models import (
    AgentResponse,
    ConnectionReport,
    Device,
    RequestConfig,
    StatusReport,
)
from .protocols import DeviceStorage, Transport

__all__ = [
    "AgentResponse",
    "ConnectionReport",
    "Device",
    "DeviceStorage",
    "RequestConfig",
    "StatusReport",
    "Transport",
]
