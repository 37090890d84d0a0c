"""Adapter modules for external integrations."""

from .agent import AiohttpTransport
from .storage import JsonFileStorage, MemoryStorage

__all__ = [
    "AiohttpTransport",
    "JsonFileStorage",
    "MemoryStorage",
]
