"""Domain models for printer selection, status and agent exchanges."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# Device attribute -> key used by the agent and in persisted selections.
_DEVICE_KEYS = {
    "name": "name",
    "device_type": "deviceType",
    "connection": "connection",
    "uid": "uid",
    "provider": "provider",
    "manufacturer": "manufacturer",
    "version": "version",
}


@dataclass(slots=True)
class Device:
    """Descriptor of a printer known to the agent.

    Every field is optional so that ``Device()`` represents "nothing
    selected" and serialises as ``{}``.
    """

    name: Optional[str] = None
    device_type: Optional[str] = None
    connection: Optional[str] = None
    uid: Optional[str] = None
    provider: Optional[str] = None
    manufacturer: Optional[str] = None
    version: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_selected(self) -> bool:
        return bool(self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Return the agent's camelCase representation, omitting unset fields.

        Keys the agent sent that this class does not model are echoed back.
        """

        payload: Dict[str, Any] = dict(self.extra)
        for attribute, key in _DEVICE_KEYS.items():
            value = getattr(self, attribute)
            if value is not None:
                payload[key] = value
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Device":
        """Build a device from an agent entry.

        Known fields are coerced to their declared types (a ``version`` that
        is not an integer is dropped); unknown keys are kept in ``extra``.
        """

        values: Dict[str, Any] = {}
        for attribute, key in _DEVICE_KEYS.items():
            value = data.get(key)
            if value is None:
                continue
            if attribute == "version":
                try:
                    values[attribute] = int(value)
                except (TypeError, ValueError):
                    continue
            else:
                values[attribute] = str(value)

        known = set(_DEVICE_KEYS.values())
        extra = {key: value for key, value in data.items() if key not in known}
        return cls(**values, extra=extra)


@dataclass(slots=True)
class StatusReport:
    is_ready_to_print: bool
    errors: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, object]:
        return {"isReadyToPrint": self.is_ready_to_print, "errors": list(self.errors)}


@dataclass(slots=True)
class ConnectionReport:
    is_connected: bool
    message: str

    def as_dict(self) -> Dict[str, object]:
        return {"isConnected": self.is_connected, "message": self.message}


@dataclass(slots=True)
class RequestConfig:
    """Method, headers and optional body of a single agent request."""

    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None


@dataclass(slots=True)
class AgentResponse:
    """Fully read HTTP response returned by a transport."""

    status: int
    body: bytes = b""
    reason: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.text())
