"""Selected-printer state mirrored to persistent storage."""

from __future__ import annotations

import json
import logging

from .constants import SELECTED_PRINTER_KEY
from .core import Device, DeviceStorage

LOGGER = logging.getLogger(__name__)


class DeviceStore:
    """Holds the currently selected printer and persists every selection."""

    def __init__(self, storage: DeviceStorage, *, key: str = SELECTED_PRINTER_KEY) -> None:
        self.storage = storage
        self.key = key
        self._device = self._restore()

    def select(self, device: Device) -> None:
        self.storage.save(self.key, json.dumps(device.to_dict()))
        self._device = device
        LOGGER.info("Selected printer %s (uid=%s)", device.name, device.uid)

    def current(self) -> Device:
        return self._device

    def _restore(self) -> Device:
        raw = self.storage.load(self.key)
        if not raw:
            return Device()

        try:
            payload = json.loads(raw)
        except ValueError:
            LOGGER.warning("Discarding unparsable stored printer selection")
            return Device()

        if not isinstance(payload, dict):
            LOGGER.warning("Discarding stored printer selection: expected an object")
            return Device()

        device = Device.from_dict(payload)
        LOGGER.debug("Restored printer selection %s", device.name)
        return device
