"""Printer status and connection checks built on the ``~HQES`` query."""

from __future__ import annotations

import logging
import re
from typing import Optional

from .channel import CommandChannel
from .constants import STATUS_QUERY_COMMAND
from .core import ConnectionReport, StatusReport
from .store import DeviceStore

LOGGER = logging.getLogger(__name__)

GENERAL_ERROR = "General Error"

STATUS_CODES = {
    "1": "Paper Out",
    "2": "Printhead Issue",
    "3": "Printer Paused",
    "4": "Low Ink/Toner",
    "5": "Paper Jam",
    "6": GENERAL_ERROR,
}

_NON_CODE_CHARACTERS = re.compile(r"[^0-9\s]")


def parse_status_reply(reply: Optional[str]) -> StatusReport:
    """Translate a raw status reply into a :class:`StatusReport`.

    Replies that are empty or mention an error or a missing printer are
    reported as a general error without looking at individual codes.
    Otherwise every space-separated numeric token found in the table is
    reported in order; anything else is ignored.
    """

    if not reply or "ERROR" in reply or "no printer" in reply.lower():
        return StatusReport(is_ready_to_print=False, errors=[GENERAL_ERROR])

    tokens = _NON_CODE_CHARACTERS.sub("", reply).strip().split(" ")
    errors = [STATUS_CODES[token] for token in tokens if token in STATUS_CODES]
    return StatusReport(is_ready_to_print=not errors, errors=errors)


class StatusInterpreter:
    """Queries the selected printer and reports readiness and connectivity.

    Neither check raises; failures are folded into the returned report.
    """

    def __init__(self, channel: CommandChannel, store: DeviceStore) -> None:
        self.channel = channel
        self.store = store

    async def check_status(self) -> StatusReport:
        try:
            reply = await self._query()
        except Exception as exc:
            LOGGER.warning("Status query failed: %s", exc)
            return StatusReport(is_ready_to_print=False, errors=[GENERAL_ERROR])

        report = parse_status_reply(reply)
        if not report.is_ready_to_print:
            LOGGER.info("Printer not ready: %s", ", ".join(report.errors))
        return report

    async def check_connection(self) -> ConnectionReport:
        if not self.store.current().is_selected:
            return ConnectionReport(is_connected=False, message="No printer connected.")

        try:
            reply = await self._query()
        except Exception as exc:
            LOGGER.warning("Connection check failed: %s", exc)
            return ConnectionReport(is_connected=False, message=f"Connection error: {exc}")

        if not reply or "ERROR" in reply:
            return ConnectionReport(is_connected=False, message="Printer is not responding")

        return ConnectionReport(is_connected=True, message="Printer is connected")

    async def _query(self) -> str:
        await self.channel.write(STATUS_QUERY_COMMAND)
        return await self.channel.read()
