"""Constants used across the browser-print package."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "browser-print"
DEFAULT_CONFIG_FILENAME = f"{APP_NAME}.cfg"
DEFAULT_CONFIG_PATH = Path.home() / f".{APP_NAME}" / DEFAULT_CONFIG_FILENAME
DEFAULT_STORAGE_PATH = Path.home() / f".{APP_NAME}" / "selection.json"

DEFAULT_AGENT_URL = "http://127.0.0.1:9100/"
DEFAULT_RETRIES = 3

SELECTED_PRINTER_KEY = "selectedPrinter"

TEXT_CONTENT_TYPE = "text/plain;charset=UTF-8"
JSON_CONTENT_TYPE = "application/json"

# ZPL host status query; the agent answers with the printer's error flags.
STATUS_QUERY_COMMAND = "~HQES"
LABEL_TEMPLATE = "^XA^FO50,50^ADN,36,20^FD{data}^FS^XZ"
