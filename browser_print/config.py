"""Configuration loader for browser-print."""

from __future__ import annotations

from configparser import ConfigParser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from . import constants


@dataclass(slots=True)
class AgentConfig:
    url: str = constants.DEFAULT_AGENT_URL
    retries: int = constants.DEFAULT_RETRIES
    request_timeout_seconds: Optional[float] = None  # None waits indefinitely


@dataclass(slots=True)
class StorageConfig:
    path: Path = constants.DEFAULT_STORAGE_PATH
    key: str = constants.SELECTED_PRINTER_KEY


@dataclass(slots=True)
class LoggingConfig:
    level: str = "INFO"
    path: Optional[Path] = None
    log_network: bool = False


@dataclass(slots=True)
class BrowserPrintConfig:
    agent: AgentConfig = field(default_factory=AgentConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    raw: ConfigParser = field(default_factory=ConfigParser)
    path: Path = constants.DEFAULT_CONFIG_PATH


def _parse_optional_float(value: str) -> Optional[float]:
    if not value or not value.strip():
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if parsed > 0 else None


def load_config(path: Optional[Path] = None) -> BrowserPrintConfig:
    """Load configuration from disk, applying defaults where necessary."""

    config_path = path or constants.DEFAULT_CONFIG_PATH
    parser = ConfigParser()
    parser.read_dict(
        {
            "agent": {
                "url": constants.DEFAULT_AGENT_URL,
                "retries": str(constants.DEFAULT_RETRIES),
                "request_timeout_seconds": "",
            },
            "storage": {
                "path": str(constants.DEFAULT_STORAGE_PATH),
                "key": constants.SELECTED_PRINTER_KEY,
            },
            "logging": {
                "level": "INFO",
                "path": "",
                "log_network": "false",
            },
        }
    )

    if config_path.exists():
        parser.read(config_path)

    try:
        retries_value = parser.getint(
            "agent", "retries", fallback=constants.DEFAULT_RETRIES
        )
    except ValueError:
        retries_value = constants.DEFAULT_RETRIES

    agent = AgentConfig(
        url=parser.get("agent", "url"),
        retries=max(1, retries_value),
        request_timeout_seconds=_parse_optional_float(
            parser.get("agent", "request_timeout_seconds", fallback="")
        ),
    )

    storage = StorageConfig(
        path=Path(
            parser.get("storage", "path", fallback=str(constants.DEFAULT_STORAGE_PATH))
        ).expanduser(),
        key=parser.get("storage", "key", fallback=constants.SELECTED_PRINTER_KEY),
    )

    log_path_value = parser.get("logging", "path", fallback="").strip()
    logging_config = LoggingConfig(
        level=parser.get("logging", "level", fallback="INFO"),
        path=Path(log_path_value).expanduser() if log_path_value else None,
        log_network=parser.getboolean("logging", "log_network", fallback=False),
    )

    return BrowserPrintConfig(
        agent=agent,
        storage=storage,
        logging=logging_config,
        raw=parser,
        path=config_path,
    )


def save_config(config: BrowserPrintConfig) -> None:
    """Persist the current configuration to disk."""

    config_path = config.path
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as stream:
        config.raw.write(stream)
