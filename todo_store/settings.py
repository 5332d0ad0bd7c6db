from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_STORE_NAME = "todos-vanillajs"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class Settings:
    store_name: str
    log_level: str
    host: str
    port: int


def _parse_port(raw_value: str) -> int:
    try:
        port = int(raw_value)
    except ValueError:
        logger.warning("Invalid PORT value '%s'; defaulting to %s", raw_value, DEFAULT_PORT)
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning("PORT %s out of range; defaulting to %s", port, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


@lru_cache
def get_settings() -> Settings:
    store_name = os.getenv("TODO_STORE_NAME", "").strip() or DEFAULT_STORE_NAME
    log_level = os.getenv("TODO_LOG_LEVEL", "INFO").upper()
    host = os.getenv("HOST", "0.0.0.0")
    port = _parse_port(os.getenv("PORT", str(DEFAULT_PORT)))

    return Settings(
        store_name=store_name,
        log_level=log_level,
        host=host,
        port=port,
    )
