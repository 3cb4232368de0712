"""Configuration utilities for environment-based settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATA_DIR = "data"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    """Structured configuration values for the ordering service."""

    data_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        return DEFAULT_PORT
    if 0 < port < 65536:
        return port
    return DEFAULT_PORT


@lru_cache(maxsize=1)
def get_settings(dotenv_path: str | None = None) -> Settings:
    """Return cached settings, loading a ``.env`` file once.

    Values already present in the environment win over the file.
    """
    load_dotenv(dotenv_path=dotenv_path or ".env", override=False)
    return Settings(
        data_dir=Path(os.getenv("TABLEORDER_DATA_DIR", DEFAULT_DATA_DIR)),
        log_level=os.getenv("TABLEORDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        host=os.getenv("TABLEORDER_HOST", DEFAULT_HOST),
        port=_parse_port(os.getenv("TABLEORDER_PORT", str(DEFAULT_PORT))),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
