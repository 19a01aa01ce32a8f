"""Configuration utilities for environment-based settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


def load_env(dotenv_path: Optional[str] = None) -> None:
    """Load environment variables from a .env file without overriding existing values."""
    path = Path(dotenv_path or ".env")
    load_dotenv(dotenv_path=str(path), override=False)


# Default listen port
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Structured configuration values for the receipt processor service."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: Tuple[str, ...] = ("*",)

    @property
    def allows_any_origin(self) -> bool:
        return "*" in self.cors_origins


def _parse_port(value: str) -> int:
    if not value:
        return DEFAULT_PORT
    try:
        parsed = int(value)
    except ValueError:
        return DEFAULT_PORT
    if 0 < parsed < 65536:
        return parsed
    return DEFAULT_PORT


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def _parse_origins(value: str) -> Tuple[str, ...]:
    origins = tuple(item.strip() for item in value.split(",") if item.strip())
    return origins or ("*",)


@lru_cache(maxsize=1)
def get_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Return cached settings, ensuring environment variables are loaded once."""
    load_env(dotenv_path)
    return Settings(
        host=os.getenv("RECEIPT_HOST", DEFAULT_HOST),
        port=_parse_port(os.getenv("RECEIPT_PORT", "")),
        log_level=_parse_log_level(os.getenv("RECEIPT_LOG_LEVEL", "")),
        cors_origins=_parse_origins(os.getenv("RECEIPT_CORS_ORIGINS", "*")),
    )


__all__ = ["Settings", "get_settings", "load_env"]
