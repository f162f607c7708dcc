"""Application configuration loaded from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List


@dataclass(frozen=True)
class Settings:
    """Runtime settings derived from environment variables."""

    data_file: str
    cors_origins: List[str]
    log_level: str
    host: str
    port: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings from the environment."""

    cors_origins_raw = os.getenv("CORS_ORIGINS")
    cors_origins = [origin.strip() for origin in cors_origins_raw.split(",") if origin.strip()] if cors_origins_raw else ["*"]

    return Settings(
        data_file=os.getenv("TASKS_DATA_FILE", "data/tasks.json"),
        cors_origins=cors_origins,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "4000")),
    )


__all__ = ["Settings", "get_settings"]
