"""Configuration management for the salary engine."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from salary_engine.calculators.rate_table import (
    RateTable,
    default_rate_table,
    load_rate_table,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    engine_version: str
    host: str
    port: int
    debug: bool
    log_level: str
    rate_table_path: str | None = None

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            engine_version=os.getenv("ENGINE_VERSION", "1.0.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            rate_table_path=os.getenv("RATE_TABLE_PATH") or None,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_rate_table() -> RateTable:
    """Get the process-wide rate table.

    Loaded once from RATE_TABLE_PATH when set, otherwise the built-in
    statutory table.
    """
    path = get_settings().rate_table_path
    if path is None:
        return default_rate_table()

    table = load_rate_table(path)
    logger.info("Loaded rate table %r from %s", table.name, path)
    return table
