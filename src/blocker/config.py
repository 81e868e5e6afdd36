"""Process configuration sourced from the environment.

Values come from environment variables (optionally seeded from a ``.env``
file); pydantic coerces and validates them when `Settings` is built.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass

from blocker.service import MAX_BLOB_SIZE

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


@dataclass
class Settings:
    host: str = "0.0.0.0"  # noqa: S104
    port: int = Field(default=8080, ge=1, le=65535)
    db_dir: Path = Field(default_factory=lambda: Path(os.environ.get("PWD", os.getcwd())) / "db")
    cache_size_max: int = Field(default=MAX_BLOB_SIZE, ge=0)
    log_level: str = "info"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return value

    @classmethod
    def from_env(cls, dotenv: bool = True) -> Settings:
        """Build settings from ``HOST``, ``PORT``, ``DB_DIR``, ``CACHE_SIZE_MAX`` and ``LOG_LEVEL``."""
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        env = {
            "host": os.environ.get("HOST"),
            "port": os.environ.get("PORT"),
            "db_dir": os.environ.get("DB_DIR"),
            "cache_size_max": os.environ.get("CACHE_SIZE_MAX"),
            "log_level": os.environ.get("LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in env.items() if v})
