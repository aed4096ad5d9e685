"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - log_level is always one of CRITICAL, ERROR, WARNING, INFO, DEBUG
    - Console format is "json" or "text"; log files are always JSON lines

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - PORT stays a bare env var (no prefix) so container platforms can set it directly
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Names uvicorn also accepts (lower-cased) for its own log_level
_SERVER_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Observability
    service_name: str = "calculator-microservice"
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_dir: Path = Path("logs")
    combined_log_file: str = "combined.log"
    error_log_file: str = "error.log"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = logging.getLevelName(str(v).strip().upper())
        # aliases (WARN, FATAL) resolve to their canonical name
        if isinstance(level, int):
            level = logging.getLevelName(level)
        if level not in _SERVER_LOG_LEVELS:
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @property
    def combined_log_path(self) -> Path:
        return self.log_dir / self.combined_log_file

    @property
    def error_log_path(self) -> Path:
        return self.log_dir / self.error_log_file


@lru_cache
def get_settings() -> Settings:
    return Settings()
