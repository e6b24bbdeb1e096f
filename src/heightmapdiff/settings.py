"""Runtime settings for heightmap-diff."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    log_level: str = DEFAULT_LOG_LEVEL
    # 0 runs the diff as a single pass; N > 0 evaluates bands of N rows.
    chunk_rows: int = 0

    model_config = SettingsConfigDict(
        env_prefix="HEIGHTMAPDIFF_", env_file=".env", extra="ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value):
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            logger.warning(f"Unknown log level {value!r}, using {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return level


settings = Settings()
