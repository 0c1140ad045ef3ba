from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic import ConfigDict, field_validator


class Settings(BaseModel):
    log_dir: str = Field(default_factory=lambda: os.getenv("REVERT_CODES_LOG_DIR", "logs"))
    log_level: str = Field(default_factory=lambda: os.getenv("REVERT_CODES_LOG_LEVEL", "INFO"))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        upper = (value or "INFO").upper()
        if not isinstance(logging.getLevelName(upper), int):
            raise ValueError(f"REVERT_CODES_LOG_LEVEL must be a logging level name, got {upper}")
        return upper

    @property
    def log_level_number(self) -> int:
        return int(logging.getLevelName(self.log_level))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
