"""Signer configuration loading via Pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from l2signer.withdraw.domain import CHAIN_ID_L2

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    chain_id: int = Field(default=CHAIN_ID_L2, alias="L2_CHAIN_ID")
    nonce_source: Literal["timestamp", "uuid"] = Field(default="timestamp", alias="L2_NONCE_SOURCE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("chain_id")
    @classmethod
    def validate_chain_id(cls, value: int) -> int:
        # Prepended to every payload as a single byte
        if not 0 <= value <= 255:
            raise ValueError(f"chain_id must fit in one byte, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
