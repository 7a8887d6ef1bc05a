from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(override=False)


DEFAULT_OBO_PATH = "blueberry.obo"


class Settings(BaseModel):
    """Runtime configuration for the ontology API."""

    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "dev"))
    obo_path: Path = Field(default_factory=lambda: Path(os.getenv("OBO_PATH", DEFAULT_OBO_PATH)))
    cors_origins: List[str] = Field(
        default_factory=lambda: os.getenv("CORS_ORIGINS", "*"), validate_default=True
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"), validate_default=True)
    host: str = Field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "5001")))

    model_config = {
        "frozen": True,
    }

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> List[str]:
        if value is None:
            return ["*"]
        if isinstance(value, str):
            if not value.strip():
                return ["*"]
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return list(value)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL '{value}'")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance for FastAPI dependency injection."""

    return Settings()


__all__ = ["DEFAULT_OBO_PATH", "Settings", "get_settings"]
