"""Lightweight configuration for the bonsai wire layer."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Wire encoding settings, overridable through ``BONSAI_WIRE_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="BONSAI_WIRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    wire_indent: int | None = Field(
        default=None,
        ge=0,
        description="JSON indent for encoded messages; compact when unset",
    )
    strict_decoding: bool = Field(
        default=True,
        description="Reject received values of the wrong JSON type instead of coercing them",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
