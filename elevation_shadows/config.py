"""Library configuration utilities."""
from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven defaults for the shared elevation table."""

    model_config = SettingsConfigDict(case_sensitive=False)

    anchor_elevation: float = Field(
        100.0, gt=0, validation_alias=AliasChoices("ELEVATION_ANCHOR", "anchor_elevation")
    )
    preserve_opacity: bool = Field(
        True, validation_alias=AliasChoices("ELEVATION_PRESERVE_OPACITY", "preserve_opacity")
    )


@lru_cache()
def get_settings() -> Settings:
    """Return cached library settings."""

    return Settings()
