"""
config.py — Application configuration through environment variables.
All variables carry the EXPRTREE_ prefix.
"""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "WARNING"

    # Evaluator
    # checked   — out-of-range result is a diagnostic + no value
    # wrap      — two's-complement wraparound to 64 bits
    # unbounded — plain Python integers
    overflow: Literal["checked", "wrap", "unbounded"] = "checked"
    # fault — `x % 0` raises ZeroDivisionError; none — diagnostic + no value
    modulo_by_zero: Literal["fault", "none"] = "fault"

    # CLI
    default_sample: str = "reference"

    # App
    app_title: str = "exprtree"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="EXPRTREE_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
