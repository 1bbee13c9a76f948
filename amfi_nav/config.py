"""
Configuration settings for the AMFI NAV extractor.

Uses Pydantic Settings to load environment variables for the feed source,
output artifact locations, logging, and report defaults.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AMFI_URL = "https://www.amfiindia.com/spages/NAVAll.txt"


class Settings(BaseSettings):
    # Source feed
    amfi_url: str = Field(DEFAULT_AMFI_URL, alias="AMFI_URL")
    raw_feed_path: Path = Field(Path("/tmp/amfi_nav_raw.txt"), alias="RAW_FEED_PATH")
    fetch_timeout_seconds: float = Field(60.0, alias="FETCH_TIMEOUT_SECONDS")

    # Output artifacts
    output_tsv: Path = Field(Path("amfi_nav_data.tsv"), alias="OUTPUT_TSV")
    output_json: Path = Field(Path("amfi_nav_data.json"), alias="OUTPUT_JSON")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Report defaults
    sample_size: int = Field(5, alias="SAMPLE_SIZE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_AMFI_URL", "Settings", "get_settings"]
