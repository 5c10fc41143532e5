"""
Configuration for the datagrid service.

Values come from ``DATAGRID_*`` environment variables or a local ``.env``.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DATAGRID_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "datagrid"

    # Logging
    log_level: str = "info"
    log_json: bool = False

    # Synthetic dataset
    records_per_entity: int = Field(default=50, gt=0)
    faker_locale: str = "en_US"
    faker_seed: Optional[int] = None

    # Generate both datasets at startup instead of on the first listing
    preload_on_startup: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
