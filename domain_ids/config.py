"""Library configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"

    # Identifier parsing
    accept_uppercase: bool = True

    # Persistence boundary
    storage_column_length: int = 36

    model_config = {"env_prefix": "DOMAIN_IDS_"}


settings = Settings()
