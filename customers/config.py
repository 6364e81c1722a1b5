from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------
    # Storage
    # -------------------------
    storage_file: Path = Path("customers.json")

    # -------------------------
    # Server
    # -------------------------
    host: str = "127.0.0.1"
    port: int = 8000

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CUSTOMERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings."""
    return Settings()
