# osrsnav/config.py
"""Client configuration with sensible defaults for a local nav service."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings, overridable via environment variables."""

    # Nav service
    NAV_URL: str = "http://localhost:8000"
    REQUEST_TIMEOUT_S: float | None = None  # None blocks until the transport gives up

    # Snapshot
    ITEM_MERGE: Literal["overwrite", "sum"] = "overwrite"

    # CLI
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="OSRSNAV_", env_file=".env", extra="ignore")


settings = Settings()
