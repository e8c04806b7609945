"""
orders_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `ORDERS_`), safe defaults for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="ORDERS_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "orders-api"
    log_level: str = "INFO"
    # None means "follow env": console output in dev, JSON elsewhere.
    log_json: bool | None = None

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # None means "follow env": docs are served everywhere except prod.
    docs_enabled: bool | None = None

    @property
    def json_logs(self) -> bool:
        if self.log_json is not None:
            return self.log_json
        return self.env != "dev"

    @property
    def serve_docs(self) -> bool:
        if self.docs_enabled is not None:
            return self.docs_enabled
        return self.env != "prod"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Storage is in-memory, so there is no database URL here; restarting the process
# discards every order.
