from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Writewell Web"
    backend_url: str = "http://localhost:3001"
    proxy_timeout: float = 30.0

    cors_origins: List[str] = ["http://localhost:3000"]

    log_level: str = "INFO"
    log_structured: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
