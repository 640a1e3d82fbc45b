from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Writewell API"

    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.7
    openai_analyze_temperature: float = 0.3
    openai_rewrite_max_tokens: int = 250
    openai_timeout: float = 60.0

    database_url: str = "sqlite:///./writewell.db"

    cors_origins: List[str] = ["http://localhost:3000"]

    log_level: str = "INFO"
    log_structured: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
