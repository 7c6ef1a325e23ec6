"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-4o-mini"
    food_source_base_url: str = "https://www.fatsecret.com.br"
    food_source_search_path: str = "/calorias-nutrição/search"
    http_timeout_seconds: float = 15
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
