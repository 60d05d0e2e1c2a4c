# app/core/config.py
# Settings da aplicação (lidas do ambiente / .env)

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    APP_NAME: str = "Catalog API"
    APP_VERSION: str = "1.0.0"

    DATABASE_URL: str = "sqlite:///./catalog.db"
    DB_ECHO: bool = False

    # Base pública onde as imagens do catálogo são servidas
    CATALOG_BASE_URL: str = "http://localhost:5106"
    CATALOG_SEED_ON_STARTUP: bool = False

    CORS_ORIGIN_REGEX: str = r".*"


settings = Settings()
