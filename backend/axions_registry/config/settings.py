"""
Application Settings using Pydantic Settings
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = Field(default="AxionJS Registry Service")
    APP_VERSION: str = Field(default="1.0.1")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Backend Server
    BACKEND_HOST: str = Field(default="localhost")
    BACKEND_PORT: int = Field(default=8010)

    # Remote registry
    AXIONS_REGISTRY_URL: str = Field(default="http://localhost:3000")
    REGISTRY_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    # Generation defaults
    DEFAULT_STYLE: str = Field(default="new-york")
    DEFAULT_THEME_MODE: Literal["light", "dark", "system"] = Field(default="light")
    DEFAULT_PAGE_TYPE: str = Field(default="dashboard")
    INSTALL_COMMAND: str = Field(default="npx axionjs add")
    PAGE_COMPONENT_LIMIT: int = Field(default=5, ge=1)
    HERO_BLOCK_LIMIT: int = Field(default=3, ge=0)
    SEARCH_RESULT_LIMIT: int = Field(default=10, ge=1)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json")

    # CORS
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:3005"]
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
