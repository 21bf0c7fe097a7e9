# app/core/config.py
from decimal import Decimal
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    DATABASE_URL: str = "sqlite://db.sqlite3"
    GENERATE_SCHEMAS: bool = True
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Dish API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "http://localhost:3000"

    DISH_MAX_COST_INCREASE_RATIO: Decimal = Decimal("1.2")  # new cost <= old cost * ratio

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS_ORIGINS string to list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


settings = Settings()
