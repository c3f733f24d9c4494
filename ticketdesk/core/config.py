# ticketdesk/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Ticket Desk"
    APP_DESC: str = "In-memory support ticket tracker"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = Field(default="INFO")

    # how the view renders created_at
    DATE_FORMAT: str = "%d/%m/%Y %H:%M"

    # CORS origins, comma separated
    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
