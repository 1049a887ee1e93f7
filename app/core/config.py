from enum import Enum
from functools import lru_cache
from os import getenv

from pydantic_settings import BaseSettings, SettingsConfigDict


class UnknownFieldPolicy(str, Enum):
    """What to do with input keys a request schema does not declare."""

    REJECT = "reject"
    IGNORE = "ignore"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # API settings
    PROJECT_NAME: str = "User Requests API"
    API_V1_STR: str = "/api"

    # CORS settings, comma separated
    CORS_ORIGINS: str = getenv("CORS_ORIGINS", "")

    # Request validation settings
    UNKNOWN_FIELD_POLICY: UnknownFieldPolicy = UnknownFieldPolicy.REJECT

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Cache and return settings instance
    """
    return Settings()
