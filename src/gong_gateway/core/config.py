"""
Configuration management for the Gong Gateway
Uses Pydantic Settings for environment variable management
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


DEFAULT_GONG_API_BASE_URL = "https://api.gong.io/v2"


class GongSettings(BaseSettings):
    """Gateway settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Gong API credentials (Settings > API in the Gong admin center)
    gong_access_key: str = Field(default="")
    gong_access_key_secret: str = Field(default="")

    gong_api_base_url: str = Field(default=DEFAULT_GONG_API_BASE_URL)
    # None disables the HTTP timeout entirely
    gong_http_timeout: Optional[float] = Field(default=None)

    log_level: str = Field(default="INFO")

    @property
    def has_credentials(self) -> bool:
        return bool(self.gong_access_key and self.gong_access_key_secret)


@lru_cache()
def get_settings() -> GongSettings:
    """Get cached settings instance"""
    return GongSettings()
