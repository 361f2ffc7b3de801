# Settings: Deezer OAuth endpoints, overridable from the environment.
# Created: 2026-10-19

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTH_URL = "https://connect.deezer.com/oauth/auth.php"
DEFAULT_TOKEN_URL = "https://connect.deezer.com/oauth/access_token.php"


class Settings(BaseSettings):
    """Endpoint configuration.

    Values can be set via DEEZER_AUTH_URL / DEEZER_TOKEN_URL or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEZER_",
        env_file=".env",
        extra="ignore",
    )

    auth_url: str = Field(default=DEFAULT_AUTH_URL, min_length=1)
    token_url: str = Field(default=DEFAULT_TOKEN_URL, min_length=1)


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings instance."""
    return Settings()
