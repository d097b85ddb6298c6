"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Banana Scoreboard API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Redis
    redis_url: str = "redis://localhost:6379/0"
    redis_socket_timeout: float = Field(default=5.0, gt=0)

    # Leaderboard
    leaderboard_key: str = "banana-leaderboard"
    leaderboard_size: int = Field(default=10, ge=1, le=10)

    # Client (used by scoreboard.client)
    api_base_url: str = Field(
        default="http://localhost:8080",
        validation_alias=AliasChoices("SCOREBOARD_API_URL", "API_BASE_URL"),
    )

    # CORS
    # NoDecode: raw env string goes to _parse_cors_origins unparsed.
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """
        Accept either:
        - JSON array string: '["https://a.com","http://localhost:3000"]'
        - Comma-separated string: "https://a.com,http://localhost:3000"
        - Already-parsed list[str]
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except json.JSONDecodeError:
                    parsed = s.split(",")
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
                return [str(parsed).strip()]
            return [part.strip() for part in s.split(",") if part.strip()]
        return [str(v).strip()] if str(v).strip() else []


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
