"""Application configuration using Pydantic Settings"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # RAWG catalog
    rawg_api_key: str = Field(default="", description="RAWG API key")
    rawg_base_url: str = Field(
        default="https://api.rawg.io/api", description="RAWG API base URL"
    )

    # Twitch app credentials (client-credentials grant)
    twitch_client_id: str = Field(default="", description="Twitch application Client ID")
    twitch_client_secret: str = Field(
        default="", description="Twitch application Client Secret"
    )
    twitch_helix_url: str = Field(
        default="https://api.twitch.tv/helix", description="Twitch Helix API base URL"
    )
    twitch_oauth_url: str = Field(
        default="https://id.twitch.tv/oauth2", description="Twitch OAuth base URL"
    )

    # Upstream timeouts (seconds)
    http_timeout: float = Field(default=10.0, description="Per-request HTTP timeout")
    live_metrics_timeout: float = Field(
        default=5.0, description="Upper bound for one live viewer resolution"
    )

    # Server URLs
    frontend_url: str = Field(default="http://localhost:3000", description="Frontend URL for CORS")

    # Environment
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3001, description="Server port")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(f"Invalid log level '{v}', defaulting to INFO")
            return "INFO"
        return v_upper

    @property
    def cors_origins(self) -> list[str]:
        """Get CORS allowed origins"""
        return [self.frontend_url]

    @property
    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
