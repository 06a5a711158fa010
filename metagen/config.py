"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Value shipped in sample environments; treated the same as "no key".
PLACEHOLDER_API_KEY = "default-key-for-development"


class Settings(BaseSettings):
    """Runtime settings for the meta generator service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Gemini
    gemini_api_key: str = Field(
        default=PLACEHOLDER_API_KEY,
        description="Google Gemini API key; empty or placeholder disables the AI path",
    )
    gemini_model: str = Field(default="gemini-1.5-flash", description="Gemini model name")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Gemini REST API",
    )
    ai_timeout_seconds: float = Field(default=30.0, description="Timeout for the AI request (seconds)")

    # Page fetching
    fetch_timeout_seconds: float = Field(default=10.0, description="Timeout for the page fetch (seconds)")

    # Server
    environment: str = Field(default="development", description="Deployment label echoed in responses")
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="Bind port")
    log_level: str = Field(default="INFO", description="Root log level")

    @property
    def ai_enabled(self) -> bool:
        """True when a real Gemini key is configured."""
        key = self.gemini_api_key.strip()
        return bool(key) and key != PLACEHOLDER_API_KEY


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
