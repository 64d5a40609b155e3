"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Allow extra fields from .env files that aren't defined here
    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = "Edge Request Router"
    environment: str = Field(default="local", validation_alias="SYSTEM_ENVIRONMENT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # Groq settings
    groq_api_key: str = Field(default="", validation_alias="GROQ_API_KEY")
    groq_base_url: str = Field(
        default="https://api.groq.com/openai/v1", validation_alias="GROQ_BASE_URL"
    )

    # Language the assistant answers in for chat and summaries
    response_language: str = Field(default="Chinese", validation_alias="RESPONSE_LANGUAGE")

    # Logging settings
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    enable_request_logging: bool = Field(default=True, validation_alias="ENABLE_REQUEST_LOGGING")

    @property
    def has_provider_key(self) -> bool:
        """Check whether a Groq API key is configured."""
        return bool(self.groq_api_key and self.groq_api_key.strip())


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
