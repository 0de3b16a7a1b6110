"""
Client Settings
===============

Environment-driven settings for the Web2PDF client using Pydantic Settings.
Values are read from ``WEB2PDF_*`` environment variables or a ``.env`` file.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://web2pdf.dev"


class Web2PdfSettings(BaseSettings):
    """Client settings with environment variable support."""

    # Credentials
    api_id: Optional[str] = Field(default=None, description="Web2PDF API id")
    secret_key: Optional[str] = Field(default=None, description="Web2PDF secret key")

    # Service Configuration
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Web2PDF service base URL")
    request_timeout: Optional[float] = Field(
        default=None, description="Total request timeout in seconds (None disables it)"
    )

    # Runtime Configuration
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Reject non-positive timeouts."""
        if v is not None and v <= 0:
            raise ValueError("Request timeout must be positive")
        return v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="WEB2PDF_"
    )


# Global settings instance - will be initialized when needed
settings: Optional[Web2PdfSettings] = None


def get_settings() -> Web2PdfSettings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Web2PdfSettings()
    return settings


def reload_settings() -> Web2PdfSettings:
    """Reload settings from environment."""
    global settings
    settings = Web2PdfSettings()
    return settings
