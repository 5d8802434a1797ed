"""
Application settings using Pydantic.

This module provides runtime configuration with environment variable support.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Settings can be overridden via environment variables prefixed with RETROCHAT_
    For example: RETROCHAT_INITIAL_MODE=playful
    """

    model_config = SettingsConfigDict(
        env_prefix="RETROCHAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow other env vars without error
    )

    # Conversation
    initial_mode: str = Field(
        default="normal",
        description="Conversation mode at session start",
        pattern="^(normal|concise|technical|playful)$",
    )

    entropy_seed: Optional[int] = Field(
        default=None,
        description="Seed for the generic-response entropy source (None = unseeded)",
        ge=0,
    )

    # Interface
    show_welcome: bool = Field(
        default=True,
        description="Print the welcome banner when the REPL starts",
    )

    # Runtime
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level when debug is off",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level


# Global settings instance (can be overridden for testing)
settings = Settings()
