"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
The environment variable names are fixed (DISCORD_BOT_TOKEN, BOT_PREFIX,
LOG_LEVEL, LOG_FILE) and may also be supplied through a .env file.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PREFIX = "!"


class ConfigError(Exception):
    """Raised when the configuration cannot be used to start the bot."""


class BotConfig(BaseModel):
    """
    Immutable bot configuration handed to the router and command handlers.

    Built once at startup by Settings.bot_config() and never mutated.
    """

    token: str = Field(min_length=1, description="Discord bot token")
    prefix: str = Field(default=DEFAULT_PREFIX, description="Command prefix")

    model_config = ConfigDict(frozen=True)


class Settings(BaseSettings):
    """Main application settings."""

    # Bot
    token: str = Field(
        default="",
        validation_alias="DISCORD_BOT_TOKEN",
        description="Discord bot token (required to run the bot)",
    )
    prefix: str = Field(
        default=DEFAULT_PREFIX,
        validation_alias="BOT_PREFIX",
        description="Command prefix; any literal string, no validation",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="LOG_LEVEL", description="Logging level"
    )
    log_file: Path | None = Field(
        default=None, validation_alias="LOG_FILE", description="Log file path"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,  # BOT_PREFIX="" falls back to the default
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def bot_config(self) -> BotConfig:
        """
        Build the immutable bot configuration.

        Raises:
            ConfigError: If DISCORD_BOT_TOKEN is missing or empty
        """
        if not self.token:
            raise ConfigError("DISCORD_BOT_TOKEN environment variable is required")
        return BotConfig(token=self.token, prefix=self.prefix)


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance
    """
    if env_file:
        return Settings(_env_file=env_file)
    return Settings()
