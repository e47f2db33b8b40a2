import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def read_secret_file(file_path: str) -> Optional[str]:
    """Read secret from file if it exists."""
    try:
        path = Path(file_path)
        if path.exists():
            return path.read_text(encoding='utf-8').strip()
    except OSError:
        return None
    return None


def get_bot_token() -> Optional[str]:
    """Read the bot token from a secret file (Docker secrets) if one is configured."""
    token_file = os.getenv("TELEGRAM_BOT_TOKEN_FILE")
    if token_file:
        return read_secret_file(token_file)
    return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True, extra="ignore")

    # Telegram
    telegram_bot_token: Optional[str] = Field(
        default_factory=get_bot_token,
        description="Bot API token issued by @BotFather"
    )
    webhook_url: Optional[str] = Field(
        default=None,
        description="Public HTTPS base URL; the webhook is registered at <webhook_url>/bot"
    )
    webhook_secret: Optional[str] = Field(
        default=None,
        description="Secret token Telegram echoes in X-Telegram-Bot-Api-Secret-Token"
    )
    telegram_api_base: str = Field(default="https://api.telegram.org", description="Bot API base URL")
    telegram_timeout: int = Field(default=30, ge=1, le=300, description="Bot API request timeout in seconds")
    telegram_retry_attempts: int = Field(default=3, ge=1, le=10, description="Bot API retry attempts")

    # API
    api_title: str = "Prime Factorization Bot"
    api_version: str = "1.0.0"
    api_description: str = "Telegram bot that factors integers and finds their GCD and LCM"
    factorize_rate_limit: str = Field(default="60/minute", description="Rate limit for /api/v1/factorize")

    # Server
    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=10000, ge=1, le=65535, description="Server port")
    reload: bool = False
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("telegram_bot_token", "webhook_url", "webhook_secret", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("webhook_url")
    @classmethod
    def validate_webhook_url(cls, v):
        if v is None:
            return v
        if not v.startswith("https://"):
            raise ValueError("webhook_url must be an https:// URL")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return level

    @property
    def webhook_endpoint(self) -> Optional[str]:
        if not self.webhook_url:
            return None
        return f"{self.webhook_url}/bot"


@lru_cache()
def get_settings():
    return Settings()
