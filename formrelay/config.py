"""Application configuration"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    """Application settings"""

    # Telegram
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""
    telegram_api_url: str = "https://api.telegram.org"

    # Cloudflare Turnstile
    turnstile_secret_key: str = ""
    turnstile_verify_url: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify"

    # Submissions
    submission_template: str = "application"
    # Validation failures have always answered 500; set 400 to report them as client errors
    validation_error_status: int = 500
    client_ip_header: str = "CF-Connecting-IP"

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False

    def missing_settings(self) -> List[str]:
        """Names of the required secrets that are not set"""
        required = {
            "TELEGRAM_BOT_TOKEN": self.telegram_bot_token,
            "TELEGRAM_CHAT_ID": self.telegram_chat_id,
            "TURNSTILE_SECRET_KEY": self.turnstile_secret_key,
        }
        return [name for name, value in required.items() if not value]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
