from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]

    ENVIRONMENT: str = "Production"

    # Storage
    STORE_BACKEND: str = "json"  # "json" or "sql"
    rsvp_data_file: Path = Path("data/rsvps.json")
    database_url: str = "sqlite+aiosqlite:///./data/rsvps.db"
    LOG_DB: bool = False
    RUN_MIGRATIONS_ON_STARTUP: bool = False

    # Notifications
    organizer_email: str = ""
    emails_from: str = "rsvp@wedding.example"
    couple_names: str = "The Happy Couple"
    display_timezone: str = "UTC"
    NOTIFY_TIMEOUT_SECONDS: float = 10.0

    # Email (SMTP)
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""

    # Email (Resend) - if set, use Resend API instead of SMTP
    resend_api_key: str = ""

    # Outbound webhook, skipped when empty
    webhook_url: str = ""

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def email_configured(self) -> bool:
        return bool(self.resend_api_key or (self.smtp_user and self.smtp_password))

    def env_check(self) -> dict[str, bool]:
        """Report which secrets are set. Never returns the values themselves."""
        return {
            "hasSmtpUser": bool(self.smtp_user),
            "hasSmtpPassword": bool(self.smtp_password),
            "hasResendApiKey": bool(self.resend_api_key),
            "hasOrganizerEmail": bool(self.organizer_email),
            "hasWebhookUrl": bool(self.webhook_url),
            "emailEnabled": self.email_configured,
        }


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
