from src.config.settings import Settings, settings
from src.email_service.base import EmailServiceBase
from src.email_service.resend_service import ResendEmailService
from src.email_service.smtp_service import SMTPEmailService
from src.email_service.templates import EmailTemplates


def get_email_service(config: Settings = settings) -> EmailServiceBase | None:
    """Resend takes precedence over SMTP. Without credentials email is disabled."""
    if config.resend_api_key:
        return ResendEmailService(config=config)
    if config.smtp_user and config.smtp_password:
        return SMTPEmailService(config=config)
    return None


__all__ = [
    "EmailServiceBase",
    "EmailTemplates",
    "get_email_service",
]
