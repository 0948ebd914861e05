import logging
from typing import Protocol

import httpx

from src.email_service.base import EmailServiceBase

logger = logging.getLogger(__name__)

RESEND_EMAILS_URL = "https://api.resend.com/emails"


class ResendEmailConfig(Protocol):
    resend_api_key: str
    emails_from: str
    couple_names: str
    display_timezone: str
    NOTIFY_TIMEOUT_SECONDS: float


class ResendEmailService(EmailServiceBase):
    def __init__(
        self,
        config: ResendEmailConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        super().__init__(couple_names=config.couple_names, timezone=config.display_timezone)
        self._config = config
        self._http_client_class = http_client_class

    async def _send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
        reply_to: str | None = None,
    ) -> None:
        """Send email via the Resend HTTP API."""
        payload = {
            "from": self._config.emails_from,
            "to": [to_address],
            "subject": subject,
            "html": html_body,
            "text": text_body,
        }
        if reply_to:
            payload["reply_to"] = reply_to

        async with self._http_client_class(timeout=self._config.NOTIFY_TIMEOUT_SECONDS) as client:
            response = await client.post(
                RESEND_EMAILS_URL,
                headers={
                    "Authorization": f"Bearer {self._config.resend_api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
            )
            response.raise_for_status()

        logger.info(f"Sent email via Resend to {to_address} (status {response.status_code})")
