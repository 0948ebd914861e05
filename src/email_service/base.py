from abc import ABC, abstractmethod

from src.email_service.templates import EmailTemplates
from src.rsvp.dtos import StoredRSVP


class EmailServiceBase(ABC):
    def __init__(self, couple_names: str = "", timezone: str = "UTC") -> None:
        self.couple_names = couple_names
        self.timezone = timezone

    @abstractmethod
    async def _send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
        reply_to: str | None = None,
    ) -> None:
        pass

    async def send_rsvp_notification(self, to_address: str, rsvp: StoredRSVP) -> None:
        """Tell the organizer about a new RSVP. Replies go to the guest."""
        subject, html_body, text_body = EmailTemplates.render_rsvp_notification(
            rsvp, couple_names=self.couple_names, timezone=self.timezone
        )
        await self._send(
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
            reply_to=rsvp.email,
        )
