import httpx

from src.email_service.base import EmailServiceBase
from src.notifications.base import DispatchError, Notifier
from src.rsvp.dtos import StoredRSVP


class EmailNotifier(Notifier):
    """Emails the organizer's fixed address about every RSVP."""

    name = "email"

    def __init__(self, email_service: EmailServiceBase, organizer_email: str) -> None:
        self.email_service = email_service
        self.organizer_email = organizer_email

    async def notify(self, rsvp: StoredRSVP) -> None:
        try:
            await self.email_service.send_rsvp_notification(
                to_address=self.organizer_email,
                rsvp=rsvp,
            )
        except (OSError, httpx.HTTPError) as e:
            # smtplib.SMTPException is an OSError subclass
            raise DispatchError(f"Failed to send email: {e}") from e
