"""Best-effort fan-out of stored RSVPs to the configured notifiers."""

import asyncio
import logging

import sentry_sdk

from src.config.settings import Settings, settings
from src.email_service import get_email_service
from src.notifications.base import Notifier
from src.notifications.email import EmailNotifier
from src.notifications.webhook import WebhookNotifier
from src.rsvp.dtos import StoredRSVP

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    Runs every notifier independently and never raises.

    The RSVP is already durable when dispatch runs, so a failing sink is only
    logged and reported to Sentry. There is no retry.
    """

    def __init__(self, notifiers: list[Notifier], timeout: float = 10.0) -> None:
        self.notifiers = notifiers
        self.timeout = timeout

    async def dispatch(self, rsvp: StoredRSVP) -> dict[str, bool]:
        """Return a map of notifier name to whether its delivery succeeded."""
        if not self.notifiers:
            return {}

        results = await asyncio.gather(
            *(self._deliver(notifier, rsvp) for notifier in self.notifiers)
        )
        return {notifier.name: ok for notifier, ok in zip(self.notifiers, results)}

    async def _deliver(self, notifier: Notifier, rsvp: StoredRSVP) -> bool:
        try:
            async with asyncio.timeout(self.timeout):
                await notifier.notify(rsvp)
        except Exception as e:
            logger.error(f"{notifier.name} notification for RSVP {rsvp.id} failed: {e}")
            sentry_sdk.capture_exception(e)
            return False

        logger.info(f"{notifier.name} notification sent for RSVP {rsvp.id}")
        return True


def build_notification_dispatcher(config: Settings = settings) -> NotificationDispatcher:
    notifiers: list[Notifier] = []

    email_service = get_email_service(config)
    if email_service is not None:
        if config.organizer_email:
            notifiers.append(EmailNotifier(email_service, config.organizer_email))
        else:
            logger.warning("Email credentials set but ORGANIZER_EMAIL is empty, email disabled")

    if config.webhook_url:
        notifiers.append(WebhookNotifier(config.webhook_url, timeout=config.NOTIFY_TIMEOUT_SECONDS))

    return NotificationDispatcher(notifiers, timeout=config.NOTIFY_TIMEOUT_SECONDS)
