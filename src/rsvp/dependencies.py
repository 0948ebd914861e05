from functools import lru_cache

from src.config.settings import settings
from src.notifications.dispatcher import NotificationDispatcher, build_notification_dispatcher
from src.rsvp.repository.base import RSVPStore
from src.rsvp.repository.json_store import JsonFileRSVPStore


@lru_cache
def get_rsvp_store() -> RSVPStore:
    """Process-wide store, shared so that every request goes through the same lock."""
    if settings.STORE_BACKEND == "sql":
        from src.rsvp.repository.sql_store import SqlRSVPStore

        return SqlRSVPStore()
    return JsonFileRSVPStore(settings.rsvp_data_file)


def get_notification_dispatcher() -> NotificationDispatcher:
    return build_notification_dispatcher(settings)
