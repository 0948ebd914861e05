from abc import ABC, abstractmethod

from src.rsvp.dtos import StoredRSVP


class DispatchError(Exception):
    """Raised by a notifier when a delivery attempt fails."""


class Notifier(ABC):
    """One outbound sink for stored RSVPs."""

    name: str = "notifier"

    @abstractmethod
    async def notify(self, rsvp: StoredRSVP) -> None:
        """
        Deliver a single RSVP.

        Raises:
            DispatchError: delivery failed
        """
        raise NotImplementedError
