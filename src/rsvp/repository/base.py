from abc import ABC, abstractmethod
from datetime import UTC, datetime
from uuid import uuid4

from src.rsvp.dtos import RSVPSubmission, StoredRSVP


def stamp_submission(submission: RSVPSubmission, previous: datetime | None = None) -> StoredRSVP:
    """
    Assign the server-side id and submittedAt.

    The timestamp never goes backwards relative to the last stored record, even
    if the wall clock does.
    """
    submitted_at = datetime.now(UTC)
    if previous is not None:
        if previous.tzinfo is None:
            previous = previous.replace(tzinfo=UTC)
        submitted_at = max(submitted_at, previous)

    return StoredRSVP.model_validate(
        {
            **submission.model_dump(),
            "id": uuid4().hex,
            "submitted_at": submitted_at,
        }
    )


class RSVPStore(ABC):
    """Durable, ordered, append-only collection of RSVPs."""

    @abstractmethod
    async def append(self, submission: RSVPSubmission) -> StoredRSVP:
        """
        Durably record a submission and return it with id and submittedAt set.

        Raises:
            StorageError: the record could not be written
        """
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> list[StoredRSVP]:
        """Return every stored RSVP in insertion order."""
        raise NotImplementedError
