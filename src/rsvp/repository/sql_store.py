"""RSVP store backed by a SQL table, selected with STORE_BACKEND=sql."""

import asyncio
from datetime import UTC
from functools import partial

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.config import TableNames
from src.config.database import async_session_manager
from src.rsvp.dtos import RSVPSubmission, StorageError, StoredRSVP
from src.rsvp.repository.base import RSVPStore, stamp_submission
from src.rsvp.repository.orm_models import RSVPRecord

# Statements that make the current transaction the only writer of the table
# until it commits. SQLite has no LOCK TABLE, but any write statement takes
# the database's reserved lock, even when it matches no rows.
WRITE_LOCK_STATEMENTS = {
    "sqlite": f"UPDATE {TableNames.RSVPS.value} SET sequence = sequence WHERE 0",
    "postgresql": f"LOCK TABLE {TableNames.RSVPS.value} IN EXCLUSIVE MODE",
}


class SqlRSVPStore(RSVPStore):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        session_maker: async_sessionmaker[AsyncSession] | None = None,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.session_maker = session_maker
        self._lock = asyncio.Lock()

    async def append(self, submission: RSVPSubmission) -> StoredRSVP:
        # The asyncio lock orders appends inside this process; the table lock
        # orders them across workers sharing the database.
        async with self._lock:
            try:
                async with self.async_session_manager(
                    session_overwrite=self.session_overwrite, session_maker=self.session_maker
                ) as session:
                    await self._lock_table(session)
                    previous = await session.scalar(
                        select(RSVPRecord.submitted_at)
                        .order_by(RSVPRecord.sequence.desc())
                        .limit(1)
                    )
                    stored = stamp_submission(submission, previous)
                    session.add(RSVPRecord.from_dto(stored))
                    await session.flush()
            except SQLAlchemyError as e:
                raise StorageError(f"Could not store RSVP: {e}") from e
        return stored

    async def _lock_table(self, session: AsyncSession) -> None:
        statement = WRITE_LOCK_STATEMENTS.get(session.get_bind().dialect.name)
        if statement:
            await session.execute(text(statement))

    async def list_all(self) -> list[StoredRSVP]:
        try:
            async with self.async_session_manager(
                auto_commit=False,
                session_overwrite=self.session_overwrite,
                session_maker=self.session_maker,
            ) as session:
                result = await session.execute(select(RSVPRecord).order_by(RSVPRecord.sequence))
                records = result.scalars().all()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read RSVPs: {e}") from e

        rsvps = []
        for record in records:
            rsvp = record.to_dto()
            if rsvp.submitted_at.tzinfo is None:
                # SQLite drops the offset on the way back
                rsvp.submitted_at = rsvp.submitted_at.replace(tzinfo=UTC)
            rsvps.append(rsvp)
        return rsvps
