"""Tests for SqlRSVPStore against an in-memory SQLite database."""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.models.base import BaseModel
from src.rsvp.repository import orm_models  # noqa: F401
from src.rsvp.repository.sql_store import SqlRSVPStore
from src.rsvp.tests.inmemory_models import valid_payload
from src.rsvp.validation import validate_submission


@pytest.fixture
async def db_session():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def store(db_session):
    return SqlRSVPStore(session_overwrite=db_session)


async def test_empty_table_lists_nothing(store):
    assert await store.list_all() == []


async def test_append_then_list_round_trips_all_fields(store):
    stored = await store.append(
        validate_submission(valid_payload(allergies="Shellfish", message="See you there"))
    )

    [rsvp] = await store.list_all()

    assert rsvp == stored
    assert rsvp.allergies == "Shellfish"
    assert rsvp.submitted_at.tzinfo is not None


async def test_insertion_order_is_preserved(store):
    names = ["Anna Nowak", "Jan Kowalski", "Ewa Zielinska"]
    for name in names:
        await store.append(validate_submission(valid_payload(name=name)))

    assert [rsvp.name for rsvp in await store.list_all()] == names


async def test_concurrent_appends_are_all_stored(store):
    await asyncio.gather(
        *(store.append(validate_submission(valid_payload(name=f"Guest {i}"))) for i in range(10))
    )

    rsvps = await store.list_all()
    assert len(rsvps) == 10
    assert len({rsvp.id for rsvp in rsvps}) == 10
    timestamps = [rsvp.submitted_at for rsvp in rsvps]
    assert timestamps == sorted(timestamps)


@pytest.fixture
async def file_engines(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'rsvps.db'}"
    engines = [create_async_engine(url, connect_args={"timeout": 15}) for _ in range(2)]
    async with engines[0].begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield engines

    for engine in engines:
        await engine.dispose()


async def test_two_workers_on_one_database_keep_submitted_at_ordered(file_engines):
    workers = [
        SqlRSVPStore(session_maker=async_sessionmaker(engine, expire_on_commit=False))
        for engine in file_engines
    ]

    await asyncio.gather(
        *(
            worker.append(validate_submission(valid_payload(name=f"Guest {worker_index}-{i}")))
            for i in range(40)
            for worker_index, worker in enumerate(workers)
        )
    )

    rsvps = await workers[0].list_all()
    assert len(rsvps) == 80
    assert len({rsvp.id for rsvp in rsvps}) == 80
    timestamps = [rsvp.submitted_at for rsvp in rsvps]
    assert timestamps == sorted(timestamps)
    assert await workers[1].list_all() == rsvps
