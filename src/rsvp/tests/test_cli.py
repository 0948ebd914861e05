"""Tests for the organizer CLI."""

import asyncio

import pytest
from typer.testing import CliRunner

import cli
from src.rsvp.tests.inmemory_models import InMemoryRSVPStore, valid_payload
from src.rsvp.validation import validate_submission

runner = CliRunner()


@pytest.fixture
def store(monkeypatch):
    store = InMemoryRSVPStore()
    monkeypatch.setattr(cli, "get_rsvp_store", lambda: store)
    return store


async def _seed(store):
    await store.append(validate_submission(valid_payload(allergies="Peanuts")))
    await store.append(
        validate_submission(
            valid_payload(name="Jan Kowalski", email="jan@example.com", attendance="no")
        )
    )


def test_list_rsvps_empty(store):
    result = runner.invoke(cli.app, ["list-rsvps"])

    assert result.exit_code == 0
    assert "No RSVPs yet." in result.output


def test_list_rsvps_prints_every_guest(store):
    asyncio.run(_seed(store))

    result = runner.invoke(cli.app, ["list-rsvps"])

    assert result.exit_code == 0
    assert "Anna Nowak <anna@example.com>: yes" in result.output
    assert "Allergies: Peanuts" in result.output
    assert "Jan Kowalski <jan@example.com>: no" in result.output


def test_list_rsvps_attending_only(store):
    asyncio.run(_seed(store))

    result = runner.invoke(cli.app, ["list-rsvps", "--attending"])

    assert "Anna Nowak" in result.output
    assert "Jan Kowalski" not in result.output


def test_summary(store):
    asyncio.run(_seed(store))

    result = runner.invoke(cli.app, ["summary"])

    assert result.exit_code == 0
    assert "Attending: 1" in result.output
    assert "Declining: 1" in result.output
    assert "vegetarian: 1" in result.output


def test_storage_error_exits_non_zero(monkeypatch):
    monkeypatch.setattr(cli, "get_rsvp_store", lambda: InMemoryRSVPStore(should_fail=True))

    result = runner.invoke(cli.app, ["summary"])

    assert result.exit_code == 1
    assert "Could not read RSVPs" in result.output


def test_check_config_prints_flags_only():
    result = runner.invoke(cli.app, ["check-config"])

    assert result.exit_code == 0
    assert "emailEnabled:" in result.output
