"""Unit tests for RSVP payload validation."""

import pytest

from src.rsvp.dtos import Attendance, InvalidSubmissionError
from src.rsvp.tests.inmemory_models import valid_payload
from src.rsvp.validation import validate_submission


def test_valid_payload_is_accepted():
    submission = validate_submission(valid_payload())

    assert submission.name == "Anna Nowak"
    assert submission.email == "anna@example.com"
    assert submission.attendance == Attendance.YES
    assert submission.diet == "vegetarian"
    assert submission.allergies is None
    assert submission.message is None


def test_optional_fields_are_kept_as_given():
    submission = validate_submission(
        valid_payload(allergies="Peanuts", message="Can't wait!", diet="vegan")
    )

    assert submission.allergies == "Peanuts"
    assert submission.message == "Can't wait!"
    assert submission.diet == "vegan"


def test_blank_optional_fields_become_absent():
    submission = validate_submission(valid_payload(diet="", allergies="   ", message=""))

    assert submission.diet is None
    assert submission.allergies is None
    assert submission.message is None


def test_declining_without_diet_is_accepted():
    submission = validate_submission(
        {"name": "Jan Kowalski", "email": "jan@example.com", "attendance": "no"}
    )

    assert submission.attendance == Attendance.NO
    assert submission.diet is None


def test_declining_drops_diet():
    submission = validate_submission(valid_payload(attendance="no", diet="vegan"))

    assert submission.diet is None


def test_name_is_stripped():
    submission = validate_submission(valid_payload(name="  Anna  "))
    assert submission.name == "Anna"


def test_unknown_and_server_fields_are_ignored():
    submission = validate_submission(
        valid_payload(id="client-id", submittedAt="1999-01-01T00:00:00Z", guestCount=3)
    )

    assert "id" not in submission.model_dump()
    assert not hasattr(submission, "submitted_at")


def test_every_invalid_field_is_reported():
    with pytest.raises(InvalidSubmissionError) as exc_info:
        validate_submission({"name": "A", "email": "not-an-email", "attendance": "maybe"})

    assert sorted(exc_info.value.fields) == ["attendance", "email", "name"]
    codes = {error.field: error.code for error in exc_info.value.errors}
    assert codes["name"] == "string_too_short"
    assert codes["attendance"] == "enum"


@pytest.mark.parametrize("missing", ["name", "email", "attendance"])
def test_missing_required_field_is_reported(missing):
    payload = valid_payload()
    del payload[missing]

    with pytest.raises(InvalidSubmissionError) as exc_info:
        validate_submission(payload)

    assert exc_info.value.fields == [missing]
    assert exc_info.value.errors[0].code == "missing"


def test_whitespace_only_name_is_too_short():
    with pytest.raises(InvalidSubmissionError) as exc_info:
        validate_submission(valid_payload(name="  A "))

    assert exc_info.value.fields == ["name"]


def test_wrong_type_is_reported():
    with pytest.raises(InvalidSubmissionError) as exc_info:
        validate_submission(valid_payload(name=42))

    assert exc_info.value.fields == ["name"]
    assert exc_info.value.errors[0].code == "string_type"


@pytest.mark.parametrize("payload", [None, [], "yes", 3])
def test_non_object_body_is_rejected(payload):
    with pytest.raises(InvalidSubmissionError) as exc_info:
        validate_submission(payload)

    assert exc_info.value.fields == ["body"]
