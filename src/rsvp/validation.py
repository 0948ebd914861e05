"""Boundary validation for incoming RSVP payloads."""

from typing import Any

from pydantic import ValidationError

from src.rsvp.dtos import FieldErrorDTO, InvalidSubmissionError, RSVPSubmission


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "body"


def validate_submission(payload: Any) -> RSVPSubmission:
    """
    Validate a decoded request body.

    Returns a normalized RSVPSubmission or raises InvalidSubmissionError listing
    every offending field. Never has side effects.
    """
    try:
        return RSVPSubmission.model_validate(payload)
    except ValidationError as e:
        errors = [
            FieldErrorDTO(
                field=_field_name(error["loc"]),
                code=error["type"],
                message=error["msg"],
            )
            for error in e.errors()
        ]
        raise InvalidSubmissionError(errors) from e
