from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator


class Attendance(str, Enum):
    YES = "yes"
    NO = "no"


class RSVPSubmission(BaseModel):
    """A guest's RSVP as accepted from the form, before the store stamps it."""

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    name: str = Field(min_length=2)
    email: EmailStr
    attendance: Attendance
    diet: str | None = None
    allergies: str | None = None
    message: str | None = None

    @field_validator("diet", "allergies", "message", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def drop_diet_when_declining(self) -> "RSVPSubmission":
        if self.attendance == Attendance.NO:
            self.diet = None
        return self

    @property
    def attending(self) -> bool:
        return self.attendance == Attendance.YES


class StoredRSVP(RSVPSubmission):
    """An RSVP after it has been appended to the store."""

    id: str
    submitted_at: datetime = Field(alias="submittedAt")

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class FieldErrorDTO:
    field: str
    code: str
    message: str


@dataclass(frozen=True)
class RSVPSummaryDTO:
    """Head count over the latest submission of every guest."""

    total_submissions: int
    guests: int
    attending: int
    declining: int
    diets: dict[str, int] = field(default_factory=dict)


class InvalidSubmissionError(Exception):
    """Raised when a submission fails validation. Carries every failing field."""

    def __init__(self, errors: list[FieldErrorDTO]) -> None:
        self.errors = errors
        fields = ", ".join(error.field for error in errors)
        super().__init__(f"Invalid RSVP submission: {fields}")

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]


class StorageError(Exception):
    """Raised when the RSVP store cannot be read or written."""
