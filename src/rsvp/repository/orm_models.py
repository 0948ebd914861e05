from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base
from src.rsvp.dtos import StoredRSVP


class RSVPRecord(Base):
    __tablename__ = TableNames.RSVPS.value

    id: Mapped[str] = mapped_column(String(32), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    attendance: Mapped[str] = mapped_column(String(8), nullable=False)
    diet: Mapped[str | None] = mapped_column(String(255), nullable=True)
    allergies: Mapped[str | None] = mapped_column(Text, nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    submitted_at: Mapped[datetime] = mapped_column(sa.DateTime(timezone=True), nullable=False)

    @classmethod
    def from_dto(cls, rsvp: StoredRSVP) -> "RSVPRecord":
        return cls(
            id=rsvp.id,
            name=rsvp.name,
            email=rsvp.email,
            attendance=rsvp.attendance.value,
            diet=rsvp.diet,
            allergies=rsvp.allergies,
            message=rsvp.message,
            submitted_at=rsvp.submitted_at,
        )

    def to_dto(self) -> StoredRSVP:
        return StoredRSVP.model_validate(
            {
                "id": self.id,
                "name": self.name,
                "email": self.email,
                "attendance": self.attendance,
                "diet": self.diet,
                "allergies": self.allergies,
                "message": self.message,
                "submitted_at": self.submitted_at,
            }
        )

    def __repr__(self) -> str:
        return f"<RSVPRecord {self.id} {self.attendance}>"
