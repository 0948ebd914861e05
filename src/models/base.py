from sqlalchemy.orm import Mapped, declarative_base, mapped_column

BaseModel = declarative_base()


class Base(BaseModel):
    __abstract__ = True

    # Monotonic surrogate key, also the insertion order of append-only tables
    sequence: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
