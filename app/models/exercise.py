"""Exercise model - one logged exercise: name, reps, weight, unit and date."""

from __future__ import annotations

import uuid

from sqlalchemy import Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Exercise(Base):
    """A single exercise entry. Every column but id is replaced on update."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    weight: Mapped[int] = mapped_column(Integer, nullable=False)
    unit: Mapped[str] = mapped_column(String(3), nullable=False)  # WeightUnit value
    date: Mapped[str] = mapped_column(String(8), nullable=False)  # MM-DD-YY

    def __repr__(self) -> str:
        return f"<Exercise {self.id} {self.name!r} {self.reps}x{self.weight}{self.unit} {self.date}>"
