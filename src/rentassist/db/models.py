from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from rentassist.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Application(Base):
    __tablename__ = "applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(60), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    dob: Mapped[str] = mapped_column(String(40), nullable=False)
    gender: Mapped[str] = mapped_column(String(60), nullable=False)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    city: Mapped[str] = mapped_column(String(120), nullable=False)
    ssn: Mapped[str] = mapped_column(String(40), nullable=False)
    past_due_rent: Mapped[float | None] = mapped_column(Float, nullable=True)
    applied_before: Mapped[str] = mapped_column(String(20), nullable=False)
    receiving_ss: Mapped[str] = mapped_column(String(20), nullable=False)
    verified_idme: Mapped[str] = mapped_column(String(20), nullable=False)

    mothers_maiden_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mothers_full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    fathers_full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    place_of_birth: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city_of_birth: Mapped[str | None] = mapped_column(String(120), nullable=True)

    dl_front: Mapped[str | None] = mapped_column(Text, nullable=True)
    dl_back: Mapped[str | None] = mapped_column(Text, nullable=True)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False, index=True
    )
