"""Planet ORM — the single resource entity exposed under /planets.

Invariants:
    - id is an autoincrement integer assigned by the store, never by clients
    - id never exceeds PLANET_ID_MAX
    - created_by/updated_by are non-nullable usernames
    - photo_filename is NULL until a photo upload succeeds

Design Decisions:
    - Timestamps set Python-side: one UTC clock regardless of dialect
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from planet_api.db.base import Base


# Integer maps to int4 on PostgreSQL; larger ids can never name a row
PLANET_ID_MAX = 2**31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Planet(Base):
    __tablename__ = "planets"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    diameter: Mapped[int | None] = mapped_column(Integer, nullable=True)
    moons: Mapped[int | None] = mapped_column(Integer, nullable=True)
    photo_filename: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_by: Mapped[str] = mapped_column(String(255), nullable=False)
