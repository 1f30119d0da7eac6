"""SQLAlchemy models for RoomHub.

Models implemented:
- RoomModel
- QuestionModel (many questions per room)

Uses SQLAlchemy 2.0 typing (Mapped, mapped_column) and the declarative Base from `roomhub.database`.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roomhub.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RoomModel(Base):
    __tablename__ = "rooms"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, index=True, default=_new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    # Relationships
    questions: Mapped[List["QuestionModel"]] = relationship("QuestionModel", back_populates="room")

    def __repr__(self) -> str:
        return f"<Room id={self.id} name={self.name}>"


class QuestionModel(Base):
    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, index=True, default=_new_id)
    room_id: Mapped[str] = mapped_column(String(64), ForeignKey("rooms.id"), index=True, nullable=False)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    room = relationship("RoomModel", back_populates="questions")

    def __repr__(self) -> str:
        return f"<Question id={self.id} room_id={self.room_id}>"


__all__ = [
    "RoomModel",
    "QuestionModel",
]
