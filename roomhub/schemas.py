"""Pydantic schemas for RoomHub API responses.

Field names stay snake_case in Python; the wire format uses camelCase
through serialization aliases.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ----------------------------- Rooms ---------------------------------
class RoomSummary(BaseModel):
    id: str
    name: str
    created_at: datetime = Field(..., serialization_alias="createdAt")
    question_count: int = Field(..., ge=0, serialization_alias="questionCount")

    model_config = {"from_attributes": True}


__all__ = ["RoomSummary"]
